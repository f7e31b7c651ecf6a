"""check_maintenance tool -- score the maintenance health of a package directory."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

from mcp.server.fastmcp import Context

from pkg_health.errors import PkgHealthError
from pkg_health.maintenance.analyzer import analyze_package
from pkg_health.maintenance.scoring import age_suggestion, score_maintenance
from pkg_health.models import AnalysisCounts, Maintenance, Severity
from pkg_health.tools._helpers import get_context


async def check_maintenance(
    ctx: Context,
    path: str = ".",
    age_days: int = 0,
    analysis_errors: int = 0,
    analysis_warnings: int = 0,
    analysis_hints: int = 0,
    is_internal: bool | None = None,
) -> dict[str, object]:
    """Inspect an unpacked package and compute its maintenance score.

    Looks for a changelog, readme, example and analyzer configuration, checks
    the version maturity and the ``pubspec.yaml`` metadata (homepage and
    documentation reachability, SDK constraint, description, dependency
    constraints), and folds every finding into a score.

    Args:
        path: Root directory of the unpacked package. Defaults to ".".
        age_days: Days since the analyzed version was published.
        analysis_errors: Errors reported by your static-analysis run.
        analysis_warnings: Warnings reported by your static-analysis run.
        analysis_hints: Hints/lints reported by your static-analysis run.
        is_internal: Whether the package is published by the repository
            itself. Defaults to the PKG_HEALTH_INTERNAL_PACKAGE setting.

    Returns:
        Dict with: the maintenance signals, suggestions (sorted errors first),
        the age suggestion if any, score in [0.0, 1.0] and a summary.
    """
    try:
        app = get_context(ctx)
        internal = app.settings.is_internal_package if is_internal is None else is_internal
        counts = AnalysisCounts(
            errors=analysis_errors,
            warnings=analysis_warnings,
            hints=analysis_hints,
        )
        root = Path(path).resolve()
        maintenance = await analyze_package(
            root,
            url_checker=app.url_checker,
            analysis=counts,
            is_internal=internal,
        )
        age = timedelta(days=max(0, age_days))
        score = score_maintenance(maintenance, age)
        aged = age_suggestion(age)

        return {
            "success": True,
            "path": str(root),
            **maintenance.to_dict(),
            "age_suggestion": aged.to_dict() if aged else None,
            "score": round(score, 4),
            "summary": _build_summary(maintenance, score),
        }

    except PkgHealthError as exc:
        return {"success": False, "error": str(exc)}
    except Exception as exc:
        await ctx.error(f"Unexpected error in check_maintenance: {exc}")
        return {"success": False, "error": f"Internal error: {type(exc).__name__}"}


def _build_summary(maintenance: Maintenance, score: float) -> str:
    """Build a human-readable summary string for LLM consumption."""
    by_severity = {severity: 0 for severity in Severity}
    for suggestion in maintenance.suggestions:
        by_severity[suggestion.severity] += 1

    parts: list[str] = [f"Maintenance score {score * 100:.1f}/100."]
    if not maintenance.suggestions:
        parts.append("No suggestions -- the package is well maintained.")
    else:
        parts.append(
            f"{len(maintenance.suggestions)} suggestions: "
            f"{by_severity[Severity.ERROR]} errors, "
            f"{by_severity[Severity.WARNING]} warnings, "
            f"{by_severity[Severity.HINT]} hints."
        )
    return " ".join(parts)
