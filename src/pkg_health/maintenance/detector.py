"""Maintenance detector -- turn a package tree into a Maintenance result.

Probes run concurrently; each check is then a pure function from the probed
signals to a list of Suggestions. The lists are concatenated in a fixed order
and stable-sorted by severity once, so completion order never leaks into the
result.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from pkg_health.maintenance.lint_config import load_analysis_options
from pkg_health.maintenance.listing import list_files
from pkg_health.maintenance.penalties import analysis_suggestions, counts_of, sort_suggestions
from pkg_health.maintenance.prober import (
    ANALYSIS_OPTIONS_FILE_NAMES,
    ANALYSIS_OPTIONS_PROBE,
    CHANGELOG_FILE_NAMES,
    CURRENT_ANALYSIS_OPTIONS_FILE_NAME,
    DOCUMENT_PROBE,
    EXAMPLE_PROBE,
    README_FILE_NAMES,
    ArtifactProber,
    example_dir_exists,
    example_file_candidates,
)
from pkg_health.maintenance.version import parse_version
from pkg_health.models import (
    AnalysisCounts,
    Maintenance,
    Penalty,
    Suggestion,
    SuggestionCode,
)

logger = logging.getLogger(__name__)

CHANGELOG_MISSING_PENALTY = Penalty(fraction=2000)
README_MISSING_PENALTY = Penalty(fraction=500)
OLD_ANALYSIS_OPTIONS_PENALTY = Penalty(fraction=10)
WEAK_MODE_PENALTY = Penalty(fraction=50)
EXPERIMENTAL_VERSION_PENALTY = Penalty(amount=10)
PRE_RELEASE_VERSION_PENALTY = Penalty(fraction=200)


# ─── Public API ──────────────────────────────────────────────


async def detect_maintenance(
    pkg_dir: str | Path,
    version: str,
    analysis: Sequence[Suggestion] | AnalysisCounts = (),
    *,
    package_name: str,
    files: Sequence[str] | None = None,
    extra_suggestions: Sequence[Suggestion] = (),
) -> Maintenance:
    """Run every maintenance check over one package version.

    Args:
        pkg_dir: Root of the unpacked package.
        version: The package version (semantic-versioning syntax).
        analysis: Suggestions (or bare counts) reported by the external
            static-analysis run. They are summarized, not copied.
        package_name: Name of the package, used for example file candidates.
        files: Precomputed relative file listing; listed from pkg_dir if omitted.
        extra_suggestions: Findings of sibling detectors, appended after the
            core checks and before the final sort.

    Returns:
        An immutable Maintenance with signals and sorted suggestions.

    Raises:
        InvalidVersionError: If version is not a semantic version.
        ScanError: If the package tree cannot be listed or read.
    """
    info = parse_version(version)
    if files is None:
        files = await list_files(pkg_dir)
    prober = ArtifactProber(pkg_dir, files)

    (
        changelog_exists,
        readme_exists,
        example_exists,
        analysis_options_exists,
        (analysis_options_name, lint_result),
    ) = await asyncio.gather(
        prober.exists(CHANGELOG_FILE_NAMES, DOCUMENT_PROBE),
        prober.exists(README_FILE_NAMES, DOCUMENT_PROBE),
        prober.exists(example_file_candidates(package_name), EXAMPLE_PROBE),
        prober.exists(ANALYSIS_OPTIONS_FILE_NAMES, ANALYSIS_OPTIONS_PROBE),
        load_analysis_options(prober),
    )

    if not analysis_options_exists:
        analysis_options_name = None
    counts = counts_of(analysis)
    signals = _Signals(
        package_name=package_name,
        changelog_exists=changelog_exists,
        readme_exists=readme_exists,
        example_exists=example_exists,
        example_dir_exists=example_dir_exists(prober.files),
        analysis_options_name=analysis_options_name,
        old_analysis_options=(
            analysis_options_exists and not prober.contains(CURRENT_ANALYSIS_OPTIONS_FILE_NAME)
        ),
        strong_mode_enabled=analysis_options_exists and lint_result.strong_mode_enabled,
        is_experimental_version=info.is_experimental,
        is_pre_release_version=info.is_pre_release,
        counts=counts,
    )
    logger.debug("Maintenance signals for %s %s: %s", package_name, version, signals)

    suggestions: list[Suggestion] = []
    if analysis_options_exists:
        suggestions.extend(lint_result.suggestions)
    for check in _CHECKS:
        suggestions.extend(check(signals))
    suggestions.extend(extra_suggestions)

    return Maintenance(
        missing_changelog=not changelog_exists,
        missing_readme=not readme_exists,
        missing_example=not example_exists,
        missing_analysis_options=not analysis_options_exists,
        old_analysis_options=signals.old_analysis_options,
        strong_mode_enabled=signals.strong_mode_enabled,
        is_experimental_version=info.is_experimental,
        is_pre_release_version=info.is_pre_release,
        error_count=counts.errors,
        warning_count=counts.warnings,
        hint_count=counts.hints,
        suggestions=sort_suggestions(suggestions),
    )


# ─── Probed state ────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class _Signals:
    package_name: str
    changelog_exists: bool
    readme_exists: bool
    example_exists: bool
    example_dir_exists: bool
    analysis_options_name: str | None
    old_analysis_options: bool
    strong_mode_enabled: bool
    is_experimental_version: bool
    is_pre_release_version: bool
    counts: AnalysisCounts


# ─── Checks ──────────────────────────────────────────────────


def _check_changelog(signals: _Signals) -> list[Suggestion]:
    if signals.changelog_exists:
        return []
    return [
        Suggestion.warning(
            SuggestionCode.CHANGELOG_MISSING,
            "Maintain `CHANGELOG.md`.",
            "Changelog entries help clients to follow the progress in your code.",
            penalty=CHANGELOG_MISSING_PENALTY,
        )
    ]


def _check_readme(signals: _Signals) -> list[Suggestion]:
    if signals.readme_exists:
        return []
    return [
        Suggestion.warning(
            SuggestionCode.README_MISSING,
            "Maintain `README.md`.",
            "Readme should inform others about your project, what it does, "
            "and how they can use it.",
            penalty=README_MISSING_PENALTY,
        )
    ]


def _check_example(signals: _Signals) -> list[Suggestion]:
    if signals.example_exists:
        return []
    name = signals.package_name
    if signals.example_dir_exists:
        description = (
            "None of the files in your `example/` directory matches a known example "
            "pattern. Common file name patterns include: `main.dart`, `example.dart` "
            f"or you could also use `{name}.dart`. Packages with multiple examples "
            "should use `example/readme.md`."
        )
    else:
        description = (
            "Create a short demo in the `example/` directory to show how to use this "
            "package. Common file name patterns include: `main.dart`, `example.dart` "
            f"or you could also use `{name}.dart`."
        )
    return [Suggestion.hint(SuggestionCode.EXAMPLE_MISSING, "Maintain an example.", description)]


def _check_old_analysis_options(signals: _Signals) -> list[Suggestion]:
    if not signals.old_analysis_options:
        return []
    return [
        Suggestion.hint(
            SuggestionCode.ANALYSIS_OPTIONS_RENAME_REQUIRED,
            "Use `analysis_options.yaml`.",
            "Rename old `.analysis_options` file to `analysis_options.yaml`.",
            file=signals.analysis_options_name,
            penalty=OLD_ANALYSIS_OPTIONS_PENALTY,
        )
    ]


def _check_strong_mode(signals: _Signals) -> list[Suggestion]:
    if signals.strong_mode_enabled:
        return []
    name = signals.analysis_options_name
    if name is None:
        description = (
            "Create `analysis_options.yaml` and enable strong mode analysis:\n\n"
            "```\nanalyzer:\n  strong-mode: true\n```\n"
        )
    else:
        description = (
            f"Strong mode analysis is not enabled in `{name}`. Enable it:\n\n"
            "```\nanalyzer:\n  strong-mode: true\n```\n"
        )
    return [
        Suggestion.hint(
            SuggestionCode.ANALYSIS_OPTIONS_WEAK_MODE,
            "Enable strong mode analysis.",
            description,
            file=name,
            penalty=WEAK_MODE_PENALTY,
        )
    ]


def _check_version(signals: _Signals) -> list[Suggestion]:
    suggestions: list[Suggestion] = []
    if signals.is_experimental_version:
        suggestions.append(
            Suggestion.hint(
                SuggestionCode.PACKAGE_VERSION_PRE_V1,
                "Package is pre-v1 release.",
                "While there is nothing inherently wrong with versions of `0.*.*`, it "
                "usually means that the author is still experimenting with the general "
                "direction of the API.",
                penalty=EXPERIMENTAL_VERSION_PENALTY,
            )
        )
    if signals.is_pre_release_version:
        suggestions.append(
            Suggestion.hint(
                SuggestionCode.PACKAGE_VERSION_PRE_RELEASE,
                "Package is pre-release.",
                "Pre-release versions should be used with caution, their API may change "
                "in breaking ways.",
                penalty=PRE_RELEASE_VERSION_PENALTY,
            )
        )
    return suggestions


def _check_analysis(signals: _Signals) -> list[Suggestion]:
    return analysis_suggestions(signals.counts)


_CHECKS: tuple[Callable[[_Signals], list[Suggestion]], ...] = (
    _check_changelog,
    _check_readme,
    _check_example,
    _check_old_analysis_options,
    _check_strong_mode,
    _check_version,
    _check_analysis,
)
