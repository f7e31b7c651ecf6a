"""Penalty folding and suggestion ordering shared by every detector."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pkg_health.models import (
    MAX_FRACTION,
    AnalysisCounts,
    Penalty,
    Suggestion,
    SuggestionCode,
)

# Per-issue weights for the external analysis counts (parts-per-10000)
ERROR_FRACTION = 200
WARNING_FRACTION = 40
HINT_FRACTION = 10


def apply_penalties(base: float, penalties: Iterable[Penalty | None]) -> float:
    """Fold penalties into base and clamp the result to ``[0, base]``.

    Fractions multiply the running score; amounts (points out of 100) are
    summed and subtracted once, scaled to base. Adding a penalty can never
    raise the result.
    """
    multiplier = 1.0
    points = 0
    for penalty in penalties:
        if penalty is None:
            continue
        multiplier *= 1.0 - penalty.fraction / MAX_FRACTION
        points += penalty.amount
    score = base * multiplier - base * points / 100.0
    return max(0.0, min(base, score))


def sort_suggestions(suggestions: Iterable[Suggestion]) -> tuple[Suggestion, ...]:
    """Stable sort by severity: errors, then warnings, then hints."""
    return tuple(sorted(suggestions, key=lambda s: s.severity.rank))


def analysis_suggestions(counts: AnalysisCounts) -> list[Suggestion]:
    """Summarize the external analysis issue counts as weighted warnings."""
    suggestions: list[Suggestion] = []

    if counts.errors + counts.warnings > 0:
        suggestions.append(
            Suggestion.warning(
                SuggestionCode.ANALYSIS_ISSUES,
                "Fix analysis issues.",
                f"Static analysis reported {_pluralize(counts.errors, 'error')} and "
                f"{_pluralize(counts.warnings, 'warning')}.",
                penalty=Penalty(
                    fraction=_capped(
                        counts.errors * ERROR_FRACTION + counts.warnings * WARNING_FRACTION
                    )
                ),
            )
        )

    if counts.hints > 0:
        suggestions.append(
            Suggestion.warning(
                SuggestionCode.ANALYSIS_HINTS,
                "Fix lints.",
                f"Static analysis reported {_pluralize(counts.hints, 'hint')}.",
                penalty=Penalty(fraction=_capped(counts.hints * HINT_FRACTION)),
            )
        )

    return suggestions


def counts_of(analysis: Sequence[Suggestion] | AnalysisCounts) -> AnalysisCounts:
    if isinstance(analysis, AnalysisCounts):
        return analysis
    return AnalysisCounts.from_suggestions(analysis)


def _capped(fraction: int) -> int:
    return min(MAX_FRACTION, fraction)


def _pluralize(count: int, noun: str) -> str:
    return f"1 {noun}" if count == 1 else f"{count} {noun}s"
