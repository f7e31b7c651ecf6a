"""Compute the maintenance score from a Maintenance result and the package age."""

from __future__ import annotations

from datetime import timedelta

from pkg_health.maintenance.penalties import apply_penalties
from pkg_health.models import MAX_FRACTION, Maintenance, Penalty, Suggestion, SuggestionCode

SCORE_CEILING = 1.0

_YEAR = timedelta(days=365)
_TWO_YEARS = _YEAR * 2


def age_suggestion(age: timedelta | None) -> Suggestion | None:
    """Describe the age decay of a package version, if any applies.

    Past two years the version is obsolete and the penalty is total. Between
    one and two years the penalty grows linearly with the days past the first
    year, reaching the full penalty at exactly two years.
    """
    age = _normalize_age(age)

    if age > _TWO_YEARS:
        return Suggestion.warning(
            SuggestionCode.PACKAGE_VERSION_OBSOLETE,
            "Package is too old.",
            "The package was released more than two years ago.",
            penalty=Penalty(fraction=MAX_FRACTION),
        )

    if age > _YEAR:
        weeks = age.days // 7
        days_over_a_year = age.days - _YEAR.days
        fraction = round(days_over_a_year * MAX_FRACTION / _YEAR.days)
        return Suggestion.hint(
            SuggestionCode.PACKAGE_VERSION_OLD,
            "Package is getting outdated.",
            f"The package was released {weeks} weeks ago.",
            penalty=Penalty(fraction=fraction),
        )

    return None


def score_maintenance(maintenance: Maintenance | None, age: timedelta | None = None) -> float:
    """Return the maintenance score in ``[0.0, 1.0]``.

    A version older than two years always scores zero. Otherwise every
    suggestion penalty and the age decay are folded into the ceiling.
    """
    age = _normalize_age(age)
    if age > _TWO_YEARS:
        return 0.0

    penalties = [s.penalty for s in maintenance.suggestions] if maintenance else []
    aged = age_suggestion(age)
    if aged is not None:
        penalties.append(aged.penalty)
    return apply_penalties(SCORE_CEILING, penalties)


def _normalize_age(age: timedelta | None) -> timedelta:
    if age is None or age < timedelta(0):
        return timedelta(0)
    return age
