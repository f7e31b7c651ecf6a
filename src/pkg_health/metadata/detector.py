"""Metadata checks -- homepage, documentation, SDK constraint, description, dependencies."""

from __future__ import annotations

import asyncio

from pkg_health.metadata.base import UrlCheckerPort
from pkg_health.models import (
    PackageMetadata,
    Penalty,
    Suggestion,
    SuggestionCode,
    UrlStatus,
)

DESCRIPTION_MIN_LENGTH = 60
DESCRIPTION_MAX_LENGTH = 180


async def detect_metadata_suggestions(
    metadata: PackageMetadata,
    url_checker: UrlCheckerPort,
    *,
    is_internal: bool = False,
) -> list[Suggestion]:
    """Check the package metadata and return the resulting suggestions."""
    has_documentation = bool(metadata.documentation and metadata.documentation.strip())
    homepage_status, documentation_status = await asyncio.gather(
        url_checker.check_status(metadata.homepage, is_internal_package=is_internal),
        _documentation_status(metadata, url_checker, is_internal, has_documentation),
    )

    suggestions: list[Suggestion] = []
    suggestions.extend(_homepage_suggestions(metadata, homepage_status))
    suggestions.extend(_documentation_suggestions(metadata, documentation_status))
    suggestions.extend(_sdk_suggestions(metadata))
    suggestions.extend(_description_suggestions(metadata))
    suggestions.extend(_dependency_suggestions(metadata))
    return suggestions


async def _documentation_status(
    metadata: PackageMetadata,
    url_checker: UrlCheckerPort,
    is_internal: bool,
    has_documentation: bool,
) -> UrlStatus | None:
    if not has_documentation:
        return None
    return await url_checker.check_status(metadata.documentation, is_internal_package=is_internal)


def _homepage_suggestions(metadata: PackageMetadata, status: UrlStatus) -> list[Suggestion]:
    if status in (UrlStatus.INVALID, UrlStatus.INTERNAL):
        return [
            Suggestion.warning(
                SuggestionCode.PUBSPEC_HOMEPAGE_IS_NOT_HELPFUL,
                "Homepage is not helpful.",
                "Update the `homepage` property: create a website about the package "
                "or use the source repository URL.",
                file="pubspec.yaml",
                penalty=Penalty(fraction=1000),
            )
        ]
    if status is UrlStatus.MISSING:
        return [
            Suggestion.warning(
                SuggestionCode.PUBSPEC_HOMEPAGE_DOES_NOT_EXISTS,
                "Homepage does not exist.",
                f"We were unable to access `{metadata.homepage}` at the time of the analysis.",
                file="pubspec.yaml",
                penalty=Penalty(fraction=2000),
            )
        ]
    return []


def _documentation_suggestions(
    metadata: PackageMetadata,
    status: UrlStatus | None,
) -> list[Suggestion]:
    if status is UrlStatus.INTERNAL:
        return [
            Suggestion.warning(
                SuggestionCode.PUBSPEC_DOCUMENTATION_IS_NOT_HELPFUL,
                "Documentation URL is not helpful.",
                "Update the `documentation` property: create a website about the package "
                "or remove it.",
                file="pubspec.yaml",
                penalty=Penalty(fraction=1000),
            )
        ]
    if status is UrlStatus.MISSING:
        return [
            Suggestion.warning(
                SuggestionCode.PUBSPEC_DOCUMENTATION_DOES_NOT_EXISTS,
                "Documentation URL does not exist.",
                f"We were unable to access `{metadata.documentation}` at the time of the analysis.",
                file="pubspec.yaml",
                penalty=Penalty(fraction=1000),
            )
        ]
    return []


def _sdk_suggestions(metadata: PackageMetadata) -> list[Suggestion]:
    if metadata.has_sdk_constraint:
        return []
    return [
        Suggestion.error(
            SuggestionCode.PUBSPEC_SDK_MISSING,
            "Add SDK constraint in `pubspec.yaml`.",
            "Set the `environment.sdk` version range the package supports, "
            "e.g. `sdk: '>=2.0.0 <3.0.0'`.",
            file="pubspec.yaml",
            penalty=Penalty(fraction=5000),
        )
    ]


def _description_suggestions(metadata: PackageMetadata) -> list[Suggestion]:
    description = (metadata.description or "").strip()
    if not description:
        return [
            Suggestion.warning(
                SuggestionCode.PUBSPEC_DESCRIPTION_TOO_SHORT,
                "Add `description` in `pubspec.yaml`.",
                "Description is critical to giving users a quick insight into the features "
                "of the package and why it is relevant to their query. "
                f"Ideal length is between {DESCRIPTION_MIN_LENGTH} and "
                f"{DESCRIPTION_MAX_LENGTH} characters.",
                file="pubspec.yaml",
                penalty=Penalty(fraction=2000),
            )
        ]
    if len(description) < DESCRIPTION_MIN_LENGTH:
        return [
            Suggestion.hint(
                SuggestionCode.PUBSPEC_DESCRIPTION_TOO_SHORT,
                "The description is too short.",
                "Add more detail about the package, what it does and what is its target "
                f"use case. Try to write at least {DESCRIPTION_MIN_LENGTH} characters.",
                file="pubspec.yaml",
                penalty=Penalty(fraction=2000),
            )
        ]
    if len(description) > DESCRIPTION_MAX_LENGTH:
        return [
            Suggestion.hint(
                SuggestionCode.PUBSPEC_DESCRIPTION_TOO_LONG,
                "The description is too long.",
                "Search engines will display only the first part of the description. "
                f"Try to keep it under {DESCRIPTION_MAX_LENGTH} characters.",
                file="pubspec.yaml",
                penalty=Penalty(fraction=1000),
            )
        ]
    return []


def _dependency_suggestions(metadata: PackageMetadata) -> list[Suggestion]:
    names = metadata.unconstrained_dependencies
    if not names:
        return []
    count = len(names)
    pluralized = "1 dependency" if count == 1 else f"{count} dependencies"
    listed = ", ".join(f"`{name}`" for name in names)
    return [
        Suggestion.warning(
            SuggestionCode.PUBSPEC_DEPENDENCIES_UNCONSTRAINED,
            "Use constrained dependencies.",
            f"The `pubspec.yaml` contains {pluralized} without version constraints. "
            f"Specify version ranges for the following dependencies: {listed}.",
            file="pubspec.yaml",
            penalty=Penalty(fraction=2000),
        )
    ]
