"""Tests for pubspec loading and metadata checks (metadata/)."""

from __future__ import annotations

from pathlib import Path

import pytest

from pkg_health.errors import MetadataError
from pkg_health.metadata.detector import detect_metadata_suggestions
from pkg_health.metadata.pubspec import load_package_metadata, parse_pubspec
from pkg_health.models import PackageMetadata, Severity, SuggestionCode, UrlStatus

GOOD_DESCRIPTION = (
    "A composable widget toolkit with theming, layout helpers and accessibility support."
)

PUBSPEC = f"""\
name: widget
version: 1.2.0
description: {GOOD_DESCRIPTION}
homepage: https://github.com/example/widget
environment:
  sdk: '>=2.12.0 <3.0.0'
dependencies:
  path: ^1.8.0
  meta:
    version: ^1.3.0
  local_thing:
    path: ../local_thing
"""


def _metadata(**overrides: object) -> PackageMetadata:
    values: dict[str, object] = {
        "name": "widget",
        "version": "1.2.0",
        "description": GOOD_DESCRIPTION,
        "homepage": "https://github.com/example/widget",
        "sdk_constraint": ">=2.12.0 <3.0.0",
        "dependencies": {"path": "^1.8.0"},
    }
    values.update(overrides)
    return PackageMetadata(**values)  # type: ignore[arg-type]


class TestParsePubspec:
    def test_parses_fields(self):
        metadata = parse_pubspec(PUBSPEC)
        assert metadata.name == "widget"
        assert metadata.version == "1.2.0"
        assert metadata.homepage == "https://github.com/example/widget"
        assert metadata.documentation is None
        assert metadata.has_sdk_constraint is True
        assert metadata.unconstrained_dependencies == []

    def test_unconstrained_dependencies(self):
        metadata = parse_pubspec(
            "name: widget\nversion: 1.0.0\ndependencies:\n"
            "  http: any\n  args:\n  meta:\n    version: any\n  path: ^1.0.0\n"
        )
        assert metadata.unconstrained_dependencies == ["args", "http", "meta"]

    def test_missing_sdk(self):
        metadata = parse_pubspec("name: widget\nversion: 1.0.0\n")
        assert metadata.has_sdk_constraint is False

    def test_malformed_yaml_raises(self):
        with pytest.raises(MetadataError):
            parse_pubspec("name: [widget\n")

    def test_invalid_date_raises_metadata_error(self):
        with pytest.raises(MetadataError, match="Failed to parse"):
            parse_pubspec("name: widget\nversion: 1.0.0\nreleased: 2019-13-45\n")

    def test_non_mapping_raises(self):
        with pytest.raises(MetadataError, match="expected a YAML mapping"):
            parse_pubspec("- widget\n")

    def test_missing_name_raises(self):
        with pytest.raises(MetadataError, match="'name' is required"):
            parse_pubspec("version: 1.0.0\n")

    def test_missing_version_raises(self):
        with pytest.raises(MetadataError, match="'version' is required"):
            parse_pubspec("name: widget\n")


class TestLoadPackageMetadata:
    async def test_loads_from_directory(self, make_package):
        root = make_package({"pubspec.yaml": PUBSPEC})
        metadata = await load_package_metadata(root)
        assert metadata.name == "widget"

    async def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(MetadataError, match="No pubspec.yaml"):
            await load_package_metadata(tmp_path)


class TestHomepageChecks:
    async def test_valid_homepage(self, url_checker):
        assert await detect_metadata_suggestions(_metadata(), url_checker) == []
        assert url_checker.calls == [("https://github.com/example/widget", False)]

    @pytest.mark.parametrize("status", [UrlStatus.INVALID, UrlStatus.INTERNAL])
    async def test_unhelpful_homepage(self, make_url_checker, status: UrlStatus):
        checker = make_url_checker({"https://github.com/example/widget": status})
        suggestions = await detect_metadata_suggestions(_metadata(), checker)
        assert [s.code for s in suggestions] == [SuggestionCode.PUBSPEC_HOMEPAGE_IS_NOT_HELPFUL]
        assert suggestions[0].severity is Severity.WARNING

    async def test_missing_homepage_url(self, url_checker):
        suggestions = await detect_metadata_suggestions(_metadata(homepage=None), url_checker)
        assert [s.code for s in suggestions] == [SuggestionCode.PUBSPEC_HOMEPAGE_IS_NOT_HELPFUL]

    async def test_unreachable_homepage(self, make_url_checker):
        checker = make_url_checker({"https://github.com/example/widget": UrlStatus.MISSING})
        suggestions = await detect_metadata_suggestions(_metadata(), checker)
        assert [s.code for s in suggestions] == [SuggestionCode.PUBSPEC_HOMEPAGE_DOES_NOT_EXISTS]
        assert "https://github.com/example/widget" in suggestions[0].description

    async def test_internal_flag_is_forwarded(self, url_checker):
        await detect_metadata_suggestions(_metadata(), url_checker, is_internal=True)
        assert url_checker.calls == [("https://github.com/example/widget", True)]


class TestDocumentationChecks:
    async def test_documentation_not_checked_when_absent(self, url_checker):
        await detect_metadata_suggestions(_metadata(documentation=""), url_checker)
        assert len(url_checker.calls) == 1

    async def test_internal_documentation(self, make_url_checker):
        checker = make_url_checker({"https://pub.dev/documentation/widget": UrlStatus.INTERNAL})
        suggestions = await detect_metadata_suggestions(
            _metadata(documentation="https://pub.dev/documentation/widget"), checker
        )
        assert [s.code for s in suggestions] == [
            SuggestionCode.PUBSPEC_DOCUMENTATION_IS_NOT_HELPFUL
        ]

    async def test_unreachable_documentation(self, make_url_checker):
        checker = make_url_checker({"https://docs.example.com": UrlStatus.MISSING})
        suggestions = await detect_metadata_suggestions(
            _metadata(documentation="https://docs.example.com"), checker
        )
        assert [s.code for s in suggestions] == [
            SuggestionCode.PUBSPEC_DOCUMENTATION_DOES_NOT_EXISTS
        ]


class TestStaticMetadataChecks:
    async def test_missing_sdk_is_an_error(self, url_checker):
        suggestions = await detect_metadata_suggestions(
            _metadata(sdk_constraint=None), url_checker
        )
        assert [s.code for s in suggestions] == [SuggestionCode.PUBSPEC_SDK_MISSING]
        assert suggestions[0].severity is Severity.ERROR

    async def test_empty_description(self, url_checker):
        suggestions = await detect_metadata_suggestions(_metadata(description="  "), url_checker)
        assert [s.severity for s in suggestions] == [Severity.WARNING]
        assert suggestions[0].code == SuggestionCode.PUBSPEC_DESCRIPTION_TOO_SHORT

    async def test_short_description(self, url_checker):
        suggestions = await detect_metadata_suggestions(
            _metadata(description="Widgets."), url_checker
        )
        assert [s.severity for s in suggestions] == [Severity.HINT]
        assert suggestions[0].code == SuggestionCode.PUBSPEC_DESCRIPTION_TOO_SHORT

    async def test_long_description(self, url_checker):
        suggestions = await detect_metadata_suggestions(
            _metadata(description="w" * 181), url_checker
        )
        assert [s.code for s in suggestions] == [SuggestionCode.PUBSPEC_DESCRIPTION_TOO_LONG]

    async def test_unconstrained_dependencies(self, url_checker):
        suggestions = await detect_metadata_suggestions(
            _metadata(dependencies={"http": "any", "args": None}), url_checker
        )
        (suggestion,) = suggestions
        assert suggestion.code == SuggestionCode.PUBSPEC_DEPENDENCIES_UNCONSTRAINED
        assert "2 dependencies" in suggestion.description
        assert "`args`, `http`" in suggestion.description
