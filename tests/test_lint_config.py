"""Tests for the lint configuration inspector (maintenance/lint_config.py)."""

from __future__ import annotations

from pkg_health.maintenance.lint_config import inspect_analysis_options, load_analysis_options
from pkg_health.maintenance.prober import ArtifactProber
from pkg_health.models import Severity, SuggestionCode


class TestInspectAnalysisOptions:
    """Tests for strong-mode interpretation of parsed content."""

    def test_strong_mode_true(self):
        result = inspect_analysis_options(
            "analysis_options.yaml", "analyzer:\n  strong-mode: true\n"
        )
        assert result.strong_mode_enabled is True
        assert result.suggestions == ()

    def test_strong_mode_mapping_counts_as_enabled(self):
        content = "analyzer:\n  strong-mode:\n    implicit-casts: false\n"
        result = inspect_analysis_options("analysis_options.yaml", content)
        assert result.strong_mode_enabled is True

    def test_strong_mode_false(self):
        result = inspect_analysis_options(
            "analysis_options.yaml", "analyzer:\n  strong-mode: false\n"
        )
        assert result.strong_mode_enabled is False
        assert result.suggestions == ()

    def test_missing_key_is_disabled(self):
        content = "analyzer:\n  exclude:\n    - build/**\nlinter:\n  rules: []\n"
        result = inspect_analysis_options("analysis_options.yaml", content)
        assert result.strong_mode_enabled is False

    def test_string_value_is_disabled(self):
        result = inspect_analysis_options(
            "analysis_options.yaml", "analyzer:\n  strong-mode: 'maybe'\n"
        )
        assert result.strong_mode_enabled is False

    def test_empty_file_is_disabled_without_warning(self):
        result = inspect_analysis_options("analysis_options.yaml", "")
        assert result.strong_mode_enabled is False
        assert result.suggestions == ()

    def test_malformed_yaml_yields_warning(self):
        """Should report a parse failure as a warning naming the file."""
        result = inspect_analysis_options(".analysis_options", "analyzer: [unclosed\n")

        assert result.strong_mode_enabled is False
        assert len(result.suggestions) == 1
        suggestion = result.suggestions[0]
        assert suggestion.severity is Severity.WARNING
        assert suggestion.code == SuggestionCode.ANALYSIS_OPTIONS_PARSE_FAILED
        assert suggestion.file == ".analysis_options"
        assert "`.analysis_options`" in suggestion.description

    def test_non_mapping_root_yields_warning(self):
        result = inspect_analysis_options("analysis_options.yaml", "- just\n- a list\n")
        assert result.strong_mode_enabled is False
        assert len(result.suggestions) == 1

    def test_scalar_analyzer_yields_warning(self):
        result = inspect_analysis_options("analysis_options.yaml", "analyzer: strict\n")
        assert len(result.suggestions) == 1

    def test_invalid_date_value_yields_warning(self):
        """Should treat values the YAML loader cannot construct as a parse failure."""
        result = inspect_analysis_options("analysis_options.yaml", "released: 2019-13-45\n")

        assert result.strong_mode_enabled is False
        (suggestion,) = result.suggestions
        assert suggestion.code == SuggestionCode.ANALYSIS_OPTIONS_PARSE_FAILED
        assert suggestion.severity is Severity.WARNING


class TestLoadAnalysisOptions:
    """Tests for locating and reading the lint configuration file."""

    async def test_no_config(self, make_package):
        root = make_package({"README.md": "x"})
        name, result = await load_analysis_options(ArtifactProber(root, ["README.md"]))
        assert name is None
        assert result.strong_mode_enabled is False

    async def test_current_name_preferred_over_legacy(self, make_package):
        files = {
            "analysis_options.yaml": "analyzer:\n  strong-mode: true\n",
            ".analysis_options": "analyzer:\n  strong-mode: false\n",
        }
        root = make_package(files)
        name, result = await load_analysis_options(ArtifactProber(root, list(files)))
        assert name == "analysis_options.yaml"
        assert result.strong_mode_enabled is True

    async def test_legacy_name_used_when_alone(self, make_package):
        files = {".analysis_options": "analyzer:\n  strong-mode: true\n"}
        root = make_package(files)
        name, result = await load_analysis_options(ArtifactProber(root, list(files)))
        assert name == ".analysis_options"
        assert result.strong_mode_enabled is True

    async def test_invalid_utf8_yields_parse_warning(self, make_package):
        root = make_package({})
        (root / "analysis_options.yaml").write_bytes(b"\xff\xfe\x00analyzer")
        name, result = await load_analysis_options(
            ArtifactProber(root, ["analysis_options.yaml"])
        )
        assert name == "analysis_options.yaml"
        assert [s.code for s in result.suggestions] == [
            SuggestionCode.ANALYSIS_OPTIONS_PARSE_FAILED
        ]
