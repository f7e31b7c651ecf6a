"""Lint configuration inspector -- is strong mode enabled?

Parses ``analysis_options.yaml`` (or the legacy ``.analysis_options``) and
reads ``analyzer.strong-mode``. A file that does not parse into the expected
mapping never aborts the analysis: it yields a warning Suggestion and strong
mode is assumed disabled.
"""

from __future__ import annotations

import logging

import yaml

from pkg_health.maintenance.prober import (
    ANALYSIS_OPTIONS_FILE_NAMES,
    ANALYSIS_OPTIONS_PROBE,
    ArtifactProber,
)
from pkg_health.models import LintConfigResult, Suggestion, SuggestionCode

logger = logging.getLogger(__name__)


class _UnexpectedStructure(ValueError):
    pass


def inspect_analysis_options(name: str, content: str) -> LintConfigResult:
    """Inspect the raw content of a lint configuration file.

    Strong mode counts as enabled when ``analyzer.strong-mode`` is ``true`` or
    a mapping (newer configs nest its options). A missing key, ``false`` or
    any other value means disabled.
    """
    try:
        enabled = _strong_mode_value(yaml.safe_load(content))
    except (yaml.YAMLError, ValueError) as exc:
        logger.warning("Malformed %s: %s", name, exc)
        return LintConfigResult(
            strong_mode_enabled=False,
            suggestions=(parse_failed_suggestion(name),),
        )
    return LintConfigResult(strong_mode_enabled=enabled)


async def load_analysis_options(prober: ArtifactProber) -> tuple[str | None, LintConfigResult]:
    """Find the first existing lint config file and inspect it.

    Returns:
        Tuple of (file name, result). The file name is None when the package
        has no lint configuration at all.
    """
    for name in ANALYSIS_OPTIONS_FILE_NAMES:
        if prober.first_match([name], ANALYSIS_OPTIONS_PROBE) is None:
            continue
        try:
            content = await prober.read_text(name)
        except UnicodeDecodeError:
            logger.warning("%s is not valid UTF-8", name)
            return name, LintConfigResult(suggestions=(parse_failed_suggestion(name),))
        if content is None:
            continue
        return name, inspect_analysis_options(name, content)
    return None, LintConfigResult()


def parse_failed_suggestion(name: str) -> Suggestion:
    return Suggestion.warning(
        SuggestionCode.ANALYSIS_OPTIONS_PARSE_FAILED,
        f"Fix `{name}`.",
        f"We were unable to parse `{name}`.",
        file=name,
    )


def _strong_mode_value(data: object) -> bool:
    if data is None:
        return False
    if not isinstance(data, dict):
        raise _UnexpectedStructure("expected a YAML mapping at the top level")
    analyzer = data.get("analyzer")
    if analyzer is None:
        return False
    if not isinstance(analyzer, dict):
        raise _UnexpectedStructure("'analyzer' must be a mapping")
    value = analyzer.get("strong-mode")
    return value is True or isinstance(value, dict)
