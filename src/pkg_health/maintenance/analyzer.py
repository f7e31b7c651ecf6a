"""Analyze one unpacked package: metadata checks plus maintenance detection."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from pkg_health.maintenance.detector import detect_maintenance
from pkg_health.metadata.base import UrlCheckerPort
from pkg_health.metadata.detector import detect_metadata_suggestions
from pkg_health.metadata.pubspec import load_package_metadata
from pkg_health.models import AnalysisCounts, Maintenance, Suggestion

logger = logging.getLogger(__name__)


async def analyze_package(
    pkg_dir: str | Path,
    *,
    url_checker: UrlCheckerPort,
    analysis: Sequence[Suggestion] | AnalysisCounts = (),
    is_internal: bool = False,
) -> Maintenance:
    """Load the package metadata and run every maintenance check.

    Raises:
        MetadataError: If ``pubspec.yaml`` is missing or malformed.
        InvalidVersionError: If the declared version is not a semantic version.
        ScanError: If the package tree cannot be listed or read.
    """
    metadata = await load_package_metadata(pkg_dir)
    logger.info("Analyzing %s %s", metadata.name, metadata.version)
    metadata_suggestions = await detect_metadata_suggestions(
        metadata, url_checker, is_internal=is_internal
    )
    return await detect_maintenance(
        pkg_dir,
        metadata.version,
        analysis,
        package_name=metadata.name,
        extra_suggestions=metadata_suggestions,
    )
