"""Artifact prober -- answer existence questions about a package tree.

Works on the relative file listing of an unpacked package. Name matching is
done against the listing; size checks go to disk, so a file that was listed
but has since vanished simply counts as absent.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from pkg_health.errors import ScanError
from pkg_health.models import ProbeOptions

logger = logging.getLogger(__name__)

CHANGELOG_FILE_NAMES: tuple[str, ...] = ("changelog.md", "changelog")
README_FILE_NAMES: tuple[str, ...] = ("readme.md", "readme")

CURRENT_ANALYSIS_OPTIONS_FILE_NAME = "analysis_options.yaml"
LEGACY_ANALYSIS_OPTIONS_FILE_NAME = ".analysis_options"
ANALYSIS_OPTIONS_FILE_NAMES: tuple[str, ...] = (
    CURRENT_ANALYSIS_OPTIONS_FILE_NAME,
    LEGACY_ANALYSIS_OPTIONS_FILE_NAME,
)

EXAMPLE_DIR = "example/"

# Documentation files are matched in any case; analyzer config names are exact.
DOCUMENT_PROBE = ProbeOptions(case_sensitive=False, min_length=0)
EXAMPLE_PROBE = ProbeOptions(case_sensitive=False, min_length=0)
ANALYSIS_OPTIONS_PROBE = ProbeOptions(case_sensitive=True, min_length=0)


def example_file_candidates(package: str) -> list[str]:
    """Return the example file candidates in display priority order."""
    return [
        "example/readme.md",
        "example/readme",
        "example/example.md",
        "example/example",
        "example/lib/main.dart",
        "example/main.dart",
        f"example/lib/{package}.dart",
        f"example/{package}.dart",
        f"example/lib/{package}_example.dart",
        f"example/{package}_example.dart",
        "example/lib/example.dart",
        "example/example.dart",
    ]


def first_match(
    files: Sequence[str],
    names: Sequence[str],
    *,
    case_sensitive: bool,
) -> str | None:
    """Return the first file matching names, scanning names in priority order.

    Names are expected in lower case; in case-insensitive mode a file matches
    when its lower-cased path equals the name.
    """
    for name in names:
        for file in files:
            if file == name:
                return file
            if not case_sensitive and file.lower() == name:
                return file
    return None


def example_dir_exists(files: Sequence[str]) -> bool:
    return any(file.startswith(EXAMPLE_DIR) for file in files)


class ArtifactProber:
    """Probe one package tree for well-known files."""

    def __init__(self, root: str | Path, files: Sequence[str]) -> None:
        self._root = Path(root)
        self._files = list(files)

    @property
    def files(self) -> list[str]:
        return list(self._files)

    def contains(self, path: str) -> bool:
        """Whether path is in the listing, compared exactly."""
        return path in self._files

    def first_match(self, names: Sequence[str], options: ProbeOptions) -> str | None:
        return first_match(self._files, names, case_sensitive=options.case_sensitive)

    async def exists(self, names: Sequence[str], options: ProbeOptions) -> bool:
        """Whether a file matching names exists and is at least min_length bytes."""
        path = self.first_match(names, options)
        if path is None:
            return False
        size = await self.file_size(path)
        if size is None:
            logger.debug("Listed file %s no longer exists", path)
            return False
        return size >= options.min_length

    async def file_size(self, path: str) -> int | None:
        """Return the byte length of path, or None if it does not exist.

        Raises:
            ScanError: If the file exists but cannot be inspected.
        """
        target = self._root / path
        try:
            stat = await asyncio.to_thread(target.stat)
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise ScanError(f"Cannot inspect '{target}': {exc}") from exc
        return stat.st_size

    async def read_text(self, path: str) -> str | None:
        """Read path as UTF-8 text, or None if it does not exist.

        Raises:
            ScanError: If the file exists but cannot be read.
            UnicodeDecodeError: If the content is not valid UTF-8.
        """
        target = self._root / path
        try:
            return await asyncio.to_thread(target.read_text, encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise ScanError(f"Cannot read '{target}': {exc}") from exc
