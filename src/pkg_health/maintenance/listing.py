"""List the files of an unpacked package tree."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

from pkg_health.errors import ScanError

logger = logging.getLogger(__name__)


async def list_files(directory: str | Path) -> list[str]:
    """Return sorted forward-slash relative paths of every file under directory.

    Raises:
        ScanError: If directory does not exist, is not a directory, or the
            walk fails part-way (permissions, vanished subtree, ...).
    """
    root = Path(directory).resolve()
    if not root.is_dir():
        raise ScanError(f"Cannot scan '{root}': path does not exist or is not a directory.")
    files = await asyncio.to_thread(_walk, root)
    logger.debug("Listed %d files under %s", len(files), root)
    return files


def _walk(root: Path) -> list[str]:
    def _on_error(exc: OSError) -> None:
        raise ScanError(f"Cannot read '{exc.filename}': {exc.strerror or exc}") from exc

    files: list[str] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_on_error):
        base = Path(dirpath)
        for filename in filenames:
            path = base / filename
            if path.is_file():
                files.append(path.relative_to(root).as_posix())
    return sorted(files)
