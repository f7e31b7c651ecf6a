"""pkg-health: maintenance health scoring for published packages.

The scoring core lives in ``pkg_health.maintenance``; ``main`` serves it as an
MCP tool over stdio.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _distribution_version

DISTRIBUTION_NAME = "pkg-health"
_UNINSTALLED_VERSION = "0.0.0+local"


def _resolve_version() -> str:
    """Version of the installed pkg-health distribution, or a local placeholder."""
    try:
        return _distribution_version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return _UNINSTALLED_VERSION


__version__ = _resolve_version()


def main() -> None:
    """Run the pkg-health MCP server on stdio (the ``pkg-health`` script)."""
    from pkg_health.server import mcp

    mcp.run(transport="stdio")
