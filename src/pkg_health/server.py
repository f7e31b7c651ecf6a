"""MCP server that scores the maintenance health of unpacked packages."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from pkg_health.metadata.base import UrlCheckerPort
from pkg_health.metadata.url_checker import HttpUrlChecker
from pkg_health.settings import Settings, load_settings
from pkg_health.tools.maintenance import check_maintenance


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared state across all tool invocations."""

    http_client: httpx.AsyncClient
    url_checker: UrlCheckerPort
    settings: Settings


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """Manage shared adapter lifecycle -- the composition root."""
    settings = load_settings()
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(settings.url_timeout, connect=min(settings.url_timeout, 10.0)),
        follow_redirects=True,
        limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
        transport=httpx.AsyncHTTPTransport(retries=2),
    ) as http_client:
        url_checker = HttpUrlChecker(
            http_client,
            internal_hosts=settings.internal_hosts,
            timeout_seconds=settings.url_timeout,
        )
        yield AppContext(
            http_client=http_client,
            url_checker=url_checker,
            settings=settings,
        )


mcp = FastMCP(
    "pkg-health",
    instructions=(
        "pkg-health scores the maintenance health of an unpacked package.\n\n"
        "Call check_maintenance with the package directory. Pass the issue counts "
        "of your own static-analysis run if you have them, and the age of the "
        "published version in days. The result lists every suggestion with its "
        "severity and penalty, plus the score in [0.0, 1.0]. Suggestions are "
        "sorted errors first; address those before warnings and hints."
    ),
    lifespan=app_lifespan,
)

# ─── Read-only tools ──────────────────────────────────────────
mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))(check_maintenance)
