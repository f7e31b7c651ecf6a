"""Shared plumbing for the pkg-health MCP tools."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcp.server.fastmcp import Context

if TYPE_CHECKING:
    from pkg_health.server import AppContext


def get_context(ctx: Context) -> AppContext:
    """Return the AppContext (HTTP client, URL checker, settings) of this request.

    Raises:
        TypeError: If the server was started without ``app_lifespan``, so the
            tools have no URL checker or settings to work with.
    """
    # server imports the tools, so resolve AppContext at call time
    from pkg_health.server import AppContext

    app = ctx.request_context.lifespan_context
    if isinstance(app, AppContext):
        return app
    raise TypeError(
        f"pkg-health tools need an AppContext, got {type(app).__name__}; "
        "start the server through pkg_health.server.mcp"
    )
