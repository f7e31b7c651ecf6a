"""Port: metadata URL reachability."""

from __future__ import annotations

from typing import Protocol

from pkg_health.models import UrlStatus


class UrlCheckerPort(Protocol):
    """Port for checking whether a metadata URL is useful to visitors."""

    async def check_status(
        self,
        url: str | None,
        *,
        is_internal_package: bool = False,
    ) -> UrlStatus:
        """Classify url as valid, missing, invalid or internal. Never raises."""
        ...
