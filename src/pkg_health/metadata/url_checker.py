"""Classify metadata URLs by reachability -- no exceptions escape."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

import httpx

from pkg_health.models import UrlStatus
from pkg_health.settings import DEFAULT_INTERNAL_HOSTS, DEFAULT_URL_TIMEOUT

logger = logging.getLogger(__name__)


class HttpUrlChecker:
    """Checks homepage/documentation URLs via HEAD, falling back to GET.

    Empty or non-http(s) URLs are invalid. URLs on a package-repository host
    are internal unless the package itself is internal. HTTP errors, timeouts
    and connection failures count as missing. Always returns a status.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        internal_hosts: tuple[str, ...] = DEFAULT_INTERNAL_HOSTS,
        timeout_seconds: float = DEFAULT_URL_TIMEOUT,
    ) -> None:
        self._http = http_client
        self._internal_hosts = tuple(h.lower() for h in internal_hosts)
        self._timeout = timeout_seconds

    async def check_status(
        self,
        url: str | None,
        *,
        is_internal_package: bool = False,
    ) -> UrlStatus:
        if url is None or not url.strip():
            return UrlStatus.INVALID
        url = url.strip()
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            return UrlStatus.INVALID
        if not is_internal_package and self._is_internal_host(parsed.hostname):
            return UrlStatus.INTERNAL

        try:
            resp = await self._http.head(url, timeout=self._timeout)
            if resp.status_code in (405, 501):
                resp = await self._http.get(url, timeout=self._timeout)
        except httpx.TimeoutException:
            logger.warning("Timeout checking %s", url)
            return UrlStatus.MISSING
        except httpx.InvalidURL:
            return UrlStatus.INVALID
        except httpx.HTTPError as exc:
            logger.warning("Cannot reach %s: %s", url, type(exc).__name__)
            return UrlStatus.MISSING
        except Exception as exc:
            logger.warning("Unexpected error checking %s: %s", url, type(exc).__name__)
            return UrlStatus.MISSING

        if resp.status_code < 400:
            return UrlStatus.VALID
        logger.warning("%s responded with HTTP %d", url, resp.status_code)
        return UrlStatus.MISSING

    def _is_internal_host(self, hostname: str) -> bool:
        host = hostname.lower()
        return any(host == h or host.endswith(f".{h}") for h in self._internal_hosts)
