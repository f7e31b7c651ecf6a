"""Runtime settings resolved from environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

_TIMEOUT_ENV = "PKG_HEALTH_URL_TIMEOUT"
_INTERNAL_HOSTS_ENV = "PKG_HEALTH_INTERNAL_HOSTS"
_INTERNAL_PACKAGE_ENV = "PKG_HEALTH_INTERNAL_PACKAGE"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}

DEFAULT_URL_TIMEOUT = 10.0
DEFAULT_INTERNAL_HOSTS: tuple[str, ...] = (
    "pub.dartlang.org",
    "pub.dev",
    "dartlang.org",
    "dart.dev",
)


@dataclass(frozen=True, slots=True)
class Settings:
    """Knobs for the URL checks that accompany a maintenance analysis."""

    url_timeout: float = DEFAULT_URL_TIMEOUT
    internal_hosts: tuple[str, ...] = field(default=DEFAULT_INTERNAL_HOSTS)
    is_internal_package: bool = False


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from the environment, falling back to defaults on bad values."""
    source = env if env is not None else os.environ
    return Settings(
        url_timeout=_parse_timeout(source.get(_TIMEOUT_ENV)),
        internal_hosts=_parse_hosts(source.get(_INTERNAL_HOSTS_ENV)),
        is_internal_package=_parse_bool(source.get(_INTERNAL_PACKAGE_ENV)),
    )


def _parse_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_URL_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number.", _TIMEOUT_ENV, raw)
        return DEFAULT_URL_TIMEOUT
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive.", _TIMEOUT_ENV, raw)
        return DEFAULT_URL_TIMEOUT
    return value


def _parse_hosts(raw: str | None) -> tuple[str, ...]:
    if raw is None:
        return DEFAULT_INTERNAL_HOSTS
    hosts = tuple(h.strip().lower() for h in raw.split(",") if h.strip())
    return hosts or DEFAULT_INTERNAL_HOSTS


def _parse_bool(raw: str | None) -> bool:
    if raw is None:
        return False
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value not in _FALSE_VALUES:
        logger.warning("Ignoring %s=%r: expected a boolean.", _INTERNAL_PACKAGE_ENV, raw)
    return False
