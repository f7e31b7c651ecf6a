"""Semantic version parsing and maturity classification."""

from __future__ import annotations

import re

from pkg_health.errors import InvalidVersionError
from pkg_health.models import VersionInfo

# major.minor.patch[-pre.release][+build.metadata]
_SEMVER = re.compile(
    r"^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<pre>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)


def parse_version(text: str) -> VersionInfo:
    """Parse a semantic version string.

    Raises:
        InvalidVersionError: If text is not ``major.minor.patch`` with optional
            pre-release and build suffixes.
    """
    match = _SEMVER.match(text.strip())
    if match is None:
        raise InvalidVersionError(f"'{text}' is not a valid semantic version.")
    pre = match.group("pre")
    build = match.group("build")
    return VersionInfo(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        pre_release=tuple(pre.split(".")) if pre else (),
        build=tuple(build.split(".")) if build else (),
    )


def classify_version(version: str | VersionInfo) -> tuple[bool, bool]:
    """Return (is_experimental, is_pre_release) for a version.

    Experimental means major version zero; pre-release means the version
    carries a pre-release label. The two are independent.
    """
    info = version if isinstance(version, VersionInfo) else parse_version(version)
    return info.is_experimental, info.is_pre_release
