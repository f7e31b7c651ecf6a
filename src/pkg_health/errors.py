"""Exception hierarchy for pkg-health.

All exceptions inherit from PkgHealthError (single catch point).
Expected package deficiencies never raise -- they become Suggestions.
Only infrastructure faults and unusable caller input end up here.
"""

from __future__ import annotations


class PkgHealthError(Exception):
    """Base exception for all pkg-health errors."""


class ScanError(PkgHealthError):
    """Error listing or reading a package directory."""


class MetadataError(PkgHealthError):
    """The package metadata file is missing or malformed."""


class InvalidVersionError(PkgHealthError):
    """A version string is not valid semantic-versioning syntax."""
