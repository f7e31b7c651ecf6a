"""Load package metadata from ``pubspec.yaml``."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import yaml

from pkg_health.errors import MetadataError
from pkg_health.models import PackageMetadata

logger = logging.getLogger(__name__)

PUBSPEC_FILE_NAME = "pubspec.yaml"


async def load_package_metadata(pkg_dir: str | Path) -> PackageMetadata:
    """Read and parse the metadata file of an unpacked package.

    Raises:
        MetadataError: If the file is missing, unreadable or malformed.
    """
    path = Path(pkg_dir) / PUBSPEC_FILE_NAME
    try:
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except FileNotFoundError:
        raise MetadataError(f"No {PUBSPEC_FILE_NAME} found in '{pkg_dir}'.") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise MetadataError(f"Cannot read '{path}': {exc}") from exc
    return parse_pubspec(text, source=str(path))


def parse_pubspec(text: str, source: str = PUBSPEC_FILE_NAME) -> PackageMetadata:
    """Parse pubspec YAML text into PackageMetadata."""
    try:
        data = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError) as exc:
        raise MetadataError(f"Failed to parse {source}: {exc}") from exc
    if not isinstance(data, dict):
        raise MetadataError(f"Invalid metadata in {source}: expected a YAML mapping.")

    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise MetadataError(f"Invalid metadata in {source}: 'name' is required.")
    version = data.get("version")
    if version is None:
        raise MetadataError(f"Invalid metadata in {source}: 'version' is required.")

    environment = data.get("environment")
    sdk = environment.get("sdk") if isinstance(environment, dict) else None

    dependencies = data.get("dependencies")
    if dependencies is None:
        dependencies = {}
    elif not isinstance(dependencies, dict):
        raise MetadataError(f"Invalid metadata in {source}: 'dependencies' must be a mapping.")

    return PackageMetadata(
        name=name.strip(),
        version=str(version),
        description=_optional_str(data.get("description")),
        homepage=_optional_str(data.get("homepage")),
        documentation=_optional_str(data.get("documentation")),
        sdk_constraint=_optional_str(sdk),
        dependencies={str(k): v for k, v in dependencies.items()},
    )


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
