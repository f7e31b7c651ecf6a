"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from pkg_health.models import UrlStatus

PackageFactory = Callable[[dict[str, str]], Path]


@pytest.fixture()
def make_package(tmp_path: Path) -> PackageFactory:
    """Write a package tree from a {relative path: content} mapping."""

    def _make(files: dict[str, str]) -> Path:
        root = tmp_path / "pkg"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _make


class FakeUrlChecker:
    """UrlCheckerPort returning canned statuses and recording calls."""

    def __init__(self, statuses: dict[str | None, UrlStatus] | None = None) -> None:
        self._statuses = statuses or {}
        self.calls: list[tuple[str | None, bool]] = []

    async def check_status(
        self,
        url: str | None,
        *,
        is_internal_package: bool = False,
    ) -> UrlStatus:
        self.calls.append((url, is_internal_package))
        if url is None:
            return self._statuses.get(None, UrlStatus.INVALID)
        return self._statuses.get(url, UrlStatus.VALID)


@pytest.fixture()
def url_checker() -> FakeUrlChecker:
    return FakeUrlChecker()


@pytest.fixture()
def make_url_checker() -> Callable[..., FakeUrlChecker]:
    return FakeUrlChecker
