"""Tests for UserPathResolver kit subdirectory fallback."""

from __future__ import annotations

from pathlib import Path

import pytest

from taqyon.discovery.platform_profile import build_profile
from taqyon.discovery.resolver import QT_SUBDIRS, UserPathResolver
from taqyon.discovery.validator import DirectoryValidator

from tests.discovery.helpers import create_linux_qt


@pytest.fixture
def resolver(tmp_path: Path) -> UserPathResolver:
    return UserPathResolver(DirectoryValidator(build_profile("linux", home=tmp_path, environ={})))


class TestUserPathResolver:
    """Direct path first, then the conventional kit subdirectories."""

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_blank_input(self, resolver: UserPathResolver, value: str | None) -> None:
        assert resolver.resolve(value) is None
        assert resolver.attempts == []

    def test_direct_path(self, resolver: UserPathResolver, tmp_path: Path) -> None:
        root = create_linux_qt(tmp_path / "qt")
        assert resolver.resolve(str(root)) == str(root)
        assert len(resolver.attempts) == 1

    def test_input_is_stripped(self, resolver: UserPathResolver, tmp_path: Path) -> None:
        root = create_linux_qt(tmp_path / "qt")
        assert resolver.resolve(f"  {root}\n") == str(root)

    def test_kit_subdirectory(self, resolver: UserPathResolver, tmp_path: Path) -> None:
        """The SDK inside <path>/gcc_64 is returned, not <path> itself."""
        base = tmp_path / "myqt"
        kit = create_linux_qt(base / "gcc_64")
        assert resolver.resolve(str(base)) == str(kit)
        tried = [a.path for a in resolver.attempts]
        assert tried[0] == str(base)
        assert tried[-1] == str(kit)

    def test_subdirectory_order(self, resolver: UserPathResolver, tmp_path: Path) -> None:
        base = tmp_path / "multi"
        create_linux_qt(base / "gcc_64")
        create_linux_qt(base / "Qt6")
        assert resolver.resolve(str(base)) == str(base / "gcc_64")

    def test_nothing_valid(self, resolver: UserPathResolver, tmp_path: Path) -> None:
        base = tmp_path / "empty"
        base.mkdir()
        assert resolver.resolve(str(base)) is None
        assert len(resolver.attempts) == 1 + len(QT_SUBDIRS)

    def test_tilde_expansion(
        self,
        resolver: UserPathResolver,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        kit = create_linux_qt(tmp_path / "Qt" / "6.5.0" / "gcc_64")
        assert resolver.resolve("~/Qt/6.5.0") == str(kit)

    def test_attempts_reset_between_calls(
        self, resolver: UserPathResolver, tmp_path: Path,
    ) -> None:
        root = create_linux_qt(tmp_path / "qt")
        resolver.resolve(str(tmp_path / "missing"))
        resolver.resolve(str(root))
        assert [a.path for a in resolver.attempts] == [str(root)]
