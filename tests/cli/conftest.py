"""Shared fixtures for CLI tests.

Replaces the host-facing ``DiscoveryEngine`` with engines built from
explicit strategies, so CLI tests never probe PATH, run ``qmake`` or
search the real filesystem.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from taqyon.discovery import DiscoveryEngine, EnvVarStrategy, build_profile

from tests.discovery.helpers import create_headers_only_qt

EngineFactory = Callable[[str | None], None]


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def fake_qt(tmp_path: Path) -> Path:
    """A headers-only Qt6 tree, valid under every platform profile."""
    return create_headers_only_qt(tmp_path / "Qt" / "6.5.0" / "gcc_64")


@pytest.fixture
def discovery_finds(monkeypatch: pytest.MonkeyPatch) -> EngineFactory:
    """Make every DiscoveryEngine the CLI builds report ``root`` (or nothing).

    Usage::

        discovery_finds(str(fake_qt))   # detection succeeds
        discovery_finds(None)           # detection finds nothing
    """

    def _install(root: str | None) -> None:
        environ = {"QTDIR": root} if root else {}

        def _engine() -> DiscoveryEngine:
            return DiscoveryEngine(
                profile=build_profile(),
                strategies=[EnvVarStrategy(environ=environ)],
            )

        monkeypatch.setattr("taqyon.cli.qt_cmd.DiscoveryEngine", _engine)
        monkeypatch.setattr("taqyon.scaffold.orchestrator.DiscoveryEngine", _engine)

    return _install
