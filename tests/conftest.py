"""Shared fixtures for taqyon tests."""

from __future__ import annotations

import pathlib

import pytest

from taqyon.discovery import DiscoveryEngine, DirectoryValidator, build_profile


@pytest.fixture
def linux_validator(tmp_path: pathlib.Path) -> DirectoryValidator:
    """Validator using Linux conventions regardless of the host."""
    return DirectoryValidator(build_profile("linux", home=tmp_path, environ={}))


@pytest.fixture
def empty_engine(linux_validator: DirectoryValidator) -> DiscoveryEngine:
    """Engine with no strategies: discovery always finds nothing."""
    return DiscoveryEngine(
        profile=linux_validator.profile, strategies=[], validator=linux_validator,
    )


@pytest.fixture
def projects_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Parent directory for generated projects."""
    path = tmp_path / "projects"
    path.mkdir()
    return path
