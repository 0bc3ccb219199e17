"""Qt6 SDK discovery and validation.

Locates a Qt6 installation on the host without a registry to query, by
trying an ordered list of strategies and validating each candidate
directory against per-platform layout conventions.

Public API::

    from taqyon.discovery import DiscoveryEngine, UserPathResolver

    root = DiscoveryEngine().discover()
    if root is None:
        root = UserPathResolver().resolve(input("Qt6 path: "))
"""

from __future__ import annotations

from taqyon.discovery.engine import DiscoveryEngine
from taqyon.discovery.models import DiscoveryReport, ValidationResult
from taqyon.discovery.platform_profile import (
    QT_VERSIONS,
    PlatformProfile,
    build_profile,
    current_platform,
)
from taqyon.discovery.resolver import QT_SUBDIRS, UserPathResolver
from taqyon.discovery.strategies import (
    QT_ENV_VARS,
    DiscoveryStrategy,
    EnvVarStrategy,
    FilesystemSearchStrategy,
    LocatorToolStrategy,
    QueryToolStrategy,
    WellKnownPathStrategy,
)
from taqyon.discovery.validator import DirectoryValidator

__all__ = [
    "DirectoryValidator",
    "DiscoveryEngine",
    "DiscoveryReport",
    "DiscoveryStrategy",
    "EnvVarStrategy",
    "FilesystemSearchStrategy",
    "LocatorToolStrategy",
    "PlatformProfile",
    "QT_ENV_VARS",
    "QT_SUBDIRS",
    "QT_VERSIONS",
    "QueryToolStrategy",
    "UserPathResolver",
    "ValidationResult",
    "WellKnownPathStrategy",
    "build_profile",
    "current_platform",
]
