"""Qt6 installation root predicate.

``DirectoryValidator`` decides whether a candidate directory is a usable
Qt6 installation root. It only reads the filesystem (existence checks and
single-level directory listings) and never raises: an unreadable
directory is treated the same as a missing one.

Validation Algorithm:
    1. The path must exist.
    2. At least one marker subdirectory (``lib``, ``include``, ``bin``)
       must exist. Otherwise the path is rejected before any library or
       header check runs.
    3. Library check: the platform's Qt Core artifact under ``lib/``. On
       macOS a ``lib/`` listing is scanned when no exact name matches,
       because Homebrew, MacPorts and the online installer name the
       bundle differently.
    4. Header check: a ``QtCore`` header tree under ``include/``. On macOS
       the framework's nested ``Headers`` directory is tried next, then
       any ``include/Qt*`` entry.
    5. Valid when markers exist and either libraries or headers were
       found. Headers-only and libraries-only installs are accepted.

A bundle pattern (no suffixes) must match a ``lib/`` entry exactly. File
patterns match by substring plus suffix, so an unrelated directory
containing e.g. ``lib/myQt6Core-notes.a`` is accepted on macOS.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from taqyon.discovery.models import ValidationResult
from taqyon.discovery.platform_profile import (
    MARKER_DIRS,
    MODULE_PREFIX,
    PlatformProfile,
    build_profile,
)

logger = logging.getLogger(__name__)


def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError:
        return False


def _list_dir(path: Path) -> list[str]:
    try:
        return sorted(os.listdir(path))
    except OSError:
        return []


def _display_name(relative: str, prefix: str) -> str:
    """Strip a leading ``lib/`` or ``include/`` for reporting."""
    return relative[len(prefix):] if relative.startswith(prefix) else relative


class DirectoryValidator:
    """Checks candidate directories against a ``PlatformProfile``.

    Usage::

        validator = DirectoryValidator()
        result = validator.validate("/home/me/Qt/6.5.0/gcc_64")
        if result.is_valid:
            print("Qt6 found")
    """

    def __init__(self, profile: PlatformProfile | None = None) -> None:
        self.profile = profile if profile is not None else build_profile()

    def is_valid_root(self, path: str | os.PathLike[str] | None) -> bool:
        """Return True if ``path`` is a plausible Qt6 installation root."""
        return self.validate(path).is_valid

    def validate(self, path: str | os.PathLike[str] | None) -> ValidationResult:
        """Validate one candidate directory.

        Args:
            path: Candidate installation root. Empty or None is invalid.

        Returns:
            A ``ValidationResult`` with all intermediate findings.
        """
        text = os.fspath(path) if path is not None else ""
        if not text:
            return ValidationResult(path=text, is_valid=False)

        root = Path(text)
        if not _exists(root):
            logger.debug("Skipping %s: does not exist", text)
            return ValidationResult(path=text, is_valid=False)

        markers = frozenset(name for name in MARKER_DIRS if _exists(root / name))
        if not markers:
            logger.debug("Rejecting %s: no lib, include or bin directory", text)
            return ValidationResult(path=text, is_valid=False, exists=True)

        libraries = self._find_libraries(root)
        headers = self._find_headers(root)
        result = ValidationResult(
            path=text,
            is_valid=bool(libraries or headers),
            exists=True,
            found_markers=markers,
            found_libraries=libraries,
            found_headers=headers,
            checked_artifacts=True,
        )
        for line in result.diagnostics():
            logger.debug("  %s: %s", text, line)
        return result

    def _find_libraries(self, root: Path) -> frozenset[str]:
        found = {
            _display_name(rel, "lib/")
            for rel in self.profile.library_files
            if _exists(root / rel)
        }
        if found or not self.profile.library_patterns:
            return frozenset(found)

        lib_dir = root / "lib"
        if not _exists(lib_dir):
            return frozenset()
        for entry in _list_dir(lib_dir):
            for fragment, suffixes in self.profile.library_patterns:
                if suffixes:
                    matched = fragment in entry and entry.endswith(suffixes)
                else:
                    matched = entry == fragment
                if matched:
                    found.add(entry)
                    break
        return frozenset(found)

    def _find_headers(self, root: Path) -> frozenset[str]:
        found = {
            _display_name(rel, "include/")
            for rel in self.profile.header_files
            if _exists(root / rel)
        }
        if found:
            return frozenset(found)

        found = {
            _display_name(rel, "lib/")
            for rel in self.profile.framework_headers
            if _exists(root / rel)
        }
        if found or not self.profile.scan_include_dir:
            return frozenset(found)

        include_dir = root / "include"
        if not _exists(include_dir):
            return frozenset()
        return frozenset(
            entry for entry in _list_dir(include_dir) if entry.startswith(MODULE_PREFIX)
        )
