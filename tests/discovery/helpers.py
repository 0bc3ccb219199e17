"""Shared test helpers for creating fake Qt6 installation trees.

Each helper creates a minimal but realistic directory layout under a
temporary directory. They are used by the validator, engine, resolver and
orchestrator tests.
"""

from __future__ import annotations

from pathlib import Path


def create_linux_qt(root: Path, libs: bool = True, headers: bool = True) -> Path:
    """Create an online-installer style Linux kit (``gcc_64``)."""
    (root / "bin").mkdir(parents=True, exist_ok=True)
    (root / "lib").mkdir(exist_ok=True)
    (root / "include").mkdir(exist_ok=True)
    if libs:
        (root / "lib" / "libQt6Core.so").write_text("")
    if headers:
        (root / "include" / "QtCore").mkdir(exist_ok=True)
        (root / "include" / "QtCore" / "QObject").write_text("#include \"qobject.h\"\n")
    return root


def create_windows_qt(root: Path, libs: bool = True, headers: bool = True) -> Path:
    """Create an MSVC style Windows kit (``msvc2019_64``)."""
    (root / "bin").mkdir(parents=True, exist_ok=True)
    (root / "lib").mkdir(exist_ok=True)
    (root / "include").mkdir(exist_ok=True)
    if libs:
        (root / "lib" / "Qt6Core.lib").write_text("")
    if headers:
        (root / "include" / "QtCore").mkdir(exist_ok=True)
    return root


def create_macos_framework_qt(root: Path) -> Path:
    """Create a macOS kit shipping Qt Core as a framework bundle only."""
    framework = root / "lib" / "QtCore.framework"
    (framework / "Headers").mkdir(parents=True, exist_ok=True)
    (root / "bin").mkdir(exist_ok=True)
    return root


def create_marker_only_tree(root: Path) -> Path:
    """Create ``lib``/``include``/``bin`` without any Qt artifact."""
    for name in ("lib", "include", "bin"):
        (root / name).mkdir(parents=True, exist_ok=True)
    (root / "lib" / "libz.so").write_text("")
    (root / "include" / "zlib.h").write_text("")
    return root


def create_markerless_tree(root: Path) -> Path:
    """Create a directory with unrelated content and no marker dirs."""
    (root / "docs").mkdir(parents=True, exist_ok=True)
    (root / "docs" / "libQt6Core.so").write_text("")
    (root / "README.txt").write_text("not a Qt install\n")
    return root


def create_headers_only_qt(root: Path) -> Path:
    """Create a headers-only tree that validates on every platform."""
    (root / "include" / "QtCore").mkdir(parents=True, exist_ok=True)
    (root / "include" / "QtCore" / "QObject").write_text("")
    return root
