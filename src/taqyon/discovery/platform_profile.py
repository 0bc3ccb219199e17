"""Static per-platform conventions for locating a Qt6 installation.

Each ``PlatformProfile`` describes how a Qt6 SDK is laid out on one host
operating system: which compiled Core library proves the install is real,
where headers live, and which well-known directories the official online
installer, Homebrew, MacPorts, MSYS2 and the Linux distributions put it in.
The profile is built once and threaded through the validator and the
discovery strategies, so no other module branches on the host OS.

Platform Notes:
    Only ``windows``, ``macos`` and ``linux`` are recognised. Any other
    host (BSDs, Cygwin reporting an unusual ``platform.system()``) gets
    the Linux conventions as a best-effort default.
    macOS installs ship Qt Core as a ``QtCore.framework`` bundle or as
    flat ``libQt6Core.dylib`` / ``libQt6Core.a`` files depending on the
    packaging channel.
"""

from __future__ import annotations

import ntpath
import os
import platform
import posixpath
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

WINDOWS = "windows"
MACOS = "macos"
LINUX = "linux"

# Newest first. QWebEngineView is available from Qt 6.2.0 onward.
QT_VERSIONS: tuple[str, ...] = (
    "6.9.0", "6.8.0", "6.7.0", "6.6.0", "6.5.0", "6.4.0", "6.3.0", "6.2.0",
)

# Structural markers expected directly under an installation root.
MARKER_DIRS: tuple[str, ...] = ("lib", "include", "bin")

# Header locations shared by every platform, relative to the root.
COMMON_HEADER_FILES: tuple[str, ...] = (
    "include/QtCore",
    "include/QtCore/QObject",
    "include/Qt6/QtCore/QObject",
)

# Prefix of Qt module directories under ``include/`` (QtCore, QtGui, ...).
MODULE_PREFIX = "Qt"

# Appended to every platform's candidate list.
SHARED_COMMON_ROOTS: tuple[str, ...] = (
    "/usr/local/Qt-6",
    "/usr/local/Qt6",
    "/usr/local/qt6",
    "/opt/Qt6",
)


@dataclass(frozen=True)
class PlatformProfile:
    """Describes where and how a Qt6 SDK is installed on one platform.

    Attributes:
        kind: One of ``windows``, ``macos`` or ``linux``.
        library_files: Relative paths of the Qt Core library artifact,
            checked in order.
        library_patterns: ``(fragment, suffixes)`` pairs matched against
            ``lib/`` entries when no exact library file exists. A fragment
            with no suffixes must equal the entry name. Empty on platforms
            without the listing fallback.
        header_files: Relative paths proving a header tree is present.
        framework_headers: Headers nested inside the library bundle
            (macOS only, empty elsewhere).
        scan_include_dir: Whether to accept any ``include/Qt*`` entry as a
            last-resort header match.
        versioned_roots: Absolute path templates with a ``{version}`` field.
        common_roots: Version-independent absolute candidate roots.
        search_roots: Broad directories handed to the native file search.
        search_patterns: File name patterns for the native file search.
    """

    kind: str
    library_files: tuple[str, ...] = ()
    library_patterns: tuple[tuple[str, tuple[str, ...]], ...] = ()
    header_files: tuple[str, ...] = COMMON_HEADER_FILES
    framework_headers: tuple[str, ...] = ()
    scan_include_dir: bool = False
    versioned_roots: tuple[str, ...] = ()
    common_roots: tuple[str, ...] = ()
    search_roots: tuple[str, ...] = ()
    search_patterns: tuple[str, ...] = field(default=("libQt6Core.*",))

    @property
    def is_windows(self) -> bool:
        return self.kind == WINDOWS

    def well_known_candidates(
        self, versions: tuple[str, ...] = QT_VERSIONS,
    ) -> list[str]:
        """Expand the versioned templates and append the common roots.

        Versions are the outer loop so that a newer release under any
        layout is preferred over an older one.

        Args:
            versions: Release identifiers, newest first.

        Returns:
            De-duplicated candidate paths in preference order.
        """
        candidates: list[str] = []
        for version in versions:
            for template in self.versioned_roots:
                candidates.append(template.format(version=version))
        candidates.extend(self.common_roots)
        candidates.extend(SHARED_COMMON_ROOTS)
        return list(dict.fromkeys(candidates))


def current_platform(system: str | None = None) -> str:
    """Return the platform kind for a ``platform.system()`` value.

    Args:
        system: Override the detected system name (for testing).
    """
    name = (system if system is not None else platform.system()).lower()
    if name == "darwin":
        return MACOS
    if name == "windows":
        return WINDOWS
    return LINUX


def _windows_profile(home: str, environ: Mapping[str, str]) -> PlatformProfile:
    program_files = environ.get("ProgramFiles", "C:\\Program Files")
    program_files_x86 = environ.get("ProgramFiles(x86)", "C:\\Program Files (x86)")
    join = ntpath.join
    return PlatformProfile(
        kind=WINDOWS,
        library_files=("lib/Qt6Core.lib",),
        versioned_roots=(
            join("C:\\Qt", "{version}", "msvc2019_64"),
            join("C:\\Qt", "{version}", "msvc2019"),
            join("C:\\Qt", "{version}", "mingw_64"),
            join("C:\\Qt", "{version}", "mingw81_64"),
            join("C:\\Qt", "{version}", "mingw81_32"),
            join(program_files, "Qt", "{version}", "msvc2019_64"),
            join(program_files, "Qt", "{version}", "mingw_64"),
            join(program_files_x86, "Qt", "{version}", "msvc2019"),
            join(program_files_x86, "Qt", "{version}", "mingw_32"),
        ),
        common_roots=(
            "C:\\Qt\\6",
            join(program_files, "Qt", "6"),
            join(program_files_x86, "Qt", "6"),
            "C:\\msys64\\mingw64\\qt6",
            "C:\\msys64\\mingw32\\qt6",
        ),
        search_roots=(
            "C:\\Qt",
            join(program_files, "Qt"),
            join(program_files_x86, "Qt"),
        ),
        search_patterns=("Qt6Core.*",),
    )


def _macos_profile(home: str, environ: Mapping[str, str]) -> PlatformProfile:
    join = posixpath.join
    return PlatformProfile(
        kind=MACOS,
        library_files=(
            "lib/QtCore.framework",
            "lib/libQt6Core.dylib",
            "lib/libQt6Core.a",
        ),
        library_patterns=(
            ("QtCore.framework", ()),
            ("Qt6Core", (".dylib", ".a")),
        ),
        framework_headers=("lib/QtCore.framework/Headers",),
        scan_include_dir=True,
        versioned_roots=(
            join(home, "Qt", "{version}", "macos"),
            join(home, "Qt", "{version}", "clang_64"),
            join(home, "Qt", "{version}", "ios"),
            join(home, "Qt", "{version}", "macx_clang_64"),
        ),
        common_roots=(
            "/usr/local/opt/qt6",
            "/usr/local/opt/qt@6",
            "/usr/local/opt/qt",
            "/opt/homebrew/opt/qt6",
            "/opt/homebrew/opt/qt@6",
            "/opt/homebrew/opt/qt",
            "/opt/local/libexec/qt6",
            "/opt/local/lib/qt6",
            "/Library/Frameworks/Qt6",
            "/Applications/Qt6",
        ),
        search_roots=("/usr", "/usr/local", "/opt", home),
        search_patterns=("libQt6Core.*", "QtCore.framework"),
    )


def _linux_profile(home: str, environ: Mapping[str, str]) -> PlatformProfile:
    join = posixpath.join
    return PlatformProfile(
        kind=LINUX,
        library_files=("lib/libQt6Core.so",),
        versioned_roots=(
            join(home, "Qt", "{version}", "gcc_64"),
            join(home, "Qt", "{version}"),
        ),
        common_roots=(
            "/usr/lib/qt6",
            "/usr/lib/x86_64-linux-gnu/qt6",
            "/usr/share/qt6",
            "/usr/local/lib/qt6",
            "/usr/local/qt6",
            "/usr/lib64/qt6",
            "/usr/lib/qt",
            "/opt/qt6",
            "/opt/Qt6",
            "/app/lib/qt6",
            "/app/lib/x86_64-linux-gnu/qt6",
        ),
        search_roots=("/usr", "/usr/local", "/opt", home),
        search_patterns=("libQt6Core.*",),
    )


_BUILDERS = {
    WINDOWS: _windows_profile,
    MACOS: _macos_profile,
    LINUX: _linux_profile,
}


def build_profile(
    kind: str | None = None,
    home: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> PlatformProfile:
    """Build the ``PlatformProfile`` for a platform kind.

    Args:
        kind: Platform kind; detected from the host when omitted. Unknown
            values fall back to the Linux conventions.
        home: Override the home directory (for testing).
        environ: Override the environment mapping (for testing).

    Returns:
        A fully populated, immutable profile. Never raises.
    """
    resolved_kind = kind if kind is not None else current_platform()
    builder = _BUILDERS.get(resolved_kind, _linux_profile)
    home_dir = str(home) if home is not None else str(Path.home())
    env = environ if environ is not None else os.environ
    return builder(home_dir, env)
