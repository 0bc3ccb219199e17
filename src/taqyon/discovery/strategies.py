"""Candidate-producing strategies for Qt6 discovery.

Each strategy yields candidate installation roots from one source of
evidence. Strategies never validate and never raise: missing tools,
non-zero exits, timeouts and permission errors are logged at DEBUG and
end that strategy's candidate stream.

Strategies (in ``DiscoveryEngine`` order):
    locator-tool    ``qmake6`` / ``qmake`` on PATH, two levels up.
    query-tool      ``qtpaths6 --query=QT_INSTALL_PREFIX``.
    env-var         ``QTDIR``, ``QT_DIR``, ``Qt6_DIR``.
    well-known      Installer, Homebrew and distro locations per version.
    fs-search       ``find`` / PowerShell search for the Core library.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import time
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath

from taqyon.discovery.platform_profile import QT_VERSIONS, PlatformProfile

logger = logging.getLogger(__name__)

# Wall-clock limits for external processes (seconds). SEARCH_TIMEOUT
# bounds the whole filesystem search, not each search root.
TOOL_TIMEOUT: float = 5.0
SEARCH_TIMEOUT: float = 10.0

LOCATOR_TOOLS: tuple[str, ...] = ("qmake6", "qmake")
QUERY_TOOLS: tuple[str, ...] = ("qtpaths6", "qtpaths")
QUERY_PREFIX_ARG = "--query=QT_INSTALL_PREFIX"

QT_ENV_VARS: tuple[str, ...] = ("QTDIR", "QT_DIR", "Qt6_DIR")

_ROOT_SEGMENTS = ("lib", "include")


def run_tool(
    args: Sequence[str],
    timeout: float = TOOL_TIMEOUT,
    require_success: bool = True,
) -> str | None:
    """Run an external tool without stdin and return its stdout.

    Args:
        args: Command and arguments. No shell is involved.
        timeout: Seconds before the child is killed.
        require_success: Discard output when the exit status is non-zero.

    Returns:
        Captured stdout, or None on any failure.
    """
    try:
        proc = subprocess.run(
            list(args),
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        logger.debug("Timed out after %.1fs: %s", timeout, args[0])
        return None
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("Could not run %s: %s", args[0], exc)
        return None
    if require_success and proc.returncode != 0:
        logger.debug("%s exited with status %d", args[0], proc.returncode)
        return None
    return proc.stdout


def _which(name: str) -> str | None:
    try:
        found = shutil.which(name)
    except OSError:
        return None
    if not found:
        return None
    return found.strip().strip("\"'") or None


class DiscoveryStrategy(ABC):
    """One source of candidate Qt6 installation roots."""

    name: str = "strategy"

    @abstractmethod
    def candidates(self) -> Iterator[str]:
        """Yield candidate roots in preference order."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class LocatorToolStrategy(DiscoveryStrategy):
    """Derive roots from ``qmake`` executables found on PATH.

    ``qmake`` lives in ``<root>/bin``, so the root is two levels above the
    executable. When the PATH entry is a symlink (``/usr/bin/qmake6`` on
    Debian), the root derived from its resolved target is tried next.
    """

    name = "locator-tool"

    def __init__(self, tools: Sequence[str] = LOCATOR_TOOLS) -> None:
        self.tools = tuple(tools)

    def candidates(self) -> Iterator[str]:
        for tool in self.tools:
            found = _which(tool)
            if found is None:
                logger.debug("%s not found on PATH", tool)
                continue
            exe = Path(found)
            derived = str(exe.parent.parent)
            logger.debug("Found %s at %s", tool, exe)
            yield derived
            try:
                resolved = str(exe.resolve().parent.parent)
            except (OSError, RuntimeError):
                continue
            if resolved != derived:
                yield resolved


class QueryToolStrategy(DiscoveryStrategy):
    """Ask ``qtpaths`` for its installation prefix."""

    name = "query-tool"

    def __init__(
        self, tools: Sequence[str] = QUERY_TOOLS, timeout: float = TOOL_TIMEOUT,
    ) -> None:
        self.tools = tuple(tools)
        self.timeout = timeout

    def candidates(self) -> Iterator[str]:
        for tool in self.tools:
            found = _which(tool)
            if found is None:
                logger.debug("%s not found on PATH", tool)
                continue
            output = run_tool([found, QUERY_PREFIX_ARG], timeout=self.timeout)
            prefix = output.strip() if output else ""
            if prefix:
                logger.debug("%s reports prefix %s", tool, prefix)
                yield prefix


class EnvVarStrategy(DiscoveryStrategy):
    """Read installation roots from Qt environment variables."""

    name = "env-var"

    def __init__(
        self,
        variables: Sequence[str] = QT_ENV_VARS,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.variables = tuple(variables)
        self.environ = environ

    def candidates(self) -> Iterator[str]:
        env = self.environ if self.environ is not None else os.environ
        for var in self.variables:
            value = env.get(var, "").strip()
            if value:
                logger.debug("$%s=%s", var, value)
                yield value


class WellKnownPathStrategy(DiscoveryStrategy):
    """Try the platform's conventional installation directories."""

    name = "well-known"

    def __init__(
        self, profile: PlatformProfile, versions: Sequence[str] = QT_VERSIONS,
    ) -> None:
        self.profile = profile
        self.versions = tuple(versions)

    def candidates(self) -> Iterator[str]:
        yield from self.profile.well_known_candidates(self.versions)


class FilesystemSearchStrategy(DiscoveryStrategy):
    """Best-effort native file search for the Qt Core library.

    Runs ``find`` on POSIX hosts and PowerShell ``Get-ChildItem`` on
    Windows, one search root at a time. All roots share a single
    ``timeout`` budget; roots left when it runs out are skipped.
    """

    name = "fs-search"

    def __init__(
        self, profile: PlatformProfile, timeout: float = SEARCH_TIMEOUT,
    ) -> None:
        self.profile = profile
        self.timeout = timeout

    def _pure_path(self, text: str) -> PurePath:
        if self.profile.is_windows:
            return PureWindowsPath(text)
        return PurePosixPath(text)

    def search_command(self, search_root: str) -> list[str]:
        """Build the argv that prints matching paths under ``search_root``."""
        patterns = self.profile.search_patterns
        if self.profile.is_windows:
            script = (
                f'Get-ChildItem -Path "{search_root}" -Filter "{patterns[0]}" '
                "-Recurse -ErrorAction SilentlyContinue "
                "| Select-Object -First 1 -ExpandProperty FullName"
            )
            return ["powershell", "-NoProfile", "-NonInteractive", "-Command", script]
        expr: list[str] = []
        for pattern in patterns:
            if expr:
                expr.append("-o")
            expr.extend(["-name", pattern])
        return ["find", search_root, "(", *expr, ")", "-print", "-quit"]

    def root_from_hit(self, hit: str) -> str | None:
        """Strip the trailing ``lib``/``include`` segment from a search hit.

        Returns:
            The directory above the last ``lib`` or ``include`` segment. On
            Windows, a hit without such a segment is ascended two levels.
        """
        path = self._pure_path(hit)
        parents = list(path.parents)
        for parent in parents:
            if parent.name in _ROOT_SEGMENTS:
                return str(parent.parent)
        if self.profile.is_windows and len(parents) >= 2:
            return str(parents[1])
        return None

    def candidates(self) -> Iterator[str]:
        deadline = time.monotonic() + self.timeout
        for search_root in self.profile.search_roots:
            try:
                if not Path(search_root).is_dir():
                    continue
            except OSError:
                continue
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                logger.debug("Search budget spent, skipping %s", search_root)
                return
            output = run_tool(
                self.search_command(search_root),
                timeout=remaining,
                require_success=False,
            )
            lines = [line.strip() for line in (output or "").splitlines() if line.strip()]
            if not lines:
                continue
            root = self.root_from_hit(lines[0])
            if root:
                logger.debug("Search hit %s -> %s", lines[0], root)
                yield root


def default_strategies(
    profile: PlatformProfile,
    environ: Mapping[str, str] | None = None,
) -> list[DiscoveryStrategy]:
    """Build the standard strategy list in preference order."""
    return [
        LocatorToolStrategy(),
        QueryToolStrategy(),
        EnvVarStrategy(environ=environ),
        WellKnownPathStrategy(profile),
        FilesystemSearchStrategy(profile),
    ]
