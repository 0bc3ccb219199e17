"""Data models for the Qt discovery module.

Contains the result types produced by ``DirectoryValidator`` and
``DiscoveryEngine``: the per-candidate validation record and the
aggregate discovery report.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking one candidate directory.

    Attributes:
        path: The candidate path as it was supplied.
        is_valid: Whether the path is a plausible Qt6 installation root.
        exists: Whether the path existed at all.
        found_markers: Marker subdirectories present (``lib``, ``include``,
            ``bin``).
        found_libraries: Qt Core library artifacts found.
        found_headers: Header tree entries found.
        checked_artifacts: False when validation stopped before the
            library and header checks (missing path or no markers).
    """

    path: str
    is_valid: bool
    exists: bool = False
    found_markers: frozenset[str] = frozenset()
    found_libraries: frozenset[str] = frozenset()
    found_headers: frozenset[str] = frozenset()
    checked_artifacts: bool = False

    def diagnostics(self) -> list[str]:
        """Render the human-readable trail of what was and was not found."""
        if not self.exists:
            return [f"Directory {self.path} does not exist"]
        lines: list[str] = []
        if self.found_markers:
            lines.append(f"Found Qt directories: {', '.join(sorted(self.found_markers))}")
        else:
            lines.append(f"No Qt directories found in {self.path}")
            lines.append("Expected to find: lib, include, bin")
            return lines
        if self.found_libraries:
            lines.append(f"Found Qt libraries: {', '.join(sorted(self.found_libraries))}")
        else:
            lines.append("No Qt Core libraries found")
        if self.found_headers:
            lines.append(f"Found Qt includes: {', '.join(sorted(self.found_headers))}")
        else:
            lines.append("No Qt include files found")
        return lines

    def to_dict(self) -> dict[str, object]:
        return {
            "path": self.path,
            "is_valid": self.is_valid,
            "exists": self.exists,
            "found_markers": sorted(self.found_markers),
            "found_libraries": sorted(self.found_libraries),
            "found_headers": sorted(self.found_headers),
        }


@dataclass
class DiscoveryReport:
    """Complete result of one discovery run.

    Attributes:
        root: The validated Qt6 root, or None when nothing validated.
        strategy: Name of the strategy that produced ``root``.
        attempts: Every validation performed, in order.
    """

    root: str | None = None
    strategy: str | None = None
    attempts: list[ValidationResult] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.root is not None

    def to_dict(self) -> dict[str, object]:
        return {
            "qt6Path": self.root,
            "strategy": self.strategy,
            "attempts": [a.to_dict() for a in self.attempts],
        }
