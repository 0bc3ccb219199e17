"""User choices driving a scaffold run.

``ScaffoldAnswers`` is the fixed set of answers the orchestrator needs.
An ``AnswerSource`` supplies them; the CLI implements one with click
prompts, tests implement one with canned values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

FRAMEWORKS: tuple[str, ...] = ("react", "vue", "svelte")
LANGUAGES: tuple[str, ...] = ("js", "ts")

FRAMEWORK_LABELS: dict[str, str] = {"react": "React", "vue": "Vue", "svelte": "Svelte"}


def validate_project_name(name: str) -> str | None:
    """Return an error message for a blank project name, else None."""
    if not name.strip():
        return "Project name is required."
    return None


@dataclass(frozen=True)
class ScaffoldAnswers:
    """Everything the user chose for a new project.

    Attributes:
        project_name: Directory, CMake project and executable name.
        scaffold_frontend: Generate ``frontend/``.
        frontend_framework: One of ``FRAMEWORKS`` (ignored without frontend).
        frontend_language: One of ``LANGUAGES`` (ignored without frontend).
        scaffold_backend: Generate the Qt application under ``src/``.
        enable_logging: Backend logging toggle baked into the template.
        enable_dev_server: Backend dev-server toggle baked into the template.
    """

    project_name: str
    scaffold_frontend: bool = True
    frontend_framework: str = "react"
    frontend_language: str = "js"
    scaffold_backend: bool = True
    enable_logging: bool = True
    enable_dev_server: bool = True

    def __post_init__(self) -> None:
        error = validate_project_name(self.project_name)
        if error:
            raise ValueError(error)
        if self.frontend_framework not in FRAMEWORKS:
            raise ValueError(f"Unknown frontend framework: {self.frontend_framework}")
        if self.frontend_language not in LANGUAGES:
            raise ValueError(f"Unknown frontend language: {self.frontend_language}")

    @property
    def frontend_template(self) -> str:
        """Template directory name, e.g. ``react-ts``."""
        return f"{self.frontend_framework}-{self.frontend_language}"


class AnswerSource(ABC):
    """Supplies scaffold answers, and a manual Qt path when detection fails."""

    @abstractmethod
    def collect(self) -> ScaffoldAnswers:
        """Gather the project choices."""

    @abstractmethod
    def ask_qt_path(self) -> str:
        """Ask for a Qt6 installation path. Empty string means skip."""
