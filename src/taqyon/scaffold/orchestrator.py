"""End-to-end project scaffolding.

``ScaffoldOrchestrator`` turns a set of ``ScaffoldAnswers`` into a project
directory. It is the only consumer of the discovery subsystem: it runs
``DiscoveryEngine`` once (or ``UserPathResolver`` directly when an
override path is given), asks the ``AnswerSource`` for a manual path when
nothing was detected, and persists the outcome in ``.taqyonrc``.

Only an uncreatable project tree or a broken template aborts a run; a
missing Qt6 installation never does.
"""

from __future__ import annotations

import json
import logging
import os
import stat
from dataclasses import dataclass, field
from pathlib import Path

from taqyon.discovery import DiscoveryEngine, UserPathResolver, current_platform
from taqyon.discovery.platform_profile import WINDOWS
from taqyon.exceptions import ScaffoldError
from taqyon.scaffold import artifacts
from taqyon.scaffold.answers import AnswerSource, ScaffoldAnswers
from taqyon.scaffold.frontend import scaffold_frontend
from taqyon.scaffold.rcfile import TaqyonRC, rc_path
from taqyon.scaffold.templates import copy_tree_with_replace, template_root

logger = logging.getLogger(__name__)

# Substituted for {{qt6Path}} in backend templates when no root is known.
QT_PATH_PLACEHOLDER = "/path/to/qt6"

QT_SOURCE_OVERRIDE = "override"
QT_SOURCE_DETECTED = "detected"
QT_SOURCE_MANUAL = "manual"


@dataclass
class ScaffoldResult:
    """Outcome of a scaffold run.

    Attributes:
        project_root: The created project directory.
        qt6_path: Validated Qt6 root, or None.
        qt_source: How ``qt6_path`` was obtained (override, detected,
            manual) or None.
        rejected_qt_path: A user-supplied path that failed validation.
        build_script: Path of the generated build helper, if any.
        files: Every file written, in write order.
    """

    project_root: Path
    qt6_path: str | None = None
    qt_source: str | None = None
    rejected_qt_path: str | None = None
    build_script: Path | None = None
    files: list[Path] = field(default_factory=list)

    @property
    def needs_qt_setup(self) -> bool:
        """True when a backend was generated without a Qt6 root."""
        return self.build_script is not None and self.qt6_path is None


class ScaffoldOrchestrator:
    """Creates a Taqyon project from answers and bundled templates.

    Usage::

        orchestrator = ScaffoldOrchestrator(source)
        result = orchestrator.run(source.collect(), Path.cwd())
    """

    def __init__(
        self,
        source: AnswerSource,
        engine: DiscoveryEngine | None = None,
        resolver: UserPathResolver | None = None,
        templates: Path | None = None,
        windows: bool | None = None,
    ) -> None:
        self.source = source
        self.engine = engine if engine is not None else DiscoveryEngine()
        self.resolver = (
            resolver if resolver is not None else UserPathResolver(self.engine.validator)
        )
        self.templates = templates if templates is not None else template_root()
        self.windows = windows if windows is not None else current_platform() == WINDOWS

    def run(
        self,
        answers: ScaffoldAnswers,
        parent_dir: Path,
        qt_path_override: str | None = None,
    ) -> ScaffoldResult:
        """Scaffold a project under ``parent_dir``.

        Args:
            answers: The project choices.
            parent_dir: Directory in which ``<project_name>/`` is created.
            qt_path_override: Skip discovery and validate this path instead.

        Raises:
            ScaffoldError: If the project tree cannot be created.
            TemplateError: If a template is missing or cannot be copied.
        """
        project_root = (parent_dir / answers.project_name).resolve()
        try:
            project_root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ScaffoldError(f"Failed to create project directory {project_root}: {exc}") from exc

        result = ScaffoldResult(project_root=project_root)

        if answers.scaffold_frontend:
            result.files.extend(scaffold_frontend(answers, project_root, self.templates))
        else:
            logger.info("Frontend scaffolding skipped")

        if answers.scaffold_backend:
            self._scaffold_backend(answers, result, qt_path_override)
        else:
            logger.info("Backend scaffolding skipped")

        manifest = artifacts.package_manifest(answers, self.windows)
        result.files.append(
            self._write(project_root / "package.json", json.dumps(manifest, indent=2) + "\n")
        )
        result.files.append(
            self._write(project_root / "README.md", artifacts.readme(answers, result.qt6_path))
        )
        logger.info("Project scaffolded at %s", project_root)
        return result

    def resolve_qt_root(
        self, result: ScaffoldResult, qt_path_override: str | None = None,
    ) -> None:
        """Fill ``result.qt6_path`` from the override, discovery or the user."""
        if qt_path_override is not None:
            if not qt_path_override.strip():
                logger.debug("Blank Qt6 path override, skipping Qt setup")
                return
            root = self.resolver.resolve(qt_path_override)
            if root is not None:
                result.qt6_path, result.qt_source = root, QT_SOURCE_OVERRIDE
            else:
                result.rejected_qt_path = qt_path_override
                logger.debug("Qt6 path rejected: %s", qt_path_override)
            return

        root = self.engine.discover()
        if root is not None:
            result.qt6_path, result.qt_source = root, QT_SOURCE_DETECTED
            return

        manual = self.source.ask_qt_path()
        if not manual or not manual.strip():
            return
        root = self.resolver.resolve(manual)
        if root is not None:
            result.qt6_path, result.qt_source = root, QT_SOURCE_MANUAL
        else:
            result.rejected_qt_path = manual
            logger.debug("Qt6 path rejected: %s", manual)

    def _scaffold_backend(
        self,
        answers: ScaffoldAnswers,
        result: ScaffoldResult,
        qt_path_override: str | None,
    ) -> None:
        self.resolve_qt_root(result, qt_path_override)

        src_dir = result.project_root / "src"
        replacements = {
            "projectName": answers.project_name,
            "projectVersion": artifacts.PROJECT_VERSION,
            "qt6Path": result.qt6_path or QT_PATH_PLACEHOLDER,
            "enableLogging": "1" if answers.enable_logging else "0",
            "enableDevServer": "1" if answers.enable_dev_server else "0",
        }
        result.files.extend(
            copy_tree_with_replace(self.templates / "src", src_dir, replacements)
        )
        logger.info("Copied backend template files to %s", src_dir)

        rc_file = rc_path(result.project_root)
        TaqyonRC(qt6_path=result.qt6_path).write(rc_file)
        result.files.append(rc_file)

        script = src_dir / artifacts.build_script_name(self.windows)
        self._write(script, artifacts.build_script(result.qt6_path, self.windows))
        if not self.windows:
            mode = script.stat().st_mode
            os.chmod(script, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        result.build_script = script
        result.files.append(script)

    @staticmethod
    def _write(path: Path, content: str) -> Path:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8", newline="\n")
        except OSError as exc:
            raise ScaffoldError(f"Failed to write {path}: {exc}") from exc
        return path
