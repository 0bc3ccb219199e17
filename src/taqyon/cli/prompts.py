"""Interactive ``AnswerSource`` backed by click prompts.

Values passed on the command line pre-answer their question; ``assume_yes``
accepts the default for every remaining question and skips the manual
Qt path prompt.
"""

from __future__ import annotations

import click

from taqyon.scaffold.answers import (
    FRAMEWORKS,
    LANGUAGES,
    AnswerSource,
    ScaffoldAnswers,
    validate_project_name,
)


class ClickAnswerSource(AnswerSource):
    """Asks the user for whatever was not supplied as an option."""

    def __init__(
        self,
        project_name: str | None = None,
        scaffold_frontend: bool | None = None,
        scaffold_backend: bool | None = None,
        framework: str | None = None,
        language: str | None = None,
        assume_yes: bool = False,
    ) -> None:
        self.project_name = project_name
        self.scaffold_frontend = scaffold_frontend
        self.scaffold_backend = scaffold_backend
        self.framework = framework
        self.language = language
        self.assume_yes = assume_yes

    def _confirm(self, message: str, preset: bool | None, default: bool = True) -> bool:
        if preset is not None:
            return preset
        if self.assume_yes:
            return default
        return click.confirm(message, default=default)

    def _choose(self, message: str, preset: str | None, choices: tuple[str, ...]) -> str:
        if preset is not None:
            return preset
        if self.assume_yes:
            return choices[0]
        return click.prompt(message, type=click.Choice(choices), default=choices[0])

    def _ask_name(self) -> str:
        if self.project_name is not None:
            return self.project_name
        while True:
            name = click.prompt("Project name", type=str).strip()
            error = validate_project_name(name)
            if error is None:
                return name
            click.secho(error, fg="red", err=True)

    def collect(self) -> ScaffoldAnswers:
        name = self._ask_name()
        frontend = self._confirm("Scaffold frontend?", self.scaffold_frontend)
        framework, language = FRAMEWORKS[0], LANGUAGES[0]
        if frontend:
            framework = self._choose("Select a frontend framework", self.framework, FRAMEWORKS)
            language = self._choose("Select a frontend language", self.language, LANGUAGES)
        backend = self._confirm("Scaffold backend?", self.scaffold_backend)
        logging_on, dev_server = True, True
        if backend:
            logging_on = self._confirm("Enable logging?", None)
            dev_server = self._confirm("Enable dev server?", None)
        return ScaffoldAnswers(
            project_name=name,
            scaffold_frontend=frontend,
            frontend_framework=framework,
            frontend_language=language,
            scaffold_backend=backend,
            enable_logging=logging_on,
            enable_dev_server=dev_server,
        )

    def ask_qt_path(self) -> str:
        click.secho("\nWARNING: Qt6 was not detected automatically.", fg="yellow", err=True)
        if self.assume_yes:
            return ""
        return click.prompt(
            "Enter Qt6 installation path (or press Enter to skip)",
            default="",
            show_default=False,
        )
