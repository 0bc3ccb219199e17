"""``taqyon create-app`` — Scaffold a new Taqyon application.

Prompts for the project name, frontend framework and language, backend
features and, when Qt6 cannot be detected, a manual Qt6 path. Options
pre-answer the matching prompts; ``--yes`` accepts every default.

Exit Codes:
    0 — Project created (with or without a Qt6 path).
    1 — The project tree or a template could not be written.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from taqyon.cli.output import err_console, print_scaffold_summary
from taqyon.cli.prompts import ClickAnswerSource
from taqyon.exceptions import TaqyonError
from taqyon.scaffold import FRAMEWORKS, LANGUAGES, ScaffoldOrchestrator


@click.command("create-app")
@click.option("--name", "project_name", default=None, help="Project name (skips the prompt).")
@click.option(
    "--qt-path",
    default=None,
    help="Qt6 installation path; bypasses auto-detection.",
)
@click.option(
    "--frontend/--no-frontend",
    "scaffold_frontend",
    default=None,
    help="Generate (or skip) the frontend.",
)
@click.option(
    "--backend/--no-backend",
    "scaffold_backend",
    default=None,
    help="Generate (or skip) the Qt backend.",
)
@click.option("--framework", type=click.Choice(FRAMEWORKS), default=None, help="Frontend framework.")
@click.option("--language", type=click.Choice(LANGUAGES), default=None, help="Frontend language.")
@click.option(
    "--directory",
    type=click.Path(file_okay=False),
    default=".",
    help="Parent directory for the new project (default: current directory).",
)
@click.option("--yes", "-y", "assume_yes", is_flag=True, default=False, help="Accept all defaults.")
def create_app_command(
    project_name: str | None,
    qt_path: str | None,
    scaffold_frontend: bool | None,
    scaffold_backend: bool | None,
    framework: str | None,
    language: str | None,
    directory: str,
    assume_yes: bool,
) -> None:
    """Scaffold a new Taqyon application.

    Creates frontend/, src/, package.json, README.md and .taqyonrc under
    a new directory named after the project.
    """
    click.echo("Taqyon CLI - Project Scaffolding")
    source = ClickAnswerSource(
        project_name=project_name,
        scaffold_frontend=scaffold_frontend,
        scaffold_backend=scaffold_backend,
        framework=framework,
        language=language,
        assume_yes=assume_yes,
    )
    try:
        answers = source.collect()
        result = ScaffoldOrchestrator(source).run(
            answers, Path(directory), qt_path_override=qt_path,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    except TaqyonError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        sys.exit(1)

    print_scaffold_summary(result)
    click.echo("Done.")
