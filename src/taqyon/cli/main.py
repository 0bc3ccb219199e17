"""Taqyon CLI — Rapid cross-platform desktop app scaffolding.

Entry point for the ``taqyon`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    create-app   — Scaffold a new Qt6 + web frontend application.
    detect-qt    — Auto-detect a Qt6 installation.
    validate-qt  — Check a Qt6 installation path.
    setup-qt     — Store a Qt6 path in a project's .taqyonrc.
    test-qt      — Verify the Qt6 path stored in .taqyonrc.

Usage::

    taqyon create-app
    taqyon create-app --name demo --framework vue --language ts --yes
    taqyon --verbose detect-qt
    taqyon validate-qt ~/Qt/6.5.0
    taqyon setup-qt /opt/Qt6 --project ./demo
"""

from __future__ import annotations

import logging
import os

import click
from rich.logging import RichHandler

from taqyon import __version__
from taqyon.cli.create_app import create_app_command
from taqyon.cli.output import err_console
from taqyon.cli.qt_cmd import (
    detect_qt_command,
    setup_qt_command,
    test_qt_command,
    validate_qt_command,
)

DEBUG_ENV_VAR = "TAQYON_CLI_DEBUG"


def configure_logging(verbose: bool) -> None:
    """Route ``taqyon`` loggers to stderr; DEBUG when verbose."""
    logger = logging.getLogger("taqyon")
    logger.handlers.clear()
    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", "-d", is_flag=True, default=False, help="Enable debug logging.")
@click.option(
    "--verbose", "-v", is_flag=True, default=False,
    help="Enable verbose logging (alias for --debug).",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, verbose: bool) -> None:
    """Taqyon CLI: scaffold Qt6 desktop apps with a web frontend.

    Generates a React, Vue or Svelte frontend bridged over QWebChannel to a
    Qt6/C++ backend, and locates your Qt6 installation automatically.
    """
    enabled = debug or verbose or os.environ.get(DEBUG_ENV_VAR) == "1"
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = enabled
    configure_logging(enabled)


# Register all subcommands
cli.add_command(create_app_command)
cli.add_command(detect_qt_command)
cli.add_command(validate_qt_command)
cli.add_command(setup_qt_command)
cli.add_command(test_qt_command)
