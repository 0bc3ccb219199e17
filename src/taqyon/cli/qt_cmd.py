"""Qt6 commands: ``detect-qt``, ``validate-qt``, ``setup-qt``, ``test-qt``.

``detect-qt`` runs the full discovery chain and ``validate-qt`` checks a
single user path (with kit subdirectory fallback). ``setup-qt`` and
``test-qt`` read and write the ``qt6Path`` of an existing project's
``.taqyonrc``.

Exit Codes:
    detect-qt    0 found, 2 not found.
    validate-qt  0 valid, 1 invalid.
    setup-qt     0 written, 1 invalid path or unwritable record.
    test-qt      0 configured path validates, 1 otherwise.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from taqyon.cli.output import (
    console,
    err_console,
    print_discovery_report,
    print_json,
    print_validation_trail,
)
from taqyon.discovery import DirectoryValidator, DiscoveryEngine, UserPathResolver
from taqyon.exceptions import ConfigError
from taqyon.scaffold.rcfile import TaqyonRC, rc_path

_FORMAT = click.Choice(["text", "json"])


def _is_verbose() -> bool:
    ctx = click.get_current_context(silent=True)
    root = ctx.find_root() if ctx is not None else None
    return bool(root and root.obj and root.obj.get("verbose"))


@click.command("detect-qt")
@click.option("--format", "output_format", type=_FORMAT, default="text", help="Output format.")
def detect_qt_command(output_format: str) -> None:
    """Auto-detect a Qt6 installation on this machine.

    Tries qmake and qtpaths on PATH, QTDIR/QT_DIR/Qt6_DIR, well-known
    install locations and finally a filesystem search.
    """
    report = DiscoveryEngine().discover_with_trace()
    if output_format == "json":
        print_json(report.to_dict())
    else:
        print_discovery_report(report, verbose=_is_verbose())
    sys.exit(0 if report.found else 2)


@click.command("validate-qt")
@click.argument("path")
@click.option("--format", "output_format", type=_FORMAT, default="text", help="Output format.")
def validate_qt_command(path: str, output_format: str) -> None:
    """Check whether PATH (or a kit directory inside it) is a Qt6 root."""
    resolver = UserPathResolver(DirectoryValidator())
    root = resolver.resolve(path)
    if output_format == "json":
        print_json({
            "qt6Path": root,
            "attempts": [a.to_dict() for a in resolver.attempts],
        })
    else:
        for attempt in resolver.attempts:
            print_validation_trail(attempt)
        if root:
            console.print(f"[bold green]Valid Qt6 installation: {root}[/bold green]")
        else:
            console.print(f"[bold red]Could not validate the Qt path: {path}[/bold red]")
    sys.exit(0 if root else 1)


@click.command("setup-qt")
@click.argument("path")
@click.option(
    "--project",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Project directory containing .taqyonrc (default: current directory).",
)
@click.option("--force", is_flag=True, default=False, help="Store PATH even if it does not validate.")
def setup_qt_command(path: str, project: str, force: bool) -> None:
    """Store PATH as the project's Qt6 installation in .taqyonrc."""
    resolved = UserPathResolver().resolve(path)
    if resolved is None and not force:
        err_console.print(f"[bold red]Error:[/bold red] Not a valid Qt6 installation: {path}")
        sys.exit(1)
    rc_file = rc_path(Path(project))
    try:
        record = TaqyonRC.read(rc_file)
        record.qt6_path = resolved or path
        record.write(rc_file)
    except ConfigError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        sys.exit(1)
    console.print(f"Qt6 path updated to {record.qt6_path}")


@click.command("test-qt")
@click.option(
    "--project",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Project directory containing .taqyonrc (default: current directory).",
)
def test_qt_command(project: str) -> None:
    """Verify that the Qt6 path stored in .taqyonrc is still valid."""
    try:
        record = TaqyonRC.read(rc_path(Path(project)))
    except ConfigError as exc:
        err_console.print(f"[bold red]Error checking Qt6 installation:[/bold red] {exc}")
        sys.exit(1)
    if record.qt6_path is None:
        err_console.print("[red]Qt6 not found at configured path: Not configured[/red]")
        sys.exit(1)
    result = DirectoryValidator().validate(record.qt6_path)
    if _is_verbose():
        print_validation_trail(result)
    if not result.is_valid:
        err_console.print(f"[red]Qt6 not found at configured path: {record.qt6_path}[/red]")
        sys.exit(1)
    console.print(f"Qt6 found at: {record.qt6_path}")
