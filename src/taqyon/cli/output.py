"""Rich output formatting helpers for the Taqyon CLI.

Renders discovery reports, validation diagnostics and the post-scaffold
summary with consistent styling: valid candidates green, rejected
candidates dim, missing-Qt guidance yellow.
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taqyon.discovery import DiscoveryReport, ValidationResult
from taqyon.scaffold import ScaffoldResult
from taqyon.scaffold.artifacts import qt_remediation_lines

console = Console()
err_console = Console(stderr=True)


def print_attempts(attempts: list[ValidationResult]) -> None:
    """Print a table of every candidate checked, in order."""
    if not attempts:
        console.print("[dim]No candidate directories were checked.[/dim]")
        return
    table = Table(title="Qt6 Candidates", show_header=True, header_style="bold")
    table.add_column("Path", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Markers")
    table.add_column("Libraries")
    table.add_column("Headers")
    for attempt in attempts:
        if attempt.is_valid:
            status = Text("VALID", style="bold green")
        elif not attempt.exists:
            status = Text("MISSING", style="dim")
        else:
            status = Text("INVALID", style="yellow")
        table.add_row(
            attempt.path,
            status,
            ", ".join(sorted(attempt.found_markers)) or "-",
            ", ".join(sorted(attempt.found_libraries)) or "-",
            ", ".join(sorted(attempt.found_headers)) or "-",
        )
    console.print(table)


def print_validation_trail(result: ValidationResult) -> None:
    """Print the diagnostic trail for one validated directory."""
    style = "green" if result.is_valid else "yellow"
    console.print(f"[bold]{result.path}[/bold]")
    for line in result.diagnostics():
        console.print(f"  [{style}]- {line}[/{style}]")


def print_discovery_report(report: DiscoveryReport, verbose: bool = False) -> None:
    """Print the outcome of a discovery run."""
    if report.found:
        header = Text.assemble(
            ("Qt6 found at: ", "bold"), (report.root or "", "green"),
            ("  via ", "dim"), (report.strategy or "-", "dim"),
        )
        console.print(Panel(header, title="Qt6 Detection"))
    else:
        console.print(Panel("[bold yellow]Qt6 was not detected[/bold yellow]", title="Qt6 Detection"))
        print_remediation()
    if verbose:
        print_attempts(report.attempts)


def print_remediation() -> None:
    """Print the actionable steps for a missing Qt6 installation."""
    console.print("You have three options to resolve this:")
    for number, line in enumerate(qt_remediation_lines(), start=1):
        console.print(f"  [yellow]{number}. {line}[/yellow]")


def print_scaffold_summary(result: ScaffoldResult) -> None:
    """Print what was created and what the user should do next."""
    root = result.project_root
    if result.rejected_qt_path:
        err_console.print(
            f"[yellow]WARNING: The provided Qt6 path could not be validated: "
            f"{result.rejected_qt_path}[/yellow]"
        )
        err_console.print(
            "[yellow]The project will still be created, but you'll need to "
            "configure Qt manually. See README.md for more information.[/yellow]"
        )
    if result.qt6_path:
        console.print(f"Qt6 found at: [green]{result.qt6_path}[/green]")
    if result.build_script is not None:
        console.print(f"Created build helper script: src/{result.build_script.name}")

    table = Table(title="Generated Files", show_header=False)
    table.add_column("File", style="dim")
    for path in result.files:
        table.add_row(str(path.relative_to(root)))
    console.print(table)

    console.print("\n[bold green]Project scaffolded successfully![/bold green]")
    console.print(f"Navigate to your project with: cd {root.name}")
    console.print("Run 'npm install' to install dependencies if needed")
    if result.needs_qt_setup:
        console.print("\n[bold yellow]IMPORTANT: Qt6 was not detected during scaffolding![/bold yellow]")
        print_remediation()
    console.print("\nRun 'npm start' to start development")


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout."""
    console.print_json(json.dumps(data, default=str))
