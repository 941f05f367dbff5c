"""Console rendering of validation reports."""

import json

from rich.console import Console
from rich.table import Table

from manualcheck.validation.errors import ValidationReport


def render_text(report: ValidationReport, console: Console, source: str | None = None) -> None:
    """
    Print a report as a table of findings.

    Args:
        report: Report to print
        console: Target console
        source: Manual location shown in the title
    """
    if report.is_valid:
        console.print("[green]Validation OK[/green]")
        return

    title = f"{len(report.errors)} validation error(s)"
    if source:
        title += f" in {source}"

    table = Table(title=title, title_justify="left")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Path", style="cyan", overflow="fold")
    table.add_column("Kind", style="magenta", no_wrap=True)
    table.add_column("Message")

    for index, error in enumerate(report.errors, start=1):
        table.add_row(str(index), error.render_path(), error.kind.value, error.message)

    console.print(table)


def render_json(report: ValidationReport, console: Console) -> None:
    """Print a report as JSON."""
    console.print_json(json.dumps(report.to_dict()))
