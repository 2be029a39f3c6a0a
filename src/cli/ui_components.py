"""Rich building blocks for CLI output.

Kept apart from the commands so tables and panels can be reused and the
commands stay about flow and exit codes.
"""

from __future__ import annotations

from typing import Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import NumberReport


def _status(report: NumberReport) -> Text:
    if not report.well_formed:
        return Text("MALFORMED", style="red")
    if report.checksum_valid:
        return Text("VALID", style="green")
    return Text("INVALID", style="yellow")


def build_reports_table(reports: Sequence[NumberReport]) -> Table:
    """One row per inspected input."""

    table = Table(title="National numbers")
    table.add_column("Input", style="cyan", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Category", style="magenta", no_wrap=True)
    table.add_column("Expected check digits", style="dim", no_wrap=True)

    for report in reports:
        if report.well_formed:
            category = report.category.value if report.category is not None else "-"
            expected = report.expected_check_digits or "none"
        else:
            category = "-"
            expected = "-"
        table.add_row(repr(report.raw), _status(report), category, expected)
    return table


def build_summary_panel(summary: dict[str, int]) -> Panel:
    body = Text()
    body.append(f"Total: {summary['total']}\n", style="bold")
    body.append(f"Valid: {summary['valid']}\n", style="green")
    body.append(f"Invalid checksum: {summary['invalid_checksum']}\n", style="yellow")
    body.append(f"Malformed: {summary['malformed']}", style="red")
    return Panel(body, title="Summary", border_style="cyan")
