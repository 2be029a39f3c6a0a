"""Command line interface (Typer + Rich).

Commands only parse arguments, call the services and render results. Exit
codes: 0 all good, 1 a number failed (invalid checksum, malformed, or no
checksum exists), 2 unusable input.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.progress import BarColumn, Progress, TextColumn, TimeRemainingColumn

from adapters.json_exporter import export_reports_json, reports_payload
from adapters.text_source import read_numbers
from cli.ui_components import build_reports_table, build_summary_panel
from core.config import AppSettings
from core.domain.category import Category
from core.domain.checksum import LEADING_LENGTH, checksum_for_leading
from core.domain.models import CheckDigits, NationalNumber
from core.log import setup_logging
from core.services.inspection import (
    LEADING_STOP,
    CountHooks,
    CountRequest,
    count_valid,
    inspect_many,
    leading_range,
    summarize,
)

app = typer.Typer(
    no_args_is_help=True,
    help="Validate and classify Norwegian national identity numbers.",
)

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


class CountScope(str, Enum):
    FH = "fh"
    D = "d"
    H = "h"
    NORMAL = "normal"
    ALL = "all"

    def category(self) -> Category | None:
        return _SCOPE_CATEGORIES[self]


_SCOPE_CATEGORIES: dict[CountScope, Category | None] = {
    CountScope.FH: Category.FH_NUMBER,
    CountScope.D: Category.D_NUMBER,
    CountScope.H: Category.H_NUMBER,
    CountScope.NORMAL: Category.NORMAL,
    CountScope.ALL: None,
}


def _settings(ctx: typer.Context) -> AppSettings:
    if isinstance(ctx.obj, AppSettings):
        return ctx.obj
    return AppSettings()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
) -> None:
    settings = AppSettings()
    setup_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@app.command()
def validate(
    ctx: typer.Context,
    numbers: Optional[List[str]] = typer.Argument(None, help="Numbers to check (11 digits each)."),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Text file with one number per line.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
    export: Optional[Path] = typer.Option(None, "--export", help="Also write a JSON report to this path."),
) -> None:
    """Check the checksum and category of each number."""

    settings = _settings(ctx)
    raws = list(numbers or [])
    if file is not None:
        from_file = read_numbers(file)
        logger.debug("Read %d numbers from %s", len(from_file), file)
        raws.extend(from_file)
    if not raws:
        _err_console.print("[red]No numbers given.[/red] Pass them as arguments or with --file.")
        raise typer.Exit(code=2)

    reports = inspect_many(raws)

    if as_json or settings.json_output:
        typer.echo(json.dumps(reports_payload(reports), ensure_ascii=False, indent=2, sort_keys=True))
    else:
        _console.print(build_reports_table(reports))
        _console.print(build_summary_panel(summarize(reports)))

    if export is not None:
        out_path = export_reports_json(reports=reports, output_path=settings.resolve_export_path(export))
        _err_console.print(f"[green]Report written to:[/green] {out_path}")

    if not all(report.ok for report in reports):
        raise typer.Exit(code=1)


@app.command()
def checksum(
    leading: str = typer.Argument(..., help="The first nine digits of a number."),
) -> None:
    """Compute the check digits for nine leading digits."""

    if len(leading) != LEADING_LENGTH or not (leading.isascii() and leading.isdigit()):
        raise typer.BadParameter("expected exactly nine digits", param_hint="LEADING")

    computed = checksum_for_leading(int(leading))
    if computed is None:
        _console.print(f"No valid check digits exist for {leading}.")
        raise typer.Exit(code=1)

    digits = CheckDigits.from_value(computed)
    _console.print(f"Check digits: {digits}")
    _console.print(f"Number: {leading}{digits}")


@app.command()
def classify(
    number: str = typer.Argument(..., help="An 11-digit number."),
) -> None:
    """Print the category of a number."""

    parsed = NationalNumber.from_string(number)
    if parsed is None:
        _err_console.print(f"[red]Not an 11-digit number:[/red] {number!r}")
        raise typer.Exit(code=2)

    status = "valid" if parsed.is_valid_checksum() else "invalid"
    _console.print(f"{parsed}: {parsed.category().value} (checksum {status})")


@app.command()
def count(
    ctx: typer.Context,
    scope: CountScope = typer.Option(
        CountScope.FH,
        "--category",
        "-c",
        case_sensitive=False,
        help="Which numbers to count.",
    ),
    start: Optional[int] = typer.Option(None, help="First leading sequence (inclusive)."),
    stop: Optional[int] = typer.Option(None, help="Last leading sequence (exclusive)."),
) -> None:
    """Count the leading sequences that complete to a valid number."""

    settings = _settings(ctx)
    category = scope.category()
    default_start, default_stop = (leading_range(category) if category is not None else None) or (0, LEADING_STOP)
    request = CountRequest(
        start=default_start if start is None else start,
        stop=default_stop if stop is None else stop,
        category=category,
    )
    try:
        request.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TimeRemainingColumn(),
        console=_err_console,
        transient=True,
    ) as progress:
        task = progress.add_task("Counting", total=request.stop - request.start)
        hooks = CountHooks(
            progress=lambda done, _total: progress.update(task, completed=done),
            progress_every=settings.count_progress_every,
        )
        found = count_valid(request, hooks)

    label = category.label() if category is not None else "numbers"
    _console.print(f"There are {found} valid {label}")


def run() -> None:
    app()
