from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console

from recordkeeper.config import get_settings
from recordkeeper.demos.finance import FinanceDemo
from recordkeeper.demos.healthcare import HealthcareDemo
from recordkeeper.demos.inventory import InventoryDemo
from recordkeeper.domain.models import InventoryItem
from recordkeeper.exceptions import (
    CorruptDataError,
    InvalidScoreFormatError,
    MalformedRecordError,
    MissingFieldError,
    RecordKeeperError,
    StorageIOError,
)
from recordkeeper.grading import read_students, write_report
from recordkeeper.persistence import FileBackedStore
from recordkeeper.reporter import inventory_table, print_results, student_table
from recordkeeper.runner import available_demos, run_demos
from recordkeeper.utils.logging import configure_logging

app = typer.Typer(help="recordkeeper: record store, grouping, and persistence demos.")
console = Console()


@app.callback()
def _setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)


def _fail(exc: RecordKeeperError) -> NoReturn:
    if isinstance(exc, InvalidScoreFormatError):
        label = "Score format error"
    elif isinstance(exc, MissingFieldError):
        label = "Missing field error"
    elif isinstance(exc, MalformedRecordError):
        label = "Format error"
    elif isinstance(exc, CorruptDataError):
        label = "Corrupt data file"
    elif isinstance(exc, StorageIOError):
        label = "File error"
    else:
        label = "Error"
    typer.echo(f"{label}: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} data_dir={settings.data_dir} "
        f"inventory={settings.inventory_file} students={settings.students_file} "
        f"report={settings.report_file} | "
        f"account={settings.account_number} opening_balance={settings.opening_balance}"
    )


@app.command()
def run(
    demo: str = typer.Option(
        "all",
        "--demo",
        "-d",
        help="Demo to run (finance, grading, healthcare, inventory, all, or list).",
    ),
) -> None:
    """
    Run one or all demos with their default inputs.
    """
    if demo == "list":
        typer.echo("Available demos: " + ", ".join(available_demos()))
        return

    try:
        results = run_demos([demo])
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    print_results(results, console=console)
    if any(r.get("error") for r in results):
        raise typer.Exit(code=1)


@app.command()
def finance() -> None:
    """
    Process the sample transactions against the configured savings account.
    """
    result = FinanceDemo().execute(get_settings())
    for line in result["lines"]:
        typer.echo(line)


@app.command()
def health(
    patient_id: Optional[int] = typer.Option(
        None,
        "--patient-id",
        "-p",
        help="Patient whose prescriptions to show (default from settings).",
    ),
) -> None:
    """
    List patients and the prescriptions of one patient.
    """
    result = HealthcareDemo().execute(get_settings(), patient_id=patient_id)
    for line in result["lines"]:
        typer.echo(line)


@app.command()
def inventory(
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Inventory JSON file (default from settings).",
    ),
    show_only: bool = typer.Option(
        False,
        "--show-only",
        help="Load and list the saved items without seeding and saving first.",
    ),
) -> None:
    """
    Save the sample inventory and reload it as a new session.
    """
    settings = get_settings()
    path = file or settings.resolve(settings.inventory_file)
    store = FileBackedStore(path, InventoryItem)
    try:
        if not show_only:
            writer = FileBackedStore(path, InventoryItem)
            InventoryDemo().seed(writer)
            writer.save()
            typer.echo(f"Data saved to {path}")
        if not store.load():
            typer.echo("No saved data file found.")
    except RecordKeeperError as exc:
        _fail(exc)

    items = store.get_all()
    if not items:
        typer.echo("No inventory items found.")
        return
    console.print(inventory_table(items))


@app.command()
def grades(
    input_path: Path = typer.Argument(..., help="Delimited student file (id,full_name,score)."),
    output_path: Path = typer.Argument(..., help="Where to write the graded report."),
    show: bool = typer.Option(False, "--show", help="Also print the results as a table."),
) -> None:
    """
    Grade every student in INPUT_PATH and write the report to OUTPUT_PATH.
    """
    try:
        students = read_students(input_path)
        write_report(students, output_path)
    except RecordKeeperError as exc:
        _fail(exc)

    if show:
        console.print(student_table(students))
    typer.echo(f"Report generated successfully at {output_path}")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
