"""
Human-readable rendering of records.

The `format_*` functions are pure: one record in, one display line out. The
table helpers and `print_results` build rich renderables for the CLI.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from recordkeeper.domain.models import (
    InventoryItem,
    Patient,
    Prescription,
    Student,
    Transaction,
)
from recordkeeper.finance import format_money

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"


def format_transaction(transaction: Transaction) -> str:
    return (
        f"Transaction {transaction.id}: {transaction.category} "
        f"{format_money(transaction.amount)} on {transaction.date:{TIMESTAMP_FORMAT}}"
    )


def format_patient(patient: Patient) -> str:
    return f"[{patient.id}] {patient.name}, Age: {patient.age}, Gender: {patient.gender}"


def format_prescription(prescription: Prescription) -> str:
    return (
        f"Presc[{prescription.id}] {prescription.medication_name} "
        f"(Issued: {prescription.date_issued:{DATE_FORMAT}})"
    )


def format_inventory_item(item: InventoryItem) -> str:
    return (
        f"ID: {item.id}, Name: {item.name}, Qty: {item.quantity}, "
        f"Date Added: {item.date_added:{TIMESTAMP_FORMAT}}"
    )


def format_student(student: Student) -> str:
    return (
        f"{student.full_name} (ID: {student.id}): "
        f"Score = {student.score}, Grade = {student.grade}"
    )


def inventory_table(items: Iterable[InventoryItem]) -> Table:
    table = Table(title="Inventory Items", box=box.ROUNDED)
    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="magenta")
    table.add_column("Qty", justify="right", style="green")
    table.add_column("Date Added", style="dim")
    for item in items:
        table.add_row(
            str(item.id), item.name, f"{item.quantity:,}", f"{item.date_added:{TIMESTAMP_FORMAT}}"
        )
    return table


def student_table(students: Iterable[Student]) -> Table:
    table = Table(title="Student Results", box=box.ROUNDED)
    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="magenta")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Grade", justify="center", style="bold")
    for student in students:
        table.add_row(str(student.id), student.full_name, str(student.score), student.grade)
    return table


def print_results(results: List[Dict[str, Any]], console: Optional[Console] = None) -> None:
    """
    Print the report lines of each demo run, or its error.

    Failed demos are shown in red after their name; successful ones list
    their lines under a bold heading.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    for res in results:
        name = res.get("demo", "unknown")
        if res.get("error"):
            console.print(f"[bold]{name}[/bold]: [red]{escape(str(res['error']))}[/red]")
            continue
        console.print(f"[bold]{name}[/bold] ({res.get('records', 0)} records)")
        for line in res.get("lines", []):
            # Report lines contain brackets like "[1]" that rich would treat as markup.
            console.print(f"  {line}", markup=False, highlight=False)
        console.print()


__all__ = [
    "format_transaction",
    "format_patient",
    "format_prescription",
    "format_inventory_item",
    "format_student",
    "inventory_table",
    "student_table",
    "print_results",
]
