from __future__ import annotations

from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sales_crud.domain.models import Record
from sales_crud.operations.abstract import OperationResult


def _format_revenue(value: Optional[float]) -> str:
    return "-" if value is None else repr(value)


def _format_name(value: Optional[str]) -> str:
    return "-" if value is None else escape(value)


def print_menu(console: Console, entries: Iterable[tuple[int, str]]) -> None:
    """Render the numbered menu."""
    console.print("[bold]CRUD operations[/bold]")
    for number, label in entries:
        console.print(f"{number} - {escape(label)}")


def print_records(records: list[Record], console: Optional[Console] = None) -> None:
    """
    Render records as a rich table in store order.
    """
    console = console or Console()

    if not records:
        console.print("[yellow]No records found.[/yellow]")
        return

    table = Table(
        title="Sales Records",
        box=box.ROUNDED,
        caption=f"{len(records)} record(s)",
    )
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="magenta")
    table.add_column("Revenue", justify="right", style="green")

    for record in records:
        table.add_row(escape(record.id), _format_name(record.name), _format_revenue(record.revenue))

    console.print(table)


def print_result(result: OperationResult, console: Optional[Console] = None) -> None:
    """
    Report the outcome of a single operation.

    Failed operations print their error in red; successful ones print what the
    store returned (new id, updated record, delete count, or the records table).
    """
    console = console or Console()

    if not result.get("ok"):
        console.print(f"[red]{escape(result.get('error') or 'Operation failed')}[/red]")
        return

    operation = result.get("operation")
    if operation == "create":
        console.print(f"Created record: [cyan]{escape(str(result.get('record_id')))}[/cyan]")
    elif operation == "read":
        print_records(result.get("records", []), console)
    elif operation == "update":
        record = result["record"]
        console.print(
            f"Updated record: [cyan]{escape(record.id)}[/cyan] "
            f"name={_format_name(record.name)} revenue={_format_revenue(record.revenue)}"
        )
    elif operation == "delete":
        console.print(f"Successfully deleted: {result.get('deleted_count', 0)}")


__all__ = ["print_menu", "print_records", "print_result"]
