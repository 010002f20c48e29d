# ABOUTME: Console helpers shared by commands that load and drive a catalog session.
# ABOUTME: Loads the catalog file, renders inventory and queue, and runs lending steps.

from dataclasses import dataclass
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shelfkeeper.cli.options import DEFAULT_CATALOG_PATH
from shelfkeeper.core.loader import load_catalog
from shelfkeeper.core.service import CatalogService

STEP_ACTIONS = ("reserve", "lend", "return", "queue", "ls")


@dataclass(frozen=True)
class Step:
    """One action in a lending session. Only reserve carries a title."""

    action: str
    title: str | None = None


def parse_step(text: str) -> Step:
    """Parse 'reserve=<title>', 'lend', 'return', 'queue', or 'ls'.

    Raises:
        click.BadParameter: If the step is not recognised.
    """
    action, sep, title = text.partition("=")
    action = action.strip().lower()

    if action == "reserve":
        if not sep or not title.strip():
            raise click.BadParameter(f"'{text}': reserve needs a title, e.g. reserve=Dune")
        return Step("reserve", title.strip())

    if action in STEP_ACTIONS and not sep:
        return Step(action)

    raise click.BadParameter(
        f"'{text}': expected one of reserve=<title>, lend, return, queue, ls"
    )


def open_catalog(console: Console, catalog_path: Path | None) -> CatalogService:
    """Build a CatalogService from a file, reporting load problems on the console."""
    path = catalog_path or DEFAULT_CATALOG_PATH
    service = CatalogService()
    result = load_catalog(path, service)

    if result.file_error is not None:
        detail = escape(f"{path} ({result.file_error})")
        console.print(f"[red]Error opening file:[/red] {detail}")
        return service

    if result.error_details:
        console.print(f"[yellow]{result.rejected} row(s) rejected:[/yellow]")
        for line_number, line in result.error_details:
            console.print(f"  [dim]line {line_number}:[/dim] {escape(line)}")

    return service


def print_inventory(console: Console, service: CatalogService) -> None:
    """Print the current inventory as a Rich table."""
    books = service.list_books()

    if not books:
        console.print("[yellow]No books in the catalog.[/yellow]")
        return

    table = Table()
    table.add_column("ISBN", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Price", justify="right")
    table.add_column("Copies", justify="right")
    table.add_column("Borrowed", justify="right")

    for book in books:
        table.add_row(
            escape(book.identifier),
            escape(book.title),
            escape(book.author) or "[dim]unknown[/dim]",
            f"{book.price:.2f}",
            str(book.total_copies),
            str(book.borrowed_count),
        )

    console.print(table)
    console.print(f"\n[dim]{len(books)} book(s)[/dim]")


def print_reservations(console: Console, service: CatalogService) -> None:
    pending = service.reservations()
    if not pending:
        console.print("Current reservations: [dim]none[/dim]")
        return
    console.print("Current reservations: " + " | ".join(pending), markup=False)


def run_steps(console: Console, service: CatalogService, steps: list[Step]) -> None:
    """Apply steps in order, printing the outcome of each."""
    for step in steps:
        if step.action == "reserve":
            service.reserve_book(step.title or "")
            console.print(f"Reserved: '{step.title}'.", markup=False)
        elif step.action == "lend":
            lent = service.lend_book()
            console.print(lent.message, style=None if lent.ok else "yellow", markup=False)
        elif step.action == "return":
            returned = service.return_book()
            console.print(returned.message, style=None if returned.ok else "yellow", markup=False)
        elif step.action == "queue":
            print_reservations(console, service)
        elif step.action == "ls":
            print_inventory(console, service)
