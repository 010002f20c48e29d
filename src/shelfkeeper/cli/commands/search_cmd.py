# ABOUTME: The `shelfkeeper search` command for exact title lookup.
# ABOUTME: Queries the title index; the match is case-sensitive and untrimmed.

from pathlib import Path

import click
from rich.console import Console

from shelfkeeper.cli.options import catalog_option
from shelfkeeper.cli.session import open_catalog

console = Console()


@click.command("search")
@click.argument("title")
@catalog_option
def search(title: str, catalog_path: Path | None) -> None:
    """Find a book by its exact title."""
    service = open_catalog(console, catalog_path)

    book = service.search_by_title(title)
    if book is None:
        console.print("[yellow]Book not found by Title.[/yellow]")
        raise SystemExit(1)

    console.print(
        f"Book found by Title: '{book.title}' by {book.author} "
        f"(Quantity: {book.total_copies})",
        markup=False,
    )
