# ABOUTME: The `shelfkeeper ls` command for listing the loaded inventory.
# ABOUTME: Displays a Rich table of every book read from the catalog file.

from pathlib import Path

import click
from rich.console import Console

from shelfkeeper.cli.options import catalog_option
from shelfkeeper.cli.session import open_catalog, print_inventory

console = Console()


@click.command("ls")
@catalog_option
def ls(catalog_path: Path | None) -> None:
    """List all books in the catalog file."""
    service = open_catalog(console, catalog_path)
    print_inventory(console, service)
