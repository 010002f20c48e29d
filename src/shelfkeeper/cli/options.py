# ABOUTME: Shared Click options for Shelfkeeper CLI commands.
# ABOUTME: Provides reusable decorators for common flags like --catalog.

from pathlib import Path

import click

DEFAULT_CATALOG_PATH = Path("books.csv")

catalog_option = click.option(
    "-c",
    "--catalog",
    "catalog_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Comma-delimited book file to load (default: ./{DEFAULT_CATALOG_PATH})",
)
