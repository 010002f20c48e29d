# ABOUTME: The `shelfkeeper demo` command running a fixed lending demonstration.
# ABOUTME: Reserves a preset list of titles, then lends and returns against the catalog.

from pathlib import Path

import click
from rich.console import Console

from shelfkeeper.cli.options import catalog_option
from shelfkeeper.cli.session import Step, open_catalog, run_steps

console = Console()

DEMO_TITLES = (
    "1984",
    "1984",
    "To Kill a Mockingbird",
    "The Catcher in the Rye",
    "Pride and Prejudice",
    "Pearl and Sir Orfeo",
    "CHESS FOR YOUNG BEGINNERS",
    "Which Colour?",
    "ARE YOU MY MOTHER MINI PB (EXPORT)",
    "The Great Gatsby",
)

DEMO_STEPS = [
    *(Step("reserve", title) for title in DEMO_TITLES),
    Step("queue"),
    Step("lend"),
    Step("lend"),
    Step("lend"),
    Step("queue"),
    Step("return"),
    Step("lend"),
    Step("queue"),
]


@click.command("demo")
@catalog_option
def demo(catalog_path: Path | None) -> None:
    """Run the built-in reservation and lending demonstration."""
    service = open_catalog(console, catalog_path)
    run_steps(console, service, DEMO_STEPS)
