# ABOUTME: The `shelfkeeper simulate` command for scripted lending sessions.
# ABOUTME: Applies reserve/lend/return/queue/ls steps to a freshly loaded catalog.

from pathlib import Path

import click
from rich.console import Console

from shelfkeeper.cli.options import catalog_option
from shelfkeeper.cli.session import Step, open_catalog, parse_step, run_steps

console = Console()


def _parse_steps(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...],
) -> list[Step]:
    return [parse_step(value) for value in values]


@click.command("simulate")
@click.argument("steps", nargs=-1, required=True, callback=_parse_steps)
@catalog_option
def simulate(steps: list[Step], catalog_path: Path | None) -> None:
    """Run a lending session.

    STEPS are applied in order: reserve=<title>, lend, return, queue, ls.
    """
    service = open_catalog(console, catalog_path)
    run_steps(console, service, steps)
