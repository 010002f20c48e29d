# ABOUTME: CLI package for Shelfkeeper, built on Click.
# ABOUTME: Defines the root command group, configures logging, and registers subcommands.

import logging

import click

from shelfkeeper.cli.commands import demo_cmd, ls_cmd, search_cmd, simulate_cmd

LOG_FORMAT = "%(levelname)s: %(message)s"


@click.group()
@click.version_option(package_name="shelfkeeper")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging threshold for diagnostic messages on stderr.",
)
def cli(log_level: str) -> None:
    """Shelfkeeper - an in-memory library catalog and lending simulator."""
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)


cli.add_command(demo_cmd.demo)
cli.add_command(ls_cmd.ls)
cli.add_command(search_cmd.search)
cli.add_command(simulate_cmd.simulate)
