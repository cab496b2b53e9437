"""usercss CLI entry point: Click group with subcommands."""

import logging

import click

from usercss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="usercss")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """usercss - inspect, validate and update UserCSS style headers."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from usercss.cli.inspect import inspect  # noqa: E402
from usercss.cli.update_url import set_update_url  # noqa: E402
from usercss.cli.validate import validate  # noqa: E402

cli.add_command(inspect)
cli.add_command(validate)
cli.add_command(set_update_url)
