"""Stylesheet CLI entry point: Click group with subcommands."""

import logging

import click

from stylesheet import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylesheet")
@click.option("-v", "--verbose", is_flag=True, help="Log resolution details to stderr.")
def cli(verbose: bool) -> None:
    """Stylesheet - inspect how style rules are ordered and resolved."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from stylesheet.cli.inspect import explain, inspect  # noqa: E402

cli.add_command(inspect)
cli.add_command(explain)
