"""layoutcss CLI entry point: Click group with subcommands."""

import logging

import click

from layoutcss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="layoutcss")
@click.option("-v", "--verbose", is_flag=True, help="Log dropped rules and declarations")
def cli(verbose: bool) -> None:
    """layoutcss - resolve CSS stylesheets into typed layout styles."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from layoutcss.cli.check import check  # noqa: E402
from layoutcss.cli.inspect import inspect  # noqa: E402
from layoutcss.cli.resolve import resolve  # noqa: E402

cli.add_command(check)
cli.add_command(inspect)
cli.add_command(resolve)
