"""CLI entry point: every utility as a subcommand of ``linekit``."""

import click

from linekit import __version__
from linekit.cli.commands import cat, echo, find, head, uniq, wc


@click.group()
@click.version_option(version=__version__, prog_name="linekit")
def cli() -> None:
    """Streaming text utilities: cat, head, uniq, wc, find and echo."""


cli.add_command(cat)
cli.add_command(head)
cli.add_command(uniq)
cli.add_command(wc)
cli.add_command(find)
cli.add_command(echo)


if __name__ == "__main__":
    cli()
