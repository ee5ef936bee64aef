"""Main CLI entry point for grit."""

import logging
import sys

import click
from colorama import init

from grit import __version__
from grit.cli.output import BANNER
from grit.cli.commands import init_cmd, cat_file_cmd, hash_object_cmd

# Initialize colorama for cross-platform colored output
init(autoreset=True)


def configure_logging(level: int = logging.DEBUG) -> None:
    """Send grit log records to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger('grit').setLevel(level)


class GritGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=GritGroup)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Log storage details to stderr')
def cli(verbose):
    if verbose:
        configure_logging(logging.DEBUG)


# Register commands
cli.add_command(init_cmd)
cli.add_command(cat_file_cmd)
cli.add_command(hash_object_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
