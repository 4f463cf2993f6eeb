"""Main CLI entry point for Lambda Builder."""

import click

from .commands.build import build
from .commands.builders import builders
from .commands.clean import clean
from .helpers import configure_logging


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
def cli(debug):
    """Lambda Builder - Build lambda functions in isolated Docker environments"""
    configure_logging(debug)


# Register commands
cli.add_command(build)
cli.add_command(builders)
cli.add_command(clean)


if __name__ == '__main__':
    cli()
