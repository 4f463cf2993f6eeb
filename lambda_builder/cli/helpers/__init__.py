"""CLI helper functions shared by Lambda Builder commands."""

import logging
import sys
from typing import Any, NoReturn

import click
from rich.console import Console
from rich.markup import escape
from tabulate import tabulate

from lambda_builder.core.exceptions import LambdaBuilderError
from lambda_builder.services.docker_service import DockerService
from lambda_builder.services.exceptions import DockerServiceError


def configure_logging(debug: bool = False) -> None:
    """Configure root logging for a CLI invocation."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def report_build_error(error: LambdaBuilderError) -> NoReturn:
    """Print which stage failed and why, then exit non-zero."""
    console = Console(stderr=True)
    console.print(f"[red] !     {error.stage} failed:[/red] {escape(str(error))}", highlight=False)
    cause = error.__cause__
    if cause is not None and str(cause) not in str(error):
        console.print(f"       caused by: {escape(str(cause))}", highlight=False)
    sys.exit(1)


def get_docker_service() -> DockerService:
    """Initialize the Docker service, exiting with a message on failure."""
    try:
        return DockerService()
    except DockerServiceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def print_table(headers: list[str], rows: list[list[Any]],
                tablefmt: str = "simple") -> None:
    """Print a table with project-wide defaults.

    Args:
        headers: Table headers
        rows: Table rows
        tablefmt: Table format (default: "simple")
    """
    table_str = tabulate(rows, headers=headers, tablefmt=tablefmt)
    click.echo(table_str)
