"""Clean command for Lambda Builder."""

import sys

import click

from ...core.constants import EXECUTOR_LABEL_KEY
from ...services.exceptions import DockerServiceError
from ..helpers import get_docker_service


@click.command()
@click.option('--force', '-f', is_flag=True, help='Also stop and remove running build containers')
def clean(force):
    """Remove leftover build containers"""
    docker_service = get_docker_service()

    try:
        containers = docker_service.list_containers(
            all=True,
            labels={EXECUTOR_LABEL_KEY: "true"},
        )
    except DockerServiceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    removed = 0
    for container in containers:
        try:
            if container.status == 'running' and not force:
                click.echo(f"Skipping running container: {container.name}")
                continue

            if container.status == 'running':
                docker_service.stop_container(container)

            docker_service.remove_container(container, force=force)
            click.echo(f"Removed container: {container.name}")
            removed += 1
        except DockerServiceError as e:
            click.echo(f"Failed to remove container {container.name}: {e}")

    if removed > 0:
        click.echo(f"Removed {removed} build container(s)")
    else:
        click.echo("No build containers found")
