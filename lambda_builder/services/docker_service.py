"""Docker service used for housekeeping of build containers."""

import logging
from typing import Any, Optional

import docker
import docker.errors
from docker.models.containers import Container

from .exceptions import ContainerNotFoundError, DockerServiceError

logger = logging.getLogger(__name__)


class DockerService:
    """Thin wrapper around the Docker SDK client."""

    def __init__(self):
        """Initialize Docker service and test connection."""
        try:
            self.client = docker.from_env()
            self.client.ping()
        except docker.errors.DockerException as e:
            if "connection refused" in str(e).lower() or "cannot connect" in str(e).lower():
                raise DockerServiceError(
                    "Docker daemon is not running. Please start Docker Desktop or the Docker service."
                ) from e
            else:
                raise DockerServiceError(f"Failed to connect to Docker: {e}") from e

    def list_containers(
        self,
        all: bool = True,
        filters: Optional[dict[str, Any]] = None,
        labels: Optional[dict[str, str]] = None,
    ) -> list[Container]:
        """List containers with optional filters.

        Args:
            all: Include stopped containers
            filters: Docker filters
            labels: Label filters

        Returns:
            List of containers

        Raises:
            DockerServiceError: If listing fails
        """
        try:
            filter_dict = dict(filters or {})
            if labels:
                filter_dict['label'] = [f"{k}={v}" for k, v in labels.items()]

            return self.client.containers.list(all=all, filters=filter_dict)
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to list containers: {e}") from e

    def stop_container(self, container: Container) -> None:
        """Stop a running container.

        Raises:
            ContainerNotFoundError: If container not found
            DockerServiceError: If stopping fails
        """
        try:
            container.stop()
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError(f"Container '{container.name}' not found") from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to stop container: {e}") from e

    def remove_container(self, container: Container, force: bool = False) -> None:
        """Remove a container.

        Args:
            container: Container object
            force: Force remove even if running

        Raises:
            ContainerNotFoundError: If container not found
            DockerServiceError: If removal fails
        """
        try:
            container.remove(force=force)
            logger.info(f"Removed container: {container.name}")
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError(f"Container '{container.name}' not found") from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to remove container: {e}") from e
