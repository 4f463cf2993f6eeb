"""Service layer for external processes and the Docker daemon."""

from .command_runner import CommandResult, CommandRunner
from .docker_service import DockerService
from .exceptions import (
    ServiceError,
    CommandNotFoundError,
    DockerServiceError,
    ContainerNotFoundError,
)

__all__ = [
    "CommandResult",
    "CommandRunner",
    "DockerService",
    "ServiceError",
    "CommandNotFoundError",
    "DockerServiceError",
    "ContainerNotFoundError",
]
