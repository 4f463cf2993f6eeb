"""Runs a builder's script inside a disposable build container."""

import logging
from typing import Optional

from ..models.config import BuildConfig
from ..services.command_runner import CommandRunner
from ..services.exceptions import CommandNotFoundError
from .constants import (
    BUILD_ZIP_ENV,
    CONTAINER_RUNTIME,
    EXECUTOR_LABEL,
    EXECUTOR_NAME_PREFIX,
    SCRIPT_SHELL,
    TASK_MOUNT_PATH,
)
from .exceptions import BuildExecutionError, BuildFailedError

logger = logging.getLogger(__name__)


def executor_container_name(identifier: str) -> str:
    """Name of the build container for a build identifier."""
    return f"{EXECUTOR_NAME_PREFIX}-{identifier}"


class ContainerExecutor:
    """Executes build scripts in the build image."""

    def __init__(self, runner: Optional[CommandRunner] = None):
        self.runner = runner or CommandRunner()

    def build_args(self, script: str, config: BuildConfig) -> list[str]:
        """Arguments for ``docker container run``."""
        args = [
            CONTAINER_RUNTIME,
            "container",
            "run",
            "--rm",
            "--env", BUILD_ZIP_ENV,
            "--label", EXECUTOR_LABEL,
            "--name", executor_container_name(config.identifier),
            "--volume", f"{config.working_directory}:{TASK_MOUNT_PATH}",
        ]
        for env_pair in config.build_env:
            args.extend(["--env", env_pair])
        args.append(config.build_image)
        args.extend(SCRIPT_SHELL)
        args.append(script)
        return args

    def run_script(self, script: str, config: BuildConfig) -> None:
        """Run script in a build container and wait for it to finish.

        Raises:
            BuildExecutionError: If the container cannot be launched
            BuildFailedError: If the container exits non-zero
        """
        args = self.build_args(script, config)
        logger.info(f"Starting build container {executor_container_name(config.identifier)}")
        try:
            result = self.runner.run(
                args,
                cwd=config.working_directory,
                stream=not config.run_quiet,
            )
        except CommandNotFoundError as e:
            raise BuildExecutionError(f"error executing builder: {e}") from e

        if result.exit_code != 0:
            if config.run_quiet and result.output:
                logger.error(f"Build output:\n{result.output.rstrip()}")
            raise BuildFailedError(result.exit_code)
