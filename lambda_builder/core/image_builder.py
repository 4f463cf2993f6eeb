"""Run image building functionality."""

import logging
from pathlib import Path
from typing import Optional

from ..models.config import BuildConfig
from ..services.command_runner import CommandRunner
from ..services.exceptions import CommandNotFoundError
from .constants import CONTAINER_RUNTIME
from .exceptions import ImageBuildError

logger = logging.getLogger(__name__)


class ImageBuilder:
    """Builds the run image from an extracted build context."""

    def __init__(self, config: BuildConfig, runner: Optional[CommandRunner] = None):
        """Initialize image builder."""
        self.config = config
        self.runner = runner or CommandRunner()

    def build_args(self, context_dir: Path, dockerfile_path: Path) -> list[str]:
        """Arguments for ``docker image build``."""
        args = [
            CONTAINER_RUNTIME,
            "image",
            "build",
            "--file", str(dockerfile_path),
            "--progress", "plain",
            "--tag", self.config.resolved_image_tag,
        ]
        for label in self.config.image_labels:
            args.extend(["--label", label])
        args.append(str(context_dir))
        return args

    def build(self, context_dir: Path, dockerfile_path: Path) -> str:
        """Build the image and return its tag.

        Raises:
            ImageBuildError: If the build cannot be launched or fails
        """
        tag = self.config.resolved_image_tag
        logger.info(f"Building image {tag} from {context_dir}")
        try:
            result = self.runner.run(
                self.build_args(context_dir, dockerfile_path),
                cwd=self.config.working_directory,
                stream=not self.config.run_quiet,
            )
        except CommandNotFoundError as e:
            raise ImageBuildError(f"error building image: {e}") from e

        if result.exit_code != 0:
            if self.config.run_quiet and result.output:
                logger.error(f"Image build output:\n{result.output.rstrip()}")
            raise ImageBuildError(
                f"error building image, exit code {result.exit_code}",
                exit_code=result.exit_code,
            )
        return tag
