"""Build pipeline.

Stages run strictly in order: build container, archive extraction, handler
resolution, Procfile generation and, when enabled, the run image build.
The first failing stage aborts the build. The scratch build directory and
the temporary Dockerfile are removed on every exit path.
"""

import logging
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click

from ..models.config import BuildConfig, InvocationOptions
from ..services.command_runner import CommandRunner
from .artifact_extractor import extract_archive
from .builders import Builder
from .config_resolver import ConfigResolver
from .constants import ARCHIVE_FILE_NAME, TEMP_PREFIX
from .container_executor import ContainerExecutor
from .dockerfile_generator import DockerfileGenerator
from .exceptions import ImageBuildError
from .handler_resolver import resolve_handler
from .image_builder import ImageBuilder
from .procfile_writer import write_procfile_if_needed

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outcome of a successful build.

    build_dir is the scratch directory the archive was extracted into; it
    no longer exists once the pipeline returns.
    """

    builder: str
    handler: str
    archive_path: Path
    build_dir: Path
    procfile_written: bool = False
    image_tag: Optional[str] = None


class BuildPipeline:
    """Runs every build stage for one application."""

    def __init__(self, config: BuildConfig, builder: Builder, runner: Optional[CommandRunner] = None):
        self.config = config
        self.builder = builder
        self.runner = runner or CommandRunner()
        self.executor = ContainerExecutor(self.runner)
        self.dockerfile_generator = DockerfileGenerator(config)
        self.image_builder = ImageBuilder(config, self.runner)

    @property
    def archive_path(self) -> Path:
        return self.config.working_directory / ARCHIVE_FILE_NAME

    def execute(self) -> BuildResult:
        """Run the pipeline.

        Raises:
            LambdaBuilderError: From the first stage that fails
        """
        config = self.config
        click.echo(f"=====> Building app with {self.builder.name.value} builder")
        click.echo(f"       Using build image {config.build_image}")
        self.executor.run_script(self.builder.build_script, config)

        with tempfile.TemporaryDirectory(prefix=TEMP_PREFIX) as scratch:
            build_dir = Path(scratch)
            click.echo(f"-----> Extracting {ARCHIVE_FILE_NAME} into build context dir")
            extract_archive(self.archive_path, build_dir)

            handler = resolve_handler(build_dir, self.builder, config)
            procfile_written = write_procfile_if_needed(
                handler, [config.working_directory, build_dir], config
            )

            image_tag = None
            if config.generate_run_image:
                image_tag = self.build_run_image(build_dir, handler)

        logger.debug(f"Removed build context dir {scratch}")
        return BuildResult(
            builder=self.builder.name.value,
            handler=handler,
            archive_path=self.archive_path,
            build_dir=build_dir,
            procfile_written=procfile_written,
            image_tag=image_tag,
        )

    def build_run_image(self, build_dir: Path, handler: str) -> str:
        """Render a temporary Dockerfile and build the run image from build_dir.

        Raises:
            ImageBuildError: If the Dockerfile cannot be written or the build fails
        """
        click.echo("=====> Building image")
        click.echo("       Generating temporary Dockerfile")
        try:
            dockerfile = tempfile.NamedTemporaryFile(
                mode="w", prefix=TEMP_PREFIX, suffix=".Dockerfile", delete=False
            )
        except OSError as e:
            raise ImageBuildError(f"error generating temporary Dockerfile: {e}") from e

        dockerfile_path = Path(dockerfile.name)
        try:
            try:
                with dockerfile:
                    dockerfile.write(self.dockerfile_generator.render(handler))
            except OSError as e:
                raise ImageBuildError(f"error writing Dockerfile: {e}") from e

            click.echo(f"       Executing build of {self.config.resolved_image_tag}")
            return self.image_builder.build(build_dir, dockerfile_path)
        finally:
            dockerfile_path.unlink(missing_ok=True)


def run_build(options: InvocationOptions, runner: Optional[CommandRunner] = None) -> BuildResult:
    """Resolve configuration, select a builder and run the pipeline."""
    config, builder = ConfigResolver(options).resolve()
    return BuildPipeline(config, builder, runner).execute()
