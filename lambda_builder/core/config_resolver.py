"""Build configuration resolution.

Precedence for builder, build image and run image, highest first:
explicit invocation option, lambda.yml, builder default.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

import yaml
from pydantic import ValidationError

from ..models.config import BuildConfig, InvocationOptions, ProjectOverride
from .builders import BUILDERS, Builder
from .constants import OVERRIDE_FILE_NAME
from .detector import detect_builder
from .exceptions import ConfigError

logger = logging.getLogger(__name__)


def read_project_override(working_directory: Path) -> ProjectOverride:
    """Read lambda.yml from working_directory.

    A missing or empty file yields an empty override. This only reads, so
    it is safe to call repeatedly.

    Raises:
        ConfigError: If the file exists but cannot be read or parsed
    """
    override_path = working_directory / OVERRIDE_FILE_NAME
    if not override_path.is_file():
        return ProjectOverride()

    try:
        data = yaml.safe_load(override_path.read_text())
    except OSError as e:
        raise ConfigError(f"error reading {OVERRIDE_FILE_NAME}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"error parsing {OVERRIDE_FILE_NAME}: {e}") from e

    if data is None:
        return ProjectOverride()
    if not isinstance(data, dict):
        raise ConfigError(f"error parsing {OVERRIDE_FILE_NAME}: expected a mapping")

    try:
        return ProjectOverride(**data)
    except ValidationError as e:
        raise ConfigError(f"invalid {OVERRIDE_FILE_NAME}: {e}") from e


def choose(explicit: Optional[str], override: Optional[str], default: Optional[str] = None) -> Optional[str]:
    """First non-empty value of explicit, override, default."""
    if explicit:
        return explicit
    if override:
        return override
    return default


class ConfigResolver:
    """Merges invocation options with lambda.yml and builder defaults."""

    def __init__(self, options: InvocationOptions, registry: Tuple[Builder, ...] = BUILDERS):
        self.options = options
        self.registry = registry

    def resolve(self) -> Tuple[BuildConfig, Builder]:
        """Resolve the configuration and select the builder.

        Returns:
            Tuple of (config, builder)

        Raises:
            ConfigError: If the working directory or lambda.yml is invalid
            UnknownBuilderError: If the selected builder name is not registered
            NoBuilderDetectedError: If no builder matches the working directory
        """
        options = self.options
        if options.working_directory is None:
            raise ConfigError("working directory must not be empty")
        working_directory = Path(options.working_directory)
        if not working_directory.is_dir():
            raise ConfigError(f"working directory '{working_directory}' does not exist")

        override = read_project_override(working_directory)
        builder = detect_builder(
            working_directory,
            self.registry,
            builder_name=choose(options.builder, override.builder),
        )

        handler_map = {
            b.name.value: dict(b.default_handlers) for b in self.registry
        }
        handler_map.update(options.handler_map)

        try:
            config = BuildConfig(
                working_directory=working_directory.resolve(),
                identifier=options.identifier,
                builder=builder.name.value,
                build_image=choose(options.build_image, override.build_image, builder.default_build_image),
                run_image=choose(options.run_image, override.run_image, builder.default_run_image),
                generate_run_image=options.generate_run_image,
                handler=options.handler,
                handler_map=handler_map,
                build_env=options.build_env,
                image_env=options.image_env,
                image_labels=options.image_labels,
                image_tag=options.image_tag,
                port=options.port,
                run_quiet=options.run_quiet,
                write_procfile=options.write_procfile,
            )
        except ValidationError as e:
            raise ConfigError(f"invalid configuration: {e}") from e

        logger.debug(
            f"Resolved builder={config.builder} build_image={config.build_image} "
            f"run_image={config.run_image}"
        )
        return config, builder
