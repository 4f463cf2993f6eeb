"""Entry point resolution for the built function."""

from pathlib import Path

from ..models.config import BuildConfig
from .builders import Builder


def resolve_handler(build_dir: Path, builder: Builder, config: BuildConfig) -> str:
    """Return the configured handler, or the builder's best guess.

    An empty string means no handler could be determined.
    """
    if config.handler:
        return config.handler

    return builder.detect_handler(build_dir, config.handlers_for(builder.name.value))
