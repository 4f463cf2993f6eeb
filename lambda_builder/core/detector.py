"""Builder selection."""

import logging
from pathlib import Path
from typing import Optional, Tuple

from .builders import BUILDERS, Builder, builder_names
from .exceptions import NoBuilderDetectedError, UnknownBuilderError

logger = logging.getLogger(__name__)


def get_builder(name: str, registry: Tuple[Builder, ...] = BUILDERS) -> Builder:
    """Look up a builder by name.

    Raises:
        UnknownBuilderError: If no registered builder has that name
    """
    for builder in registry:
        if builder.name.value == name:
            return builder
    raise UnknownBuilderError(name, builder_names(registry))


def detect_builder(
    working_directory: Path,
    registry: Tuple[Builder, ...] = BUILDERS,
    builder_name: Optional[str] = None,
) -> Builder:
    """Select the builder for working_directory.

    An explicit builder_name skips detection entirely. Otherwise the first
    builder in registry order whose markers are present wins.

    Raises:
        UnknownBuilderError: If builder_name is not registered
        NoBuilderDetectedError: If no builder matches
    """
    if builder_name:
        builder = get_builder(builder_name, registry)
        logger.debug(f"Using explicitly selected builder: {builder.name.value}")
        return builder

    for builder in registry:
        if builder.detect(working_directory):
            logger.debug(f"Detected builder: {builder.name.value}")
            return builder

    raise NoBuilderDetectedError(
        f"No builder detected in {working_directory} "
        f"(supported: {', '.join(builder_names(registry))})"
    )
