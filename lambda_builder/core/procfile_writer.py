"""Procfile generation."""

import logging
from pathlib import Path
from typing import Iterable

import click

from ..models.config import BuildConfig
from .constants import PROCFILE_NAME, PROCFILE_PROCESS_TYPE
from .exceptions import WriteError

logger = logging.getLogger(__name__)


def procfile_line(handler: str) -> str:
    return f"{PROCFILE_PROCESS_TYPE}: {handler}\n"


def write_procfile(handler: str, directory: Path) -> None:
    """Write a single-process Procfile into directory.

    Raises:
        WriteError: If the file cannot be written
    """
    try:
        (directory / PROCFILE_NAME).write_text(procfile_line(handler))
    except OSError as e:
        raise WriteError(f"error writing {PROCFILE_NAME} to {directory}: {e}") from e


def write_procfile_if_needed(handler: str, targets: Iterable[Path], config: BuildConfig) -> bool:
    """Write the Procfile to every target when enabled and missing.

    Nothing is written when Procfile generation is disabled, when the
    working directory already has a Procfile, or when no handler is known.
    A target that already holds a Procfile (such as one shipped in the
    build output) keeps it.

    Returns:
        True if a Procfile was written to at least one target

    Raises:
        WriteError: If a write fails; earlier targets keep their file
    """
    if not config.write_procfile:
        return False
    if (config.working_directory / PROCFILE_NAME).exists():
        logger.debug(f"{PROCFILE_NAME} already present in working directory")
        return False
    if not handler:
        click.echo(" !     Unable to detect handler in build directory")
        return False

    click.echo(f"=====> Writing {PROCFILE_NAME} from handler: {handler}")
    written = False
    for target in targets:
        if (target / PROCFILE_NAME).exists():
            logger.debug(f"Keeping existing {PROCFILE_NAME} in {target}")
            continue
        click.echo(f"       Writing to {target}")
        write_procfile(handler, target)
        written = True
    return written
