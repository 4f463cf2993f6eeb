"""Extraction of the build archive."""

import logging
import zipfile
import zlib
from pathlib import Path

from .exceptions import ExtractionError

logger = logging.getLogger(__name__)


def extract_archive(archive_path: Path, destination: Path) -> None:
    """Extract the zip at archive_path into destination.

    Members that would land outside destination are rejected.

    Raises:
        ExtractionError: If the archive is missing, unreadable or corrupt
    """
    if not archive_path.is_file():
        raise ExtractionError(f"build archive not found at {archive_path}")

    root = destination.resolve()
    try:
        with zipfile.ZipFile(archive_path) as archive:
            for member in archive.infolist():
                target = (root / member.filename).resolve()
                if target != root and root not in target.parents:
                    raise ExtractionError(
                        f"refusing to extract '{member.filename}' outside of build directory"
                    )
            archive.extractall(root)
            logger.debug(f"Extracted {len(archive.infolist())} entries into {root}")
    except (zipfile.BadZipFile, zlib.error, EOFError) as e:
        raise ExtractionError(f"error extracting {archive_path.name}: {e}") from e
    except OSError as e:
        raise ExtractionError(f"error extracting {archive_path.name}: {e}") from e
