"""
Generation results and their persistence.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ...logging_config import get_logger
from .errors import DestinationNotFound, MissingDestination, StorageFault
from .naming import SCALA_EXTENSION

logger = get_logger(__name__)


@dataclass(frozen=True)
class Artifact:
    """Generated source text and the path it belongs at.

    ``file_path`` is None for in-memory generation; ``extension`` is the
    file extension resolved for the artifact either way.
    """

    file_path: Optional[Path]
    code: str
    extension: str = SCALA_EXTENSION


def write_artifact(artifact: Artifact) -> Path:
    """
    Persist an artifact, replacing any file already at its path.

    Args:
        artifact: Artifact with a resolved destination

    Returns:
        The path written

    Raises:
        MissingDestination: If the artifact has no path
        DestinationNotFound: If the parent directory vanished
        StorageFault: On any other storage failure
    """
    path = artifact.file_path
    if path is None:
        raise MissingDestination()

    contents = artifact.code.encode("utf-8")
    try:
        # delete old and/or create new
        path.unlink(missing_ok=True)
        with path.open("xb") as f:
            f.write(contents)
    except FileNotFoundError as e:
        logger.error("File not found: %s", path)
        raise DestinationNotFound(f"File not found: {path}: {e}", path) from e
    except OSError as e:
        logger.error("Problem using the file %s: %s", path, e)
        raise StorageFault(f"Problem using the file {path}: {e}", path) from e

    logger.debug("Wrote %d bytes to %s", len(contents), path)
    return path
