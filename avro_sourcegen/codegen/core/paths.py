"""
Output path resolution.

Maps a namespace and a schema or protocol onto
``<output_dir>/<namespace as nested directories>/<Name><ext>``.
"""

from pathlib import Path
from typing import Callable, Optional, Union

from ...logging_config import get_logger
from .config import StyleConfig
from .errors import StorageFault
from .naming import file_extension
from .schema import SchemaOrProtocol

logger = get_logger(__name__)


def namespace_directory(output_dir: Union[str, Path], namespace: Optional[str]) -> Path:
    """Directory that holds sources for a namespace."""
    if namespace:
        return Path(output_dir).joinpath(*namespace.split("."))
    return Path(output_dir)


def ensure_directory(folder_path: Path) -> None:
    """
    Create a directory tree if it does not exist yet.

    Raises:
        StorageFault: If the storage layer refuses to create it
    """
    try:
        folder_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Could not create directory %s: %s", folder_path, e)
        raise StorageFault(
            f"Could not create output directory {folder_path}: {e}", folder_path
        ) from e


def resolve_path(
    namespace: Optional[str],
    schema_or_protocol: SchemaOrProtocol,
    output_dir: Optional[Union[str, Path]],
    style: StyleConfig,
    get_name: Callable[[SchemaOrProtocol], str],
) -> Optional[Path]:
    """
    Compute the destination path for a generated source file.

    The target directory is created as a side effect.

    Args:
        namespace: Dot-separated namespace, or None
        schema_or_protocol: Generation target
        output_dir: Base output directory; None means render in memory only
        style: Style configuration
        get_name: Display name of the target

    Returns:
        Destination path, or None when no output directory was given
    """
    if output_dir is None:
        return None

    folder_path = namespace_directory(output_dir, namespace)
    ext = file_extension(schema_or_protocol, style)
    file_name = get_name(schema_or_protocol) + ext

    ensure_directory(folder_path)
    path = folder_path / file_name
    logger.debug("Resolved output path %s", path)
    return path
