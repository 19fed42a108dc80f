"""Utility functions for loading Avro schema documents.

This module reads schema (.avsc) and protocol (.avpr) documents from
files and URLs with proper error handling. Parsing is left to
``SchemaParser``.
"""

from pathlib import Path
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

SCHEMA_SUFFIXES = {".avsc", ".avpr", ".json"}


class SchemaLoaderError(Exception):
    """Custom exception for schema loading errors."""

    pass


def load_schema_from_file(file_path: str | Path) -> tuple[str, str]:
    """Read a schema document from a local file.

    Args:
        file_path: Path to the schema file.

    Returns:
        Tuple of (source description, document text).

    Raises:
        SchemaLoaderError: If the file is missing or cannot be read.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load schema from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise SchemaLoaderError(f"File not found: {file_path}")

    if file_path.suffix.lower() not in SCHEMA_SUFFIXES:
        logger.warning(f"File does not have a schema extension: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info(f"Loaded schema from {file_path}")
    return str(file_path), text


def load_schema_from_url(url: str, timeout: int = 30) -> tuple[str, str]:
    """Fetch a schema document from a URL.

    Args:
        url: URL to fetch the document from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, document text).

    Raises:
        SchemaLoaderError: If the URL is invalid or the request fails.
    """
    logger.debug(f"Attempting to load schema from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise SchemaLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise SchemaLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise SchemaLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise SchemaLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Request error for URL {url}: {e}") from e

    logger.info(f"Loaded schema from {url}")
    return url, response.text


def is_url(source: str | Path) -> bool:
    """Check whether a source string is an http(s) URL."""
    return isinstance(source, str) and urlparse(source).scheme in ("http", "https")


def load_schema_text(source: str | Path, timeout: int = 30) -> tuple[str, str]:
    """Load a schema document from either a file or a URL.

    Args:
        source: Local path or http(s) URL.
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, document text).
    """
    if is_url(source):
        return load_schema_from_url(str(source), timeout)
    return load_schema_from_file(source)
