"""
Exceptions raised by the resolution pipeline.

Every failure here is fatal for the call that raised it; callers own
retry and reporting.
"""

from pathlib import Path
from typing import Optional


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class InvalidTopLevelType(GeneratorError):
    """A schema other than RECORD or ENUM was used as a top-level definition."""

    def __init__(self, type_name: str):
        super().__init__(
            f"Only RECORD and ENUM can be top-level definitions, got {type_name}"
        )
        self.type_name = type_name


class MissingDestination(GeneratorError):
    """A write was requested for an artifact with no file path."""

    def __init__(self, message: str = "Cannot write to file without a file path"):
        super().__init__(message)


class StorageFault(GeneratorError):
    """Directory creation or file write failed at the storage layer."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class DestinationNotFound(StorageFault):
    """The destination's parent directory disappeared before the write."""

    pass
