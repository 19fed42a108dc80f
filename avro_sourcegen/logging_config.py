"""Logging setup shared by all avro_sourcegen modules.

Modules obtain a logger with ``get_logger(__name__)``. The CLI calls
``configure_logging`` once to route records through a rich handler.
"""

import logging

from rich.logging import RichHandler

_LOGGING_CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the ``avro_sourcegen`` hierarchy."""
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Install a rich handler on the package logger.

    Args:
        verbose: Emit debug records when True, warnings and above otherwise.
    """
    global _LOGGING_CONFIGURED

    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger("avro_sourcegen")
    root.setLevel(level)

    if _LOGGING_CONFIGURED:
        return

    handler = RichHandler(show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.propagate = False
    _LOGGING_CONFIGURED = True
