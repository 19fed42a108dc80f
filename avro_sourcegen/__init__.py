"""
avro_sourcegen: Scala source generation from Avro schemas and protocols.
"""

from .codegen import (
    generate_artifacts,
    generate_from_files,
    generate_strings,
    generate_to_files,
)

__version__ = "0.1.0"

__all__ = [
    "generate_artifacts",
    "generate_from_files",
    "generate_strings",
    "generate_to_files",
    "__version__",
]
