"""
Scala code generator module.

Generates Scala case classes and enums from Avro schemas and protocols.
"""

from .naming import SCALA_RESERVED_WORDS, create_scala_sanitizer, package_path
from .renderer import ScalaRenderer
from .standard import StandardFormat
from .types import ScalaTypeMapper, TypeContext

__all__ = [
    "ScalaRenderer",
    "StandardFormat",
    "ScalaTypeMapper",
    "TypeContext",
    # Naming
    "SCALA_RESERVED_WORDS",
    "create_scala_sanitizer",
    "package_path",
]
