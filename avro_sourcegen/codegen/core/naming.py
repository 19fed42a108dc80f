"""
Naming utilities for safe code generation.

Derives output file extensions and the type names that schemas are
registered under, and escapes identifiers that collide with reserved
words of the target language.
"""

from typing import Set, Dict, Callable, Optional

from .config import StyleConfig, ENUM_STYLE_KEY
from .errors import InvalidTopLevelType
from .schema import Schema, SchemaOrProtocol, SchemaType, is_protocol

SCALA_EXTENSION = ".scala"
JAVA_EXTENSION = ".java"

# Styles whose generated code references the enum type by its plain name
PLAIN_ENUM_STYLES = {"java enum", "case object"}


def file_extension(schema_or_protocol: SchemaOrProtocol, style: StyleConfig) -> str:
    """
    Get the output file extension for a schema or protocol.

    Enums under the "java enum" style must be compiled as Java sources;
    everything else is Scala.

    Raises:
        InvalidTopLevelType: If a schema is neither RECORD nor ENUM
    """
    if is_protocol(schema_or_protocol):
        return SCALA_EXTENSION

    schema = schema_or_protocol
    if schema.type == SchemaType.RECORD:
        return SCALA_EXTENSION
    if schema.type == SchemaType.ENUM:
        if style.get(ENUM_STYLE_KEY) == "java enum":
            return JAVA_EXTENSION
        return SCALA_EXTENSION
    raise InvalidTopLevelType(schema.type.value)


def enum_reference_name(schema: Schema, selector: str) -> str:
    """
    Name used when referencing a value of the schema's type.

    Records keep their name; enums get ``Name.<selector>``.

    Raises:
        InvalidTopLevelType: If the schema is neither RECORD nor ENUM
    """
    if schema.type == SchemaType.RECORD:
        return schema.name
    if schema.type == SchemaType.ENUM:
        return f"{schema.name}.{selector}"
    raise InvalidTopLevelType(schema.type.value)


def registration_name(schema: Schema, style: StyleConfig) -> str:
    """Name a schema is registered under in the type registry."""
    if style.get(ENUM_STYLE_KEY) in PLAIN_ENUM_STYLES:
        return schema.name
    return enum_reference_name(schema, "Value")


class NameSanitizer:
    """Escapes identifiers that collide with reserved words."""

    def __init__(
        self,
        reserved_words: Set[str] = None,
        escape: Optional[Callable[[str], str]] = None,
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            escape: Transformation applied to a colliding name
        """
        self.reserved_words = reserved_words or set()
        self.escape = escape or (lambda name: f"{name}_")
        self._name_cache: Dict[str, str] = {}

    def sanitize_name(self, name: str) -> str:
        """
        Sanitize a name for safe use in the target language.

        Args:
            name: Original name to sanitize

        Returns:
            The name itself, or its escaped form when reserved
        """
        if name in self._name_cache:
            return self._name_cache[name]

        final_name = self.escape(name) if name in self.reserved_words else name
        self._name_cache[name] = final_name
        return final_name

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved_words
