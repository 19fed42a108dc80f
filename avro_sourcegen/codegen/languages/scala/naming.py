"""
Scala-specific naming utilities and sanitization.

Handles Scala reserved words, which must be quoted with backticks when
used as identifiers.
"""

from ...core.naming import NameSanitizer


# Scala reserved words
SCALA_RESERVED_WORDS = {
    "abstract",
    "case",
    "catch",
    "class",
    "def",
    "do",
    "else",
    "extends",
    "false",
    "final",
    "finally",
    "for",
    "forSome",
    "if",
    "implicit",
    "import",
    "lazy",
    "macro",
    "match",
    "new",
    "null",
    "object",
    "override",
    "package",
    "private",
    "protected",
    "return",
    "sealed",
    "super",
    "this",
    "throw",
    "trait",
    "try",
    "true",
    "type",
    "val",
    "var",
    "while",
    "with",
    "yield",
}


def backtick(name: str) -> str:
    """Quote an identifier with backticks."""
    return f"`{name}`"


def create_scala_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Scala."""
    return NameSanitizer(SCALA_RESERVED_WORDS, escape=backtick)


def package_path(namespace: str) -> str:
    """
    Scala package clause path for a namespace.

    Segments that are reserved words are backtick-quoted.
    """
    sanitizer = create_scala_sanitizer()
    return ".".join(sanitizer.sanitize_name(part) for part in namespace.split("."))
