"""
Java enum generator module.
"""

from .naming import JAVA_RESERVED_WORDS, create_java_sanitizer
from .renderer import JavaEnumRenderer

__all__ = ["JavaEnumRenderer", "JAVA_RESERVED_WORDS", "create_java_sanitizer"]
