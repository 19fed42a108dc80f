"""
Language-specific renderers and source formats.
"""

from .java import JavaEnumRenderer
from .scala import ScalaRenderer, StandardFormat

__all__ = ["JavaEnumRenderer", "ScalaRenderer", "StandardFormat"]
