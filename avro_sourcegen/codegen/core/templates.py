"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

from typing import Dict, Any, Optional

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateError as JinjaError

from .errors import GeneratorError


class TemplateError(GeneratorError):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, templates: Optional[Dict[str, str]] = None, indent_size: int = 2):
        """
        Initialize template engine.

        Args:
            templates: In-memory templates keyed by name
            indent_size: Default indentation width for the ``indent`` filter
        """
        self.indent_size = indent_size
        self._env = Environment(
            loader=DictLoader(dict(templates or {})),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        self._env.filters["indent"] = self._indent_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except JinjaError as e:
            raise TemplateError(f"Failed to render template {template_name}: {str(e)}") from e

    def _indent_filter(self, value: str, levels: int = 1) -> str:
        """Indent all non-blank lines in a string."""
        indent = " " * (self.indent_size * levels)
        lines = str(value).split("\n")
        return "\n".join(indent + line if line.strip() else line for line in lines)


def format_code(code: str) -> str:
    """
    Basic cleanup of rendered code.

    Strips trailing whitespace, collapses runs of blank lines and ends the
    text with exactly one newline.
    """
    lines = code.split("\n")
    formatted_lines = []
    blank_count = 0

    for line in lines:
        stripped = line.rstrip()
        if not stripped:
            blank_count += 1
            if blank_count <= 1:
                formatted_lines.append("")
        else:
            blank_count = 0
            formatted_lines.append(stripped)

    return "\n".join(formatted_lines).strip("\n") + "\n"
