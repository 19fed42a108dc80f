"""
Java enum renderer.

Avro's specific-record runtime requires enums to be real Java enums, which
Scala cannot declare, so they are emitted as separate Java sources.
"""

from typing import Optional

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.errors import InvalidTopLevelType
from ...core.generator import PlatformEnumRenderer
from ...core.schema import Schema, SchemaType
from ...core.templates import TemplateEngine, format_code
from ...core.type_registry import TypeRegistry
from .naming import create_java_sanitizer

logger = get_logger(__name__)

HEADER_COMMENT = "/** MACHINE-GENERATED FROM AVRO SCHEMA. DO NOT EDIT DIRECTLY */"

JAVA_ENUM_TEMPLATE = """\
{% if header %}
{{ header }}

{% endif %}
{% if package %}
package {{ package }};

{% endif %}
{% if doc %}
/** {{ doc }} */
{% endif %}
public enum {{ name }} {
{% if symbols %}
{{ ((symbols | join(", ")) ~ ";") | indent }}
{% endif %}
}
"""


class JavaEnumRenderer(PlatformEnumRenderer):
    """Renders Avro enums as Java enums."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize renderer with configuration."""
        self.config = config or GeneratorConfig()
        self.template_engine = TemplateEngine(
            {"enum.java.j2": JAVA_ENUM_TEMPLATE}, self.config.indent_size
        )
        self.sanitizer = create_java_sanitizer()

    def render(self, registry: TypeRegistry, namespace: Optional[str], schema: Schema) -> str:
        """Render a complete Java source file for an enum."""
        if schema.type != SchemaType.ENUM:
            raise InvalidTopLevelType(schema.type.value)

        code = self.template_engine.render_template(
            "enum.java.j2",
            {
                "header": HEADER_COMMENT if self.config.add_comments else None,
                "package": namespace,
                "doc": schema.doc if self.config.add_comments else None,
                "name": schema.name,
                "symbols": [self.sanitizer.sanitize_name(s) for s in schema.symbols],
            },
        )
        logger.debug("Rendered Java enum %s", schema.fullname)
        return format_code(code)
