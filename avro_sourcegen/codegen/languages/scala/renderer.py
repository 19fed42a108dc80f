"""
Scala source renderer.

Renders records as case classes, enums as ``scala.Enumeration`` objects
or sealed case objects, and protocols as one file holding their local
types.
"""

from typing import Any, Dict, List, Optional

from ....logging_config import get_logger
from ...core.config import EnumStyle, GeneratorConfig, StyleConfig
from ...core.errors import GeneratorError, InvalidTopLevelType
from ...core.generator import GeneralRenderer
from ...core.schema import (
    Protocol,
    Schema,
    SchemaOrProtocol,
    SchemaStore,
    SchemaType,
    get_local_subtypes,
    is_protocol,
)
from ...core.templates import TemplateEngine, format_code
from ...core.type_registry import TypeRegistry
from .naming import create_scala_sanitizer, package_path
from .types import ScalaTypeMapper, TypeContext

logger = get_logger(__name__)

HEADER_COMMENT = "/** MACHINE-GENERATED FROM AVRO SCHEMA. DO NOT EDIT DIRECTLY */"

FILE_TEMPLATE = """\
{% if header %}
{{ header }}

{% endif %}
{% if package %}
package {{ package }}

{% endif %}
{% for imp in imports %}
import {{ imp }}
{% endfor %}

{% for definition in definitions %}
{{ definition }}

{% endfor %}
"""

CASE_CLASS_TEMPLATE = """\
{% if doc %}
/** {{ doc }} */
{% endif %}
final case class {{ name }}({{ params | join(", ") }}){% if parent %} extends {{ parent }}{% endif %}
"""

ENUMERATION_TEMPLATE = """\
{% if doc %}
/** {{ doc }} */
{% endif %}
object {{ name }} extends Enumeration {
{{ ("type " ~ name ~ " = Value") | indent }}
{% if symbols %}
{{ ("val " ~ (symbols | join(", ")) ~ " = Value") | indent }}
{% endif %}
}
"""

CASE_OBJECT_TEMPLATE = """\
{% if doc %}
/** {{ doc }} */
{% endif %}
sealed trait {{ name }} extends Product with Serializable

object {{ name }} {
{% for symbol in symbols %}
{{ ("final case object " ~ symbol ~ " extends " ~ name) | indent }}
{% endfor %}
}
"""

SEALED_TRAIT_TEMPLATE = """\
sealed trait {{ name }} extends Product with Serializable
"""

SCALA_TEMPLATES = {
    "file.scala.j2": FILE_TEMPLATE,
    "case_class.scala.j2": CASE_CLASS_TEMPLATE,
    "enumeration.scala.j2": ENUMERATION_TEMPLATE,
    "case_object.scala.j2": CASE_OBJECT_TEMPLATE,
    "sealed_trait.scala.j2": SEALED_TRAIT_TEMPLATE,
}


class ScalaRenderer(GeneralRenderer):
    """Renders Scala source for records, enums and protocols."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize renderer with configuration."""
        self.config = config or GeneratorConfig()
        self.template_engine = TemplateEngine(SCALA_TEMPLATES, self.config.indent_size)
        self.sanitizer = create_scala_sanitizer()
        self.type_mapper = ScalaTypeMapper(
            array_type=self.config.custom.get("array_type", "Seq"),
            map_type=self.config.custom.get("map_type", "Map"),
        )

    def render(
        self,
        registry: TypeRegistry,
        namespace: Optional[str],
        schema_or_protocol: SchemaOrProtocol,
        style: StyleConfig,
        schema_store: Optional[SchemaStore] = None,
    ) -> str:
        """Render a complete Scala source file."""
        context = TypeContext(registry, namespace, style, schema_store)

        if is_protocol(schema_or_protocol):
            definitions = self._protocol_definitions(schema_or_protocol, context)
        elif (
            schema_or_protocol.type == SchemaType.ENUM
            and style.enum_style == EnumStyle.JAVA_ENUM
        ):
            raise GeneratorError(
                f"{schema_or_protocol.fullname} uses the java enum style "
                "and must be rendered as Java"
            )
        else:
            definitions = [self._render_definition(schema_or_protocol, context)]

        code = self.template_engine.render_template(
            "file.scala.j2",
            {
                "header": HEADER_COMMENT if self.config.add_comments else None,
                "package": package_path(namespace) if namespace else None,
                "imports": sorted(context.imports),
                "definitions": [d.strip("\n") for d in definitions if d],
            },
        )
        logger.debug("Rendered %r", schema_or_protocol)
        return format_code(code)

    def _protocol_definitions(self, protocol: Protocol, context: TypeContext) -> List[str]:
        definitions = []
        local_types = get_local_subtypes(protocol)
        has_records = any(s.type == SchemaType.RECORD for s in local_types)
        parent = protocol.name if has_records else None

        if parent:
            definitions.append(
                self.template_engine.render_template("sealed_trait.scala.j2", {"name": parent})
            )

        for schema in local_types:
            if schema.type == SchemaType.FIXED:
                continue
            # Java enums are compiled separately
            if schema.type == SchemaType.ENUM and context.style.enum_style == EnumStyle.JAVA_ENUM:
                continue
            definitions.append(self._render_definition(schema, context, parent))

        return definitions

    def _render_definition(
        self, schema: Schema, context: TypeContext, parent: Optional[str] = None
    ) -> str:
        if schema.type == SchemaType.RECORD:
            return self._render_record(schema, context, parent)
        if schema.type == SchemaType.ENUM:
            return self._render_enum(schema, context)
        raise InvalidTopLevelType(schema.type.value)

    def _render_record(
        self, schema: Schema, context: TypeContext, parent: Optional[str]
    ) -> str:
        params = [self._render_param(record_field, context) for record_field in schema.fields]
        return self.template_engine.render_template(
            "case_class.scala.j2",
            {
                "name": schema.name,
                "doc": schema.doc if self.config.add_comments else None,
                "params": params,
                "parent": parent,
            },
        )

    def _render_param(self, record_field, context: TypeContext) -> str:
        name = self.sanitizer.sanitize_name(record_field.name)
        type_name = self.type_mapper.map_type_name(record_field.schema, context)
        param = f"{name}: {type_name}"

        if record_field.has_default:
            literal = self.type_mapper.default_literal(
                record_field.schema, record_field.default, context
            )
            if literal is not None:
                param = f"{param} = {literal}"
        return param

    def _render_enum(self, schema: Schema, context: TypeContext) -> str:
        template_context: Dict[str, Any] = {
            "name": schema.name,
            "doc": schema.doc if self.config.add_comments else None,
            "symbols": [self.sanitizer.sanitize_name(s) for s in schema.symbols],
        }
        if context.style.enum_style == EnumStyle.CASE_OBJECT:
            return self.template_engine.render_template("case_object.scala.j2", template_context)
        return self.template_engine.render_template("enumeration.scala.j2", template_context)
