"""
Scala type system for code generation.

Maps Avro schemas onto Scala type expressions and default-value
literals, collecting the imports the generated file needs.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from ...core.config import StyleConfig
from ...core.errors import GeneratorError
from ...core.naming import registration_name
from ...core.schema import Schema, SchemaStore, SchemaType
from ...core.type_registry import TypeRegistry


SCALA_PRIMITIVE_MAP: Dict[SchemaType, str] = {
    SchemaType.NULL: "Null",
    SchemaType.BOOLEAN: "Boolean",
    SchemaType.INT: "Int",
    SchemaType.LONG: "Long",
    SchemaType.FLOAT: "Float",
    SchemaType.DOUBLE: "Double",
    SchemaType.BYTES: "Array[Byte]",
    SchemaType.STRING: "String",
}

SHAPELESS_IMPORT = "shapeless.{:+:, CNil}"


@dataclass
class TypeContext:
    """Everything type mapping needs while rendering one file."""

    registry: TypeRegistry
    namespace: Optional[str]
    style: StyleConfig
    schema_store: Optional[SchemaStore] = None
    imports: Set[str] = field(default_factory=set)


class ScalaTypeMapper:
    """Maps Avro schemas to Scala types."""

    def __init__(self, array_type: str = "Seq", map_type: str = "Map"):
        self.array_type = array_type
        self.map_type = map_type

    def map_type_name(self, schema: Schema, context: TypeContext) -> str:
        """
        Get the Scala type expression for a schema.

        Raises:
            GeneratorError: If a named reference cannot be resolved
        """
        if schema.type in SCALA_PRIMITIVE_MAP:
            return SCALA_PRIMITIVE_MAP[schema.type]

        if schema.type == SchemaType.FIXED:
            return "Array[Byte]"

        if schema.type in (SchemaType.RECORD, SchemaType.ENUM):
            return self._named_type(schema, context)

        if schema.type == SchemaType.ARRAY:
            return f"{self.array_type}[{self.map_type_name(schema.items, context)}]"

        if schema.type == SchemaType.MAP:
            return f"{self.map_type}[String, {self.map_type_name(schema.values, context)}]"

        if schema.type == SchemaType.UNION:
            return self._union_type(schema, context)

        raise GeneratorError(f"Unsupported schema type: {schema.type.value}")

    def _named_type(self, schema: Schema, context: TypeContext) -> str:
        symbol = context.registry.lookup(schema)
        if symbol is not None:
            type_name = symbol.name
        else:
            # Defined outside this run; only the schema store can vouch for it
            store = context.schema_store
            if store is None or store.resolve(schema.fullname) is not schema:
                raise GeneratorError(f"Unresolved type reference: {schema.fullname}")
            type_name = registration_name(schema, context.style)

        if schema.namespace and schema.namespace != context.namespace:
            context.imports.add(f"{schema.namespace}.{schema.name}")
        return type_name

    def _union_type(self, schema: Schema, context: TypeContext) -> str:
        non_null = [b for b in schema.branches if b.type != SchemaType.NULL]
        nullable = len(non_null) < len(schema.branches)

        if not non_null:
            return "Null"

        inner_types = [self.map_type_name(branch, context) for branch in non_null]
        if len(inner_types) == 1:
            inner = inner_types[0]
        elif len(inner_types) == 2:
            inner = f"Either[{inner_types[0]}, {inner_types[1]}]"
        else:
            context.imports.add(SHAPELESS_IMPORT)
            inner = " :+: ".join(inner_types + ["CNil"])

        return f"Option[{inner}]" if nullable else inner

    def default_literal(self, schema: Schema, value: Any, context: TypeContext) -> Optional[str]:
        """
        Scala literal for a field default, or None when it has no literal form.
        """
        if schema.type == SchemaType.UNION:
            return self._union_default(schema, value, context)

        if value is None:
            return "null" if schema.type == SchemaType.NULL else None

        if schema.type == SchemaType.BOOLEAN:
            return "true" if value else "false"
        if schema.type == SchemaType.INT:
            return str(int(value))
        if schema.type == SchemaType.LONG:
            return f"{int(value)}L"
        if schema.type == SchemaType.FLOAT:
            return f"{float(value)}f"
        if schema.type == SchemaType.DOUBLE:
            return str(float(value))
        if schema.type == SchemaType.STRING:
            return json.dumps(value)
        if schema.type == SchemaType.ENUM and value in schema.symbols:
            return f"{schema.name}.{value}"
        if schema.type == SchemaType.ARRAY and value == []:
            return f"{self.array_type}.empty"
        if schema.type == SchemaType.MAP and value == {}:
            return f"{self.map_type}.empty"
        return None

    def _union_default(self, schema: Schema, value: Any, context: TypeContext) -> Optional[str]:
        # Avro defaults always belong to the first branch
        first = schema.branches[0] if schema.branches else None
        non_null: List[Schema] = [b for b in schema.branches if b.type != SchemaType.NULL]
        nullable = len(non_null) < len(schema.branches)

        if first is None:
            return None
        if first.type == SchemaType.NULL:
            return "None" if value is None and nullable and non_null else None
        if len(non_null) != 1:
            return None

        literal = self.default_literal(first, value, context)
        if literal is None:
            return None
        return f"Some({literal})" if nullable else literal
