"""
Core schema representation for code generation.

Parses Avro schema (.avsc) and protocol (.avpr) JSON documents into a
small internal model that formats and renderers work with consistently.
Named types are recorded in a SchemaStore so that later documents can
reference types defined by earlier ones.
"""

import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union, Any
from enum import Enum

from ...logging_config import get_logger

logger = get_logger(__name__)


class SchemaParseError(Exception):
    """Exception raised when a schema document cannot be parsed."""

    pass


class SchemaType(Enum):
    """Avro schema tags."""

    NULL = "null"
    BOOLEAN = "boolean"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BYTES = "bytes"
    STRING = "string"
    RECORD = "record"
    ENUM = "enum"
    ARRAY = "array"
    MAP = "map"
    UNION = "union"
    FIXED = "fixed"


PRIMITIVE_TYPES = {
    SchemaType.NULL,
    SchemaType.BOOLEAN,
    SchemaType.INT,
    SchemaType.LONG,
    SchemaType.FLOAT,
    SchemaType.DOUBLE,
    SchemaType.BYTES,
    SchemaType.STRING,
}

NAMED_TYPES = {SchemaType.RECORD, SchemaType.ENUM, SchemaType.FIXED}


# Identity semantics: two structurally equal schemas are still distinct
# objects, and they hash by identity.
@dataclass(eq=False)
class Field:
    """Represents a single field of a record schema."""

    name: str
    schema: "Schema"
    doc: Optional[str] = None
    default: Any = None
    has_default: bool = False


@dataclass(eq=False)
class Schema:
    """A single node of an Avro schema."""

    type: SchemaType
    name: Optional[str] = None
    namespace: Optional[str] = None
    doc: Optional[str] = None

    # RECORD
    fields: List[Field] = field(default_factory=list)

    # ENUM
    symbols: List[str] = field(default_factory=list)

    # ARRAY / MAP
    items: Optional["Schema"] = None
    values: Optional["Schema"] = None

    # UNION
    branches: List["Schema"] = field(default_factory=list)

    # FIXED
    size: Optional[int] = None

    @property
    def fullname(self) -> Optional[str]:
        """Namespace-qualified name, or None for anonymous schemas."""
        if self.name is None:
            return None
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name

    @property
    def is_named(self) -> bool:
        return self.type in NAMED_TYPES

    def __repr__(self) -> str:
        if self.is_named:
            return f"Schema({self.type.value} {self.fullname})"
        return f"Schema({self.type.value})"


@dataclass(eq=False)
class Protocol:
    """A namespaced collection of named schemas plus message declarations."""

    name: str
    namespace: Optional[str] = None
    types: List[Schema] = field(default_factory=list)
    messages: Dict[str, Any] = field(default_factory=dict)
    doc: Optional[str] = None

    @property
    def fullname(self) -> str:
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name


SchemaOrProtocol = Union[Schema, Protocol]


class SchemaStore:
    """
    Table of every named schema seen during a generation run.

    Resolves references to types that were defined in another input
    document.
    """

    def __init__(self):
        """Initialize empty store."""
        self._schemas: Dict[str, Schema] = {}

    def accept(self, schema: Schema) -> None:
        """Record a named schema. The first definition of a name wins."""
        if not schema.is_named:
            return
        if schema.fullname not in self._schemas:
            self._schemas[schema.fullname] = schema

    def resolve(self, fullname: str) -> Optional[Schema]:
        """Look up a named schema by its full name."""
        return self._schemas.get(fullname)

    def __contains__(self, fullname: str) -> bool:
        return fullname in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)


def _split_name(name: str, namespace: Optional[str]) -> tuple:
    """Split a possibly dotted name into (namespace, short name)."""
    if "." in name:
        space, _, short = name.rpartition(".")
        return space or None, short
    return namespace or None, name


class SchemaParser:
    """Parses Avro JSON documents into Schema and Protocol objects."""

    def __init__(self, store: Optional[SchemaStore] = None):
        """
        Initialize parser.

        Args:
            store: Store shared across documents; a private one is created
                when omitted
        """
        self.store = store if store is not None else SchemaStore()
        self._names: Dict[str, Schema] = {}
        self._defined: List[Schema] = []

    def parse(self, source: Union[str, Dict[str, Any], List[Any]]) -> SchemaOrProtocol:
        """
        Parse a schema or protocol document.

        A JSON object with a "protocol" key is a protocol; anything else is
        a schema.
        """
        data = self._load(source)
        if isinstance(data, dict) and "protocol" in data:
            return self.parse_protocol(data)
        return self._parse_schema_data(data)

    def parse_schema(
        self,
        source: Union[str, Dict[str, Any], List[Any]],
        default_namespace: Optional[str] = None,
    ) -> Schema:
        """Parse a single schema document."""
        return self._parse_schema_data(self._load(source), default_namespace)

    @property
    def defined_types(self) -> List[Schema]:
        """Named types defined by the most recently parsed document.

        Types the document only referenced from the store are excluded.
        """
        return list(self._defined)

    def _parse_schema_data(self, data: Any, default_namespace: Optional[str] = None) -> Schema:
        self._names = {}
        schema = self._parse_node(data, default_namespace)
        self._commit()
        return schema

    def parse_protocol(self, source: Union[str, Dict[str, Any]]) -> Protocol:
        """Parse a protocol document."""
        data = self._load(source)
        if not isinstance(data, dict) or "protocol" not in data:
            raise SchemaParseError("Protocol document must be an object with 'protocol'")

        namespace, name = _split_name(data["protocol"], data.get("namespace"))
        self._names = {}
        for item in data.get("types") or []:
            self._parse_node(item, namespace)
        # Every named type the document defines, nested ones included
        types = list(self._names.values())
        self._commit()

        protocol = Protocol(
            name=name,
            namespace=namespace,
            types=types,
            messages=dict(data.get("messages") or {}),
            doc=data.get("doc"),
        )
        logger.debug("Parsed protocol %s with %d types", protocol.fullname, len(types))
        return protocol

    def _load(self, source):
        if isinstance(source, str):
            try:
                return json.loads(source)
            except json.JSONDecodeError as e:
                raise SchemaParseError(f"Invalid JSON in schema document: {e}") from e
        return source

    def _commit(self):
        self._defined = list(self._names.values())
        for schema in self._names.values():
            self.store.accept(schema)
        self._names = {}

    def _lookup(self, name: str, namespace: Optional[str]) -> Schema:
        space, short = _split_name(name, namespace)
        candidates = [f"{space}.{short}" if space else short]
        if space and "." not in name:
            candidates.append(short)

        for candidate in candidates:
            if candidate in self._names:
                return self._names[candidate]
            resolved = self.store.resolve(candidate)
            if resolved is not None:
                return resolved

        raise SchemaParseError(f"Unknown type reference: {name}")

    def _define(self, schema: Schema) -> None:
        if schema.fullname in self._names:
            raise SchemaParseError(f"Duplicate definition of {schema.fullname}")
        self._names[schema.fullname] = schema

    def _parse_node(self, node: Any, namespace: Optional[str]) -> Schema:
        if isinstance(node, list):
            return Schema(
                type=SchemaType.UNION,
                branches=[self._parse_node(branch, namespace) for branch in node],
            )

        if isinstance(node, str):
            try:
                schema_type = SchemaType(node)
            except ValueError:
                return self._lookup(node, namespace)
            if schema_type in PRIMITIVE_TYPES:
                return Schema(type=schema_type)
            raise SchemaParseError(f"Type '{node}' requires an object definition")

        if not isinstance(node, dict) or "type" not in node:
            raise SchemaParseError(f"Invalid schema node: {node!r}")

        type_name = node["type"]
        if isinstance(type_name, (dict, list)):
            return self._parse_node(type_name, namespace)

        if type_name == "error":
            type_name = "record"

        try:
            schema_type = SchemaType(type_name)
        except ValueError:
            return self._lookup(type_name, namespace)

        if schema_type in PRIMITIVE_TYPES:
            return Schema(type=schema_type, doc=node.get("doc"))
        if schema_type == SchemaType.ARRAY:
            return Schema(type=schema_type, items=self._parse_node(node["items"], namespace))
        if schema_type == SchemaType.MAP:
            return Schema(type=schema_type, values=self._parse_node(node["values"], namespace))
        if schema_type == SchemaType.UNION:
            raise SchemaParseError("Unions are written as JSON arrays")

        return self._parse_named(node, schema_type, namespace)

    def _parse_named(
        self, node: Dict[str, Any], schema_type: SchemaType, namespace: Optional[str]
    ) -> Schema:
        if "name" not in node:
            raise SchemaParseError(f"Named type {schema_type.value} has no name")

        space, name = _split_name(node["name"], node.get("namespace", namespace))
        schema = Schema(type=schema_type, name=name, namespace=space, doc=node.get("doc"))
        self._define(schema)

        if schema_type == SchemaType.ENUM:
            schema.symbols = list(node.get("symbols", []))
        elif schema_type == SchemaType.FIXED:
            schema.size = node.get("size")
        else:
            for field_data in node.get("fields", []):
                schema.fields.append(
                    Field(
                        name=field_data["name"],
                        schema=self._parse_node(field_data["type"], space),
                        doc=field_data.get("doc"),
                        default=field_data.get("default"),
                        has_default="default" in field_data,
                    )
                )

        logger.debug("Parsed %r", schema)
        return schema


def is_protocol(schema_or_protocol: SchemaOrProtocol) -> bool:
    """Check whether a generation target is a protocol."""
    return isinstance(schema_or_protocol, Protocol)


def is_enum(schema: Schema) -> bool:
    return schema.type == SchemaType.ENUM


def get_local_subtypes(protocol: Protocol) -> List[Schema]:
    """
    Get the protocol's types declared in the protocol's own namespace.

    Types re-exported from foreign namespaces are excluded.
    """
    return [schema for schema in protocol.types if schema.namespace == protocol.namespace]


def extract_all_schemas(root_schema: Schema) -> List[Schema]:
    """
    Extract every named record and enum reachable from a schema.

    Returns:
        Schemas in discovery order (root first, then nested depth-first),
        each instance once
    """
    schemas = []
    seen = set()

    def collect_schemas(schema: Schema):
        if id(schema) in seen:
            return
        seen.add(id(schema))

        if schema.type in (SchemaType.RECORD, SchemaType.ENUM):
            schemas.append(schema)

        for record_field in schema.fields:
            collect_schemas(record_field.schema)
        if schema.items is not None:
            collect_schemas(schema.items)
        if schema.values is not None:
            collect_schemas(schema.values)
        for branch in schema.branches:
            collect_schemas(branch)

    collect_schemas(root_schema)
    return schemas
