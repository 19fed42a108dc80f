"""
Per-run table of generated type symbols.

Every schema that generated code may refer to is registered here before
rendering, so renderers resolve cross-type references consistently.
Entries are keyed on schema identity, never on structural equality: two
distinct schema objects that look the same get separate entries.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from ...logging_config import get_logger
from .config import StyleConfig
from .naming import registration_name
from .schema import Schema, SchemaOrProtocol, SchemaType, is_protocol

logger = get_logger(__name__)


@dataclass(frozen=True)
class TypeSymbol:
    """Symbolic reference to a generated type."""

    name: str

    def __str__(self) -> str:
        return self.name


class TypeRegistry:
    """Identity-keyed mapping from schemas to generated type symbols."""

    def __init__(self):
        """Initialize empty registry."""
        # id(schema) -> (schema, symbol); holding the schema keeps its id stable
        self._entries: Dict[int, Tuple[Schema, TypeSymbol]] = {}

    def accept(self, schema: Schema, symbol: TypeSymbol) -> TypeSymbol:
        """
        Record a symbol for a schema.

        A schema that is already registered keeps its first symbol.

        Returns:
            The symbol now associated with the schema
        """
        key = id(schema)
        existing = self._entries.get(key)
        if existing is not None:
            return existing[1]

        self._entries[key] = (schema, symbol)
        logger.debug("Registered %r as %s", schema, symbol)
        return symbol

    def lookup(self, schema: Schema) -> Optional[TypeSymbol]:
        """Get the symbol registered for this exact schema object."""
        entry = self._entries.get(id(schema))
        return entry[1] if entry is not None else None

    def __contains__(self, schema: Schema) -> bool:
        return id(schema) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Tuple[Schema, TypeSymbol]]:
        return iter(list(self._entries.values()))

    def register_schema(self, schema: Schema, style: StyleConfig) -> TypeSymbol:
        """Register a single schema under its registration name."""
        if schema in self:
            return self.lookup(schema)
        return self.accept(schema, TypeSymbol(registration_name(schema, style)))

    def register(self, schema_or_protocol: SchemaOrProtocol, style: StyleConfig) -> None:
        """
        Register a schema, or every type declared by a protocol.

        Protocol types from foreign namespaces are registered too, so that
        references to them still resolve. Fixed types are inlined and never
        registered.
        """
        if is_protocol(schema_or_protocol):
            for schema in schema_or_protocol.types:
                if schema.type in (SchemaType.RECORD, SchemaType.ENUM):
                    self.register_schema(schema, style)
        else:
            self.register_schema(schema_or_protocol, style)
