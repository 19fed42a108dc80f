from avro_sourcegen.codegen.core.schema import Schema, SchemaType
from avro_sourcegen.codegen.core.type_registry import TypeRegistry, TypeSymbol

from .conftest import MAIL_PROTOCOL


def _color() -> Schema:
    return Schema(
        type=SchemaType.ENUM,
        name="Color",
        namespace="com.example",
        symbols=["RED", "GREEN"],
    )


def test_structurally_equal_schemas_get_separate_entries(default_style) -> None:
    registry = TypeRegistry()
    first, second = _color(), _color()

    registry.register(first, default_style)
    assert second not in registry

    registry.register(second, default_style)
    assert len(registry) == 2


def test_registration_is_stable(default_style, java_enum_style) -> None:
    registry = TypeRegistry()
    color = _color()

    symbol = registry.register_schema(color, default_style)
    again = registry.register_schema(color, java_enum_style)

    assert symbol == TypeSymbol("Color.Value")
    assert again is symbol
    assert registry.lookup(color) is symbol
    assert len(registry) == 1


def test_accept_keeps_first_symbol() -> None:
    registry = TypeRegistry()
    color = _color()

    registry.accept(color, TypeSymbol("First"))
    result = registry.accept(color, TypeSymbol("Second"))

    assert result.name == "First"


def test_lookup_of_unknown_schema_is_none() -> None:
    assert TypeRegistry().lookup(_color()) is None


def test_protocol_registers_every_type(parse, case_object_style) -> None:
    protocol = parse(MAIL_PROTOCOL)
    registry = TypeRegistry()

    registry.register(protocol, case_object_style)

    names = sorted(str(symbol) for _, symbol in registry)
    assert names == ["Attachment", "Message", "Priority"]
