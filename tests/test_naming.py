import pytest

from avro_sourcegen.codegen.core.config import StyleConfig
from avro_sourcegen.codegen.core.errors import InvalidTopLevelType
from avro_sourcegen.codegen.core.naming import (
    JAVA_EXTENSION,
    SCALA_EXTENSION,
    enum_reference_name,
    file_extension,
    registration_name,
)
from avro_sourcegen.codegen.core.schema import Protocol, Schema, SchemaType
from avro_sourcegen.codegen.languages.java.naming import create_java_sanitizer
from avro_sourcegen.codegen.languages.scala.naming import (
    create_scala_sanitizer,
    package_path,
)

ALL_STYLES = [None, "default", "scala enumeration", "java enum", "case object"]


def _record() -> Schema:
    return Schema(type=SchemaType.RECORD, name="User", namespace="com.example")


def _enum() -> Schema:
    return Schema(
        type=SchemaType.ENUM, name="Color", namespace="com.example", symbols=["RED"]
    )


@pytest.mark.parametrize("style_name", ALL_STYLES)
def test_record_extension_ignores_style(style_name: str | None) -> None:
    style = StyleConfig.for_enum_style(style_name)
    assert file_extension(_record(), style) == SCALA_EXTENSION


@pytest.mark.parametrize("style_name", ALL_STYLES)
def test_enum_extension_is_java_only_for_java_enum_style(style_name: str | None) -> None:
    style = StyleConfig.for_enum_style(style_name)
    expected = JAVA_EXTENSION if style_name == "java enum" else SCALA_EXTENSION
    assert file_extension(_enum(), style) == expected


def test_protocol_extension_is_scala(java_enum_style: StyleConfig) -> None:
    protocol = Protocol(name="Mail", namespace="com.example")
    assert file_extension(protocol, java_enum_style) == ".scala"


def test_non_top_level_type_is_rejected(default_style: StyleConfig) -> None:
    fixed = Schema(type=SchemaType.FIXED, name="Hash", size=16)

    with pytest.raises(InvalidTopLevelType):
        file_extension(fixed, default_style)
    with pytest.raises(InvalidTopLevelType):
        enum_reference_name(fixed, "Value")
    with pytest.raises(InvalidTopLevelType):
        registration_name(fixed, default_style)


def test_enum_reference_name_appends_selector() -> None:
    assert enum_reference_name(_enum(), "Value") == "Color.Value"
    assert enum_reference_name(_enum(), "Type") == "Color.Type"
    assert enum_reference_name(_record(), "Value") == "User"


def test_registration_name_default_style(default_style: StyleConfig) -> None:
    assert registration_name(_enum(), default_style) == "Color.Value"
    assert registration_name(_record(), default_style) == "User"


@pytest.mark.parametrize("style_name", ["java enum", "case object"])
def test_registration_name_plain_styles(style_name: str) -> None:
    style = StyleConfig.for_enum_style(style_name)
    assert registration_name(_enum(), style) == "Color"
    assert registration_name(_record(), style) == "User"


def test_scala_sanitizer_backticks_reserved_words() -> None:
    sanitizer = create_scala_sanitizer()

    assert sanitizer.sanitize_name("type") == "`type`"
    assert sanitizer.sanitize_name("name") == "name"
    assert sanitizer.is_reserved("object")


def test_package_path_quotes_reserved_segments() -> None:
    assert package_path("com.example") == "com.example"
    assert package_path("com.type.models") == "com.`type`.models"


def test_java_sanitizer_suffixes_keywords() -> None:
    sanitizer = create_java_sanitizer()

    assert sanitizer.sanitize_name("default") == "default_"
    assert sanitizer.sanitize_name("RED") == "RED"
