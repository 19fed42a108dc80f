import json
from pathlib import Path

import pytest

from avro_sourcegen import generate_from_files, generate_strings, generate_to_files
from avro_sourcegen.codegen import ConfigError, GeneratorConfig, SchemaParseError
from avro_sourcegen.codegen.core.errors import InvalidTopLevelType

from .conftest import COLOR_SCHEMA, MAIL_PROTOCOL, USER_SCHEMA

NESTED_SCHEMA = {
    "type": "record",
    "name": "Car",
    "namespace": "com.example",
    "fields": [
        {"name": "paint", "type": COLOR_SCHEMA},
        {"name": "spare", "type": ["null", "Color"], "default": None},
    ],
}


def test_generate_strings_renders_every_named_type() -> None:
    codes = generate_strings(json.dumps(NESTED_SCHEMA))

    assert len(codes) == 2
    assert "final case class Car(paint: Color.Value, spare: Option[Color.Value] = None)" in codes[0]
    assert "object Color extends Enumeration {" in codes[1]


def test_generate_strings_accepts_config_dict() -> None:
    codes = generate_strings(json.dumps(NESTED_SCHEMA), {"enum_style": "java enum"})

    assert "paint: Color," in codes[0]
    assert codes[1].splitlines()[-2] == "  RED, GREEN;"


def test_generate_strings_rejects_bad_input() -> None:
    with pytest.raises(SchemaParseError):
        generate_strings("{")


def test_generate_to_files(tmp_path: Path) -> None:
    written = generate_to_files(json.dumps(NESTED_SCHEMA), tmp_path)

    package_dir = tmp_path / "com" / "example"
    assert written == [package_dir / "Car.scala", package_dir / "Color.scala"]
    assert "package com.example" in (package_dir / "Car.scala").read_text()


def test_generate_to_files_twice_is_stable(tmp_path: Path) -> None:
    first = generate_to_files(json.dumps(USER_SCHEMA), tmp_path)
    contents = first[0].read_bytes()

    second = generate_to_files(json.dumps(USER_SCHEMA), tmp_path)

    assert first == second
    assert second[0].read_bytes() == contents


def test_generate_to_files_uses_config_output_dir(tmp_path: Path) -> None:
    config = GeneratorConfig(output_dir=str(tmp_path))
    written = generate_to_files(json.dumps(USER_SCHEMA), config=config)
    assert written == [tmp_path / "com" / "example" / "User.scala"]


def test_generate_to_files_requires_output_dir() -> None:
    with pytest.raises(ConfigError):
        generate_to_files(json.dumps(USER_SCHEMA))


def test_protocol_writes_foreign_types_separately(tmp_path: Path) -> None:
    written = generate_to_files(
        json.dumps(MAIL_PROTOCOL), tmp_path, {"enum_style": "java enum"}
    )

    assert written == [
        tmp_path / "com" / "example" / "Priority.java",
        tmp_path / "com" / "example" / "Mail.scala",
        tmp_path / "org" / "other" / "Attachment.scala",
    ]
    assert "package org.other" in written[2].read_text()


def test_generate_from_files_shares_types(tmp_path: Path, write_json) -> None:
    color_file = write_json("color.avsc", COLOR_SCHEMA)
    car_file = write_json(
        "car.avsc",
        {
            "type": "record",
            "name": "Car",
            "namespace": "com.example",
            "fields": [{"name": "paint", "type": "com.example.Color"}],
        },
    )
    out = tmp_path / "out"

    written = generate_from_files([color_file, car_file], out)

    package_dir = out / "com" / "example"
    assert written == [package_dir / "Color.scala", package_dir / "Car.scala"]
    car_code = (package_dir / "Car.scala").read_text()
    assert "final case class Car(paint: Color.Value)" in car_code


def test_protocol_fixed_types_are_inlined() -> None:
    protocol = {
        "protocol": "Store",
        "namespace": "com.example",
        "types": [
            {"type": "fixed", "name": "Digest", "size": 16},
            {
                "type": "record",
                "name": "Blob",
                "fields": [{"name": "digest", "type": "Digest"}],
            },
        ],
    }

    (code,) = generate_strings(json.dumps(protocol))

    assert "final case class Blob(digest: Array[Byte]) extends Store" in code
    assert "Digest" not in code


def test_types_from_an_earlier_protocol_are_not_regenerated(
    tmp_path: Path, write_json
) -> None:
    protocol_file = write_json("mail.avpr", MAIL_PROTOCOL)
    inbox_file = write_json(
        "inbox.avsc",
        {
            "type": "record",
            "name": "Inbox",
            "namespace": "com.example",
            "fields": [
                {"name": "messages", "type": {"type": "array", "items": "com.example.Message"}}
            ],
        },
    )
    out = tmp_path / "out"

    written = generate_from_files([protocol_file, inbox_file], out)

    assert [path.name for path in written] == ["Mail.scala", "Attachment.scala", "Inbox.scala"]
    defining = [p.name for p in written if "case class Message(" in p.read_text()]
    assert defining == ["Mail.scala"]
    inbox_code = (out / "com" / "example" / "Inbox.scala").read_text()
    assert "final case class Inbox(messages: Seq[Message])" in inbox_code


@pytest.mark.parametrize(
    "document",
    [
        {"type": "fixed", "name": "Digest", "namespace": "a", "size": 16},
        {"type": "array", "items": "string"},
        "string",
    ],
)
def test_non_record_top_level_schema_is_rejected(tmp_path: Path, document) -> None:
    with pytest.raises(InvalidTopLevelType):
        generate_to_files(json.dumps(document), tmp_path)
    assert list(tmp_path.iterdir()) == []


def test_top_level_union_generates_its_named_branches() -> None:
    codes = generate_strings(json.dumps(["null", USER_SCHEMA, COLOR_SCHEMA]))

    assert len(codes) == 2
    assert "final case class User(" in codes[0]
    assert "object Color extends Enumeration {" in codes[1]
