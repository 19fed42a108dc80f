from pathlib import Path

import pytest

from avro_sourcegen.codegen.core.errors import StorageFault
from avro_sourcegen.codegen.core.paths import namespace_directory, resolve_path
from avro_sourcegen.codegen.core.schema import Protocol, Schema, SchemaType


def _name(schema_or_protocol) -> str:
    return schema_or_protocol.name


def _record(namespace=None) -> Schema:
    return Schema(type=SchemaType.RECORD, name="User", namespace=namespace)


def test_no_output_dir_means_in_memory(tmp_path: Path, default_style) -> None:
    path = resolve_path("com.example", _record("com.example"), None, default_style, _name)

    assert path is None
    assert list(tmp_path.iterdir()) == []


def test_namespace_becomes_nested_directories(tmp_path: Path, default_style) -> None:
    path = resolve_path("com.example", _record("com.example"), tmp_path, default_style, _name)

    assert path == tmp_path / "com" / "example" / "User.scala"
    assert path.parent.is_dir()
    assert not path.exists()


def test_missing_namespace_uses_output_dir(tmp_path: Path, default_style) -> None:
    path = resolve_path(None, _record(), tmp_path, default_style, _name)
    assert path == tmp_path / "User.scala"


def test_resolving_twice_is_idempotent(tmp_path: Path, default_style) -> None:
    first = resolve_path("a.b", _record("a.b"), tmp_path, default_style, _name)
    second = resolve_path("a.b", _record("a.b"), tmp_path, default_style, _name)
    assert first == second


def test_java_enum_gets_java_extension(tmp_path: Path, java_enum_style) -> None:
    enum = Schema(type=SchemaType.ENUM, name="Color", namespace="x", symbols=["A"])
    path = resolve_path("x", enum, tmp_path, java_enum_style, _name)
    assert path == tmp_path / "x" / "Color.java"


def test_protocol_path(tmp_path: Path, java_enum_style) -> None:
    protocol = Protocol(name="Mail", namespace="com.example")
    path = resolve_path("com.example", protocol, tmp_path, java_enum_style, _name)
    assert path.name == "Mail.scala"


def test_directory_creation_failure_is_storage_fault(tmp_path: Path, default_style) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(StorageFault):
        resolve_path("a", _record("a"), blocker, default_style, _name)


def test_namespace_directory() -> None:
    assert namespace_directory("out", "a.b.c") == Path("out/a/b/c")
    assert namespace_directory("out", None) == Path("out")
