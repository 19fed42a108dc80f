import json
from collections.abc import Callable
from pathlib import Path

import pytest

from avro_sourcegen.codegen.core.config import StyleConfig
from avro_sourcegen.codegen.core.schema import (
    Protocol,
    Schema,
    SchemaParser,
    SchemaStore,
)

COLOR_SCHEMA = {
    "type": "enum",
    "name": "Color",
    "namespace": "com.example",
    "symbols": ["RED", "GREEN"],
}

USER_SCHEMA = {
    "type": "record",
    "name": "User",
    "namespace": "com.example",
    "fields": [
        {"name": "name", "type": "string"},
        {"name": "age", "type": "int", "default": 0},
    ],
}

MAIL_PROTOCOL = {
    "protocol": "Mail",
    "namespace": "com.example",
    "types": [
        {"type": "enum", "name": "Priority", "symbols": ["LOW", "HIGH"]},
        {
            "type": "record",
            "name": "Message",
            "fields": [
                {"name": "subject", "type": "string"},
                {"name": "priority", "type": "Priority"},
            ],
        },
        {
            "type": "record",
            "name": "Attachment",
            "namespace": "org.other",
            "fields": [{"name": "size", "type": "long"}],
        },
    ],
    "messages": {},
}


@pytest.fixture
def default_style() -> StyleConfig:
    return StyleConfig()


@pytest.fixture
def java_enum_style() -> StyleConfig:
    return StyleConfig.for_enum_style("java enum")


@pytest.fixture
def case_object_style() -> StyleConfig:
    return StyleConfig.for_enum_style("case object")


@pytest.fixture
def store() -> SchemaStore:
    return SchemaStore()


@pytest.fixture
def parse(store: SchemaStore) -> Callable[[dict], Schema | Protocol]:
    parser = SchemaParser(store)

    def _parse(document: dict) -> Schema | Protocol:
        return parser.parse(json.dumps(document))

    return _parse


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, dict], Path]:
    def _write_json(name: str, document: dict) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write_json
