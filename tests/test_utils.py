import json
from pathlib import Path

import pytest
import requests
import responses

from avro_sourcegen.utils import (
    SchemaLoaderError,
    is_url,
    load_schema_from_url,
    load_schema_text,
)

from .conftest import COLOR_SCHEMA

SCHEMA_URL = "https://schemas.example.com/color.avsc"


def test_load_from_file(write_json) -> None:
    path = write_json("color.avsc", COLOR_SCHEMA)

    source, text = load_schema_text(path)

    assert source == str(path)
    assert json.loads(text) == COLOR_SCHEMA


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SchemaLoaderError, match="File not found"):
        load_schema_text(tmp_path / "missing.avsc")


def test_unusual_suffix_still_loads(tmp_path: Path) -> None:
    path = tmp_path / "color.txt"
    path.write_text(json.dumps(COLOR_SCHEMA))

    _, text = load_schema_text(path)

    assert "Color" in text


def test_is_url() -> None:
    assert is_url(SCHEMA_URL)
    assert not is_url("schemas/color.avsc")
    assert not is_url(Path("color.avsc"))


@responses.activate
def test_load_from_url() -> None:
    responses.add(responses.GET, SCHEMA_URL, json=COLOR_SCHEMA, status=200)

    source, text = load_schema_text(SCHEMA_URL)

    assert source == SCHEMA_URL
    assert json.loads(text) == COLOR_SCHEMA


@responses.activate
def test_http_error() -> None:
    responses.add(responses.GET, SCHEMA_URL, status=404)

    with pytest.raises(SchemaLoaderError, match="HTTP error 404"):
        load_schema_from_url(SCHEMA_URL)


@responses.activate
def test_connection_error() -> None:
    responses.add(
        responses.GET, SCHEMA_URL, body=requests.exceptions.ConnectionError("refused")
    )

    with pytest.raises(SchemaLoaderError, match="Connection error"):
        load_schema_from_url(SCHEMA_URL)


@responses.activate
def test_timeout() -> None:
    responses.add(responses.GET, SCHEMA_URL, body=requests.exceptions.Timeout())

    with pytest.raises(SchemaLoaderError, match="timeout"):
        load_schema_from_url(SCHEMA_URL)


def test_invalid_url() -> None:
    with pytest.raises(SchemaLoaderError, match="Invalid URL"):
        load_schema_from_url("not-a-url")
