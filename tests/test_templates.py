import pytest

from avro_sourcegen.codegen.core.errors import GeneratorError
from avro_sourcegen.codegen.core.templates import TemplateEngine, TemplateError, format_code

TEMPLATES = {
    "greeting.j2": "Hello {{ name }}",
    "block.j2": "{{ body | indent }}\n{{ body | indent(2) }}",
}


@pytest.fixture
def engine() -> TemplateEngine:
    return TemplateEngine(TEMPLATES, indent_size=4)


def test_render_template(engine: TemplateEngine) -> None:
    assert engine.render_template("greeting.j2", {"name": "Avro"}) == "Hello Avro"


def test_indent_filter_skips_blank_lines(engine: TemplateEngine) -> None:
    rendered = engine.render_template("block.j2", {"body": "a\n\nb"})

    assert rendered == "    a\n\n    b\n        a\n\n        b"


def test_undefined_variables_fail(engine: TemplateEngine) -> None:
    with pytest.raises(TemplateError) as exc_info:
        engine.render_template("greeting.j2", {})
    assert isinstance(exc_info.value, GeneratorError)


def test_missing_template(engine: TemplateEngine) -> None:
    with pytest.raises(TemplateError):
        engine.render_template("absent.j2", {})


def test_format_code() -> None:
    code = "line one   \n\n\n\nline two\n\n"
    assert format_code(code) == "line one\n\nline two\n"
