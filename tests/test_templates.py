"""Tests for naming helpers and the template engine."""

import pytest

from component_forge.codegen import generate
from component_forge.codegen.core.naming import (
    is_pascal_case,
    lower_first,
    variants_identifier,
)
from component_forge.codegen.core.templates import TemplateEngine, TemplateError


@pytest.fixture
def engine_for(tmp_path):
    """Build an engine over a directory holding one template."""

    def _make(source, name="snippet.j2"):
        (tmp_path / name).write_text(source, encoding="utf-8")
        return TemplateEngine([tmp_path])

    return _make


class TestNaming:
    """Test derived identifiers."""

    def test_variants_identifier_lowers_first_char_only(self):
        """Test derived variant table names."""
        assert variants_identifier("PrimaryButton") == "primaryButtonVariants"
        assert variants_identifier("HTMLView") == "hTMLViewVariants"

    def test_lower_first(self):
        """Test first-character lowering."""
        assert lower_first("Card") == "card"
        assert lower_first("") == ""

    def test_is_pascal_case(self):
        """Test PascalCase detection."""
        assert is_pascal_case("DataTable")
        assert not is_pascal_case("data-table")
        assert not is_pascal_case("dataTable")


class TestTemplateEngine:
    """Test the Jinja2 environment."""

    def test_filters(self, engine_for):
        """Test code generation filters."""
        engine = engine_for("{{ value | quote }} {{ expr | jsx }}")
        result = engine.render_template("snippet.j2", {"value": "a", "expr": "x"})
        assert result == '"a" {x}'

    def test_comment_filter(self, engine_for):
        """Test prefixing multi-line text."""
        engine = engine_for("{{ text | comment }}")
        result = engine.render_template("snippet.j2", {"text": "one\ntwo"})
        assert result == " * one\n * two"

    def test_comment_filter_escapes_terminators(self, engine_for):
        """Test that comment closers in text cannot end the comment."""
        engine = engine_for("{{ text | comment('') }}")
        result = engine.render_template("snippet.j2", {"text": "a */ b --> c"})
        assert result == "a *\\/ b --\\> c"
        assert "*/" not in result
        assert "-->" not in result

    def test_undefined_variable_is_an_error(self, engine_for):
        """Test strict undefined handling."""
        engine = engine_for("{{ missing }}")
        with pytest.raises(TemplateError):
            engine.render_template("snippet.j2", {})

    def test_template_exists(self, engine_for):
        """Test lookup of templates on the search path."""
        engine = engine_for("Hello {{ name }}", name="hello.j2")
        assert engine.template_exists("hello.j2")
        assert not engine.template_exists("missing.j2")
        assert engine.render_template("hello.j2", {"name": "Card"}) == "Hello Card"

    def test_missing_directories_are_skipped(self, tmp_path):
        """Test that nonexistent search directories are ignored."""
        engine = TemplateEngine([tmp_path / "nowhere"])
        assert engine.template_dirs == []


class TestDocCommentEscaping:
    """Test descriptions that contain comment terminators."""

    description = "Closes early */ or --> here"

    def test_jsdoc_stays_closed_once(self):
        """Test that a JSDoc header is closed exactly once."""
        result = generate({"name": "Note", "description": self.description}, "solid")
        assert result.success
        assert "Closes early *\\/ or --\\> here" in result.code
        header = result.code[: result.code.index("*/") + 2]
        assert header.count("*/") == 1
        assert "Closes early" in header

    def test_html_comment_stays_closed_once(self):
        """Test that an HTML doc comment is closed exactly once."""
        result = generate({"name": "Note", "description": self.description}, "html")
        assert result.success
        assert "Closes early *\\/ or --\\> here" in result.code
        assert result.code.count("-->") == result.code.count("<!--")
