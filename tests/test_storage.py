"""Tests for the blueprint archive and the design token store."""

import json

import pytest

from component_forge.codegen.core.blueprint import Blueprint
from component_forge.storage import (
    DEFAULT_TOKENS,
    ArchiveStore,
    StoreError,
    StoreResult,
    TokenStore,
    format_tokens,
)


@pytest.fixture
def archive(tmp_path):
    return ArchiveStore(tmp_path / "archive")


@pytest.fixture
def token_store(tmp_path):
    return TokenStore(tmp_path / "tokens.json")


class TestStoreResult:
    """Test the tagged store result."""

    def test_truthiness(self):
        """Test that results are truthy only on success."""
        assert StoreResult.ok(1)
        assert not StoreResult.failure("nope")

    def test_unwrap(self):
        """Test unwrapping values and failures."""
        assert StoreResult.ok("x").unwrap() == "x"
        with pytest.raises(StoreError, match="nope"):
            StoreResult.failure("nope").unwrap()


class TestArchiveStore:
    """Test saving and loading named blueprints."""

    def test_save_and_load(self, archive, primary_button):
        """Test that a saved blueprint loads back equal."""
        saved = archive.save("primary", primary_button)
        assert saved.success
        assert saved.message == "Saved blueprint: primary"
        assert saved.value.name == "primary.json"

        loaded = archive.load("primary")
        assert loaded.success
        assert loaded.value == primary_button

    def test_save_accepts_wire_form(self, archive, primary_button_data):
        """Test saving a decoded JSON object."""
        assert archive.save("btn", primary_button_data).success
        assert isinstance(archive.load("btn").value, Blueprint)

    def test_save_overwrites(self, archive, primary_button, static_box):
        """Test that saving an existing name replaces it."""
        archive.save("item", primary_button)
        archive.save("item", static_box)
        assert archive.load("item").value.name == "Box"
        assert archive.list_names().value == ["item"]

    def test_save_invalid_blueprint(self, archive):
        """Test that malformed blueprints are not written."""
        result = archive.save("bad", {"kind": "fragment"})
        assert not result.success
        assert "name" in result.message
        assert archive.list_names().value == []

    def test_load_missing(self, archive):
        """Test the not-found message."""
        result = archive.load("ghost")
        assert not result.success
        assert result.message == "Blueprint not found: ghost"

    def test_load_corrupt_file(self, archive, tmp_path):
        """Test that an unreadable archive entry fails cleanly."""
        (tmp_path / "archive").mkdir()
        (tmp_path / "archive" / "broken.json").write_text("{")
        result = archive.load("broken")
        assert not result.success
        assert "broken is invalid" in result.message

    def test_list_names_sorted(self, archive, static_box):
        """Test sorted listing and the empty archive."""
        assert archive.list_names().value == []
        for name in ("zeta", "alpha", "mid"):
            archive.save(name, static_box)
        assert archive.list_names().value == ["alpha", "mid", "zeta"]

    def test_delete(self, archive, static_box):
        """Test deleting and deleting again."""
        archive.save("box", static_box)
        result = archive.delete("box")
        assert result.success
        assert result.message == "Deleted blueprint: box"
        assert archive.delete("box").message == "Blueprint not found: box"

    @pytest.mark.parametrize("name", ["", "../escape", "a/b", ".hidden", "nul\x00byte"])
    def test_invalid_names(self, archive, static_box, name):
        """Test that names cannot leave the archive directory."""
        assert not archive.save(name, static_box).success
        assert not archive.load(name).success
        assert not archive.delete(name).success

    def test_nul_byte_name(self, archive, static_box):
        """Test that a NUL byte in a name fails cleanly instead of raising."""
        result = archive.save("box\x00.json", static_box)
        assert not result.success
        assert result.message.startswith("Invalid archive name")
        assert archive.list_names().value == []


class TestTokenStore:
    """Test reading and merging design tokens."""

    def test_defaults_without_file(self, token_store):
        """Test that defaults are served when nothing was written."""
        result = token_store.read()
        assert result.success
        assert result.value == DEFAULT_TOKENS
        assert result.value is not DEFAULT_TOKENS

    def test_read_category(self, token_store):
        """Test reading one category."""
        assert token_store.read("radii").value["full"] == "9999px"

    def test_missing_category(self, token_store):
        """Test the category-not-found failure."""
        result = token_store.read("gradients")
        assert not result.success
        assert result.message == "Token category not found: gradients"

    def test_merge_replaces_top_level(self, token_store):
        """Test that merged categories replace wholesale."""
        result = token_store.merge({"colors": {"brand": "#ff0000"}})
        assert result.success
        assert result.message == "Updated: colors"
        assert token_store.read("colors").value == {"brand": "#ff0000"}
        assert token_store.read("spacing").value == DEFAULT_TOKENS["spacing"]

    def test_merge_writes_file(self, token_store):
        """Test that merging persists JSON."""
        token_store.merge({"z-index": {"modal": "50"}})
        data = json.loads(token_store.path.read_text())
        assert data["z-index"] == {"modal": "50"}
        assert "colors" in data

    def test_merge_rejects_non_object(self, token_store):
        """Test that only objects can be merged."""
        assert not token_store.merge(["colors"]).success

    def test_invalid_token_file(self, token_store):
        """Test that a corrupt token file is reported."""
        token_store.path.write_text("not json")
        result = token_store.read()
        assert not result.success
        assert "Invalid token file" in result.message

    def test_categories(self, token_store):
        """Test the category listing."""
        assert token_store.categories().value == list(DEFAULT_TOKENS)


class TestFormatTokens:
    """Test token output formats."""

    def test_json(self):
        """Test indented JSON output."""
        assert format_tokens({"a": "1"}) == '{\n  "a": "1"\n}'

    def test_css_category(self):
        """Test custom properties prefixed by the category."""
        text = format_tokens({"primary": "#000", "ring": "#999"}, "css", "colors")
        assert text == ":root {\n  --colors-primary: #000;\n  --colors-ring: #999;\n}"

    def test_css_all(self):
        """Test that nested categories form the prefix."""
        text = format_tokens({"radii": {"sm": "2px"}}, "css")
        assert text == ":root {\n  --radii-sm: 2px;\n}"

    def test_tailwind(self):
        """Test the theme.extend snippet."""
        text = format_tokens({"primary": "#000"}, "tailwind", "colors")
        assert text == (
            "// Add to tailwind.config.ts\n"
            "export default {\n"
            "  theme: {\n"
            "    extend: {\n"
            '      "colors": {\n'
            '        "primary": "#000"\n'
            "      }\n"
            "    },\n"
            "  },\n"
            "}"
        )

    def test_unknown_format(self):
        """Test that unknown formats raise."""
        with pytest.raises(StoreError, match="Unknown token format: yaml"):
            format_tokens({}, "yaml")
