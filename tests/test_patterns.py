"""Tests for the pattern catalogue."""

from component_forge.codegen import lookup_pattern
from component_forge.codegen.core.blueprint import ComponentKind
from component_forge.codegen.patterns import DEFAULT_PATTERN, PATTERNS, list_patterns


class TestPatterns:
    """Test pattern lookup."""

    def test_data_table(self):
        """Test the data table seed."""
        blueprint = lookup_pattern("data-table")
        assert blueprint.kind == ComponentKind.STRUCTURE
        assert blueprint.base == "data-grid"
        assert blueprint.variants["density"] == ("compact", "normal", "comfortable")

    def test_unknown_key_returns_button(self):
        """Test the default entry for unrecognized keys."""
        assert DEFAULT_PATTERN == "button"
        assert lookup_pattern("carousel") == lookup_pattern("button")
        assert lookup_pattern("carousel").name == "Button"

    def test_fresh_instances(self):
        """Test that lookups do not share state."""
        first = lookup_pattern("modal")
        second = lookup_pattern("modal")
        assert first == second
        assert first is not second

    def test_catalogue_keys(self):
        """Test the listed keys."""
        keys = list_patterns()
        assert keys == list(PATTERNS)
        for key in ("button", "input", "modal", "card", "data-table", "tabs"):
            assert key in keys

    def test_every_pattern_parses(self):
        """Test that every entry is a valid blueprint."""
        for key in list_patterns():
            blueprint = lookup_pattern(key)
            assert blueprint.name
            assert blueprint.to_dict()["name"] == PATTERNS[key]["name"]

    def test_modal_auxiliary_bucket(self):
        """Test that the overlay style survives as an auxiliary bucket."""
        blueprint = lookup_pattern("modal")
        assert [b.name for b in blueprint.auxiliary_styles()] == ["overlay"]
        assert blueprint.slots == ("header", "footer")
