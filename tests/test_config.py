"""Tests for generation configuration loading."""

import json

import pytest

from component_forge.codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


class TestConfigManager:
    """Test merging defaults, files and overrides."""

    def test_plain_defaults(self):
        """Test the target-agnostic defaults."""
        config = load_config()
        assert config.with_types is True
        assert config.with_docs is True
        assert config.utils_import == "@/lib/utils"
        assert config.custom == {}

    def test_target_defaults(self):
        """Test per-target default settings."""
        assert load_config("html").with_types is False
        assert load_config("react-tailwind").custom["slot_import"] == "@radix-ui/react-slot"
        assert load_config("react-styled").custom["styled_import"] == "styled-components"

    def test_unknown_keys_go_to_custom(self):
        """Test that unrecognized options become target-specific settings."""
        config = load_config("react-css-modules", {"stylesheet_suffix": ".scss", "with_docs": False})
        assert config.with_docs is False
        assert config.custom["stylesheet_suffix"] == ".scss"

    def test_overrides_do_not_leak(self):
        """Test that one call's overrides leave the defaults untouched."""
        load_config("react-styled", {"styled_import": "@emotion/styled"})
        assert load_config("react-styled").custom["styled_import"] == "styled-components"

    def test_config_file(self, tmp_path):
        """Test loading options from a JSON file with overrides on top."""
        path = tmp_path / "options.json"
        path.write_text(json.dumps({"with_types": False, "utils_import": "~/cn"}))
        config = load_config("solid", {"utils_import": "#/cn"}, path)
        assert config.with_types is False
        assert config.utils_import == "#/cn"

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises."""
        with pytest.raises(ConfigError, match="not found"):
            load_config(config_file=tmp_path / "missing.json")

    def test_non_json_suffix(self, tmp_path):
        """Test that config files must be JSON."""
        path = tmp_path / "options.yaml"
        path.write_text("with_types: false")
        with pytest.raises(ConfigError, match="must be JSON"):
            load_config(config_file=path)

    def test_invalid_json(self, tmp_path):
        """Test a config file with broken JSON."""
        path = tmp_path / "options.json"
        path.write_text("{")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(config_file=path)

    def test_camel_case_aliases(self, tmp_path):
        """Test that camelCase option names map onto the shared fields."""
        config = load_config(
            "solid", {"withTypes": False, "withDocs": False, "utilsImport": "~/cn"}
        )
        assert config.with_types is False
        assert config.with_docs is False
        assert config.utils_import == "~/cn"
        assert config.custom == {}

        path = tmp_path / "options.json"
        path.write_text(json.dumps({"withDocs": False}))
        assert load_config("vue", config_file=path).with_docs is False


class TestValidateConfig:
    """Test configuration warnings."""

    def test_html_types_warning(self):
        """Test that typed html output is flagged."""
        manager = ConfigManager()
        warnings = manager.validate_config(GeneratorConfig(with_types=True), "html")
        assert "with_types has no effect for the html target" in warnings

    def test_stylesheet_suffix(self):
        """Test the CSS Modules suffix check."""
        manager = ConfigManager()
        config = GeneratorConfig(custom={"stylesheet_suffix": ".txt"})
        assert manager.validate_config(config, "react-css-modules") == [
            "Invalid stylesheet_suffix: .txt"
        ]

    def test_unknown_option_warning(self):
        """Test that misspelled options are reported instead of dropped silently."""
        manager = ConfigManager()
        config = load_config("react-tailwind", {"with_doc": False})
        assert manager.validate_config(config, "react-tailwind") == [
            "Unknown option 'with_doc' is not used by any target"
        ]

    def test_valid_config(self):
        """Test that defaults produce no warnings."""
        manager = ConfigManager()
        assert manager.validate_config(load_config("vue"), "vue") == []
