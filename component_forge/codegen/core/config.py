"""
Generation options.

Per-target defaults merged with an optional JSON options file and caller
overrides. Keys that are not ``GeneratorConfig`` fields are kept in
``custom`` for the backend that understands them.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...logging_config import get_logger

logger = get_logger(__name__)

# camelCase spellings accepted for the shared options
OPTION_ALIASES = {
    "withTypes": "with_types",
    "withDocs": "with_docs",
    "outputFile": "output_file",
    "utilsImport": "utils_import",
}

# Target-specific keys read from ``custom`` by some backend
KNOWN_CUSTOM_KEYS = frozenset({"slot_import", "styled_import", "stylesheet_suffix"})


class ConfigError(Exception):
    """Raised when options cannot be loaded."""
    pass


@dataclass
class GeneratorConfig:
    """Target-agnostic generation options."""

    # Emit static type annotations (ignored by targets without a type system)
    with_types: bool = True

    # Emit a documentation header naming kind and variant axes
    with_docs: bool = True

    # Output settings
    output_file: Optional[str] = None

    # Import path of the class-merging helper used by utility-CSS targets
    utils_import: str = "@/lib/utils"

    # Custom settings (target-specific)
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Holds per-target defaults and merges overrides onto them."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported targets."""
        self._configs["react-tailwind"] = {
            "utils_import": "@/lib/utils",
            "custom": {"slot_import": "@radix-ui/react-slot"},
        }
        self._configs["react-styled"] = {
            "custom": {"styled_import": "styled-components"},
        }
        self._configs["react-css-modules"] = {
            "custom": {"stylesheet_suffix": ".module.css"},
        }
        self._configs["vue"] = {}
        self._configs["solid"] = {
            "utils_import": "@/lib/utils",
        }
        self._configs["html"] = {
            # Markup has no type system
            "with_types": False,
        }

    def get_config(self, target: Optional[str] = None,
                   custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete configuration for a target.

        Args:
            target: Target id whose defaults to start from (None for none)
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the target
        """
        # Start with defaults
        base_config = self._copy_defaults(target)

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            self._merge(base_config, file_config)

        # Apply custom overrides
        if custom_config:
            self._merge(base_config, custom_config)

        return self._dict_to_config(base_config)

    def _copy_defaults(self, target: Optional[str]) -> Dict[str, Any]:
        defaults = self._configs.get(target or "", {})
        copied = dict(defaults)
        copied["custom"] = dict(defaults.get("custom", {}))
        return copied

    def _merge(self, base: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        """Merge overrides into base; nested ``custom`` dicts are merged too."""
        for key, value in overrides.items():
            key = OPTION_ALIASES.get(key, key)
            if key == "custom" and isinstance(value, dict):
                base.setdefault("custom", {}).update(value)
            else:
                base[key] = value

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Read an options file; it must hold a JSON object."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration file %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Split known fields from target-specific keys."""
        # Extract known fields
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys belong to the backend
        if custom_args:
            existing_custom = dict(config_args.get('custom') or {})
            existing_custom.update(custom_args)
            config_args['custom'] = existing_custom

        return GeneratorConfig(**config_args)

    def validate_config(self, config: GeneratorConfig, target: str) -> List[str]:
        """
        Validate configuration for a target.

        Returns:
            List of validation warnings
        """
        warnings = []

        for flag in ("with_types", "with_docs"):
            if not isinstance(getattr(config, flag), bool):
                warnings.append(f"Option {flag} should be a boolean")

        if not config.utils_import:
            warnings.append("utils_import is empty; generated imports will be invalid")

        if target == "html" and config.with_types:
            warnings.append("with_types has no effect for the html target")

        if target == "react-css-modules":
            suffix = config.custom.get("stylesheet_suffix", ".module.css")
            if not str(suffix).endswith(".css"):
                warnings.append(f"Invalid stylesheet_suffix: {suffix}")

        for key in sorted(set(config.custom) - KNOWN_CUSTOM_KEYS):
            warnings.append(f"Unknown option '{key}' is not used by any target")

        return warnings


# Global configuration manager instance
_config_manager = None

def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(target: Optional[str] = None,
                custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        target: Target id whose defaults to start from
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the target
    """
    manager = get_config_manager()
    return manager.get_config(target, custom_config, config_file)
