"""
CSS Modules React generator.

The component imports a co-located ``<Name>.module.css`` and assembles
its class list from ``styles.base`` plus one module class per selected
variant value.
"""

from pathlib import Path
from typing import Any, Dict

from ...core.blueprint import Blueprint
from ...core.generator import ComponentGenerator
from ...core.target import Target
from ...core.variants import VariantTable
from ..typescript import REACT_PROP_TYPES, UNKNOWN_TYPE


class ReactCssModulesGenerator(ComponentGenerator):
    """Code generator for CSS Modules React components."""

    prop_types = REACT_PROP_TYPES
    fallback_type = UNKNOWN_TYPE
    dependencies = []

    @property
    def target_id(self) -> str:
        return Target.REACT_CSS_MODULES.value

    @property
    def display_name(self) -> str:
        return "React + CSS Modules"

    @property
    def file_extension(self) -> str:
        return ".tsx" if self.with_types else ".jsx"

    @property
    def template_name(self) -> str:
        return "component.tsx.j2"

    def get_template_directory(self) -> Path:
        return Path(__file__).parent / "templates"

    def build_context(self, blueprint: Blueprint, table: VariantTable) -> Dict[str, Any]:
        suffix = self.config.custom.get("stylesheet_suffix", ".module.css")
        return {"stylesheet": f"./{blueprint.name}{suffix}"}
