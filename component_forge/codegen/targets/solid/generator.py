"""
SolidJS generator.

Solid components are plain functions over a reactive props object, so
variant props are separated with ``splitProps`` instead of destructuring.
The variant table reuses the cva builder shared with react-tailwind.
"""

from pathlib import Path
from typing import Any, Dict, List

from ...core.blueprint import Blueprint
from ...core.generator import ComponentGenerator
from ...core.naming import variants_identifier
from ...core.target import Target
from ...core.variants import VariantTable
from ..typescript import SOLID_PROP_TYPES, UNKNOWN_TYPE


class SolidGenerator(ComponentGenerator):
    """Code generator for SolidJS components."""

    prop_types = SOLID_PROP_TYPES
    fallback_type = UNKNOWN_TYPE
    dependencies = ["class-variance-authority", "clsx", "tailwind-merge"]

    @property
    def target_id(self) -> str:
        return Target.SOLID.value

    @property
    def display_name(self) -> str:
        return "SolidJS"

    @property
    def file_extension(self) -> str:
        return ".tsx" if self.with_types else ".jsx"

    @property
    def template_name(self) -> str:
        return "component.tsx.j2"

    def get_template_directory(self) -> Path:
        return Path(__file__).parent / "templates"

    def build_context(self, blueprint: Blueprint, table: VariantTable) -> Dict[str, Any]:
        return {
            "local_keys": self._local_keys(table),
            "class_expr": self._class_expression(blueprint, table),
        }

    def _local_keys(self, table: VariantTable) -> List[str]:
        return [*table.axis_names, "class", "children"]

    def _class_expression(self, blueprint: Blueprint, table: VariantTable) -> str:
        if table.has_variants:
            selection = ", ".join(f"{axis}: local.{axis}" for axis in table.axis_names)
            return f"cn({variants_identifier(blueprint.name)}({{ {selection} }}), local.class)"
        return f'cn("{table.base}", local.class)'
