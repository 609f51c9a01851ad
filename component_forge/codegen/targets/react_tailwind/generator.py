"""
Utility-CSS React generator.

Emits a forwardRef component whose variants are expressed through a
class-variance-authority builder, in the style of shadcn/ui.
"""

from pathlib import Path
from typing import Any, Dict, List

from ...core.blueprint import Blueprint
from ...core.generator import ComponentGenerator
from ...core.naming import variants_identifier
from ...core.target import Target
from ...core.variants import VariantTable
from ..typescript import REACT_PROP_TYPES, UNKNOWN_TYPE


class ReactTailwindGenerator(ComponentGenerator):
    """Code generator for Tailwind + cva React components."""

    prop_types = REACT_PROP_TYPES
    fallback_type = UNKNOWN_TYPE
    dependencies = [
        "@radix-ui/react-slot",
        "class-variance-authority",
        "clsx",
        "tailwind-merge",
    ]

    @property
    def target_id(self) -> str:
        return Target.REACT_TAILWIND.value

    @property
    def display_name(self) -> str:
        return "React + Tailwind (cva)"

    @property
    def file_extension(self) -> str:
        return ".tsx" if self.with_types else ".jsx"

    @property
    def template_name(self) -> str:
        return "component.tsx.j2"

    def get_template_directory(self) -> Path:
        """Return the react-tailwind templates directory."""
        return Path(__file__).parent / "templates"

    def build_context(self, blueprint: Blueprint, table: VariantTable) -> Dict[str, Any]:
        return {
            "slot_import": self.config.custom.get(
                "slot_import", "@radix-ui/react-slot"
            ),
            "exports": self._exports(blueprint, table),
        }

    def _exports(self, blueprint: Blueprint, table: VariantTable) -> List[str]:
        names = [blueprint.name]
        if table.has_variants:
            names.append(variants_identifier(blueprint.name))
        return names
