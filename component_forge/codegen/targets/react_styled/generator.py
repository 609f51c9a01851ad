"""
CSS-in-JS React generator.

Emits one styled-components block per component. The block is a fixed
skeleton (display, alignment, transition, disabled state); blueprint
style strings are not expanded into it. Variant values reach the styled
element as transient ``$axis`` props.
"""

from pathlib import Path
from typing import Any, Dict, List

from ...core.blueprint import Blueprint
from ...core.generator import ComponentGenerator
from ...core.target import Target
from ...core.variants import VariantTable
from ..typescript import REACT_PROP_TYPES, UNKNOWN_TYPE


class ReactStyledGenerator(ComponentGenerator):
    """Code generator for styled-components React components."""

    prop_types = REACT_PROP_TYPES
    fallback_type = UNKNOWN_TYPE
    dependencies = ["styled-components"]

    @property
    def target_id(self) -> str:
        return Target.REACT_STYLED.value

    @property
    def display_name(self) -> str:
        return "React + styled-components"

    @property
    def file_extension(self) -> str:
        return ".tsx" if self.with_types else ".jsx"

    @property
    def template_name(self) -> str:
        return "component.tsx.j2"

    def get_template_directory(self) -> Path:
        """Return the react-styled templates directory."""
        return Path(__file__).parent / "templates"

    def build_context(self, blueprint: Blueprint, table: VariantTable) -> Dict[str, Any]:
        return {
            "styled_import": self.config.custom.get("styled_import", "styled-components"),
            "styled_name": f"Styled{blueprint.name}",
        }

    def validate_blueprint(self, blueprint: Blueprint) -> List[str]:
        """Add a note that style strings are not carried into the styled block."""
        warnings = super().validate_blueprint(blueprint)
        if blueprint.styles:
            warnings.append(
                "react-styled emits a fixed style skeleton; blueprint styles are not applied"
            )
        return warnings
