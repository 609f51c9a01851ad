"""
Static markup generator.

HTML has no component abstraction, so the output is a specimen sheet:
one element for the base style followed by one element per variant
value. Axes are listed independently; the cross product is not emitted.
"""

import html
from pathlib import Path
from typing import Any, Dict, List

from ...core.blueprint import Blueprint
from ...core.generator import ComponentGenerator, TargetType
from ...core.target import Target
from ...core.variants import VariantTable
from ...core.vocabulary import host_element, resolve_base_element


def render_element(tag: str, classes: str, content: str) -> str:
    """
    Render a single element.

    Void elements self-close and drop their content; an empty class
    list omits the attribute.
    """
    attrs = f' class="{html.escape(classes, quote=True)}"' if classes else ""
    if host_element(tag).is_void:
        return f"<{tag}{attrs} />"
    return f"<{tag}{attrs}>{html.escape(content)}</{tag}>"


class HtmlGenerator(ComponentGenerator):
    """Code generator for static HTML specimens."""

    fallback_type = TargetType("")
    dependencies = []

    @property
    def target_id(self) -> str:
        return Target.HTML.value

    @property
    def display_name(self) -> str:
        return "Static HTML"

    @property
    def file_extension(self) -> str:
        return ".html"

    @property
    def lexer(self) -> str:
        return "html"

    @property
    def supports_types(self) -> bool:
        return False

    @property
    def template_name(self) -> str:
        return "component.html.j2"

    def get_template_directory(self) -> Path:
        return Path(__file__).parent / "templates"

    def build_context(self, blueprint: Blueprint, table: VariantTable) -> Dict[str, Any]:
        return {"blocks": self.build_blocks(blueprint, table)}

    def build_blocks(self, blueprint: Blueprint, table: VariantTable) -> List[Dict[str, str]]:
        """Labelled specimen elements: the base first, then each axis value."""
        tag = resolve_base_element(blueprint.base)
        blocks = [
            {
                "label": "Base",
                "markup": render_element(tag, table.base, blueprint.name),
            }
        ]
        for axis in table.axes:
            for value, style in axis.items():
                classes = f"{table.base} {style}".strip()
                blocks.append(
                    {
                        "label": f"Variant: {axis.name}={value}",
                        "markup": render_element(tag, classes, blueprint.name),
                    }
                )
        return blocks
