"""
Vue 3 generator.

Emits a ``<script setup>`` single-file component. Typed output declares
an interface and uses ``withDefaults(defineProps<Props>())``; untyped
output falls back to runtime prop declarations.
"""

from pathlib import Path
from typing import Any, Dict

from ...core.blueprint import Blueprint
from ...core.generator import ComponentGenerator, TargetType
from ...core.target import Target
from ...core.variants import VariantTable
from ...core.vocabulary import PropType
from ..typescript import UNKNOWN_TYPE, typescript_prop_types

VUE_PROP_TYPES = typescript_prop_types(TargetType("VNode", frozenset({"VNode"})))

# Runtime constructors for defineProps({...}) when types are off
RUNTIME_NULL = TargetType("null")

VUE_RUNTIME_PROP_TYPES = {
    PropType.STRING: TargetType("String"),
    PropType.BOOLEAN: TargetType("Boolean"),
    PropType.NODE: TargetType("Object"),
    PropType.STRING_CALLBACK: TargetType("Function"),
    PropType.VOID_CALLBACK: TargetType("Function"),
    PropType.OPTION_LIST: TargetType("Array"),
    PropType.UNKNOWN: RUNTIME_NULL,
}


class VueGenerator(ComponentGenerator):
    """Code generator for Vue 3 composition API components."""

    prop_types = VUE_PROP_TYPES
    fallback_type = UNKNOWN_TYPE
    dependencies = ["vue"]

    @property
    def target_id(self) -> str:
        return Target.VUE.value

    @property
    def display_name(self) -> str:
        return "Vue 3 (script setup)"

    @property
    def file_extension(self) -> str:
        return ".vue"

    @property
    def lexer(self) -> str:
        return "html"

    @property
    def template_name(self) -> str:
        return "component.vue.j2"

    def get_template_directory(self) -> Path:
        return Path(__file__).parent / "templates"

    def map_prop_type(self, prop_type: PropType) -> TargetType:
        """Map to TypeScript types when typed, runtime constructors otherwise."""
        if self.with_types:
            return super().map_prop_type(prop_type)
        return VUE_RUNTIME_PROP_TYPES.get(prop_type, RUNTIME_NULL)

    def build_context(self, blueprint: Blueprint, table: VariantTable) -> Dict[str, Any]:
        has_custom_props = bool(self.custom_props(blueprint))
        if table.has_variants:
            class_attr = ':class="classes"'
        elif table.base:
            class_attr = f'class="{table.base}"'
        else:
            class_attr = ""

        return {
            "emit_props": table.has_variants or has_custom_props,
            "class_attr": class_attr,
        }
