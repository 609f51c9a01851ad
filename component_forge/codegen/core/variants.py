"""
Variant expansion.

Turns a blueprint's variant axes and style buckets into a concrete
style table that backends position inside their own variant syntax.
Expansion is a pure function of the blueprint.
"""

from dataclasses import dataclass
from itertools import product
from math import prod
from typing import Dict, List, Mapping, Tuple

from .blueprint import Blueprint


@dataclass(frozen=True)
class VariantAxis:
    """One variant dimension with a style for every declared value."""

    name: str
    values: Tuple[str, ...]
    styles: Mapping[str, str]

    @property
    def default(self) -> str:
        """The first declared value."""
        return self.values[0]

    def style_for(self, value: str) -> str:
        return self.styles.get(value, "")

    def items(self) -> List[Tuple[str, str]]:
        """(value, style) pairs in declaration order."""
        return [(value, self.styles.get(value, "")) for value in self.values]

    @property
    def union_type(self) -> str:
        """TypeScript union of the value literals, e.g. ``"sm" | "lg"``."""
        return " | ".join(f'"{value}"' for value in self.values)


@dataclass(frozen=True)
class VariantCombination:
    """One cell of the cross-product style table."""

    selection: Mapping[str, str]
    classes: str


@dataclass(frozen=True)
class VariantTable:
    """Materialized variant axes, defaults and styles for a blueprint."""

    base: str
    axes: Tuple[VariantAxis, ...]

    @property
    def has_variants(self) -> bool:
        return len(self.axes) > 0

    @property
    def defaults(self) -> Dict[str, str]:
        """Default value per axis, in declaration order."""
        return {axis.name: axis.default for axis in self.axes}

    @property
    def axis_names(self) -> List[str]:
        return [axis.name for axis in self.axes]

    def axis(self, name: str) -> VariantAxis:
        for axis in self.axes:
            if axis.name == name:
                return axis
        raise KeyError(name)

    def style_for(self, axis: str, value: str) -> str:
        """Style fragment for an axis value; empty string for any miss."""
        for candidate in self.axes:
            if candidate.name == axis:
                return candidate.style_for(value)
        return ""

    def compose(self, selection: Mapping[str, str]) -> str:
        """Join the base style and the selected fragments, skipping empties."""
        parts = [self.base]
        parts.extend(self.style_for(axis, value) for axis, value in selection.items())
        return " ".join(part for part in parts if part)

    @property
    def combination_count(self) -> int:
        """Size of the cross product, computed without expanding it."""
        return prod(len(axis.values) for axis in self.axes)

    def combinations(self) -> List[VariantCombination]:
        """
        Expand the full cross product of all axes.

        Returns:
            Combinations in declaration order; a single base-only
            combination when there are no axes
        """
        if not self.has_variants:
            return [VariantCombination({}, self.compose({}))]

        combos = []
        for values in product(*(axis.values for axis in self.axes)):
            selection = dict(zip(self.axis_names, values))
            combos.append(VariantCombination(selection, self.compose(selection)))
        return combos


def expand_variants(blueprint: Blueprint) -> VariantTable:
    """
    Materialize the variant table for a blueprint.

    Args:
        blueprint: Blueprint to expand

    Returns:
        VariantTable with one axis per declared variant, each style
        table total over its declared values
    """
    axes = []
    for name, values in blueprint.variants.items():
        bucket = blueprint.axis_styles(name)
        styles = {value: bucket.get(value) if bucket else "" for value in values}
        axes.append(VariantAxis(name=name, values=tuple(values), styles=styles))

    return VariantTable(base=blueprint.base_style, axes=tuple(axes))
