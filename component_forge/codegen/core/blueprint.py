"""
Core blueprint representation for code generation.

Converts the JSON wire form of a component description into a
normalized, immutable internal format that every backend works with.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .vocabulary import PropType


class BlueprintError(Exception):
    """Exception raised for malformed blueprint input."""

    pass


class ComponentKind(Enum):
    """Descriptive component category, only used for documentation."""

    FRAGMENT = "fragment"
    COMPOUND = "compound"
    STRUCTURE = "structure"


BASE_BUCKET = "base"


@dataclass(frozen=True)
class BaseStyle:
    """Style applied to every rendering of the component."""

    style: str


@dataclass(frozen=True)
class AxisStyles:
    """Per-value style fragments for one variant axis."""

    axis: str
    styles: Mapping[str, str]

    def get(self, value: str) -> str:
        """Style for a value, empty when the value has no entry."""
        return self.styles.get(value, "")


@dataclass(frozen=True)
class AuxiliaryStyles:
    """A bucket that is neither ``base`` nor a declared axis (e.g. ``overlay``)."""

    name: str
    style: Union[str, Mapping[str, str]]


StyleBucket = Union[BaseStyle, AxisStyles, AuxiliaryStyles]


@dataclass(frozen=True)
class Prop:
    """An additional prop beyond the reserved set."""

    name: str
    type: Optional[PropType] = None  # Explicit override of the vocabulary

    def to_wire(self) -> Union[str, Dict[str, str]]:
        if self.type is None:
            return self.name
        return {"name": self.name, "type": self.type.value}


@dataclass(frozen=True)
class Blueprint:
    """Abstract, target-agnostic description of one UI component."""

    name: str
    kind: ComponentKind = ComponentKind.FRAGMENT
    base: str = "container"
    variants: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    styles: Tuple[StyleBucket, ...] = ()
    props: Tuple[Prop, ...] = ()
    slots: Tuple[str, ...] = ()
    composition: Tuple[str, ...] = ()
    description: Optional[str] = None

    @property
    def has_variants(self) -> bool:
        """Whether any variant axis is declared."""
        return len(self.variants) > 0

    @property
    def base_style(self) -> str:
        """The base bucket's style, empty when there is none."""
        for bucket in self.styles:
            if isinstance(bucket, BaseStyle):
                return bucket.style
        return ""

    def axis_styles(self, axis: str) -> Optional[AxisStyles]:
        """Get the style bucket for an axis, if one was provided."""
        for bucket in self.styles:
            if isinstance(bucket, AxisStyles) and bucket.axis == axis:
                return bucket
        return None

    def auxiliary_styles(self) -> List[AuxiliaryStyles]:
        """Buckets that primary backends do not consume."""
        return [b for b in self.styles if isinstance(b, AuxiliaryStyles)]

    def evolve(self, **changes: Any) -> "Blueprint":
        """Return a copy with some fields replaced.

        Plain JSON-style values are accepted for ``variants``, ``styles``,
        ``props``, ``slots`` and ``composition`` and are normalized the same
        way :meth:`from_dict` normalizes them.
        """
        data = self.to_dict()
        for key, value in changes.items():
            if key not in data:
                raise BlueprintError(f"Unknown blueprint field: {key}")
            if key == "kind" and isinstance(value, ComponentKind):
                value = value.value
            data[key] = value
        # Buckets are re-classified against the (possibly new) axes
        return Blueprint.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON wire form."""
        styles: Dict[str, Any] = {}
        for bucket in self.styles:
            if isinstance(bucket, BaseStyle):
                styles[BASE_BUCKET] = bucket.style
            elif isinstance(bucket, AxisStyles):
                styles[bucket.axis] = dict(bucket.styles)
            else:
                styles[bucket.name] = (
                    bucket.style
                    if isinstance(bucket.style, str)
                    else dict(bucket.style)
                )

        data: Dict[str, Any] = {
            "name": self.name,
            "kind": self.kind.value,
            "base": self.base,
            "variants": {axis: list(values) for axis, values in self.variants.items()},
            "styles": styles,
            "props": [prop.to_wire() for prop in self.props],
            "slots": list(self.slots),
            "composition": list(self.composition),
        }
        if self.description:
            data["description"] = self.description
        return data

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON text."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Blueprint":
        """
        Build a blueprint from its JSON wire form.

        Args:
            data: Decoded JSON object

        Returns:
            Validated Blueprint

        Raises:
            BlueprintError: If a required field is missing or a field has
                the wrong shape
        """
        if not isinstance(data, Mapping):
            raise BlueprintError(
                f"Blueprint must be a JSON object, got {type(data).__name__}"
            )

        name = data.get("name")
        if name is None:
            raise BlueprintError("Missing required field: name")
        if not isinstance(name, str) or not name.strip():
            raise BlueprintError("Field 'name' must be a non-empty string")

        kind = _parse_kind(data.get("kind", ComponentKind.FRAGMENT.value))

        base = data.get("base", "container")
        if not isinstance(base, str):
            raise BlueprintError("Field 'base' must be a string")

        variants = _parse_variants(data.get("variants") or {})
        styles = _parse_styles(data.get("styles") or {}, variants)
        props = _parse_props(data.get("props") or [])

        description = data.get("description")
        if description is not None and not isinstance(description, str):
            raise BlueprintError("Field 'description' must be a string")

        return cls(
            name=name,
            kind=kind,
            base=base,
            variants=MappingProxyType(variants),
            styles=styles,
            props=props,
            slots=_parse_names(data.get("slots") or [], "slots"),
            composition=_parse_names(data.get("composition") or [], "composition"),
            description=description,
        )

    @classmethod
    def from_json(cls, text: str) -> "Blueprint":
        """
        Parse a blueprint from JSON text.

        Raises:
            BlueprintError: If the text is not valid JSON or not a valid blueprint
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise BlueprintError(f"Invalid blueprint JSON: {e}") from e
        return cls.from_dict(data)


def _parse_kind(value: Any) -> ComponentKind:
    if isinstance(value, ComponentKind):
        return value
    try:
        return ComponentKind(value)
    except ValueError:
        valid = ", ".join(k.value for k in ComponentKind)
        raise BlueprintError(f"Invalid kind '{value}' (expected one of: {valid})")


def _parse_variants(raw: Any) -> Dict[str, Tuple[str, ...]]:
    if not isinstance(raw, Mapping):
        raise BlueprintError("Field 'variants' must be an object of axis -> values")

    variants: Dict[str, Tuple[str, ...]] = {}
    for axis, values in raw.items():
        if isinstance(values, str) or not isinstance(values, (list, tuple)):
            raise BlueprintError(f"Variant axis '{axis}' must be a list of values")
        if not values:
            raise BlueprintError(f"Variant axis '{axis}' must declare at least one value")
        if not all(isinstance(v, str) for v in values):
            raise BlueprintError(f"Variant axis '{axis}' values must be strings")
        variants[axis] = tuple(values)
    return variants


def _parse_styles(
    raw: Any, variants: Mapping[str, Tuple[str, ...]]
) -> Tuple[StyleBucket, ...]:
    if not isinstance(raw, Mapping):
        raise BlueprintError("Field 'styles' must be an object")

    buckets: List[StyleBucket] = []
    for key, value in raw.items():
        if key == BASE_BUCKET:
            if not isinstance(value, str):
                raise BlueprintError("Style bucket 'base' must be a string")
            buckets.append(BaseStyle(value))
        elif key in variants:
            if not isinstance(value, Mapping):
                raise BlueprintError(
                    f"Style bucket '{key}' must map variant values to styles"
                )
            _check_string_values(key, value)
            buckets.append(AxisStyles(key, dict(value)))
        elif isinstance(value, str):
            buckets.append(AuxiliaryStyles(key, value))
        elif isinstance(value, Mapping):
            _check_string_values(key, value)
            buckets.append(AuxiliaryStyles(key, dict(value)))
        else:
            raise BlueprintError(
                f"Style bucket '{key}' must be a string or an object of strings"
            )
    return tuple(buckets)


def _check_string_values(bucket: str, mapping: Mapping[str, Any]) -> None:
    for value_name, style in mapping.items():
        if not isinstance(style, str):
            raise BlueprintError(f"Style '{bucket}.{value_name}' must be a string")


def _parse_props(raw: Any) -> Tuple[Prop, ...]:
    if isinstance(raw, str) or not isinstance(raw, (list, tuple)):
        raise BlueprintError("Field 'props' must be a list")

    props = []
    for entry in raw:
        if isinstance(entry, str):
            props.append(Prop(entry))
        elif isinstance(entry, Mapping) and isinstance(entry.get("name"), str):
            type_name = entry.get("type")
            prop_type = None
            if type_name is not None:
                try:
                    prop_type = PropType(type_name)
                except ValueError:
                    raise BlueprintError(
                        f"Invalid type '{type_name}' for prop '{entry['name']}'"
                    )
            props.append(Prop(entry["name"], prop_type))
        else:
            raise BlueprintError(f"Invalid prop entry: {entry!r}")
    return tuple(props)


def _parse_names(raw: Any, field_name: str) -> Tuple[str, ...]:
    if isinstance(raw, str) or not isinstance(raw, (list, tuple)):
        raise BlueprintError(f"Field '{field_name}' must be a list")
    if not all(isinstance(item, str) for item in raw):
        raise BlueprintError(f"Field '{field_name}' must contain only strings")
    return tuple(raw)


def parse_blueprint(source: Union["Blueprint", Mapping[str, Any], str]) -> Blueprint:
    """
    Normalize any accepted blueprint form into a Blueprint.

    Args:
        source: Blueprint instance, decoded JSON object, or JSON text

    Returns:
        Blueprint

    Raises:
        BlueprintError: If the source cannot be converted
    """
    if isinstance(source, Blueprint):
        return source
    if isinstance(source, str):
        return Blueprint.from_json(source)
    if isinstance(source, Mapping):
        return Blueprint.from_dict(source)
    raise BlueprintError(f"Unsupported blueprint input: {type(source).__name__}")
