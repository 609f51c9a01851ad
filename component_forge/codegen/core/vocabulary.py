"""
Vocabulary tables shared by all target backends.

Maps abstract base-element keys to host elements and abstract prop
names to semantic prop types. Tables are read-only; every lookup falls
back to a generic value instead of raising.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class PropType(Enum):
    """Semantic prop types understood by every backend."""

    STRING = "string"
    BOOLEAN = "boolean"
    NODE = "node"  # Anything renderable
    STRING_CALLBACK = "string_callback"  # (value: string) => void
    VOID_CALLBACK = "void_callback"  # () => void
    OPTION_LIST = "option_list"  # [{label, value}]
    UNKNOWN = "unknown"


FALLBACK_ELEMENT = "div"

BASE_ELEMENTS: Mapping[str, str] = MappingProxyType(
    {
        # Interactive
        "button": "button",
        "icon-button": "button",
        "link": "a",
        "anchor": "a",
        # Form controls
        "input": "input",
        "text-field": "input",
        "checkbox": "input",
        "textarea": "textarea",
        "select": "select",
        "form": "form",
        "label": "label",
        "fieldset": "fieldset",
        # Media
        "image": "img",
        "avatar": "span",
        # Text
        "heading": "h2",
        "text": "p",
        "paragraph": "p",
        "badge": "span",
        "span": "span",
        # Lists and data
        "list": "ul",
        "list-item": "li",
        "menu": "ul",
        "menu-item": "li",
        "table": "table",
        "data-grid": "table",
        # Layout
        "container": "div",
        "card": "div",
        "stack": "div",
        "tabs": "div",
        "tooltip": "div",
        "alert": "div",
        "modal": "div",
        "dialog": "dialog",
        "section": "section",
        "article": "article",
        "aside": "aside",
        "header": "header",
        "footer": "footer",
        "nav": "nav",
        "navigation": "nav",
        "main": "main",
    }
)


@dataclass(frozen=True)
class HostElement:
    """DOM typing information for a host element tag."""

    tag: str
    dom_interface: str  # e.g. HTMLButtonElement
    attributes_type: str  # React attribute interface, e.g. ButtonHTMLAttributes

    @property
    def is_void(self) -> bool:
        """Whether the element cannot have children."""
        return self.tag in VOID_ELEMENTS


VOID_ELEMENTS = frozenset({"input", "img", "br", "hr", "meta", "link", "source"})

_HOST_ELEMENTS: Mapping[str, HostElement] = MappingProxyType(
    {
        tag: HostElement(tag, dom, attrs)
        for tag, dom, attrs in [
            ("button", "HTMLButtonElement", "ButtonHTMLAttributes"),
            ("a", "HTMLAnchorElement", "AnchorHTMLAttributes"),
            ("input", "HTMLInputElement", "InputHTMLAttributes"),
            ("textarea", "HTMLTextAreaElement", "TextareaHTMLAttributes"),
            ("select", "HTMLSelectElement", "SelectHTMLAttributes"),
            ("form", "HTMLFormElement", "FormHTMLAttributes"),
            ("label", "HTMLLabelElement", "LabelHTMLAttributes"),
            ("fieldset", "HTMLFieldSetElement", "FieldsetHTMLAttributes"),
            ("img", "HTMLImageElement", "ImgHTMLAttributes"),
            ("h2", "HTMLHeadingElement", "HTMLAttributes"),
            ("p", "HTMLParagraphElement", "HTMLAttributes"),
            ("span", "HTMLSpanElement", "HTMLAttributes"),
            ("ul", "HTMLUListElement", "HTMLAttributes"),
            ("li", "HTMLLIElement", "LiHTMLAttributes"),
            ("table", "HTMLTableElement", "TableHTMLAttributes"),
            ("dialog", "HTMLDialogElement", "DialogHTMLAttributes"),
            ("div", "HTMLDivElement", "HTMLAttributes"),
        ]
    }
)

PROP_TYPES: Mapping[str, PropType] = MappingProxyType(
    {
        # Text
        "label": PropType.STRING,
        "title": PropType.STRING,
        "description": PropType.STRING,
        "placeholder": PropType.STRING,
        "value": PropType.STRING,
        "defaultValue": PropType.STRING,
        "name": PropType.STRING,
        "href": PropType.STRING,
        "src": PropType.STRING,
        "alt": PropType.STRING,
        "fallback": PropType.STRING,
        "error": PropType.STRING,
        "helperText": PropType.STRING,
        "content": PropType.STRING,
        # Flags
        "open": PropType.BOOLEAN,
        "loading": PropType.BOOLEAN,
        "required": PropType.BOOLEAN,
        "checked": PropType.BOOLEAN,
        "hoverable": PropType.BOOLEAN,
        "dismissible": PropType.BOOLEAN,
        "striped": PropType.BOOLEAN,
        # Renderables
        "icon": PropType.NODE,
        "leftIcon": PropType.NODE,
        "rightIcon": PropType.NODE,
        "header": PropType.NODE,
        "footer": PropType.NODE,
        "trigger": PropType.NODE,
        "emptyState": PropType.NODE,
        # Callbacks
        "onChange": PropType.STRING_CALLBACK,
        "onValueChange": PropType.STRING_CALLBACK,
        "onSearch": PropType.STRING_CALLBACK,
        "onClose": PropType.VOID_CALLBACK,
        "onOpen": PropType.VOID_CALLBACK,
        "onSubmit": PropType.VOID_CALLBACK,
        "onDismiss": PropType.VOID_CALLBACK,
        # Collections
        "options": PropType.OPTION_LIST,
        "items": PropType.OPTION_LIST,
    }
)

RESERVED_PROPS = frozenset({"children", "onClick", "disabled", "className"})


def resolve_base_element(
    key: str, table: Mapping[str, str] = BASE_ELEMENTS
) -> str:
    """
    Resolve an abstract base key to a host element tag.

    Args:
        key: Base-element key from the blueprint
        table: Base-element table to consult

    Returns:
        Host tag, or the generic container tag when the key is unknown
    """
    return table.get(key, FALLBACK_ELEMENT)


def is_known_base(key: str, table: Mapping[str, str] = BASE_ELEMENTS) -> bool:
    """Check whether a base key has an explicit table entry."""
    return key in table


def host_element(tag: str) -> HostElement:
    """Get typing information for a host tag; unknown tags get generic types."""
    info = _HOST_ELEMENTS.get(tag)
    if info is None:
        return HostElement(tag, "HTMLElement", "HTMLAttributes")
    return info


def resolve_prop_type(
    name: str,
    override: Optional[PropType] = None,
    table: Mapping[str, PropType] = PROP_TYPES,
) -> PropType:
    """
    Resolve a prop name to its semantic type.

    Args:
        name: Prop name
        override: Explicit type declared on the blueprint, wins when present
        table: Prop-type table to consult

    Returns:
        PropType, ``PropType.UNKNOWN`` for names not in the table
    """
    if override is not None:
        return override
    return table.get(name, PropType.UNKNOWN)


def is_reserved_prop(name: str) -> bool:
    """Check whether a prop is part of the reserved set every component gets."""
    return name in RESERVED_PROPS
