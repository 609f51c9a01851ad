"""
TypeScript prop type mappings shared by the TSX-based targets.
"""

from typing import Dict

from ..core.generator import TargetType
from ..core.vocabulary import PropType

OPTION_LIST_TYPE = "Array<{ label: string; value: string }>"

UNKNOWN_TYPE = TargetType("unknown")


def typescript_prop_types(node_type: TargetType) -> Dict[PropType, TargetType]:
    """
    Build a PropType mapping for a TypeScript target.

    Args:
        node_type: The framework's renderable type (e.g. ``React.ReactNode``)

    Returns:
        Mapping from semantic prop type to TypeScript type
    """
    return {
        PropType.STRING: TargetType("string"),
        PropType.BOOLEAN: TargetType("boolean"),
        PropType.NODE: node_type,
        PropType.STRING_CALLBACK: TargetType("(value: string) => void"),
        PropType.VOID_CALLBACK: TargetType("() => void"),
        PropType.OPTION_LIST: TargetType(OPTION_LIST_TYPE),
        PropType.UNKNOWN: UNKNOWN_TYPE,
    }


REACT_PROP_TYPES = typescript_prop_types(TargetType("React.ReactNode"))

SOLID_PROP_TYPES = typescript_prop_types(
    TargetType("JSX.Element", frozenset({"JSX"}))
)
