"""
Naming utilities for code generation.

Derives secondary identifiers such as variant table names. Component
names themselves are emitted verbatim and never normalized.
"""

import re

_PASCAL_RE = re.compile(r"^[A-Z][A-Za-z0-9]*$")


def lower_first(name: str) -> str:
    """Lowercase only the first character: ``PrimaryButton`` -> ``primaryButton``."""
    return name[:1].lower() + name[1:]


def is_pascal_case(name: str) -> bool:
    """Check whether a component name follows PascalCase."""
    return bool(_PASCAL_RE.match(name))


def variants_identifier(component_name: str) -> str:
    """Name of the variant table for a component, e.g. ``buttonVariants``."""
    return f"{lower_first(component_name)}Variants"
