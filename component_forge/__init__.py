"""
component-forge: retargetable UI component code generator.

Describe a component once as a blueprint and generate it for React
(Tailwind, styled-components, CSS Modules), Vue, Solid or static HTML.
"""

__version__ = "0.1.0"

from .codegen import (
    Blueprint,
    BlueprintError,
    GenerationResult,
    GeneratorConfig,
    Target,
    compare_targets,
    generate,
    get_target_info,
    list_patterns,
    list_targets,
    lookup_pattern,
)
from .storage import ArchiveStore, StoreResult, TokenStore, format_tokens

__all__ = [
    "__version__",
    "ArchiveStore",
    "Blueprint",
    "BlueprintError",
    "GenerationResult",
    "GeneratorConfig",
    "StoreResult",
    "Target",
    "TokenStore",
    "compare_targets",
    "format_tokens",
    "generate",
    "get_target_info",
    "list_patterns",
    "list_targets",
    "lookup_pattern",
]
