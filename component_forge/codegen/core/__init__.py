"""
Core code generation components.

Provides the blueprint model, vocabulary tables, variant expansion and
base classes used by all target backends.
"""

from .blueprint import (
    AuxiliaryStyles,
    AxisStyles,
    BaseStyle,
    Blueprint,
    BlueprintError,
    ComponentKind,
    Prop,
    parse_blueprint,
)
from .config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .generator import (
    ComponentGenerator,
    GenerationResult,
    GeneratorError,
    TargetType,
    generate_code,
)
from .naming import is_pascal_case, variants_identifier
from .target import DEFAULT_TARGET, Target, target_ids
from .templates import TemplateEngine, TemplateError, create_template_engine
from .variants import VariantAxis, VariantCombination, VariantTable, expand_variants
from .vocabulary import (
    BASE_ELEMENTS,
    PROP_TYPES,
    RESERVED_PROPS,
    PropType,
    resolve_base_element,
    resolve_prop_type,
)

__all__ = [
    # Blueprint model
    "Blueprint",
    "BlueprintError",
    "ComponentKind",
    "BaseStyle",
    "AxisStyles",
    "AuxiliaryStyles",
    "Prop",
    "parse_blueprint",
    # Base generator interface
    "ComponentGenerator",
    "GeneratorError",
    "GenerationResult",
    "TargetType",
    "generate_code",
    # Targets
    "Target",
    "DEFAULT_TARGET",
    "target_ids",
    # Variant expansion
    "VariantAxis",
    "VariantCombination",
    "VariantTable",
    "expand_variants",
    # Vocabulary tables
    "BASE_ELEMENTS",
    "PROP_TYPES",
    "RESERVED_PROPS",
    "PropType",
    "resolve_base_element",
    "resolve_prop_type",
    # Naming utilities
    "is_pascal_case",
    "variants_identifier",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
