"""
Base generator interface for all target backends.

Defines the contract that every backend implements: a single-pass
emitter from (Blueprint, options) to source text.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from ...logging_config import get_logger
from .blueprint import Blueprint
from .config import GeneratorConfig, get_config_manager
from .naming import is_pascal_case, variants_identifier
from .templates import TemplateEngine, create_template_engine
from .variants import VariantTable, expand_variants
from .vocabulary import (
    PropType,
    host_element,
    is_known_base,
    is_reserved_prop,
    resolve_base_element,
    resolve_prop_type,
)

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


@dataclass(frozen=True)
class TargetType:
    """A prop type expressed in a target language, with the imports it needs."""

    name: str
    imports_needed: FrozenSet[str] = field(default_factory=frozenset)


class ComponentGenerator(ABC):
    """Abstract base class for all target backends."""

    #: Mapping from semantic prop type to the target's type expression
    prop_types: Mapping[PropType, TargetType] = {}

    #: Type used for props whose semantic type has no mapping
    fallback_type: TargetType = TargetType("unknown")

    #: npm packages the generated code imports
    dependencies: List[str] = []

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None

    def _setup_templates(self):
        """Setup template engine for this generator."""
        template_dir = self.get_template_directory()
        if template_dir:
            self._template_engine = create_template_engine(template_dir)
        else:
            # Shared macros only
            self._template_engine = create_template_engine()

    @property
    @abstractmethod
    def target_id(self) -> str:
        """Return the target identifier (e.g., 'react-tailwind')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.tsx')."""
        pass

    @property
    @abstractmethod
    def template_name(self) -> str:
        """Return the name of the component template to render."""
        pass

    @property
    def display_name(self) -> str:
        """Human readable target name."""
        return self.target_id

    @property
    def lexer(self) -> str:
        """Pygments lexer name used when highlighting output."""
        return "tsx"

    @property
    def supports_types(self) -> bool:
        """Whether the target has an optional static type system."""
        return True

    @property
    def with_types(self) -> bool:
        """Effective ``with_types`` flag for this target."""
        return self.supports_types and bool(self.config.with_types)

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.

        Returns:
            Path to template directory or None
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    def generate(self, blueprint: Blueprint, table: Optional[VariantTable] = None) -> str:
        """
        Generate source for a blueprint.

        Args:
            blueprint: Component description
            table: Variant table already expanded from ``blueprint``

        Returns:
            Generated source text

        Raises:
            GeneratorError: If the backend's template is missing
        """
        if not self.template_exists(self.template_name):
            raise GeneratorError(
                f"Template not found for {self.target_id}: {self.template_name}"
            )

        if table is None:
            table = expand_variants(blueprint)
        context = self.build_common_context(blueprint, table)
        context.update(self.build_context(blueprint, table))
        logger.debug(
            "Rendering %s for %s (%d axes)",
            self.template_name,
            blueprint.name,
            len(table.axes),
        )
        return self.render_template(self.template_name, context)

    @abstractmethod
    def build_context(self, blueprint: Blueprint, table: VariantTable) -> Dict[str, Any]:
        """
        Build target-specific template variables.

        Args:
            blueprint: Component description
            table: Expanded variant table

        Returns:
            Variables merged over the common context
        """
        pass

    def build_common_context(
        self, blueprint: Blueprint, table: VariantTable
    ) -> Dict[str, Any]:
        """Template variables shared by every backend."""
        tag = resolve_base_element(blueprint.base)
        props = self.custom_props(blueprint)
        type_imports = sorted(
            {imp for prop in props for imp in prop["target_type"].imports_needed}
        )

        return {
            "name": blueprint.name,
            "kind": blueprint.kind.value,
            "description": blueprint.description,
            "with_types": self.with_types,
            "with_docs": bool(self.config.with_docs),
            "has_variants": table.has_variants,
            "table": table,
            "axes": table.axes,
            "defaults": table.defaults,
            "base_style": table.base,
            "tag": tag,
            "host": host_element(tag),
            "props": props,
            "type_imports": type_imports,
            "slots": list(blueprint.slots),
            "variants_name": variants_identifier(blueprint.name),
            "config": self.config,
        }

    def custom_props(self, blueprint: Blueprint) -> List[Dict[str, Any]]:
        """
        Resolve the blueprint's additional props to target types.

        Reserved props and props shadowing a variant axis are skipped.
        """
        resolved = []
        seen = set()
        for prop in blueprint.props:
            if is_reserved_prop(prop.name) or prop.name in blueprint.variants:
                continue
            if prop.name in seen:
                continue
            seen.add(prop.name)
            prop_type = resolve_prop_type(prop.name, prop.type)
            resolved.append(
                {
                    "name": prop.name,
                    "prop_type": prop_type,
                    "target_type": self.map_prop_type(prop_type),
                }
            )
        return resolved

    def map_prop_type(self, prop_type: PropType) -> TargetType:
        """Map a semantic prop type to this target's type expression."""
        return self.prop_types.get(prop_type, self.fallback_type)

    def validate_blueprint(self, blueprint: Blueprint) -> List[str]:
        """
        Collect non-fatal warnings about a blueprint.

        Backends may override this to add target-specific checks.

        Args:
            blueprint: Blueprint to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        if not is_pascal_case(blueprint.name):
            warnings.append(
                f"Component name '{blueprint.name}' is not PascalCase; it is emitted as-is"
            )

        if not is_known_base(blueprint.base):
            warnings.append(
                f"Unknown base '{blueprint.base}' - falling back to "
                f"<{resolve_base_element(blueprint.base)}>"
            )

        for prop in blueprint.props:
            if is_reserved_prop(prop.name):
                warnings.append(f"Prop '{prop.name}' is reserved and always available")
            elif prop.name in blueprint.variants:
                warnings.append(
                    f"Prop '{prop.name}' shadows a variant axis and is ignored"
                )
            elif resolve_prop_type(prop.name, prop.type) == PropType.UNKNOWN:
                warnings.append(
                    f"Unknown prop '{prop.name}' typed as {self.fallback_type.name}"
                )

        for axis, values in blueprint.variants.items():
            bucket = blueprint.axis_styles(axis)
            missing = [v for v in values if bucket is None or v not in bucket.styles]
            if missing:
                warnings.append(
                    f"Variant {axis} has no style for: {', '.join(missing)}"
                )

        for bucket in blueprint.auxiliary_styles():
            warnings.append(f"Style bucket '{bucket.name}' is not used by {self.target_id}")

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Strips trailing whitespace, collapses runs of blank lines and
        guarantees a single trailing newline.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1 and formatted_lines:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        while formatted_lines and not formatted_lines[-1]:
            formatted_lines.pop()

        return "\n".join(formatted_lines) + "\n"

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result

    def __repr__(self) -> str:
        if self.success:
            return f"GenerationResult(success=True, chars={len(self.code)})"
        return f"GenerationResult(success=False, error={self.error_message!r})"


def generate_code(
    generator: ComponentGenerator, blueprint: Blueprint
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Backend instance
        blueprint: Blueprint to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = get_config_manager().validate_config(generator.config, generator.target_id)
        warnings.extend(generator.validate_blueprint(blueprint))

        table = expand_variants(blueprint)
        code = generator.generate(blueprint, table)
        formatted_code = generator.format_code(code)

        metadata = {
            "target": generator.target_id,
            "file_extension": generator.file_extension,
            "component": blueprint.name,
            "kind": blueprint.kind.value,
            "axis_count": len(table.axes),
            "has_variants": table.has_variants,
            "combination_count": table.combination_count,
        }

        return GenerationResult(formatted_code, warnings, metadata)

    except Exception as e:
        logger.error("Generation for %s failed: %s", generator.target_id, e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
