"""
Component Forge Code Generation Module

Generates UI component source for several frameworks from a single
framework-agnostic blueprint.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from ..logging_config import get_logger
from .core.blueprint import Blueprint, BlueprintError, parse_blueprint
from .core.config import GeneratorConfig, load_config
from .core.generator import ComponentGenerator, GenerationResult, generate_code
from .core.target import DEFAULT_TARGET, Target
from .guides import get_target_guide
from .patterns import list_patterns, lookup_pattern
from .registry import (
    BackendRegistry,
    RegistryError,
    get_generator,
    get_registry,
    get_target_info,
    list_targets,
)

logger = get_logger(__name__)

BlueprintLike = Union[Blueprint, Dict[str, Any], str]
OptionsLike = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


def generate(
    blueprint: BlueprintLike,
    target: Union[Target, str, None] = DEFAULT_TARGET,
    options: OptionsLike = None,
) -> GenerationResult:
    """
    Generate component source for a target.

    Never raises: malformed input and backend failures are reported
    through a failed GenerationResult. Unknown targets fall back to
    react-tailwind and are flagged in ``metadata["fallback"]``.

    Args:
        blueprint: Blueprint, decoded JSON object, or JSON text
        target: Target member, id or alias
        options: GeneratorConfig, dict of overrides, config file path, or None

    Returns:
        GenerationResult with generated code, warnings and metadata
    """
    registry = get_registry()
    resolved, fell_back = registry.resolve(target)

    try:
        parsed = parse_blueprint(blueprint)
    except BlueprintError as e:
        logger.warning("Rejected blueprint: %s", e)
        return GenerationResult.error(str(e), exception=e)

    try:
        generator = registry.create_generator(resolved, options)
    except RegistryError as e:
        logger.warning("Could not configure %s: %s", resolved.value, e)
        return GenerationResult.error(str(e), exception=e)

    result = generate_code(generator, parsed)
    if result.success:
        result.metadata["fallback"] = fell_back
        if fell_back:
            result.warnings.append(
                f"Unknown target '{target}', generated {resolved.value} instead"
            )
    return result


def compare_targets(
    blueprint: BlueprintLike,
    targets: Optional[Sequence[Union[Target, str]]] = None,
    options: OptionsLike = None,
) -> str:
    """
    Render one blueprint for several targets as a Markdown document.

    Args:
        blueprint: Blueprint, decoded JSON object, or JSON text
        targets: Targets to include (all targets when omitted)
        options: Generation options shared by every target

    Returns:
        Markdown with one fenced code block per target
    """
    try:
        title = parse_blueprint(blueprint).name
    except BlueprintError as e:
        return f"# Target comparison\n\nInvalid blueprint: {e}\n"

    registry = get_registry()
    sections = [f"# Target comparison: {title}"]

    for name in targets or list_targets():
        resolved, _ = registry.resolve(name)
        result = generate(blueprint, resolved, options)
        generator = registry.create_generator(resolved)
        heading = f"## {generator.display_name} (`{resolved.value}`)"
        if result.success:
            body = f"```{generator.lexer}\n{result.code}```"
        else:
            body = f"Generation failed: {result.error_message}"
        sections.append(f"{heading}\n\n{body}")

    return "\n\n".join(sections) + "\n"


# Version info
__version__ = "0.1.0"

__all__ = [
    "BackendRegistry",
    "Blueprint",
    "BlueprintError",
    "ComponentGenerator",
    "GenerationResult",
    "GeneratorConfig",
    "RegistryError",
    "Target",
    "compare_targets",
    "generate",
    "get_generator",
    "get_registry",
    "get_target_guide",
    "get_target_info",
    "list_patterns",
    "list_targets",
    "load_config",
    "lookup_pattern",
]
