"""
Backend registry for the closed set of generation targets.

Maps every ``Target`` member to a backend class, resolves user supplied
target names (ids and aliases, case-insensitive) and falls back to the
default target for anything unrecognized.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from ..logging_config import get_logger
from .core.config import GeneratorConfig, load_config
from .core.generator import ComponentGenerator
from .core.target import DEFAULT_TARGET, Target

logger = get_logger(__name__)

TargetLike = Union[Target, str]
ConfigLike = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]

# Package manager -> install verb
PACKAGE_MANAGERS = {
    "npm": "npm install",
    "pnpm": "pnpm add",
    "yarn": "yarn add",
    "bun": "bun add",
}


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


def install_command(dependencies: List[str], package_manager: str = "npm") -> str:
    """
    Build the install command for a list of npm packages.

    Returns an empty string when there is nothing to install.

    Raises:
        RegistryError: If the package manager is not recognized
    """
    try:
        verb = PACKAGE_MANAGERS[package_manager.lower()]
    except KeyError:
        raise RegistryError(
            f"Unknown package manager: {package_manager}. "
            f"Available: {', '.join(PACKAGE_MANAGERS)}"
        )
    if not dependencies:
        return ""
    return f"{verb} {' '.join(dependencies)}"


class BackendRegistry:
    """Registry mapping targets to backend classes."""

    def __init__(self):
        """Initialize empty registry."""
        self._backends: Dict[Target, Type[ComponentGenerator]] = {}
        self._aliases: Dict[str, Target] = {}

    def register(
        self,
        target: Target,
        backend_class: Type[ComponentGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a backend for a target.

        Args:
            target: Target the backend implements
            backend_class: Class implementing ComponentGenerator
            aliases: Alternative names for this target
            replace: If True, replace an existing registration

        Raises:
            RegistryError: If the class is invalid or an alias conflicts
        """
        if not issubclass(backend_class, ComponentGenerator):
            raise RegistryError("Backend class must inherit from ComponentGenerator")

        if target in self._backends and not replace:
            return

        self._backends[target] = backend_class

        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == target.value:
                continue
            if not replace:
                if self._lookup_id(alias_key) is not None:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing target id"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != target:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key].value}'"
                    )
            self._aliases[alias_key] = target

    def unregister(self, target: Target):
        """Remove a backend and the aliases pointing at it."""
        self._backends.pop(target, None)
        for alias in [a for a, t in self._aliases.items() if t == target]:
            del self._aliases[alias]

    def _lookup_id(self, key: str) -> Optional[Target]:
        for target in Target:
            if target.value == key:
                return target
        return None

    def parse_target(self, name: TargetLike) -> Optional[Target]:
        """
        Match a target id or alias, case-insensitively.

        Returns:
            The matching Target, or None when nothing matches
        """
        if isinstance(name, Target):
            return name
        if not isinstance(name, str):
            return None

        key = name.strip().lower()
        target = self._lookup_id(key)
        if target is not None:
            return target
        return self._aliases.get(key)

    def resolve(self, name: Optional[TargetLike]) -> Tuple[Target, bool]:
        """
        Resolve a target name, falling back to the default target.

        Returns:
            Tuple of (target, fell_back)
        """
        if name is None:
            return DEFAULT_TARGET, False

        target = self.parse_target(name)
        if target is None:
            logger.info(
                "Unknown target %r, falling back to %s", name, DEFAULT_TARGET.value
            )
            return DEFAULT_TARGET, True
        return target, False

    def get_backend_class(self, target: TargetLike) -> Type[ComponentGenerator]:
        """
        Get the backend class for a target.

        Raises:
            RegistryError: If the target is unknown or has no backend
        """
        resolved = self.parse_target(target)
        if resolved is None or resolved not in self._backends:
            raise RegistryError(
                f"No backend registered for target: {target}. "
                f"Available: {', '.join(self.list_targets())}"
            )
        return self._backends[resolved]

    def create_generator(self, target: TargetLike, config: ConfigLike = None) -> ComponentGenerator:
        """
        Create a backend instance for a target.

        Args:
            target: Target id, alias or member
            config: GeneratorConfig, dict of overrides, config file path, or None

        Returns:
            Configured backend instance

        Raises:
            RegistryError: If backend creation fails
        """
        try:
            backend_class = self.get_backend_class(target)
            target_id = self.parse_target(target).value

            if isinstance(config, GeneratorConfig):
                final_config = config
            elif isinstance(config, (str, Path)):
                final_config = load_config(target_id, config_file=config)
            elif isinstance(config, dict):
                final_config = load_config(target_id, custom_config=config)
            elif config is None:
                final_config = load_config(target_id)
            else:
                raise RegistryError(f"Invalid config type: {type(config)}")

            return backend_class(final_config)

        except RegistryError:
            raise
        except Exception as e:
            raise RegistryError(f"Failed to create {target} backend: {e}") from e

    def verify(self):
        """
        Check that every Target member has a backend.

        Raises:
            RegistryError: Naming the unmapped targets
        """
        missing = [target.value for target in Target if target not in self._backends]
        if missing:
            raise RegistryError(f"Targets without a backend: {', '.join(missing)}")

    def list_targets(self) -> List[str]:
        """Registered target ids in enum order."""
        return [target.value for target in Target if target in self._backends]

    def get_aliases_for_target(self, target: TargetLike) -> List[str]:
        resolved = self.parse_target(target)
        return sorted(alias for alias, t in self._aliases.items() if t == resolved)

    def list_all_names(self) -> Dict[str, List[str]]:
        """Map each target id to its id plus aliases."""
        return {
            target_id: [target_id] + self.get_aliases_for_target(target_id)
            for target_id in self.list_targets()
        }

    def is_supported(self, name: TargetLike) -> bool:
        """Check whether a name resolves without falling back."""
        target = self.parse_target(name)
        return target is not None and target in self._backends

    def get_target_info(self, target: TargetLike) -> Dict[str, Any]:
        """
        Get information about a registered target.

        Returns:
            Dict with display name, class, extension, aliases, npm
            dependencies and an install command per package manager

        Raises:
            RegistryError: If the target is not registered
        """
        backend_class = self.get_backend_class(target)
        resolved = self.parse_target(target)
        backend = backend_class(load_config(resolved.value))

        return {
            "id": resolved.value,
            "name": backend.display_name,
            "class": backend_class.__name__,
            "module": backend_class.__module__,
            "file_extension": backend.file_extension,
            "supports_types": backend.supports_types,
            "aliases": self.get_aliases_for_target(resolved),
            "dependencies": list(backend.dependencies),
            "install_commands": {
                pm: install_command(backend.dependencies, pm) for pm in PACKAGE_MANAGERS
            },
        }


# Global registry instance - created once
_global_registry: Optional[BackendRegistry] = None


def get_registry() -> BackendRegistry:
    """Get the global backend registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = BackendRegistry()
        _auto_register_backends(_global_registry)
    return _global_registry


def _auto_register_backends(registry: BackendRegistry):
    """Register every built-in backend with its aliases."""
    from .targets import (
        HtmlGenerator,
        ReactCssModulesGenerator,
        ReactStyledGenerator,
        ReactTailwindGenerator,
        SolidGenerator,
        VueGenerator,
    )

    registry.register(
        Target.REACT_TAILWIND, ReactTailwindGenerator, aliases=["tailwind", "shadcn", "cva"]
    )
    registry.register(
        Target.REACT_STYLED, ReactStyledGenerator, aliases=["styled-components", "styled"]
    )
    registry.register(
        Target.REACT_CSS_MODULES, ReactCssModulesGenerator, aliases=["css-modules"]
    )
    registry.register(Target.VUE, VueGenerator, aliases=["vue3"])
    registry.register(Target.SOLID, SolidGenerator, aliases=["solidjs", "solid-js"])
    registry.register(Target.HTML, HtmlGenerator, aliases=["markup", "static"])

    registry.verify()


# Public API functions using the global registry


def get_generator(target: TargetLike, config: ConfigLike = None) -> ComponentGenerator:
    """Get a backend instance from the global registry."""
    return get_registry().create_generator(target, config)


def list_targets() -> List[str]:
    """List all target ids in enum order."""
    return get_registry().list_targets()


def is_target_supported(name: TargetLike) -> bool:
    """Check if a target name resolves without falling back."""
    return get_registry().is_supported(name)


def get_target_info(target: TargetLike) -> Dict[str, Any]:
    """Get information about a supported target."""
    return get_registry().get_target_info(target)
