"""
Jinja2 environment for component templates.

Backends render from their own ``templates/`` directory with the shared
macro directory appended to the search path. Whitespace control is on
and autoescaping is off.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined

SHARED_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Sequences that would close a JSDoc or HTML comment early
COMMENT_TERMINATORS = {"*/": "*\\/", "-->": "--\\>"}


class TemplateError(Exception):
    """Raised when a component template fails to load or render."""

    pass


class TemplateEngine:
    """Jinja2 environment with the filters component templates use."""

    def __init__(self, template_dirs: Optional[Sequence[Path]] = None):
        """
        Initialize template engine.

        Args:
            template_dirs: Directories searched in order for template files
        """
        self.template_dirs: List[Path] = [
            d for d in (template_dirs or []) if d.exists()
        ]
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Create the environment and register filters."""
        # Generated source is not HTML-escaped; style strings are opaque
        self._env = Environment(
            loader=FileSystemLoader([str(d) for d in self.template_dirs]),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

        self._env.filters["quote"] = self._quote_filter
        self._env.filters["comment"] = self._comment_filter
        self._env.filters["jsx"] = self._jsx_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def template_exists(self, template_name: str) -> bool:
        """Check if a template can be loaded."""
        return template_name in self._env.list_templates()

    # Filters

    def _quote_filter(self, value: Union[str, Any]) -> str:
        """Wrap a value in double quotes without escaping its content."""
        return f'"{value}"'

    def _jsx_filter(self, value: Any) -> str:
        """Wrap a value as a JSX expression: ``{value}``."""
        return "{" + str(value) + "}"

    def _comment_filter(self, value: str, prefix: str = " * ") -> str:
        """Prefix each line of a comment body, neutralizing comment terminators."""
        text = str(value)
        for terminator, replacement in COMMENT_TERMINATORS.items():
            text = text.replace(terminator, replacement)
        return "\n".join(f"{prefix}{line}".rstrip() for line in text.split("\n"))


def create_template_engine(*template_dirs: Path) -> TemplateEngine:
    """
    Create a template engine for a backend.

    The shared macro directory is always appended so backends can import
    ``macros.j2``.

    Args:
        *template_dirs: Backend-specific template directories

    Returns:
        TemplateEngine instance
    """
    return TemplateEngine([*template_dirs, SHARED_TEMPLATE_DIR])
