"""
Design token store.

Tokens live in a single JSON document keyed by category. When the file
does not exist the built-in defaults are served.
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from ..logging_config import get_logger
from .results import StoreError, StoreResult

logger = get_logger(__name__)

ALL_CATEGORIES = "all"

TOKEN_FORMATS = ("json", "css", "tailwind")

DEFAULT_TOKENS: Dict[str, Any] = {
    "colors": {
        "primary": "#0f172a",
        "primary-foreground": "#f8fafc",
        "secondary": "#f1f5f9",
        "secondary-foreground": "#0f172a",
        "destructive": "#ef4444",
        "destructive-foreground": "#f8fafc",
        "muted": "#f1f5f9",
        "muted-foreground": "#64748b",
        "accent": "#f1f5f9",
        "background": "#ffffff",
        "foreground": "#020817",
        "border": "#e2e8f0",
        "ring": "#94a3b8",
    },
    "spacing": {
        "0": "0",
        "1": "0.25rem",
        "2": "0.5rem",
        "3": "0.75rem",
        "4": "1rem",
        "6": "1.5rem",
        "8": "2rem",
        "12": "3rem",
        "16": "4rem",
    },
    "typography": {
        "font-sans": "Inter, system-ui, sans-serif",
        "font-mono": "JetBrains Mono, monospace",
        "text-xs": "0.75rem",
        "text-sm": "0.875rem",
        "text-base": "1rem",
        "text-lg": "1.125rem",
        "text-xl": "1.25rem",
        "text-2xl": "1.5rem",
    },
    "radii": {
        "none": "0",
        "sm": "0.125rem",
        "md": "0.375rem",
        "lg": "0.5rem",
        "full": "9999px",
    },
    "shadows": {
        "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
        "md": "0 4px 6px -1px rgb(0 0 0 / 0.1)",
        "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1)",
    },
    "motion": {
        "duration-fast": "150ms",
        "duration-normal": "200ms",
        "duration-slow": "300ms",
        "easing": "cubic-bezier(0.4, 0, 0.2, 1)",
    },
}


class TokenStore:
    """Read and merge design tokens stored in one JSON file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return copy.deepcopy(DEFAULT_TOKENS)
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StoreError(f"Invalid token file {self.path}: {e}") from e
        except OSError as e:
            raise StoreError(f"Failed to read token file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Token file {self.path} must contain a JSON object")
        return data

    def read(self, category: str = ALL_CATEGORIES) -> StoreResult:
        """
        Read tokens.

        Args:
            category: Top-level category, or ``"all"`` for every category

        Returns:
            StoreResult whose value is the selected tokens
        """
        try:
            tokens = self._load()
        except StoreError as e:
            return StoreResult.failure(str(e))

        if category == ALL_CATEGORIES:
            return StoreResult.ok(tokens)
        if category not in tokens:
            return StoreResult.failure(f"Token category not found: {category}")
        return StoreResult.ok(tokens[category])

    def merge(self, tokens: Mapping[str, Any]) -> StoreResult:
        """
        Merge tokens into the store.

        Top-level keys in ``tokens`` replace existing keys wholesale;
        nested values are not merged.

        Returns:
            StoreResult whose value is the merged document
        """
        if not isinstance(tokens, Mapping):
            return StoreResult.failure("Tokens must be a JSON object")

        try:
            current = self._load()
            current.update(tokens)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(current, f, indent=2, ensure_ascii=False)
                f.write("\n")
        except StoreError as e:
            return StoreResult.failure(str(e))
        except OSError as e:
            logger.error("Failed to write %s: %s", self.path, e)
            return StoreResult.failure(f"Failed to write token file {self.path}: {e}")

        logger.debug("Merged %d token categories into %s", len(tokens), self.path)
        return StoreResult.ok(current, f"Updated: {', '.join(tokens)}")

    def categories(self) -> StoreResult:
        """Top-level category names."""
        result = self.read()
        if not result.success:
            return result
        return StoreResult.ok(list(result.value.keys()))


def _css_lines(prefix: str, value: Any) -> List[str]:
    if isinstance(value, Mapping):
        lines = []
        for key, nested in value.items():
            lines.extend(_css_lines(f"{prefix}-{key}" if prefix else str(key), nested))
        return lines
    return [f"  --{prefix}: {value};"]


def format_tokens(tokens: Any, fmt: str = "json", category: str = ALL_CATEGORIES) -> str:
    """
    Render tokens in an output format.

    Args:
        tokens: Token document or a single category's tokens
        fmt: One of ``json``, ``css`` (custom properties) or ``tailwind``
            (a ``theme.extend`` snippet)
        category: Category the tokens belong to, or ``"all"``

    Returns:
        Formatted text

    Raises:
        StoreError: If the format is not recognized
    """
    if fmt == "json":
        return json.dumps(tokens, indent=2, ensure_ascii=False)

    if fmt == "css":
        prefix = "" if category == ALL_CATEGORIES else category
        lines = _css_lines(prefix, tokens)
        return ":root {\n" + "\n".join(lines) + "\n}"

    if fmt == "tailwind":
        extend = tokens if category == ALL_CATEGORIES else {category: tokens}
        body = json.dumps(extend, indent=2, ensure_ascii=False)
        body = "\n".join(
            ("    " + line) if i else line for i, line in enumerate(body.split("\n"))
        )
        return (
            "// Add to tailwind.config.ts\n"
            "export default {\n"
            "  theme: {\n"
            f"    extend: {body},\n"
            "  },\n"
            "}"
        )

    raise StoreError(
        f"Unknown token format: {fmt}. Available: {', '.join(TOKEN_FORMATS)}"
    )
