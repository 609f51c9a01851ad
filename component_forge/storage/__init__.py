"""
Flat JSON file stores for archived blueprints and design tokens.
"""

from .archive import ArchiveStore
from .results import StoreError, StoreResult
from .tokens import DEFAULT_TOKENS, TOKEN_FORMATS, TokenStore, format_tokens

__all__ = [
    "ArchiveStore",
    "StoreError",
    "StoreResult",
    "TokenStore",
    "DEFAULT_TOKENS",
    "TOKEN_FORMATS",
    "format_tokens",
]
