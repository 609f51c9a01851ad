"""
Tagged results returned by the stores.
"""

from dataclasses import dataclass
from typing import Any, Optional


class StoreError(Exception):
    """Exception raised inside a store; converted to a failed StoreResult."""

    pass


@dataclass
class StoreResult:
    """Outcome of a store operation."""

    success: bool
    value: Any = None
    message: str = ""

    @classmethod
    def ok(cls, value: Any = None, message: str = "") -> "StoreResult":
        return cls(True, value, message)

    @classmethod
    def failure(cls, message: str) -> "StoreResult":
        return cls(False, None, message)

    def unwrap(self) -> Any:
        """Return the value, raising StoreError for a failed result."""
        if not self.success:
            raise StoreError(self.message)
        return self.value

    def __bool__(self) -> bool:
        return self.success
