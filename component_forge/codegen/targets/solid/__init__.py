"""
SolidJS backend.
"""

from .generator import SolidGenerator

__all__ = ["SolidGenerator"]
