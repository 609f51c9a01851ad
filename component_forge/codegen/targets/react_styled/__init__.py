"""
styled-components React backend.
"""

from .generator import ReactStyledGenerator

__all__ = ["ReactStyledGenerator"]
