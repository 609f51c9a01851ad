"""
CSS Modules React backend.
"""

from .generator import ReactCssModulesGenerator

__all__ = ["ReactCssModulesGenerator"]
