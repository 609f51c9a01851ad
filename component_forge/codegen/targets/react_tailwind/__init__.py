"""
Tailwind + class-variance-authority React backend.

Generates shadcn/ui style components from blueprints.
"""

from .generator import ReactTailwindGenerator

__all__ = ["ReactTailwindGenerator"]
