"""
Static HTML markup backend.
"""

from .generator import HtmlGenerator, render_element

__all__ = ["HtmlGenerator", "render_element"]
