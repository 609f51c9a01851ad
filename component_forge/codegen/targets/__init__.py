"""
Target-specific component backends.

Each subpackage renders one target idiom from its own templates.
"""

from .html import HtmlGenerator
from .react_css_modules import ReactCssModulesGenerator
from .react_styled import ReactStyledGenerator
from .react_tailwind import ReactTailwindGenerator
from .solid import SolidGenerator
from .vue import VueGenerator

__all__ = [
    "HtmlGenerator",
    "ReactCssModulesGenerator",
    "ReactStyledGenerator",
    "ReactTailwindGenerator",
    "SolidGenerator",
    "VueGenerator",
]
