"""
Closed set of generation targets.
"""

from enum import Enum
from typing import List


class Target(Enum):
    """Recognized target identifiers, in dispatch order."""

    REACT_TAILWIND = "react-tailwind"
    REACT_STYLED = "react-styled"
    REACT_CSS_MODULES = "react-css-modules"
    VUE = "vue"
    SOLID = "solid"
    HTML = "html"


#: Target used for any unrecognized identifier
DEFAULT_TARGET = Target.REACT_TAILWIND


def target_ids() -> List[str]:
    """All target identifiers in declaration order."""
    return [target.value for target in Target]
