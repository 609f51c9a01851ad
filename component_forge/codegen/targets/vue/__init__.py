"""
Vue 3 single-file component backend.
"""

from .generator import VueGenerator, VUE_RUNTIME_PROP_TYPES

__all__ = ["VueGenerator", "VUE_RUNTIME_PROP_TYPES"]
