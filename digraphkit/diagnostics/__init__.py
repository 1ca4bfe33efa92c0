"""Diagnostics and debugging utilities for digraphkit."""

from .core import (
    check_heap_invariants,
    check_search_tree,
    is_topological_order,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "check_heap_invariants",
    "check_search_tree",
    "is_topological_order",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
