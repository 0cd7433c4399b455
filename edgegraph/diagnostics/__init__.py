"""Diagnostics and debugging utilities for edgegraph."""

from .core import assert_consistent, check_invariants
from .debug_mode import (
    check_mutation,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "check_invariants",
    "assert_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "check_mutation",
]
