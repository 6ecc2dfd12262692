"""Diagnostics and debugging utilities for ascent."""

from .core import (
    assert_monotone,
    assert_valid_bracket,
    is_neg_def,
    is_valid_bracket,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_valid_bracket",
    "assert_valid_bracket",
    "assert_monotone",
    "is_neg_def",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
