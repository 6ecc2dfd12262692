"""Process-wide switch for the solvers' per-iteration invariant checks.

With the switch on, golden section search re-validates its bracket and
steepest ascent re-checks that the objective never decreased, after every
iteration. The checks cost extra work, so the switch is off unless the
``ASCENT_DEBUG`` environment variable holds a truthy word at import time.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_ENV_FLAG = "ASCENT_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


_checks_on = _flag_from_env(_ENV_FLAG)


def is_debug_enabled() -> bool:
    """True when solvers should verify their loop invariants."""
    return _checks_on


def set_debug_enabled(enabled: bool) -> bool:
    """Switch invariant checking on or off and return the previous setting."""
    global _checks_on
    previous = _checks_on
    _checks_on = bool(enabled)
    return previous


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Run a block with invariant checking forced on (or off).

    The previous setting comes back even if the block raises.

    >>> with debug_context():
    ...     is_debug_enabled()
    True
    """
    previous = set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)
