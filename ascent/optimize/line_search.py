"""Bracketing line search refined by golden section search."""

from __future__ import annotations

import numpy as np

from ..logging import get_logger
from .core import (
    DEFAULT_ALPHA_MAX,
    DEFAULT_TOL,
    Array,
    LineSearchResult,
    Objective,
    check_tolerance,
)
from .golden import golden_section

logger = get_logger(__name__)


def line_search(
    f: Objective,
    x: Array,
    direction: Array,
    tol: float = DEFAULT_TOL,
    alpha_max: float = DEFAULT_ALPHA_MAX,
) -> LineSearchResult:
    """
    Approximately maximize ``g(alpha) = f(x + alpha * direction)`` for ``alpha >= 0``.

    The unit step is halved while it decreases the objective; if it collapses
    below ``tol`` the search returns ``alpha = 0``. Otherwise the step is
    doubled while ``g`` keeps increasing, capped at ``alpha_max``. A bracket
    ``(0, alpha_mid, alpha_right)`` is then refined by golden section search.

    Parameters
    ----------
    f:
        Objective to maximize.
    x:
        Starting point.
    direction:
        Search direction, typically the gradient.
    tol:
        Smallest step considered and golden-section bracket tolerance.
    alpha_max:
        Largest step returned; must exceed the unit step.

    Returns
    -------
    LineSearchResult
        ``alpha == 0`` when no ascent step exists at this scale.
        ``saturated`` is set when ``g`` was still increasing at ``alpha_max``.
    """
    check_tolerance(tol)
    if not alpha_max > 1.0:
        raise ValueError("alpha_max must be greater than 1.")
    x = np.asarray(x, dtype=float)
    direction = np.asarray(direction, dtype=float)

    nfev = 0

    def phi(alpha: float) -> float:
        nonlocal nfev
        nfev += 1
        return float(f(x + alpha * direction))

    g_left = phi(0.0)
    if not np.any(direction):
        return LineSearchResult(alpha=0.0, nfev=nfev)

    alpha_mid = 1.0
    g_mid = phi(alpha_mid)
    while g_mid < g_left and alpha_mid > tol:
        alpha_mid *= 0.5
        g_mid = phi(alpha_mid)
    if g_mid < g_left:
        logger.debug("line_search found no ascent step down to alpha=%.3e", alpha_mid)
        return LineSearchResult(alpha=0.0, nfev=nfev)

    alpha_right = min(2.0 * alpha_mid, alpha_max)
    g_right = phi(alpha_right)
    while g_mid < g_right and alpha_right < alpha_max:
        alpha_mid, g_mid = alpha_right, g_right
        alpha_right = min(2.0 * alpha_mid, alpha_max)
        g_right = phi(alpha_right)
    if g_mid < g_right:
        logger.debug("line_search saturated at alpha_max=%g", alpha_max)
        return LineSearchResult(alpha=float(alpha_max), nfev=nfev, saturated=True)

    refined = golden_section(phi, 0.0, alpha_right, alpha_mid, tol=tol)
    return LineSearchResult(alpha=float(refined.x), nfev=nfev)


__all__ = ["line_search"]
