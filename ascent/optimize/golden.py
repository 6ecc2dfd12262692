"""Golden section search for the maximum of a scalar function.

The search keeps a bracket ``a < c < b`` with ``f(c) >= f(a)`` and
``f(c) >= f(b)``. Every iteration evaluates ``f`` once, at a point placed in
the larger of the two sub-intervals at the golden fraction ``1 / (1 + phi)``
of its length. Once the centre sits at the golden position the bracket
shrinks by exactly ``phi / (1 + phi) = 1 / phi`` per iteration, the best
worst-case rate achievable with one evaluation per step.

No derivatives are used. If ``f`` is not unimodal on ``[a, b]`` the search
still terminates, at some local maximum.
"""

from __future__ import annotations

import math
from typing import Optional

from ..diagnostics import assert_valid_bracket, is_debug_enabled, is_valid_bracket
from ..logging import get_logger
from .core import (
    DEFAULT_TOL,
    GOLDEN_RATIO,
    Bracket,
    InvalidBracketError,
    ScalarObjective,
    ScalarResult,
    Status,
    check_tolerance,
)

logger = get_logger(__name__)

_PROBE_FRACTION = 1.0 / (1.0 + GOLDEN_RATIO)
_SHRINK = GOLDEN_RATIO / (1.0 + GOLDEN_RATIO)


def golden_section_iterations(width: float, tol: float) -> int:
    """Iterations needed to shrink a golden-placed bracket of ``width`` to ``tol``."""
    check_tolerance(tol)
    if width <= tol:
        return 0
    return int(math.ceil(math.log(tol / width) / math.log(_SHRINK)))


def golden_section(
    f: ScalarObjective,
    x_a: float,
    x_b: float,
    x_c: float,
    tol: float = DEFAULT_TOL,
    maxiter: Optional[int] = None,
) -> ScalarResult:
    """
    Maximize ``f`` inside the bracket ``(x_a, x_c, x_b)``.

    Parameters
    ----------
    f:
        Scalar objective. Only point evaluations are used.
    x_a, x_b:
        Left and right ends of the bracket.
    x_c:
        Interior point with ``f(x_c) >= f(x_a)`` and ``f(x_c) >= f(x_b)``.
    tol:
        The search stops once ``x_b - x_a <= tol``.
    maxiter:
        Iteration cap. Defaults to twice the golden-placed bound plus a
        margin, which is only reached when rounding prevents the bracket from
        shrinking further.

    Returns
    -------
    ScalarResult
        ``x`` is the final bracket centre and ``bracket`` the final bracket.

    Raises
    ------
    InvalidBracketError
        If the points are not ordered or ``f(x_c)`` does not dominate the
        endpoint values.

    Notes
    -----
    When the probe value ties the centre value, ``f(y) == f(x_c)``, the probe
    becomes the new centre. If rounding places the probe on the centre or
    outside the open bracket, the search stops with ``MAX_ITER`` and returns
    the last valid bracket.
    """
    check_tolerance(tol)
    a, b, c = float(x_a), float(x_b), float(x_c)
    fa, fb, fc = float(f(a)), float(f(b)), float(f(c))
    nfev = 3
    if not is_valid_bracket(a, c, b, fa, fc, fb):
        raise InvalidBracketError(
            f"({a}, {c}, {b}) with values ({fa}, {fc}, {fb}) does not bracket "
            "a maximum: require x_a < x_c < x_b, f(x_c) >= f(x_a) and "
            "f(x_c) >= f(x_b)."
        )
    if maxiter is None:
        maxiter = 2 * golden_section_iterations(b - a, tol) + 10

    debug = is_debug_enabled()
    nit = 0
    status = Status.CONVERGED
    message = "Bracket width tolerance satisfied."
    while b - a > tol:
        if nit >= maxiter:
            status = Status.MAX_ITER
            message = "Maximum iterations reached before the bracket shrank to tol."
            break
        right = b - c > c - a
        if right:
            y = c + (b - c) * _PROBE_FRACTION
        else:
            y = c - (c - a) * _PROBE_FRACTION
        if not (a < y < b) or y == c:
            status = Status.MAX_ITER
            message = "Bracket cannot shrink further at this precision."
            break
        fy = float(f(y))
        if right:
            if fy >= fc:
                a, fa = c, fc
                c, fc = y, fy
            else:
                b, fb = y, fy
        else:
            if fy >= fc:
                b, fb = c, fc
                c, fc = y, fy
            else:
                a, fa = y, fy
        nfev += 1
        nit += 1
        if debug:
            assert_valid_bracket(a, c, b, fa, fc, fb)

    if status is not Status.CONVERGED:
        logger.info("golden_section stopped with width %.3e: %s", b - a, message)
    else:
        logger.debug("golden_section converged in %d iterations at x=%.12g", nit, c)
    return ScalarResult(
        x=c,
        fun=fc,
        status=status,
        message=message,
        nit=nit,
        nfev=nfev,
        bracket=Bracket(a=a, c=c, b=b),
    )


__all__ = ["golden_section", "golden_section_iterations"]
