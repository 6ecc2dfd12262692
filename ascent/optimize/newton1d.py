"""Newton's method for a stationary point of a scalar function."""

from __future__ import annotations

import math
from typing import Optional

from ..logging import get_logger
from .core import (
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    IterationHook,
    ScalarBundle,
    ScalarResult,
    Status,
    check_maxiter,
    check_tolerance,
    run_hook,
)

logger = get_logger(__name__)


def newton_1d(
    bundle: ScalarBundle,
    x0: float,
    tol: float = DEFAULT_TOL,
    maxiter: int = DEFAULT_MAXITER,
    callback: Optional[IterationHook] = None,
) -> ScalarResult:
    """
    Find a root of ``f'`` by Newton's method, ``x <- x - f'(x) / f''(x)``.

    Parameters
    ----------
    bundle:
        Callable returning ``(f(x), f'(x), f''(x))``. Points outside the
        function's domain may return a sentinel triple with non-finite
        entries; the solver stops with ``Status.NUMERICAL_ERROR`` there.
    x0:
        Starting point.
    tol:
        Convergence threshold on ``|f'(x)|``.
    maxiter:
        Maximum number of Newton steps.
    callback:
        Optional iteration hook; a truthy return value cancels the run.

    Returns
    -------
    ScalarResult
        ``status`` is ``CONVERGED`` when ``|f'(x)| <= tol``, ``MAX_ITER`` when
        the cap is hit and ``NUMERICAL_ERROR`` on a zero or non-finite second
        derivative. Any stationary point satisfies the test, minima included;
        check ``result.is_maximum`` when a maximum is required.
    """
    check_tolerance(tol)
    check_maxiter(maxiter)
    x = float(x0)
    fx, d1, d2 = (float(v) for v in bundle(x))
    nfev = 1
    nit = 0

    while True:
        if not (math.isfinite(fx) and math.isfinite(d1) and math.isfinite(d2)):
            status = Status.NUMERICAL_ERROR
            message = f"Non-finite bundle value at x={x!r}."
            break
        if abs(d1) <= tol:
            status = Status.CONVERGED
            message = "Derivative tolerance satisfied."
            break
        if nit >= maxiter:
            status = Status.MAX_ITER
            message = "Maximum iterations reached."
            break
        if d2 == 0.0:
            status = Status.NUMERICAL_ERROR
            message = f"Zero second derivative at x={x!r}."
            break
        x = x - d1 / d2
        nit += 1
        fx, d1, d2 = (float(v) for v in bundle(x))
        nfev += 1
        logger.debug("newton_1d iter %d: x=%.12g f'=%.3e f''=%.3e", nit, x, d1, d2)
        if run_hook(callback, x, fx, nit):
            status = Status.CANCELLED
            message = "Stopped by iteration hook."
            break

    if status is not Status.CONVERGED:
        logger.info("newton_1d stopped after %d iterations: %s", nit, message)
    return ScalarResult(
        x=x,
        fun=fx,
        status=status,
        message=message,
        nit=nit,
        nfev=nfev,
        curvature=d2,
    )


__all__ = ["newton_1d"]
