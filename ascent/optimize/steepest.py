"""Steepest ascent with a golden-section line search."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..diagnostics import assert_monotone, is_debug_enabled
from ..logging import get_logger
from .core import (
    DEFAULT_ALPHA_MAX,
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    Gradient,
    IterationHook,
    Objective,
    OptimizeResult,
    Status,
    as_vector,
    check_maxiter,
    check_tolerance,
    run_hook,
)
from .line_search import line_search
from .utils import approx_grad

logger = get_logger(__name__)

_STALL_LIMIT = 2


def _compute_gradient(
    f: Objective, grad_f: Optional[Gradient], x: np.ndarray
) -> tuple[np.ndarray, int, int]:
    """Return gradient along with (nfev_increment, njev_increment)."""
    if grad_f is not None:
        return np.asarray(grad_f(x), dtype=float).reshape(x.shape), 0, 1
    grad, evals = approx_grad(f, x, return_evals=True)
    return grad, int(evals), 0


def steepest_ascent(
    f: Objective,
    grad_f: Optional[Gradient],
    x0: np.ndarray,
    tol: float = DEFAULT_TOL,
    maxiter: int = DEFAULT_MAXITER,
    line_search_tol: float = DEFAULT_TOL,
    alpha_max: float = DEFAULT_ALPHA_MAX,
    callback: Optional[IterationHook] = None,
    history: bool = False,
) -> OptimizeResult:
    """
    Maximize ``f`` by stepping along the gradient, ``x <- x + alpha * grad_f(x)``.

    The step ``alpha`` comes from :func:`ascent.optimize.line_search.line_search`,
    so ``f`` never decreases between iterations. Successive directions tend to
    be nearly orthogonal, which makes progress zig-zag on elongated objectives;
    :func:`ascent.optimize.newton.newton_multivariate` converges much faster
    near a maximum.

    Parameters
    ----------
    f:
        Objective to maximize.
    grad_f:
        Gradient of ``f``. If None, central differences are used.
    x0:
        Starting point.
    tol:
        Stop once ``|f(x_i) - f(x_{i-1})| <= tol``.
    maxiter:
        Maximum number of iterations.
    line_search_tol, alpha_max:
        Forwarded to the line search.
    callback:
        Optional iteration hook; a truthy return value cancels the run.
    history:
        Record every iterate in ``result.history``.

    Returns
    -------
    OptimizeResult
        ``status`` is ``CONVERGED``, ``MAX_ITER``, ``STALLED`` (the line
        search found no ascent step twice in a row although the gradient is
        non-zero) or ``CANCELLED``. ``grad_norm`` is the Euclidean norm of
        the last gradient, or ``inf`` if none was computed.
    """
    check_tolerance(tol)
    check_maxiter(maxiter)
    x = as_vector(x0)
    hist: list[np.ndarray] = []
    if history:
        hist.append(x.copy())
    debug = is_debug_enabled()
    nfev = 0
    njev = 0
    nit = 0
    fx = float(f(x))
    nfev += 1
    values = [fx]
    grad_norm = float("inf")
    zero_steps = 0
    status = Status.MAX_ITER
    message = "Maximum iterations reached."

    while nit < maxiter:
        grad, grad_fev, grad_jev = _compute_gradient(f, grad_f, x)
        nfev += grad_fev
        njev += grad_jev
        grad_norm = float(np.linalg.norm(grad))
        if not np.any(grad):
            status = Status.CONVERGED
            message = "Gradient vanished."
            break
        step = line_search(f, x, grad, tol=line_search_tol, alpha_max=alpha_max)
        nfev += step.nfev
        nit += 1
        if step.saturated:
            logger.debug("steepest_ascent iter %d: step saturated at %g", nit, step.alpha)
        if step.alpha == 0.0:
            zero_steps += 1
            logger.debug("steepest_ascent iter %d: no ascent step found", nit)
            if zero_steps >= _STALL_LIMIT:
                status = Status.STALLED
                message = "Line search found no ascent step along a non-zero gradient."
                break
            continue
        zero_steps = 0
        x_new = x + step.alpha * grad
        f_new = float(f(x_new))
        nfev += 1
        change = abs(f_new - fx)
        x, fx = x_new, f_new
        if history:
            hist.append(x.copy())
        if debug:
            values.append(fx)
            assert_monotone(values)
        logger.debug(
            "steepest_ascent iter %d: f=%.12g alpha=%.3e |df|=%.3e",
            nit,
            fx,
            step.alpha,
            change,
        )
        if change <= tol:
            status = Status.CONVERGED
            message = "Objective change tolerance satisfied."
            break
        if run_hook(callback, x, fx, nit):
            status = Status.CANCELLED
            message = "Stopped by iteration hook."
            break

    if status is not Status.CONVERGED:
        logger.info("steepest_ascent stopped after %d iterations: %s", nit, message)
    return OptimizeResult(
        x=x,
        fun=fx,
        status=status,
        message=message,
        nit=nit,
        grad_norm=grad_norm,
        nfev=nfev,
        njev=njev,
        nhev=0,
        history=hist,
    )


__all__ = ["steepest_ascent"]
