"""Multivariate Newton's method for a stationary point of the gradient."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..logging import get_logger
from .core import (
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    Gradient,
    Hessian,
    IterationHook,
    Objective,
    OptimizeResult,
    Status,
    as_vector,
    check_maxiter,
    check_tolerance,
    run_hook,
)
from .utils import approx_hessian, solve_newton_system

logger = get_logger(__name__)


def _compute_hessian(
    hessian_fn: Optional[Hessian], grad_fn: Gradient, x: np.ndarray
) -> tuple[np.ndarray, int, int]:
    """Return Hessian along with (njev_increment, nhev_increment)."""
    if hessian_fn is not None:
        return np.atleast_2d(np.asarray(hessian_fn(x), dtype=float)), 0, 1
    hess, evals = approx_hessian(grad_fn, x, return_evals=True)
    return hess, int(evals), 0


def newton_multivariate(
    hessian_fn: Optional[Hessian],
    grad_fn: Gradient,
    x0: np.ndarray,
    tol: float = DEFAULT_TOL,
    maxiter: int = DEFAULT_MAXITER,
    fun: Optional[Objective] = None,
    cond_limit: float = 1e12,
    callback: Optional[IterationHook] = None,
    history: bool = False,
) -> OptimizeResult:
    """
    Newton's method ``x <- x - H(x)^{-1} grad(x)`` without damping.

    Each step solves ``H(x) d = grad(x)``; the Hessian is never inverted.
    There is no line search or trust region, so convergence is only expected
    when ``x0`` is close to a maximum whose Hessian is negative definite.
    From elsewhere the iterates may diverge or converge to a minimum or a
    saddle point. Quadratic objectives are solved in a single step.

    Parameters
    ----------
    hessian_fn:
        Hessian of the objective. If None, it is approximated by central
        differences of ``grad_fn``.
    grad_fn:
        Gradient of the objective.
    x0:
        Starting point.
    tol:
        Stop once ``max(abs(grad(x))) <= tol``.
    maxiter:
        Maximum number of Newton steps.
    fun:
        Optional objective, only used to report ``result.fun`` and to pass
        values to ``callback``.
    cond_limit:
        Hessians with a larger condition number are treated as singular.
    callback:
        Optional iteration hook; a truthy return value cancels the run.
    history:
        Record every iterate in ``result.history``.

    Returns
    -------
    OptimizeResult
        ``status`` is ``CONVERGED``, ``MAX_ITER``, ``SINGULAR_MATRIX``,
        ``NUMERICAL_ERROR`` (non-finite gradient) or ``CANCELLED``.
        ``grad_norm`` is the max-absolute gradient component.
    """
    check_tolerance(tol)
    check_maxiter(maxiter)
    x = as_vector(x0)
    n = x.size
    hist: list[np.ndarray] = []
    if history:
        hist.append(x.copy())
    nfev = 0
    njev = 0
    nhev = 0
    nit = 0
    grad_norm = float("inf")

    while True:
        grad = np.asarray(grad_fn(x), dtype=float).reshape(n)
        njev += 1
        if not np.all(np.isfinite(grad)):
            status = Status.NUMERICAL_ERROR
            message = "Gradient contains non-finite entries."
            break
        grad_norm = float(np.max(np.abs(grad)))
        if grad_norm <= tol:
            status = Status.CONVERGED
            message = "Gradient tolerance satisfied."
            break
        if nit >= maxiter:
            status = Status.MAX_ITER
            message = "Maximum iterations reached."
            break
        hess, hess_jev, hess_hev = _compute_hessian(hessian_fn, grad_fn, x)
        njev += hess_jev
        nhev += hess_hev
        if hess.shape != (n, n):
            raise ValueError(
                f"Hessian has shape {hess.shape}, expected {(n, n)}."
            )
        try:
            step = solve_newton_system(hess, grad, cond_limit=cond_limit)
        except np.linalg.LinAlgError as exc:
            status = Status.SINGULAR_MATRIX
            message = str(exc)
            break
        x = x - step
        nit += 1
        if history:
            hist.append(x.copy())
        fx = None
        if fun is not None:
            fx = float(fun(x))
            nfev += 1
        logger.debug("newton_multivariate iter %d: |step|=%.3e", nit, np.max(np.abs(step)))
        if run_hook(callback, x, fx, nit):
            status = Status.CANCELLED
            message = "Stopped by iteration hook."
            break

    if status is not Status.CONVERGED:
        logger.info("newton_multivariate stopped after %d iterations: %s", nit, message)
    final_fun = None
    if fun is not None:
        final_fun = float(fun(x))
        nfev += 1
    return OptimizeResult(
        x=x,
        fun=final_fun,
        status=status,
        message=message,
        nit=nit,
        grad_norm=grad_norm,
        nfev=nfev,
        njev=njev,
        nhev=nhev,
        history=hist,
    )


__all__ = ["newton_multivariate"]
