"""Finite-difference and linear algebra helpers for the solvers.

Pure NumPy, deterministic, meant for the small dense problems these
methods are used on.
"""

from __future__ import annotations

import numpy as np

from .core import Array, Gradient, Objective


def _central_differences(fn, x: Array, eps: float) -> tuple[list[Array], int]:
    """Difference quotients of ``fn`` along each coordinate axis of ``x``."""
    if eps <= 0:
        raise ValueError("eps must be positive")
    x = np.asarray(x, dtype=float)
    quotients = []
    for shift in np.eye(x.size) * eps:
        shift = shift.reshape(x.shape)
        upper = np.asarray(fn(x + shift), dtype=float)
        lower = np.asarray(fn(x - shift), dtype=float)
        quotients.append((upper - lower) / (2.0 * eps))
    return quotients, 2 * x.size


def approx_grad(
    fun: Objective, x: Array, eps: float = 1e-6, return_evals: bool = False
) -> Array | tuple[Array, int]:
    """Gradient of ``fun`` at ``x`` by central differences with step ``eps``.

    With ``return_evals`` the number of objective calls (``2 * x.size``) is
    returned alongside, so solvers can add it to ``nfev``.
    """
    quotients, evals = _central_differences(fun, x, eps)
    grad = np.asarray(quotients, dtype=float).reshape(np.shape(x))
    if return_evals:
        return grad, evals
    return grad


def approx_hessian(
    grad_fn: Gradient, x: Array, eps: float = 1e-6, return_evals: bool = False
) -> Array | tuple[Array, int]:
    """Approximate the Hessian by central differences of the gradient.

    The result is symmetrized, so it is exact for quadratics up to rounding.
    """
    quotients, evals = _central_differences(grad_fn, x, eps)
    hess = np.column_stack([q.reshape(-1) for q in quotients])
    hess = 0.5 * (hess + hess.T)
    if return_evals:
        return hess, evals
    return hess


def solve_newton_system(hess: Array, grad: Array, cond_limit: float = 1e12) -> Array:
    """Solve ``hess @ d = grad`` for the Newton step ``d``.

    The matrix is never inverted explicitly.

    Raises
    ------
    numpy.linalg.LinAlgError
        If ``hess`` is non-finite, singular, has condition number above
        ``cond_limit``, or the solution is non-finite.
    """
    hess = np.asarray(hess, dtype=float)
    grad = np.asarray(grad, dtype=float)
    if not np.all(np.isfinite(hess)):
        raise np.linalg.LinAlgError("Hessian contains non-finite entries.")
    with np.errstate(divide="ignore", invalid="ignore"):
        cond = float(np.linalg.cond(hess))
    if not np.isfinite(cond) or cond > cond_limit:
        raise np.linalg.LinAlgError(
            f"Hessian is singular or ill-conditioned (cond={cond:.3e})."
        )
    step = np.linalg.solve(hess, grad)
    if not np.all(np.isfinite(step)):
        raise np.linalg.LinAlgError("Newton step is non-finite.")
    return step


__all__ = ["approx_grad", "approx_hessian", "solve_newton_system"]
