"""Steepest ascent to approach a maximum, Newton's method to finish it."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..logging import get_logger
from .core import (
    DEFAULT_ALPHA_MAX,
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    Gradient,
    Hessian,
    IterationHook,
    Objective,
    OptimizeResult,
    Status,
)
from .newton import newton_multivariate
from .steepest import steepest_ascent

logger = get_logger(__name__)

_NEWTON_FAILURES = (Status.SINGULAR_MATRIX, Status.NUMERICAL_ERROR)


def _merge(phases: list[OptimizeResult], names: list[str]) -> OptimizeResult:
    last = phases[-1]
    hist: list[np.ndarray] = []
    for res in phases:
        hist.extend(res.history)
    return OptimizeResult(
        x=last.x,
        fun=last.fun,
        status=last.status,
        message=f"{' -> '.join(names)}: {last.message}",
        nit=sum(res.nit for res in phases),
        grad_norm=last.grad_norm,
        nfev=sum(res.nfev for res in phases),
        njev=sum(res.njev for res in phases),
        nhev=sum(res.nhev for res in phases),
        history=hist,
    )


def ascent_then_newton(
    f: Objective,
    grad_f: Gradient,
    hessian_fn: Optional[Hessian],
    x0: np.ndarray,
    ascent_iter: int = 5,
    tol: float = DEFAULT_TOL,
    maxiter: int = DEFAULT_MAXITER,
    alpha_max: float = DEFAULT_ALPHA_MAX,
    cond_limit: float = 1e12,
    callback: Optional[IterationHook] = None,
    history: bool = False,
) -> OptimizeResult:
    """
    Run ``ascent_iter`` steepest-ascent iterations, then Newton's method.

    Steepest ascent makes reliable progress far from the maximum and Newton's
    method converges quadratically close to it. If Newton hits a singular
    Hessian or ends below the objective value the ascent phase reached (a
    minimum or saddle point), steepest ascent resumes from the ascent phase
    result with the full iteration budget.

    ``callback`` is forwarded to every phase, so ``IterationState.nit`` counts
    from zero again when a phase starts. A truthy return stops the whole run
    with ``CANCELLED``.

    The ``message`` of the returned result lists the phases that ran, e.g.
    ``"steepest_ascent -> newton"``.
    """
    names = ["steepest_ascent"]
    phases = [
        steepest_ascent(
            f,
            grad_f,
            x0,
            tol=tol,
            maxiter=ascent_iter,
            alpha_max=alpha_max,
            callback=callback,
            history=history,
        )
    ]
    start = phases[0]
    if start.status is Status.CANCELLED:
        return _merge(phases, names)

    polished = newton_multivariate(
        hessian_fn,
        grad_f,
        start.x,
        tol=tol,
        maxiter=maxiter,
        fun=f,
        cond_limit=cond_limit,
        callback=callback,
        history=history,
    )
    names.append("newton")
    phases.append(polished)
    if polished.status is Status.CANCELLED:
        return _merge(phases, names)

    went_downhill = polished.fun is not None and polished.fun < start.fun
    if polished.status in _NEWTON_FAILURES or went_downhill:
        logger.info(
            "ascent_then_newton falling back to steepest ascent: %s",
            "objective decreased" if went_downhill else polished.message,
        )
        # Newton's iterates are discarded, only its evaluation counts are kept.
        phases[-1] = OptimizeResult(
            x=start.x,
            fun=start.fun,
            status=polished.status,
            message=polished.message,
            nit=polished.nit,
            grad_norm=polished.grad_norm,
            nfev=polished.nfev,
            njev=polished.njev,
            nhev=polished.nhev,
        )
        phases.append(
            steepest_ascent(
                f,
                grad_f,
                start.x,
                tol=tol,
                maxiter=maxiter,
                alpha_max=alpha_max,
                callback=callback,
                history=history,
            )
        )
        names.append("steepest_ascent")
    return _merge(phases, names)


__all__ = ["ascent_then_newton"]
