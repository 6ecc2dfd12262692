"""Core interfaces shared across the maximization algorithms.

Every iterative solver returns a result object whose ``status`` tells a
converged optimum apart from each kind of failure. Nothing is printed and no
failure is raised, with one exception: a golden-section bracket that violates
its precondition is a caller error and raises :class:`InvalidBracketError`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

import numpy as np

Array = np.ndarray
Objective = Callable[[Array], float]
Gradient = Callable[[Array], Array]
Hessian = Callable[[Array], Array]
ScalarObjective = Callable[[float], float]
ScalarBundle = Callable[[float], Tuple[float, float, float]]

DEFAULT_TOL = 1e-9
DEFAULT_MAXITER = 100
DEFAULT_ALPHA_MAX = 32.0
GOLDEN_RATIO = (1.0 + math.sqrt(5.0)) / 2.0


class Status(Enum):
    """Exit status for the solvers."""

    CONVERGED = "converged"
    MAX_ITER = "max_iter"
    NUMERICAL_ERROR = "numerical_error"
    SINGULAR_MATRIX = "singular_matrix"
    STALLED = "stalled"
    CANCELLED = "cancelled"


class InvalidBracketError(ValueError):
    """Raised when a golden-section bracket does not enclose a maximum."""


@dataclass(frozen=True)
class Bracket:
    """Ordered triple ``a < c < b`` whose centre value dominates both ends."""

    a: float
    c: float
    b: float

    @property
    def width(self) -> float:
        return self.b - self.a


@dataclass(frozen=True)
class IterationState:
    """Snapshot handed to iteration hooks at the end of every outer iteration."""

    x: Array | float
    fun: Optional[float]
    nit: int


IterationHook = Callable[[IterationState], Optional[bool]]


@dataclass
class ScalarResult:
    """
    Result of a one-dimensional solver.

    Attributes:
        x: Final iterate (the bracket centre for golden section search).
        fun: Objective value at ``x``.
        status: Exit status.
        message: Human-readable explanation of ``status``.
        nit: Number of iterations performed.
        nfev: Number of objective (or bundle) evaluations.
        bracket: Final bracket, golden section search only.
        curvature: Second derivative at ``x``, Newton-1D only.
    """

    x: float
    fun: float
    status: Status
    message: str
    nit: int
    nfev: int
    bracket: Optional[Bracket] = None
    curvature: Optional[float] = None

    @property
    def success(self) -> bool:
        return self.status is Status.CONVERGED

    @property
    def is_maximum(self) -> Optional[bool]:
        """True if the curvature at ``x`` is negative; None when unknown."""
        if self.curvature is None:
            return None
        return self.curvature < 0.0


@dataclass
class OptimizeResult:
    """Standard result object returned by the multivariate solvers."""

    x: Array
    fun: Optional[float]
    status: Status
    message: str
    nit: int
    grad_norm: float
    nfev: int
    njev: int
    nhev: int
    history: List[Array] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.status is Status.CONVERGED


@dataclass(frozen=True)
class LineSearchResult:
    """
    Step chosen by :func:`ascent.optimize.line_search.line_search`.

    ``alpha == 0`` means no ascent step was found along the direction.
    ``saturated`` flags a step clipped to ``alpha_max`` while the objective
    was still increasing.
    """

    alpha: float
    nfev: int
    saturated: bool = False


def as_vector(x0: Array) -> Array:
    """Copy ``x0`` into a 1-D float64 array, validating its shape."""
    x = np.array(x0, dtype=float)
    if x.ndim == 0:
        x = x.reshape(1)
    if x.ndim != 1 or x.size == 0:
        raise ValueError("x0 must be a non-empty 1-D array.")
    return x


def check_tolerance(tol: float, name: str = "tol") -> None:
    if not tol > 0.0:
        raise ValueError(f"{name} must be positive.")


def check_maxiter(maxiter: int) -> None:
    if maxiter < 0:
        raise ValueError("maxiter must be non-negative.")


def run_hook(
    callback: Optional[IterationHook], x: Array | float, fun: Optional[float], nit: int
) -> bool:
    """Invoke ``callback`` if present; return True if it asked to stop."""
    if callback is None:
        return False
    snapshot = x.copy() if isinstance(x, np.ndarray) else x
    return bool(callback(IterationState(x=snapshot, fun=fun, nit=nit)))


__all__ = [
    "Array",
    "Objective",
    "Gradient",
    "Hessian",
    "ScalarObjective",
    "ScalarBundle",
    "DEFAULT_TOL",
    "DEFAULT_MAXITER",
    "DEFAULT_ALPHA_MAX",
    "GOLDEN_RATIO",
    "Status",
    "InvalidBracketError",
    "Bracket",
    "IterationState",
    "IterationHook",
    "ScalarResult",
    "OptimizeResult",
    "LineSearchResult",
    "as_vector",
    "check_tolerance",
    "check_maxiter",
    "run_hook",
]
