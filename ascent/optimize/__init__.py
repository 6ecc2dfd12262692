"""Deterministic classical maximization algorithms.

Example
-------
>>> import numpy as np
>>> from ascent.optimize import newton_multivariate
>>> A = np.array([[2.0, 0.5], [0.5, 1.0]])
>>> b = np.array([1.0, -1.0])
>>> res = newton_multivariate(lambda x: -A, lambda x: b - A @ x, np.zeros(2))
>>> res.success, res.nit
(True, 1)
"""

from .core import (
    DEFAULT_ALPHA_MAX,
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    GOLDEN_RATIO,
    Bracket,
    InvalidBracketError,
    IterationState,
    LineSearchResult,
    OptimizeResult,
    ScalarResult,
    Status,
)
from .golden import golden_section, golden_section_iterations
from .hybrid import ascent_then_newton
from .line_search import line_search
from .newton import newton_multivariate
from .newton1d import newton_1d
from .steepest import steepest_ascent
from .utils import approx_grad, approx_hessian, solve_newton_system

__all__ = [
    "DEFAULT_ALPHA_MAX",
    "DEFAULT_MAXITER",
    "DEFAULT_TOL",
    "GOLDEN_RATIO",
    "Bracket",
    "InvalidBracketError",
    "IterationState",
    "LineSearchResult",
    "OptimizeResult",
    "ScalarResult",
    "Status",
    "approx_grad",
    "approx_hessian",
    "ascent_then_newton",
    "golden_section",
    "golden_section_iterations",
    "line_search",
    "newton_1d",
    "newton_multivariate",
    "solve_newton_system",
    "steepest_ascent",
]
