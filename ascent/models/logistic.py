"""
Maximum-likelihood logistic regression.

The model is ``P(y_i = 1) = sigmoid(x_i^T beta)``. Its log-likelihood

    l(beta) = sum_i y_i x_i^T beta - log(1 + exp(x_i^T beta))

is concave, with score ``X^T (y - p)`` and Hessian ``-X^T W X`` where
``W = diag(p (1 - p))``. Any of the maximizers in :mod:`ascent.optimize` can
fit it; Newton's method is the classical choice (iteratively reweighted
least squares).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

import numpy as np

from ..logging import get_logger
from ..optimize import (
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    OptimizeResult,
    ascent_then_newton,
    newton_multivariate,
    steepest_ascent,
)

logger = get_logger(__name__)

MethodLiteral = Literal["newton", "steepest", "hybrid"]


@dataclass
class LogisticFit:
    """
    Fitted logistic regression.

    Attributes:
        coef: Estimated coefficients.
        log_likelihood: Log-likelihood at ``coef``.
        std_err: Standard errors from the inverse observed information, or
            ``None`` if the fit failed or the information is singular.
        result: Raw optimizer result.
    """

    coef: np.ndarray
    log_likelihood: float
    std_err: Optional[np.ndarray]
    result: OptimizeResult

    @property
    def success(self) -> bool:
        return self.result.success


def _sigmoid(z: np.ndarray) -> np.ndarray:
    # tanh form never overflows
    return 0.5 * (1.0 + np.tanh(0.5 * z))


def _check_data(X: np.ndarray, y: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    X = np.asarray(X, dtype=float)
    y = np.asarray(y, dtype=float).reshape(-1)
    if X.ndim != 2:
        raise ValueError("X must be a 2-D array.")
    if X.shape[0] != y.size:
        raise ValueError(
            f"X has {X.shape[0]} rows but y has {y.size} entries."
        )
    if not np.all((y == 0.0) | (y == 1.0)):
        raise ValueError("y must contain only 0 and 1.")
    return X, y


def add_intercept(X: np.ndarray) -> np.ndarray:
    """Prepend a column of ones to ``X``."""
    X = np.asarray(X, dtype=float)
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    return np.column_stack([np.ones(X.shape[0]), X])


def predict_proba(beta: np.ndarray, X: np.ndarray) -> np.ndarray:
    """Return ``P(y = 1)`` for every row of ``X``."""
    return _sigmoid(np.asarray(X, dtype=float) @ np.asarray(beta, dtype=float))


def log_likelihood(beta: np.ndarray, X: np.ndarray, y: np.ndarray) -> float:
    """Log-likelihood of ``beta`` given the design matrix and 0/1 responses."""
    eta = np.asarray(X, dtype=float) @ np.asarray(beta, dtype=float)
    return float(np.sum(y * eta - np.logaddexp(0.0, eta)))


def score(beta: np.ndarray, X: np.ndarray, y: np.ndarray) -> np.ndarray:
    """Gradient of :func:`log_likelihood`, ``X^T (y - p)``."""
    return X.T @ (y - predict_proba(beta, X))


def hessian(beta: np.ndarray, X: np.ndarray, y: np.ndarray) -> np.ndarray:
    """Hessian of :func:`log_likelihood`, ``-X^T W X``; ``y`` is unused."""
    p = predict_proba(beta, X)
    w = p * (1.0 - p)
    return -(X.T * w) @ X


def _standard_errors(beta: np.ndarray, X: np.ndarray, y: np.ndarray) -> Optional[np.ndarray]:
    info = -hessian(beta, X, y)
    try:
        cov = np.linalg.inv(info)
    except np.linalg.LinAlgError:
        return None
    diag = np.diag(cov)
    if np.any(diag < 0) or not np.all(np.isfinite(diag)):
        return None
    return np.sqrt(diag)


def fit_logistic(
    X: np.ndarray,
    y: np.ndarray,
    method: MethodLiteral = "newton",
    beta0: Optional[np.ndarray] = None,
    tol: float = DEFAULT_TOL,
    maxiter: int = DEFAULT_MAXITER,
) -> LogisticFit:
    """
    Fit logistic regression coefficients by maximum likelihood.

    Parameters
    ----------
    X:
        Design matrix of shape (n, k). Use :func:`add_intercept` for a
        model with an intercept.
    y:
        Responses in {0, 1}, shape (n,).
    method:
        ``"newton"`` (Newton-Raphson), ``"steepest"`` (steepest ascent) or
        ``"hybrid"`` (a few ascent steps followed by Newton).
    beta0:
        Starting coefficients; zeros by default.
    tol, maxiter:
        Forwarded to the optimizer.

    Returns
    -------
    LogisticFit
        Check ``fit.success``; on failure ``coef`` is the last iterate and
        ``std_err`` is None.
    """
    X, y = _check_data(X, y)
    k = X.shape[1]
    if beta0 is None:
        beta0 = np.zeros(k)

    def fun(beta: np.ndarray) -> float:
        return log_likelihood(beta, X, y)

    def grad(beta: np.ndarray) -> np.ndarray:
        return score(beta, X, y)

    def hess(beta: np.ndarray) -> np.ndarray:
        return hessian(beta, X, y)

    if method == "newton":
        result = newton_multivariate(hess, grad, beta0, tol=tol, maxiter=maxiter, fun=fun)
    elif method == "steepest":
        result = steepest_ascent(fun, grad, beta0, tol=tol, maxiter=maxiter)
    elif method == "hybrid":
        result = ascent_then_newton(fun, grad, hess, beta0, tol=tol, maxiter=maxiter)
    else:
        raise ValueError(f"Unknown method {method!r}; expected newton, steepest or hybrid.")

    coef = result.x
    std_err = _standard_errors(coef, X, y) if result.success else None
    if not result.success:
        logger.info("fit_logistic(%s) did not converge: %s", method, result.message)
    return LogisticFit(
        coef=coef,
        log_likelihood=log_likelihood(coef, X, y),
        std_err=std_err,
        result=result,
    )


__all__ = [
    "LogisticFit",
    "add_intercept",
    "predict_proba",
    "log_likelihood",
    "score",
    "hessian",
    "fit_logistic",
]
