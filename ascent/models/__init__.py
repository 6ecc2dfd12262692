"""Objectives the solvers are applied to: logistic regression and scalar examples."""

from .logistic import (
    LogisticFit,
    add_intercept,
    fit_logistic,
    hessian,
    log_likelihood,
    predict_proba,
    score,
)
from .scalar import OUT_OF_DOMAIN, log_ratio_bundle, quadratic_bundle

__all__ = [
    "LogisticFit",
    "add_intercept",
    "fit_logistic",
    "hessian",
    "log_likelihood",
    "predict_proba",
    "score",
    "OUT_OF_DOMAIN",
    "log_ratio_bundle",
    "quadratic_bundle",
]
