"""
Example: Logistic Regression by Maximum Likelihood

Simulates a one-predictor logistic model and fits it three ways: Newton's
method, steepest ascent, and a few ascent steps followed by Newton. Also
locates the maximum of g(x) = log(x) / (1 + x) with Newton-1D and golden
section search.
"""

import numpy as np

from ascent import (
    Status,
    add_intercept,
    fit_logistic,
    golden_section,
    log_ratio_bundle,
    newton_1d,
)


def example_scalar_maximum():
    """Example: one-dimensional maximum two ways."""
    print("=" * 60)
    print("Example 1: Maximum of log(x) / (1 + x)")
    print("=" * 60)

    newton = newton_1d(log_ratio_bundle, 3.0)
    print(f"Newton-1D: status={newton.status.value}, x={newton.x:.8f}, nit={newton.nit}")

    golden = golden_section(lambda x: log_ratio_bundle(x)[0], 1.0, 10.0, 4.0, tol=1e-8)
    print(f"Golden section: status={golden.status.value}, x={golden.x:.8f}, nit={golden.nit}")
    print()


def example_logistic_regression():
    """Example: fit the same logistic model with every method."""
    print("=" * 60)
    print("Example 2: Logistic Regression MLE")
    print("=" * 60)

    rng = np.random.default_rng(1)
    true_beta = np.array([0.5, -1.2])
    X = add_intercept(rng.normal(size=300))
    p = 0.5 * (1.0 + np.tanh(0.5 * (X @ true_beta)))
    y = (rng.uniform(size=300) < p).astype(float)

    for method in ("newton", "steepest", "hybrid"):
        fit = fit_logistic(X, y, method=method, tol=1e-10, maxiter=500)
        print(f"[{method}] status={fit.result.status.value} nit={fit.result.nit}")
        if fit.result.status == Status.CONVERGED:
            print(f"  coefficients: {np.round(fit.coef, 4)}")
            print(f"  std errors:   {np.round(fit.std_err, 4)}")
            print(f"  log-likelihood: {fit.log_likelihood:.6f}")
    print()


if __name__ == "__main__":
    example_scalar_maximum()
    example_logistic_regression()
    print("All examples completed.")
