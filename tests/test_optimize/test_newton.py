import numpy as np
import pytest

from ascent.diagnostics import is_neg_def
from ascent.optimize import Status, newton_multivariate

A = np.array([[3.0, 0.5], [0.5, 2.0]])
b = np.array([1.0, -1.0])


def concave_fun(x: np.ndarray) -> float:
    return float(-0.5 * x @ (A @ x) + b @ x)


def concave_grad(x: np.ndarray) -> np.ndarray:
    return b - A @ x


def concave_hess(_: np.ndarray) -> np.ndarray:
    return -A


@pytest.mark.parametrize("x0", [[2.0, 2.0], [-50.0, 10.0], [0.0, 0.0]])
def test_newton_solves_quadratic_in_one_step(x0):
    res = newton_multivariate(concave_hess, concave_grad, np.array(x0), fun=concave_fun)
    expected = np.linalg.solve(A, b)
    assert res.success
    assert res.nit == 1
    assert np.allclose(res.x, expected, atol=1e-10)
    assert res.fun == pytest.approx(concave_fun(expected))
    assert is_neg_def(concave_hess(res.x))


def test_newton_singular_hessian_reported():
    def grad(x: np.ndarray) -> np.ndarray:
        return np.array([1.0 - x[0], 1.0 - x[0]])

    def hess(_: np.ndarray) -> np.ndarray:
        return np.array([[-1.0, -1.0], [-1.0, -1.0]])

    res = newton_multivariate(hess, grad, np.array([5.0, 0.0]))
    assert res.status is Status.SINGULAR_MATRIX
    assert not res.success
    assert np.all(np.isfinite(res.x))
    assert np.array_equal(res.x, np.array([5.0, 0.0]))


def test_newton_ill_conditioned_hessian_reported():
    def hess(_: np.ndarray) -> np.ndarray:
        return np.diag([-1.0, -1e-14])

    res = newton_multivariate(hess, lambda x: -x, np.array([1.0, 1.0]))
    assert res.status is Status.SINGULAR_MATRIX


def test_newton_rosenbrock_near_maximum():
    def fun(x: np.ndarray) -> float:
        return -((1 - x[0]) ** 2 + 100 * (x[1] - x[0] ** 2) ** 2)

    def grad(x: np.ndarray) -> np.ndarray:
        return -np.array(
            [
                -2 * (1 - x[0]) - 400 * x[0] * (x[1] - x[0] ** 2),
                200 * (x[1] - x[0] ** 2),
            ]
        )

    def hess(x: np.ndarray) -> np.ndarray:
        return -np.array(
            [
                [1200 * x[0] ** 2 - 400 * x[1] + 2, -400 * x[0]],
                [-400 * x[0], 200],
            ]
        )

    res = newton_multivariate(hess, grad, np.array([1.1, 1.2]), fun=fun, maxiter=20)
    assert res.success
    assert np.allclose(res.x, np.ones(2), atol=1e-8)
    assert res.nit < 10


def test_newton_max_iter():
    # f(x) = -x^4 / 4 converges only linearly
    res = newton_multivariate(
        lambda x: np.array([[-3.0 * x[0] ** 2]]),
        lambda x: np.array([-x[0] ** 3]),
        np.array([1.0]),
        tol=1e-30,
        maxiter=4,
    )
    assert res.status is Status.MAX_ITER
    assert res.nit == 4
    assert res.x[0] == pytest.approx((2.0 / 3.0) ** 4)


def test_newton_non_finite_gradient():
    res = newton_multivariate(
        lambda x: -np.eye(1), lambda x: np.array([np.nan]), np.array([0.0])
    )
    assert res.status is Status.NUMERICAL_ERROR


def test_newton_without_hessian_uses_gradient_differences():
    res = newton_multivariate(None, concave_grad, np.array([4.0, -3.0]))
    assert res.success
    assert res.nhev == 0
    assert np.allclose(res.x, np.linalg.solve(A, b), atol=1e-8)


def test_newton_idempotent_at_solution():
    x_star = np.linalg.solve(A, b)
    res = newton_multivariate(concave_hess, concave_grad, x_star)
    assert res.success
    assert res.nit <= 1
    assert np.allclose(res.x, x_star)


def test_newton_history_and_counts():
    res = newton_multivariate(
        concave_hess, concave_grad, np.array([1.0, 1.0]), history=True
    )
    assert len(res.history) == res.nit + 1
    assert res.nhev == res.nit
    assert res.njev == res.nit + 1
    assert res.fun is None


def test_newton_hessian_shape_mismatch():
    with pytest.raises(ValueError):
        newton_multivariate(lambda x: np.eye(3), concave_grad, np.array([1.0, 1.0]))
