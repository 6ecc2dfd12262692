import math

import pytest

from ascent.models import log_ratio_bundle, quadratic_bundle
from ascent.optimize import IterationState, Status, newton_1d


def test_newton_1d_quadratic_converges_from_ten():
    res = newton_1d(quadratic_bundle(3.0), 10.0, tol=1e-9)
    assert res.success
    assert res.status is Status.CONVERGED
    assert res.x == pytest.approx(3.0, abs=1e-9)
    assert res.nit <= 10
    assert res.is_maximum


def test_newton_1d_zero_curvature_is_numerical_error():
    def flat(x: float):
        return 2.0 * x, 2.0, 0.0

    res = newton_1d(flat, 1.0)
    assert res.status is Status.NUMERICAL_ERROR
    assert not res.success
    assert res.nit == 0


def test_newton_1d_hits_iteration_cap():
    # f'(x) = atan(x) overshoots without bound from x0 = 2
    def bundle(x: float):
        return 0.0, math.atan(x), 1.0 / (1.0 + x * x)

    res = newton_1d(bundle, 2.0, maxiter=5)
    assert res.status is Status.MAX_ITER
    assert res.nit == 5


def test_newton_1d_log_ratio_maximum():
    res = newton_1d(log_ratio_bundle, 3.0, tol=1e-12)
    assert res.success
    assert res.x == pytest.approx(3.5911, abs=1e-4)
    assert 1.0 + 1.0 / res.x == pytest.approx(math.log(res.x), abs=1e-9)
    assert res.is_maximum


def test_newton_1d_sentinel_outside_domain():
    res = newton_1d(log_ratio_bundle, -1.0)
    assert res.status is Status.NUMERICAL_ERROR
    assert res.nit == 0


def test_newton_1d_converges_to_minimum_too():
    def convex(x: float):
        return (x - 1.0) ** 2, 2.0 * (x - 1.0), 2.0

    res = newton_1d(convex, 5.0)
    assert res.success
    assert res.x == pytest.approx(1.0)
    assert res.is_maximum is False


def test_newton_1d_idempotent_at_solution():
    first = newton_1d(quadratic_bundle(3.0), 10.0)
    again = newton_1d(quadratic_bundle(3.0), first.x)
    assert again.success
    assert again.nit <= 1
    assert again.x == pytest.approx(first.x, abs=1e-12)


def test_newton_1d_callback_can_cancel():
    seen: list[IterationState] = []

    def hook(state: IterationState) -> bool:
        seen.append(state)
        return True

    def bundle(x: float):
        return -(x**4), -4.0 * x**3, -12.0 * x**2

    res = newton_1d(bundle, 1.0, callback=hook)
    assert res.status is Status.CANCELLED
    assert len(seen) == 1
    assert seen[0].nit == 1


def test_newton_1d_rejects_bad_arguments():
    with pytest.raises(ValueError):
        newton_1d(quadratic_bundle(0.0), 1.0, tol=0.0)
    with pytest.raises(ValueError):
        newton_1d(quadratic_bundle(0.0), 1.0, maxiter=-1)
