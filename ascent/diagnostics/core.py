"""Invariant checks used by the solvers when debug mode is on."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def is_valid_bracket(
    a: float, c: float, b: float, fa: float, fc: float, fb: float
) -> bool:
    """
    Return True if ``(a, c, b)`` brackets a local maximum.

    The points must be strictly ordered ``a < c < b`` and the centre value
    must dominate both endpoints: ``fc >= fa`` and ``fc >= fb``.
    """
    if not (a < c < b):
        return False
    return bool(fc >= fa and fc >= fb)


def assert_valid_bracket(
    a: float, c: float, b: float, fa: float, fc: float, fb: float
) -> None:
    """
    Raise if ``(a, c, b)`` does not bracket a local maximum.

    Raises
    ------
    ValueError
        If the ordering or the dominance condition is violated.
    """
    if not is_valid_bracket(a, c, b, fa, fc, fb):
        raise ValueError(
            "Bracket invariant violated: "
            f"points ({a}, {c}, {b}) with values ({fa}, {fc}, {fb})."
        )


def assert_monotone(values: Sequence[float], atol: float = 0.0) -> None:
    """
    Raise if ``values`` ever decreases by more than ``atol``.

    Raises
    ------
    ValueError
        If a later value is smaller than its predecessor beyond ``atol``.
    """
    arr = np.asarray(values, dtype=float)
    if arr.size < 2:
        return
    drops = np.diff(arr)
    if np.any(drops < -atol):
        idx = int(np.argmin(drops))
        raise ValueError(
            f"Objective decreased from {arr[idx]} to {arr[idx + 1]} "
            f"at iteration {idx + 1}."
        )


def is_neg_def(mat: np.ndarray, tol: float = 1e-12) -> bool:
    """Check if a matrix is negative definite via eigenvalues of its symmetric part."""
    mat = np.atleast_2d(np.asarray(mat, dtype=float))
    sym = 0.5 * (mat + mat.T)
    eigvals = np.linalg.eigvalsh(sym)
    return bool(np.all(eigvals < -tol))


__all__ = [
    "is_valid_bracket",
    "assert_valid_bracket",
    "assert_monotone",
    "is_neg_def",
]
