"""Scalar objective bundles ``x -> (f, f', f'')`` for :func:`ascent.optimize.newton_1d`."""

from __future__ import annotations

import math
from typing import Callable, Tuple

Triple = Tuple[float, float, float]

# Returned outside the domain; non-finite so Newton-1D stops instead of stepping.
OUT_OF_DOMAIN: Triple = (-math.inf, math.nan, math.nan)


def log_ratio_bundle(x: float) -> Triple:
    """
    Value and derivatives of ``g(x) = log(x) / (1 + x)``.

    ``g`` has a single maximum at the root of ``1 + 1/x = log(x)``,
    near ``x = 3.5911``. For ``x <= 0`` the sentinel :data:`OUT_OF_DOMAIN`
    is returned.
    """
    if x <= 0.0:
        return OUT_OF_DOMAIN
    v = 1.0 + x
    num = 1.0 / x + 1.0 - math.log(x)
    dnum = -1.0 / x**2 - 1.0 / x
    value = math.log(x) / v
    first = num / v**2
    second = dnum / v**2 - 2.0 * num / v**3
    return value, first, second


def quadratic_bundle(center: float, scale: float = 1.0) -> Callable[[float], Triple]:
    """Bundle for ``-scale * (x - center)**2``, concave when ``scale > 0``."""

    def bundle(x: float) -> Triple:
        d = x - center
        return -scale * d * d, -2.0 * scale * d, -2.0 * scale

    return bundle


__all__ = ["OUT_OF_DOMAIN", "log_ratio_bundle", "quadratic_bundle"]
