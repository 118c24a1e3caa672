"""Descriptive statistics and scalar helpers.

All statistics take a non-empty 1-D sequence of finite numbers and never
modify it. Degenerate input (empty, non-numeric, NaN/Inf) raises
InvalidArgumentError instead of returning NaN or a reduction identity.
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit

from .checks import finite_result, finite_scalar, finite_values
from .errors import InvalidArgumentError


@njit(cache=True)
def _sum_squared_deviation(x: np.ndarray, m: float) -> float:
    s = 0.0
    for i in range(x.shape[0]):
        d = x[i] - m
        s += d * d
    return s


def _mean(x: np.ndarray) -> float:
    with np.errstate(over="ignore"):
        total = np.sum(x)
        if np.isfinite(total):
            return float(total / x.size)
        # the sum overflowed; the mean itself may still be representable
        return finite_result(np.sum(x / x.size), "mean")


def mean(values) -> float:
    return _mean(finite_values(values))


def median(values) -> float:
    """Middle value of the sorted copy; average of the two middle values for even counts."""

    s = np.sort(finite_values(values))
    n = s.size
    mid = n // 2
    if n % 2 == 1:
        return float(s[mid])
    a, b = s[mid - 1], s[mid]
    if a < 0.0 < b:
        return float((a + b) / 2.0)
    # same sign: the gap cannot overflow and equal values come back exact
    return float(a + (b - a) / 2.0)


def variance(values) -> float:
    """Population variance (mean squared deviation, no Bessel correction)."""

    x = finite_values(values)
    m = _mean(x)
    return finite_result(_sum_squared_deviation(x, m) / x.size, "variance")


def standard_deviation(values) -> float:
    return math.sqrt(variance(values))


def max(values) -> float:
    return float(np.max(finite_values(values)))


def min(values) -> float:
    return float(np.min(finite_values(values)))


def sum(values) -> float:
    return finite_result(np.sum(finite_values(values)), "sum")


def area(x: float, y: float) -> float:
    """Area of an x-by-y rectangle."""

    return finite_result(finite_scalar(x, "x") * finite_scalar(y, "y"), "area")


def volume(x: float, y: float, z: float) -> float:
    """Volume of an x-by-y-by-z box."""

    return finite_result(
        finite_scalar(x, "x") * finite_scalar(y, "y") * finite_scalar(z, "z"), "volume"
    )


def clamp(value: float, lo: float, hi: float) -> float:
    v = finite_scalar(value, "value")
    lo = finite_scalar(lo, "lo")
    hi = finite_scalar(hi, "hi")
    if lo > hi:
        raise InvalidArgumentError(f"lo must not exceed hi, got lo={lo}, hi={hi}")
    if v < lo:
        return lo
    if v > hi:
        return hi
    return v


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation a + (b - a) * t; t is not clamped."""

    a = finite_scalar(a, "a")
    b = finite_scalar(b, "b")
    t = finite_scalar(t, "t")
    return finite_result(a + (b - a) * t, "lerp")
