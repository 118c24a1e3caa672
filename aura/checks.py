from __future__ import annotations

import math
from collections.abc import Mapping
from numbers import Real

import numpy as np

from .errors import InvalidArgumentError


def finite_scalar(value, name: str) -> float:
    """Return `value` as a finite float or raise InvalidArgumentError."""

    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(f"{name} must be a real number, got {type(value).__name__}")
    v = float(value)
    if not math.isfinite(v):
        raise InvalidArgumentError(f"{name} must be finite, got {v}")
    return v


def finite_values(seq, name: str = "values") -> np.ndarray:
    """Validate a non-empty 1-D sequence of finite numbers.

    Returns a float64 array. The caller's sequence is never modified; when
    `seq` is already a float64 array the result may be a view of it, so
    callers must not write into it.
    """

    if isinstance(seq, (str, bytes, Mapping)):
        raise InvalidArgumentError(f"{name} must be a sequence of numbers, got {type(seq).__name__}")
    try:
        arr = np.asarray(seq, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{name} must contain only numbers") from exc
    if arr.ndim != 1:
        raise InvalidArgumentError(f"{name} must be one-dimensional, got shape {arr.shape}")
    if arr.size == 0:
        raise InvalidArgumentError(f"{name} must not be empty")
    if not np.all(np.isfinite(arr)):
        raise InvalidArgumentError(f"{name} must contain only finite numbers")
    return arr


def finite_result(value: float, what: str) -> float:
    v = float(value)
    if not math.isfinite(v):
        raise InvalidArgumentError(f"{what} overflowed to {v}")
    return v
