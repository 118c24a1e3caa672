"""Uniform and discrete sampling.

A single process-wide RandomSource backs the module-level functions. It is
created when this module is first imported and reseeded with `seed_all`.
Code that needs an isolated stream should construct its own RandomSource
and pass it around instead of touching the default one.
"""

from __future__ import annotations

import math
import threading
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from typing import Any, Optional

import numpy as np
from numba import njit

from .checks import finite_scalar
from .errors import InvalidArgumentError
from .types import WeightedItem
from .vector import Vector2, Vector3


class HaystackShape(Enum):
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    TEXT = "text"


def haystack_shape(haystack: Any) -> HaystackShape:
    """Classify input for pick_from; anything outside the three shapes is rejected."""

    if isinstance(haystack, str):
        return HaystackShape.TEXT
    if isinstance(haystack, Mapping):
        return HaystackShape.MAPPING
    if isinstance(haystack, Sequence):
        return HaystackShape.SEQUENCE
    if isinstance(haystack, np.ndarray) and haystack.ndim == 1:
        return HaystackShape.SEQUENCE
    raise InvalidArgumentError(
        f"pick_from expects a sequence, mapping or string, got {type(haystack).__name__}"
    )


@njit(cache=True)
def _weighted_index(weights: np.ndarray, r: float) -> int:
    # first index whose running total strictly exceeds r
    acc = 0.0
    last = -1
    for i in range(weights.shape[0]):
        w = weights[i]
        if w > 0.0:
            last = i
        acc += w
        if r < acc:
            return i
    # r rounded up to the total; fall back to the last selectable item
    return last


class RandomSource:
    """Non-cryptographic uniform source with range and discrete sampling.

    Draws are serialized with a lock so a source can be shared between
    threads without duplicating or losing values.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._gen = np.random.default_rng(seed)
        self._lock = threading.Lock()

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def reseed(self, seed: Optional[int]) -> None:
        """Restart the stream (None -> fresh OS entropy)."""

        with self._lock:
            self._seed = seed
            self._gen = np.random.default_rng(seed)

    def random(self) -> float:
        """Uniform float in [0, 1)."""

        with self._lock:
            return float(self._gen.random())

    def uniform(self, lo: float, hi: float) -> float:
        """Uniform float in [lo, hi); lo > hi gives the reversed interval (hi, lo]."""

        lo = finite_scalar(lo, "min")
        hi = finite_scalar(hi, "max")
        if lo == hi:
            return lo
        span = hi - lo
        if not math.isfinite(span):
            raise InvalidArgumentError(f"interval [{lo}, {hi}) is too wide to sample")
        x = lo + self.random() * span
        if x == hi:
            x = float(np.nextafter(hi, lo))
        return x

    def uniform_int(self, lo: float, hi: float) -> int:
        return math.floor(self.uniform(lo, hi))

    def pick_from(self, haystack: Any) -> Any:
        """Uniformly pick an element, a mapping value or a character.

        Returns None for empty input.
        """

        shape = haystack_shape(haystack)
        if shape is HaystackShape.MAPPING:
            keys = list(haystack.keys())
            if not keys:
                return None
            return haystack[keys[self.uniform_int(0, len(keys))]]
        n = len(haystack)
        if n == 0:
            return None
        return haystack[self.uniform_int(0, n)]

    def weighted_select(self, items: Sequence[Any], weights: Sequence[float]) -> Any:
        """Pick items[i] with probability weights[i] / sum(weights).

        Zero-weight items are never selected.
        """

        if isinstance(items, (str, Mapping)) or not isinstance(items, (Sequence, np.ndarray)):
            raise InvalidArgumentError("items must be a sequence")
        if isinstance(weights, (str, Mapping)):
            raise InvalidArgumentError("weights must be a sequence of numbers")
        try:
            w = np.ascontiguousarray(weights, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError("weights must contain only numbers") from exc
        if w.ndim != 1:
            raise InvalidArgumentError(f"weights must be one-dimensional, got shape {w.shape}")
        if len(items) != w.size:
            raise InvalidArgumentError(
                f"items and weights must have the same length ({len(items)} != {w.size})"
            )
        if w.size == 0:
            raise InvalidArgumentError("items must not be empty")
        if not np.all(np.isfinite(w)):
            raise InvalidArgumentError("weights must be finite")
        if np.any(w < 0.0):
            raise InvalidArgumentError("weights must be non-negative")
        total = float(np.sum(w))
        if not total > 0.0 or not math.isfinite(total):
            raise InvalidArgumentError(f"weights must sum to a positive finite total, got {total}")
        r = self.random() * total
        return items[_weighted_index(w, r)]

    def weighted_pick(self, entries: Iterable[WeightedItem]) -> Any:
        entries = list(entries)
        return self.weighted_select([e.item for e in entries], [e.weight for e in entries])

    def unit_vector2(self) -> Vector2:
        """Random direction in the plane, uniform in angle."""

        return Vector2.from_angle(self.uniform(0.0, 2.0 * math.pi))

    def unit_vector3(self) -> Vector3:
        """Random direction in 3D (Gaussian -> normalize)."""

        with self._lock:
            while True:
                v = self._gen.normal(size=3)
                n = float(np.linalg.norm(v))
                if n > 0.0:
                    break
        return Vector3.from_array(v / n)


_default = RandomSource()


def default_source() -> RandomSource:
    return _default


def seed_all(seed: Optional[int]) -> None:
    """Reseed the process-wide source for reproducible runs."""

    _default.reseed(seed)


def random() -> float:
    return _default.random()


def uniform(lo: float, hi: float) -> float:
    return _default.uniform(lo, hi)


def uniform_int(lo: float, hi: float) -> int:
    return _default.uniform_int(lo, hi)


def pick_from(haystack: Any) -> Any:
    return _default.pick_from(haystack)


def weighted_select(items: Sequence[Any], weights: Sequence[float]) -> Any:
    return _default.weighted_select(items, weights)


def weighted_pick(entries: Iterable[WeightedItem]) -> Any:
    return _default.weighted_pick(entries)


def unit_vector2() -> Vector2:
    return _default.unit_vector2()


def unit_vector3() -> Vector3:
    return _default.unit_vector3()
