from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

import numpy as np

from .checks import finite_result
from .checks import finite_scalar as _finite
from .errors import DivisionByZeroError, InvalidArgumentError


def _same_kind(a, b) -> None:
    if type(a) is not type(b):
        raise InvalidArgumentError(
            f"cannot combine {type(a).__name__} with {type(b).__name__}"
        )


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector. Every operation returns a new vector."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _finite(self.x, "x"))
        object.__setattr__(self, "y", _finite(self.y, "y"))

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def from_angle(cls, angle: float) -> Vector2:
        """Unit vector at `angle` radians, counter-clockwise from the x-axis."""

        a = _finite(angle, "angle")
        return cls(math.cos(a), math.sin(a))

    @classmethod
    def from_array(cls, arr) -> Vector2:
        a = np.asarray(arr, dtype=np.float64)
        if a.shape != (2,):
            raise InvalidArgumentError(f"expected shape (2,), got {a.shape}")
        return cls(float(a[0]), float(a[1]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def add(self, other: Vector2) -> Vector2:
        _same_kind(self, other)
        return Vector2(self.x + other.x, self.y + other.y)

    def subtract(self, other: Vector2) -> Vector2:
        _same_kind(self, other)
        return Vector2(self.x - other.x, self.y - other.y)

    def multiply(self, scalar: float) -> Vector2:
        s = _finite(scalar, "scalar")
        return Vector2(self.x * s, self.y * s)

    def divide(self, scalar: float) -> Vector2:
        s = _finite(scalar, "scalar")
        if s == 0.0:
            raise DivisionByZeroError("cannot divide Vector2 by zero")
        return Vector2(self.x / s, self.y / s)

    def length(self) -> float:
        return finite_result(math.hypot(self.x, self.y), "length")

    def normalize(self) -> Vector2:
        # scale by the largest component first so the norm cannot overflow
        m = max(abs(self.x), abs(self.y))
        if m == 0.0:
            return Vector2.zero()
        v = self.divide(m)
        return v.divide(v.length())

    def dot(self, other: Vector2) -> float:
        _same_kind(self, other)
        return finite_result(self.x * other.x + self.y * other.y, "dot")

    def isclose(self, other: Vector2, rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> bool:
        _same_kind(self, other)
        return math.isclose(self.x, other.x, rel_tol=rel_tol, abs_tol=abs_tol) and math.isclose(
            self.y, other.y, rel_tol=rel_tol, abs_tol=abs_tol
        )

    def __add__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.divide(scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D vector. Every operation returns a new vector."""

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _finite(self.x, "x"))
        object.__setattr__(self, "y", _finite(self.y, "y"))
        object.__setattr__(self, "z", _finite(self.z, "z"))

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, arr) -> Vector3:
        a = np.asarray(arr, dtype=np.float64)
        if a.shape != (3,):
            raise InvalidArgumentError(f"expected shape (3,), got {a.shape}")
        return cls(float(a[0]), float(a[1]), float(a[2]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def add(self, other: Vector3) -> Vector3:
        _same_kind(self, other)
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: Vector3) -> Vector3:
        _same_kind(self, other)
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def multiply(self, scalar: float) -> Vector3:
        s = _finite(scalar, "scalar")
        return Vector3(self.x * s, self.y * s, self.z * s)

    def divide(self, scalar: float) -> Vector3:
        s = _finite(scalar, "scalar")
        if s == 0.0:
            raise DivisionByZeroError("cannot divide Vector3 by zero")
        return Vector3(self.x / s, self.y / s, self.z / s)

    def length(self) -> float:
        return finite_result(math.hypot(self.x, self.y, self.z), "length")

    def normalize(self) -> Vector3:
        m = max(abs(self.x), abs(self.y), abs(self.z))
        if m == 0.0:
            return Vector3.zero()
        v = self.divide(m)
        return v.divide(v.length())

    def dot(self, other: Vector3) -> float:
        _same_kind(self, other)
        return finite_result(self.x * other.x + self.y * other.y + self.z * other.z, "dot")

    def cross(self, other: Vector3) -> Vector3:
        """Right-handed cross product self × other."""

        _same_kind(self, other)
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def isclose(self, other: Vector3, rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> bool:
        _same_kind(self, other)
        return all(
            math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in ((self.x, other.x), (self.y, other.y), (self.z, other.z))
        )

    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.divide(scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)
