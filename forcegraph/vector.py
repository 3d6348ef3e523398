"""Three-dimensional vectors used for node positions and forces."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Union

Scalar = Union[int, float]


def _div(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: zero divisors give inf or nan instead of raising."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar["Vec3"]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __radd__(self, other: object) -> Vec3:
        # Lets the built-in sum() start from 0.
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other: Vec3 | Scalar) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other: Vec3 | Scalar) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(_div(self.x, other.x), _div(self.y, other.y), _div(self.z, other.z))
        if isinstance(other, (int, float)):
            return Vec3(_div(self.x, other), _div(self.y, other), _div(self.z, other))
        return NotImplemented

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance_squared(self, other: Vec3) -> float:
        """Squared Euclidean distance to another vector."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def distance(self, other: Vec3) -> float:
        """Euclidean distance to another vector."""
        return math.sqrt(self.distance_squared(other))


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)


def unit_vector(a: Vec3, b: Vec3) -> Vec3:
    """The unit vector pointing from ``a`` towards ``b`` (nan when they coincide)."""
    return (b - a) / a.distance(b)