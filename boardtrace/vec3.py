"""Three-component vector used for points, directions and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

from .utility import random_double


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def random(low: float = 0.0, high: float = 1.0) -> "Vec3":
        """Return a vector whose components are random in [low, high)."""
        return Vec3(random_double(low, high), random_double(low, high), random_double(low, high))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union["Vec3", float]) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vec3":
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __truediv__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return (1.0 / scalar) * self

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def dot2(self, other: "Vec3") -> float:
        """Dot product of the x and y components only."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def unit(self) -> "Vec3":
        """Return the vector scaled to length one."""
        return self / self.length()


Point3 = Vec3
Color = Vec3


def random_in_unit_sphere() -> Vec3:
    """Return a random vector strictly inside the unit sphere."""
    while True:
        p = Vec3.random(-1.0, 1.0)
        if p.length_squared() < 1.0:
            return p