"""Rays with an origin and a direction."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vec3 import Point3, Vec3


@dataclass(frozen=True)
class Ray:
    """A half-line; the normalised direction is kept alongside the raw one."""

    origin: Point3
    direction: Vec3
    unit_direction: Vec3 = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "unit_direction", self.direction.unit())

    def at(self, t: float) -> Point3:
        """Return the point at parameter t along the ray."""
        return self.origin + self.direction * t