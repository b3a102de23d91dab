"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .ray import Ray
from .vec3 import Point3, Vec3


def _reciprocal(value: float) -> float:
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


@dataclass(frozen=True)
class AABB:
    """A box spanned by its minimum and maximum corners."""

    minimum: Point3 = field(default_factory=Vec3)
    maximum: Point3 = field(default_factory=Vec3)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> bool:
        """Return whether the ray crosses the box within (t_min, t_max)."""
        for origin, direction, low, high in zip(ray.origin, ray.direction, self.minimum, self.maximum):
            inv_d = _reciprocal(direction)
            t0 = (low - origin) * inv_d
            t1 = (high - origin) * inv_d
            if inv_d < 0.0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True


def surrounding_box(box0: AABB, box1: AABB) -> AABB:
    """Return the smallest box enclosing both boxes."""
    small = Vec3(*(min(a, b) for a, b in zip(box0.minimum, box1.minimum)))
    big = Vec3(*(max(a, b) for a, b in zip(box0.maximum, box1.maximum)))
    return AABB(small, big)