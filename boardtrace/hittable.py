"""Ray hit records, the hittable interface and lists of hittable objects."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator

from .aabb import AABB, surrounding_box
from .ray import Ray
from .vec3 import Point3, Vec3

if TYPE_CHECKING:
    from .material import Material


def new_handle() -> int:
    """Return a fresh 32-bit identifier for a scene object."""
    return uuid.uuid4().int >> 96


@dataclass
class HitRecord:
    """Where and how a ray met a surface."""

    point: Point3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    material: "Material | None" = None
    t: float = 0.0
    u: float = 0.0
    v: float = 0.0
    front_face: bool = False
    object_handle: int = 0

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Store the normal so that it always points against the ray."""
        self.front_face = ray.unit_direction.dot(outward_normal) < 0.0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Something a ray can hit."""

    handle: int = 0

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float, skip_handle: int = -1) -> HitRecord | None:
        """Return the hit within (t_min, t_max), or None."""

    @abstractmethod
    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        """Return the enclosing box, or None when there is none."""


class HittableList(Hittable):
    """A group of hittable objects tested in order, keeping the nearest hit."""

    handle = -1

    def __init__(self, objects: Iterable[Hittable] = ()) -> None:
        self.objects: list[Hittable] = list(objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)

    def clear(self) -> None:
        self.objects.clear()

    def hit(self, ray: Ray, t_min: float, t_max: float, skip_handle: int = -1) -> HitRecord | None:
        """Return the nearest hit; a nearest hit on the skipped object counts as none."""
        hit_anything = False
        closest_so_far = t_max
        record: HitRecord | None = None
        for obj in self.objects:
            candidate = obj.hit(ray, t_min, closest_so_far, skip_handle)
            if candidate is None:
                continue
            hit_anything = obj.handle != skip_handle
            closest_so_far = candidate.t
            record = candidate
        return record if hit_anything else None

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        if not self.objects:
            return None
        result: AABB | None = None
        for obj in self.objects:
            box = obj.bounding_box(t0, t1)
            if box is None:
                return None
            result = box if result is None else surrounding_box(result, box)
        return result