"""Geometric primitives: spheres, horizontal rectangles and capped cylinders."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .aabb import AABB
from .hittable import HitRecord, Hittable, new_handle
from .ray import Ray
from .utility import PI
from .vec3 import Point3, Vec3

if TYPE_CHECKING:
    from .material import Material


def is_between(x: float, low: float, high: float) -> bool:
    """Return whether x lies strictly between low and high."""
    return low < x < high


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class Sphere(Hittable):
    """A sphere given by centre and radius."""

    def __init__(self, center: Point3, radius: float, material: "Material | None" = None) -> None:
        self.center = center
        self.radius = radius
        self.material = material
        self.handle = new_handle()

    def hit(self, ray: Ray, t_min: float, t_max: float, skip_handle: int = -1) -> HitRecord | None:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c
        if discriminant <= 0.0:
            return None

        root = math.sqrt(discriminant)
        t = (-half_b - root) / a
        if t_min < t < t_max:
            record = HitRecord(t=t, point=ray.at(t), material=self.material, object_handle=self.handle)
            outward = (record.point - self.center) / self.radius
            record.set_face_normal(ray, outward.unit())
            record.u, record.v = self._uv(record.point - self.center)
            return record

        t = (-half_b + root) / a
        if t_min < t < t_max:
            record = HitRecord(t=t, point=ray.at(t), material=self.material, object_handle=self.handle)
            record.set_face_normal(ray, (record.point - self.center) / self.radius)
            return record

        return None

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        extent = Vec3(self.radius, self.radius, self.radius)
        return AABB(self.center - extent, self.center + extent)

    @staticmethod
    def _uv(p: Vec3) -> tuple[float, float]:
        phi = math.atan2(p.z, p.x)
        theta = math.asin(p.y) if -1.0 <= p.y <= 1.0 else math.nan
        return 1.0 - (phi + PI) / (2 * PI), (theta + PI / 2.0) / PI


class Plane(Hittable):
    """A rectangle at height k spanning [x0, x1] by [z0, z1], facing up."""

    def __init__(
        self, x0: float, x1: float, z0: float, z1: float, k: float, material: "Material | None" = None
    ) -> None:
        self.x0, self.x1 = x0, x1
        self.z0, self.z1 = z0, z1
        self.k = k
        self.material = material
        self.inv_x10 = 1.0 / (x1 - x0)
        self.inv_z10 = 1.0 / (z1 - z0)
        self.handle = new_handle()

    def hit(self, ray: Ray, t_min: float, t_max: float, skip_handle: int = -1) -> HitRecord | None:
        if ray.direction.y == 0.0:
            return None
        t = (self.k - ray.origin.y) / ray.direction.y
        if t < t_min or t > t_max:
            return None

        x = ray.origin.x + t * ray.direction.x
        z = ray.origin.z + t * ray.direction.z
        if x < self.x0 or x > self.x1 or z < self.z0 or z > self.z1:
            return None

        record = HitRecord(
            t=t,
            u=(x - self.x0) * self.inv_x10,
            v=(z - self.z0) * self.inv_z10,
            point=ray.at(t),
            material=self.material,
            object_handle=self.handle,
        )
        record.set_face_normal(ray, Vec3(0.0, 1.0, 0.0))
        return record

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        return AABB(
            Vec3(min(self.x0, self.x1), self.k - 0.5, min(self.z0, self.z1)),
            Vec3(max(self.x0, self.x1), self.k + 0.5, max(self.z0, self.z1)),
        )


class Cylinder(Hittable):
    """A capped cylinder centred on a point, its height and direction given by an axis."""

    def __init__(
        self, center: Point3, axis: Vec3, radius: float, material: "Material | None" = None
    ) -> None:
        self.center = center
        self.radius = radius
        self.material = material
        self.hit_enabled = True
        self.handle = new_handle()

        self.pa = center + axis * 0.5
        self.pb = center + axis * -0.5
        self.ba = self.pb - self.pa
        self.baba = self.ba.dot(self.ba)
        self.inv_baba = 1.0 / self.baba
        self.r2baba = radius * radius * self.baba

    def hit(self, ray: Ray, t_min: float, t_max: float, skip_handle: int = -1) -> HitRecord | None:
        if not self.hit_enabled:
            return None

        direction = ray.unit_direction
        oc = ray.origin - self.pa
        bard = self.ba.dot(direction)
        baoc = self.ba.dot(oc)

        k2 = self.baba - bard * bard
        k1 = self.baba * oc.dot(direction) - baoc * bard
        k0 = self.baba * oc.dot(oc) - baoc * baoc - self.r2baba

        h = k1 * k1 - k2 * k0
        if h < 0.0:
            return None
        h = math.sqrt(h)
        t = _divide(-k1 - h, k2)

        y = baoc + t * bard
        if 0.0 < y < self.baba:
            if not is_between(t, t_min, t_max):
                return None
            record = HitRecord(t=t, point=ray.at(t), material=self.material, object_handle=self.handle)
            radial = oc + t * direction - self.ba * y * self.inv_baba
            record.set_face_normal(ray, (radial / self.radius).unit())
            return record

        t = _divide((0.0 if y < 0.0 else self.baba) - baoc, bard)
        if abs(k1 + k2 * t) < h:
            if not is_between(t, t_min, t_max):
                return None
            record = HitRecord(t=t, point=ray.at(t), material=self.material, object_handle=self.handle)
            sign = 1.0 if y > 0.0 else -1.0 if y < 0.0 else 0.0
            outward = self.ba * sign * self.inv_baba
            normal = outward.unit() if sign else Vec3(math.nan, math.nan, math.nan)
            record.set_face_normal(ray, normal)
            return record

        return None

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        r = self.radius
        return AABB(
            Vec3(
                min(self.pb.x - r, self.pa.x - r),
                min(self.pb.y, self.pa.y),
                min(self.pb.z - r, self.pa.z - r),
            ),
            Vec3(
                max(self.pb.x + r, self.pa.x + r),
                max(self.pb.y, self.pa.y),
                max(self.pb.z + r, self.pa.z + r),
            ),
        )