"""The scene: objects, camera, light and background used to colour rays."""

from __future__ import annotations

from .bvh import BvhNode
from .camera import Camera
from .hittable import HitRecord, HittableList
from .light import LightSpace
from .ray import Ray
from .utility import INFINITY
from .vec3 import Color, Point3, Vec3

_T_MIN = 0.001


class RayTraceSpace:
    """A ray-traced world sized for a screen of the given width."""

    def __init__(self, screen_size: int, w_size: float, h_size: float) -> None:
        self.light_space = LightSpace(Vec3(0.0, -1.0, 0.0), Color(1.0, 1.0, 1.0))
        self.camera = Camera(
            Point3(0.0, 1.5, 1.0), Point3(0.0, -1.0, 0.0), Vec3(0.0, 1.0, 0.0), 90.0, w_size, h_size
        )
        self.width = screen_size
        self.height = int(float(self.width) / self.camera.aspect_ratio)

        self.upper_corner_color = Color(1.0, 1.0, 1.0)
        self.under_corner_color = Color(0.5, 0.7, 1.0)

        self.world = HittableList()
        self.bvh: BvhNode | None = None

    def build_bvh(self) -> BvhNode:
        """Arrange the world's objects in a BVH used for all ray tests."""
        self.bvh = BvhNode(self.world, 0, None, 0.0, 0.0)
        return self.bvh

    def _require_bvh(self) -> BvhNode:
        if self.bvh is None:
            raise RuntimeError("the scene has no BVH; call build_bvh() first")
        return self.bvh

    def ray_color(self, ray: Ray, depth: int) -> Color:
        """Return the colour seen along the ray, or black when depth is used up."""
        if depth <= 0:
            return Color()
        record = self._require_bvh().hit(ray, _T_MIN, INFINITY, -1)
        if record is not None:
            return record.material.scatter(ray, record, self.light_space, False)

        t = 0.5 * (ray.unit_direction.y + 1.0)
        return (1.0 - t) * self.upper_corner_color + t * self.under_corner_color

    def ray_hit_record(self, ray: Ray) -> HitRecord | None:
        """Return the record of what the ray hits, or None."""
        return self._require_bvh().hit(ray, _T_MIN, INFINITY, -1)