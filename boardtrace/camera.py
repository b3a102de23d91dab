"""Pinhole camera that produces rays through a viewport."""

from __future__ import annotations

import math

from .ray import Ray
from .utility import degrees_to_radians
from .vec3 import Point3, Vec3


class Camera:
    """A camera looking from one point at another, with screen origin top-left."""

    def __init__(
        self,
        look_from: Point3,
        look_at: Point3,
        vup: Vec3,
        fov_degrees: float,
        w_size: float,
        h_size: float,
    ) -> None:
        w = (look_from - look_at).unit()
        u = vup.cross(w).unit()
        v = w.cross(u)

        theta = degrees_to_radians(fov_degrees)
        height = math.tanh(theta * 0.5)

        self.aspect_ratio = w_size / h_size
        self.viewport_height = 2.0 * height
        self.viewport_width = self.viewport_height * self.aspect_ratio

        self.horizontal = self.viewport_width * u
        self.vertical = self.viewport_height * v
        self.origin = look_from
        self.upper_left_corner = self.origin + self.vertical * 0.5 - self.horizontal * 0.5 - w

    def get_ray(self, u: float, v: float) -> Ray:
        """Return the ray through viewport coordinates (u, v), v growing downwards."""
        return Ray(
            self.origin,
            self.upper_left_corner + self.horizontal * u - self.vertical * v - self.origin,
        )