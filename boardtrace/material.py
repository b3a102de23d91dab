"""Surface materials that turn a hit into a colour."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .hittable import HitRecord
from .light import LightSpace
from .ray import Ray
from .texture import Texture
from .utility import clamp
from .vec3 import Color


class Material(ABC):
    """Shading model applied at a hit point."""

    @abstractmethod
    def scatter(self, ray: Ray, record: HitRecord, light_space: LightSpace, shadow: bool) -> Color:
        """Return the colour (attenuation) for the hit."""


class Lambertian(Material):
    """Diffuse shading against a directional light."""

    def __init__(self, texture: Texture) -> None:
        self.albedo = texture

    def scatter(self, ray: Ray, record: HitRecord, light_space: LightSpace, shadow: bool) -> Color:
        if shadow:
            return Color()
        albedo = self.albedo.value(record.u, record.v, record.point)
        diffuse = record.normal.unit().dot(-light_space.direction)
        base = albedo * light_space.ambient_color
        return clamp(diffuse, 0.0, 1.0) * base


class Metal(Material):
    """Metallic surface; shading is not worked out yet and yields black."""

    def __init__(self, color: Color) -> None:
        self.albedo = color

    def scatter(self, ray: Ray, record: HitRecord, light_space: LightSpace, shadow: bool) -> Color:
        return Color()