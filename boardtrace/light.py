"""Directional light with an ambient colour."""

from __future__ import annotations

from dataclasses import dataclass

from .vec3 import Color, Vec3


@dataclass(frozen=True)
class LightSpace:
    """Light shining along a direction, stored normalised."""

    direction: Vec3
    ambient_color: Color

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", self.direction.unit())