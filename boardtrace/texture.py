"""Textures that give a colour for a surface coordinate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .vec3 import Color, Point3


class Texture(ABC):
    """Colour lookup by texture coordinates and hit point."""

    @abstractmethod
    def value(self, u: float, v: float, point: Point3) -> Color:
        """Return the colour at (u, v)."""


class SolidColor(Texture):
    """A texture of one colour everywhere."""

    def __init__(self, color: Color | None = None) -> None:
        self.color = color if color is not None else Color()

    def value(self, u: float, v: float, point: Point3) -> Color:
        return self.color


class CheckerTexture(Texture):
    """Alternates two textures in a grid of squares per unit of u and v."""

    def __init__(self, even: Texture, odd: Texture, squares: int) -> None:
        self.even = even
        self.odd = odd
        self.squares = float(squares)

    def value(self, u: float, v: float, point: Point3) -> Color:
        u_even = int(u * self.squares) % 2 == 0
        v_even = int(v * self.squares) % 2 == 0
        chosen = self.even if u_even == v_even else self.odd
        return chosen.value(u, v, point)