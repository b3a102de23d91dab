"""Numeric helpers shared by the renderer: constants, random numbers, clamping."""

from __future__ import annotations

import math
import random

INFINITY = math.inf
PI = 3.1415926535897932385

_generator = random.Random()


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def random_int(low: int, high: int) -> int:
    """Return a random integer in the inclusive range [low, high]."""
    if low >= high:
        raise ValueError(f"low ({low}) must be less than high ({high})")
    return _generator.randint(low, high)


def random_double(low: float = 0.0, high: float = 1.0) -> float:
    """Return a random float in [low, high)."""
    return low + (high - low) * _generator.random()


def clamp(x: float, low: float, high: float) -> float:
    """Limit x to the range [low, high]."""
    if x <= low:
        return low
    if x >= high:
        return high
    return x


def clamp_max(x: float, maximum: float) -> float:
    """Return x, or maximum when x reaches it."""
    if x >= maximum:
        return maximum
    return x


def rgb01_to_255(value: float) -> int:
    """Map a colour channel in 0..1 to an 8-bit value in 0..255."""
    return int(256 * clamp(value, 0.0, 0.999))