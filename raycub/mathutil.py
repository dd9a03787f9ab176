"""Angle helpers."""

import math


def deg_to_radian(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * math.pi / 180


def normalize_angle(angle: float) -> float:
    """Wrap an angle into the range [0, 2*pi)."""
    angle = math.fmod(angle, 2 * math.pi)
    if angle < 0:
        angle += 2 * math.pi
    return angle