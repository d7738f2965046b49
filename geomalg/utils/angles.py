"""
Angle unit helpers.

All geomalg APIs take angles in radians. These helpers make call sites
read in the unit they were written in:

    Point2d(3, 0).rotate_around(Point2d(2, 0), degrees(45))
"""

import math


def radians(value: float) -> float:
    return value


def degrees(value: float) -> float:
    """Convert degrees to radians."""
    return value * math.pi / 180.0


def turns(value: float) -> float:
    """Convert full turns to radians."""
    return value * 2.0 * math.pi


def in_degrees(angle: float) -> float:
    return angle * 180.0 / math.pi


def in_turns(angle: float) -> float:
    return angle / (2.0 * math.pi)


def normalize_angle(angle: float) -> float:
    """Wrap an angle into the interval (-pi, pi]."""
    wrapped = math.fmod(angle + math.pi, 2.0 * math.pi)
    if wrapped <= 0.0:
        wrapped += 2.0 * math.pi
    return wrapped - math.pi
