#!/usr/bin/env python3
"""
Vector helper functions for 2D operations.

These are small, fast functions for vector math used throughout the app.
"""
import math
from typing import Tuple


def vec_add(a: Tuple[float, float], b: Tuple[float, float]) -> Tuple[float, float]:
    return (a[0] + b[0], a[1] + b[1])


def vec_scale(a: Tuple[float, float], s: float) -> Tuple[float, float]:
    return (a[0] * s, a[1] * s)


def unit_vector(angle: float) -> Tuple[float, float]:
    """Unit vector pointing at ``angle`` radians from the +x axis."""
    return (math.cos(angle), math.sin(angle))


def orbit_point(origin: Tuple[float, float], radius: float, angle: float) -> Tuple[float, float]:
    """Point on a circle of ``radius`` around ``origin`` at ``angle`` radians."""
    return vec_add(origin, vec_scale(unit_vector(angle), radius))
