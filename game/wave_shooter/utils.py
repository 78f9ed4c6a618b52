"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def vec_len(x: float, y: float) -> float:
    """Calculate vector length (magnitude)"""
    return math.hypot(x, y)


def within_radius(x1: float, y1: float, x2: float, y2: float, radius: float) -> bool:
    """Check if two points are strictly closer than radius"""
    return vec_len(x1 - x2, y1 - y2) < radius
