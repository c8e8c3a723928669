"""Scalar helpers shared by the spine solver, steering and fish geometry."""

from __future__ import annotations

import math

TWO_PI = 2.0 * math.pi


def wrap_angle(angle: float) -> float:
    """Wrap an angle difference into the canonical range (-π, π].

    Values already in range are returned unchanged.

    Args:
        angle: Angle in radians

    Returns:
        Equivalent angle in (-π, π]
    """
    while angle > math.pi:
        angle -= TWO_PI
    while angle <= -math.pi:
        angle += TWO_PI
    return angle


def relative_angle_diff(from_angle: float, to_angle: float) -> float:
    """Signed smallest rotation taking ``from_angle`` onto ``to_angle``."""
    return wrap_angle(to_angle - from_angle)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between two values.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor (typically 0-1)

    Returns:
        Interpolated value: a + (b - a) * t
    """
    return a + (b - a) * t


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum value
        max_val: Maximum value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def remap(
    value: float,
    start1: float,
    stop1: float,
    start2: float,
    stop2: float,
    *,
    within_bounds: bool = False,
) -> float:
    """Re-map ``value`` from one range onto another.

    With ``within_bounds`` the result is clamped to the target range, which
    may be given in either order.
    """
    span = stop1 - start1
    if span == 0:
        return start2
    mapped = start2 + (stop2 - start2) * ((value - start1) / span)
    if within_bounds:
        low, high = min(start2, stop2), max(start2, stop2)
        return clamp(mapped, low, high)
    return mapped


__all__ = [
    "TWO_PI",
    "clamp",
    "lerp",
    "relative_angle_diff",
    "remap",
    "wrap_angle",
]
