"""Tessellation of the curves that make up a fish into plain polygons."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from ..entities.body import BezierSegment, Ellipse
from ..physics.vector_math import Vector2

Point = Tuple[float, float]


def closed_catmull_rom(points: Sequence[Vector2], steps: int = 6) -> List[Point]:
    """Sample a closed Catmull-Rom spline passing through every point."""

    count = len(points)
    if count < 3:
        return [(p.x, p.y) for p in points]
    samples: List[Point] = []
    for i in range(count):
        p0 = points[(i - 1) % count]
        p1 = points[i]
        p2 = points[(i + 1) % count]
        p3 = points[(i + 2) % count]
        for step in range(steps):
            t = step / steps
            t2 = t * t
            t3 = t2 * t
            x = 0.5 * (
                2 * p1.x
                + (p2.x - p0.x) * t
                + (2 * p0.x - 5 * p1.x + 4 * p2.x - p3.x) * t2
                + (3 * p1.x - p0.x - 3 * p2.x + p3.x) * t3
            )
            y = 0.5 * (
                2 * p1.y
                + (p2.y - p0.y) * t
                + (2 * p0.y - 5 * p1.y + 4 * p2.y - p3.y) * t2
                + (3 * p1.y - p0.y - 3 * p2.y + p3.y) * t3
            )
            samples.append((x, y))
    return samples


def bezier_points(segment: BezierSegment, steps: int = 10) -> List[Point]:
    """Sample a cubic Bézier segment, both end points included."""

    points: List[Point] = []
    for step in range(steps + 1):
        t = step / steps
        u = 1.0 - t
        a = u * u * u
        b = 3 * u * u * t
        c = 3 * u * t * t
        d = t * t * t
        points.append(
            (
                a * segment.start.x + b * segment.control1.x + c * segment.control2.x + d * segment.end.x,
                a * segment.start.y + b * segment.control1.y + c * segment.control2.y + d * segment.end.y,
            )
        )
    return points


def ellipse_points(ellipse: Ellipse, segments: int = 20) -> List[Point]:
    """Polygon approximating a rotated ellipse (width/height are diameters)."""

    rx = ellipse.width / 2.0
    ry = ellipse.height / 2.0
    cos_r = math.cos(ellipse.rotation)
    sin_r = math.sin(ellipse.rotation)
    points: List[Point] = []
    for i in range(segments):
        theta = math.tau * i / segments
        ex = rx * math.cos(theta)
        ey = ry * math.sin(theta)
        points.append(
            (
                ellipse.center.x + ex * cos_r - ey * sin_r,
                ellipse.center.y + ex * sin_r + ey * cos_r,
            )
        )
    return points
