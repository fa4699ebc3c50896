"""Geometry helper functions used across the package."""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple

Point = Tuple[float, float]


def rotate_point(x: float, y: float, angle_deg: float) -> Point:
    """Rotate (x, y) counter-clockwise about the origin by *angle_deg*."""
    rad = math.radians(angle_deg)
    c = math.cos(rad)
    s = math.sin(rad)
    return (c * x - s * y, s * x + c * y)


def to_view(points: Iterable[Point], offset_x: float, offset_y: float,
            scale: float) -> List[Point]:
    """Map world points to view space: ``p * scale + offset``."""
    return [(x * scale + offset_x, y * scale + offset_y) for x, y in points]


def midpoint(a: Point, b: Point) -> Point:
    return ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0)


def interpolate(a: Point, b: Point, t: float) -> Point:
    """Point at fraction *t* of the way from *a* to *b*."""
    return (a[0] + t * (b[0] - a[0]), a[1] + t * (b[1] - a[1]))


def squared_distance(a: Point, b: Point) -> float:
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return dx * dx + dy * dy


def heading_degrees(a: Point, b: Point) -> float:
    """Direction of travel from *a* to *b*, in degrees within [0, 360)."""
    return math.degrees(math.atan2(b[1] - a[1], b[0] - a[0])) % 360.0


def signed_area(points: Sequence[Point]) -> float:
    """Signed area via the shoelace formula.

    Positive if the points are wound counter-clockwise.
    """
    area = 0.0
    n = len(points)
    for i in range(n):
        x1, y1 = points[i]
        x2, y2 = points[(i + 1) % n]
        area += x1 * y2 - x2 * y1
    return area / 2.0


def centroid(points: Sequence[Point]) -> Point:
    """Mean of the given points."""
    if not points:
        return (0.0, 0.0)
    return (
        sum(p[0] for p in points) / len(points),
        sum(p[1] for p in points) / len(points),
    )


def bounding_box(points: Iterable[Point]) -> Tuple[float, float, float, float]:
    """Return ``(min_x, min_y, max_x, max_y)``; zeros for no points."""
    xs: list[float] = []
    ys: list[float] = []
    for x, y in points:
        xs.append(x)
        ys.append(y)
    if not xs:
        return (0.0, 0.0, 0.0, 0.0)
    return (min(xs), min(ys), max(xs), max(ys))
