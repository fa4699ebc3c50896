"""Decorative Ammann bars derived from a placed tile."""

from __future__ import annotations

import math
from typing import List, Tuple

from .geometry import Point, interpolate
from .models import Tile, Variant
from .shapes import EDGE_COUNT, polygon

Segment = Tuple[Point, Point]

_S5 = math.sqrt(5.0)
QUARTER = 1.0 / 4.0
INNER = 1.0 / (3.0 + _S5)
GOLDEN_HALF = (1.0 + _S5) / 4.0


def ammann_segments(tile: Tile, offset: Point = (0.0, 0.0),
                    scale: float = 1.0) -> List[Segment]:
    """Bar segments of *tile* in view space (``p * scale + offset``)."""
    p = polygon(tile, offset[0], offset[1], scale)
    if tile.variant is Variant.UNREFLECTED:
        a0 = interpolate(p[1], p[0], GOLDEN_HALF)
        a1 = interpolate(p[1], p[0], QUARTER)
        a2 = interpolate(p[1], p[2], INNER)
        a3 = interpolate(p[3], p[2], INNER)
        a4 = interpolate(p[3], p[0], QUARTER)
        a5 = interpolate(p[3], p[0], GOLDEN_HALF)
        return [(a1, a2), (a2, a0), (a5, a3), (a3, a4)]

    # The reflected outline is stored in reverse; q(k) is the mirror of
    # unreflected vertex k.
    def q(k: int) -> Point:
        return p[EDGE_COUNT - 1 - k]

    r0 = interpolate(q(0), q(1), INNER)
    r3 = interpolate(q(2), q(1), QUARTER)
    r4 = interpolate(q(2), q(3), QUARTER)
    r7 = interpolate(q(0), q(3), INNER)
    return [(r3, r7), (r7, r0), (r0, r4)]
