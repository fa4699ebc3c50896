"""Tile shape model: the fixed 13-vertex outlines and their edges.

Both prototiles share one outline drawn on a hexagonal lattice with unit
hexagon side 1/2.  The *Reflected* outline is the mirror image of the
*Unreflected* one, with its vertex order reversed so that both wind
counter-clockwise.

Edges are numbered ``1..13``.  Edge *i* joins local vertex ``i - 1`` to
vertex ``i`` (edge 13 closes the loop from vertex 12 back to vertex 0).
Per variant, a fixed table gives each edge's base heading and length
class; a tile's orientation is added to the base heading.

Functions
---------
- :func:`build_tile` — construct a :class:`~models.Tile`
- :func:`polygon` — world/view-space vertices of a tile
- :func:`edge` / :func:`edges` — edge descriptors
- :func:`edge_points` — world-space endpoints of one edge
- :func:`attach_to_edge` — a tile glued onto a given edge
"""

from __future__ import annotations

import math
import operator
from typing import Dict, List, Tuple

from .geometry import Point, midpoint, rotate_point, to_view
from .models import IndexFault, LengthClass, Tile, TileEdge, Variant

EDGE_COUNT = 13
EDGE_INDICES = tuple(range(1, EDGE_COUNT + 1))

_R = math.sqrt(3.0) / 2.0

# Unreflected local outline, counter-clockwise.
_UNREFLECTED_VERTICES: Tuple[Point, ...] = (
    (0.5, 0.0),
    (0.5, _R),
    (-0.25, 1.5 * _R),
    (-0.5, _R),
    (-1.0, _R),
    (-1.0, 0.0),
    (-1.75, -_R / 2.0),
    (-1.5, -_R),
    (-0.5, -_R),
    (-0.25, -_R / 2.0),
    (0.5, -_R),
    (1.25, -_R / 2.0),
    (1.0, 0.0),
)

_REFLECTED_VERTICES: Tuple[Point, ...] = tuple(
    (-x, y) for x, y in reversed(_UNREFLECTED_VERTICES)
)

TEMPLATES: Dict[Variant, Tuple[Point, ...]] = {
    Variant.UNREFLECTED: _UNREFLECTED_VERTICES,
    Variant.REFLECTED: _REFLECTED_VERTICES,
}

EDGE_VERTICES: Dict[int, Tuple[int, int]] = {
    i: (i - 1, i % EDGE_COUNT) for i in EDGE_INDICES
}

_S = LengthClass.SHORT
_L = LengthClass.LONG
_D = LengthClass.DOUBLE

# edge index -> (base heading in degrees, length class)
EDGE_TABLES: Dict[Variant, Dict[int, Tuple[int, LengthClass]]] = {
    Variant.UNREFLECTED: {
        1: (90, _L),
        2: (150, _L),
        3: (240, _S),
        4: (180, _S),
        5: (270, _L),
        6: (210, _L),
        7: (300, _S),
        8: (0, _D),
        9: (60, _S),
        10: (330, _L),
        11: (30, _L),
        12: (120, _S),
        13: (180, _S),
    },
    Variant.REFLECTED: {
        1: (240, _S),
        2: (330, _L),
        3: (30, _L),
        4: (300, _S),
        5: (0, _D),
        6: (60, _S),
        7: (150, _L),
        8: (90, _L),
        9: (180, _S),
        10: (120, _S),
        11: (210, _L),
        12: (270, _L),
        13: (180, _S),
    },
}

LENGTHS: Dict[LengthClass, float] = {
    LengthClass.SHORT: 0.5,
    LengthClass.LONG: _R,
    LengthClass.DOUBLE: 1.0,
}


def build_tile(variant: Variant | str, x: float, y: float,
               angle_degrees: int = 0) -> Tile:
    """Construct a tile; the orientation is normalised to [0, 360)."""
    return Tile(Variant.parse(variant), float(x), float(y), angle_degrees)


def local_vertices(variant: Variant) -> List[Point]:
    """The fixed local outline of *variant* (a copy)."""
    return list(TEMPLATES[variant])


def world_vertices(tile: Tile) -> List[Point]:
    """Template rotated by the tile's orientation and moved to its center."""
    out: List[Point] = []
    for lx, ly in TEMPLATES[tile.variant]:
        rx, ry = rotate_point(lx, ly, tile.angle)
        out.append((tile.x + rx, tile.y + ry))
    return out


def polygon(tile: Tile, offset_x: float = 0.0, offset_y: float = 0.0,
            scale: float = 1.0) -> List[Point]:
    """Ordered 13 vertices of *tile* in view space.

    World coordinates are mapped as ``p * scale + offset``; the defaults
    give plain world coordinates.
    """
    return to_view(world_vertices(tile), offset_x, offset_y, scale)


def _check_index(i: int) -> int:
    """Normalise an integer-like edge index; IndexFault unless in 1..13."""
    if isinstance(i, bool):
        raise IndexFault(i)
    try:
        index = operator.index(i)
    except TypeError:
        raise IndexFault(i) from None
    if index not in EDGE_VERTICES:
        raise IndexFault(i)
    return index


def edge_points(tile: Tile, i: int) -> Tuple[Point, Point]:
    """World-space endpoints of edge *i*, in winding order."""
    i = _check_index(i)
    a, b = EDGE_VERTICES[i]
    pts = world_vertices(tile)
    return pts[a], pts[b]


def edge(tile: Tile, i: int) -> TileEdge:
    """Descriptor of edge *i* (1..13); raises :class:`IndexFault` otherwise."""
    i = _check_index(i)
    base_angle, length = EDGE_TABLES[tile.variant][i]
    a, b = EDGE_VERTICES[i]
    pts = world_vertices(tile)
    return TileEdge(
        index=i,
        center=midpoint(pts[a], pts[b]),
        angle=(base_angle + tile.angle) % 360,
        length=length,
    )


def edges(tile: Tile) -> List[TileEdge]:
    """All 13 edge descriptors of *tile*, in index order."""
    pts = world_vertices(tile)
    table = EDGE_TABLES[tile.variant]
    out: List[TileEdge] = []
    for i in EDGE_INDICES:
        base_angle, length = table[i]
        a, b = EDGE_VERTICES[i]
        out.append(TileEdge(i, midpoint(pts[a], pts[b]),
                            (base_angle + tile.angle) % 360, length))
    return out


def attach_to_edge(variant: Variant | str, edge_index: int,
                   target: TileEdge) -> Tile:
    """Return a tile whose edge *edge_index* lies exactly on *target*.

    The new tile is rotated so the two edges run in opposite directions,
    then translated so their centers coincide.
    """
    variant = Variant.parse(variant)
    edge_index = _check_index(edge_index)
    base_angle, length = EDGE_TABLES[variant][edge_index]
    if length is not target.length:
        raise ValueError(
            f"Cannot attach {length.value} edge {edge_index} of "
            f"{variant.name} onto a {target.length.value} edge"
        )
    placed = Tile(variant, 0.0, 0.0, target.angle + 180 - base_angle)
    cx, cy = edge(placed, edge_index).center
    return placed.translated(target.center[0] - cx, target.center[1] - cy)
