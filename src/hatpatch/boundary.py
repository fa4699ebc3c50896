"""Boundary set maintenance.

The boundary of a patch is every tile edge that has no coincident
partner on another tile.  It is always rebuilt from scratch; the
pairwise scan is O(N² · 169) for N tiles, which is fine because it only
runs when a tile is added or removed.

A tile is never compared with itself: no two edges of one outline are
antipodal, of equal length and closer than the glue tolerance, so the
self-comparison could never match anything.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .models import BoundaryEdge, Tile, TileEdge
from .seams import GLUE_TOLERANCE, coincident
from .shapes import edges

logger = logging.getLogger(__name__)


def _glued_flags(
    tile_edges: Sequence[Sequence[TileEdge]], tol: float,
) -> List[List[bool]]:
    glued = [[False] * len(es) for es in tile_edges]
    for t, own in enumerate(tile_edges):
        for i, e1 in enumerate(own):
            if glued[t][i]:
                continue
            for u, other in enumerate(tile_edges):
                if u == t:
                    continue
                for j, e2 in enumerate(other):
                    if coincident(e1, e2, tol):
                        glued[t][i] = True
                        glued[u][j] = True
                        break
                if glued[t][i]:
                    break
    return glued


def rebuild_boundary(tiles: Sequence[Tile],
                     tol: float = GLUE_TOLERANCE) -> List[BoundaryEdge]:
    """Return the exposed edges of *tiles*, ordered by (tile, edge index)."""
    tile_edges = [edges(tile) for tile in tiles]
    glued = _glued_flags(tile_edges, tol)
    boundary = [
        BoundaryEdge(t, e)
        for t, es in enumerate(tile_edges)
        for i, e in enumerate(es)
        if not glued[t][i]
    ]
    logger.debug("rebuilt boundary: %d tiles, %d exposed edges",
                 len(tiles), len(boundary))
    return boundary


def interior_seams(
    tiles: Sequence[Tile], tol: float = GLUE_TOLERANCE,
) -> List[Tuple[BoundaryEdge, BoundaryEdge]]:
    """Every glued pair of edges, each pair listed once (lower tile first)."""
    tile_edges = [edges(tile) for tile in tiles]
    seams: List[Tuple[BoundaryEdge, BoundaryEdge]] = []
    for t, own in enumerate(tile_edges):
        for u in range(t + 1, len(tile_edges)):
            for e1 in own:
                for e2 in tile_edges[u]:
                    if coincident(e1, e2, tol):
                        seams.append((BoundaryEdge(t, e1), BoundaryEdge(u, e2)))
    return seams
