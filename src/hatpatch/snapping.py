"""Snapping a candidate tile onto the boundary of a patch.

:func:`snap_offset` picks the nearest compatible boundary edge and
returns the translation that lands the candidate on it;
:func:`snaps` is the same search reduced to a yes/no answer for drag
previews.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from .geometry import squared_distance
from .models import BoundaryEdge, Tile, TileEdge
from .seams import compatible
from .shapes import edges

logger = logging.getLogger(__name__)


def nearest_match(
    candidate: Tile, boundary: Iterable[BoundaryEdge], tol: float,
) -> Optional[Tuple[BoundaryEdge, TileEdge, float]]:
    """Closest (boundary edge, candidate edge) pair within *tol*.

    Returns ``(boundary_edge, candidate_edge, squared_distance)`` or
    ``None``.  Ties keep the first pair found.
    """
    candidate_edges = edges(candidate)
    best: Optional[Tuple[BoundaryEdge, TileEdge, float]] = None
    best_d2 = tol
    for target in boundary:
        for own in candidate_edges:
            if not compatible(own, target.edge):
                continue
            d2 = squared_distance(own.center, target.edge.center)
            if d2 < best_d2:
                best = (target, own, d2)
                best_d2 = d2
    return best


def snap_offset(candidate: Tile, boundary: Iterable[BoundaryEdge],
                tol: float) -> Tuple[float, float]:
    """Translation moving *candidate* onto its nearest boundary match.

    ``(0.0, 0.0)`` when no compatible edge is within *tol*.
    """
    match = nearest_match(candidate, boundary, tol)
    if match is None:
        return (0.0, 0.0)
    target, own, d2 = match
    logger.debug(
        "snap edge %d onto tile %d edge %d (d2=%.4f)",
        own.index, target.tile_index, target.edge_index, d2,
    )
    return (target.edge.center[0] - own.center[0],
            target.edge.center[1] - own.center[1])


def snaps(candidate: Tile, boundary: Iterable[BoundaryEdge], tol: float) -> bool:
    """True if any compatible boundary edge is within *tol* of *candidate*."""
    candidate_edges = edges(candidate)
    for target in boundary:
        for own in candidate_edges:
            if not compatible(target.edge, own):
                continue
            if squared_distance(target.edge.center, own.center) < tol:
                return True
    return False


def snapped(candidate: Tile, boundary: Iterable[BoundaryEdge], tol: float) -> Tile:
    """*candidate* moved by :func:`snap_offset`."""
    dx, dy = snap_offset(candidate, boundary, tol)
    return candidate.translated(dx, dy)
