"""The tiling patch: placed tiles in placement order plus their boundary.

The patch is a plain object handed to each operation; nothing here is
global.  Every structural change (add, pop, clear) rebuilds the
boundary from scratch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .boundary import rebuild_boundary
from .config import DEFAULT_CONFIG
from .models import BoundaryEdge, Tile
from .seams import snap_tolerance
from .snapping import snap_offset

logger = logging.getLogger(__name__)


@dataclass
class Patch:
    """Placed tiles (oldest first) and the derived boundary set."""

    tiles: List[Tile] = field(default_factory=list)
    glue_tolerance: float = DEFAULT_CONFIG.glue_tolerance
    boundary: List[BoundaryEdge] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.rebuild()

    def __len__(self) -> int:
        return len(self.tiles)

    def rebuild(self) -> List[BoundaryEdge]:
        self.boundary = rebuild_boundary(self.tiles, self.glue_tolerance)
        return self.boundary

    def clear(self) -> None:
        self.tiles = []
        self.boundary = []


def add_tile(patch: Patch, tile: Tile, tolerance: Optional[float] = None) -> Tile:
    """Snap *tile* onto the boundary, append it and rebuild the boundary.

    *tolerance* is the squared snap radius; it defaults to the snap
    radius at the default zoom.  Returns the tile as stored.
    """
    if tolerance is None:
        tolerance = snap_tolerance(DEFAULT_CONFIG.initial_scale)
    dx, dy = snap_offset(tile, patch.boundary, tolerance)
    placed = tile.translated(dx, dy) if (dx or dy) else tile
    patch.tiles.append(placed)
    patch.rebuild()
    return placed


def pop_last_tile(patch: Patch) -> Optional[Tile]:
    """Remove the most recently added tile; ``None`` on an empty patch."""
    if not patch.tiles:
        return None
    removed = patch.tiles.pop()
    patch.rebuild()
    return removed
