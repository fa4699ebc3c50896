"""Headless editing session.

Holds the state an interactive front end keeps next to the patch
(cursor, zoom, pending orientation and variant, overlay toggles) and
exposes one method per user action.  Event routing and drawing stay
with the caller.

Cursor coordinates are in screen units relative to the view origin;
dividing by :attr:`Session.scale` gives world coordinates.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .config import DEFAULT_CONFIG, SessionConfig
from .geometry import Point
from .models import IndexFault, LengthClass, Tile, Variant
from .patch import Patch, add_tile, pop_last_tile
from .seams import snap_tolerance
from .shapes import attach_to_edge, build_tile
from .snapping import snaps

logger = logging.getLogger(__name__)


@dataclass
class Session:
    config: SessionConfig = DEFAULT_CONFIG
    patch: Patch = field(default_factory=Patch)
    cursor: Point = (0.0, 0.0)
    angle: int = 0
    next_variant: Variant = Variant.UNREFLECTED
    show_edges: bool = True
    debug: bool = False
    scale: float = 0.0

    def __post_init__(self) -> None:
        if self.scale <= 0:
            self.scale = self.config.initial_scale
        self.patch.glue_tolerance = self.config.glue_tolerance
        self.patch.rebuild()

    # ── queries ─────────────────────────────────────────────────────

    @property
    def tolerance(self) -> float:
        return snap_tolerance(self.scale, self.config.snap_pixels)

    def cursor_world(self) -> Point:
        return (self.cursor[0] / self.scale, self.cursor[1] / self.scale)

    def preview_tile(self) -> Tile:
        x, y = self.cursor_world()
        return build_tile(self.next_variant, x, y, self.angle)

    def preview_snaps(self) -> bool:
        """Whether the tile under the cursor would snap if placed now."""
        return snaps(self.preview_tile(), self.patch.boundary, self.tolerance)

    def edge_markers(self) -> List[Tuple[Point, Point]]:
        """Debug overlay: one view-space segment per boundary edge."""
        markers: List[Tuple[Point, Point]] = []
        for b in self.patch.boundary:
            e = b.edge
            half = self.config.short_marker if e.length is LengthClass.SHORT \
                else self.config.long_marker
            r = self.scale * half
            rad = math.radians(e.angle)
            vx, vy = r * math.cos(rad), r * math.sin(rad)
            cx, cy = e.center[0] * self.scale, e.center[1] * self.scale
            markers.append(((cx - vx, cy - vy), (cx + vx, cy + vy)))
        return markers

    # ── actions ─────────────────────────────────────────────────────

    def move_cursor(self, x: float, y: float) -> None:
        self.cursor = (float(x), float(y))

    def place_at_cursor(self) -> Tile:
        """Place the preview tile, snapped onto the boundary."""
        return self._place(self.preview_tile())

    def attach_at(self, boundary_position: int, edge_index: int) -> Optional[Tile]:
        """Glue edge *edge_index* of the next variant onto a boundary edge.

        *boundary_position* indexes :attr:`Patch.boundary`.  An invalid
        edge index is logged and the placement aborted (``None``); the
        patch is left unchanged.
        """
        target = self.patch.boundary[boundary_position].edge
        try:
            tile = attach_to_edge(self.next_variant, edge_index, target)
        except IndexFault:
            logger.exception("attach aborted")
            return None
        return self._place(tile)

    def _place(self, tile: Tile) -> Tile:
        placed = add_tile(self.patch, tile, self.tolerance)
        logger.info(
            "placed %s at (%.3f, %.3f) angle %d; %d tiles, %d boundary edges",
            placed.variant.name, placed.x, placed.y, placed.angle,
            len(self.patch.tiles), len(self.patch.boundary),
        )
        return placed

    def undo(self) -> Optional[Tile]:
        removed = pop_last_tile(self.patch)
        if removed is not None:
            logger.info("undo: %d tiles remain", len(self.patch.tiles))
        return removed

    def clear(self) -> None:
        self.patch.clear()
        logger.info("patch cleared")

    def rotate_left(self) -> int:
        self.angle = (self.angle + self.config.rotation_step) % 360
        return self.angle

    def rotate_right(self) -> int:
        self.angle = (self.angle - self.config.rotation_step) % 360
        return self.angle

    def zoom_in(self) -> float:
        self.scale = 2.0 * min(self.scale, self.config.max_scale)
        return self.scale

    def zoom_out(self) -> float:
        self.scale = 0.5 * max(self.scale, self.config.min_scale)
        return self.scale

    def toggle_variant(self) -> Variant:
        self.next_variant = self.next_variant.flipped()
        return self.next_variant

    def toggle_edges(self) -> bool:
        self.show_edges = not self.show_edges
        return self.show_edges

    def toggle_debug(self) -> bool:
        self.debug = not self.debug
        return self.debug
