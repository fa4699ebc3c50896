"""Edge comparator: decides whether two edges are the same seam.

Two tolerances are in use and must not be mixed up:

- :data:`GLUE_TOLERANCE` for edges of tiles that are already placed;
- :func:`snap_tolerance` for a candidate tile approaching the boundary,
  which depends on the current zoom.
"""

from __future__ import annotations

from .config import DEFAULT_CONFIG
from .geometry import squared_distance
from .models import TileEdge

GLUE_TOLERANCE = DEFAULT_CONFIG.glue_tolerance


def snap_tolerance(scale: float, pixels: float = DEFAULT_CONFIG.snap_pixels) -> float:
    """Squared world-space snap radius for *pixels* at zoom *scale*."""
    if scale <= 0:
        raise ValueError("scale must be > 0")
    return (pixels / scale) ** 2


def compatible(e1: TileEdge, e2: TileEdge) -> bool:
    """Antipodal angles and equal length class, ignoring position."""
    return (e1.angle + 180) % 360 == e2.angle and e1.length is e2.length


def coincident(e1: TileEdge, e2: TileEdge, tol: float = GLUE_TOLERANCE) -> bool:
    """True if *e1* and *e2* are the two sides of one seam."""
    return squared_distance(e1.center, e2.center) < tol and compatible(e1, e2)
