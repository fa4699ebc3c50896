"""hatpatch — interactive assembly engine for 13-edge aperiodic tilings.

Public API is organised into layers:

- **Core** — models, tile shapes, seam comparison
- **Patch** — boundary maintenance, snapping, placement and undo
- **Decoration** — Ammann bars
- **Session** — headless editing state and configuration
- **Diagnostics** — table checks and patch reports
- **Rendering** — PNG output (requires matplotlib)
"""

# ── Core ────────────────────────────────────────────────────────────
from .models import BoundaryEdge, IndexFault, LengthClass, Tile, TileEdge, Variant
from .shapes import (
    attach_to_edge,
    build_tile,
    edge,
    edge_points,
    edges,
    local_vertices,
    polygon,
)
from .seams import GLUE_TOLERANCE, coincident, compatible, snap_tolerance

# ── Patch ───────────────────────────────────────────────────────────
from .boundary import interior_seams, rebuild_boundary
from .snapping import nearest_match, snap_offset, snapped, snaps
from .patch import Patch, add_tile, pop_last_tile

# ── Decoration ──────────────────────────────────────────────────────
from .ammann import ammann_segments

# ── Session ─────────────────────────────────────────────────────────
from .config import DEFAULT_CONFIG, TOUCH_CONFIG, SessionConfig
from .session import Session

# ── Diagnostics ─────────────────────────────────────────────────────
from .diagnostics import patch_report, report_lines, validate_tables

# ── Rendering (requires matplotlib) ────────────────────────────────
from .render import render_png

__all__ = [
    # Core
    "BoundaryEdge",
    "IndexFault",
    "LengthClass",
    "Tile",
    "TileEdge",
    "Variant",
    "attach_to_edge",
    "build_tile",
    "edge",
    "edge_points",
    "edges",
    "local_vertices",
    "polygon",
    "GLUE_TOLERANCE",
    "coincident",
    "compatible",
    "snap_tolerance",
    # Patch
    "interior_seams",
    "rebuild_boundary",
    "nearest_match",
    "snap_offset",
    "snapped",
    "snaps",
    "Patch",
    "add_tile",
    "pop_last_tile",
    # Decoration
    "ammann_segments",
    # Session
    "DEFAULT_CONFIG",
    "TOUCH_CONFIG",
    "SessionConfig",
    "Session",
    # Diagnostics
    "patch_report",
    "report_lines",
    "validate_tables",
    # Rendering
    "render_png",
]
