"""Tuneable parameters for snapping, zooming and the debug overlay.

Usage
-----
>>> from hatpatch.config import SessionConfig, DEFAULT_CONFIG
>>> config = SessionConfig(snap_pixels=20.0)
"""

from __future__ import annotations

from dataclasses import dataclass


# ═══════════════════════════════════════════════════════════════════
# Configuration
# ═══════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class SessionConfig:
    """All tuneable parameters of an editing session.

    Attributes
    ----------
    initial_scale : float
        View pixels per tile unit when a session starts.
    snap_pixels : float
        Snap radius in screen pixels; the squared world-space tolerance
        is ``(snap_pixels / scale) ** 2``.
    glue_tolerance : float
        Squared distance under which two placed edges count as glued.
    rotation_step : int
        Degrees added or removed by one rotate action.
    min_scale, max_scale : float
        Zoom limits applied before halving / doubling the scale.
    short_marker, long_marker : float
        Half-length (in tile units) of debug edge markers for SHORT and
        for LONG/DOUBLE edges.
    """

    initial_scale: float = 25.0
    snap_pixels: float = 15.0
    glue_tolerance: float = 0.1
    rotation_step: int = 30
    min_scale: float = 1.0
    max_scale: float = 100.0
    short_marker: float = 1.0
    long_marker: float = 1.6


DEFAULT_CONFIG = SessionConfig()

# Coarser snapping for touch input.
TOUCH_CONFIG = SessionConfig(snap_pixels=30.0)
