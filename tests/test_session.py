"""Tests for the headless editing session."""

import logging

import pytest

from hatpatch.config import DEFAULT_CONFIG, TOUCH_CONFIG, SessionConfig
from hatpatch.models import LengthClass, Variant
from hatpatch.patch import Patch
from hatpatch.session import Session
from hatpatch.shapes import build_tile


@pytest.fixture
def session():
    s = Session()
    s.move_cursor(0.0, 0.0)
    s.place_at_cursor()
    return s


# ═══════════════════════════════════════════════════════════════════
# Defaults and queries
# ═══════════════════════════════════════════════════════════════════


class TestDefaults:
    def test_initial_state(self):
        s = Session()
        assert s.scale == DEFAULT_CONFIG.initial_scale
        assert s.angle == 0
        assert s.next_variant is Variant.UNREFLECTED
        assert s.show_edges is True
        assert s.debug is False
        assert len(s.patch) == 0

    def test_tolerance_follows_zoom(self):
        s = Session()
        assert s.tolerance == pytest.approx(0.36)
        s.zoom_in()
        assert s.tolerance == pytest.approx(0.09)

    def test_custom_config(self):
        s = Session(config=SessionConfig(initial_scale=10.0, glue_tolerance=0.05))
        assert s.scale == 10.0
        assert s.patch.glue_tolerance == 0.05

    def test_touch_preset_widens_snap(self):
        s = Session(config=TOUCH_CONFIG)
        assert s.tolerance == pytest.approx(1.44)

    def test_cursor_world(self):
        s = Session()
        s.move_cursor(50.0, -25.0)
        assert s.cursor_world() == (2.0, -1.0)

    def test_preview_tile(self):
        s = Session()
        s.move_cursor(25.0, 25.0)
        s.rotate_left()
        s.toggle_variant()
        tile = s.preview_tile()
        assert (tile.variant, tile.x, tile.y, tile.angle) == (Variant.REFLECTED, 1.0, 1.0, 30)


# ═══════════════════════════════════════════════════════════════════
# Placement, undo, clear
# ═══════════════════════════════════════════════════════════════════


class TestPlacement:
    def test_first_tile(self, session):
        assert len(session.patch) == 1
        assert len(session.patch.boundary) == 13

    def test_preview_and_snap(self, session):
        session.move_cursor(1.6 * 25.0, 0.05 * 25.0)
        assert session.preview_snaps() is True
        placed = session.place_at_cursor()
        assert placed.x == pytest.approx(1.5)
        assert placed.y == pytest.approx(0.0, abs=1e-9)
        assert len(session.patch.boundary) == 24

    def test_preview_away_from_boundary(self, session):
        session.move_cursor(1.5 * 25.0, -1.5 * 25.0)
        assert session.preview_snaps() is False
        session.move_cursor(1.5 * 25.0, 0.3 * 25.0)
        assert session.preview_snaps() is True
        session.move_cursor(1.5 * 25.0, 1.5 * 25.0)
        assert session.preview_snaps() is False

    def test_undo(self, session):
        before = list(session.patch.boundary)
        session.move_cursor(40.0, 1.25)
        session.place_at_cursor()
        assert session.undo() is not None
        assert session.patch.boundary == before
        assert session.undo() is not None
        assert session.undo() is None

    def test_clear(self, session):
        session.clear()
        assert session.patch.tiles == []
        assert session.patch.boundary == []

    def test_attach_at_glues_onto_boundary_edge(self, session):
        assert session.patch.boundary[0].edge_index == 1
        placed = session.attach_at(0, 5)
        assert placed.variant is Variant.UNREFLECTED
        assert placed.angle == 0
        assert placed.x == pytest.approx(1.5)
        assert placed.y == pytest.approx(0.0, abs=1e-9)
        assert len(session.patch.boundary) == 24

    def test_attach_at_length_mismatch(self, session):
        with pytest.raises(ValueError):
            session.attach_at(0, 3)
        assert len(session.patch) == 1

    def test_bad_edge_index_aborts_only_the_attach(self, session, caplog):
        before = list(session.patch.boundary)
        with caplog.at_level(logging.ERROR, logger="hatpatch.session"):
            assert session.attach_at(0, 14) is None
        assert len(session.patch) == 1
        assert session.patch.boundary == before
        assert any(r.levelno == logging.ERROR for r in caplog.records)

        assert session.attach_at(0, 5) is not None
        assert len(session.patch) == 2

    def test_config_tolerance_rebuilds_given_patch(self):
        tiles = [build_tile(Variant.UNREFLECTED, 0.0, 0.0, 0),
                 build_tile(Variant.UNREFLECTED, 1.5, 0.0, 0)]
        s = Session(config=SessionConfig(glue_tolerance=0.0), patch=Patch(tiles=tiles))
        assert len(s.patch.boundary) == 26


# ═══════════════════════════════════════════════════════════════════
# View controls
# ═══════════════════════════════════════════════════════════════════


class TestControls:
    def test_rotate(self):
        s = Session()
        assert s.rotate_right() == 330
        assert s.rotate_left() == 0
        for _ in range(12):
            s.rotate_left()
        assert s.angle == 0

    def test_zoom_limits(self):
        s = Session()
        assert s.zoom_in() == 50.0
        s.scale = 200.0
        assert s.zoom_in() == 200.0
        s.scale = 25.0
        assert s.zoom_out() == 12.5
        s.scale = 0.5
        assert s.zoom_out() == 0.5

    def test_toggles(self):
        s = Session()
        assert s.toggle_variant() is Variant.REFLECTED
        assert s.toggle_variant() is Variant.UNREFLECTED
        assert s.toggle_edges() is False
        assert s.toggle_debug() is True


class TestEdgeMarkers:
    def test_one_marker_per_boundary_edge(self, session):
        assert len(session.edge_markers()) == len(session.patch.boundary)

    def test_marker_lengths(self, session):
        for b, ((x1, y1), (x2, y2)) in zip(session.patch.boundary, session.edge_markers()):
            length = ((x2 - x1) ** 2 + (y2 - y1) ** 2) ** 0.5
            half = 1.0 if b.edge.length is LengthClass.SHORT else 1.6
            assert length == pytest.approx(2.0 * half * session.scale)
            assert ((x1 + x2) / 2, (y1 + y2) / 2) == pytest.approx(
                (b.edge.center[0] * session.scale, b.edge.center[1] * session.scale)
            )
