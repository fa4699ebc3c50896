"""Tests for placement snapping and the drag-preview detector."""

import math

import pytest

from hatpatch.boundary import rebuild_boundary
from hatpatch.models import BoundaryEdge, LengthClass, TileEdge, Variant
from hatpatch.seams import snap_tolerance
from hatpatch.snapping import nearest_match, snap_offset, snapped, snaps
from hatpatch.shapes import build_tile

U = Variant.UNREFLECTED
R = math.sqrt(3.0) / 2.0
TOL = snap_tolerance(25.0)


@pytest.fixture
def boundary():
    return rebuild_boundary([build_tile(U, 0.0, 0.0, 0)])


class TestSnapOffset:
    def test_empty_boundary(self):
        assert snap_offset(build_tile(U, 0.3, 0.2, 0), [], TOL) == (0.0, 0.0)

    def test_far_request_is_not_moved(self, boundary):
        assert snap_offset(build_tile(U, 50.0, 50.0, 0), boundary, TOL) == (0.0, 0.0)

    def test_snaps_onto_edge_one(self, boundary):
        dx, dy = snap_offset(build_tile(U, 1.6, 0.05, 0), boundary, TOL)
        assert dx == pytest.approx(-0.1)
        assert dy == pytest.approx(-0.05)

    def test_snapped_tile(self, boundary):
        tile = snapped(build_tile(U, 1.6, 0.05, 0), boundary, TOL)
        assert tile.x == pytest.approx(1.5)
        assert tile.y == pytest.approx(0.0, abs=1e-12)
        assert tile.angle == 0

    def test_nearest_match_wins_over_first(self):
        candidate = build_tile(U, 0.0, 0.0, 0)
        far = BoundaryEdge(0, TileEdge(5, (0.9, R / 2.0), 270, LengthClass.LONG))
        near = BoundaryEdge(1, TileEdge(5, (0.6, R / 2.0), 270, LengthClass.LONG))
        dx, dy = snap_offset(candidate, [far, near], TOL)
        assert dx == pytest.approx(0.1)
        assert dy == pytest.approx(0.0, abs=1e-12)

        target, own, d2 = nearest_match(candidate, [far, near], TOL)
        assert target is near
        assert own.index == 1
        assert d2 == pytest.approx(0.01)

    def test_incompatible_edges_ignored(self):
        candidate = build_tile(U, 0.0, 0.0, 0)
        wrong_length = BoundaryEdge(0, TileEdge(1, (0.5, R / 2.0), 270, LengthClass.SHORT))
        wrong_angle = BoundaryEdge(0, TileEdge(2, (0.5, R / 2.0), 90, LengthClass.LONG))
        assert snap_offset(candidate, [wrong_length, wrong_angle], TOL) == (0.0, 0.0)

    def test_tolerance_is_strict(self):
        candidate = build_tile(U, 0.0, 0.0, 0)
        target = BoundaryEdge(0, TileEdge(5, (1.1, R / 2.0), 270, LengthClass.LONG))
        assert snap_offset(candidate, [target], 0.3) == (0.0, 0.0)
        assert snap_offset(candidate, [target], 0.37) != (0.0, 0.0)


class TestDragPreview:
    def test_no_boundary(self):
        assert not snaps(build_tile(U, 0.0, 0.0, 0), [], TOL)

    def test_flips_on_approach_and_retreat(self, boundary):
        outside = build_tile(U, 1.5, -1.5, 0)
        inside = build_tile(U, 1.5, 0.3, 0)
        retreated = build_tile(U, 1.5, 0.3 + 2.0 * math.sqrt(TOL), 0)
        assert snaps(outside, boundary, TOL) is False
        assert snaps(inside, boundary, TOL) is True
        assert snaps(retreated, boundary, TOL) is False

    def test_agrees_with_snap_offset(self, boundary):
        for x, y in [(1.5, -1.5), (1.5, 0.3), (1.6, 0.05), (50.0, 50.0)]:
            tile = build_tile(U, x, y, 0)
            has_match = nearest_match(tile, boundary, TOL) is not None
            assert snaps(tile, boundary, TOL) == has_match

    def test_does_not_move_anything(self, boundary):
        before = list(boundary)
        tile = build_tile(U, 1.5, 0.3, 0)
        snaps(tile, boundary, TOL)
        assert boundary == before
        assert (tile.x, tile.y) == (1.5, 0.3)
