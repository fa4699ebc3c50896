from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List

from .boundary import interior_seams
from .geometry import bounding_box, heading_degrees, signed_area
from .models import Variant
from .patch import Patch
from .shapes import (
    EDGE_INDICES,
    EDGE_TABLES,
    LENGTHS,
    build_tile,
    edge_points,
    local_vertices,
    polygon,
)


def validate_tables(tol: float = 1e-9) -> List[str]:
    """Check that the edge tables agree with the outline geometry.

    Returns a list of error strings; empty means every variant winds
    counter-clockwise and each table heading/length matches its
    vertex pair.
    """
    errors: List[str] = []
    for variant in Variant:
        template = local_vertices(variant)
        if len(template) != len(EDGE_INDICES):
            errors.append(f"{variant.name} has {len(template)} vertices")
        if signed_area(template) <= 0:
            errors.append(f"{variant.name} outline is not counter-clockwise")
        tile = build_tile(variant, 0.0, 0.0, 0)
        for i in EDGE_INDICES:
            base_angle, length = EDGE_TABLES[variant][i]
            a, b = edge_points(tile, i)
            heading = heading_degrees(a, b)
            diff = abs((heading - base_angle + 180.0) % 360.0 - 180.0)
            if diff > 1e-6:
                errors.append(
                    f"{variant.name} edge {i}: table angle {base_angle} "
                    f"but geometry heading {heading:.3f}"
                )
            measured = ((b[0] - a[0]) ** 2 + (b[1] - a[1]) ** 2) ** 0.5
            if abs(measured - LENGTHS[length]) > tol:
                errors.append(
                    f"{variant.name} edge {i}: {length.value} edge measures {measured:.4f}"
                )
    return errors


def patch_report(patch: Patch) -> Dict[str, Any]:
    """Summary counts for a patch, JSON-serialisable."""
    variants = Counter(t.variant.name for t in patch.tiles)
    lengths = Counter(b.edge.length.value for b in patch.boundary)
    points = [p for t in patch.tiles for p in polygon(t)]
    min_x, min_y, max_x, max_y = bounding_box(points)
    return {
        "tiles": len(patch.tiles),
        "tiles_by_variant": {v.name: variants.get(v.name, 0) for v in Variant},
        "boundary_edges": len(patch.boundary),
        "boundary_by_length": dict(sorted(lengths.items())),
        "interior_seams": len(interior_seams(patch.tiles, patch.glue_tolerance)),
        "bbox": [min_x, min_y, max_x, max_y],
    }


def report_lines(patch: Patch) -> List[str]:
    report = patch_report(patch)
    lines = [
        f"tiles: {report['tiles']}",
    ]
    for name, count in report["tiles_by_variant"].items():
        lines.append(f"  {name.lower()}: {count}")
    lines.append(f"boundary edges: {report['boundary_edges']}")
    for name, count in report["boundary_by_length"].items():
        lines.append(f"  {name}: {count}")
    lines.append(f"interior seams: {report['interior_seams']}")
    min_x, min_y, max_x, max_y = report["bbox"]
    lines.append(f"bbox: ({min_x:.3f}, {min_y:.3f}) .. ({max_x:.3f}, {max_y:.3f})")
    return lines
