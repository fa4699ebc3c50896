from __future__ import annotations

from pathlib import Path

from .ammann import ammann_segments
from .geometry import bounding_box
from .models import Variant
from .patch import Patch
from .shapes import polygon


def render_png(
    patch: Patch,
    output_path: str | Path,
    unreflected_color: str = "#fffacd",
    reflected_color: str = "#f5f5f5",
    edge_color: str = "#a0522d",
    boundary_color: str = "#a52a2a",
    ammann_color: str = "#d1495b",
    show_boundary: bool = False,
    show_ammann: bool = False,
    padding: float = 0.5,
    dpi: int = 150,
) -> None:
    """Render a patch to PNG in world coordinates.

    Requires matplotlib, which is imported lazily.
    """
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        from matplotlib.patches import Polygon
    except ImportError as exc:  # pragma: no cover - requires optional dep
        raise RuntimeError(
            "matplotlib is required for rendering. Install with `pip install matplotlib`."
        ) from exc

    fig, ax = plt.subplots()

    points = []
    for tile in patch.tiles:
        pts = polygon(tile)
        points.extend(pts)
        face = unreflected_color if tile.variant is Variant.UNREFLECTED else reflected_color
        ax.add_patch(Polygon(pts, closed=True, facecolor=face,
                             edgecolor=edge_color, linewidth=1.0, joinstyle="miter"))
        if show_ammann:
            for (x1, y1), (x2, y2) in ammann_segments(tile):
                ax.plot([x1, x2], [y1, y2], color=ammann_color, linewidth=0.8)

    if show_boundary:
        for b in patch.boundary:
            cx, cy = b.edge.center
            ax.scatter(cx, cy, s=6.0, c=boundary_color, zorder=3)

    min_x, min_y, max_x, max_y = bounding_box(points)
    ax.set_aspect("equal", "box")
    ax.set_xlim(min_x - padding, max_x + padding)
    ax.set_ylim(min_y - padding, max_y + padding)
    ax.axis("off")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches="tight", pad_inches=0)
    plt.close(fig)
