import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from hatpatch import (
    Patch,
    Variant,
    add_tile,
    attach_to_edge,
    build_tile,
    edge,
    pop_last_tile,
    validate_tables,
)
from hatpatch.diagnostics import report_lines


def main() -> None:
    errors = validate_tables()
    if errors:
        raise SystemExit("\n".join(errors))

    patch = Patch()
    add_tile(patch, build_tile(Variant.UNREFLECTED, 0.0, 0.0, 0))
    # Requested slightly off; snaps onto edge 1 of the first tile.
    add_tile(patch, build_tile(Variant.UNREFLECTED, 1.6, 0.05, 0))
    add_tile(patch, attach_to_edge(Variant.REFLECTED, 3, edge(patch.tiles[1], 11)))
    print("\n".join(report_lines(patch)))

    pop_last_tile(patch)
    print(f"after undo: {len(patch.tiles)} tiles, {len(patch.boundary)} boundary edges")

    if len(sys.argv) > 1:
        from hatpatch.render import render_png
        render_png(patch, sys.argv[1], show_boundary=True, show_ammann=True)
        print(f"Saved {sys.argv[1]}")


if __name__ == "__main__":
    main()
