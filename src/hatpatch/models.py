from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IndexFault(IndexError):
    """An edge index outside ``1..13`` was requested.

    Signals a programming error in the caller, not a bad user action.
    """

    def __init__(self, index: object) -> None:
        super().__init__(f"edge index {index!r} is outside 1..13")
        self.index = index


class Variant(Enum):
    UNREFLECTED = "U"
    REFLECTED = "R"

    @classmethod
    def parse(cls, value: "Variant | str") -> "Variant":
        """Accept a Variant, its value (``"U"``/``"R"``) or its name."""
        if isinstance(value, cls):
            return value
        key = str(value).strip()
        for variant in cls:
            if key.upper() in (variant.value, variant.name):
                return variant
        raise ValueError(f"Unknown tile variant {value!r}")

    def flipped(self) -> "Variant":
        if self is Variant.UNREFLECTED:
            return Variant.REFLECTED
        return Variant.UNREFLECTED


class LengthClass(Enum):
    SHORT = "short"
    LONG = "long"
    DOUBLE = "double"


@dataclass(frozen=True)
class Tile:
    variant: Variant
    x: float = 0.0
    y: float = 0.0
    angle: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "angle", int(self.angle) % 360)

    @property
    def center(self) -> tuple[float, float]:
        return (self.x, self.y)

    def rotated(self, delta: int) -> "Tile":
        return Tile(self.variant, self.x, self.y, self.angle + delta)

    def translated(self, dx: float, dy: float) -> "Tile":
        return Tile(self.variant, self.x + dx, self.y + dy, self.angle)


@dataclass(frozen=True)
class TileEdge:
    """One side of a placed tile, in world coordinates.

    *angle* is the heading of the side when the outline is walked
    counter-clockwise, so the two sides of a shared seam always have
    antipodal angles.
    """

    index: int
    center: tuple[float, float]
    angle: int
    length: LengthClass


@dataclass(frozen=True)
class BoundaryEdge:
    """An exposed edge: the tile's position in the patch plus the edge."""

    tile_index: int
    edge: TileEdge

    @property
    def edge_index(self) -> int:
        return self.edge.index
