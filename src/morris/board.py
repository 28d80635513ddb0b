"""
The Board owns every Point of a game and knows how they are wired together.

Points reference their neighbors by PointIndex (the arena address), never by object, so the
graph is cyclic without anything owning anything else.
"""

from dataclasses import dataclass
from typing import Optional, Self

from src.morris.pieces import COLOR_TO_SYMBOL, Color
from src.morris.point import OPPOSITE, Direction, Point, PointIndex
from src.morris.variant import Variant

RINGS = 3
SLOTS_PER_RING = 8

# Walking clockwise round a ring: the direction from slot i to slot i + 1.
# Slot 0 is the middle of the top side, slot 1 the top right corner, ..., slot 7 the top left corner.
RING_STEPS: tuple[Direction, ...] = (
    Direction.EAST,  # top middle -> top right
    Direction.SOUTH,  # top right -> middle right
    Direction.SOUTH,  # middle right -> bottom right
    Direction.WEST,  # bottom right -> bottom middle
    Direction.WEST,  # bottom middle -> bottom left
    Direction.NORTH,  # bottom left -> middle left
    Direction.NORTH,  # middle left -> top left
    Direction.EAST,  # top left -> top middle
)

# Spokes: for a slot on ring r, the direction in which the same slot on ring r + 1 (further inside) lies.
CARDINAL_SPOKES: dict[int, Direction] = {
    0: Direction.SOUTH,
    2: Direction.WEST,
    4: Direction.NORTH,
    6: Direction.EAST,
}
DIAGONAL_SPOKES: dict[int, Direction] = {
    1: Direction.SOUTH_WEST,
    3: Direction.NORTH_WEST,
    5: Direction.NORTH_EAST,
    7: Direction.SOUTH_EAST,
}

GRID_SIZE = 3


@dataclass
class Board:
    variant: Variant
    points: dict[PointIndex, Point]

    @classmethod
    def build(cls, variant: Variant) -> Self:
        """Create the (empty) board graph for the variant"""
        board = cls(variant, {})
        if variant == Variant.THREE:
            board._build_grid()
        else:
            board._build_rings(with_diagonals=variant == Variant.TWELVE)
        return board

    # --- CONSTRUCTION ---
    def _build_grid(self) -> None:
        """Three Man Morris: a 3x3 grid with only horizontal and vertical lines"""
        for row in range(GRID_SIZE):
            for col in range(GRID_SIZE):
                self._add_point(PointIndex(row, col))

        for row in range(GRID_SIZE):
            for col in range(GRID_SIZE):
                here = PointIndex(row, col)
                if col + 1 < GRID_SIZE:
                    self._link(here, Direction.EAST, PointIndex(row, col + 1))
                if row + 1 < GRID_SIZE:
                    self._link(here, Direction.SOUTH, PointIndex(row + 1, col))

    def _build_rings(self, with_diagonals: bool) -> None:
        """
        Nine/Twelve Man Morris: three concentric squares.

        Each ring is a cycle of 8 points. Rings are connected by spokes through the middle of each side,
        and Twelve Man Morris adds diagonal spokes through the corners.
        """
        for ring in range(RINGS):
            for slot in range(SLOTS_PER_RING):
                self._add_point(PointIndex(ring, slot))

        for ring in range(RINGS):
            for slot, step in enumerate(RING_STEPS):
                next_slot = (slot + 1) % SLOTS_PER_RING
                self._link(PointIndex(ring, slot), step, PointIndex(ring, next_slot))

        spokes = dict(CARDINAL_SPOKES)
        if with_diagonals:
            spokes.update(DIAGONAL_SPOKES)
        for ring in range(RINGS - 1):
            for slot, inwards in spokes.items():
                self._link(PointIndex(ring, slot), inwards, PointIndex(ring + 1, slot))

    def _add_point(self, index: PointIndex) -> None:
        self.points[index] = Point(index)

    def _link(self, origin: PointIndex, direction: Direction, target: PointIndex) -> None:
        """`target` lies in `direction` of `origin`. Always written both ways, so adjacency is symmetric."""
        self.points[origin].neighbors[direction] = target
        self.points[target].neighbors[OPPOSITE[direction]] = origin

    # --- QUERIES ---
    def point(self, index: PointIndex) -> Point:
        return self.points[index]

    def occupant(self, index: PointIndex) -> Color:
        return self.points[index].occupant

    def neighbor(self, index: PointIndex, direction: Direction) -> Optional[PointIndex]:
        return self.points[index].neighbor(direction)

    def locate_color(self, color: Color) -> list[PointIndex]:
        return [index for index, point in self.points.items() if point.occupant == color]

    def empty_points(self) -> list[PointIndex]:
        return self.locate_color(Color.NONE)

    def count(self, color: Color) -> int:
        return len(self.locate_color(color))

    def is_symmetric(self) -> bool:
        """Every link must be mirrored by its opposite. Only used to check construction."""
        return all(
            self.points[other].neighbor(OPPOSITE[direction]) == index
            for index, point in self.points.items()
            for direction, other in point.neighbors.items()
        )

    # --- UPDATES ---
    def set_occupant(self, index: PointIndex, color: Color) -> None:
        self.points[index].occupant = color

    def clear(self, index: PointIndex) -> None:
        self.set_occupant(index, Color.NONE)

    def move_occupant(self, source: PointIndex, target: PointIndex) -> None:
        """Swap occupancy: the source becomes empty and the target takes its piece"""
        self.points[target].occupant = self.points[source].occupant
        self.points[source].occupant = Color.NONE

    def __str__(self) -> str:
        """Rough text picture of the occupants, ring by ring (or row by row for Three Man Morris)"""
        rows: dict[int, list[str]] = {}
        for index in sorted(self.points):
            rows.setdefault(index.ring, []).append(
                COLOR_TO_SYMBOL[self.points[index].occupant]
            )
        return "\n".join("".join(symbols) for _, symbols in sorted(rows.items()))
