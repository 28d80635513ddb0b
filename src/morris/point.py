"""
A point on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from src.morris.pieces import Color


class Direction(Enum):
    """Value is the token a player types to slide in that direction"""

    NORTH = "n"
    SOUTH = "s"
    WEST = "w"
    EAST = "e"
    NORTH_EAST = "ne"
    SOUTH_WEST = "sw"
    NORTH_WEST = "nw"
    SOUTH_EAST = "se"


OPPOSITE: dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
    Direction.NORTH_EAST: Direction.SOUTH_WEST,
    Direction.SOUTH_WEST: Direction.NORTH_EAST,
    Direction.NORTH_WEST: Direction.SOUTH_EAST,
    Direction.SOUTH_EAST: Direction.NORTH_WEST,
}

CARDINAL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.WEST,
    Direction.EAST,
)
DIAGONAL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.NORTH_EAST,
    Direction.SOUTH_WEST,
    Direction.NORTH_WEST,
    Direction.SOUTH_EAST,
)

# Each axis is a pair of opposite directions. A mill is always a line along one axis.
Axis = tuple[Direction, Direction]
AXES: tuple[Axis, ...] = (
    (Direction.NORTH, Direction.SOUTH),
    (Direction.WEST, Direction.EAST),
    (Direction.NORTH_EAST, Direction.SOUTH_WEST),
    (Direction.NORTH_WEST, Direction.SOUTH_EAST),
)


@dataclass(frozen=True, order=True)
class PointIndex:
    """
    Stable address of a point in the board's arena.

    Nine/Twelve: ring 0 is the outer square, slot 0 is the middle of its top side and slots go round clockwise.
    Three: ring is the row (0 = top row), slot is the column (0 = left column).
    """

    ring: int
    slot: int


@dataclass
class Point:
    index: PointIndex
    occupant: Color = Color.NONE
    neighbors: dict[Direction, PointIndex] = field(default_factory=dict)

    def neighbor(self, direction: Direction) -> Optional[PointIndex]:
        return self.neighbors.get(direction)

    def is_empty(self) -> bool:
        return self.occupant == Color.NONE
