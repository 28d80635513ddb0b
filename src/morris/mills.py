"""
Mill detection

Key idea: never scan the whole board. Start at the point that just changed and walk outwards
along each axis, so the cost only depends on the length of a line.
"""

from typing import Protocol

from src.morris.pieces import Color
from src.morris.point import AXES, Direction, PointIndex
from src.morris.variant import Variant


class Board(Protocol):
    """Just the parts mill detection needs"""

    variant: Variant

    def occupant(self, index: PointIndex) -> Color: ...
    def neighbor(self, index: PointIndex, direction: Direction) -> PointIndex | None: ...
    def locate_color(self, color: Color) -> list[PointIndex]: ...


def count_in_direction(board: Board, index: PointIndex, direction: Direction) -> int:
    """
    Number of consecutive points beyond `index` (in the given direction) with the same occupant.
    The walk stops at an absent neighbor (edge of the board) or a different occupant,
    and never goes further than a line is long.
    """
    color = board.occupant(index)
    max_steps = board.variant.config.line_length - 1
    count = 0
    current = index
    for _ in range(max_steps):
        next_index = board.neighbor(current, direction)
        if next_index is None or board.occupant(next_index) != color:
            break
        count += 1
        current = next_index
    return count


def forms_alignment(board: Board, index: PointIndex) -> bool:
    """Is the piece on this point part of a mill (three in a row along one axis)?"""
    if board.occupant(index) == Color.NONE:
        return False

    line_length = board.variant.config.line_length
    directions = board.variant.config.directions
    for forwards, backwards in AXES:
        if forwards not in directions:
            continue
        # the point itself counts as the first one on the line
        count = (
            1
            + count_in_direction(board, index, forwards)
            + count_in_direction(board, index, backwards)
        )
        if count == line_length:
            return True
    return False


def removable_points(board: Board, color: Color) -> list[PointIndex]:
    """
    Points of `color` that the opponent may remove after forming a mill.

    Pieces inside a mill are protected, unless every piece of that color is inside a mill.
    """
    all_points = board.locate_color(color)
    unprotected = [index for index in all_points if not forms_alignment(board, index)]
    return unprotected if unprotected else all_points
