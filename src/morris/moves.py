"""
Move types and the rules that decide whether a move may be made.

Key idea: a parser per kind of input (strategy pattern, see MOVE_PARSERS) turns the player's text into a move,
then the matching rule checks it against the board and applies it.
Every rule raises a specific IllegalMoveError instead of silently failing, so the player can be told what was wrong.

Which kind of move is expected at any time is decided by Game.
"""

from dataclasses import dataclass
from typing import Callable, Self

from src.core.exceptions import (
    EmptyRemovalTargetError,
    InvalidCoordinateError,
    InvalidDirectionError,
    NoSuchNeighborError,
    NotOwnPieceError,
    OccupiedTargetError,
    OwnPieceRemovalError,
    ProtectedMillPieceError,
)
from src.core.shared_types import MoveKind
from src.morris.board import Board
from src.morris.coordinates import COORDINATE_LENGTH, resolve, to_coordinate
from src.morris.mills import forms_alignment, removable_points
from src.morris.pieces import Color
from src.morris.point import Direction, PointIndex
from src.morris.variant import Variant


# --- PARSING HELPERS ---
def _point_from_text(variant: Variant, coordinate: str) -> PointIndex:
    index = resolve(variant, coordinate)
    if index is None:
        raise InvalidCoordinateError()
    return index


def _direction_from_text(variant: Variant, token: str) -> Direction:
    try:
        direction = Direction(token.lower())
    except ValueError:
        raise InvalidDirectionError(f"Invalid direction: {token!r}") from None
    if direction not in variant.config.directions:
        raise InvalidDirectionError(
            f"Cannot move {direction.value!r} on this board. Pick one from {' '.join(d.value for d in variant.config.directions)}"
        )
    return direction


def _split_coordinate(text: str) -> tuple[str, str]:
    return text[:COORDINATE_LENGTH], text[COORDINATE_LENGTH:]


# --- MOVE TYPES ---
@dataclass(frozen=True)
class Placement:
    """Put a new piece on an empty point, e.g. 'd3'"""

    target: PointIndex

    @classmethod
    def from_text(cls, text: str, variant: Variant) -> Self:
        if len(text) != COORDINATE_LENGTH:
            raise InvalidCoordinateError()
        return cls(_point_from_text(variant, text))

    def to_text(self, variant: Variant) -> str:
        return to_coordinate(variant, self.target)


@dataclass(frozen=True)
class Slide:
    """Move a piece along a line to the adjacent point, e.g. 'a1n' or 'g7sw'"""

    source: PointIndex
    direction: Direction

    @classmethod
    def from_text(cls, text: str, variant: Variant) -> Self:
        coordinate, token = _split_coordinate(text)
        source = _point_from_text(variant, coordinate)
        return cls(source, _direction_from_text(variant, token))

    def to_text(self, variant: Variant) -> str:
        return f"{to_coordinate(variant, self.source)}{self.direction.value}"


@dataclass(frozen=True)
class Fly:
    """Move a piece to any empty point, e.g. 'a1g7' (only with three pieces left)"""

    source: PointIndex
    target: PointIndex

    @classmethod
    def from_text(cls, text: str, variant: Variant) -> Self:
        source_text, target_text = _split_coordinate(text)
        if len(target_text) != COORDINATE_LENGTH:
            raise InvalidCoordinateError()
        return cls(
            _point_from_text(variant, source_text),
            _point_from_text(variant, target_text),
        )

    def to_text(self, variant: Variant) -> str:
        return f"{to_coordinate(variant, self.source)}{to_coordinate(variant, self.target)}"


@dataclass(frozen=True)
class Removal:
    """After forming a mill: take one of the opponent's pieces off the board, e.g. 'b4'"""

    target: PointIndex

    @classmethod
    def from_text(cls, text: str, variant: Variant) -> Self:
        if len(text) != COORDINATE_LENGTH:
            raise InvalidCoordinateError()
        return cls(_point_from_text(variant, text))

    def to_text(self, variant: Variant) -> str:
        return to_coordinate(variant, self.target)


Move = Placement | Slide | Fly | Removal


# -- STRATEGY PATTERN: PARSERS ---
MoveParserFn = Callable[[str, Variant], Move]
MOVE_PARSERS: dict[MoveKind, MoveParserFn] = {
    MoveKind.PLACE: Placement.from_text,
    MoveKind.SLIDE: Slide.from_text,
    MoveKind.FLY: Fly.from_text,
    MoveKind.REMOVE: Removal.from_text,
}


def parse_move(kind: MoveKind, text: str, variant: Variant) -> Move:
    return MOVE_PARSERS[kind](text, variant)


# --- RULES ---
def _assert_own_piece(board: Board, index: PointIndex, color: Color) -> None:
    if board.occupant(index) != color:
        raise NotOwnPieceError()


def _assert_empty(board: Board, index: PointIndex) -> None:
    if board.occupant(index) != Color.NONE:
        raise OccupiedTargetError()


def place_piece(board: Board, move: Placement, color: Color) -> PointIndex:
    """Placement phase: any empty point. Returns the point that changed."""
    _assert_empty(board, move.target)
    board.set_occupant(move.target, color)
    return move.target


def slide_piece(board: Board, move: Slide, color: Color) -> PointIndex:
    """Sliding: own piece, to an existing and empty neighbor. Returns where the piece ended up."""
    _assert_own_piece(board, move.source, color)
    target = board.neighbor(move.source, move.direction)
    if target is None:
        raise NoSuchNeighborError()
    _assert_empty(board, target)
    board.move_occupant(move.source, target)
    return target


def fly_piece(board: Board, move: Fly, color: Color) -> PointIndex:
    """Flying: own piece, to any empty point. Returns where the piece ended up."""
    _assert_own_piece(board, move.source, color)
    _assert_empty(board, move.target)
    board.move_occupant(move.source, move.target)
    return move.target


def remove_piece(board: Board, move: Removal, color: Color) -> PointIndex:
    """
    `color` formed a mill and takes an opponent's piece off the board.

    Mill protection: a piece inside a mill may only be taken when the opponent has no piece outside a mill.
    """
    occupant = board.occupant(move.target)
    if occupant == Color.NONE:
        raise EmptyRemovalTargetError()
    if occupant == color:
        raise OwnPieceRemovalError()
    if forms_alignment(board, move.target) and move.target not in removable_points(
        board, occupant
    ):
        raise ProtectedMillPieceError()
    board.clear(move.target)
    return move.target


# --- CANDIDATE MOVES ---
def candidate_placements(board: Board) -> list[Placement]:
    return [Placement(index) for index in board.empty_points()]


def candidate_slides(board: Board, color: Color) -> list[Slide]:
    """Every slide of `color` to an adjacent empty point"""
    slides: list[Slide] = []
    for source in board.locate_color(color):
        for direction, target in board.point(source).neighbors.items():
            if board.occupant(target) == Color.NONE:
                slides.append(Slide(source, direction))
    return slides


def candidate_flights(board: Board, color: Color) -> list[Fly]:
    empty_points = board.empty_points()
    return [
        Fly(source, target)
        for source in board.locate_color(color)
        for target in empty_points
    ]


def candidate_removals(board: Board, color: Color) -> list[Removal]:
    """Removals available to `color` after forming a mill"""
    return [Removal(index) for index in removable_points(board, color.opponent)]


def has_legal_slide(board: Board, color: Color) -> bool:
    return len(candidate_slides(board, color)) > 0
