"""
The Game class is the entrypoint into the domain layer for the service layer.
It is the state machine of a match: it knows whose turn it is, which kind of move is expected,
applies moves through the rules in moves.py and moves the game through its phases:

    placement -> sliding -> flying -> won / drawn

(Three Man Morris has no sliding phase: every side starts moving with three pieces, so it flies straight away.)
"""

import logging
from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import GameStateError
from src.core.models import GameModel
from src.core.shared_types import MoveKind, Phase, Status
from src.morris.board import Board
from src.morris.coordinates import to_coordinate
from src.morris.mills import forms_alignment
from src.morris.moves import (
    Fly,
    Move,
    Placement,
    Removal,
    Slide,
    candidate_flights,
    candidate_placements,
    candidate_removals,
    candidate_slides,
    fly_piece,
    has_legal_slide,
    parse_move,
    place_piece,
    remove_piece,
    slide_piece,
)
from src.morris.pieces import OCCUPANT_NAMES, PLAYERS, Color
from src.morris.point import PointIndex
from src.morris.variant import FLYING_THRESHOLD, LOSING_THRESHOLD, Variant

logger = logging.getLogger(__name__)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    current_player: Color
    pieces: dict[Color, int]  # pieces currently on the board
    total_placed: int
    phase: Phase
    status: Status
    winner: Optional[Color] = None
    awaiting_removal: bool = False

    @classmethod
    def new_game(cls, variant: Variant) -> Self:
        """Empty board, nothing placed yet. Black always opens."""
        return cls(
            board=Board.build(variant),
            current_player=Color.BLACK,
            pieces={color: 0 for color in PLAYERS},
            total_placed=0,
            phase=Phase.PLACEMENT,
            status=Status.IN_PROGRESS,
        )

    @property
    def variant(self) -> Variant:
        return self.board.variant

    def expected_move(self) -> MoveKind:
        """
        Exactly one kind of move is allowed at any time
        ----

        1. a mill was just formed? --> the same player removes an opponent's piece
        2. placement phase --> place a piece
        3. flying phase and down to three pieces --> fly
        4. otherwise --> slide
        """
        self._assert_in_progress()
        if self.awaiting_removal:
            return MoveKind.REMOVE
        if self.phase == Phase.PLACEMENT:
            return MoveKind.PLACE
        if (
            self.phase == Phase.FLYING
            and self.pieces[self.current_player] == FLYING_THRESHOLD
        ):
            return MoveKind.FLY
        return MoveKind.SLIDE

    def legal_moves(self) -> list[str]:
        """All move texts the player to move could enter right now"""
        kind = self.expected_move()
        moves: list[Move]
        if kind == MoveKind.REMOVE:
            moves = list(candidate_removals(self.board, self.current_player))
        elif kind == MoveKind.PLACE:
            moves = list(candidate_placements(self.board))
        elif kind == MoveKind.FLY:
            moves = list(candidate_flights(self.board, self.current_player))
        else:
            moves = list(candidate_slides(self.board, self.current_player))
        return [move.to_text(self.variant) for move in moves]

    def make_move(self, move_text: str) -> None:
        """
        Attempt to make a move (or removal) of the expected kind
        -----

        1. parse the text into a move (raises when the coordinates/direction make no sense)
        2. check the move against the rules and update the board (raises when illegal)
        3. a removal, or a move that did not form a mill? --> the turn is over
        4. formed a mill? --> keep the turn, the next call must be a removal

        Rejected moves leave the game untouched, so the same move kind can simply be requested again.
        """
        kind = self.expected_move()
        move = parse_move(kind, move_text.strip().lower(), self.variant)

        if isinstance(move, Removal):
            self._apply_removal(move)
            self._end_turn()
            return

        landed_on = self._apply_move(move)
        logger.debug(
            "%s: %s %s", self.current_player.name.lower(), kind, move.to_text(self.variant)
        )
        if self._is_mill_with_removal(landed_on):
            logger.info(
                "%s formed a mill at %s",
                self.current_player.name.lower(),
                to_coordinate(self.variant, landed_on),
            )
            self.awaiting_removal = True
            return
        self._end_turn()

    def abort(self) -> None:
        """A player asked to quit"""
        self._assert_in_progress()
        self._change_status(Status.ABORTED)

    def to_model(self) -> GameModel:
        """Encode into the format the Service layer uses"""
        return GameModel(
            variant=self.variant.name.lower(),
            board={
                to_coordinate(self.variant, index): OCCUPANT_NAMES[point.occupant]
                for index, point in sorted(self.board.points.items())
            },
            pieces={color.name.lower(): count for color, count in self.pieces.items()},
            total_placed=self.total_placed,
            current_player=self.current_player.name.lower(),
            phase=self.phase.value,
            status=self.status.value,
            winner=self.winner.name.lower() if self.winner else None,
            awaiting_removal=self.awaiting_removal,
        )

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

    def _apply_move(self, move: Move) -> PointIndex:
        """Returns the point the piece ended up on"""
        color = self.current_player
        if isinstance(move, Placement):
            landed_on = place_piece(self.board, move, color)
            self.total_placed += 1
            self.pieces[color] += 1
            return landed_on
        if isinstance(move, Slide):
            return slide_piece(self.board, move, color)
        if isinstance(move, Fly):
            return fly_piece(self.board, move, color)
        raise GameStateError(f"Cannot apply {move!r} as a move")

    def _apply_removal(self, move: Removal) -> None:
        remove_piece(self.board, move, self.current_player)
        self.pieces[self.current_player.opponent] -= 1
        self.awaiting_removal = False
        logger.debug(
            "%s removed %s",
            self.current_player.name.lower(),
            move.to_text(self.variant),
        )

    def _is_mill_with_removal(self, index: PointIndex) -> bool:
        """A mill only calls for a removal when the opponent has something to remove"""
        return forms_alignment(self.board, index) and (
            len(candidate_removals(self.board, self.current_player)) > 0
        )

    def _end_turn(self) -> None:
        """Pass the turn, then see if the phase or the game status changes"""
        self.current_player = self.current_player.opponent
        self._update_phase()
        self._update_game_status()

    def _update_phase(self) -> None:
        if self.phase == Phase.PLACEMENT:
            if self.total_placed < self.variant.config.total_placements:
                return
            self._change_phase(
                Phase.SLIDING if self.variant.config.has_sliding_phase else Phase.FLYING
            )

        if self.phase == Phase.SLIDING and any(
            self.pieces[color] == FLYING_THRESHOLD for color in PLAYERS
        ):
            self._change_phase(Phase.FLYING)

    def _update_game_status(self) -> None:
        """
        Performs checks to see if the game has ended and changes status accordingly.

        NOTE the turn has already passed. The current player is the one who has to move next.
        """
        # a side that cannot get (back) to three pieces has lost. Before the last placement, pieces still in hand count too.
        beaten = [
            color for color in PLAYERS if self._max_achievable(color) <= LOSING_THRESHOLD
        ]
        if len(beaten) == 2:
            self._change_status(Status.DRAWN)
            return
        if len(beaten) == 1:
            self._declare_winner(beaten[0].opponent)
            return

        if self.phase == Phase.PLACEMENT:
            return

        # board filled up during placement (only possible in Twelve Man Morris): nobody can move
        if not self.board.empty_points():
            self._change_status(Status.DRAWN)
            return

        if not self._can_move(self.current_player):
            self._declare_winner(self.current_player.opponent)

    def _placements_left(self, color: Color) -> int:
        # black places first, so black has placed the extra piece after an odd number of placements
        placed_by_black = (self.total_placed + 1) // 2
        placed = placed_by_black if color == Color.BLACK else self.total_placed - placed_by_black
        return self.variant.config.pieces_per_player - placed

    def _max_achievable(self, color: Color) -> int:
        if self.phase != Phase.PLACEMENT:
            return self.pieces[color]
        return self.pieces[color] + self._placements_left(color)

    def _can_move(self, color: Color) -> bool:
        if self.phase == Phase.FLYING and self.pieces[color] == FLYING_THRESHOLD:
            return len(self.board.empty_points()) > 0
        return has_legal_slide(self.board, color)

    def _declare_winner(self, color: Color) -> None:
        self.winner = color
        self._change_status(Status.WON)

    def _change_phase(self, new_phase: Phase) -> None:
        logger.info("phase change: %s -> %s", self.phase, new_phase)
        self.phase = new_phase

    def _change_status(self, new_status: Status) -> None:
        logger.info("game status: %s -> %s", self.status, new_status)
        self.status = new_status
