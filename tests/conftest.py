"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable, Optional

import pytest

from src.core.shared_types import Phase
from src.morris.board import Board
from src.morris.coordinates import resolve
from src.morris.game import Game
from src.morris.pieces import Color
from src.morris.variant import Variant

BoardFactory = Callable[[Variant, list[str], list[str]], Board]
GameFactory = Callable[..., Game]


def _occupy(board: Board, coordinates: list[str], color: Color) -> None:
    for coordinate in coordinates:
        index = resolve(board.variant, coordinate)
        assert index is not None, f"{coordinate} is not a point on this board"
        board.set_occupant(index, color)


@pytest.fixture
def board_with_pieces() -> BoardFactory:
    """Call the inner function with the variant and the coordinates of the black and white pieces"""

    def _create_board(variant: Variant, black: list[str], white: list[str]) -> Board:
        board = Board.build(variant)
        _occupy(board, black, Color.BLACK)
        _occupy(board, white, Color.WHITE)
        return board

    return _create_board


@pytest.fixture
def game_in_position() -> GameFactory:
    """
    Create a Game in the middle of a match. By default all pieces have been placed (so sliding phase)
    and it is black's turn. Piece counts follow from the pieces on the board.
    """

    def _create_game(
        variant: Variant,
        black: list[str],
        white: list[str],
        phase: Phase = Phase.SLIDING,
        current_player: Color = Color.BLACK,
        total_placed: Optional[int] = None,
    ) -> Game:
        game = Game.new_game(variant)
        _occupy(game.board, black, Color.BLACK)
        _occupy(game.board, white, Color.WHITE)
        game.pieces = {Color.BLACK: len(black), Color.WHITE: len(white)}
        game.phase = phase
        game.current_player = current_player
        game.total_placed = (
            total_placed
            if total_placed is not None
            else variant.config.total_placements
        )
        return game

    return _create_game
