"""Unit tests for /src/morris/game.py"""

from itertools import chain, zip_longest
from typing import Callable

import pytest

from src.core.exceptions import (
    GameStateError,
    InvalidCoordinateError,
    NotOwnPieceError,
    OccupiedTargetError,
    ProtectedMillPieceError,
)
from src.core.models import GameModel
from src.core.shared_types import MoveKind, Phase, Status
from src.morris.coordinates import resolve
from src.morris.game import Game
from src.morris.pieces import Color
from src.morris.variant import Variant

GameFactory = Callable[..., Game]

# 9 black and 9 white pieces such that no line of the board ever holds three of the same color
BLACK_WITHOUT_MILLS = ["d7", "g4", "d1", "a4", "f6", "f2", "b2", "b6", "c5"]
WHITE_WITHOUT_MILLS = ["g7", "g1", "a1", "a7", "d6", "f4", "d2", "b4", "e3"]


def _alternate(black: list[str], white: list[str]) -> list[str]:
    """Black moves first"""
    return [move for move in chain(*zip_longest(black, white)) if move is not None]


def _play(game: Game, moves: list[str]) -> None:
    for move in moves:
        game.make_move(move)


def _occupant(game: Game, coordinate: str) -> Color:
    return game.board.occupant(resolve(game.variant, coordinate))


# -- CREATION LOGIC --
@pytest.mark.parametrize("variant", list(Variant))
def test_new_game(variant: Variant) -> None:
    game = Game.new_game(variant)
    assert game.current_player == Color.BLACK
    assert game.phase == Phase.PLACEMENT
    assert game.status == Status.IN_PROGRESS
    assert game.pieces == {Color.BLACK: 0, Color.WHITE: 0}
    assert game.total_placed == 0
    assert game.winner is None
    assert game.expected_move() == MoveKind.PLACE


def test_to_model() -> None:
    game = Game.new_game(Variant.THREE)
    game.make_move("b2")
    model = game.to_model()
    assert isinstance(model, GameModel)
    assert model.variant == "three"
    assert model.board["b2"] == "black"
    assert model.board["a1"] == "empty"
    assert len(model.board) == 9
    assert model.pieces == {"black": 1, "white": 0}
    assert model.current_player == "white"
    assert model.phase == "placement"
    assert model.status == "in progress"
    assert model.winner is None
    assert not model.awaiting_removal


# -- PLACEMENT PHASE --
def test_placing_alternates_players() -> None:
    game = Game.new_game(Variant.NINE)
    game.make_move("d7")
    assert _occupant(game, "d7") == Color.BLACK
    assert game.current_player == Color.WHITE
    game.make_move("G7")
    assert _occupant(game, "g7") == Color.WHITE
    assert game.current_player == Color.BLACK
    assert game.pieces == {Color.BLACK: 1, Color.WHITE: 1}
    assert game.total_placed == 2


def test_rejected_placement_keeps_the_turn() -> None:
    game = Game.new_game(Variant.NINE)
    game.make_move("d7")
    with pytest.raises(OccupiedTargetError):
        game.make_move("d7")
    with pytest.raises(InvalidCoordinateError):
        game.make_move("d4")
    assert game.current_player == Color.WHITE
    assert game.total_placed == 1


def test_placement_ends_exactly_on_last_placement() -> None:
    """Nine Man Morris: 18 placements without a mill, then the sliding phase starts"""
    game = Game.new_game(Variant.NINE)
    moves = _alternate(BLACK_WITHOUT_MILLS, WHITE_WITHOUT_MILLS)
    assert len(moves) == 18

    for move in moves[:-1]:
        game.make_move(move)
        assert game.phase == Phase.PLACEMENT
        assert not game.awaiting_removal

    game.make_move(moves[-1])
    assert game.phase == Phase.SLIDING
    assert game.status == Status.IN_PROGRESS
    assert game.pieces == {Color.BLACK: 9, Color.WHITE: 9}
    assert game.current_player == Color.BLACK
    assert game.expected_move() == MoveKind.SLIDE


def test_mill_scenario_requires_removal_before_turn_passes() -> None:
    """
    Three pieces on the d1-d2-d3 line form a mill.
    (Black opens the game, so black builds the mill here.)
    """
    game = Game.new_game(Variant.NINE)
    _play(game, ["d1", "d7", "d2", "g4", "d3"])

    assert game.awaiting_removal
    assert game.current_player == Color.BLACK
    assert game.expected_move() == MoveKind.REMOVE

    game.make_move("d7")
    assert _occupant(game, "d7") == Color.NONE
    assert game.pieces == {Color.BLACK: 3, Color.WHITE: 1}
    assert not game.awaiting_removal
    assert game.current_player == Color.WHITE
    assert game.expected_move() == MoveKind.PLACE


def test_removal_of_protected_piece(game_in_position: GameFactory) -> None:
    game = game_in_position(
        Variant.NINE,
        black=["d1", "d2", "e3", "f6"],
        white=["a7", "d7", "g7", "b4"],
    )
    game.make_move("e3w")
    assert game.awaiting_removal

    with pytest.raises(ProtectedMillPieceError):
        game.make_move("d7")
    assert game.awaiting_removal

    game.make_move("b4")
    assert game.pieces[Color.WHITE] == 3
    assert game.current_player == Color.WHITE


def test_three_men_skips_sliding() -> None:
    game = Game.new_game(Variant.THREE)
    _play(game, ["a1", "b1", "c2", "a2", "b3", "c3"])
    assert game.phase == Phase.FLYING
    assert game.expected_move() == MoveKind.FLY


# -- SLIDING / FLYING --
def test_slide_in_sliding_phase(game_in_position: GameFactory) -> None:
    game = game_in_position(
        Variant.NINE, black=["a1", "b2", "c3", "d5"], white=["g7", "g1", "f4", "e5"]
    )
    game.make_move("a1n")
    assert _occupant(game, "a4") == Color.BLACK
    assert game.current_player == Color.WHITE


def test_cannot_slide_opponents_piece(game_in_position: GameFactory) -> None:
    game = game_in_position(
        Variant.NINE, black=["a1", "b2", "c3", "d5"], white=["g7", "g1", "f4", "e5"]
    )
    with pytest.raises(NotOwnPieceError):
        game.make_move("g7w")
    assert game.current_player == Color.BLACK


def test_sliding_turns_into_flying_at_three_pieces(game_in_position: GameFactory) -> None:
    game = game_in_position(
        Variant.NINE,
        black=["d1", "d2", "e3", "f6"],
        white=["a7", "g7", "b4", "g1"],
    )
    _play(game, ["e3w", "b4"])
    assert game.pieces[Color.WHITE] == 3
    assert game.phase == Phase.FLYING
    # white is down to three and flies, black still slides
    assert game.expected_move() == MoveKind.FLY
    game.make_move("a7e3")
    assert _occupant(game, "e3") == Color.WHITE
    assert game.expected_move() == MoveKind.SLIDE


# -- END OF THE GAME --
def test_win_by_reducing_to_two_pieces(game_in_position: GameFactory) -> None:
    game = game_in_position(
        Variant.NINE,
        black=["d1", "d2", "e3", "f6"],
        white=["a7", "g7", "b4"],
        phase=Phase.FLYING,
    )
    _play(game, ["e3w", "b4"])
    assert game.pieces[Color.WHITE] == 2
    assert game.status == Status.WON
    assert game.winner == Color.BLACK


def test_win_during_placement() -> None:
    """Three Man Morris: white can only ever field two pieces after losing one"""
    game = Game.new_game(Variant.THREE)
    _play(game, ["a1", "b3", "a2", "c1", "a3"])
    assert game.awaiting_removal
    game.make_move("b3")
    assert game.status == Status.WON
    assert game.winner == Color.BLACK


def test_placement_stays_open_while_pieces_in_hand() -> None:
    """Nine Man Morris: losing a piece early is not decisive, there are plenty left to place"""
    game = Game.new_game(Variant.NINE)
    _play(game, ["d1", "d7", "d2", "g4", "d3", "d7"])
    assert game.pieces[Color.WHITE] == 1
    assert game.status == Status.IN_PROGRESS


def test_unwinnable_for_both_is_a_draw(game_in_position: GameFactory) -> None:
    game = game_in_position(
        Variant.THREE,
        black=[],
        white=["c1"],
        phase=Phase.PLACEMENT,
        total_placed=4,
    )
    game.make_move("a1")
    assert game.status == Status.DRAWN
    assert game.winner is None


def test_full_board_after_placement_is_a_draw() -> None:
    """
    Twelve Man Morris: 24 placements fill all 24 points. Colors alternate along every ring
    and between neighboring rings, so no line (diagonals included) is ever of one color.
    """
    black = ["d7", "g4", "d1", "a4", "f6", "f2", "b2", "b6", "d5", "e4", "d3", "c4"]
    white = ["g7", "g1", "a1", "a7", "d6", "f4", "d2", "b4", "e5", "e3", "c3", "c5"]
    game = Game.new_game(Variant.TWELVE)
    _play(game, _alternate(black, white))

    assert not game.board.empty_points()
    assert game.pieces == {Color.BLACK: 12, Color.WHITE: 12}
    assert game.status == Status.DRAWN
    assert game.winner is None


def test_blocked_player_loses(game_in_position: GameFactory) -> None:
    game = game_in_position(
        Variant.NINE,
        black=["a7", "a4", "a1", "g7"],
        white=["d7", "b4", "d1", "g4", "f6"],
        current_player=Color.WHITE,
    )
    game.make_move("f6w")
    assert game.status == Status.WON
    assert game.winner == Color.WHITE


def test_no_moves_after_the_game_ended(game_in_position: GameFactory) -> None:
    game = game_in_position(
        Variant.NINE,
        black=["d1", "d2", "e3", "f6"],
        white=["a7", "g7", "b4"],
        phase=Phase.FLYING,
    )
    _play(game, ["e3w", "b4"])
    with pytest.raises(GameStateError):
        game.make_move("f6s")
    with pytest.raises(GameStateError):
        game.legal_moves()


def test_abort() -> None:
    game = Game.new_game(Variant.NINE)
    game.abort()
    assert game.status == Status.ABORTED
    with pytest.raises(GameStateError):
        game.abort()


# -- LEGAL MOVES --
def test_legal_moves_on_new_board() -> None:
    game = Game.new_game(Variant.NINE)
    legal_moves = game.legal_moves()
    assert len(legal_moves) == 24
    assert "d4" not in legal_moves


def test_legal_moves_while_removing() -> None:
    game = Game.new_game(Variant.NINE)
    _play(game, ["d1", "d7", "d2", "g4", "d3"])
    assert sorted(game.legal_moves()) == ["d7", "g4"]


def test_legal_slides(game_in_position: GameFactory) -> None:
    game = game_in_position(
        Variant.NINE, black=["a1", "b2", "c3", "d5"], white=["g7", "g1", "f4", "e5"]
    )
    legal_moves = game.legal_moves()
    assert "a1n" in legal_moves
    assert "a1e" in legal_moves
    assert "d5e" not in legal_moves
    assert all(len(move) == 3 for move in legal_moves)
