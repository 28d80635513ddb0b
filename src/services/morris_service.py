"""Orchestration of a match: from the Display/Input collaborator to the Game (and back)."""

import logging
from typing import Optional

from src.api.models import GameStateResponse, MoveRequest, NewMatchRequest
from src.core.exceptions import GameStateError, IllegalMoveError, InvalidRequestError
from src.core.models import GameModel
from src.core.shared_types import Color, Status
from src.morris.game import Game
from src.morris.variant import Variant
from src.services.display import Display

logger = logging.getLogger(__name__)

MILL_MESSAGE = "You've formed a mill, enter opponent piece to remove."


class MorrisService:
    """Drives matches turn by turn. Single-threaded: it blocks on the display for every move."""

    def __init__(self, display: Display) -> None:
        self.display = display
        self.game: Optional[Game] = None

    # -- Entry points --
    def run(self, request: NewMatchRequest) -> GameStateResponse:
        """Play matches of the requested variant until the player declines a replay (or quits)."""
        while True:
            state = self.play_match(request)
            if state.status == Status.ABORTED:
                return state
            if not self.display.confirm_replay(state):
                return state
            logger.info("starting a new match")

    def play_match(self, request: NewMatchRequest) -> GameStateResponse:
        """A fresh board, then turns until the game is decided or a player quits."""
        self.new_match(request)
        while self._current_game().status == Status.IN_PROGRESS:
            if not self.play_turn():
                break
        state = self.get_game_state()
        self._announce_result(state)
        return state

    def new_match(self, request: NewMatchRequest) -> GameStateResponse:
        variant = Variant.from_name(request.variant.value)
        self.game = Game.new_game(variant)
        logger.info("new match: %s", variant.config.title)
        state = self.get_game_state()
        self._render(state)
        return state

    def play_turn(self) -> bool:
        """
        One move request from the player to move, including the removal if the move formed a mill.
        ---
        Returns False when the player quit instead of moving.
        """
        game = self._current_game()
        if not self._request_move(game):
            return False

        if game.awaiting_removal:
            self._render(self.get_game_state(), message=MILL_MESSAGE)
            if not self._request_move(game):
                return False

        self._render(self.get_game_state())
        return True

    def get_game_state(self) -> GameStateResponse:
        game = self._current_game()
        return self._create_state_response(game.to_model(), game)

    # -- Internal helpers --
    def _request_move(self, game: Game) -> bool:
        """
        Keep asking for the same kind of move until the game accepts one.
        Rejections are reported to the display; they never end the match.
        """
        kind = game.expected_move()
        while True:
            text = self.display.read_move(kind)
            if text is None:
                logger.info("player quit the match")
                game.abort()
                return False
            try:
                request = MoveRequest(kind=kind, text=text)
                game.make_move(request.text)
            except (InvalidRequestError, IllegalMoveError) as error:
                logger.debug("rejected %s %r: %s", kind, text, error)
                self.display.render_message(str(error))
                continue
            return True

    def _render(self, state: GameStateResponse, message: str = "") -> None:
        self.display.render_board(state)
        self.display.render_score(state)
        self.display.render_message(message)

    def _announce_result(self, state: GameStateResponse) -> None:
        if state.status == Status.WON and state.winner is not None:
            message = f"{state.winner.value.capitalize()} wins!"
        elif state.status == Status.DRAWN:
            message = "Nobody can win this one. It's a draw!"
        else:
            message = "Match aborted."
        logger.info(message)
        self._render(state, message=message)

    def _create_state_response(self, model: GameModel, game: Game) -> GameStateResponse:
        """Convert info in GameModel to a GameStateResponse"""
        return GameStateResponse(
            variant=model.variant,
            board=model.board,
            pieces={Color(color): count for color, count in model.pieces.items()},
            total_placed=model.total_placed,
            current_player=Color(model.current_player),
            phase=model.phase,
            status=model.status,
            winner=Color(model.winner) if model.winner else None,
            expected_move=(
                game.expected_move() if model.status == Status.IN_PROGRESS else None
            ),
        )

    def _current_game(self) -> Game:
        if self.game is None:
            raise GameStateError("No match has been started.")
        return self.game
