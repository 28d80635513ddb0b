"""Protocol for the Display/Input collaborator (curses window, GUI, scripted test double, ...)"""

from typing import Optional, Protocol

from src.api.models import GameStateResponse
from src.core.shared_types import MoveKind


class Display(Protocol):
    """Rendering and input. The service never needs to know how either is done."""

    def render_board(self, state: GameStateResponse) -> None:
        """Draw the points and their occupants."""
        ...

    def render_score(self, state: GameStateResponse) -> None:
        """Draw variant, phase, piece counts and whose move it is."""
        ...

    def render_message(self, message: str) -> None:
        """Show a one-line message (rejected move, mill formed, winner, ...). An empty string clears it."""
        ...

    def read_move(self, kind: MoveKind) -> Optional[str]:
        """Block until the player entered a line. None means the player wants to quit."""
        ...

    def confirm_replay(self, state: GameStateResponse) -> bool:
        """The match is over: does the player want another one?"""
        ...
