"""
Exceptions raised by the domain and boundary layers.

Everything derives from GameError so the service layer can catch the whole family at once.
The IllegalMoveError branch is user-correctable: the service reports the message and asks again.
"""


class GameError(Exception):
    """Base class for all errors raised by the rules engine"""


class GameStateError(GameError):
    """The request does not fit the current state of the game (e.g. moving after the match ended)"""


class InvalidRequestError(GameError):
    """Raised by the boundary models when input text cannot possibly be a move"""


# --- USER-CORRECTABLE MOVE ERRORS ---
class IllegalMoveError(GameError):
    """A move (or removal) that breaks the rules. Carries the message shown to the player."""

    default_message = "Move not allowed. Please try again."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidCoordinateError(IllegalMoveError):
    default_message = "Invalid coordinates. Please try again."


class OccupiedTargetError(IllegalMoveError):
    default_message = "That location is already occupied, please try again."


class InvalidDirectionError(IllegalMoveError):
    default_message = "Invalid direction. Please try again."


class NoSuchNeighborError(IllegalMoveError):
    default_message = "Impossible to move in that direction."


class NotOwnPieceError(IllegalMoveError):
    default_message = "Please move your own piece."


class EmptyRemovalTargetError(IllegalMoveError):
    default_message = "You tried clearing an empty position. Please try again."


class OwnPieceRemovalError(IllegalMoveError):
    default_message = "You tried removing your own piece. Please try again."


class ProtectedMillPieceError(IllegalMoveError):
    default_message = "It is possible to remove a piece not in a mill; do so."
