"""
Boundary layer data model(s).

The domain layer (Game) encodes its state into a GameModel; the Service converts it into whatever the
collaborators on the outside need (see src/api/models.py).
Only plain strings/ints cross this boundary, so the outside never depends on domain types.
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
Coordinate = str
Occupant = str
PieceColor = str


@dataclass
class GameModel:
    """Transport-safe snapshot of a match, enough to draw the board and the score box."""

    variant: str
    board: dict[Coordinate, Occupant]
    pieces: dict[PieceColor, int]
    total_placed: int
    current_player: PieceColor
    phase: str
    status: str
    winner: Optional[PieceColor]
    awaiting_removal: bool
