"""Defines who can occupy a point on the board"""

from enum import Enum, auto


class Color(Enum):
    NONE = auto()
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> "Color":
        if self == Color.NONE:
            return Color.NONE
        return Color.WHITE if self == Color.BLACK else Color.BLACK


PLAYERS: tuple[Color, Color] = (Color.BLACK, Color.WHITE)

OCCUPANT_NAMES: dict[Color, str] = {
    Color.NONE: "empty",
    Color.WHITE: "white",
    Color.BLACK: "black",
}

# Single characters used when printing the board: (E)mpty, (W)hite and (B)lack
COLOR_TO_SYMBOL: dict[Color, str] = {
    Color.NONE: "E",
    Color.WHITE: "W",
    Color.BLACK: "B",
}
