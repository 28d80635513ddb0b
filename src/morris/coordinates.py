"""
Translate the coordinates a player types ('a1', 'G7', ...) into points on the board, and back.

This is the only module that knows about the letter/digit notation. Everything else works with PointIndex.

Nine/Twelve Man Morris board (letters are columns, digits are rows):

    7 o-----o-----o
      | o---o---o |
      | | o-o-o | |
    4 o-o-o   o-o-o
      | | o-o-o | |
      | o---o---o |
    1 o-----o-----o
      a b c d e f g
"""

from typing import Optional

from src.morris.point import PointIndex
from src.morris.variant import Variant

COORDINATE_LENGTH = 2

# Nine/Twelve: for every column, the rows that hold a point. The center d4 is not a point.
LEGAL_ROWS: dict[str, str] = {
    "a": "147",
    "b": "246",
    "c": "345",
    "d": "123567",
    "e": "345",
    "f": "246",
    "g": "147",
}

# Nine/Twelve: which ring a row (other than the middle row '4') runs along
ROW_TO_RING: dict[str, int] = {
    "1": 0,
    "7": 0,
    "2": 1,
    "6": 1,
    "3": 2,
    "5": 2,
}
CENTER_LETTER = "d"
CENTER_DIGIT = "4"


def is_valid_coordinate(variant: Variant, coordinate: str) -> bool:
    """Does the text denote a point of this variant's board? Case-insensitive."""
    # lower-casing may change the length of non-ASCII text
    coordinate = coordinate.lower()
    if len(coordinate) != COORDINATE_LENGTH:
        return False

    letter, digit = coordinate
    config = variant.config
    if letter not in config.letters or digit not in config.digits:
        return False

    if variant == Variant.THREE:
        # simple case: every cell of the 3x3 grid is a point
        return True
    return digit in LEGAL_ROWS[letter]


def resolve(variant: Variant, coordinate: str) -> Optional[PointIndex]:
    """Returns the index of the point the coordinate refers to, or None if the text is not a point on this board"""
    if not is_valid_coordinate(variant, coordinate):
        return None

    letter, digit = coordinate.lower()
    if variant == Variant.THREE:
        # row 3 is the top row (ring 0)
        return PointIndex(ring=3 - int(digit), slot=ord(letter) - ord("a"))
    return _resolve_rings(letter, digit)


def _resolve_rings(letter: str, digit: str) -> PointIndex:
    """
    Case split on the row first:
    * the middle row '4' holds the spoke through the left (a4-c4) and right (e4-g4) sides; the ring depends on the letter.
    * every other row lies on a single ring, and the column tells which of the three points of that side it is.
    """
    if digit == CENTER_DIGIT:
        if letter < CENTER_LETTER:
            return PointIndex(ring=ord(letter) - ord("a"), slot=6)
        return PointIndex(ring=ord("g") - ord(letter), slot=2)

    ring = ROW_TO_RING[digit]
    is_bottom = digit < CENTER_DIGIT
    if letter < CENTER_LETTER:
        slot = 5 if is_bottom else 7
    elif letter == CENTER_LETTER:
        slot = 4 if is_bottom else 0
    else:
        slot = 3 if is_bottom else 1
    return PointIndex(ring, slot)


def to_coordinate(variant: Variant, index: PointIndex) -> str:
    """Reverse of `resolve`: canonical (lower case) name of the point"""
    if variant == Variant.THREE:
        return f"{chr(ord('a') + index.slot)}{3 - index.ring}"

    ring, slot = index.ring, index.slot
    # column: left side, middle column, right side
    if slot in (5, 6, 7):
        column = ring
    elif slot in (0, 4):
        column = 3
    else:
        column = 6 - ring

    # row: top side, middle row, bottom side
    if slot in (7, 0, 1):
        row = 7 - ring
    elif slot in (2, 6):
        row = 4
    else:
        row = 1 + ring
    return f"{chr(ord('a') + column)}{row}"


def all_coordinates(variant: Variant) -> list[str]:
    """Every legal coordinate of the variant, column by column"""
    config = variant.config
    return [
        f"{letter}{digit}"
        for letter in config.letters
        for digit in config.digits
        if is_valid_coordinate(variant, f"{letter}{digit}")
    ]
