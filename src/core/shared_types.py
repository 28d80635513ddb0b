"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    WON = "won"
    DRAWN = "drawn"
    ABORTED = "aborted"


# --- Color here DOES NOT contain an option for empty points. That one lives in src/morris/pieces.py
# --- NOTE both use the same name (Color) as that reads clearly; the imports show which version is used where


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class VariantName(StrEnum):
    THREE = "three"
    NINE = "nine"
    TWELVE = "twelve"


class Phase(StrEnum):
    PLACEMENT = "placement"
    SLIDING = "sliding"
    FLYING = "flying"


class MoveKind(StrEnum):
    """The kind of input the side to move has to supply next"""

    PLACE = "place"
    SLIDE = "slide"
    FLY = "fly"
    REMOVE = "remove"
