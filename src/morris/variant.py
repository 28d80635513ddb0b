"""
The three supported games of the Morris family.

All variant-specific numbers live in a single VariantConfig, so the builder, coordinate mapper, mill detector and
game consult the same value instead of branching on the variant themselves.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from src.core.exceptions import GameStateError
from src.morris.point import CARDINAL_DIRECTIONS, DIAGONAL_DIRECTIONS, Direction

# A side that is down to this many pieces may fly
FLYING_THRESHOLD = 3
# ... and a side that is down to this many pieces has lost
LOSING_THRESHOLD = 2


class Variant(Enum):
    """Value is the number of pieces each player places"""

    THREE = 3
    NINE = 9
    TWELVE = 12

    @classmethod
    def from_name(cls, name: str) -> Self:
        """'three', 'nine' or 'twelve' (any case)"""
        key = name.strip().upper()
        if key not in cls.__members__:
            raise GameStateError(
                f"Unknown variant: {name!r}. Pick one from {','.join([v.name.lower() for v in cls])}"
            )
        return cls[key]

    @property
    def config(self) -> "VariantConfig":
        return VARIANTS[self]


@dataclass(frozen=True)
class VariantConfig:
    variant: Variant
    title: str
    pieces_per_player: int
    letters: str
    digits: str
    directions: tuple[Direction, ...]
    has_sliding_phase: bool
    line_length: int = 3

    @property
    def total_placements(self) -> int:
        return 2 * self.pieces_per_player


VARIANTS: dict[Variant, VariantConfig] = {
    Variant.THREE: VariantConfig(
        variant=Variant.THREE,
        title="Three Man Morris",
        pieces_per_player=3,
        letters="abc",
        digits="123",
        directions=CARDINAL_DIRECTIONS,
        has_sliding_phase=False,
    ),
    Variant.NINE: VariantConfig(
        variant=Variant.NINE,
        title="Nine Man Morris",
        pieces_per_player=9,
        letters="abcdefg",
        digits="1234567",
        directions=CARDINAL_DIRECTIONS,
        has_sliding_phase=True,
    ),
    Variant.TWELVE: VariantConfig(
        variant=Variant.TWELVE,
        title="Twelve Man Morris",
        pieces_per_player=12,
        letters="abcdefg",
        digits="1234567",
        directions=CARDINAL_DIRECTIONS + DIAGONAL_DIRECTIONS,
        has_sliding_phase=True,
    ),
}
