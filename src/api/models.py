"""Requests and Response models exchanged with the Display/Input collaborator"""

from typing import Any, Optional

from pydantic import BaseModel, field_validator, model_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, MoveKind, Phase, Status, VariantName

Coordinate = str
Occupant = str

# The game is traditionally installed under one program name per variant
PROGRAM_NAMES: dict[str, VariantName] = {
    "tmm": VariantName.THREE,
    "nmm": VariantName.NINE,
    "twmm": VariantName.TWELVE,
}

# Allowed text lengths per kind of move: 'd3', 'd3s'/'g7sw', 'a1g7'
MOVE_LENGTHS: dict[MoveKind, tuple[int, ...]] = {
    MoveKind.PLACE: (2,),
    MoveKind.REMOVE: (2,),
    MoveKind.SLIDE: (3, 4),
    MoveKind.FLY: (4,),
}


# --- REQUEST MODELS ---
class NewMatchRequest(BaseModel):
    variant: VariantName = VariantName.NINE

    @field_validator("variant", mode="before")
    @classmethod
    def resolve_program_name(cls, value: Any) -> Any:
        """Also accept the program names ('tmm', 'nmm', 'twmm') and names starting with them"""
        if not isinstance(value, str):
            return value
        name = value.strip().lower()
        for program, variant in PROGRAM_NAMES.items():
            # installed copies may carry a suffix, e.g. 'tmm-curses'
            if name.startswith(program):
                return variant
        if name not in [variant.value for variant in VariantName]:
            raise InvalidRequestError(
                f"Unknown variant: {value!r}. Pick one from {','.join(v.value for v in VariantName)}"
            )
        return name


class MoveRequest(BaseModel):
    """
    A line of text typed by the player, checked for shape only.
    Whether the coordinates exist on the board and the move is legal is up to the Game.
    """

    kind: MoveKind
    text: str

    @field_validator("text")
    @classmethod
    def normalize_text(cls, value: str) -> str:
        text = value.strip().lower()
        if not text.isalnum() or not text.isascii():
            raise InvalidRequestError("Invalid coordinates. Please try again.")
        return text

    @model_validator(mode="after")
    def validate_length(self) -> "MoveRequest":
        if len(self.text) not in MOVE_LENGTHS[self.kind]:
            raise InvalidRequestError(
                f"Cannot interpret {self.text!r} as a move of kind {self.kind.value!r}."
            )
        return self


# --- RESPONSE MODELS ---
class GameStateResponse(BaseModel):
    """Everything the Display needs to draw the board and the score box"""

    variant: VariantName
    board: dict[Coordinate, Occupant]
    pieces: dict[Color, int]
    total_placed: int
    current_player: Color
    phase: Phase
    status: Status
    winner: Optional[Color]
    expected_move: Optional[MoveKind]
