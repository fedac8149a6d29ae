"""Defines the types of chess pieces"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from chess_tracker.core.exceptions import InvalidBoardError


class PieceType(Enum):
    EMPTY = auto()
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    NONE = auto()
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> "Color":
        if self == Color.NONE:
            return Color.NONE
        return Color.BLACK if self == Color.WHITE else Color.WHITE


# Character used for an empty square (in the save file as well as on screen)
EMPTY_TAG = "."

TAG_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_TAG: dict[PieceType, str] = {value: key for key, value in TAG_TO_PIECE.items()}

VALID_TAGS: frozenset[str] = frozenset(
    [EMPTY_TAG, *TAG_TO_PIECE.keys(), *(char.upper() for char in TAG_TO_PIECE)]
)

AVAILABLE_COLOR_NAMES = [color.name for color in Color if color != Color.NONE]


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color

    @classmethod
    def empty(cls) -> Self:
        return cls(PieceType.EMPTY, Color.NONE)

    @classmethod
    def from_tag(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        if character not in VALID_TAGS:
            raise InvalidBoardError(f"Unknown piece tag: {character!r}")
        if character == EMPTY_TAG:
            return cls.empty()
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = TAG_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    def to_tag(self) -> str:
        if self.is_empty:
            return EMPTY_TAG
        return (
            PIECE_TO_TAG[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_TAG[self.type].lower()
        )

    @property
    def is_empty(self) -> bool:
        return self.type == PieceType.EMPTY
