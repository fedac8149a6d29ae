"""
Move notation and the (very permissive) movement rules.

Only ownership and destination occupancy are checked:
no piece geometry, no blocked paths, no check detection.
"""

import re
from dataclasses import dataclass
from typing import Protocol

from chess_tracker.chess.pieces import Color, Piece
from chess_tracker.chess.square import Square
from chess_tracker.core.exceptions import InvalidMoveFormatError

# two algebraic squares concatenated, lowercase files only
MOVE_PATTERN = re.compile(r"^[a-h][1-8][a-h][1-8]$")
INVALID_FORMAT_MESSAGE = "Invalid move format. Use algebraic notation (e.g., e2e4)."


class Board(Protocol):
    """Just the part of the board the validator needs"""

    def piece(self, square: Square) -> Piece: ...


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    def to_notation(self) -> str:
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"


def parse_move(notation: str) -> Move:
    """
    Coordinate notation
    ---
    examples:
    * "e2e4": move the piece that was on e2 to e4
    * "a1h8": move the piece on a1 to h8 (no matter what piece that is)
    """
    if not MOVE_PATTERN.fullmatch(notation):
        raise InvalidMoveFormatError(INVALID_FORMAT_MESSAGE)
    from_sq = Square.from_algebraic(notation[:2])
    to_sq = Square.from_algebraic(notation[2:4])
    return Move(from_sq, to_sq)


def is_valid_move(board: Board, side_to_move: Color, move: Move) -> bool:
    """
    Ownership / occupancy rules
    -----
    1. the source square must hold a piece
    2. ... of the color that is to move
    3. the destination is either empty
    4. ... or holds a piece of the opponent (capture)
    """
    piece = board.piece(move.from_square)
    if piece.is_empty:
        return False

    if piece.color != side_to_move:
        return False

    target = board.piece(move.to_square)
    if target.is_empty:
        return True

    return target.color != piece.color
