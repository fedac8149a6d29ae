"""The Game board: a plain 8x8 container of pieces. No chess rules are checked here."""

from dataclasses import dataclass
from typing import Self

from chess_tracker.chess.moves import Move
from chess_tracker.chess.pieces import Color, Piece, PieceType
from chess_tracker.chess.square import BOARD_DIMENSIONS, Square
from chess_tracker.core.exceptions import InvalidBoardError

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass
class Board:
    grid: list[list[Piece]]

    @classmethod
    def starting_position(cls) -> Self:
        """
        Standard starting position, row-major from the 8th rank down:
        * row 0: black back rank (rook, knight, bishop, queen, king, bishop, knight, rook)
        * row 1: black pawns
        * rows 2 - 5: empty
        * row 6: white pawns
        * row 7: white back rank
        """
        n_rows, n_cols = BOARD_DIMENSIONS
        grid = [[Piece.empty() for _ in range(n_cols)] for _ in range(n_rows)]
        grid[0] = [Piece(piece_type, Color.BLACK) for piece_type in BACK_RANK]
        grid[1] = [Piece(PieceType.PAWN, Color.BLACK) for _ in range(n_cols)]
        grid[n_rows - 2] = [Piece(PieceType.PAWN, Color.WHITE) for _ in range(n_cols)]
        grid[n_rows - 1] = [Piece(piece_type, Color.WHITE) for piece_type in BACK_RANK]
        return cls(grid)

    @classmethod
    def from_rows(cls, rows: list[list[str]]) -> Self:
        """Construct a board from single-character tags (uppercase: white, lowercase: black, '.': empty)."""
        n_rows, n_cols = BOARD_DIMENSIONS
        if len(rows) != n_rows or any(len(row) != n_cols for row in rows):
            raise InvalidBoardError(
                f"Board must have {n_rows} rows of {n_cols} squares each."
            )
        return cls([[Piece.from_tag(tag) for tag in row] for row in rows])

    def to_rows(self) -> list[list[str]]:
        return [[piece.to_tag() for piece in row] for row in self.grid]

    def piece(self, square: Square) -> Piece:
        return self.grid[square.row][square.col]

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.grid[square.row][square.col] = piece

    def move_piece(self, move: Move) -> None:
        """Update the position on the board"""
        piece_that_moved = self.piece(move.from_square)
        self.place_piece(Piece.empty(), move.from_square)
        self.place_piece(piece_that_moved, move.to_square)
