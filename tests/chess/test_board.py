"""Unit tests for /chess_tracker/chess/board.py"""

import pytest

from chess_tracker.chess.board import BACK_RANK, Board
from chess_tracker.chess.moves import Move
from chess_tracker.chess.pieces import Color, Piece, PieceType
from chess_tracker.chess.square import Square
from chess_tracker.core.exceptions import InvalidBoardError

EMPTY_ROWS = [["."] * 8 for _ in range(8)]


def test_starting_position(starting_rows: list[list[str]]) -> None:
    board = Board.starting_position()
    assert board.to_rows() == starting_rows


def test_starting_position_back_ranks() -> None:
    """Same ordering for both colors: rook, knight, bishop, queen, king, bishop, knight, rook"""
    board = Board.starting_position()
    assert [piece.type for piece in board.grid[0]] == list(BACK_RANK)
    assert [piece.type for piece in board.grid[7]] == list(BACK_RANK)
    assert board.piece(Square.from_algebraic("e1")) == Piece(PieceType.KING, Color.WHITE)
    assert board.piece(Square.from_algebraic("d8")) == Piece(PieceType.QUEEN, Color.BLACK)


def test_starting_position_is_fully_populated() -> None:
    """64 cells, the middle four rows are empty"""
    board = Board.starting_position()
    assert len(board.grid) == 8
    assert all(len(row) == 8 for row in board.grid)
    assert all(piece.is_empty for row in board.grid[2:6] for piece in row)


def test_piece_counts() -> None:
    """16 pieces per side, 32 empty squares"""
    tags = [tag for row in Board.starting_position().to_rows() for tag in row]
    assert sum(tag.isupper() for tag in tags) == 16
    assert sum(tag.islower() for tag in tags) == 16
    assert tags.count(".") == 32


def test_from_rows_roundtrip(starting_rows: list[list[str]]) -> None:
    starting_rows[4][4] = "Q"
    board = Board.from_rows(starting_rows)
    assert board.piece(Square.from_algebraic("e4")) == Piece(PieceType.QUEEN, Color.WHITE)
    assert board.to_rows() == starting_rows


@pytest.mark.parametrize(
    "rows",
    [
        [],
        [["."] * 8 for _ in range(7)],
        [["."] * 8 for _ in range(9)],
        [["."] * 8 for _ in range(7)] + [["."] * 7],
    ],
)
def test_from_rows_wrong_dimensions(rows: list[list[str]]) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_rows(rows)


def test_from_rows_unknown_tag() -> None:
    rows = [list(row) for row in EMPTY_ROWS]
    rows[3][3] = "x"
    with pytest.raises(InvalidBoardError):
        Board.from_rows(rows)


def test_place_piece() -> None:
    board = Board.from_rows(EMPTY_ROWS)
    square = Square.from_algebraic("c6")
    board.place_piece(Piece.from_tag("n"), square)
    assert board.piece(square) == Piece(PieceType.KNIGHT, Color.BLACK)
    assert board.to_rows()[2][2] == "n"


def test_move_piece() -> None:
    """The moved piece ends up on the destination, the source square is cleared"""
    board = Board.starting_position()
    move = Move(Square.from_algebraic("e2"), Square.from_algebraic("e4"))
    board.move_piece(move)
    assert board.piece(move.from_square).is_empty
    assert board.piece(move.to_square) == Piece(PieceType.PAWN, Color.WHITE)


def test_move_piece_captures() -> None:
    """Whatever stood on the destination is simply overwritten"""
    board = Board.starting_position()
    move = Move(Square.from_algebraic("d1"), Square.from_algebraic("d7"))
    board.move_piece(move)
    assert board.piece(move.to_square) == Piece(PieceType.QUEEN, Color.WHITE)
    assert sum(tag.islower() for row in board.to_rows() for tag in row) == 15
