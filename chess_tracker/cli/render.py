"""Terminal output: the board and the status messages, colored with ANSI escape codes."""

from chess_tracker.chess.game import Game
from chess_tracker.chess.pieces import Color, Piece
from chess_tracker.chess.square import BOARD_DIMENSIONS, FILES

RESET = "\033[0m"
BLUE = "\033[34m"
CYAN = "\033[36m"
GREEN = "\033[32m"
RED = "\033[31m"
YELLOW = "\033[33m"
GRAY = "\033[90m"
WHITE_FG = "\033[97m"
BLACK_FG = "\033[30m"

PIECE_COLORS: dict[Color, str] = {
    Color.WHITE: WHITE_FG,
    Color.BLACK: BLACK_FG,
    Color.NONE: GRAY,
}


def paint(text: str, code: str, use_color: bool = True) -> str:
    return f"{code}{text}{RESET}" if use_color else text


def success(text: str, use_color: bool = True) -> str:
    return paint(text, GREEN, use_color)


def failure(text: str, use_color: bool = True) -> str:
    return paint(text, RED, use_color)


def notice(text: str, use_color: bool = True) -> str:
    return paint(text, YELLOW, use_color)


def render_piece(piece: Piece, use_color: bool = True) -> str:
    return paint(piece.to_tag(), PIECE_COLORS[piece.color], use_color)


def render_board(game: Game, use_color: bool = True) -> str:
    """
    Draw the board as seen from white's side:

      a b c d e f g h
    8 r n b q k b n r 8
    ...
    1 R N B Q K B N R 1
      a b c d e f g h
    Current player: white
    """
    file_labels = paint("  " + " ".join(FILES), BLUE, use_color)

    lines = [file_labels]
    for row_idx, row in enumerate(game.board.grid):
        rank_label = str(BOARD_DIMENSIONS[0] - row_idx)
        cells = " ".join(render_piece(piece, use_color) for piece in row)
        lines.append(f"{rank_label} {cells} {rank_label}")
    lines.append(file_labels)
    lines.append(
        paint(f"Current player: {game.side_to_move.name.lower()}", CYAN, use_color)
    )
    return "\n".join(lines)
