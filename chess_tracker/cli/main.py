"""
Command line entrypoint.

Each invocation is a fresh process: the game starts from the starting position, unless `load` reads the save file.
"""

import argparse
import logging
from pathlib import Path
from typing import Optional

from chess_tracker.chess.game import Game
from chess_tracker.cli.render import failure, notice, render_board, success
from chess_tracker.core.config import Settings, load_settings
from chess_tracker.core.exceptions import RepositoryError
from chess_tracker.db.json_repository import JsonFileGameRepository
from chess_tracker.services.chess_service import ChessService

logger = logging.getLogger(__name__)

SAVE_SUCCESS_MESSAGE = "Game saved successfully!"
LOAD_SUCCESS_MESSAGE = "Game loaded successfully!"
NO_SAVED_GAME_MESSAGE = "No saved game found. Starting new game."


class Session:
    """What a single command needs: the service, the in-memory game, and how to print."""

    def __init__(self, service: ChessService, game: Game, use_color: bool) -> None:
        self.service = service
        self.game = game
        self.use_color = use_color

    def show_board(self) -> None:
        print(render_board(self.game, self.use_color))


def cmd_move(args: argparse.Namespace, session: Session) -> int:
    outcome = session.service.make_move(session.game, args.notation)
    if not outcome.applied:
        print(failure(outcome.message, session.use_color))
        return 0

    session.game = outcome.game
    print(success(outcome.message, session.use_color))
    session.show_board()
    return 0


def cmd_board(args: argparse.Namespace, session: Session) -> int:
    session.show_board()
    return 0


def cmd_save(args: argparse.Namespace, session: Session) -> int:
    try:
        session.service.save_game(session.game)
    except RepositoryError as exc:
        logger.error("Save failed: %s", exc)
        print(failure(str(exc), session.use_color))
        return 1
    print(success(SAVE_SUCCESS_MESSAGE, session.use_color))
    return 0


def cmd_load(args: argparse.Namespace, session: Session) -> int:
    outcome = session.service.load_game()
    session.game = outcome.game
    if outcome.found:
        print(success(LOAD_SUCCESS_MESSAGE, session.use_color))
    else:
        print(notice(NO_SAVED_GAME_MESSAGE, session.use_color))
    session.show_board()
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="chess-tracker", description="Track a chess game from the command line."
    )
    ap.add_argument(
        "--save-file",
        type=Path,
        default=None,
        help="save file location (default: ~/.chess_game.json)",
    )
    ap.add_argument("--no-color", action="store_true", help="disable colored output")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = ap.add_subparsers(dest="cmd")

    mv = sub.add_parser(
        "move", help="Make a move using algebraic notation (e.g., e2e4)"
    )
    mv.add_argument("notation")
    mv.set_defaults(fn=cmd_move)

    bd = sub.add_parser("board", help="Display the current chessboard")
    bd.set_defaults(fn=cmd_board)

    sv = sub.add_parser("save", help="Save the current game state")
    sv.set_defaults(fn=cmd_save)

    ld = sub.add_parser("load", help="Load a saved game")
    ld.set_defaults(fn=cmd_load)

    return ap


def configure_logging(settings: Settings, verbose: bool) -> None:
    # stderr, so log lines never end up in between the board rows on stdout
    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def main(argv: Optional[list[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    settings = load_settings()
    configure_logging(settings, args.verbose)

    save_file = args.save_file or settings.save_file
    use_color = settings.use_color and not args.no_color
    service = ChessService(JsonFileGameRepository(save_file))
    session = Session(service, service.new_game(), use_color)

    if args.cmd is None:
        ap.print_help()
        session.show_board()
        return 0

    return int(args.fn(args, session))


if __name__ == "__main__":
    raise SystemExit(main())
