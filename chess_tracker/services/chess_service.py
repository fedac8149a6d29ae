"""Orchestration of communication from the CLI to business logic and persistence layers (and the reverse direction)."""

import logging
from dataclasses import dataclass

from chess_tracker.chess.game import Game
from chess_tracker.chess.moves import parse_move
from chess_tracker.core.exceptions import (
    GameError,
    IllegalMoveError,
    InvalidMoveFormatError,
)
from chess_tracker.core.shared_types import MoveStatus
from chess_tracker.db.repository import GameRepository

logger = logging.getLogger(__name__)

MOVE_SUCCESS_MESSAGE = "Move successful!"
ILLEGAL_MOVE_MESSAGE = "Invalid move!"


@dataclass
class MoveOutcome:
    """Result of a move attempt. On failure, `game` is the unchanged input game."""

    status: MoveStatus
    game: Game
    message: str

    @property
    def applied(self) -> bool:
        return self.status == MoveStatus.APPLIED


@dataclass
class LoadOutcome:
    """Result of a load attempt. `found` is False when we fell back to a new game."""

    game: Game
    found: bool


class ChessService:
    """Orchestration of layers for the move tracker. The Game is passed in / handed back explicitly."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- CLI commands logic ---
    def new_game(self) -> Game:
        return Game.new_game()

    def make_move(self, game: Game, notation: str) -> MoveOutcome:
        """Parse -> validate -> apply. Rejections are reported in the outcome, not raised."""
        try:
            move = parse_move(notation)
        except InvalidMoveFormatError as exc:
            logger.debug("Rejected notation %r: %s", notation, exc)
            return MoveOutcome(MoveStatus.INVALID_FORMAT, game, str(exc))

        try:
            game.make_move(move)
        except IllegalMoveError as exc:
            logger.debug("Rejected move: %s", exc)
            return MoveOutcome(MoveStatus.ILLEGAL, game, ILLEGAL_MOVE_MESSAGE)

        return MoveOutcome(MoveStatus.APPLIED, game, MOVE_SUCCESS_MESSAGE)

    def save_game(self, game: Game) -> None:
        """Persist a snapshot of the game (RepositoryError propagates to the caller)."""
        self.repo.save_game(game.to_model())

    def load_game(self) -> LoadOutcome:
        """
        Retrieve the stored game.
        ----
        Never fails: anything unusable means we start over from the starting position.
        """
        stored_model = self.repo.load_game()
        if stored_model is None:
            return LoadOutcome(self.new_game(), found=False)

        try:
            game = Game.from_model(stored_model)
        except GameError as exc:
            logger.info("Stored game could not be restored: %s", exc)
            return LoadOutcome(self.new_game(), found=False)

        return LoadOutcome(game, found=True)
