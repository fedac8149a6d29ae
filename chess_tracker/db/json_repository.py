"""Implementation of (Game)Repository using a single JSON file"""

import logging
from pathlib import Path

from pydantic import ValidationError

from chess_tracker.core.exceptions import RepositoryError
from chess_tracker.core.models import GameModel
from chess_tracker.db.schema import SavedGame

logger = logging.getLogger(__name__)


class JsonFileGameRepository:
    """Data stored as a human-readable JSON document. Every save overwrites the file (last writer wins)."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def save_game(self, game: GameModel) -> GameModel:
        """Store the game and return the stored data."""
        record = self._to_record(game)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                record.model_dump_json(by_alias=True, indent=2), encoding="utf-8"
            )
        except OSError as exc:
            raise RepositoryError(f"Could not write save file {self.path}: {exc}") from exc

        logger.info("Saved game to %s", self.path)
        return self._to_model(record)

    def load_game(self) -> GameModel | None:
        """
        Get the stored game, if a usable record exists.

        NOTE: a missing, unreadable or malformed file is not an error here, we simply have no game.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No save file at %s", self.path)
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.info("Could not read save file %s: %s", self.path, exc)
            return None

        try:
            record = SavedGame.model_validate_json(raw)
        except ValidationError as exc:
            logger.info("Ignoring malformed save file %s: %s", self.path, exc)
            return None

        return self._to_model(record)

    def _to_record(self, game: GameModel) -> SavedGame:
        """Convert data transfer model to the file layout."""
        return SavedGame(board=game.board, current_player=game.current_player)

    def _to_model(self, record: SavedGame) -> GameModel:
        """Convert the file layout to data transfer model."""
        return GameModel(
            board=[list(row) for row in record.board],
            current_player=record.current_player,
        )
