"""Protocol repository (implemented as a JSON file for now, could be swapped for a database later)"""

from typing import Protocol

from chess_tracker.core.models import GameModel


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def save_game(self, game: GameModel) -> GameModel:
        """Store the game (overwrites whatever was stored before) and return the stored data."""
        ...

    def load_game(self) -> GameModel | None:
        """Get the stored game, if a usable record exists."""
        ...
