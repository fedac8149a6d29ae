"""
The Game class will be the entrypoint into the domain layer for the service layer.
It holds the board and whose turn it is, and is responsible for playing a single move.
"""

import logging
from dataclasses import dataclass
from typing import Self

from chess_tracker.chess.board import Board
from chess_tracker.chess.moves import Move, is_valid_move
from chess_tracker.chess.pieces import AVAILABLE_COLOR_NAMES, Color
from chess_tracker.core.exceptions import GameError, IllegalMoveError
from chess_tracker.core.models import GameModel

logger = logging.getLogger(__name__)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    side_to_move: Color

    @classmethod
    def new_game(cls) -> Self:
        """Standard starting position, white to move."""
        return cls(Board.starting_position(), Color.WHITE)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""
        color_name = model.current_player.upper()
        if color_name not in AVAILABLE_COLOR_NAMES:
            raise GameError(
                f"Invalid player: {model.current_player!r}. Pick one from {','.join(c.lower() for c in AVAILABLE_COLOR_NAMES)}"
            )
        return cls(Board.from_rows(model.board), Color[color_name])

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board=self.board.to_rows(),
            current_player=self.side_to_move.name.lower(),
        )

    def is_valid_move(self, move: Move) -> bool:
        return is_valid_move(self.board, self.side_to_move, move)

    def make_move(self, move: Move) -> None:
        """
        Attempt to make a move
        -----
        1. check ownership / occupancy (raise if not allowed, board stays untouched)
        2. update the board
        3. pass the turn to the opponent
        """
        if not self.is_valid_move(move):
            raise IllegalMoveError(f"Move not allowed: {move.to_notation()}")

        self.board.move_piece(move)
        self._pass_turn()
        logger.debug(
            "Played %s, %s to move", move.to_notation(), self.side_to_move.name.lower()
        )

    # -- PRIVATE HELPERS ---
    def _pass_turn(self) -> None:
        self.side_to_move = self.side_to_move.opponent
