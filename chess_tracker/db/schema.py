"""Layout of the save file"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chess_tracker.chess.pieces import VALID_TAGS
from chess_tracker.chess.square import BOARD_DIMENSIONS
from chess_tracker.core.shared_types import Color


class SavedGame(BaseModel):
    """
    The JSON document written to disk:

    {"board": [["r", "n", ...], ...], "currentPlayer": "white"}
    """

    model_config = ConfigDict(populate_by_name=True)

    board: list[list[str]]
    current_player: Color = Field(alias="currentPlayer")

    @field_validator("board")
    @classmethod
    def validate_board(cls, value: list[list[str]]) -> list[list[str]]:
        n_rows, n_cols = BOARD_DIMENSIONS
        if len(value) != n_rows or any(len(row) != n_cols for row in value):
            raise ValueError(f"board must have {n_rows} rows of {n_cols} squares.")

        unknown = {tag for row in value for tag in row if tag not in VALID_TAGS}
        if unknown:
            raise ValueError(f"board contains unknown piece tags: {sorted(unknown)}")
        return value
