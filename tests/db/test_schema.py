"""Unit tests for chess_tracker/db/schema.py"""

import pytest
from pydantic import ValidationError

from chess_tracker.db.schema import SavedGame


def test_accepts_alias_and_field_name(starting_rows: list[list[str]]) -> None:
    by_alias = SavedGame.model_validate({"board": starting_rows, "currentPlayer": "white"})
    by_name = SavedGame(board=starting_rows, current_player="white")
    assert by_alias == by_name


def test_dumps_with_alias(starting_rows: list[list[str]]) -> None:
    record = SavedGame(board=starting_rows, current_player="black")
    assert record.model_dump(by_alias=True) == {
        "board": starting_rows,
        "currentPlayer": "black",
    }


def test_rejects_wrong_number_of_rows(starting_rows: list[list[str]]) -> None:
    with pytest.raises(ValidationError):
        SavedGame(board=starting_rows[:7], current_player="white")


def test_rejects_unknown_tags(starting_rows: list[list[str]]) -> None:
    starting_rows[4][4] = "Z"
    with pytest.raises(ValidationError):
        SavedGame(board=starting_rows, current_player="white")


def test_rejects_unknown_player(starting_rows: list[list[str]]) -> None:
    with pytest.raises(ValidationError):
        SavedGame(board=starting_rows, current_player="red")
