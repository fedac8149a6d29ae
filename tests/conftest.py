"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from pathlib import Path

import pytest

from chess_tracker.db.json_repository import JsonFileGameRepository

STARTING_ROWS = [
    ["r", "n", "b", "q", "k", "b", "n", "r"],
    ["p"] * 8,
    ["."] * 8,
    ["."] * 8,
    ["."] * 8,
    ["."] * 8,
    ["P"] * 8,
    ["R", "N", "B", "Q", "K", "B", "N", "R"],
]


@pytest.fixture
def save_file(tmp_path: Path) -> Path:
    """Location of a save file that does not exist yet. Every test gets its own directory."""
    return tmp_path / "saves" / ".chess_game.json"


@pytest.fixture
def json_repo(save_file: Path) -> JsonFileGameRepository:
    return JsonFileGameRepository(save_file)


@pytest.fixture
def starting_rows() -> list[list[str]]:
    """Fresh copy each time (tests are allowed to mutate it)"""
    return [list(row) for row in STARTING_ROWS]
