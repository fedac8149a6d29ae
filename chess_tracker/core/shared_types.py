"""
Type definitions used across layers
"""

from enum import StrEnum


# --- NOTE the domain layer has its own Color (with an option for empty squares) in chess_tracker/chess/pieces.py
# --- This one is the plain side-to-move value the service / persistence layers exchange


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class MoveStatus(StrEnum):
    APPLIED = "applied"
    INVALID_FORMAT = "invalid format"
    ILLEGAL = "illegal"
