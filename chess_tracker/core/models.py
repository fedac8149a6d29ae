"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the CLI layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the file format, CLI layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass

# Type aliases to make GameModel easier to read
PieceTag = str
PieceColor = str


@dataclass
class GameModel:
    """Transport-safe representation of a tracked game used between CLI, Service, DB, and Game layers."""

    board: list[list[PieceTag]]
    current_player: PieceColor
