"""Core game logic for the Isolation engine."""

from .state import (
    BOARD_SIZE,
    DIRECTIONS,
    NO_MOVE,
    PLAYER1_START,
    PLAYER2_START,
    CellState,
    Move,
    MoveRecord,
    Player,
    Position,
)
from .board import ALL_POSITIONS, Board, board_from_rows
from .game import Game, GameStatus

__all__ = [
    "ALL_POSITIONS",
    "BOARD_SIZE",
    "DIRECTIONS",
    "NO_MOVE",
    "PLAYER1_START",
    "PLAYER2_START",
    "Board",
    "CellState",
    "Game",
    "GameStatus",
    "Move",
    "MoveRecord",
    "Player",
    "Position",
    "board_from_rows",
]
