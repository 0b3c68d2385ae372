from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Tuple

BOARD_SIZE = 7
MIN_COORD = 0
MAX_COORD = BOARD_SIZE - 1

# Neighbour offsets in enumeration order:
# up-left, up, up-right, left, right, down-left, down, down-right.
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class Player(IntEnum):
    PLAYER1 = 1
    PLAYER2 = 2

    @property
    def opponent(self) -> "Player":
        return Player.PLAYER2 if self is Player.PLAYER1 else Player.PLAYER1

    @property
    def cell(self) -> "CellState":
        return CellState(int(self))


class CellState(IntEnum):
    EMPTY = 0
    PLAYER1 = 1
    PLAYER2 = 2
    REMOVED = 3


class Position(NamedTuple):
    row: int
    col: int

    def offset(self, dr: int, dc: int) -> "Position":
        return Position(self.row + dr, self.col + dc)

    def label(self) -> str:
        """Human-readable coordinate, e.g. ``(0, 3)`` -> ``a4``."""
        return f"{chr(ord('a') + self.row)}{self.col + 1}"


@dataclass(frozen=True)
class Move:
    from_pos: Position
    to_pos: Position
    remove_cell: Position

    @property
    def is_valid(self) -> bool:
        # Shape check only; board legality lives in Board.is_valid_move.
        return self.from_pos != self.to_pos

    def as_tuple(self) -> Tuple[int, int, int, int, int, int]:
        return (
            self.from_pos.row,
            self.from_pos.col,
            self.to_pos.row,
            self.to_pos.col,
            self.remove_cell.row,
            self.remove_cell.col,
        )


# Returned by the search when the agent has nothing to play.
NO_MOVE = Move(Position(0, 0), Position(0, 0), Position(0, 0))


@dataclass(frozen=True)
class MoveRecord:
    """Minimal diff needed to take back a move applied with ``Board.push_move``."""

    move: Move
    player: Player
    from_state: CellState
    to_state: CellState
    remove_state: CellState
    previous_position: Position


PLAYER1_START = Position(0, 3)
PLAYER2_START = Position(6, 3)
