from __future__ import annotations

from typing import Dict, List

import numpy as np
from numpy.typing import NDArray

from .state import (
    BOARD_SIZE,
    DIRECTIONS,
    MAX_COORD,
    MIN_COORD,
    PLAYER1_START,
    PLAYER2_START,
    CellState,
    Move,
    MoveRecord,
    Player,
    Position,
)

BoardArray = NDArray[np.int8]

# Row-major scan order used for removable-cell enumeration.
ALL_POSITIONS: List[Position] = [
    Position(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
]

CELL_SYMBOLS = {
    CellState.EMPTY: "[ ]",
    CellState.PLAYER1: "[B]",
    CellState.PLAYER2: "[R]",
    CellState.REMOVED: "[X]",
}


class Board:
    """7x7 Isolation board: cell grid plus the recorded position of each player."""

    __slots__ = ("grid", "_positions")

    def __init__(self) -> None:
        self.grid: BoardArray = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        self._positions: Dict[Player, Position] = {}
        self.initialize()

    def initialize(self) -> None:
        self.grid[:, :] = CellState.EMPTY
        self._positions = {
            Player.PLAYER1: PLAYER1_START,
            Player.PLAYER2: PLAYER2_START,
        }
        self.grid[PLAYER1_START] = CellState.PLAYER1
        self.grid[PLAYER2_START] = CellState.PLAYER2

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_cell_state(self, pos: Position) -> CellState:
        if not self.is_valid_position(pos):
            raise ValueError(f"Position {pos} is out of bounds.")
        return CellState(int(self.grid[pos.row, pos.col]))

    def get_player_position(self, player: Player) -> Position:
        return self._positions[player]

    def is_valid_position(self, pos: Position) -> bool:
        return MIN_COORD <= pos.row <= MAX_COORD and MIN_COORD <= pos.col <= MAX_COORD

    def is_walkable(self, pos: Position) -> bool:
        if not self.is_valid_position(pos):
            return False
        return self.grid[pos.row, pos.col] == CellState.EMPTY

    def get_valid_neighbors(self, pos: Position) -> List[Position]:
        neighbors: List[Position] = []
        for dr, dc in DIRECTIONS:
            candidate = pos.offset(dr, dc)
            if self.is_walkable(candidate):
                neighbors.append(candidate)
        return neighbors

    def is_valid_move(self, move: Move, player: Player) -> bool:
        if not move.is_valid:
            return False

        current = self._positions[player]
        if move.from_pos != current:
            return False

        if move.to_pos not in self.get_valid_neighbors(current):
            return False

        remove = move.remove_cell
        if not self.is_valid_position(remove):
            return False
        if self.grid[remove.row, remove.col] == CellState.REMOVED:
            return False
        if remove == move.to_pos:
            return False
        # Removing the vacated origin is allowed; only the opponent's cell is protected.
        if remove == self._positions[player.opponent]:
            return False
        return True

    def get_all_possible_moves(self, player: Player) -> List[Move]:
        current = self._positions[player]
        opponent_pos = self._positions[player.opponent]
        removable = [
            pos
            for pos in ALL_POSITIONS
            if self.grid[pos.row, pos.col] != CellState.REMOVED and pos != opponent_pos
        ]

        moves: List[Move] = []
        for to_pos in self.get_valid_neighbors(current):
            for remove in removable:
                if remove == to_pos:
                    continue
                moves.append(Move(current, to_pos, remove))
        return moves

    def can_player_move(self, player: Player) -> bool:
        return bool(self.get_valid_neighbors(self._positions[player]))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def apply_move(self, move: Move, player: Player) -> bool:
        if not self.is_valid_move(move, player):
            return False
        self.push_move(move, player)
        return True

    def push_move(self, move: Move, player: Player) -> MoveRecord:
        """Apply ``move`` without validation and return the diff needed to undo it.

        Callers must only pass moves taken from ``get_all_possible_moves`` (or
        otherwise checked with ``is_valid_move``) for ``player``.
        """
        record = MoveRecord(
            move=move,
            player=player,
            from_state=self.get_cell_state(move.from_pos),
            to_state=self.get_cell_state(move.to_pos),
            remove_state=self.get_cell_state(move.remove_cell),
            previous_position=self._positions[player],
        )
        self.grid[move.from_pos] = CellState.EMPTY
        self.grid[move.to_pos] = player.cell
        self._positions[player] = move.to_pos
        self.grid[move.remove_cell] = CellState.REMOVED
        return record

    def pop_move(self, record: MoveRecord) -> None:
        move = record.move
        self.grid[move.remove_cell] = record.remove_state
        self.grid[move.to_pos] = record.to_state
        self.grid[move.from_pos] = record.from_state
        self._positions[record.player] = record.previous_position

    def copy(self) -> "Board":
        board = Board.__new__(Board)
        board.grid = self.grid.copy()
        board._positions = dict(self._positions)
        return board

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def place_player(self, player: Player, pos: Position) -> None:
        """Relocate ``player`` to ``pos`` (an Empty cell). Used to set up positions."""
        if not self.is_walkable(pos):
            raise ValueError(f"Cannot place {player.name} on {pos}: cell is not empty.")
        self.grid[self._positions[player]] = CellState.EMPTY
        self.grid[pos] = player.cell
        self._positions[player] = pos

    def remove_cell(self, pos: Position) -> None:
        """Mark ``pos`` as Removed. Used to set up positions."""
        if not self.is_valid_position(pos):
            raise ValueError(f"Position {pos} is out of bounds.")
        if self.grid[pos] in (CellState.PLAYER1, CellState.PLAYER2):
            raise ValueError(f"Cannot remove occupied cell {pos}.")
        self.grid[pos] = CellState.REMOVED

    def render(self) -> str:
        header = "    " + "".join(f" {col + 1}  " for col in range(BOARD_SIZE))
        rows = [header]
        for row in range(BOARD_SIZE):
            cells = " ".join(CELL_SYMBOLS[CellState(int(v))] for v in self.grid[row])
            rows.append(f"  {chr(ord('a') + row)} {cells}")
        return "\n".join(rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid)) and self._positions == other._positions

    def __repr__(self) -> str:
        p1 = self._positions[Player.PLAYER1]
        p2 = self._positions[Player.PLAYER2]
        return f"Board(player1={tuple(p1)}, player2={tuple(p2)})\n{self.render()}"


def board_from_rows(rows: List[str]) -> Board:
    """Build a board from a 7-line picture using ``.`` empty, ``1``/``2`` players, ``#`` removed."""
    if len(rows) != BOARD_SIZE or any(len(line) != BOARD_SIZE for line in rows):
        raise ValueError("Board picture must be 7 rows of 7 characters.")
    board = Board()
    board.grid[:, :] = CellState.EMPTY
    found: Dict[Player, Position] = {}
    codes = {".": CellState.EMPTY, "1": CellState.PLAYER1, "2": CellState.PLAYER2, "#": CellState.REMOVED}
    for r, line in enumerate(rows):
        for c, ch in enumerate(line):
            if ch not in codes:
                raise ValueError(f"Unknown board symbol {ch!r}.")
            state = codes[ch]
            board.grid[r, c] = state
            if state in (CellState.PLAYER1, CellState.PLAYER2):
                player = Player(int(state))
                if player in found:
                    raise ValueError(f"{player.name} appears more than once.")
                found[player] = Position(r, c)
    if len(found) != 2:
        raise ValueError("Both players must appear exactly once.")
    board._positions = found
    return board
