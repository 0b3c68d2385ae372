from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from isolation.core import BOARD_SIZE, Game, Move, Player, Position

NUM_CELLS = BOARD_SIZE * BOARD_SIZE
MOVE_RECORD_SIZE = 6
# 49 cells + p1 (row, col) + p2 (row, col) + current, turn, over, winner
SNAPSHOT_SIZE = NUM_CELLS + 4 + 4
NO_WINNER = 0


@dataclass(frozen=True)
class GameSnapshot:
    board: np.ndarray  # shape (49,), dtype=np.int8, row-major cell codes 0..3
    player1: Tuple[int, int]
    player2: Tuple[int, int]
    current_player: int
    turn_count: int
    game_over: bool
    winner: int  # 1 or 2 once the game is over, NO_WINNER before

    def to_array(self) -> np.ndarray:
        flat = np.zeros((SNAPSHOT_SIZE,), dtype=np.int32)
        flat[:NUM_CELLS] = self.board
        flat[NUM_CELLS : NUM_CELLS + 4] = (*self.player1, *self.player2)
        flat[NUM_CELLS + 4 :] = (
            self.current_player,
            self.turn_count,
            int(self.game_over),
            self.winner,
        )
        return flat

    def cell(self, row: int, col: int) -> int:
        return int(self.board[row * BOARD_SIZE + col])


def build_snapshot(game: Game) -> GameSnapshot:
    board = game.board
    p1 = board.get_player_position(Player.PLAYER1)
    p2 = board.get_player_position(Player.PLAYER2)
    winner = game.winner
    return GameSnapshot(
        board=board.grid.reshape(NUM_CELLS).copy(),
        player1=(p1.row, p1.col),
        player2=(p2.row, p2.col),
        current_player=int(game.current_player),
        turn_count=game.turn_count,
        game_over=game.is_over,
        winner=int(winner) if game.is_over and winner is not None else NO_WINNER,
    )


def encode_move(move: Move) -> np.ndarray:
    return np.asarray(move.as_tuple(), dtype=np.int64)


def decode_move(record: Sequence[int]) -> Move:
    values = [int(v) for v in np.asarray(record).reshape(-1)]
    if len(values) != MOVE_RECORD_SIZE:
        raise ValueError(f"Move record must hold {MOVE_RECORD_SIZE} integers, got {len(values)}.")
    fr, fc, tr, tc, rr, rc = values
    return Move(Position(fr, fc), Position(tr, tc), Position(rr, rc))
