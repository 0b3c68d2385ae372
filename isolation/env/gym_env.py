from __future__ import annotations

from typing import Dict, Optional, Sequence

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from isolation.core import BOARD_SIZE, Game, Player
from isolation.features import (
    MOVE_RECORD_SIZE,
    NO_WINNER,
    NUM_CELLS,
    build_snapshot,
    decode_move,
    encode_move,
)
from isolation.search import AlphaBetaSearch, SearchConfig

# Shallow search keeps boundary calls responsive.
DEFAULT_AI_DEPTH = 2


class IsolationEnv(gym.Env):
    """Record-level boundary around a live :class:`Game`.

    Actions are six-int move records ``[from_row, from_col, to_row, to_col,
    remove_row, remove_col]`` played by whoever is to move. Rewards are from
    Player 1's point of view.
    """

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        ai_player: Player = Player.PLAYER1,
        ai_depth: int = DEFAULT_AI_DEPTH,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._ai_player = ai_player
        self._ai_depth = ai_depth
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0, high=3, shape=(NUM_CELLS,), dtype=np.int8),
                "positions": spaces.Box(low=0, high=BOARD_SIZE - 1, shape=(4,), dtype=np.int8),
                "aux": spaces.Box(low=0, high=NUM_CELLS, shape=(4,), dtype=np.int32),
            }
        )
        self.action_space = spaces.MultiDiscrete([BOARD_SIZE] * MOVE_RECORD_SIZE)

        self._game = Game()

    @property
    def game(self) -> Game:
        return self._game

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self._game.initialize()
        return self._build_observation(), self._build_info(accepted=True)

    def step(self, action: Sequence[int]):
        in_range = self.action_space.contains(np.asarray(action, dtype=np.int64))
        if not in_range and self._enforce_legal:
            raise ValueError(f"Move record {list(action)} out of bounds.")

        mover = self._game.current_player
        accepted = in_range and self.make_move(action)
        if not accepted and self._enforce_legal:
            raise ValueError(f"Illegal move {list(action)} for {mover.name}.")

        terminated = self._game.is_over
        reward = self._compute_reward() if accepted else 0.0
        return self._build_observation(), reward, terminated, False, self._build_info(accepted=accepted)

    # ------------------------------------------------------------------
    # Boundary operations
    # ------------------------------------------------------------------
    def make_move(self, record: Sequence[int]) -> bool:
        return self._game.make_move(decode_move(record))

    def is_game_over(self) -> bool:
        return self._game.is_over

    def get_winner(self) -> int:
        winner = self._game.winner
        return int(winner) if winner is not None else NO_WINNER

    def get_current_player(self) -> int:
        return int(self._game.current_player)

    def can_player_move(self, player: int) -> bool:
        return self._game.board.can_player_move(Player(player))

    def get_ai_move(self, depth: Optional[int] = None) -> Optional[np.ndarray]:
        search = AlphaBetaSearch(
            self._ai_player,
            SearchConfig(depth=self._ai_depth if depth is None else depth),
        )
        move = search.get_best_move(self._game.board)
        if not move.is_valid:
            return None
        return encode_move(move)

    def legal_moves(self) -> np.ndarray:
        moves = self._game.get_valid_moves()
        if not moves:
            return np.zeros((0, MOVE_RECORD_SIZE), dtype=np.int64)
        return np.stack([encode_move(move) for move in moves])

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._game.render()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, np.ndarray]:
        snapshot = build_snapshot(self._game)
        positions = np.array((*snapshot.player1, *snapshot.player2), dtype=np.int8)
        aux = np.array(
            (snapshot.current_player, snapshot.turn_count, int(snapshot.game_over), snapshot.winner),
            dtype=np.int32,
        )
        return {"board": snapshot.board, "positions": positions, "aux": aux}

    def _build_info(self, *, accepted: bool) -> Dict[str, object]:
        return {"accepted": accepted, "snapshot": build_snapshot(self._game)}

    def _compute_reward(self) -> float:
        if not self._game.is_over:
            return 0.0
        return 1.0 if self._game.winner == Player.PLAYER1 else -1.0
