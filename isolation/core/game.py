from __future__ import annotations

from enum import Enum
from typing import List, Optional

from .board import Board
from .state import Move, Player


class GameStatus(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Game:
    """Turn sequencing on top of a single live :class:`Board`.

    The board owns all legality rules; the game tracks whose turn it is, counts
    applied moves and decides when the player to act has been isolated.
    """

    def __init__(self, board: Optional[Board] = None) -> None:
        self.board = board if board is not None else Board()
        self.current_player = Player.PLAYER1
        self.status = GameStatus.PLAYING
        self.turn_count = 0
        self._winner: Optional[Player] = None

    def initialize(self) -> None:
        self.board.initialize()
        self.current_player = Player.PLAYER1
        self.status = GameStatus.PLAYING
        self.turn_count = 0
        self._winner = None

    @property
    def is_over(self) -> bool:
        return self.status == GameStatus.GAME_OVER

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or ``None`` while the game is still being played."""
        return self._winner

    def make_move(self, move: Move) -> bool:
        if self.is_over:
            return False

        if not self.board.apply_move(move, self.current_player):
            return False

        self.turn_count += 1
        self.switch_player()
        self.check_game_over()
        return True

    def switch_player(self) -> None:
        self.current_player = self.current_player.opponent

    def check_game_over(self) -> None:
        if not self.board.can_player_move(self.current_player):
            self.status = GameStatus.GAME_OVER
            self._winner = self.current_player.opponent

    def get_valid_moves(self) -> List[Move]:
        return self.board.get_all_possible_moves(self.current_player)

    def render(self) -> str:
        lines = [
            f"Turn: {self.turn_count}",
            f"Current Player: {self.current_player.name}",
            self.board.render(),
        ]
        if self.is_over and self._winner is not None:
            lines.append("*** GAME OVER ***")
            lines.append(f"Winner: {self._winner.name}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Game(current={self.current_player.name}, status={self.status.value}, "
            f"turn={self.turn_count}, winner={self._winner.name if self._winner else None})"
        )
