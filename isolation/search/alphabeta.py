from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from isolation.core import NO_MOVE, Board, Move, Player

from .evaluator import evaluate

logger = logging.getLogger(__name__)

# Terminal scores are +/-(WIN_SCORE + remaining depth): earlier wins and later
# losses are preferred.
WIN_SCORE = 100_000


@dataclass
class SearchConfig:
    depth: int = 3

    def __post_init__(self) -> None:
        if isinstance(self.depth, bool) or not isinstance(self.depth, int):
            raise TypeError(f"Search depth must be an int, got {type(self.depth).__name__}.")


@dataclass
class SearchResult:
    move: Move
    score: float
    nodes: int
    candidates: int

    @property
    def found(self) -> bool:
        return self.move.is_valid


class AlphaBetaSearch:
    """Depth-limited minimax with alpha-beta pruning for a fixed agent.

    The live board handed to :meth:`search` is never touched: the search works
    on a single private copy, applying and taking back moves as it descends.
    """

    def __init__(self, player: Player = Player.PLAYER1, config: Optional[SearchConfig] = None) -> None:
        self.player = player
        self.opponent = player.opponent
        self.config = config or SearchConfig()
        self.nodes_evaluated = 0

    @property
    def depth(self) -> int:
        return self.config.depth

    def set_depth(self, depth: int) -> None:
        self.config = SearchConfig(depth=depth)

    # ------------------------------------------------------------------
    def get_best_move(self, board: Board) -> Move:
        return self.search(board).move

    def search(self, board: Board) -> SearchResult:
        moves = board.get_all_possible_moves(self.player)
        if not moves:
            self.nodes_evaluated = 0
            logger.debug("%s has no legal moves", self.player.name)
            return SearchResult(move=NO_MOVE, score=-math.inf, nodes=0, candidates=0)

        logger.debug("%s evaluating %d possible moves at depth %d", self.player.name, len(moves), self.depth)

        work = board.copy()
        best_move = moves[0]
        best_score = -math.inf
        alpha = -math.inf
        beta = math.inf
        nodes = 0

        for move in moves:
            record = work.push_move(move, self.player)
            score, visited = self._search(work, self.depth - 1, False, alpha, beta)
            work.pop_move(record)
            nodes += visited

            # Strict improvement only: ties keep the earliest enumerated move.
            if score > best_score:
                best_score = score
                best_move = move
            alpha = max(alpha, best_score)

        self.nodes_evaluated = nodes
        logger.debug("Best move score: %s (nodes evaluated: %d)", best_score, nodes)
        return SearchResult(move=best_move, score=best_score, nodes=nodes, candidates=len(moves))

    def _search(
        self,
        board: Board,
        depth: int,
        maximizing: bool,
        alpha: float,
        beta: float,
    ) -> Tuple[float, int]:
        """Return ``(score, nodes)`` for ``board``, scored from the agent's side."""
        nodes = 1
        if depth <= 0:
            return evaluate(board, self.player, self.opponent), nodes

        mover = self.player if maximizing else self.opponent
        moves = board.get_all_possible_moves(mover) if board.can_player_move(mover) else []
        if not moves:
            terminal = WIN_SCORE + depth
            return (-terminal if maximizing else terminal), nodes

        best = -math.inf if maximizing else math.inf
        for move in moves:
            record = board.push_move(move, mover)
            value, visited = self._search(board, depth - 1, not maximizing, alpha, beta)
            board.pop_move(record)
            nodes += visited

            if maximizing:
                best = max(best, value)
                alpha = max(alpha, value)
            else:
                best = min(best, value)
                beta = min(beta, value)
            if beta <= alpha:
                break
        return best, nodes


def minimax_reference(board: Board, player: Player, depth: int) -> Tuple[Move, float]:
    """Exhaustive minimax without pruning, using the same scoring and tie-break.

    Only practical on small positions; used to cross-check :class:`AlphaBetaSearch`.
    """
    opponent = player.opponent

    def value(node: Board, remaining: int, maximizing: bool) -> float:
        if remaining <= 0:
            return evaluate(node, player, opponent)
        mover = player if maximizing else opponent
        moves = node.get_all_possible_moves(mover) if node.can_player_move(mover) else []
        if not moves:
            terminal = WIN_SCORE + remaining
            return -terminal if maximizing else terminal
        scores = []
        for move in moves:
            child = node.copy()
            child.apply_move(move, mover)
            scores.append(value(child, remaining - 1, not maximizing))
        return max(scores) if maximizing else min(scores)

    moves = board.get_all_possible_moves(player)
    if not moves:
        return NO_MOVE, -math.inf

    best_move = moves[0]
    best_score = -math.inf
    for move in moves:
        child = board.copy()
        child.apply_move(move, player)
        score = value(child, depth - 1, False)
        if score > best_score:
            best_score = score
            best_move = move
    return best_move, best_score
