"""Adversarial search and static evaluation."""

from .evaluator import centrality, evaluate, mobility
from .alphabeta import AlphaBetaSearch, SearchConfig, SearchResult, WIN_SCORE, minimax_reference

__all__ = [
    "AlphaBetaSearch",
    "SearchConfig",
    "SearchResult",
    "WIN_SCORE",
    "centrality",
    "evaluate",
    "minimax_reference",
    "mobility",
]
