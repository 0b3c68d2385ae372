"""Isolation 7x7 game engine and alpha-beta player."""

from . import core, env, features, search
from .core import NO_MOVE, Board, CellState, Game, GameStatus, Move, Player, Position
from .env import IsolationEnv
from .features import GameSnapshot, build_snapshot, decode_move, encode_move
from .search import AlphaBetaSearch, SearchConfig, SearchResult, evaluate

__all__ = [
    "core",
    "env",
    "features",
    "search",
    "NO_MOVE",
    "Board",
    "CellState",
    "Game",
    "GameStatus",
    "Move",
    "Player",
    "Position",
    "IsolationEnv",
    "GameSnapshot",
    "build_snapshot",
    "decode_move",
    "encode_move",
    "AlphaBetaSearch",
    "SearchConfig",
    "SearchResult",
    "evaluate",
]
