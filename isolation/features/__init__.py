"""Flat record helpers for exchanging engine state with external consumers."""

from .records import (
    MOVE_RECORD_SIZE,
    NO_WINNER,
    NUM_CELLS,
    SNAPSHOT_SIZE,
    GameSnapshot,
    build_snapshot,
    decode_move,
    encode_move,
)

__all__ = [
    "MOVE_RECORD_SIZE",
    "NO_WINNER",
    "NUM_CELLS",
    "SNAPSHOT_SIZE",
    "GameSnapshot",
    "build_snapshot",
    "decode_move",
    "encode_move",
]
