import numpy as np
import pytest

from isolation.core import Game, Move, Position
from isolation.features import (
    NO_WINNER,
    SNAPSHOT_SIZE,
    build_snapshot,
    decode_move,
    encode_move,
)


def test_snapshot_of_new_game():
    snapshot = build_snapshot(Game())

    assert snapshot.board.shape == (49,)
    assert snapshot.board.dtype == np.int8
    assert snapshot.cell(0, 3) == 1
    assert snapshot.cell(6, 3) == 2
    assert np.count_nonzero(snapshot.board) == 2
    assert snapshot.player1 == (0, 3)
    assert snapshot.player2 == (6, 3)
    assert snapshot.current_player == 1
    assert snapshot.turn_count == 0
    assert not snapshot.game_over
    assert snapshot.winner == NO_WINNER


def test_snapshot_is_a_copy():
    game = Game()
    snapshot = build_snapshot(game)
    game.make_move(Move(Position(0, 3), Position(1, 3), Position(3, 3)))

    assert snapshot.cell(3, 3) == 0
    later = build_snapshot(game)
    assert later.cell(3, 3) == 3
    assert later.player1 == (1, 3)
    assert later.current_player == 2
    assert later.turn_count == 1


def test_snapshot_array_layout():
    game = Game()
    game.make_move(Move(Position(0, 3), Position(0, 4), Position(2, 2)))
    flat = build_snapshot(game).to_array()

    assert flat.shape == (SNAPSHOT_SIZE,)
    assert flat[2 * 7 + 2] == 3
    assert list(flat[49:53]) == [0, 4, 6, 3]
    assert list(flat[53:]) == [2, 1, 0, 0]


def test_move_record_layout():
    move = Move(Position(1, 2), Position(2, 3), Position(4, 5))
    record = encode_move(move)
    assert list(record) == [1, 2, 2, 3, 4, 5]
    assert decode_move([1, 2, 2, 3, 4, 5]) == move


def test_decode_rejects_wrong_length():
    with pytest.raises(ValueError):
        decode_move([1, 2, 3])
