from isolation.core import Game, GameStatus, Move, Player, Position, board_from_rows


def nearly_trapped_game() -> Game:
    # Player 2 at g4 has a single exit at g5.
    board = board_from_rows(
        [
            "...1...",
            ".......",
            ".......",
            ".......",
            ".......",
            "..###..",
            "..#2...",
        ]
    )
    return Game(board)


def test_initial_state() -> None:
    game = Game()
    assert game.current_player == Player.PLAYER1
    assert game.status == GameStatus.PLAYING
    assert game.turn_count == 0
    assert not game.is_over
    assert game.winner is None
    assert len(game.get_valid_moves()) == 235


def test_successful_move_switches_player() -> None:
    game = Game()
    move = Move(Position(0, 3), Position(1, 3), Position(3, 3))
    assert game.make_move(move)
    assert game.turn_count == 1
    assert game.current_player == Player.PLAYER2
    assert game.board.get_player_position(Player.PLAYER1) == Position(1, 3)
    assert not game.is_over


def test_rejected_move_changes_nothing() -> None:
    game = Game()
    before = game.board.copy()
    # Player 2's piece cannot be moved on Player 1's turn.
    move = Move(Position(6, 3), Position(5, 3), Position(3, 3))
    assert not game.make_move(move)
    assert game.turn_count == 0
    assert game.current_player == Player.PLAYER1
    assert game.board == before
    assert game.status == GameStatus.PLAYING


def test_isolating_opponent_ends_game() -> None:
    game = nearly_trapped_game()
    assert game.board.can_player_move(Player.PLAYER2)

    move = Move(Position(0, 3), Position(1, 3), Position(6, 4))
    assert game.make_move(move)

    assert not game.board.can_player_move(Player.PLAYER2)
    assert game.is_over
    assert game.status == GameStatus.GAME_OVER
    assert game.winner == Player.PLAYER1
    assert game.turn_count == 1


def test_already_trapped_opponent_loses_after_any_move() -> None:
    board = board_from_rows(
        [
            "...1...",
            ".......",
            ".......",
            ".......",
            ".......",
            "..###..",
            "..#2#..",
        ]
    )
    game = Game(board)
    assert game.make_move(Move(Position(0, 3), Position(0, 4), Position(0, 0)))
    assert game.is_over
    assert game.winner == Player.PLAYER1


def test_moves_after_game_over_are_rejected() -> None:
    game = nearly_trapped_game()
    game.make_move(Move(Position(0, 3), Position(1, 3), Position(6, 4)))
    assert game.is_over

    before = game.board.copy()
    assert not game.make_move(Move(Position(6, 3), Position(6, 4), Position(0, 0)))
    assert not game.make_move(Move(Position(1, 3), Position(2, 3), Position(0, 0)))
    assert game.board == before
    assert game.turn_count == 1
    assert game.winner == Player.PLAYER1


def test_player_two_can_win() -> None:
    board = board_from_rows(
        [
            "1.#....",
            "###....",
            ".......",
            ".......",
            ".......",
            ".......",
            "...2...",
        ]
    )
    game = Game(board)
    # Player 1 steps to a2 and removes a1 behind itself, boxing itself in.
    assert game.make_move(Move(Position(0, 0), Position(0, 1), Position(0, 0)))
    assert not game.is_over
    assert game.current_player == Player.PLAYER2

    assert game.make_move(Move(Position(6, 3), Position(5, 3), Position(6, 6)))
    assert game.is_over
    assert game.winner == Player.PLAYER2
    assert game.turn_count == 2


def test_initialize_resets_everything() -> None:
    game = nearly_trapped_game()
    game.make_move(Move(Position(0, 3), Position(1, 3), Position(6, 4)))
    game.initialize()
    assert game.status == GameStatus.PLAYING
    assert game.winner is None
    assert game.turn_count == 0
    assert game.current_player == Player.PLAYER1
    assert game.board.get_player_position(Player.PLAYER2) == Position(6, 3)


def test_render_mentions_winner_only_when_over() -> None:
    game = nearly_trapped_game()
    assert "GAME OVER" not in game.render()
    game.make_move(Move(Position(0, 3), Position(1, 3), Position(6, 4)))
    text = game.render()
    assert "GAME OVER" in text
    assert "PLAYER1" in text
