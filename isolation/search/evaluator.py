from __future__ import annotations

from isolation.core import BOARD_SIZE, Board, Player, Position

CENTER = Position(BOARD_SIZE // 2, BOARD_SIZE // 2)
MOBILITY_WEIGHT = 10
CENTRALITY_WEIGHT = 2


def mobility(board: Board, player: Player) -> int:
    return len(board.get_valid_neighbors(board.get_player_position(player)))


def centrality(pos: Position) -> int:
    distance = abs(pos.row - CENTER.row) + abs(pos.col - CENTER.col)
    return (BOARD_SIZE - distance) * CENTRALITY_WEIGHT


def evaluate(board: Board, for_player: Player, against_player: Player) -> int:
    """Static score of ``board`` from ``for_player``'s point of view.

    Mobility difference weighted by 10 plus the centrality difference; higher
    is better for ``for_player``.
    """
    mobility_score = (mobility(board, for_player) - mobility(board, against_player)) * MOBILITY_WEIGHT
    position_score = centrality(board.get_player_position(for_player)) - centrality(
        board.get_player_position(against_player)
    )
    return mobility_score + position_score
