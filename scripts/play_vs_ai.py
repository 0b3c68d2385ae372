#!/usr/bin/env python3
"""Play Isolation against the alpha-beta AI via the console, with optional logging & replay."""

import argparse
import json
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from isolation import AlphaBetaSearch, Game, Move, Player, Position, SearchConfig
from isolation.features import decode_move

DEFAULT_CONFIG = "configs/play.yaml"

HELP_TEXT = """
=== How to Play ===
Enter your move in the format: to_row to_col remove_row remove_col
Example: 'b 4 c 5' (or 'b4 c5') means:
  - Move your piece to position (b, 4)
  - Remove cell at position (c, 5)
Rows are labeled a-g, columns are labeled 1-7
Type 'help' for this message, 'quit' to exit
"""


def load_yaml_config(path_str: Optional[str]) -> Dict:
    if not path_str:
        return {}
    path = Path(path_str)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


MOVE_INPUT = re.compile(r"\s*([A-Za-z])\s*([+-]?\d+)\s*([A-Za-z])\s*([+-]?\d+)")


def parse_coordinate(row_token: str, col_token: str) -> Position:
    return Position(ord(row_token.lower()) - ord("a"), int(col_token) - 1)


def parse_move_input(raw: str, origin: Position) -> Optional[Move]:
    """Turn ``"b 4 c 5"`` (or ``"b4 c5"``) into a move from ``origin``.

    Anything after the fourth field is ignored. Returns ``None`` on a malformed line.
    """
    match = MOVE_INPUT.match(raw)
    if match is None:
        return None
    to_row, to_col, remove_row, remove_col = match.groups()
    return Move(origin, parse_coordinate(to_row, to_col), parse_coordinate(remove_row, remove_col))


def describe_move(move: Move) -> str:
    return f"from {move.from_pos.label()} to {move.to_pos.label()}, removing {move.remove_cell.label()}"


def prompt_human_move(game: Game) -> Optional[Move]:
    """Ask until a legal move is entered; ``None`` when the player quits."""
    player = game.current_player
    origin = game.board.get_player_position(player)
    neighbours = " ".join(pos.label() for pos in game.board.get_valid_neighbors(origin))
    print(f"Your current position: {origin.label()}")
    print(f"Valid moves: {neighbours}")
    while True:
        raw = input("Enter your move (or 'help'/'quit'): ").strip()
        if raw.lower() in {"q", "quit"}:
            print("Exiting game...")
            return None
        if raw.lower() in {"h", "help"}:
            print(HELP_TEXT)
            continue
        move = parse_move_input(raw, origin)
        if move is None:
            print("Invalid input format! Try again.")
            continue
        if not game.board.is_valid_move(move, player):
            print("Invalid move! Try again.")
            continue
        return move


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, indent=2))
    print(f"Saved game log to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    game = Game()
    if verbose:
        print("Replaying logged game.")
        print(game.render())
    for entry in moves:
        move = decode_move(entry["move"])
        if not game.make_move(move):
            raise ValueError(f"Logged move {entry['move_index']} is illegal: {entry['move']}")
        if verbose:
            print(f"{entry.get('actor', 'unknown')} ({entry.get('player', '?')}) moved {describe_move(move)}")
            print(game.render())
    winner = game.winner
    summary = {
        "result": winner.name if winner is not None else "ongoing",
        "moves": len(moves),
        "turn_count": game.turn_count,
        "board": game.board.grid.tolist(),
    }
    if verbose:
        print("Replay finished.")
        print(f"Result: {summary['result']}")
    return summary


SEAT_COLOURS = {Player.PLAYER1: "Blue", Player.PLAYER2: "Red"}


def seat_label(player: Player, human: Player) -> str:
    role = "Human" if player == human else "AI"
    return f"{player.name} ({SEAT_COLOURS[player]}/{role})"


def play_interactive(args: argparse.Namespace) -> Dict[str, object]:
    human = Player(args.human_player)
    ai = AlphaBetaSearch(human.opponent, SearchConfig(depth=args.depth))
    game = Game()
    log_records: List[Dict] = []

    print("=== Isolation - AI Demo ===")
    print(f"{seat_label(Player.PLAYER1, human)} vs {seat_label(Player.PLAYER2, human)}")
    print(HELP_TEXT)

    quit_early = False
    while not game.is_over:
        print()
        print(game.render())
        mover = game.current_player

        if mover == human:
            print(f"\n>>> Your turn ({human.name})!")
            move = prompt_human_move(game)
            if move is None:
                quit_early = True
                break
            actor = "human"
        else:
            print(f"\n>>> AI ({ai.player.name}) is thinking...")
            result = ai.search(game.board)
            if not result.found:
                print("AI has no legal move.")
                break
            move = result.move
            actor = "ai"
            print(f"AI moves {describe_move(move)} (score {result.score}, nodes {result.nodes})")

        if not game.make_move(move):
            # Both branches hand over moves already checked against the board.
            raise RuntimeError(f"{actor} produced an illegal move: {move}")

        log_records.append(
            {
                "move_index": len(log_records),
                "actor": actor,
                "player": mover.name,
                "move": list(move.as_tuple()),
            }
        )

    print()
    print(game.render())
    winner = game.winner
    result_name = winner.name if winner is not None else "unfinished"
    if winner is not None:
        print("You win!" if winner == human else "The AI wins!")

    if args.log_file:
        metadata = {
            "human_player": int(human),
            "depth": args.depth,
            "result": result_name,
            "quit": quit_early,
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))

    return {"result": result_name, "moves": len(log_records)}


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Isolation in the console against AI.")
    parser.add_argument("--config", type=str, default=DEFAULT_CONFIG)
    parser.add_argument("--depth", type=int, help="AI search depth")
    parser.add_argument("--human-player", type=int, choices=[1, 2])
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--verbose", action="store_true", help="Show search debug logging")
    return parser


def resolve_args(args: argparse.Namespace) -> argparse.Namespace:
    cfg = load_yaml_config(args.config)
    args.depth = args.depth if args.depth is not None else cfg.get("depth", 3)
    args.human_player = args.human_player if args.human_player is not None else cfg.get("human_player", 2)
    args.log_file = args.log_file if args.log_file is not None else cfg.get("log_file")
    return args


def main(argv: Optional[List[str]] = None) -> None:
    args = resolve_args(build_arg_parser().parse_args(argv))
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    play_interactive(args)


if __name__ == "__main__":
    main()
