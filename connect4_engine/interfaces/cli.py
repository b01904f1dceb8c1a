"""
cli.py - Command-line interface for the Connect Four engine

This module lets two people play at one terminal and offers a small
benchmark of the engine. It only talks to the engine through drop_piece,
cell reads and the current status.
"""

import argparse
import random
import sys
from typing import List, Optional, Union

from connect4_engine.debug import debug, DebugLevel
from connect4_engine.game.engine import GameEngine, MoveOutcome, new_game
from connect4_engine.game.rules import check_for_win, check_win_at_position
from connect4_engine.utils import ROWS, COLS, OutcomeKind, RejectReason

QUIT = "quit"
RESTART = "restart"

REJECTION_MESSAGES = {
    RejectReason.GAME_OVER: "The game is already over.",
    RejectReason.INVALID_COLUMN: "Column must be between 0 and {max_col}.",
    RejectReason.COLUMN_FULL: "Column {col} is full, pick another one.",
}


class SimpleCLI:
    """Terminal front end for two human players."""

    def __init__(self, width: int = COLS, height: int = ROWS):
        self.width = width
        self.height = height
        self.game = new_game(width, height)
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect Four CLI')
        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a two-player game')
        play_parser.add_argument('--debug', action='store_true', help='Enable debug mode')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark performance')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of games to simulate')
        benchmark_parser.add_argument('--seed', type=int, default=None,
                                      help='Random seed for reproducible runs')

        self.args = parser.parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def play_game(self) -> None:
        """Play a Connect Four game interactively."""
        print("Starting a new Connect Four game!")
        print(f"Enter column number (0-{self.width - 1}) to drop a piece.")
        print("Other commands: 'q' to quit, 'r' to restart.")

        self.game = new_game(self.width, self.height)
        print(self.game.render())

        while not self.game.current_status().is_game_over():
            move = self.get_human_move()

            if move is None:
                continue
            if move == QUIT:
                print("Quitting game.")
                return
            if move == RESTART:
                self.game = new_game(self.width, self.height)
                print("Game restarted.")
                print(self.game.render())
                continue

            outcome = self.game.drop_piece(move)
            if outcome.kind == OutcomeKind.REJECTED:
                print(self.describe_rejection(outcome, move))
                continue

            print(self.game.render())
            self.announce(outcome)

    def get_human_move(self) -> Union[int, str, None]:
        """
        Read one command from the current player.

        Returns:
            A column index, QUIT, RESTART, or None if the input was not understood
        """
        player = self.game.current_player
        user_input = input(f"Player {player} move (0-{self.width - 1}, q/r): ").strip().lower()

        if user_input == 'q':
            return QUIT
        if user_input == 'r':
            return RESTART

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or a command.")
            return None

    def describe_rejection(self, outcome: MoveOutcome, col) -> str:
        return REJECTION_MESSAGES[outcome.reason].format(col=col, max_col=self.width - 1)

    def announce(self, outcome: MoveOutcome) -> None:
        if outcome.kind == OutcomeKind.WIN:
            print(f"Player {outcome.player} won!")
        elif outcome.kind == OutcomeKind.TIE:
            print("This match is a tie")

    def benchmark(self) -> None:
        """Time random games and both win checks."""
        iterations = self.args.iterations
        rng = random.Random(self.args.seed)
        print(f"Running benchmark with {iterations} games...")

        games = []
        total_moves = 0
        debug.start_timer("game_simulation")
        for _ in range(iterations):
            game = self.play_random_game(rng)
            games.append(game)
            total_moves += game.moves_accepted
        simulation_time = debug.end_timer("game_simulation", "cli")
        print(f"Played {iterations} games with {total_moves} total moves: "
              f"{simulation_time:.6f} seconds total, "
              f"{simulation_time / max(total_moves, 1) * 1000:.6f} ms per move")

        for name in ("full_scan", "incremental"):
            debug.start_timer(name)
            for game in games:
                if game.last_move is None:
                    continue
                if name == "full_scan":
                    check_for_win(game.grid.cells, game.current_player)
                else:
                    row, col = game.last_move
                    check_win_at_position(game.grid.cells, row, col)
            elapsed = debug.end_timer(name, "cli")
            print(f"{name} win check on {len(games)} final positions: {elapsed:.6f} seconds")

    def play_random_game(self, rng: random.Random) -> GameEngine:
        game = new_game(self.width, self.height)
        while not game.current_status().is_game_over():
            game.drop_piece(rng.choice(game.valid_moves()))
        return game


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
