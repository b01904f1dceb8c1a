#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine
"""

import argparse
import os
import sys

# Add the project root to Python path to ensure imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from connect4_engine.debug import debug, DebugLevel
from connect4_engine.interfaces.cli import SimpleCLI
from connect4_engine.utils import ROWS, COLS

# --- Utility Functions ---

def configure_debug(args):
    """Configure debug level based on args.debug or args.debug_level."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)
    if args.log_file:
        debug.configure(log_file=args.log_file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Connect Four')
    parser.add_argument('--debug', action='store_true', help='Shortcut for --debug-level debug')
    parser.add_argument('--debug-level', default='warning',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging level')
    parser.add_argument('--log-file', default=None, help='Also write logs to this file')
    parser.add_argument('--width', type=int, default=COLS, help='Number of columns')
    parser.add_argument('--height', type=int, default=ROWS, help='Number of rows')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')
    subparsers.add_parser('play', help='Play a two-player game')
    benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark performance')
    benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                  help='Number of games to simulate')
    benchmark_parser.add_argument('--seed', type=int, default=None,
                                  help='Random seed for reproducible runs')
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_debug(args)

    if not args.command:
        parser.print_help()
        return 1

    cli = SimpleCLI(width=args.width, height=args.height)
    cli.args = args
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
