"""
cli.py - Command-line interface for dropfour

This module parses the command line, configures logging and starts either
the pygame window or a two-player game in the terminal.
"""

import argparse
import sys
from typing import Callable, List, Optional

from dropfour.debug import debug, DebugLevel
from dropfour.game.rules import GameSession
from dropfour.utils import (ROWS, COLS, CONNECT_N, CELL_SIZE, GameConfig,
                            InvalidPhaseTransition)

COMMANDS = ('gui', 'console')

QUIT = -1
RESTART = -2


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"{value} is not a positive integer")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='dropfour', description='Two-player column-drop game')

    # Options shared by every command
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--rows', type=positive_int, default=ROWS, help='Board height')
    common.add_argument('--cols', type=positive_int, default=COLS, help='Board width')
    common.add_argument('--win-length', type=positive_int, default=CONNECT_N,
                        help='Pieces in a row needed to win')
    common.add_argument('--diagonals', action='store_true', help='Count diagonal runs as wins')
    common.add_argument('--debug', action='store_true', help='Enable debug logging')
    common.add_argument('--debug-level', default='info',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging level')
    common.add_argument('--log-file', default=None, help='Also write the log to this file')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    gui_parser = subparsers.add_parser('gui', parents=[common], help='Play in a window')
    gui_parser.add_argument('--cell-size', type=positive_int, default=CELL_SIZE,
                            help='Pixel size of one board cell')

    subparsers.add_parser('console', parents=[common], help='Play in the terminal')

    return parser


class SimpleCLI:
    """Command-line front end."""

    def __init__(self, input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        self.args = None
        self.config: Optional[GameConfig] = None
        self.input = input_fn
        self.output = output_fn

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        parser = build_parser()
        argv = list(sys.argv[1:] if argv is None else argv)
        if not argv or argv[0] not in COMMANDS + ('-h', '--help'):
            argv = ['gui'] + argv
        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

        try:
            self.config = GameConfig.from_args(self.args)
        except ValueError as e:
            parser.error(str(e))

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the command selected on the command line; return an exit status."""
        if not self.args:
            self.parse_args(argv)

        try:
            if self.args.command == 'console':
                self.play_console()
            else:
                self.play_gui()
        except InvalidPhaseTransition as e:
            debug.error(f"Fatal game error: {e}", "cli")
            return 1
        return 0

    def play_gui(self) -> None:
        from dropfour.interfaces.gui import GameWindow

        debug.info("Launching game window", "cli")
        GameWindow(self.config, cell_size=self.args.cell_size).run()

    def play_console(self) -> None:
        """Play a two-player game in the terminal."""
        width = self.config.board_width
        self.output("Starting a new game!")
        self.output(f"Enter a column number (0-{width - 1}) to drop a piece.")
        self.output("Other commands: 'q' to quit, 'r' to restart.")

        session = GameSession(self.config)
        session.tick()
        self.output(session.render())

        while not session.is_over():
            move = self.get_human_move(session)
            if move is None:
                continue
            if move == QUIT:
                self.output("Quitting game.")
                return
            if move == RESTART:
                session = GameSession(self.config)
                session.tick()
                self.output("Game restarted.")
                self.output(session.render())
                continue

            if session.tick(move):
                self.output(session.render())
            else:
                self.output(f"Column {move} is full.")

        self.output("Game over!")

    def get_human_move(self, session: GameSession) -> Optional[int]:
        """
        Read one command from the current player.

        Returns:
            A column index, QUIT, RESTART, or None for unusable input
        """
        width = session.board.width
        try:
            user_input = self.input(f"Player {session.current_player} (0-{width - 1}, q/r): ")
        except EOFError:
            return QUIT
        user_input = user_input.strip().lower()

        if user_input == 'q':
            return QUIT
        if user_input == 'r':
            return RESTART

        try:
            column = int(user_input)
        except ValueError:
            self.output("Invalid input. Please enter a column number or command.")
            return None

        if not session.board.is_column_valid(column):
            self.output(f"Column must be between 0 and {width - 1}.")
            return None
        return column


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
