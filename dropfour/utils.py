"""
utils.py - Shared constants, enumerations and records for dropfour

This module defines the player identities, the game phases, the move record,
the game configuration and the error taxonomy used by the board engine and
the game state machine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

import numpy as np

# Game constants
ROWS = 8
COLS = 8
CONNECT_N = 4  # Number of pieces in a row to win
CELL_SIZE = 90  # Pixel size of one board cell in the GUI

NOT_FOUND = -1  # Returned by Board.lowest_open_row for a full column


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    A = 1    # First player
    B = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.A:
            return Player.B
        elif self == Player.B:
            return Player.A
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return "."
        return self.name


class Phase(Enum):
    """The authoritative status of a game session."""
    INIT = 0
    TURN_A = 1
    TURN_B = 2
    WON_A = 3
    WON_B = 4
    DRAW = 5

    @classmethod
    def turn_of(cls, player: Player) -> 'Phase':
        return _TURN_PHASES[player]

    @classmethod
    def won_by(cls, player: Player) -> 'Phase':
        return _WON_PHASES[player]

    @property
    def player(self) -> Optional[Player]:
        """The player whose turn it is, or who won; None otherwise."""
        if self in (Phase.TURN_A, Phase.WON_A):
            return Player.A
        if self in (Phase.TURN_B, Phase.WON_B):
            return Player.B
        return None

    def is_turn(self) -> bool:
        return self in (Phase.TURN_A, Phase.TURN_B)

    def is_terminal(self) -> bool:
        """Won and draw phases are never left."""
        return self in (Phase.WON_A, Phase.WON_B, Phase.DRAW)


_TURN_PHASES = {Player.A: Phase.TURN_A, Player.B: Phase.TURN_B}
_WON_PHASES = {Player.A: Phase.WON_A, Player.B: Phase.WON_B}

BANNERS = {
    Phase.WON_A: "Player A wins!",
    Phase.WON_B: "Player B wins!",
    Phase.DRAW: "Draw!",
}


class Move(NamedTuple):
    """One completed placement."""
    player: Player
    row: int
    col: int


@dataclass(frozen=True)
class GameConfig:
    """
    Board dimensions and win rule for one game.

    Attributes:
        board_height: Number of rows
        board_width: Number of columns
        win_length: Consecutive same-player cells needed to win
        diagonal_wins: Also count diagonal runs (off by default)
    """
    board_height: int = ROWS
    board_width: int = COLS
    win_length: int = CONNECT_N
    diagonal_wins: bool = False

    def __post_init__(self):
        if self.board_height < 1 or self.board_width < 1:
            raise ValueError(
                f"Board dimensions must be positive, got {self.board_height}x{self.board_width}")
        if self.win_length < 1:
            raise ValueError(f"win_length must be positive, got {self.win_length}")
        if self.win_length > max(self.board_height, self.board_width):
            raise ValueError(
                f"win_length {self.win_length} does not fit a "
                f"{self.board_height}x{self.board_width} board")

    @classmethod
    def from_args(cls, args) -> 'GameConfig':
        """Build a config from an argparse namespace, falling back to defaults."""
        return cls(
            board_height=getattr(args, 'rows', None) or ROWS,
            board_width=getattr(args, 'cols', None) or COLS,
            win_length=getattr(args, 'win_length', None) or CONNECT_N,
            diagonal_wins=bool(getattr(args, 'diagonals', False)),
        )


class DropFourError(Exception):
    """Base class for game errors."""


class InvalidColumn(DropFourError, ValueError):
    """A column index outside [0, width)."""

    def __init__(self, column: int, width: int):
        super().__init__(f"Column {column} is outside the board (0-{width - 1})")
        self.column = column
        self.width = width


class ColumnFull(DropFourError):
    """No empty cell remains in the chosen column."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is full")
        self.column = column


class GameOver(DropFourError):
    """A move was attempted outside of a turn phase."""

    def __init__(self, phase: Phase):
        super().__init__(f"No move can be made in phase {phase.name}")
        self.phase = phase


class InvalidPhaseTransition(DropFourError):
    """The session reached a phase value it does not recognise."""


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a board grid as ASCII art.

    Args:
        grid: 2D array of Player values

    Returns:
        ASCII representation with column numbers underneath
    """
    height, width = grid.shape
    symbols = {p.value: str(p) for p in Player}
    border = "+" + "-" * (width * 2 + 1) + "+"

    lines = [border]
    for row in range(height):
        cells = " ".join(symbols[int(v)] for v in grid[row])
        lines.append(f"| {cells} |")
    lines.append(border)
    lines.append("  " + " ".join(str(col % 10) for col in range(width)))

    return "\n".join(lines)
