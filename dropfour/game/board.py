"""
board.py - Board representation and the column-drop placement rule

This module implements the Board class which stores the grid of cells and
answers where a dropped piece lands. Win detection is not done here; it
needs the last move, which the board does not track (see rules.py).
"""

from typing import List, Sequence

import numpy as np

from dropfour.debug import debug
from dropfour.utils import (ROWS, COLS, NOT_FOUND, Player, InvalidColumn,
                            render_board_ascii)


class Board:
    """
    A fixed-size grid of cells, each Empty or occupied by a player.

    Row 0 is the visual top of the board and row ``height - 1`` the bottom,
    so pieces fall towards higher row indices.
    """

    def __init__(self, height: int = ROWS, width: int = COLS):
        """Initialize an empty board of the given size."""
        debug.debug(f"Initializing new {height}x{width} Board", "board")
        self.height = height
        self.width = width
        self.grid = np.full((height, width), Player.EMPTY.value, dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Player]]) -> 'Board':
        """
        Build a board from nested rows of players, top row first.

        Args:
            rows: Equal-length rows of Player values

        Returns:
            A new Board holding the given cells
        """
        height = len(rows)
        width = len(rows[0]) if height else 0
        board = cls(height, width)
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {width}")
            for c, player in enumerate(row):
                board.grid[r, c] = player.value
        return board

    def is_column_valid(self, col: int) -> bool:
        return 0 <= col < self.width

    def has_position(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def cell(self, row: int, col: int) -> Player:
        """Return the occupant of (row, col)."""
        return Player(int(self.grid[row, col]))

    def lowest_open_row(self, col: int) -> int:
        """
        Find the row a piece dropped into ``col`` would land in.

        Walks the column from the bottom row up to row 0 and returns the
        first empty row.

        Example (3 rows):

              0 1 2 3 4 5 6 7
            0 . . . . . . B .
            1 . . . . A . B .
            2 . . A B B . A .

            lowest_open_row(0) ->  2
            lowest_open_row(4) ->  0
            lowest_open_row(3) ->  1
            lowest_open_row(6) -> -1

        Raises:
            InvalidColumn: if ``col`` is outside [0, width)

        Returns:
            The row index, or NOT_FOUND if the column is full
        """
        if not self.is_column_valid(col):
            raise InvalidColumn(col, self.width)

        for row in range(self.height - 1, -1, -1):
            if self.grid[row, col] == Player.EMPTY.value:
                debug.trace(f"Lowest open space in column {col} is row {row}", "board")
                return row

        debug.trace(f"Column {col} has no open space", "board")
        return NOT_FOUND

    def place(self, row: int, col: int, player: Player) -> None:
        """
        Write ``player`` into (row, col).

        The cell is not checked for emptiness: callers take ``row`` from
        the immediately preceding lowest_open_row call.
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot place an EMPTY piece")
        if not self.is_column_valid(col):
            raise InvalidColumn(col, self.width)
        if not 0 <= row < self.height:
            raise ValueError(f"Row {row} is outside the board (0-{self.height - 1})")

        debug.trace(f"Placing {player} at ({row}, {col})", "board")
        self.grid[row, col] = player.value

    def is_full(self) -> bool:
        """True iff no empty cell remains anywhere on the board."""
        return not np.any(self.grid == Player.EMPTY.value)

    def empty_count(self) -> int:
        return int(np.count_nonzero(self.grid == Player.EMPTY.value))

    def column_heights(self) -> List[int]:
        """Number of pieces stacked in each column."""
        return [int(n) for n in np.count_nonzero(self.grid != Player.EMPTY.value, axis=0)]

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            A copy of the grid, safe to hand to renderers
        """
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
