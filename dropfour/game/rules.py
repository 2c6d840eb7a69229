"""
rules.py - Game state machine and win detection for dropfour

This module provides:
1. GameSession, which owns the board, the move history and the current
   phase, sequences turns and evaluates the board after every move
2. FrameView, the read-only snapshot a renderer draws each frame
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import numpy as np

from dropfour.debug import debug
from dropfour.game.board import Board
from dropfour.utils import (NOT_FOUND, BANNERS, GameConfig, Move, Phase, Player,
                            ColumnFull, GameOver, InvalidColumn,
                            InvalidPhaseTransition)

Position = Tuple[int, int]

_TURN_PHASES = (Phase.TURN_A, Phase.TURN_B)
_TERMINAL_PHASES = (Phase.WON_A, Phase.WON_B, Phase.DRAW)


@dataclass(frozen=True)
class FrameView:
    """Everything a renderer needs to draw one frame."""
    phase: Phase
    grid: np.ndarray
    highlight_column: Optional[int] = None
    banner: Optional[str] = None
    winning_line: Tuple[Position, ...] = field(default_factory=tuple)


class GameSession:
    """
    One game from the first drop to a win or a draw.

    The session starts in Phase.INIT and moves to player A's turn on the
    first tick. Each successful drop places a piece, appends a Move to the
    history and evaluates the board, all before the next input is read.
    Won and draw phases are terminal; start a new session to play again.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize a new game session.

        Args:
            config: Board size and win rule, defaults to GameConfig()
        """
        self.config = config or GameConfig()
        debug.debug(f"Initializing GameSession with {self.config}", "game")
        self.board = Board(self.config.board_height, self.config.board_width)
        self.phase = Phase.INIT
        self.winning_line: List[Position] = []
        self._history: List[Move] = []

    # --- State accessors ---

    @property
    def history(self) -> Tuple[Move, ...]:
        """All moves in the order they were made."""
        return tuple(self._history)

    @property
    def last_move(self) -> Optional[Move]:
        return self._history[-1] if self._history else None

    def moves_recent_first(self) -> List[Move]:
        return list(reversed(self._history))

    @property
    def current_player(self) -> Optional[Player]:
        """The player to move, or None outside of a turn phase."""
        return self.phase.player if self.phase in _TURN_PHASES else None

    @property
    def winner(self) -> Optional[Player]:
        if self.phase in (Phase.WON_A, Phase.WON_B):
            return self.phase.player
        return None

    def is_over(self) -> bool:
        return self.phase in _TERMINAL_PHASES

    # --- Transitions ---

    def tick(self, column: Optional[int] = None) -> bool:
        """
        Advance the game by one simulation step.

        At most one input event is consumed per tick. In Phase.INIT the
        event is dropped and the game moves to player A's turn.

        Args:
            column: Column clicked during this tick, if any

        Returns:
            True if a piece was placed during this tick
        """
        phase = self._checked_phase()

        if phase is Phase.INIT:
            self.phase = Phase.TURN_A
            debug.info("Game started, player A to move", "game")
            return False

        if column is None:
            return False

        return self.handle_input(column)

    def handle_input(self, column: int) -> bool:
        """
        Apply a click on ``column`` for the player whose turn it is.

        Out-of-range columns, full columns and clicks outside a turn phase
        are rejected without touching the board, history or phase.

        Returns:
            True if the move was made, False if it was rejected
        """
        try:
            self.drop(column)
        except InvalidColumn as e:
            debug.debug(f"Rejected click: {e}", "game")
        except ColumnFull as e:
            debug.debug(f"Rejected click: {e}", "game")
        except GameOver as e:
            debug.debug(f"Ignored click: {e}", "game")
        else:
            return True
        return False

    def drop(self, column: int) -> Move:
        """
        Drop the current player's piece into ``column``.

        The turn either completes entirely (place, record, evaluate) or
        raises before anything is mutated.

        Raises:
            GameOver: the session is not in a turn phase
            InvalidColumn: ``column`` is outside the board
            ColumnFull: ``column`` has no empty cell
            InvalidPhaseTransition: the phase is not a known Phase

        Returns:
            The Move that was recorded
        """
        phase = self._checked_phase()
        if phase not in _TURN_PHASES:
            raise GameOver(phase)

        player = phase.player
        column = int(column)
        row = self.board.lowest_open_row(column)
        if row == NOT_FOUND:
            raise ColumnFull(column)

        self.board.place(row, column, player)
        move = Move(player, row, column)
        self._history.append(move)
        debug.debug(f"Move {len(self._history)}: player {player} -> ({row}, {column})", "game")

        debug.start_timer("evaluate")
        next_phase, line = self._evaluate(move)
        debug.end_timer("evaluate", "game")

        self.phase = next_phase
        self.winning_line = line
        if next_phase in _TERMINAL_PHASES:
            debug.info(f"Game over after {len(self._history)} moves: {BANNERS[next_phase]}", "game")
        return move

    def _checked_phase(self) -> Phase:
        """Return the current phase, refusing anything that is not a Phase."""
        phase = self.phase
        if not isinstance(phase, Phase):
            debug.error(f"Invalid game state: {phase!r}", "game")
            raise InvalidPhaseTransition(f"Invalid game state: {phase!r}")
        return phase

    # --- Evaluation ---

    def evaluate(self, last_move: Move) -> Phase:
        """
        Decide the phase that follows ``last_move``.

        Checks, in order: the whole row of the move, the whole column of
        the move, both diagonals through the move (only when
        ``config.diagonal_wins`` is set), then whether the board is full.

        Returns:
            Won(player), Draw, or the other player's turn
        """
        phase, _ = self._evaluate(last_move)
        return phase

    def find_winning_line(self, last_move: Move) -> List[Position]:
        """Cells of the first winning run through ``last_move``, or []."""
        for line in self._lines_through(last_move.row, last_move.col):
            run = self._scan(line, last_move.player)
            if run:
                return run
        return []

    def _evaluate(self, last_move: Move) -> Tuple[Phase, List[Position]]:
        if last_move.player == Player.EMPTY:
            raise ValueError("Cannot evaluate a move made by EMPTY")

        run = self.find_winning_line(last_move)
        if run:
            return Phase.won_by(last_move.player), run

        if self.board.is_full():
            return Phase.DRAW, []

        return Phase.turn_of(last_move.player.other()), []

    def _lines_through(self, row: int, col: int) -> Iterable[List[Position]]:
        """Yield the full row, full column and (optionally) diagonals through a cell."""
        height, width = self.board.height, self.board.width

        yield [(row, c) for c in range(width)]
        yield [(r, col) for r in range(height)]

        if not self.config.diagonal_wins:
            return

        # Top-left to bottom-right
        k = min(row, col)
        r, c = row - k, col - k
        line = []
        while r < height and c < width:
            line.append((r, c))
            r, c = r + 1, c + 1
        yield line

        # Top-right to bottom-left
        k = min(row, width - 1 - col)
        r, c = row - k, col + k
        line = []
        while r < height and c >= 0:
            line.append((r, c))
            r, c = r + 1, c - 1
        yield line

    def _scan(self, line: List[Position], player: Player) -> List[Position]:
        """Walk ``line`` counting consecutive cells of ``player``; reset on mismatch."""
        run: List[Position] = []
        for r, c in line:
            if self.board.grid[r, c] == player.value:
                run.append((r, c))
                if len(run) == self.config.win_length:
                    return run
            else:
                run = []
        return []

    # --- Presentation ---

    def view(self, pointer_column: Optional[int] = None) -> FrameView:
        """
        Snapshot the session for a renderer.

        Args:
            pointer_column: Column under the pointer, already resolved by the
                input adapter; only highlighted during a turn and when in range
        """
        highlight = None
        if (pointer_column is not None and self.phase in _TURN_PHASES
                and self.board.is_column_valid(pointer_column)):
            highlight = pointer_column

        return FrameView(
            phase=self.phase,
            grid=self.board.get_state(),
            highlight_column=highlight,
            banner=BANNERS.get(self.phase),
            winning_line=tuple(self.winning_line),
        )

    def status(self) -> str:
        if self.phase in BANNERS:
            return BANNERS[self.phase]
        if self.phase in _TURN_PHASES:
            return f"Player {self.phase.player} to move"
        return "Waiting to start"

    def render(self) -> str:
        return f"{self.board.render()}\n{self.status()}"
