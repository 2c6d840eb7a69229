"""
dropfour.game - Core game mechanics

This package contains the board engine and the game state machine that
sequences turns and detects wins and draws.
"""

from dropfour.game.board import Board
from dropfour.game.rules import GameSession, FrameView

__all__ = ['Board', 'GameSession', 'FrameView']
