"""
dropfour - Two-player column-drop grid game (Connect Four style)

This package provides the board engine, the game state machine that
sequences turns and detects wins or draws, and pygame / console front ends
for playing a game interactively.
"""

# Version number
__version__ = '0.1.0'
