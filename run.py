#!/usr/bin/env python3
"""
run.py - Main entry point for dropfour

Usage:
    python run.py                  # open the game window (8x8, four in a row)
    python run.py gui --rows 6 --cols 7
    python run.py console --win-length 3 --debug
"""

import sys

from dropfour.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())
