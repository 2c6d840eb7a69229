"""
dropfour.interfaces - User interfaces for dropfour

This package contains the pygame window and the command-line front end.
"""

# Don't import anything here so the console front end works without a display
__all__ = []
