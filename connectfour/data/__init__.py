"""
connectfour.data - Persistence for Connect Four

This package stores the results of finished rounds between sessions.
"""

from connectfour.data.history import WinHistory

__all__ = ['WinHistory']
