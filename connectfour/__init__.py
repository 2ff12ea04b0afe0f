"""
connectfour - Connect Four game with a heuristic computer opponent

This package provides the board engine, the one-move heuristic opponent,
round orchestration, a persistent win history and a console interface.
"""

# Version number
__version__ = '1.0.0'
