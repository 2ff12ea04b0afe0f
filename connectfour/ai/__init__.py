"""
connectfour/ai/__init__.py - Computer opponent for Connect Four
"""

from connectfour.ai.heuristic import HeuristicPlayer, choose_column, find_winning_columns

__all__ = ['HeuristicPlayer', 'choose_column', 'find_winning_columns']
