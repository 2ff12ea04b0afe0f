"""
connectfour.interfaces - User interfaces for Connect Four

This package contains the console interface for playing sessions and
inspecting the win history.
"""

# Don't import anything here to avoid circular imports
__all__ = []
