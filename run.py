#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four

Examples:

    # Play against the heuristic computer opponent
    python run.py play --ai heuristic

    # Two human players, debug logging on
    python run.py play --ai none --debug

    # Show or clear the results of past rounds
    python run.py history
    python run.py history --clear
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
