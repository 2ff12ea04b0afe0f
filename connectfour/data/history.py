"""
history.py - Persistent record of round outcomes

Results are kept one per line in a plain text file ("<name> wins!" or
"Draw"). The session loads the file when it starts and rewrites it after each
round; writes go through a temporary file and a file lock so a crash or a
second process never leaves a half-written history behind.
"""

import os
import shutil
from typing import List, Optional

import filelock

from connectfour.debug import debug

DEFAULT_HISTORY_FILE = "winHistory.txt"
DRAW_RECORD = "Draw"


def safe_read_lines(file_path: str) -> List[str]:
    """
    Read a text file line by line with file locking.

    Returns:
        Non-empty lines of the file (empty list if the file doesn't exist)
    """
    if not os.path.exists(file_path):
        return []

    with filelock.FileLock(f"{file_path}.lock"):
        with open(file_path, 'r', encoding='utf-8') as f:
            return [line.rstrip("\r\n") for line in f if line.strip()]


def safe_write_lines(file_path: str, lines: List[str]) -> None:
    """Replace a text file's contents atomically with the given lines."""
    with filelock.FileLock(f"{file_path}.lock"):
        temp_file = f"{file_path}.tmp"
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                for line in lines:
                    f.write(f"{line}\n")
            shutil.move(temp_file, file_path)
        finally:
            if os.path.exists(temp_file):
                os.remove(temp_file)


class WinHistory:
    """Outcome log owned by a playing session."""

    def __init__(self, path: Optional[str] = None):
        self.path = path or DEFAULT_HISTORY_FILE
        self._records: List[str] = []

    @property
    def records(self) -> List[str]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def load(self) -> List[str]:
        """Load previously saved results, replacing anything in memory."""
        self._records = safe_read_lines(self.path)
        debug.debug(f"Loaded {len(self._records)} results from {self.path}", "data")
        return self.records

    def append(self, record: str) -> None:
        """Save the history with a new result; memory is only updated once the file is."""
        records = self._records + [record]
        try:
            safe_write_lines(self.path, records)
        except OSError as e:
            debug.error(f"Error writing to {self.path}: {e}", "data")
            raise
        self._records = records
        debug.info(f"Recorded result: {record}", "data")

    def record_win(self, name: str) -> None:
        self.append(f"{name} wins!")

    def record_draw(self) -> None:
        self.append(DRAW_RECORD)

    def clear(self) -> None:
        """Forget all results and delete the history file."""
        self._records = []
        with filelock.FileLock(f"{self.path}.lock"):
            if os.path.exists(self.path):
                os.remove(self.path)
        debug.info(f"Cleared history at {self.path}", "data")
