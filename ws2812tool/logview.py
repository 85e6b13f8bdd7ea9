"""Buffered log display, fed from the logger callback."""

from __future__ import annotations

import threading
from collections import deque
from pathlib import Path

DEFAULT_MAX_LINES = 1000


class LogView:
    """Collects logged text and shows it, keeping at most ``max_lines`` lines.

    ``on_log`` only queues text and may be called from any thread; ``flush``
    moves the queued text into the displayed text. The queue itself never holds
    more than ``max_lines`` entries: the oldest are dropped.
    """

    def __init__(self, max_lines: int = DEFAULT_MAX_LINES) -> None:
        self.max_lines = max_lines
        self._pending: deque[str] = deque()
        self._lines: list[str] = []
        self._lock = threading.Lock()

    def on_log(self, text: str) -> None:
        """Queue a piece of logged text for display."""
        with self._lock:
            self._pending.append(text)
            while len(self._pending) > self.max_lines:
                self._pending.popleft()

    def flush(self) -> int:
        """Display the queued text and return how many entries were added."""
        with self._lock:
            if not self._pending:
                return 0
            count = len(self._pending)
            text = "".join(self._lines) + "".join(self._pending)
            self._pending.clear()
            lines = text.splitlines(keepends=True)
            excess = len(lines) - self.max_lines
            self._lines = lines[excess:] if excess > 0 else lines
            return count

    @property
    def text(self) -> str:
        """The displayed text."""
        return "".join(self._lines)

    @property
    def lines(self) -> list[str]:
        """The displayed lines, without line endings."""
        return [line.rstrip("\r\n") for line in self._lines]

    def clear(self) -> None:
        """Remove the displayed text."""
        with self._lock:
            self._lines = []

    def save(self, path: str | Path) -> None:
        """Write the displayed text to a file."""
        Path(path).write_text(self.text, encoding="utf-8")