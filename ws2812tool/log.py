"""Application-wide logger writing to a file and to a callback."""

from __future__ import annotations

import threading
from enum import IntEnum
from pathlib import Path
from typing import Callable, Optional, TextIO

MAX_MESSAGE_LENGTH = 2045


class LogLevel(IntEnum):
    """Log detail level."""

    NONE = 0
    TRACE = 1
    ALL = 2


class Logger:
    """Logger that appends formatted text to a file and passes it to a callback.

    Attributes:
        level: log detail level.
        log_to_file: whether messages go to the open file.
        flush: flush the file after every message.
        max_file_size: truncate the file once it grows past this size (0: no limit).
        callback: called with every logged text, e.g. to update a log view.
    """

    def __init__(self) -> None:
        self.path = ""
        self.level = LogLevel.NONE
        self.log_to_file = True
        self.flush = False
        self.max_file_size = 0
        self.callback: Optional[Callable[[str], None]] = None
        self._file: Optional[TextIO] = None
        self._lock = threading.RLock()

    def _open(self, mode: str) -> TextIO:
        return open(self.path, mode, encoding="utf-8")

    def set_file(self, path: str | Path) -> None:
        """Select the log file; an empty path turns file output off.

        Raises OSError if the file cannot be opened.
        """
        with self._lock:
            self.path = str(path) if path else ""
            self.level = LogLevel.NONE
            if self._file is not None:
                self._file.close()
                self._file = None
            if not self.path:
                return
            try:
                self._file = self._open("a+")
            except OSError:
                self.path = ""
                raise

    def close(self) -> None:
        """Close the log file."""
        with self._lock:
            if self._file is not None:
                self._file.close()
            self._file = None

    def log(self, message: str, *args) -> str:
        """Format the message printf-style, log it and return the logged text."""
        with self._lock:
            text = message % args if args else message
            text = text[:MAX_MESSAGE_LENGTH]
            if self.log_to_file and self._file is not None:
                self._file.write(text)
                if self.flush:
                    self._file.flush()
                if self.max_file_size and self._file.tell() > self.max_file_size:
                    self._file.close()
                    self._file = self._open("w+")
            if self.callback is not None:
                self.callback(text)
            return text


_instance = Logger()


def get_logger() -> Logger:
    """Return the application-wide logger."""
    return _instance