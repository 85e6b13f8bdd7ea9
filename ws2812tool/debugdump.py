"""Write raw binary data to a file for debugging."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path


def _default_directory() -> Path:
    return Path(sys.argv[0]).resolve().parent if sys.argv and sys.argv[0] else Path.cwd()


def _timestamp_name() -> str:
    now = datetime.now()
    return now.strftime("%Y%m%d_%H%M%S_") + f"{now.microsecond // 1000:03d}"


class BinaryDump:
    """A binary file that raw data is appended to.

    Without a path, the file is named after the current time and created in
    ``directory`` (by default, next to the running program).
    """

    def __init__(self, path: str | Path | None = None, *, directory: str | Path | None = None):
        if not path:
            base = Path(directory) if directory is not None else _default_directory()
            path = base / _timestamp_name()
        self.path = Path(path)
        self._file = open(self.path, "wb")

    def write(self, data: bytes) -> int:
        """Write data to the file and return the number of bytes written."""
        return self._file.write(data)

    def close(self) -> None:
        """Close the file; further closes do nothing."""
        self._file.close()

    def __enter__(self) -> BinaryDump:
        return self

    def __exit__(self, *args) -> None:
        self.close()