"""List of most recently used files."""

from __future__ import annotations

import os
from collections import deque
from typing import Iterable, Iterator


class Mru:
    """Most recently used items, newest last, limited to LIMIT entries."""

    LIMIT = 20

    def __init__(self) -> None:
        self._items: deque[str] = deque()

    def add(self, item: str) -> None:
        """Put item on top, removing earlier occurrences and the oldest overflow."""
        self._items = deque(entry for entry in self._items if entry != item)
        self._items.append(item)
        while len(self._items) > self.LIMIT:
            self._items.popleft()

    def clear(self) -> None:
        """Remove all items."""
        self._items.clear()

    def load_from(self, items: Iterable[object]) -> None:
        """Replace the list with up to LIMIT items taken from the start of items."""
        self._items = deque(str(item) for _, item in zip(range(self.LIMIT), items))

    def save_to(self) -> list[str]:
        """Return the items, oldest first, for storing."""
        return list(self._items)

    def remove_obsolete_files(self) -> None:
        """Drop items that are not existing files."""
        self._items = deque(entry for entry in self._items if os.path.isfile(entry))

    def last_dir(self) -> str:
        """Return the directory of the newest item, or "" when empty."""
        return os.path.dirname(self._items[-1]) if self._items else ""

    def last_file(self) -> str:
        """Return the newest item, or "" when empty."""
        return self._items[-1] if self._items else ""

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)