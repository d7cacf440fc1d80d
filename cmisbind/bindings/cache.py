"""In-memory cache for repository type definitions."""

from __future__ import annotations

from collections import OrderedDict
from threading import Lock
from typing import Any


class TypeDefinitionCache:
    """Bounded LRU cache keyed by (repository id, type id)."""

    def __init__(self, max_size: int = 100) -> None:
        if max_size < 1:
            raise ValueError("max_size must be >= 1")
        self.max_size = max_size
        self._lock = Lock()
        self._entries: OrderedDict[tuple[str, str], Any] = OrderedDict()

    def get(self, repository_id: str, type_id: str) -> Any | None:
        key = (repository_id, type_id)
        with self._lock:
            if key not in self._entries:
                return None
            self._entries.move_to_end(key)
            return self._entries[key]

    def put(self, repository_id: str, type_id: str, definition: Any) -> None:
        key = (repository_id, type_id)
        with self._lock:
            self._entries[key] = definition
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_size:
                self._entries.popitem(last=False)

    def remove(self, repository_id: str, type_id: str) -> None:
        with self._lock:
            self._entries.pop((repository_id, type_id), None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
