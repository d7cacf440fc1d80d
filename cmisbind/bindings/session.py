"""Per-connection key/value store shared by a binding and its collaborators."""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from threading import RLock
from typing import Any


class Session:
    """Mutable store for session parameters and cached collaborators.

    ``lock`` is re-entrant so a collaborator built under it may resolve
    further collaborators from the same session.
    """

    def __init__(self) -> None:
        self.id = str(uuid.uuid4())
        self.lock = RLock()
        self._data: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def put(self, key: str, value: Any) -> None:
        self._data[key] = value

    def remove(self, key: str) -> Any:
        """Remove ``key`` and return its value, or None if it was not set."""
        return self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Session(id={self.id!r}, keys={len(self._data)})"
