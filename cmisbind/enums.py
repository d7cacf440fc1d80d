"""Enumerations shared across cmisbind."""

from __future__ import annotations

from enum import Enum
from typing import Any


def _normalize(value: str) -> str:
    return value.strip().lower().replace("-", "").replace("_", "")


class BindingType(str, Enum):
    """Protocol bindings a repository client can be configured with.

    The set of members is stable; whether a member is implemented is decided
    by the binding selector, not here.
    """

    BROWSER = "browser"
    ATOMPUB = "atompub"
    WEBSERVICES = "webservices"
    CUSTOM = "custom"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value: object) -> BindingType | None:
        if not isinstance(value, str):
            return None
        normalized = _normalize(value)
        for member in cls:
            if member.value == normalized:
                return member
        return None

    @classmethod
    def cast(cls, value: Any) -> BindingType:
        """Return the member for ``value``. Raises ValueError for unknown values."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"{value!r} is not a valid {cls.__name__}")
        return cls(value)

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]
