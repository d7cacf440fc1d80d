"""Name-based class lookup for configured collaborator implementations."""

from __future__ import annotations

import inspect
import logging
from importlib import import_module
from typing import Any

logger = logging.getLogger(__name__)


def class_name_of(value: Any) -> str:
    """Render a configured class value for error messages."""
    if inspect.isclass(value):
        return f"{value.__module__}.{value.__qualname__}"
    if value is None:
        return ""
    return str(value)


def import_class(path: str) -> type | None:
    """Import ``package.module.Class`` or ``package.module:Class``.

    Returns None when the module or attribute is missing or the target is
    not a class.
    """
    if ":" in path:
        module_name, _, attr_path = path.partition(":")
    else:
        module_name, _, attr_path = path.rpartition(".")
    if not module_name or not attr_path:
        return None
    try:
        target: Any = import_module(module_name)
        for part in attr_path.split("."):
            target = getattr(target, part)
    except (ImportError, AttributeError, ValueError):
        return None
    return target if inspect.isclass(target) else None


class ClassRegistry:
    """Explicit name -> class table consulted before dotted-path import."""

    def __init__(self) -> None:
        self._classes: dict[str, type] = {}

    def register(self, name: str, cls: type, replace: bool = False) -> None:
        if not inspect.isclass(cls):
            raise TypeError(f"Registry entry '{name}' must be a class, got {type(cls).__name__}")
        existing = self._classes.get(name)
        if existing is not None and existing is not cls and not replace:
            logger.warning(
                "Ignoring registration of %s for '%s'; already bound to %s",
                class_name_of(cls),
                name,
                class_name_of(existing),
            )
            return
        self._classes[name] = cls

    def unregister(self, name: str) -> type:
        if name not in self._classes:
            raise KeyError(f"Class '{name}' not registered")
        return self._classes.pop(name)

    def get(self, name: str) -> type | None:
        return self._classes.get(name)

    def list_names(self) -> list[str]:
        return sorted(self._classes.keys())

    def resolve(self, value: Any) -> type | None:
        """Resolve a configured value to a class.

        Classes pass through, strings are looked up here and then imported.
        Empty, non-string and unresolvable values give None.
        """
        if inspect.isclass(value):
            return value
        if not isinstance(value, str) or not value.strip():
            return None
        name = value.strip()
        registered = self._classes.get(name)
        if registered is not None:
            return registered
        return import_class(name)

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def __len__(self) -> int:
        return len(self._classes)

    def __repr__(self) -> str:
        return f"ClassRegistry(count={len(self)})"


default_registry = ClassRegistry()
