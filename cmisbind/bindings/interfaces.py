"""Capability contracts checked by the binding selector and the resolver."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cmisbind.bindings.cache import TypeDefinitionCache
    from cmisbind.bindings.session import Session
    from cmisbind.enums import BindingType


class CmisInterface(ABC):
    """Contract for SPI objects that implement a binding's protocol calls."""

    @abstractmethod
    def get_repository_service(self) -> Any:
        """Return the repository service of this binding."""

    @abstractmethod
    def clear_all_caches(self) -> None:
        """Drop any protocol-level caches."""

    @abstractmethod
    def close(self) -> None:
        """Release transport resources."""


class CmisBindingInterface(ABC):
    """Contract every binding handed out by the selector satisfies."""

    @abstractmethod
    def get_session(self) -> Session:
        """Return the session backing this binding."""

    @abstractmethod
    def get_binding_type(self) -> BindingType:
        """Return the binding type this binding speaks."""

    @abstractmethod
    def get_repository_service(self) -> Any:
        """Return the repository service."""

    @abstractmethod
    def get_type_definition_cache(self) -> TypeDefinitionCache:
        """Return the type definition cache shared by this binding."""

    @abstractmethod
    def clear_all_caches(self) -> None:
        """Clear type definition and SPI caches."""

    @abstractmethod
    def close(self) -> None:
        """Release resources held by the binding."""
