"""Exceptions raised by cmisbind.

Every message carries the raw configured value that caused the failure so a
misconfigured session can be diagnosed from the error alone.
"""

from __future__ import annotations

from typing import Any


class CmisBaseError(Exception):
    """Base exception for all cmisbind errors."""

    pass


class CmisRuntimeError(CmisBaseError):
    """Raised when a binding or one of its collaborators cannot be resolved."""

    pass


class MissingConfigurationError(CmisRuntimeError):
    """Raised when no session parameters were given at all."""

    def __init__(self, message: str = "Session parameters must be set!") -> None:
        super().__init__(message)


class MissingParameterError(CmisRuntimeError):
    """Raised when a required session parameter is absent."""

    def __init__(self, parameter: str, message: str | None = None) -> None:
        self.parameter = parameter
        super().__init__(message or f"Required session parameter '{parameter}' is not configured!")


class InvalidBindingTypeError(CmisRuntimeError):
    """Raised when the configured binding type is not a known binding type."""

    def __init__(self, binding_type: Any) -> None:
        self.binding_type = binding_type
        super().__init__(f"Invalid binding type given: {binding_type}")


class BindingNotImplementedError(CmisRuntimeError):
    """Raised when a known binding type has no implementation in this build."""

    def __init__(self, binding_type: Any) -> None:
        self.binding_type = binding_type
        super().__init__(f'The given binding "{binding_type}" is not yet implemented.')


class InvalidClassError(CmisRuntimeError):
    """Raised when a configured class is empty or does not resolve to a class."""

    def __init__(self, label: str, class_name: str) -> None:
        self.label = label
        self.class_name = class_name
        super().__init__(f'The given {label} class "{class_name}" is not valid!')


class CapabilityMismatchError(CmisRuntimeError):
    """Raised when a configured class does not implement the required contract."""

    def __init__(self, label: str, class_name: str, capability: type) -> None:
        self.label = label
        self.class_name = class_name
        self.capability = capability
        super().__init__(
            f'The given {label} class "{class_name}" does not implement required {capability.__name__}!'
        )


class ObjectCreationError(CmisRuntimeError):
    """Raised when instantiating a configured class fails.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, class_name: str) -> None:
        self.class_name = class_name
        super().__init__(f'Could not create object of type "{class_name}"!')


class CmisInvalidArgumentError(CmisBaseError):
    """Raised when a binding factory receives unusable arguments."""

    pass


class CmisConnectionError(CmisBaseError):
    """Raised when the repository endpoint cannot be reached."""

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(f"Request to {url} failed: {message}")


class CmisObjectNotFoundError(CmisBaseError):
    """Raised when a requested repository object does not exist."""

    pass
