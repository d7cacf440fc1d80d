"""cmisbind: binding selection and collaborator resolution for CMIS clients."""

from cmisbind.authentication import AuthenticationProvider, StandardAuthenticationProvider
from cmisbind.bindings import (
    ClassRegistry,
    CmisBinding,
    CmisBindingFactory,
    CmisBindingInterface,
    CmisBindingsHelper,
    CmisBrowserBinding,
    CmisInterface,
    Session,
    TypeDefinitionCache,
    default_registry,
)
from cmisbind.config import load_session_parameters
from cmisbind.converter import JsonConverter
from cmisbind.enums import BindingType
from cmisbind.session_parameter import SessionParameter

__version__ = "0.1.0"

__all__ = [
    "AuthenticationProvider",
    "BindingType",
    "ClassRegistry",
    "CmisBinding",
    "CmisBindingFactory",
    "CmisBindingInterface",
    "CmisBindingsHelper",
    "CmisBrowserBinding",
    "CmisInterface",
    "JsonConverter",
    "Session",
    "SessionParameter",
    "StandardAuthenticationProvider",
    "TypeDefinitionCache",
    "default_registry",
    "load_session_parameters",
]
