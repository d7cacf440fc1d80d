"""Binding selection, collaborator resolution and the browser binding."""

import httpx

from cmisbind.bindings.binding import CmisBinding
from cmisbind.bindings.browser import CmisBrowserBinding, RepositoryService
from cmisbind.bindings.cache import TypeDefinitionCache
from cmisbind.bindings.factory import CmisBindingFactory
from cmisbind.bindings.helper import CmisBindingsHelper, CollaboratorDescriptor
from cmisbind.bindings.interfaces import CmisBindingInterface, CmisInterface
from cmisbind.bindings.registry import ClassRegistry, default_registry, import_class
from cmisbind.bindings.session import Session
from cmisbind.converter import JsonConverter

default_registry.register("browser", CmisBrowserBinding)
default_registry.register("httpx", httpx.Client)
default_registry.register("json", JsonConverter)

__all__ = [
    "ClassRegistry",
    "CmisBinding",
    "CmisBindingFactory",
    "CmisBindingInterface",
    "CmisBindingsHelper",
    "CmisBrowserBinding",
    "CmisInterface",
    "CollaboratorDescriptor",
    "RepositoryService",
    "Session",
    "TypeDefinitionCache",
    "default_registry",
    "import_class",
]
