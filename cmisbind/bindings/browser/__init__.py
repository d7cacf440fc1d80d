"""Browser (JSON over HTTP) binding."""

from cmisbind.bindings.browser.binding import CmisBrowserBinding
from cmisbind.bindings.browser.repository_service import AbstractBrowserBindingService, RepositoryService

__all__ = [
    "AbstractBrowserBindingService",
    "CmisBrowserBinding",
    "RepositoryService",
]
