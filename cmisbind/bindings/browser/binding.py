"""SPI implementation of the browser binding."""

from __future__ import annotations

from cmisbind.bindings.browser.repository_service import RepositoryService
from cmisbind.bindings.helper import CmisBindingsHelper
from cmisbind.bindings.interfaces import CmisInterface
from cmisbind.bindings.session import Session


class CmisBrowserBinding(CmisInterface):
    """Browser binding SPI. Constructed once per session by the resolver."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self._helper = CmisBindingsHelper.for_session(session)
        self._repository_service: RepositoryService | None = None

    def get_repository_service(self) -> RepositoryService:
        if self._repository_service is None:
            self._repository_service = RepositoryService(self.session, helper=self._helper)
        return self._repository_service

    def clear_all_caches(self) -> None:
        self._repository_service = None

    def close(self) -> None:
        invoker = self.session.remove(CmisBindingsHelper.HTTP_INVOKER_OBJECT)
        if invoker is not None:
            invoker.close()
