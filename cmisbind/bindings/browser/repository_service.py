"""Repository service for the browser binding."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from cmisbind.bindings.helper import CmisBindingsHelper
from cmisbind.bindings.session import Session
from cmisbind.errors import CmisConnectionError, CmisInvalidArgumentError, CmisObjectNotFoundError, CmisRuntimeError
from cmisbind.session_parameter import SessionParameter

logger = logging.getLogger(__name__)

SELECTOR_REPOSITORY_INFO = "repositoryInfo"


class AbstractBrowserBindingService:
    """Shared request plumbing for browser binding services."""

    def __init__(self, session: Session, helper: CmisBindingsHelper | None = None) -> None:
        self.session = session
        self._helper = helper or CmisBindingsHelper.for_session(session)

    def get_service_url(self) -> str:
        url = self.session.get(SessionParameter.BROWSER_URL)
        if not url:
            raise CmisInvalidArgumentError("Browser URL is not set!")
        return str(url)

    def is_succinct(self) -> bool:
        return bool(self.session.get(SessionParameter.BROWSER_SUCCINCT, False))

    def read(self, url: str, params: dict[str, str] | None = None) -> Any:
        """GET ``url`` and return the decoded JSON body."""
        invoker = self._helper.get_http_invoker(self.session)
        converter = self._helper.get_json_converter(self.session)
        provider = self.session.get(SessionParameter.AUTHENTICATION_PROVIDER)
        auth = provider.get_auth(self.session) if provider is not None else None
        headers = provider.get_http_headers(self.session, url) if provider is not None else {}

        query = dict(params or {})
        if self.is_succinct():
            query["succinct"] = "true"

        try:
            response = invoker.get(url, params=query, headers=headers, auth=auth)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise CmisConnectionError(url, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise CmisConnectionError(url, str(exc) or type(exc).__name__) from exc

        logger.debug("GET %s -> %s", url, response.status_code)
        return converter.decode(response.content)


class RepositoryService(AbstractBrowserBindingService):
    """Repository information lookups."""

    def get_repository_infos(self) -> dict[str, Any]:
        """Return repository infos keyed by repository id."""
        data = self.read(self.get_service_url(), {"cmisselector": SELECTOR_REPOSITORY_INFO})
        if not isinstance(data, dict):
            raise CmisRuntimeError(f"Unexpected repository info payload: {type(data).__name__}")
        return data

    def get_repository_info(self, repository_id: str) -> Any:
        infos = self.get_repository_infos()
        if repository_id not in infos:
            raise CmisObjectNotFoundError(f"Repository '{repository_id}' not found")
        return infos[repository_id]
