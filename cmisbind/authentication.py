"""Authentication providers consulted by bindings before each request."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import httpx

from cmisbind.session_parameter import SessionParameter

if TYPE_CHECKING:
    from cmisbind.bindings.session import Session


class AuthenticationProvider(ABC):
    """Interface for supplying credentials to the HTTP invoker."""

    @abstractmethod
    def get_auth(self, session: Session) -> httpx.Auth | None:
        """Return the httpx auth object for requests made in ``session``."""

    def get_http_headers(self, session: Session, url: str) -> dict[str, str]:
        """Return extra headers for a request to ``url``."""
        return {}


class StandardAuthenticationProvider(AuthenticationProvider):
    """HTTP basic authentication from the USER and PASSWORD parameters."""

    def get_auth(self, session: Session) -> httpx.Auth | None:
        user = session.get(SessionParameter.USER)
        if not user:
            return None
        password = session.get(SessionParameter.PASSWORD) or ""
        return httpx.BasicAuth(str(user), str(password))
