"""Per-variant binding constructors."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from cmisbind.authentication import AuthenticationProvider
from cmisbind.bindings.binding import CmisBinding
from cmisbind.bindings.browser import CmisBrowserBinding
from cmisbind.bindings.cache import TypeDefinitionCache
from cmisbind.bindings.helper import CmisBindingsHelper
from cmisbind.bindings.session import Session
from cmisbind.converter import JsonConverter
from cmisbind.errors import CmisInvalidArgumentError
from cmisbind.session_parameter import SessionParameter


class CmisBindingFactory:
    """Builds bindings with their default session parameters filled in."""

    DEFAULT_HTTP_INVOKER_CLASS: type = httpx.Client
    DEFAULT_JSON_CONVERTER_CLASS: type = JsonConverter

    def __init__(self, helper: CmisBindingsHelper | None = None) -> None:
        self._helper = helper

    def create_cmis_browser_binding(
        self,
        parameters: Mapping[str, Any],
        authentication_provider: AuthenticationProvider | None = None,
        type_definition_cache: TypeDefinitionCache | None = None,
    ) -> CmisBinding:
        """Create a browser binding on a fresh session.

        Raises:
            CmisInvalidArgumentError: If BROWSER_URL is not configured or the
                type definition cache size is not a positive integer.
        """
        session_parameters = dict(parameters)
        self._validate_browser_binding_parameters(session_parameters)
        session_parameters.setdefault(SessionParameter.BINDING_CLASS, CmisBrowserBinding)

        return CmisBinding(
            Session(),
            session_parameters,
            authentication_provider,
            type_definition_cache,
            helper=self._helper,
        )

    def _validate_browser_binding_parameters(self, parameters: dict[str, Any]) -> None:
        parameters.setdefault(SessionParameter.BROWSER_SUCCINCT, True)
        self._add_default_session_parameters(parameters)
        self._check(parameters, SessionParameter.BROWSER_URL, "Browser URL is not set!")

    def _add_default_session_parameters(self, parameters: dict[str, Any]) -> None:
        parameters.setdefault(SessionParameter.HTTP_INVOKER_CLASS, self.DEFAULT_HTTP_INVOKER_CLASS)
        parameters.setdefault(SessionParameter.JSON_CONVERTER_CLASS, self.DEFAULT_JSON_CONVERTER_CLASS)
        raw_size = parameters.get(SessionParameter.TYPE_DEFINITION_CACHE_SIZE)
        if raw_size is None:
            parameters[SessionParameter.TYPE_DEFINITION_CACHE_SIZE] = SessionParameter.DEFAULT_TYPE_DEFINITION_CACHE_SIZE
        else:
            parameters[SessionParameter.TYPE_DEFINITION_CACHE_SIZE] = self._cache_size(raw_size)

    @staticmethod
    def _cache_size(raw_size: Any) -> int:
        try:
            size = int(raw_size)
        except (TypeError, ValueError):
            size = 0
        if isinstance(raw_size, bool) or size < 1:
            raise CmisInvalidArgumentError(f'Invalid type definition cache size "{raw_size}"!')
        return size

    @staticmethod
    def _check(parameters: Mapping[str, Any], key: str, message: str) -> None:
        value = parameters.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise CmisInvalidArgumentError(message)
