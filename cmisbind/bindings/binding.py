"""Binding object handed to repository clients."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cmisbind.authentication import AuthenticationProvider, StandardAuthenticationProvider
from cmisbind.bindings.cache import TypeDefinitionCache
from cmisbind.bindings.helper import CmisBindingsHelper
from cmisbind.bindings.interfaces import CmisBindingInterface, CmisInterface
from cmisbind.bindings.session import Session
from cmisbind.enums import BindingType
from cmisbind.errors import MissingConfigurationError, MissingParameterError
from cmisbind.session_parameter import SessionParameter


class CmisBinding(CmisBindingInterface):
    """Binding that delegates protocol work to the session's SPI object.

    The constructor copies the parameters into ``session``; the SPI itself is
    only created when a service is first requested.
    """

    def __init__(
        self,
        session: Session,
        parameters: Mapping[str, Any],
        authentication_provider: AuthenticationProvider | None = None,
        type_definition_cache: TypeDefinitionCache | None = None,
        helper: CmisBindingsHelper | None = None,
    ) -> None:
        if not parameters:
            raise MissingConfigurationError()
        if parameters.get(SessionParameter.BINDING_CLASS) is None:
            raise MissingParameterError(
                SessionParameter.BINDING_CLASS,
                "Session parameters do not contain a SPI class name!",
            )

        self._session = session
        self._helper = helper or CmisBindingsHelper()

        for key, value in parameters.items():
            session.put(key, value)

        session.put(CmisBindingsHelper.HELPER_OBJECT, self._helper)
        session.put(
            SessionParameter.AUTHENTICATION_PROVIDER,
            authentication_provider or StandardAuthenticationProvider(),
        )
        if type_definition_cache is None:
            size = int(
                parameters.get(
                    SessionParameter.TYPE_DEFINITION_CACHE_SIZE,
                    SessionParameter.DEFAULT_TYPE_DEFINITION_CACHE_SIZE,
                )
            )
            type_definition_cache = TypeDefinitionCache(max_size=size)
        session.put(CmisBindingsHelper.TYPE_DEFINITION_CACHE, type_definition_cache)

    def get_session(self) -> Session:
        return self._session

    def get_binding_type(self) -> BindingType:
        raw = self._session.get(SessionParameter.BINDING_TYPE)
        if raw is None:
            return BindingType.CUSTOM
        return BindingType.cast(raw)

    def get_spi(self) -> CmisInterface:
        return self._helper.get_spi(self._session)

    def get_repository_service(self) -> Any:
        return self.get_spi().get_repository_service()

    def get_type_definition_cache(self) -> TypeDefinitionCache:
        return self._session.get(CmisBindingsHelper.TYPE_DEFINITION_CACHE)

    def get_authentication_provider(self) -> AuthenticationProvider:
        return self._session.get(SessionParameter.AUTHENTICATION_PROVIDER)

    def clear_all_caches(self) -> None:
        self.get_type_definition_cache().clear()
        spi = self._session.get(CmisBindingsHelper.SPI_OBJECT)
        if spi is not None:
            spi.clear_all_caches()

    def close(self) -> None:
        spi = self._session.get(CmisBindingsHelper.SPI_OBJECT)
        if spi is not None:
            spi.close()

    def __repr__(self) -> str:
        return f"CmisBinding(session={self._session.id!r})"
