"""Binding selection and per-session collaborator resolution.

``CmisBindingsHelper.create_binding`` turns session parameters into a
binding. Bindings then call ``get_spi``, ``get_http_invoker`` and
``get_json_converter`` to obtain their collaborators, each built at most once
per session and cached in it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from cmisbind.bindings.interfaces import CmisBindingInterface, CmisInterface
from cmisbind.bindings.registry import ClassRegistry, class_name_of, default_registry
from cmisbind.enums import BindingType
from cmisbind.errors import (
    BindingNotImplementedError,
    CapabilityMismatchError,
    InvalidBindingTypeError,
    InvalidClassError,
    MissingConfigurationError,
    MissingParameterError,
    ObjectCreationError,
)
from cmisbind.session_parameter import SessionParameter

if TYPE_CHECKING:
    from cmisbind.authentication import AuthenticationProvider
    from cmisbind.bindings.cache import TypeDefinitionCache
    from cmisbind.bindings.factory import CmisBindingFactory
    from cmisbind.bindings.session import Session
    from cmisbind.converter import JsonConverter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CollaboratorDescriptor:
    """How one collaborator is configured, checked, built and cached."""

    label: str
    slot_key: str
    class_key: str
    capability: type | None = None
    pass_session: bool = False


class CmisBindingsHelper:
    """Methods used in multiple places within the bindings implementation."""

    HTTP_INVOKER_OBJECT = "cmisbind.binding.httpinvoker.object"
    SPI_OBJECT = "cmisbind.binding.spi.object"
    TYPE_DEFINITION_CACHE = "cmisbind.binding.typeDefinitionCache"
    HELPER_OBJECT = "cmisbind.binding.helper"

    SPI = CollaboratorDescriptor(
        label="binding",
        slot_key=SPI_OBJECT,
        class_key=SessionParameter.BINDING_CLASS,
        capability=CmisInterface,
        pass_session=True,
    )
    HTTP_INVOKER = CollaboratorDescriptor(
        label="HTTP invoker",
        slot_key=HTTP_INVOKER_OBJECT,
        class_key=SessionParameter.HTTP_INVOKER_CLASS,
        capability=httpx.Client,
    )
    JSON_CONVERTER = CollaboratorDescriptor(
        label="JSON converter",
        slot_key=SessionParameter.JSON_CONVERTER,
        class_key=SessionParameter.JSON_CONVERTER_CLASS,
    )

    # Binding types without an entry are recognized but not implemented.
    _BINDING_BUILDERS: dict[BindingType, str] = {
        BindingType.BROWSER: "create_cmis_browser_binding",
    }

    def __init__(self, registry: ClassRegistry | None = None) -> None:
        self.registry = registry if registry is not None else default_registry

    def create_binding(
        self,
        parameters: Mapping[str, Any] | None,
        authentication_provider: AuthenticationProvider | None = None,
        type_definition_cache: TypeDefinitionCache | None = None,
    ) -> CmisBindingInterface:
        """Create the binding selected by the BINDING_TYPE parameter.

        Args:
            parameters: Session parameters. Not modified.
            authentication_provider: Optional provider handed to the binding.
            type_definition_cache: Optional cache shared with other bindings.

        Returns:
            The constructed binding.

        Raises:
            MissingConfigurationError: If ``parameters`` is empty.
            MissingParameterError: If no binding type is configured.
            InvalidBindingTypeError: If the binding type is unknown.
            BindingNotImplementedError: If the binding type has no implementation.
        """
        if not parameters:
            raise MissingConfigurationError()

        raw_type = parameters.get(SessionParameter.BINDING_TYPE)
        if raw_type is None:
            raise MissingParameterError(
                SessionParameter.BINDING_TYPE,
                "Required binding type is not configured!",
            )

        try:
            binding_type = BindingType.cast(raw_type)
        except ValueError:
            raise InvalidBindingTypeError(raw_type) from None

        binding: Any = None
        builder_name = self._BINDING_BUILDERS.get(binding_type)
        if builder_name is not None:
            builder = getattr(self._get_binding_factory(), builder_name)
            binding = builder(parameters, authentication_provider, type_definition_cache)

        if not isinstance(binding, CmisBindingInterface):
            raise BindingNotImplementedError(raw_type)

        logger.debug("Created %s binding for session %s", binding_type.value, binding.get_session().id)
        return binding

    def get_spi(self, session: Session) -> CmisInterface:
        """Return the session's SPI object, creating it on first use."""
        return self.resolve(session, self.SPI)

    def get_http_invoker(self, session: Session) -> httpx.Client:
        """Return the session's HTTP invoker, creating it on first use."""
        return self.resolve(session, self.HTTP_INVOKER)

    def get_json_converter(self, session: Session) -> JsonConverter:
        """Return the session's JSON converter, creating it on first use."""
        return self.resolve(session, self.JSON_CONVERTER)

    def resolve(self, session: Session, descriptor: CollaboratorDescriptor) -> Any:
        """Get-or-create the collaborator described by ``descriptor``.

        A cached instance is returned as is; the configured class is only
        consulted when the slot is empty.
        """
        with session.lock:
            existing = session.get(descriptor.slot_key)
            if existing is not None:
                return existing

            configured = session.get(descriptor.class_key)
            class_name = class_name_of(configured)
            cls = self.registry.resolve(configured)
            if cls is None:
                raise InvalidClassError(descriptor.label, class_name)

            if descriptor.capability is not None and not issubclass(cls, descriptor.capability):
                raise CapabilityMismatchError(descriptor.label, class_name, descriptor.capability)

            try:
                instance = cls(session) if descriptor.pass_session else cls()
            except Exception as exc:
                raise ObjectCreationError(class_name) from exc

            session.put(descriptor.slot_key, instance)
            logger.debug("Created %s %s for session %s", descriptor.label, class_name, session.id)
            return instance

    def _get_binding_factory(self) -> CmisBindingFactory:
        from cmisbind.bindings.factory import CmisBindingFactory

        return CmisBindingFactory(helper=self)

    @classmethod
    def for_session(cls, session: Session) -> CmisBindingsHelper:
        """Return the helper a binding stored in ``session``, or a default one."""
        helper = session.get(cls.HELPER_OBJECT)
        return helper if isinstance(helper, CmisBindingsHelper) else cls()
