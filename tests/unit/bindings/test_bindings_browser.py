from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from cmisbind import CmisBindingsHelper, CmisBrowserBinding, SessionParameter
from cmisbind.authentication import AuthenticationProvider
from cmisbind.bindings.browser import RepositoryService
from cmisbind.bindings.registry import ClassRegistry
from cmisbind.errors import CmisConnectionError, CmisObjectNotFoundError, CmisRuntimeError

REPOSITORY_INFOS = {
    "A1": {"repositoryId": "A1", "repositoryName": "Main"},
    "B2": {"repositoryId": "B2", "repositoryName": "Archive"},
}

InvokerFactory = Callable[[Callable[[httpx.Request], httpx.Response]], type[httpx.Client]]


class _TokenProvider(AuthenticationProvider):
    def get_auth(self, session):  # type: ignore[no-untyped-def]
        return None

    def get_http_headers(self, session, url: str) -> dict[str, str]:  # type: ignore[no-untyped-def]
        return {"Authorization": "Bearer t0k3n"}


def test_browser_repository_infos_round_trip(
    browser_parameters: dict[str, Any], mock_invoker_class: InvokerFactory
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=REPOSITORY_INFOS)

    browser_parameters[SessionParameter.HTTP_INVOKER_CLASS] = mock_invoker_class(handler)
    browser_parameters[SessionParameter.USER] = "admin"
    browser_parameters[SessionParameter.PASSWORD] = "secret"
    binding = CmisBindingsHelper().create_binding(browser_parameters)

    service = binding.get_repository_service()
    assert isinstance(service, RepositoryService)
    assert service.get_repository_infos() == REPOSITORY_INFOS
    assert service.get_repository_info("B2")["repositoryName"] == "Archive"

    request = seen[0]
    assert request.method == "GET"
    assert request.url.params["cmisselector"] == "repositoryInfo"
    assert request.url.params["succinct"] == "true"
    assert request.headers["Authorization"].startswith("Basic ")
    binding.close()


def test_browser_reuses_session_collaborators(
    browser_parameters: dict[str, Any], mock_invoker_class: InvokerFactory
) -> None:
    browser_parameters[SessionParameter.HTTP_INVOKER_CLASS] = mock_invoker_class(
        lambda request: httpx.Response(200, json=REPOSITORY_INFOS)
    )
    binding = CmisBindingsHelper().create_binding(browser_parameters)
    session = binding.get_session()
    service = binding.get_repository_service()
    service.get_repository_infos()
    invoker = session.get(CmisBindingsHelper.HTTP_INVOKER_OBJECT)
    converter = session.get(SessionParameter.JSON_CONVERTER)
    service.get_repository_infos()
    assert session.get(CmisBindingsHelper.HTTP_INVOKER_OBJECT) is invoker
    assert session.get(SessionParameter.JSON_CONVERTER) is converter
    assert binding.get_repository_service() is service
    binding.close()


def test_browser_close_releases_invoker(
    browser_parameters: dict[str, Any], mock_invoker_class: InvokerFactory
) -> None:
    browser_parameters[SessionParameter.HTTP_INVOKER_CLASS] = mock_invoker_class(
        lambda request: httpx.Response(200, json={})
    )
    binding = CmisBindingsHelper().create_binding(browser_parameters)
    binding.get_repository_service().get_repository_infos()
    invoker = binding.get_session().get(CmisBindingsHelper.HTTP_INVOKER_OBJECT)
    binding.close()
    assert invoker.is_closed
    assert binding.get_session().get(CmisBindingsHelper.HTTP_INVOKER_OBJECT) is None


def test_browser_not_succinct_and_custom_headers(
    browser_parameters: dict[str, Any], mock_invoker_class: InvokerFactory
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=REPOSITORY_INFOS)

    browser_parameters[SessionParameter.BROWSER_SUCCINCT] = False
    browser_parameters[SessionParameter.HTTP_INVOKER_CLASS] = mock_invoker_class(handler)
    binding = CmisBindingsHelper().create_binding(browser_parameters, _TokenProvider())
    binding.get_repository_service().get_repository_infos()
    assert "succinct" not in seen[0].url.params
    assert seen[0].headers["Authorization"] == "Bearer t0k3n"
    binding.close()


def test_browser_unknown_repository_raises_not_found(
    browser_parameters: dict[str, Any], mock_invoker_class: InvokerFactory
) -> None:
    browser_parameters[SessionParameter.HTTP_INVOKER_CLASS] = mock_invoker_class(
        lambda request: httpx.Response(200, json=REPOSITORY_INFOS)
    )
    binding = CmisBindingsHelper().create_binding(browser_parameters)
    with pytest.raises(CmisObjectNotFoundError, match="Z9"):
        binding.get_repository_service().get_repository_info("Z9")
    binding.close()


def test_browser_http_status_error_is_wrapped(
    browser_parameters: dict[str, Any], mock_invoker_class: InvokerFactory
) -> None:
    browser_parameters[SessionParameter.HTTP_INVOKER_CLASS] = mock_invoker_class(
        lambda request: httpx.Response(503, text="unavailable")
    )
    binding = CmisBindingsHelper().create_binding(browser_parameters)
    with pytest.raises(CmisConnectionError, match="HTTP 503") as exc_info:
        binding.get_repository_service().get_repository_infos()
    assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)
    binding.close()


def test_browser_transport_error_is_wrapped(
    browser_parameters: dict[str, Any], mock_invoker_class: InvokerFactory
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    browser_parameters[SessionParameter.HTTP_INVOKER_CLASS] = mock_invoker_class(handler)
    binding = CmisBindingsHelper().create_binding(browser_parameters)
    with pytest.raises(CmisConnectionError, match="refused") as exc_info:
        binding.get_repository_service().get_repository_infos()
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert exc_info.value.url == browser_parameters[SessionParameter.BROWSER_URL]
    binding.close()


def test_browser_non_mapping_payload_is_rejected(
    browser_parameters: dict[str, Any], mock_invoker_class: InvokerFactory
) -> None:
    browser_parameters[SessionParameter.HTTP_INVOKER_CLASS] = mock_invoker_class(
        lambda request: httpx.Response(200, json=["not", "a", "mapping"])
    )
    binding = CmisBindingsHelper().create_binding(browser_parameters)
    with pytest.raises(CmisRuntimeError, match="Unexpected repository info payload"):
        binding.get_repository_service().get_repository_infos()
    binding.close()


def test_browser_spi_clear_all_caches_rebuilds_service(browser_parameters: dict[str, Any]) -> None:
    binding = CmisBindingsHelper().create_binding(browser_parameters)
    spi = binding.get_spi()
    assert isinstance(spi, CmisBrowserBinding)
    first = spi.get_repository_service()
    spi.clear_all_caches()
    assert spi.get_repository_service() is not first


def test_browser_services_use_the_creating_helpers_registry(
    browser_parameters: dict[str, Any], mock_invoker_class: InvokerFactory
) -> None:
    registry = ClassRegistry()
    registry.register("mock-invoker", mock_invoker_class(lambda request: httpx.Response(200, json=REPOSITORY_INFOS)))
    helper = CmisBindingsHelper(registry=registry)
    browser_parameters[SessionParameter.HTTP_INVOKER_CLASS] = "mock-invoker"
    binding = helper.create_binding(browser_parameters)
    assert binding.get_session().get(CmisBindingsHelper.HELPER_OBJECT) is helper
    assert binding.get_repository_service().get_repository_infos() == REPOSITORY_INFOS
    binding.close()
