"""Shared test fixtures for cmisbind."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from cmisbind import BindingType, CmisBindingsHelper, Session, SessionParameter
from cmisbind.bindings.registry import ClassRegistry

BROWSER_URL = "https://repo.local/cmis/browser"


@pytest.fixture(autouse=True)
def _clear_cmisbind_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer CMISBIND_* variables out of unit tests."""
    for key in list(os.environ):
        if key.startswith("CMISBIND_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def browser_parameters() -> dict[str, Any]:
    """Minimal well-formed parameters for a browser binding."""
    return {
        SessionParameter.BINDING_TYPE: BindingType.BROWSER.value,
        SessionParameter.BROWSER_URL: BROWSER_URL,
    }


@pytest.fixture
def session() -> Session:
    return Session()


@pytest.fixture
def registry() -> ClassRegistry:
    return ClassRegistry()


@pytest.fixture
def helper(registry: ClassRegistry) -> CmisBindingsHelper:
    """Helper backed by an isolated registry."""
    return CmisBindingsHelper(registry=registry)


def _mock_invoker_class(handler: Callable[[httpx.Request], httpx.Response]) -> type[httpx.Client]:
    class _MockInvoker(httpx.Client):
        def __init__(self) -> None:
            super().__init__(transport=httpx.MockTransport(handler))

    return _MockInvoker


@pytest.fixture
def mock_invoker_class() -> Callable[[Callable[[httpx.Request], httpx.Response]], type[httpx.Client]]:
    """Factory for httpx.Client subclasses answered by a request handler."""
    return _mock_invoker_class
