"""Unit tests for cmisbind exception classes."""

from cmisbind.bindings.interfaces import CmisInterface
from cmisbind.errors import (
    CapabilityMismatchError,
    CmisBaseError,
    CmisConnectionError,
    CmisInvalidArgumentError,
    CmisRuntimeError,
    InvalidClassError,
    MissingParameterError,
    ObjectCreationError,
)


def test_invalid_class_error_names_label_and_class() -> None:
    err = InvalidClassError("HTTP invoker", "acme.Client")
    assert isinstance(err, CmisRuntimeError)
    assert str(err) == 'The given HTTP invoker class "acme.Client" is not valid!'


def test_capability_mismatch_error_names_contract() -> None:
    err = CapabilityMismatchError("binding", "acme.Spi", CmisInterface)
    assert "acme.Spi" in str(err)
    assert "CmisInterface" in str(err)
    assert err.capability is CmisInterface


def test_object_creation_error_keeps_class_name() -> None:
    err = ObjectCreationError("acme.Spi")
    assert err.class_name == "acme.Spi"
    assert str(err) == 'Could not create object of type "acme.Spi"!'


def test_missing_parameter_error_default_message() -> None:
    err = MissingParameterError("cmisbind.binding.browser.url")
    assert "cmisbind.binding.browser.url" in str(err)


def test_non_runtime_errors_share_base() -> None:
    assert issubclass(CmisInvalidArgumentError, CmisBaseError)
    assert not issubclass(CmisInvalidArgumentError, CmisRuntimeError)
    err = CmisConnectionError("https://repo.local", "timed out")
    assert isinstance(err, CmisBaseError)
    assert str(err) == "Request to https://repo.local failed: timed out"
