"""Assemble session parameters from YAML, environment and runtime overrides."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic_settings import SettingsConfigDict

from cmisbind.config.loader import resolve_config_path
from cmisbind.config.models import SessionSettings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _settings_for_file(yaml_file: Path) -> type[SessionSettings]:
    class FileSessionSettings(SessionSettings):
        model_config = SettingsConfigDict(yaml_file=yaml_file)

    return FileSessionSettings


def load_settings(
    config_path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> SessionSettings:
    """Load settings from YAML, then CMISBIND_* environment, then ``overrides``.

    Nested sections merge key by key across the three layers, so
    ``CMISBIND_BROWSER__SUCCINCT`` leaves a YAML ``browser.url`` in place.

    Raises:
        ConfigLoadError: If the YAML file is malformed.
        pydantic.ValidationError: If the merged values do not validate.
    """
    yaml_file = resolve_config_path(config_path)
    logger.debug("Loading session settings from %s", yaml_file)
    settings_cls = _settings_for_file(yaml_file)
    return settings_cls(**dict(overrides or {}))


def load_session_parameters(
    config_path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> Mapping[str, Any]:
    """Return a read-only session parameter mapping for ``create_binding``."""
    settings = load_settings(config_path, overrides)
    return MappingProxyType(settings.to_parameters())
