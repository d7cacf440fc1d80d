"""YAML settings source for cmisbind sessions."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic_settings import YamlConfigSettingsSource

CONFIG_PATH_VARIABLE = "CMISBIND_CONFIG"
DEFAULT_FILENAME = "cmisbind.yaml"


class ConfigLoadError(ValueError):
    """Raised when the session YAML file cannot be used as a settings source."""


def resolve_config_path(config_path: str | Path | None = None) -> Path:
    """Pick the session file: ``CMISBIND_CONFIG``, then ``config_path``, then ./cmisbind.yaml."""
    from_env = os.environ.get(CONFIG_PATH_VARIABLE, "").strip()
    if from_env:
        return Path(from_env)
    if config_path is not None and str(config_path).strip():
        return Path(str(config_path).strip())
    return Path.cwd() / DEFAULT_FILENAME


class SessionYamlSource(YamlConfigSettingsSource):
    """Read session settings from YAML.

    Missing and empty files contribute nothing. Syntax errors report the
    offending line and column, and a root that is not a mapping is rejected.
    """

    def _read_file(self, file_path: Path) -> dict[str, Any]:
        text = file_path.read_text(encoding=self.yaml_file_encoding or "utf-8")
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            where = f"{file_path}:{mark.line + 1}:{mark.column + 1}" if mark is not None else str(file_path)
            raise ConfigLoadError(f"Invalid YAML at {where}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigLoadError(f"Session config root must be a mapping, got {type(data).__name__}: {file_path}")
        return data
