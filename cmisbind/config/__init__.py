"""Session configuration for cmisbind."""

from cmisbind.config.loader import ConfigLoadError, SessionYamlSource, resolve_config_path
from cmisbind.config.models import BrowserConfig, CacheConfig, ClassesConfig, SessionSettings
from cmisbind.config.parameters import load_session_parameters, load_settings

__all__ = [
    "BrowserConfig",
    "CacheConfig",
    "ClassesConfig",
    "ConfigLoadError",
    "SessionSettings",
    "SessionYamlSource",
    "load_session_parameters",
    "load_settings",
    "resolve_config_path",
]
