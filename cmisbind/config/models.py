"""Configuration models for cmisbind sessions."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from cmisbind.config.loader import SessionYamlSource
from cmisbind.session_parameter import SessionParameter


class BrowserConfig(BaseModel):
    """Browser binding endpoint configuration."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    url: str | None = Field(default=None, description="Browser binding service URL.")
    succinct: bool = Field(default=True)


class ClassesConfig(BaseModel):
    """Implementation classes, as registry names or dotted import paths."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    binding: str | None = Field(default=None, description="SPI class.")
    http_invoker: str | None = Field(default=None, description="httpx.Client subclass.")
    json_converter: str | None = Field(default=None, description="JSON codec class.")


class CacheConfig(BaseModel):
    """Cache sizing."""

    type_definitions: int = Field(default=SessionParameter.DEFAULT_TYPE_DEFINITION_CACHE_SIZE, ge=1)


class SessionSettings(BaseSettings):
    """Root configuration model producing session parameters.

    Values are layered, highest first: keyword arguments, ``CMISBIND_*``
    environment variables, then the YAML file named by ``yaml_file`` in the
    model config (see :func:`cmisbind.config.load_settings`).
    """

    binding_type: str | None = Field(default=None)
    repository_id: str | None = Field(default=None)
    user: str | None = Field(default=None)
    password: str | None = Field(default=None)
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    classes: ClassesConfig = Field(default_factory=ClassesConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    extra: dict[str, Any] = Field(default_factory=dict, description="Raw parameters passed through verbatim.")

    model_config = SettingsConfigDict(
        env_prefix="CMISBIND_",
        env_nested_delimiter="__",
        extra="ignore",
        # YAML reads numeric ids and PINs as ints
        coerce_numbers_to_str=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, SessionYamlSource(settings_cls))

    def to_parameters(self) -> dict[str, Any]:
        """Flatten into SessionParameter keys, omitting unset values."""
        candidates: dict[str, Any] = {
            SessionParameter.BINDING_TYPE: self.binding_type,
            SessionParameter.REPOSITORY_ID: self.repository_id,
            SessionParameter.USER: self.user,
            SessionParameter.PASSWORD: self.password,
            SessionParameter.BROWSER_URL: self.browser.url,
            SessionParameter.BROWSER_SUCCINCT: self.browser.succinct,
            SessionParameter.BINDING_CLASS: self.classes.binding,
            SessionParameter.HTTP_INVOKER_CLASS: self.classes.http_invoker,
            SessionParameter.JSON_CONVERTER_CLASS: self.classes.json_converter,
            SessionParameter.TYPE_DEFINITION_CACHE_SIZE: self.cache.type_definitions,
        }
        parameters = dict(self.extra)
        parameters.update({key: value for key, value in candidates.items() if value is not None})
        return parameters
