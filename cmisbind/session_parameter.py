"""Well-known session parameter keys."""

from __future__ import annotations


class SessionParameter:
    """Keys understood by bindings and the collaborator resolver.

    Parameters are copied verbatim into the binding session; keys not listed
    here are carried along but ignored.
    """

    BINDING_TYPE = "cmisbind.binding.type"
    BINDING_CLASS = "cmisbind.binding.spi.class"

    BROWSER_URL = "cmisbind.binding.browser.url"
    BROWSER_SUCCINCT = "cmisbind.binding.browser.succinct"

    REPOSITORY_ID = "cmisbind.session.repository.id"
    USER = "cmisbind.user"
    PASSWORD = "cmisbind.password"

    HTTP_INVOKER_CLASS = "cmisbind.binding.httpinvoker.class"
    JSON_CONVERTER_CLASS = "cmisbind.binding.json.converter.class"
    # slot for a ready-made converter instance
    JSON_CONVERTER = "cmisbind.binding.json.converter"

    AUTHENTICATION_PROVIDER = "cmisbind.binding.auth.provider"
    TYPE_DEFINITION_CACHE_SIZE = "cmisbind.cache.types.size"

    DEFAULT_TYPE_DEFINITION_CACHE_SIZE = 100
