"""JSON payload codec used by the browser binding."""

from __future__ import annotations

import json
from typing import Any

from cmisbind.errors import CmisRuntimeError


class JsonConverter:
    """Convert between browser binding JSON payloads and Python values."""

    def __init__(self, *, ensure_ascii: bool = False) -> None:
        self._ensure_ascii = ensure_ascii

    def encode(self, value: Any) -> str:
        return json.dumps(value, ensure_ascii=self._ensure_ascii)

    def decode(self, payload: str | bytes) -> Any:
        """Decode a JSON document. Malformed input raises CmisRuntimeError."""
        if isinstance(payload, bytes):
            payload = payload.decode("utf-8")
        try:
            return json.loads(payload)
        except ValueError as exc:
            snippet = payload[:80]
            raise CmisRuntimeError(f"Invalid JSON payload: {snippet!r}") from exc
