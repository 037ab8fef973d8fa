"""Fluent builder over the encode/decode entry points."""

from __future__ import annotations

import logging
from typing import Any

from .decode import decode
from .encode import encode, encode_json
from .errors import BuilderStateError
from .types import FormatConfig, JsonValue

logger = logging.getLogger(__name__)

_ENCODE = "encode"
_DECODE = "decode"


class ToonBuilder:
    """
    Stage data, then convert it.

    Usage:
        ToonBuilder().from_json('{"id": 1}').encode()
        ToonBuilder().from_array({"id": 1}).encode()
        ToonBuilder().from_toon("id;\\n1").decode()
    """

    def __init__(self, config: FormatConfig | None = None):
        self.config = config or FormatConfig()
        self._data: Any = None
        self._source: str | None = None
        self._operation: str | None = None

    def from_json(self, text: str) -> ToonBuilder:
        """Stage a JSON document for encoding."""
        self._data = text
        self._source = "json"
        self._operation = _ENCODE
        return self

    def from_array(self, value: Any) -> ToonBuilder:
        """Stage an already-decoded value (dict, list or primitive) for encoding."""
        self._data = value
        self._source = "value"
        self._operation = _ENCODE
        return self

    def from_toon(self, text: str) -> ToonBuilder:
        """Stage TOON text for decoding."""
        self._data = text
        self._source = "toon"
        self._operation = _DECODE
        return self

    def encode(self) -> str:
        """Encode the staged data to TOON."""
        if self._operation != _ENCODE:
            raise BuilderStateError("Cannot encode. Use from_json() or from_array() first.")

        logger.debug("Encoding staged %s data", self._source)
        if self._source == "json":
            return encode_json(self._data, self.config)
        return encode(self._data, self.config)

    def decode(self) -> JsonValue:
        """Decode the staged TOON text."""
        if self._operation != _DECODE:
            raise BuilderStateError("Cannot decode. Use from_toon() first.")

        if not isinstance(self._data, str):
            raise BuilderStateError("Data must be a string for decoding.")

        return decode(self._data)
