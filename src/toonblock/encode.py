"""TOON encoder implementation."""

import json
import logging
from collections.abc import Generator
from typing import Any

from .errors import InvalidJsonInputError
from .primitives import encode_primitive, format_array_header
from .types import FormatConfig, JsonObject, JsonValue, ValueKind
from .values import classify, is_scalar, normalize_value

logger = logging.getLogger(__name__)


def encode(value: Any, config: FormatConfig | None = None) -> str:
    """
    Encode a Python value to TOON format.

    Args:
        value: The value to encode (dict, list, or primitive).
        config: Formatting options.

    Returns:
        The TOON-formatted string.
    """
    cfg = config or FormatConfig()
    lines = list(encode_lines(value, cfg))
    logger.debug("Encoded value into %d TOON lines", len(lines))
    return cfg.line_break.join(lines)


def encode_json(text: str | bytes, config: FormatConfig | None = None) -> str:
    """
    Encode a JSON document to TOON format.

    Args:
        text: The JSON text.
        config: Formatting options.

    Returns:
        The TOON-formatted string.

    Raises:
        InvalidJsonInputError: If the text is not valid JSON.
    """
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidJsonInputError(str(e)) from e
    return encode(value, config)


def encode_lines(
    value: Any, config: FormatConfig | None = None
) -> Generator[str, None, None]:
    """
    Encode a Python value to TOON format, yielding lines.

    Lines are yielded without line terminators.

    Args:
        value: The value to encode.
        config: Formatting options.

    Yields:
        Lines of TOON output.
    """
    cfg = config or FormatConfig()
    normalized = normalize_value(value)
    kind = classify(normalized)

    if kind is ValueKind.OBJECT:
        yield from _encode_object_lines(normalized, cfg, 0)
    elif kind is ValueKind.ARRAY:
        yield from _encode_array_lines(normalized, cfg, 0)
    else:
        yield encode_primitive(normalized)


def _indent(cfg: FormatConfig, depth: int) -> str:
    return " " * (cfg.indent_unit * depth)


def _encode_object_lines(
    obj: JsonObject, cfg: FormatConfig, depth: int
) -> Generator[str, None, None]:
    """Encode an object as a keys line followed by its values."""
    keys = list(obj.keys())
    yield f"{_indent(cfg, depth)}{cfg.separator.join(keys)};"
    yield from _encode_values(obj, keys, cfg, depth)


def _encode_values(
    obj: JsonObject, keys: list[str], cfg: FormatConfig, depth: int
) -> Generator[str, None, None]:
    """
    Encode the values of an object (or a table row) in key order.

    All-scalar values share one line. Otherwise every key gets its own unit:
    scalars on their own line, arrays as blocks named by the key, nested
    objects as an indented keys line plus values.
    """
    indent = _indent(cfg, depth)
    values = [obj.get(key) for key in keys]

    if all(is_scalar(v) for v in values):
        yield indent + cfg.separator.join(encode_primitive(v) for v in values)
        return

    for key, value in zip(keys, values):
        if isinstance(value, list):
            yield from _encode_array_lines(value, cfg, depth, key)
        elif isinstance(value, dict):
            yield from _encode_object_lines(value, cfg, depth + 1)
        else:
            yield indent + encode_primitive(value)


def _encode_array_lines(
    arr: list[JsonValue], cfg: FormatConfig, depth: int, name: str | None = None
) -> Generator[str, None, None]:
    """Encode an array as a ``name[N]{ ... }`` block."""
    indent = _indent(cfg, depth)
    inner = _indent(cfg, depth + 1)

    yield indent + format_array_header(len(arr), name)

    if _is_tabular_array(arr):
        # Shared header from the first row
        fields = list(arr[0].keys())
        yield f"{inner}{cfg.separator.join(fields)};"
        for row in arr:
            yield from _encode_values(row, fields, cfg, depth + 1)
    else:
        for item in arr:
            if isinstance(item, dict):
                yield from _encode_object_lines(item, cfg, depth + 1)
            elif isinstance(item, list):
                yield from _encode_array_lines(item, cfg, depth + 1)
            else:
                yield inner + encode_primitive(item)

    yield f"{indent}}}"


def _is_tabular_array(arr: list[JsonValue]) -> bool:
    """Check if every element is an object, so rows can share one header."""
    return bool(arr) and all(isinstance(item, dict) for item in arr)
