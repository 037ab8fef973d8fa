"""Primitive value encoding and parsing for TOON."""

import math
import re

from .string_utils import (
    escape_string,
    find_closing_quote,
    looks_like_number,
    needs_quoting,
    unescape_string,
)
from .types import JsonPrimitive

# Pattern for array block header: name[N]{
ARRAY_HEADER_PATTERN = re.compile(r"^(?P<name>\w+)\[(?P<length>\d+)\]\{$")

DEFAULT_ARRAY_NAME = "array"


def encode_primitive(value: JsonPrimitive) -> str:
    """
    Encode a primitive value to TOON format.

    Args:
        value: The primitive value (str, int, float, bool, or None).

    Returns:
        The encoded string representation.
    """
    if value is None:
        return "null"

    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, (int, float)):
        return _encode_number(value)

    if isinstance(value, str):
        return encode_string_literal(value)

    raise TypeError(f"Cannot encode value of type {type(value).__name__}")


def _encode_number(value: int | float) -> str:
    """Encode a number to TOON format."""
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return "null"
        # Normalize -0 to 0
        if value == 0.0:
            return "0"
        s = repr(value)
        # Remove unnecessary .0 for whole numbers
        if s.endswith(".0") and "e" not in s.lower():
            return s[:-2]
        return s

    return str(value)


def encode_string_literal(value: str) -> str:
    """
    Encode a string value, with or without quotes.

    Args:
        value: The string to encode.

    Returns:
        The encoded string (quoted if necessary).
    """
    if needs_quoting(value):
        return f'"{escape_string(value)}"'
    return value


def parse_primitive(token: str) -> JsonPrimitive:
    """
    Parse a scalar token to a Python value.

    Handles: null, true, false, numbers, quoted strings, unquoted strings.
    Anything that is not a literal, a number or an exactly-wrapped quoted
    string is returned verbatim as a string.

    Args:
        token: The token string.

    Returns:
        The parsed Python value.
    """
    token = token.strip()

    if token == "null":
        return None
    if token == "true":
        return True
    if token == "false":
        return False

    if looks_like_number(token):
        if "." in token or "e" in token.lower():
            return float(token)
        return int(token)

    if token.startswith('"') and find_closing_quote(token, 0) == len(token) - 1:
        return unescape_string(token[1:-1])

    return token


def format_array_header(length: int, name: str | None = None) -> str:
    """
    Format an array block header line.

    Args:
        length: The array length.
        name: Optional block name (the owning key); defaults to ``array``.

    Returns:
        The formatted header string.
    """
    return f"{name or DEFAULT_ARRAY_NAME}[{length}]{{"
