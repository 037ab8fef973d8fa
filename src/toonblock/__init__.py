"""
toonblock - TOON block notation for Python

Converts JSON-shaped data to and from a compact line-oriented notation:
objects are a keys line followed by a value line, and arrays are named,
size-tagged blocks holding one shared keys line and one row per item.

Usage:
    import toonblock

    # Encode Python data to TOON
    data = {"id": 1, "name": "Test Product", "price": 99.99}
    encoded = toonblock.encode(data)
    # id, name, price;
    # 1, Test Product, 99.99

    # Decode TOON to Python data
    decoded = toonblock.decode(encoded)

    # With options
    from toonblock import FormatConfig

    encoded = toonblock.encode(data, FormatConfig(indent_width=4, compact=False))

    # Fluent form
    toonblock.ToonBuilder().from_json('{"id": 1}').encode()
"""

__version__ = "1.0.0"

from .builder import ToonBuilder
from .decode import decode, decode_lines
from .encode import encode, encode_json, encode_lines
from .errors import (
    ArrayCountMismatchError,
    BuilderStateError,
    EmptyInputError,
    FormatError,
    InvalidJsonInputError,
    KeyValueCountMismatchError,
    MalformedHeaderError,
    MissingValuesError,
    ToonError,
    UnclosedBlockError,
    UnexpectedContentError,
    UnexpectedEndOfInputError,
)
from .primitives import encode_string_literal as escape
from .primitives import parse_primitive as parse_value
from .types import FormatConfig, JsonValue, ValueKind
from .values import classify

__all__ = [
    # Version
    "__version__",
    # Main API
    "encode",
    "encode_json",
    "encode_lines",
    "decode",
    "decode_lines",
    "ToonBuilder",
    # Scalars
    "escape",
    "parse_value",
    "classify",
    # Options
    "FormatConfig",
    # Types
    "JsonValue",
    "ValueKind",
    # Errors
    "ToonError",
    "FormatError",
    "InvalidJsonInputError",
    "BuilderStateError",
    "EmptyInputError",
    "MalformedHeaderError",
    "KeyValueCountMismatchError",
    "MissingValuesError",
    "UnexpectedEndOfInputError",
    "UnclosedBlockError",
    "ArrayCountMismatchError",
    "UnexpectedContentError",
]
