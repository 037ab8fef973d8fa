"""Value classification and normalization."""

import math
from collections.abc import Mapping
from typing import Any

from .types import JsonValue, ValueKind


def classify(value: Any) -> ValueKind:
    """
    Classify a value into one of the six TOON node kinds.

    Lists and tuples are arrays. A mapping is an array only when its keys are
    exactly the integers ``0..n-1`` in that order; any other key set makes it
    an object. Empty collections are always arrays, so an empty object and an
    empty array encode identically.

    Args:
        value: A normalized value.

    Returns:
        The value's kind.

    Raises:
        TypeError: If the value is not JSON-like.
    """
    if value is None:
        return ValueKind.NULL

    if isinstance(value, bool):
        return ValueKind.BOOL

    if isinstance(value, (int, float)):
        return ValueKind.NUMBER

    if isinstance(value, str):
        return ValueKind.STRING

    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY

    if isinstance(value, Mapping):
        if not value or list(value.keys()) == list(range(len(value))):
            return ValueKind.ARRAY
        return ValueKind.OBJECT

    raise TypeError(f"Cannot classify value of type {type(value).__name__}")


def is_scalar(value: Any) -> bool:
    """Check if a value is a leaf (null, bool, number or string)."""
    return classify(value) not in (ValueKind.ARRAY, ValueKind.OBJECT)


def normalize_value(value: Any) -> JsonValue:
    """
    Normalize a value for JSON compatibility.

    Converts:
    - NaN and infinities to None, -0.0 to 0
    - Tuples, sets and other iterables to lists
    - Integer-indexed mappings (``0..n-1``) to lists, other mappings to dicts
      with string keys
    - Objects with ``isoformat()`` (dates, times) to ISO strings

    Args:
        value: The value to normalize.

    Returns:
        A JSON-compatible value.
    """
    if value is None or isinstance(value, (bool, str)):
        return value

    if isinstance(value, (int, float)):
        if isinstance(value, float):
            if math.isnan(value) or math.isinf(value):
                return None
            if value == 0.0:
                return 0
        return value

    if isinstance(value, Mapping):
        if classify(value) is ValueKind.ARRAY:
            return [normalize_value(v) for v in value.values()]
        return {str(k): normalize_value(v) for k, v in value.items()}

    if isinstance(value, (list, tuple)):
        return [normalize_value(v) for v in value]

    if isinstance(value, (set, frozenset)):
        return [normalize_value(v) for v in sorted(value, key=str)]

    if hasattr(value, "isoformat"):
        return value.isoformat()

    if hasattr(value, "__iter__"):
        return [normalize_value(v) for v in value]

    return str(value)
