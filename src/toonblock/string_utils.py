"""String utilities for TOON encoding/decoding."""

import re

ESCAPE_MAP = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# Any other escaped character stands for itself
UNESCAPE_MAP = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

# Reserved literals that can't be unquoted strings
RESERVED_LITERALS = {"true", "false", "null"}

# Structural delimiters of the block grammar
STRUCTURAL_CHARS = frozenset(",;{}[]")

# Characters that would be misread by the row splitter or the line splitter
UNSAFE_CHARS = frozenset('"\\\n\r\t')

NUMBER_PATTERN = re.compile(r"^-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?$")


def escape_string(value: str) -> str:
    """
    Escape a string for use inside TOON quotes.

    Backslash and double quote are backslash-escaped; newline, carriage
    return and tab are written as ``\\n``, ``\\r`` and ``\\t``.

    Args:
        value: The string to escape.

    Returns:
        The escaped string (without surrounding quotes).
    """
    return "".join(ESCAPE_MAP.get(char, char) for char in value)


def unescape_string(value: str) -> str:
    """
    Unescape the content of a quoted TOON string.

    A backslash escapes the following character. ``\\n``, ``\\r`` and ``\\t``
    become control characters; any other escaped character is kept as-is.
    A lone trailing backslash is kept literally.

    Args:
        value: The string content (without surrounding quotes).

    Returns:
        The unescaped string.
    """
    result = []
    i = 0
    while i < len(value):
        char = value[i]
        if char == "\\" and i + 1 < len(value):
            next_char = value[i + 1]
            result.append(UNESCAPE_MAP.get(next_char, next_char))
            i += 2
            continue
        result.append(char)
        i += 1
    return "".join(result)


def looks_like_number(value: str) -> bool:
    """Check if a string is a TOON number literal."""
    return bool(NUMBER_PATTERN.match(value))


def needs_quoting(value: str) -> bool:
    """
    Check if a string must be quoted to survive a decode.

    A string needs quotes if it:
    - Contains a structural delimiter (``, ; { } [ ]``)
    - Contains a double quote, backslash or line/tab control character
    - Is empty or whitespace-only
    - Would read back as null, a boolean or a number

    Leading or trailing spaces alone never force quoting.

    Args:
        value: The string to check.

    Returns:
        True if the string needs quotes.
    """
    if not value.strip():
        return True

    if any(c in STRUCTURAL_CHARS or c in UNSAFE_CHARS for c in value):
        return True

    stripped = value.strip()
    if stripped in RESERVED_LITERALS:
        return True

    return looks_like_number(stripped)


def find_closing_quote(s: str, start: int) -> int:
    """
    Find the closing quote in a string.

    Args:
        s: The string to search.
        start: The position of the opening quote.

    Returns:
        Index of the closing quote, or -1 if not found.
    """
    i = start + 1
    while i < len(s):
        char = s[i]
        if char == "\\":
            i += 2
            continue
        elif char == '"':
            return i
        i += 1
    return -1


def split_by_delimiter(value: str, delimiter: str = ",") -> list[str]:
    """
    Split a row by delimiter, respecting quoted sections.

    A backslash escapes the next character (a quote or a delimiter included),
    an unescaped double quote toggles the in-quotes state, and an unescaped
    delimiter outside quotes ends a field.

    Args:
        value: The string to split.
        delimiter: The delimiter character.

    Returns:
        List of trimmed raw tokens (still containing quotes and escapes).
    """
    result = []
    current = []
    in_quotes = False
    i = 0

    while i < len(value):
        char = value[i]
        if char == "\\" and i + 1 < len(value):
            # Keep escape sequence intact
            current.append(char)
            current.append(value[i + 1])
            i += 2
            continue
        elif char == '"':
            in_quotes = not in_quotes
            current.append(char)
        elif char == delimiter and not in_quotes:
            result.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    result.append("".join(current).strip())
    return result


def has_unquoted_delimiter(value: str, delimiter: str = ",") -> bool:
    """Check if a line holds more than one field."""
    return len(split_by_delimiter(value, delimiter)) > 1


def parse_keys_line(content: str) -> list[str]:
    """
    Parse the keys of a ``key, key;`` line.

    Args:
        content: The trimmed line, ending with ``;``.

    Returns:
        The keys in declaration order (may contain empty strings, which the
        caller rejects).
    """
    return [key.strip() for key in content[:-1].split(",")]
