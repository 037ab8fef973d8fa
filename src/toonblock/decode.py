"""TOON decoder implementation."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from .errors import (
    ArrayCountMismatchError,
    EmptyInputError,
    KeyValueCountMismatchError,
    MalformedHeaderError,
    MissingValuesError,
    UnclosedBlockError,
    UnexpectedContentError,
    UnexpectedEndOfInputError,
)
from .primitives import ARRAY_HEADER_PATTERN, parse_primitive
from .string_utils import has_unquoted_delimiter, parse_keys_line, split_by_delimiter
from .types import ArrayHeaderInfo, JsonArray, JsonObject, JsonValue, ParsedLine

if TYPE_CHECKING:
    from collections.abc import Generator

logger = logging.getLogger(__name__)

LINE_SPLIT_PATTERN = re.compile(r"\r?\n")

BLOCK_CLOSE = "}"


def decode(text: str) -> JsonValue:
    """
    Decode TOON text to a Python value.

    Args:
        text: The TOON-formatted string.

    Returns:
        The decoded Python value.

    Raises:
        EmptyInputError: If the text is blank.
        FormatError: For malformed input (see ``toonblock.errors``).
    """
    if not text.strip():
        raise EmptyInputError()
    return decode_lines(LINE_SPLIT_PATTERN.split(text))


def decode_lines(lines: Iterable[str]) -> JsonValue:
    """
    Decode TOON from pre-split lines.

    Args:
        lines: Iterable of line strings.

    Returns:
        The decoded Python value.
    """
    parsed_lines = list(_parse_lines(lines))
    if not parsed_lines:
        raise EmptyInputError()

    logger.debug("Decoding %d TOON lines", len(parsed_lines))
    cursor = _Cursor(parsed_lines)
    result = _decode_value(cursor)

    leftover = cursor.peek()
    if leftover is not None:
        raise UnexpectedContentError(
            f"Unexpected content after top-level value: {leftover.content!r}",
            leftover.line_number,
        )
    return result


class _Cursor:
    """Cursor over the non-blank input lines."""

    def __init__(self, lines: list[ParsedLine]):
        self.lines = lines
        self.pos = 0

    def peek(self) -> ParsedLine | None:
        """Look at current line without advancing."""
        if self.pos < len(self.lines):
            return self.lines[self.pos]
        return None

    def advance(self) -> ParsedLine | None:
        """Get current line and advance position."""
        line = self.peek()
        if line:
            self.pos += 1
        return line

    @property
    def last_line_number(self) -> int | None:
        return self.lines[-1].line_number if self.lines else None


def _parse_lines(lines: Iterable[str]) -> Generator[ParsedLine, None, None]:
    """Trim raw lines and drop blank ones, keeping original line numbers."""
    for i, raw in enumerate(lines, start=1):
        content = raw.strip()
        if content:
            yield ParsedLine(content=content, line_number=i)


def _decode_value(cursor: _Cursor) -> JsonValue:
    """Decode whatever production starts at the current line."""
    line = cursor.peek()
    if line is None:
        # Guard: callers peek before dispatching
        raise UnexpectedEndOfInputError("Unexpected end of input", cursor.last_line_number)

    content = line.content

    match = ARRAY_HEADER_PATTERN.match(content)
    if match:
        return _decode_array_block(cursor, _header_from_match(match, line))

    if content.endswith(";"):
        return _decode_object(cursor)

    if content == BLOCK_CLOSE:
        raise UnexpectedContentError("Unexpected '}' outside of an array block", line.line_number)

    if has_unquoted_delimiter(content):
        raise MalformedHeaderError(
            f"Keys line must end with semicolon: {content!r}", line.line_number
        )

    cursor.advance()
    return parse_primitive(content)


def _header_from_match(match: re.Match, line: ParsedLine) -> ArrayHeaderInfo:
    return ArrayHeaderInfo(
        name=match.group("name"),
        length=int(match.group("length")),
        line_number=line.line_number,
    )


def _parse_keys(line: ParsedLine) -> list[str]:
    """Parse and validate a keys line."""
    keys = parse_keys_line(line.content)

    if any(not key for key in keys):
        raise MalformedHeaderError(f"Empty key in keys line: {line.content!r}", line.line_number)

    if len(set(keys)) != len(keys):
        raise MalformedHeaderError(
            f"Duplicate key in keys line: {line.content!r}", line.line_number
        )

    return keys


def _decode_object(cursor: _Cursor) -> JsonObject:
    """Decode a keys line and the values that follow it."""
    line = cursor.advance()
    keys = _parse_keys(line)
    return _fill_keys(cursor, keys, line.line_number)


def _fill_keys(
    cursor: _Cursor, keys: list[str], start_line: int, row: bool = False
) -> JsonObject:
    """
    Consume lines until every key has a value.

    Each step fills the next unfilled key from the current line:

    - an array block named after the key is decoded as that key's value
    - a keys line starts a nested object for the key
    - a line with exactly as many fields as unfilled keys fills them all
    - a single-field line fills the next key alone

    A line with several fields that do not cover the unfilled keys is a
    count mismatch. Running into ``}`` or the end of input before every key
    is filled raises ``MissingValuesError``.

    Table rows only take one value per line when the row holds a nested
    array block or object; a row filled from single scalar lines is a short
    row and is reported against its first line.

    Args:
        cursor: The line cursor, positioned at the first value line.
        keys: The keys to fill, in order.
        start_line: Line number reported for missing values and short rows.
        row: Whether the keys come from a block's shared keys line.

    Returns:
        The filled object.
    """
    result: JsonObject = {}
    split_row = False
    nested = False

    while len(result) < len(keys):
        remaining = keys[len(result):]
        key = remaining[0]

        line = cursor.peek()
        if line is None or line.content == BLOCK_CLOSE:
            raise MissingValuesError(len(keys), len(result), start_line)

        content = line.content

        match = ARRAY_HEADER_PATTERN.match(content)
        if match:
            header = _header_from_match(match, line)
            if header.name != key:
                raise UnexpectedContentError(
                    f"Array block '{header.name}' does not match key '{key}'",
                    line.line_number,
                )
            result[key] = _decode_array_block(cursor, header)
            nested = True
            continue

        if content.endswith(";"):
            result[key] = _decode_object(cursor)
            nested = True
            continue

        tokens = split_by_delimiter(content)
        if len(tokens) == len(remaining):
            for name, token in zip(remaining, tokens):
                result[name] = parse_primitive(token)
        elif len(tokens) == 1:
            result[key] = parse_primitive(content)
            split_row = True
        elif row and split_row and not nested:
            # A short row swallowed the start of this line's row
            raise KeyValueCountMismatchError(len(keys), 1, start_line)
        else:
            raise KeyValueCountMismatchError(
                len(keys), len(result) + len(tokens), line.line_number
            )
        cursor.advance()

    if row and split_row and not nested:
        raise KeyValueCountMismatchError(len(keys), 1, start_line)

    return result


def _decode_array_block(cursor: _Cursor, header: ArrayHeaderInfo) -> JsonArray:
    """Decode a ``name[N]{ ... }`` block, with or without a shared keys line."""
    cursor.advance()

    first = cursor.peek()
    if first is None:
        raise UnclosedBlockError(header.name, header.line_number)

    if first.content.endswith(";"):
        cursor.advance()
        header.fields = _parse_keys(first)
        items = _decode_rows(cursor, header)
    else:
        items = _decode_items(cursor, header)

    if len(items) != header.length:
        raise ArrayCountMismatchError(
            header.name, header.length, len(items), header.line_number
        )

    logger.debug("Decoded array block '%s' with %d items", header.name, len(items))
    return items


def _decode_rows(cursor: _Cursor, header: ArrayHeaderInfo) -> list[JsonObject]:
    """Decode rows against the block's shared keys until the closing brace."""
    rows = []

    while True:
        line = cursor.peek()
        if line is None:
            raise UnclosedBlockError(header.name, header.line_number)

        if line.content == BLOCK_CLOSE:
            cursor.advance()
            return rows

        rows.append(_fill_keys(cursor, header.fields, line.line_number, row=True))


def _decode_items(cursor: _Cursor, header: ArrayHeaderInfo) -> JsonArray:
    """Decode heterogeneous items until the closing brace."""
    items = []

    while True:
        line = cursor.peek()
        if line is None:
            raise UnclosedBlockError(header.name, header.line_number)

        if line.content == BLOCK_CLOSE:
            cursor.advance()
            return items

        items.append(_decode_value(cursor))
