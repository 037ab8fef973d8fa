"""Type definitions for the TOON block encoder/decoder."""

from dataclasses import dataclass, field
from enum import Enum

# JSON type aliases
JsonPrimitive = str | int | float | bool | None
JsonArray = list["JsonValue"]
JsonObject = dict[str, "JsonValue"]
JsonValue = JsonPrimitive | JsonArray | JsonObject


class ValueKind(Enum):
    """Closed set of node kinds a value can take."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


@dataclass
class FormatConfig:
    """Formatting options for TOON encoding."""

    indent_width: int = 2
    """Number of spaces per indentation level."""

    key_separator: str = ", "
    """Separator between keys on a keys line and between values on a row."""

    line_break: str = "\n"
    """String used to join output lines."""

    compact: bool = False
    """Drop indentation and collapse the separator to a bare comma."""

    def __post_init__(self) -> None:
        if self.indent_width < 0:
            raise ValueError(f"indent_width must be >= 0, got {self.indent_width}")
        if self.key_separator.strip(" ") != ",":
            raise ValueError(
                "key_separator must be a single comma with optional spaces, "
                f"got {self.key_separator!r}"
            )

    @property
    def indent_unit(self) -> int:
        """Effective spaces per level (0 in compact mode)."""
        return 0 if self.compact else self.indent_width

    @property
    def separator(self) -> str:
        """Effective separator (bare comma in compact mode)."""
        return "," if self.compact else self.key_separator


@dataclass
class ParsedLine:
    """A trimmed, non-blank input line."""

    content: str
    """Line content with surrounding whitespace removed."""

    line_number: int
    """1-based line number in the original input."""


@dataclass
class ArrayHeaderInfo:
    """Parsed array block header information."""

    name: str
    """Block name (the owning key, or ``array`` when anonymous)."""

    length: int
    """Declared item count."""

    line_number: int = 0
    """1-based line number of the header."""

    fields: list[str] = field(default_factory=list)
    """Shared keys for tabular blocks (empty for item blocks)."""
