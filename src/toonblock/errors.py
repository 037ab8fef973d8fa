"""Exceptions raised by the TOON block encoder/decoder."""


class ToonError(Exception):
    """Base class for all toonblock errors."""


class InvalidJsonInputError(ToonError, ValueError):
    """A string handed to the encoder is not valid JSON."""

    def __init__(self, detail: str):
        super().__init__(f"Invalid JSON string provided: {detail}")


class BuilderStateError(ToonError, RuntimeError):
    """A ToonBuilder operation was called before the matching from_* stage."""


class FormatError(ToonError, ValueError):
    """Input text is not valid TOON."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


class EmptyInputError(FormatError):
    """Decode was called with blank input."""

    def __init__(self):
        super().__init__("Cannot decode empty TOON input")


class MalformedHeaderError(FormatError):
    """A keys line is missing its semicolon or declares unusable keys."""


class KeyValueCountMismatchError(FormatError):
    """A line carries a different number of values than keys to fill."""

    def __init__(self, expected: int, actual: int, line_number: int | None, message: str = ""):
        self.expected = expected
        self.actual = actual
        super().__init__(
            message or f"Key/value count mismatch: expected {expected} values, got {actual}",
            line_number,
        )


class UnexpectedEndOfInputError(FormatError):
    """Input ended while a production still needed lines."""


class MissingValuesError(KeyValueCountMismatchError, UnexpectedEndOfInputError):
    """Object or row keys were left without values."""

    def __init__(self, expected: int, filled: int, line_number: int | None):
        super().__init__(
            expected,
            filled,
            line_number,
            f"Missing values for object keys: expected {expected}, filled {filled}",
        )


class UnclosedBlockError(FormatError):
    """An array block was never closed with ``}``."""

    def __init__(self, block_name: str, line_number: int | None):
        self.block_name = block_name
        super().__init__(f"Unclosed array block '{block_name}'", line_number)


class ArrayCountMismatchError(FormatError):
    """The declared ``[N]`` of a block differs from the items parsed."""

    def __init__(self, block_name: str, expected: int, actual: int, line_number: int | None):
        self.block_name = block_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Array block '{block_name}' declares {expected} items, got {actual}",
            line_number,
        )


class UnexpectedContentError(FormatError):
    """A line appears where the grammar does not allow it."""
