"""Error types for TOML Core."""

from __future__ import annotations


class TOMLCoreError(Exception):
    """Base class for every error raised by toml_core."""


# ---------------------------------------------------------------------------
# Decode-time errors
# ---------------------------------------------------------------------------

class DecodeError(TOMLCoreError):
    """Syntax error found while decoding a document."""

    def __init__(self, message: str, line: int, column: int) -> None:
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"{message} (line {line}, column {column})")


class NestingDepthError(DecodeError):
    """Arrays / inline tables nested deeper than the configured limit."""


# ---------------------------------------------------------------------------
# Accessor errors
# ---------------------------------------------------------------------------

class TypeMismatchError(TOMLCoreError, TypeError):
    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected}, found {actual}")


class KeyNotFoundError(TOMLCoreError, KeyError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"key not found: {self.key!r}"


class IndexOutOfRangeError(TOMLCoreError, IndexError):
    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"index {index} out of range for array of length {length}")
