"""Character scanner with one-character pushback."""

from __future__ import annotations


# ---------------------------------------------------------------------------
# EOF — singleton returned once the input is exhausted
# ---------------------------------------------------------------------------

class _EOFType:
    """Sentinel returned by ``Scanner.get`` at end of input."""

    _instance: _EOFType | None = None

    def __new__(cls) -> _EOFType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EOF"

    def __bool__(self) -> bool:
        return False


EOF = _EOFType()


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------

class Scanner:
    """Cursor over an immutable input string.

    Usage::

        sc = Scanner("key = 1")
        sc.get()     # → "k"
        sc.unget()   # "k" will be returned again
        sc.read(3)   # → "key"
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._last: str | _EOFType | None = None

    def get(self) -> str | _EOFType:
        """Consume and return the next character, or ``EOF``."""
        if self._pos >= len(self._text):
            self._last = EOF
            return EOF
        c = self._text[self._pos]
        self._pos += 1
        self._last = c
        return c

    def unget(self) -> None:
        """Push back the character returned by the last ``get()``.

        Only one character of pushback is kept. Pushing back ``EOF`` is a
        no-op.
        """
        if self._last is None:
            raise RuntimeError("unget() without a preceding get()")
        if self._last is not EOF:
            self._pos -= 1
        self._last = None

    def read(self, n: int) -> str:
        """Consume and return the next *n* characters (fewer at end of input)."""
        chunk = self._text[self._pos:self._pos + n]
        self._pos += len(chunk)
        self._last = chunk[-1] if chunk else EOF
        return chunk

    def position(self) -> tuple[int, int]:
        """1-based (line, column) of the next character to be read."""
        consumed = self._text[:self._pos]
        line = consumed.count("\n") + 1
        column = self._pos - (consumed.rfind("\n") + 1) + 1
        return line, column
