"""Decoder: single-pass recursive descent from text to a value tree."""

from __future__ import annotations

import logging

from .config import DecoderConfig
from .errors import DecodeError, NestingDepthError
from .scanner import EOF, Scanner
from .values import Value, VArray, VBool, VInteger, VString, VTable

logger = logging.getLogger(__name__)

_WHITESPACE = frozenset(" \t\n")
_INLINE_SPACE = frozenset(" \t")
_DIGITS = frozenset("0123456789")

_ESCAPES: dict[str, str] = {
    '"': '"',
    "/": "/",
    "\\": "\\",
    "b": "\b",
    "f": "\f",
    "r": "\r",
    "n": "\n",
    "t": "\t",
}

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def decode(text: str, config: DecoderConfig | None = None) -> VTable:
    """Decode *text* and return the root table.

    Raises ``DecodeError`` on the first syntax error; no partial tree is
    returned.
    """
    ctx = _Context(Scanner(text), config or DecoderConfig())
    root = VTable()
    active = root

    try:
        while True:
            c = ctx.scanner.get()
            if c is EOF:
                break
            if c in _WHITESPACE:
                continue
            if c == "#":
                _skip_comment(ctx.scanner)
                continue
            if c == "[":
                name = _parse_table_header(ctx)
                active = VTable()
                if name in root.entries:
                    logger.debug("table_replaced", extra={"table": name})
                root.entries[name] = active
                logger.debug("table_opened", extra={"table": name})
                continue
            ctx.scanner.unget()
            _parse_key_value(ctx, active, depth=0)
    except RecursionError:
        line, column = ctx.scanner.position()
        exc = NestingDepthError("nesting exceeds the interpreter recursion limit", line, column)
        logger.debug("decode_failed", extra={"error": exc.message, "line": line, "column": column})
        raise exc from None
    except DecodeError as exc:
        logger.debug("decode_failed", extra={"error": exc.message, "line": exc.line, "column": exc.column})
        raise

    logger.debug("decode_finished", extra={"entries": len(root.entries)})
    return root


# ---------------------------------------------------------------------------
# Decoder context
# ---------------------------------------------------------------------------

class _Context:
    """Scanner plus options for one in-flight decode."""

    __slots__ = ("scanner", "config")

    def __init__(self, scanner: Scanner, config: DecoderConfig) -> None:
        self.scanner = scanner
        self.config = config

    def error(self, message: str) -> DecodeError:
        line, column = self.scanner.position()
        return DecodeError(message, line, column)

    def enter(self, depth: int) -> int:
        """Return the nesting depth of a new container opened at *depth*."""
        depth += 1
        if depth > self.config.max_depth:
            line, column = self.scanner.position()
            raise NestingDepthError(
                f"nesting deeper than {self.config.max_depth} levels", line, column
            )
        return depth


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------

def _skip_comment(scanner: Scanner) -> None:
    """Consume through the next newline or end of input."""
    while True:
        c = scanner.get()
        if c is EOF or c == "\n":
            return


def _parse_table_header(ctx: _Context) -> str:
    """``[name]`` — the opening bracket is already consumed."""
    chars: list[str] = []
    while True:
        c = ctx.scanner.get()
        if c is EOF:
            raise ctx.error("table name missing")
        if c == "]":
            return "".join(chars)
        chars.append(c)


def _parse_key_value(ctx: _Context, table: VTable, depth: int) -> None:
    """``key = value`` into *table*.

    Running out of input before ``=`` leaves *table* untouched.
    """
    chars: list[str] = []
    while True:
        c = ctx.scanner.get()
        if c is EOF:
            return
        if c == "=":
            break
        if c in _INLINE_SPACE:
            continue
        chars.append(c)

    key = "".join(chars)
    value = _parse_value(ctx, depth)
    if key in table.entries:
        logger.debug("key_overwritten", extra={"key": key})
    table.entries[key] = value


def _parse_value(ctx: _Context, depth: int) -> Value:
    c = ctx.scanner.get()
    while c is not EOF and c in _INLINE_SPACE:
        c = ctx.scanner.get()

    if c is EOF:
        raise ctx.error("no value found")
    if c == '"':
        return _parse_string(ctx)
    if c in _DIGITS:
        return _parse_integer(ctx, c)
    if c == "{":
        return _parse_inline_table(ctx, depth)
    if c == "[":
        return _parse_array(ctx, depth)
    if ctx.config.booleans:
        if c == "t":
            return _parse_true(ctx)
        if c == "f":
            return _parse_false(ctx)
    raise ctx.error(f"bad value start {c!r}")


def _parse_array(ctx: _Context, depth: int) -> VArray:
    """``[v, v, ...]`` — the opening bracket is already consumed."""
    depth = ctx.enter(depth)
    array = VArray()
    while True:
        c = ctx.scanner.get()
        if c is EOF:
            raise ctx.error("no value found before end of input")
        if c in _WHITESPACE or c == ",":
            continue
        if c == "#":
            _skip_comment(ctx.scanner)
            continue
        if c == "]":
            return array
        ctx.scanner.unget()
        array.items.append(_parse_value(ctx, depth))


def _parse_inline_table(ctx: _Context, depth: int) -> VTable:
    """``{k = v, ...}`` — the opening brace is already consumed."""
    depth = ctx.enter(depth)
    table = VTable()
    while True:
        c = ctx.scanner.get()
        if c is EOF:
            raise ctx.error("unterminated inline table")
        if c in _INLINE_SPACE or c == ",":
            continue
        if c == "}":
            return table
        # A raw newline lands here and is read as part of a key.
        ctx.scanner.unget()
        _parse_key_value(ctx, table, depth)


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def _parse_string(ctx: _Context) -> VString:
    """Basic string — the opening quote is already consumed."""
    chars: list[str] = []
    while True:
        c = ctx.scanner.get()
        if c is EOF:
            raise ctx.error("unterminated string")
        if c == '"':
            return VString("".join(chars))
        if c != "\\":
            chars.append(c)
            continue

        esc = ctx.scanner.get()
        if esc is EOF:
            raise ctx.error("unterminated string")
        if esc in _ESCAPES:
            chars.append(_ESCAPES[esc])
        elif esc == "u":
            chars.append(_unpack_code_point(ctx))
        else:
            raise ctx.error(f"bad escape '\\{esc}'")


def _unpack_code_point(ctx: _Context) -> str:
    r"""``\u`` escape: four characters packed big-endian as 8-bit fields.

    ``"\u\x00\x00\x00A"`` yields ``"A"``; the fields are raw characters,
    not hex digits.
    """
    raw = ctx.scanner.read(4)
    if len(raw) < 4:
        raise ctx.error("unterminated string")
    code = 0
    for shift, ch in zip((24, 16, 8, 0), raw):
        code |= (ord(ch) & 0xFF) << shift
    try:
        return chr(code)
    except ValueError:
        raise ctx.error(f"invalid code point 0x{code:08x}") from None


def _parse_integer(ctx: _Context, first: str) -> VInteger:
    """Decimal digits; *first* is already consumed."""
    digits = [first]
    while True:
        c = ctx.scanner.get()
        if c is EOF:
            break
        if c not in _DIGITS:
            ctx.scanner.unget()
            break
        digits.append(c)

    number = int("".join(digits))
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ctx.error("integer out of range")
    return VInteger(number)


def _parse_true(ctx: _Context) -> VBool:
    if ctx.scanner.read(3) != "rue":
        raise ctx.error("corrupt literal, expected 'true'")
    return VBool(True)


def _parse_false(ctx: _Context) -> VBool:
    if ctx.scanner.read(4) != "alse":
        raise ctx.error("corrupt literal, expected 'false'")
    return VBool(False)
