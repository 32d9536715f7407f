"""Value types for TOML Core.

Every variant exposes the same accessor surface; only the accessor that
matches the variant succeeds, the rest raise ``TypeMismatchError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Union

from .errors import IndexOutOfRangeError, KeyNotFoundError, TypeMismatchError


class _Accessors:
    """Typed accessors shared by all value variants."""

    __slots__ = ()

    kind: ClassVar[str] = "value"

    def _mismatch(self, expected: str) -> TypeMismatchError:
        return TypeMismatchError(expected, self.kind)

    # -- Containers -----------------------------------------------------

    def as_table(self) -> Mapping[str, Value]:
        raise self._mismatch("table")

    def get(self, key: str) -> Value:
        raise self._mismatch("table")

    def as_array(self) -> tuple[Value, ...]:
        raise self._mismatch("array")

    def at(self, index: int) -> Value:
        raise self._mismatch("array")

    # -- Scalars --------------------------------------------------------

    def as_string(self) -> str:
        raise self._mismatch("string")

    def as_integer(self) -> int:
        raise self._mismatch("integer")

    def as_float(self) -> float:
        # Floats are never produced by the decoder.
        raise self._mismatch("float")

    def as_bool(self) -> bool:
        raise self._mismatch("bool")


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VString(_Accessors):
    value: str

    kind: ClassVar[str] = "string"

    def as_string(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class VInteger(_Accessors):
    value: int

    kind: ClassVar[str] = "integer"

    def as_integer(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(slots=True)
class VBool(_Accessors):
    value: bool

    kind: ClassVar[str] = "bool"

    def as_bool(self) -> bool:
        return self.value

    def __str__(self) -> str:
        return str(self.value).lower()


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VArray(_Accessors):
    items: list[Value] = field(default_factory=list)

    kind: ClassVar[str] = "array"

    def as_array(self) -> tuple[Value, ...]:
        return tuple(self.items)

    def at(self, index: int) -> Value:
        if not 0 <= index < len(self.items):
            raise IndexOutOfRangeError(index, len(self.items))
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "[" + ", ".join(_fmt_inline(v) for v in self.items) + "]"


@dataclass(slots=True)
class VTable(_Accessors):
    """Key → value mapping; keeps insertion order, last write wins."""

    entries: dict[str, Value] = field(default_factory=dict)

    kind: ClassVar[str] = "table"

    def as_table(self) -> Mapping[str, Value]:
        return MappingProxyType(self.entries)

    def get(self, key: str) -> Value:
        try:
            return self.entries[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __str__(self) -> str:
        body = ", ".join(f"{k} = {_fmt_inline(v)}" for k, v in self.entries.items())
        return "{ " + body + " }" if body else "{}"


Value = Union[VTable, VArray, VString, VInteger, VBool]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    if isinstance(value, VString):
        return f'"{value.value}"'
    return str(value)


def to_python(value: Value) -> Any:
    """Convert a value tree into plain dicts, lists and scalars."""
    if isinstance(value, VTable):
        return {k: to_python(v) for k, v in value.entries.items()}
    if isinstance(value, VArray):
        return [to_python(v) for v in value.items]
    return value.value
