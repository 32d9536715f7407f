"""Dotted-path lookup over a decoded value tree."""

from __future__ import annotations

from .errors import TypeMismatchError
from .values import Value, VArray, VTable


def apply_getter(value: Value, accessor: str) -> Value:
    """Resolve a single accessor on a value.

    - VTable: key lookup
    - VArray: 0-based decimal index
    - scalars: ``TypeMismatchError``
    """
    if isinstance(value, VTable):
        return value.get(accessor)

    if isinstance(value, VArray):
        if not (accessor.isascii() and accessor.isdigit()):
            raise TypeMismatchError("array index", f"key {accessor!r}")
        return value.at(int(accessor))

    raise TypeMismatchError("table or array", value.kind)


def resolve(value: Value, path: str) -> Value:
    """Walk a dotted *path* such as ``"servers.alpha.ports.0"``.

    An empty path returns *value* itself.
    """
    if not path:
        return value
    for accessor in path.split("."):
        value = apply_getter(value, accessor)
    return value
