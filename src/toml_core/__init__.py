"""TOML Core — decoding engine for a TOML subset."""

from .config import DecoderConfig
from .decoder import decode
from .errors import (
    DecodeError,
    IndexOutOfRangeError,
    KeyNotFoundError,
    NestingDepthError,
    TOMLCoreError,
    TypeMismatchError,
)
from .getter import resolve
from .scanner import EOF, Scanner
from .values import (
    Value,
    VArray,
    VBool,
    VInteger,
    VString,
    VTable,
    to_python,
)

__all__ = [
    "decode",
    "resolve",
    "to_python",
    "DecoderConfig",
    "Scanner",
    "EOF",
    "Value",
    "VTable",
    "VArray",
    "VString",
    "VInteger",
    "VBool",
    "TOMLCoreError",
    "DecodeError",
    "NestingDepthError",
    "TypeMismatchError",
    "KeyNotFoundError",
    "IndexOutOfRangeError",
]
