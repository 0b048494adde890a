# Cozy Flag Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Strict value coercion for the Cozy flag parser.

Every converter here consumes the *whole* token: leading or trailing garbage,
surrounding whitespace, `+` signs and `_` digit separators are rejected rather
than silently accepted the way `int()` and `float()` would.

Supported scalar types:
- `bool`: "" and "true" mean True, "false" means False
- `int`, and the fixed-width kinds `int8` ... `uint64` (range checked)
- `float`, and the fixed-width kinds `float32` / `float64`
- `str`: taken verbatim
- `Enum` subclasses: by member name, then by member value
- `datetime`: anything `dateutil` can parse

Functions:
- coerce_bool / coerce_int / coerce_float / coerce_enum / coerce_datetime
- resolve_converter: map a declared type to `(converter, type_name)`
- coerce_value: convert a token to a declared type in one call
"""
from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, EnumMeta
from typing import Any, Callable

from dateutil import parser as date_parser

Converter = Callable[[str], Any]

_SIGNED_PATTERN = re.compile(r"-?[0-9]+")
_UNSIGNED_PATTERN = re.compile(r"[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"-?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class FixedInt:
    """A fixed-width integer kind used as a flag type, e.g. `uint16`."""

    name: str
    bits: int
    signed: bool

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FixedFloat:
    """A fixed-width floating point kind used as a flag type, e.g. `float32`."""

    name: str
    struct_format: str

    def __str__(self) -> str:
        return self.name


int8 = FixedInt("int8", 8, True)
int16 = FixedInt("int16", 16, True)
int32 = FixedInt("int32", 32, True)
int64 = FixedInt("int64", 64, True)
uint8 = FixedInt("uint8", 8, False)
uint16 = FixedInt("uint16", 16, False)
uint32 = FixedInt("uint32", 32, False)
uint64 = FixedInt("uint64", 64, False)
float32 = FixedFloat("float32", "f")
float64 = FixedFloat("float64", "d")


def coerce_bool(value: str) -> bool:
    """
    Convert a token to a boolean.

    Only the empty string, "true" and "false" are accepted. The empty string
    is what a boolean flag receives when it appears without a value.

    Raises:
        ValueError: For any other spelling.
    """
    if value in ("", "true"):
        return True
    if value == "false":
        return False
    raise ValueError(f"'{value}' is not one of true, false")


def coerce_int(value: str, kind: FixedInt | None = None) -> int:
    """
    Convert a token made only of decimal digits (and an optional leading `-`
    for signed kinds) to an int, checking the range of `kind` when given.
    """
    pattern = _UNSIGNED_PATTERN if kind and not kind.signed else _SIGNED_PATTERN
    if not pattern.fullmatch(value):
        raise ValueError(f"'{value}' is not a whole number")
    number = int(value)
    if kind and not kind.min <= number <= kind.max:
        raise ValueError(f"'{value}' is out of range for {kind}")
    return number


def coerce_float(value: str, kind: FixedFloat | None = None) -> float:
    """
    Convert a decimal or scientific notation token to a float.

    `inf`, `infinity` and `nan` are accepted in any case. A finite spelling
    that overflows the target kind is rejected instead of becoming infinity.
    """
    if not _FLOAT_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not a number")
    number = float(value)
    finite_spelling = "n" not in value.lower()
    if finite_spelling and number in (float("inf"), float("-inf")):
        raise ValueError(f"'{value}' is out of range for {kind or 'float'}")
    if kind:
        try:
            number = struct.unpack(
                kind.struct_format, struct.pack(kind.struct_format, number)
            )[0]
        except OverflowError as error:
            raise ValueError(f"'{value}' is out of range for {kind}") from error
        if finite_spelling and math.isinf(number):
            raise ValueError(f"'{value}' is out of range for {kind}")
    return number


def coerce_enum(value: str, enum_type: EnumMeta) -> Any:
    """
    Convert a token to an Enum member.

    Tries to resolve by name first, then by the value coerced to the type of
    the enum's values.

    Raises:
        ValueError: If the token matches no member.
    """
    try:
        return enum_type[value]
    except KeyError:
        pass

    base_type = type(next(iter(enum_type)).value)
    try:
        if base_type is str:
            return enum_type(value)
        converter, _ = resolve_converter(base_type)
        return enum_type(converter(value))
    except (ValueError, TypeError):
        values = [str(member.value) for member in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


def coerce_datetime(value: str) -> datetime:
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError) as error:
        raise ValueError(f"'{value}' could not be parsed as a datetime") from error


def resolve_converter(target_type: Any) -> tuple[Converter, str]:
    """
    Return the strict converter and the display name for a scalar type.

    Raises:
        TypeError: If `target_type` is not a supported scalar type.
    """
    if target_type is bool:
        return coerce_bool, "bool"
    if target_type is int:
        return coerce_int, "int"
    if target_type is float:
        return coerce_float, "float"
    if target_type is str:
        return str, "str"
    if target_type is datetime:
        return coerce_datetime, "datetime"
    if isinstance(target_type, FixedInt):
        return (lambda value: coerce_int(value, target_type)), target_type.name
    if isinstance(target_type, FixedFloat):
        return (lambda value: coerce_float(value, target_type)), target_type.name
    if isinstance(target_type, EnumMeta) and issubclass(target_type, Enum):
        if not len(target_type):
            raise TypeError(f"Enum {target_type.__name__} has no members")
        return (lambda value: coerce_enum(value, target_type)), target_type.__name__
    raise TypeError(f"Unsupported flag value type: {target_type!r}")


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Convert a token to the given scalar type.

    Raises:
        ValueError: If the token is not a complete, in-range spelling of the type.
        TypeError: If the type itself is unsupported.
    """
    converter, _ = resolve_converter(target_type)
    return converter(value)
