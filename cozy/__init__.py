"""
Cozy Flag Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    CozyError,
    DuplicateFlagError,
    FlagDefinitionError,
    InvalidFlagNameError,
    InvalidValueError,
    MissingValueError,
    ParseError,
    UnknownFlagError,
)
from .logger import logger
from .parser import Attr, CallbackBinder, FlagParser, Item, Ref
from .parser.coerce import (
    float32,
    float64,
    int8,
    int16,
    int32,
    int64,
    uint8,
    uint16,
    uint32,
    uint64,
)

__all__ = [
    "Attr",
    "CallbackBinder",
    "CozyError",
    "DuplicateFlagError",
    "FlagDefinitionError",
    "FlagParser",
    "InvalidFlagNameError",
    "InvalidValueError",
    "Item",
    "MissingValueError",
    "ParseError",
    "Ref",
    "UnknownFlagError",
    "float32",
    "float64",
    "int8",
    "int16",
    "int32",
    "int64",
    "logger",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
]
