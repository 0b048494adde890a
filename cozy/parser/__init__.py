"""
Cozy Flag Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .binder import (
    BinderArity,
    CallbackBinder,
    ContainerBinder,
    ScalarBinder,
    ValueBinder,
    make_binder,
)
from .destination import Attr, Destination, Item, Ref
from .dispatcher import Dispatcher
from .flag_parser import FlagParser
from .registry import FlagEntry, FlagRegistry
from .tokenizer import Token, TokenKind, tokenize
from .usage import format_usage, render_usage

__all__ = [
    "Attr",
    "BinderArity",
    "CallbackBinder",
    "ContainerBinder",
    "Destination",
    "Dispatcher",
    "FlagEntry",
    "FlagParser",
    "FlagRegistry",
    "Item",
    "Ref",
    "ScalarBinder",
    "Token",
    "TokenKind",
    "ValueBinder",
    "format_usage",
    "make_binder",
    "render_usage",
    "tokenize",
]
