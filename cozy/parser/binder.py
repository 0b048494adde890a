# Cozy Flag Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Type-erased value binders for the Cozy flag parser.

A `ValueBinder` turns "here is a new string token" into "mutate a
caller-owned destination". The dispatcher only sees the binder's arity and
the boolean returned from `bind()`; it never knows the destination type.

Arity (`BinderArity`):
- SINGLE: exactly one value token is required.
- BOOLEAN: zero or one value token; no value means True.
- MULTI: one value token per occurrence; every successful bind returns True
  ("may consume another token").

Binders:
- ScalarBinder: bool, numeric, text, Enum and datetime destinations.
- ContainerBinder: `list[T]` destinations, appended to in place.
- CallbackBinder: wraps a caller function for custom conversions.

`make_binder()` picks and builds the right binder from a destination and an
optional declared type.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import Any, Callable, get_args, get_origin

from cozy.exceptions import InvalidValueError
from cozy.parser.coerce import Converter, resolve_converter
from cozy.parser.destination import Destination, as_destination


class BinderArity(Enum):
    """How many value tokens a flag accepts per occurrence."""

    SINGLE = "single"
    BOOLEAN = "boolean"
    MULTI = "multi"

    def __str__(self) -> str:
        return self.value


class ValueBinder(ABC):
    """
    Base class for binders.

    Subclasses implement `bind()`, which converts `token`, writes the result
    to the destination, and returns True if the flag may accept another
    value token right after this one.

    Raises:
        InvalidValueError: If the token cannot be converted.
    """

    arity: BinderArity = BinderArity.SINGLE
    type_name: str = "value"

    @abstractmethod
    def bind(self, token: str) -> bool: ...

    def bind_implicit(self) -> bool:
        """Bind the implicit value of a boolean flag given without a value."""
        return self.bind("")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self.type_name}, arity={self.arity})"


class ScalarBinder(ValueBinder):
    """Binds one converted value into a scalar destination."""

    def __init__(
        self,
        destination: Destination,
        converter: Converter,
        type_name: str,
        arity: BinderArity = BinderArity.SINGLE,
    ) -> None:
        self.destination = destination
        self.converter = converter
        self.type_name = type_name
        self.arity = arity

    def bind(self, token: str) -> bool:
        try:
            value = self.converter(token)
        except ValueError as error:
            raise InvalidValueError(token, self.type_name) from error
        self.destination.set(value)
        return False


class ContainerBinder(ValueBinder):
    """Appends one converted element per bind to a list destination."""

    arity = BinderArity.MULTI

    def __init__(
        self, destination: Destination, converter: Converter, element_name: str
    ) -> None:
        self.destination = destination
        self.converter = converter
        self.type_name = f"list[{element_name}]"
        self.element_name = element_name

    def bind(self, token: str) -> bool:
        try:
            value = self.converter(token)
        except ValueError as error:
            raise InvalidValueError(token, self.element_name) from error
        values = self.destination.get()
        if values is None:
            values = []
            self.destination.set(values)
        values.append(value)
        return True


class CallbackBinder(ValueBinder):
    """
    Binds through a caller-supplied function.

    `callback(token)` performs its own conversion and storage and returns
    whether it may consume another token. `ValueError` or `TypeError` raised
    by the callback are reported as `InvalidValueError`.
    """

    def __init__(
        self,
        callback: Callable[[str], bool | None],
        arity: BinderArity | str = BinderArity.SINGLE,
        type_name: str = "value",
    ) -> None:
        if not callable(callback):
            raise TypeError(f"{callback!r} is not callable")
        self.callback = callback
        self.arity = BinderArity(arity)
        self.type_name = type_name

    def bind(self, token: str) -> bool:
        try:
            result = self.callback(token)
        except (ValueError, TypeError) as error:
            raise InvalidValueError(token, self.type_name) from error
        return bool(result)


def _infer_type(current: Any) -> Any:
    if current is None:
        return str
    if isinstance(current, list):
        return list[_infer_type(current[0])] if current else list[str]
    if isinstance(current, Enum):
        return type(current)
    for candidate in (bool, int, float, str, datetime):
        if isinstance(current, candidate):
            return candidate
    raise TypeError(
        f"Cannot infer a flag type from {current!r}; pass type= explicitly"
    )


def _is_list_type(target_type: Any) -> bool:
    return target_type is list or get_origin(target_type) is list


def make_binder(target: Any, type: Any = None) -> ValueBinder:
    """
    Build the binder for a destination.

    Args:
        target: A `Destination` (`Attr`, `Item`, `Ref`) or a list.
        type: The declared value type. Scalar types from `cozy.parser.coerce`,
            or `list[T]` for a multi-valued flag. Inferred from the
            destination's current value when omitted.

    Returns:
        ValueBinder: A binder with the arity matching the type.

    Raises:
        TypeError: If the type is unsupported, is a container of containers,
            or does not fit the destination.
    """
    destination = as_destination(target)
    current = destination.get()
    target_type = _infer_type(current) if type is None else type

    if _is_list_type(target_type):
        args = get_args(target_type)
        element_type = args[0] if args else str
        if _is_list_type(element_type):
            raise TypeError("Containers of containers are not supported")
        if current is not None and not isinstance(current, list):
            raise TypeError(
                f"Destination for {target_type} holds {current!r}, expected a list"
            )
        converter, element_name = resolve_converter(element_type)
        return ContainerBinder(destination, converter, element_name)

    if isinstance(current, list):
        raise TypeError(f"List destination needs a list type, got {target_type!r}")
    converter, type_name = resolve_converter(target_type)
    arity = BinderArity.BOOLEAN if target_type is bool else BinderArity.SINGLE
    return ScalarBinder(destination, converter, type_name, arity)
