# Cozy Flag Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Caller-owned destinations that value binders write into.

A binder never owns the value it fills in. Instead it holds a small reference
object that knows how to read and replace one slot owned by the caller:

- `Attr(obj, "name")`: an attribute on any object (namespace, dataclass, ...)
- `Item(mapping, key)`: a key in a mutable mapping
- `Ref(value)`: a standalone mutable cell exposing `.value`

A bare `list` is also accepted as the destination of a multi-valued flag; the
binder appends to it in place and never rebinds it.

The referenced object must outlive the parser that writes to it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping, Protocol, runtime_checkable


@runtime_checkable
class Destination(Protocol):
    def get(self) -> Any: ...

    def set(self, value: Any) -> None: ...


@dataclass
class Ref:
    """A standalone mutable cell."""

    value: Any = None

    def get(self) -> Any:
        return self.value

    def set(self, value: Any) -> None:
        self.value = value


@dataclass(frozen=True)
class Attr:
    """An attribute slot on a caller-owned object."""

    obj: Any
    name: str

    def get(self) -> Any:
        return getattr(self.obj, self.name, None)

    def set(self, value: Any) -> None:
        setattr(self.obj, self.name, value)


@dataclass(frozen=True)
class Item:
    """A key slot in a caller-owned mapping."""

    mapping: MutableMapping[Any, Any]
    key: Any

    def get(self) -> Any:
        return self.mapping.get(self.key)

    def set(self, value: Any) -> None:
        self.mapping[self.key] = value


def as_destination(target: Any) -> Destination:
    """
    Normalize a binder target into a `Destination`.

    Lists are wrapped in a `Ref` so that container binders append to the
    caller's list object itself.
    """
    if isinstance(target, Destination):
        return target
    if isinstance(target, list):
        return Ref(target)
    raise TypeError(
        f"Unsupported destination {target!r}. "
        "Use Attr(obj, name), Item(mapping, key), Ref(value) or a list."
    )
