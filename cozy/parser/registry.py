# Cozy Flag Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagEntry` and `FlagRegistry`, the ordered set of flags a parser
recognizes.

Entries are created once at registration and never change afterwards.
Insertion order is preserved so usage output lists flags in the order they
were added. Names are validated and checked for uniqueness eagerly; a bad or
duplicate name is a programming error and is raised immediately.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from cozy.exceptions import DuplicateFlagError, InvalidFlagNameError
from cozy.logger import logger
from cozy.parser.binder import ValueBinder
from cozy.parser.flag_name import is_valid_flag_name


@dataclass(frozen=True)
class FlagEntry:
    """
    A registered flag.

    Attributes:
        name (str): Flag spelling including markers, e.g. `-v` or `--verbose`.
        help (str): Help text, may span several lines.
        binder (ValueBinder): Writes parsed values into the caller's destination.
    """

    name: str
    help: str
    binder: ValueBinder


class FlagRegistry:
    """Insertion-ordered mapping of flag name to `FlagEntry`."""

    def __init__(self) -> None:
        self._entries: dict[str, FlagEntry] = {}

    def check_name(self, name: str) -> None:
        """Raise if `name` cannot be registered here."""
        if not is_valid_flag_name(name):
            raise InvalidFlagNameError(name)
        if name in self._entries:
            raise DuplicateFlagError(name)

    def register(self, name: str, help: str, binder: ValueBinder) -> FlagEntry:
        self.check_name(name)
        if not isinstance(binder, ValueBinder):
            raise TypeError(f"binder must be a ValueBinder, got {binder!r}")
        entry = FlagEntry(name=name, help=help, binder=binder)
        self._entries[name] = entry
        logger.debug("Registered flag %s with %r", name, binder)
        return entry

    def get(self, name: str) -> FlagEntry | None:
        return self._entries.get(name)

    @property
    def entries(self) -> tuple[FlagEntry, ...]:
        return tuple(self._entries.values())

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[FlagEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
