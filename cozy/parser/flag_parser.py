# Cozy Flag Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `FlagParser`, the entry point of the Cozy flag parser.

A program registers its flags, each bound to a destination it owns, and then
hands the parser the flag-bearing part of its argument vector. Recognized
flags are written into their destinations; everything else comes back as the
list of remaining arguments.

Key Features:
- Short (`-v`) and long (`--verbose`) flags, POSIX bundling (`-abc`)
- Attached values (`--count=5`, `-n=5`) and separate values (`--count 5`)
- Boolean flags that never swallow the following argument
- Multi-valued flags (`--tag a b --tag c`) bound to lists
- `--` terminator, optional tolerance of unknown flags
- Strict typed conversion with structured errors

Public Interface:
- `add_flag(...)`: Register a flag bound to a destination.
- `add_binder(...)`: Register a flag with a pre-built or custom binder.
- `parse(...)`: Parse arguments, return remaining literals.
- `parse_argv(...)`: Same, treating `argv[0]` as the program name.
- `usage()` / `render_usage()`: Plain text or Rich-printed usage.

Example Usage:
    options = SimpleNamespace(count=1, verbose=False, tags=[])
    parser = FlagParser()
    parser.add_flag("--count", "how many", Attr(options, "count"))
    parser.add_flag("-v", "verbose output", Attr(options, "verbose"))
    parser.add_flag("--tag", "tags to apply", options.tags)

    rest = parser.parse(["-v", "--count=3", "--tag", "a", "b", "--", "x"])

    # options.count == 3, options.verbose is True
    # options.tags == ["a", "b"], rest == ["x"]

Errors are raised, never printed: the embedding program decides whether to
show usage and exit.
"""
from __future__ import annotations

import os
from typing import Any, Sequence

from rich.console import Console

from cozy.logger import logger
from cozy.parser.binder import ValueBinder, make_binder
from cozy.parser.dispatcher import Dispatcher
from cozy.parser.registry import FlagEntry, FlagRegistry
from cozy.parser.tokenizer import tokenize
from cozy.parser.usage import format_usage, render_usage


class FlagParser:
    """
    Flag parser with its own registry of flags.

    Each instance is independent; flags registered on one parser are not
    visible to another.

    Args:
        program (str | None): Program name used in usage output.
        allow_unknown (bool): Default for keeping unknown flags as remaining
            arguments instead of raising `UnknownFlagError`.
    """

    def __init__(self, program: str | None = None, allow_unknown: bool = False) -> None:
        self.program: str | None = program
        self.allow_unknown: bool = allow_unknown
        self._registry: FlagRegistry = FlagRegistry()

    def add_flag(
        self,
        name: str,
        help: str,
        destination: Any,
        type: Any = None,
    ) -> FlagEntry:
        """
        Register a flag bound to a caller-owned destination.

        Args:
            name (str): Flag spelling, e.g. "-v" or "--verbose".
            help (str): Help text for usage output.
            destination: `Attr`, `Item`, `Ref`, or a list for multi-valued flags.
            type: Value type; `bool` makes a boolean flag and `list[T]` a
                multi-valued one. Inferred from the destination when omitted.

        Raises:
            InvalidFlagNameError: If the name is not a valid flag name.
            DuplicateFlagError: If the name is already registered.
            TypeError: If the destination or type is unsupported.
        """
        self._registry.check_name(name)
        return self._registry.register(name, help, make_binder(destination, type))

    def add_binder(self, name: str, help: str, binder: ValueBinder) -> FlagEntry:
        """Register a flag with an explicit binder, e.g. a `CallbackBinder`."""
        return self._registry.register(name, help, binder)

    @property
    def entries(self) -> tuple[FlagEntry, ...]:
        return self._registry.entries

    def get_flag(self, name: str) -> FlagEntry | None:
        return self._registry.get(name)

    def parse(
        self, args: Sequence[str], allow_unknown: bool | None = None
    ) -> list[str]:
        """
        Parse `args` and return the arguments that were not consumed.

        `args` must not include the program name.

        Args:
            args (Sequence[str]): The flag-bearing arguments.
            allow_unknown (bool | None): Overrides the parser default.

        Returns:
            list[str]: Unconsumed arguments in their original order.

        Raises:
            ParseError: The first problem found, scanning left to right.
        """
        if allow_unknown is None:
            allow_unknown = self.allow_unknown
        tokens = tokenize(list(args))
        logger.debug("Parsing %d arguments into %d tokens", len(args), len(tokens))
        return Dispatcher(self._registry, allow_unknown).dispatch(tokens)

    def parse_argv(
        self, argv: Sequence[str], allow_unknown: bool | None = None
    ) -> list[str]:
        """Parse a full argument vector whose first element is the program."""
        if not argv:
            raise ValueError("argv must contain at least the program name")
        self.program = os.path.basename(argv[0]) or argv[0]
        return self.parse(argv[1:], allow_unknown=allow_unknown)

    def usage(self) -> str:
        return format_usage(self._registry, self.program)

    def render_usage(self, console: Console | None = None) -> None:
        render_usage(self._registry, self.program, console)

    def __str__(self) -> str:
        return f"FlagParser(program={self.program!r}, flags={len(self._registry)})"

    def __repr__(self) -> str:
        return str(self)
