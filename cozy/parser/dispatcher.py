# Cozy Flag Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The dispatch state machine at the heart of `FlagParser.parse()`.

The dispatcher walks the token stream produced by `tokenize()` one token at a
time. It is either IDLE, or AWAITING_VALUE for the most recently seen flag
(the "active" flag).

    state           token            action
    -----           -----            ------
    IDLE            literal          keep it as a remaining argument
    IDLE            flag             look it up and make it active
    AWAITING_VALUE  attached-value   bind it, close the flag
    AWAITING_VALUE  flag             close the active flag, then as IDLE
    AWAITING_VALUE  literal          boolean: set True, keep the literal
                                     single: bind it, close the flag
                                     multi: bind it, stay open
    AWAITING_VALUE  terminator       close the active flag
    IDLE            terminator       nothing
    end of stream                    close the active flag

Closing a flag that received no value sets a boolean to True, raises
`MissingValueError` for a single-valued flag, and leaves a multi-valued
destination as it is. Every literal after the terminator is a remaining
argument, so `--name -- -x` is a missing value, not `name = "-x"`.

Parsing is fail-fast: the first error is raised and nothing is rolled back.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from cozy.exceptions import InvalidValueError, MissingValueError, UnknownFlagError
from cozy.logger import logger
from cozy.parser.binder import BinderArity
from cozy.parser.flag_name import SEPARATOR
from cozy.parser.registry import FlagEntry, FlagRegistry
from cozy.parser.tokenizer import Token, TokenKind


class DispatchState(Enum):
    IDLE = "idle"
    AWAITING_VALUE = "awaiting-value"

    def __str__(self) -> str:
        return self.value


@dataclass
class DispatchRun:
    """Mutable state for one pass over a token stream."""

    remaining: list[str] = field(default_factory=list)
    state: DispatchState = DispatchState.IDLE
    active: FlagEntry | None = None
    values_bound: int = 0
    last_unknown: Token | None = None

    def activate(self, entry: FlagEntry) -> None:
        self.active = entry
        self.values_bound = 0
        self.state = DispatchState.AWAITING_VALUE

    def deactivate(self) -> None:
        self.active = None
        self.values_bound = 0
        self.state = DispatchState.IDLE


class Dispatcher:
    """
    Associates flag tokens with their values and collects everything else.

    Args:
        registry (FlagRegistry): Flags to recognize. Read-only during dispatch.
        allow_unknown (bool): Keep unknown flags as remaining arguments instead
            of raising `UnknownFlagError`.
    """

    def __init__(self, registry: FlagRegistry, allow_unknown: bool = False) -> None:
        self.registry = registry
        self.allow_unknown = allow_unknown

    def dispatch(self, tokens: Sequence[Token]) -> list[str]:
        """
        Bind every flag in `tokens` and return the unconsumed literals in order.

        Raises:
            UnknownFlagError: A flag is not registered and unknown flags are
                not allowed.
            MissingValueError: A single-valued flag was closed without a value.
            InvalidValueError: A value could not be converted.
        """
        run = DispatchRun()
        for token in tokens:
            if token.kind is TokenKind.ATTACHED_VALUE:
                self._handle_attached_value(run, token)
            elif token.kind is TokenKind.FLAG:
                self._handle_flag(run, token)
            elif token.kind is TokenKind.TERMINATOR:
                self._handle_terminator(run)
            else:
                self._handle_literal(run, token)
            if token.kind is not TokenKind.FLAG:
                run.last_unknown = None

        if run.state is DispatchState.AWAITING_VALUE:
            logger.debug("End of arguments with %s still open", run.active.name)
            self._close(run)
        return run.remaining

    def _handle_flag(self, run: DispatchRun, token: Token) -> None:
        if run.state is DispatchState.AWAITING_VALUE:
            self._close(run)

        entry = self.registry.get(token.text)
        if entry is None:
            self._unknown(run, token.text)
            run.last_unknown = token
            return
        run.last_unknown = None
        run.activate(entry)
        logger.debug("Flag %s is awaiting a value", entry.name)

    def _handle_terminator(self, run: DispatchRun) -> None:
        if run.state is DispatchState.AWAITING_VALUE:
            logger.debug("Terminator reached with %s still open", run.active.name)
            self._close(run)

    def _handle_attached_value(self, run: DispatchRun, token: Token) -> None:
        if run.state is DispatchState.IDLE:
            # only an unknown flag of the same argument leaves us idle here
            unknown = run.last_unknown
            assert unknown is not None and unknown.raw == token.raw, (
                "attached value should follow its flag"
            )
            run.remaining[-1] = f"{run.remaining[-1]}{SEPARATOR}{token.text}"
            return

        self._bind(run, token.text)
        self._finish(run)

    def _handle_literal(self, run: DispatchRun, token: Token) -> None:
        if run.state is DispatchState.IDLE:
            run.remaining.append(token.text)
            return

        assert run.active is not None, "active flag should be set while awaiting"
        if run.active.binder.arity is BinderArity.BOOLEAN:
            self._close(run)
            run.remaining.append(token.text)
            return

        if not self._bind(run, token.text):
            self._finish(run)

    def _bind(self, run: DispatchRun, value: str) -> bool:
        entry = run.active
        assert entry is not None, "bind requires an active flag"
        try:
            more = entry.binder.bind(value)
        except InvalidValueError as error:
            raise error.with_flag(entry.name) from error
        run.values_bound += 1
        logger.debug("Bound %r to %s", value, entry.name)
        return more

    def _finish(self, run: DispatchRun) -> None:
        logger.debug("Closed %s", run.active.name if run.active else None)
        run.deactivate()

    def _close(self, run: DispatchRun) -> None:
        """Close the active flag without an explicit value."""
        entry = run.active
        assert entry is not None, "close requires an active flag"
        arity = entry.binder.arity
        if arity is BinderArity.BOOLEAN:
            try:
                entry.binder.bind_implicit()
            except InvalidValueError as error:
                raise error.with_flag(entry.name) from error
        elif arity is BinderArity.SINGLE:
            raise MissingValueError(entry.name)
        elif not run.values_bound:
            logger.debug("Multi-valued flag %s closed without values", entry.name)
        self._finish(run)

    def _unknown(self, run: DispatchRun, spelling: str) -> None:
        if not self.allow_unknown:
            raise UnknownFlagError(spelling)
        logger.debug("Keeping unknown flag %s", spelling)
        run.remaining.append(spelling)
