# Cozy Flag Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by the Cozy flag parser.

Registration problems are programming errors and are raised as soon as the
offending flag is added. Parse problems describe malformed user input and are
raised from `FlagParser.parse()`; the first one encountered, scanning left to
right, aborts the parse.

All exceptions inherit from `CozyError`, the base exception for the library.

Exception Hierarchy:
- CozyError
    ├── FlagDefinitionError
    │   ├── InvalidFlagNameError
    │   └── DuplicateFlagError
    └── ParseError
        ├── UnknownFlagError
        ├── MissingValueError
        └── InvalidValueError

Each exception keeps the structured pieces it was built from (flag name,
offending token, expected type name) as attributes so an embedding program can
render its own message instead of relying on `str(error)`.
"""
from __future__ import annotations


class CozyError(Exception):
    """Base exception for the Cozy flag parser."""


class FlagDefinitionError(CozyError):
    """Exception raised when a flag cannot be registered."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class InvalidFlagNameError(FlagDefinitionError):
    """Exception raised when a flag name does not follow the flag name grammar."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"invalid flag name {name!r}")


class DuplicateFlagError(FlagDefinitionError):
    """Exception raised when a flag name is registered twice on the same parser."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"flag {name} is already registered")


class ParseError(CozyError):
    """Exception raised when an argument vector cannot be parsed."""

    def __init__(self, message: str, flag: str | None = None, token: str | None = None):
        super().__init__(message)
        self.flag = flag
        self.token = token


class UnknownFlagError(ParseError):
    """Exception raised when a flag token has no registered counterpart."""

    def __init__(self, flag: str) -> None:
        super().__init__(f"unknown flag {flag}", flag=flag, token=flag)


class MissingValueError(ParseError):
    """Exception raised when a single-valued flag is closed without a value."""

    def __init__(self, flag: str) -> None:
        super().__init__(f"missing value after {flag}", flag=flag)


class InvalidValueError(ParseError):
    """Exception raised when a token cannot be converted to the destination type."""

    def __init__(
        self, token: str, expected_type: str, flag: str | None = None
    ) -> None:
        message = f"cannot parse {token!r} as {expected_type}"
        if flag:
            message = f"{message} for {flag}"
        super().__init__(message, flag=flag, token=token)
        self.expected_type = expected_type

    def with_flag(self, flag: str) -> InvalidValueError:
        """Return a copy of this error attributed to `flag`."""
        return InvalidValueError(self.token or "", self.expected_type, flag)
