# Cozy Flag Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Flag name grammar for the Cozy flag parser.

A flag name is spelled the way users type it:

- short form: one marker plus one character (`-v`)
- long form: two markers plus at least one character (`--verbose`)

Names never contain whitespace or `=`, and the bare marker `-` and the
terminator `--` are reserved. Names are validated once, when a flag is
registered; the parser trusts registered names afterwards.
"""
from __future__ import annotations

MARKER = "-"
TERMINATOR = MARKER * 2
SEPARATOR = "="


def is_valid_flag_name(name: object) -> bool:
    """Return True if `name` is a valid short or long flag name."""
    if not isinstance(name, str):
        return False
    if not name.startswith(MARKER) or name in (MARKER, TERMINATOR):
        return False
    if len(name) > 2 and name[1] != MARKER:
        return False
    return not any(char == SEPARATOR or char.isspace() for char in name)


def is_long_flag(name: str) -> bool:
    return name.startswith(TERMINATOR)
