# Cozy Flag Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Usage text rendering for registered flags.

Only the ordered `(name, help)` pairs are used. Names are right-aligned to the
longest name and help text starts in a shared column; continuation lines of
multi-line help are indented to that same column:

    Usage of prog:
            -v  verbose output
        --tags  tags to apply,
                may be repeated
"""
from __future__ import annotations

from typing import Iterable

from rich.console import Console

from cozy.console import console as default_console
from cozy.parser.registry import FlagEntry

NAME_INDENT = 4
HELP_GAP = 2


def format_usage(entries: Iterable[FlagEntry], program: str | None = None) -> str:
    """Return plain usage text for `entries`, one flag per line."""
    entries = list(entries)
    lines = [f"Usage of {program}:" if program else "Usage:"]
    longest = max((len(entry.name) for entry in entries), default=0)
    continuation = " " * (NAME_INDENT + longest + HELP_GAP)
    for entry in entries:
        help_text = entry.help.replace("\n", f"\n{continuation}")
        line = f"{'':<{NAME_INDENT}}{entry.name:>{longest}}{'':<{HELP_GAP}}{help_text}"
        lines.append(line)
    return "\n".join(lines) + "\n"


def render_usage(
    entries: Iterable[FlagEntry],
    program: str | None = None,
    console: Console | None = None,
) -> None:
    """Print usage text on the shared Rich console without markup."""
    console = console or default_console
    console.print(format_usage(entries, program), markup=False, highlight=False, end="")
