"""Embed a FlagParser in a small program.

    python examples/flag_demo.py -v --retries=3 --tag a b -- input.txt
"""
import logging
import sys
from dataclasses import dataclass, field
from enum import Enum

from rich.markup import escape

from cozy import Attr, FlagParser, ParseError, uint16
from cozy.console import console
from cozy.utils import setup_logging


class Level(Enum):
    LOW = "low"
    HIGH = "high"


@dataclass
class Options:
    verbose: bool = False
    retries: int = 1
    port: int = 8080
    level: Level = Level.LOW
    tags: list[str] = field(default_factory=list)


def main(argv: list[str]) -> int:
    options = Options()
    parser = FlagParser()
    parser.add_flag("-v", "verbose output", Attr(options, "verbose"))
    parser.add_flag("--retries", "how many times to retry", Attr(options, "retries"))
    parser.add_flag("--port", "port to listen on", Attr(options, "port"), type=uint16)
    parser.add_flag("--level", "low or high", Attr(options, "level"))
    parser.add_flag("--tag", "tags to apply,\nrepeat or list several", options.tags)

    try:
        rest = parser.parse_argv(argv)
    except ParseError as error:
        console.print(f"[bold red]error:[/] {escape(str(error))}")
        parser.render_usage()
        return 2

    setup_logging(
        mode="cli",
        log_filename=None,
        console_log_level=logging.DEBUG if options.verbose else logging.WARNING,
    )
    logging.getLogger("cozy.demo").info("options=%s rest=%s", options, rest)
    console.print(options)
    console.print(rest)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
