from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from cozy.parser import Attr, FlagParser
from cozy.parser.coerce import int16, uint32


class Mode(Enum):
    FAST = "fast"
    SAFE = "safe"


@dataclass
class Options:
    verbose: bool = False
    retries: int = 0
    offset: int = 0
    limit: int = 0
    ratio: float = 0.0
    name: str = ""
    mode: Mode = Mode.SAFE
    when: datetime = datetime(2000, 1, 1)
    tags: list[str] = field(default_factory=list)
    sizes: list[int] = field(default_factory=list)


def build_parser(options: Options) -> FlagParser:
    parser = FlagParser()
    parser.add_flag("--verbose", "verbose", Attr(options, "verbose"))
    parser.add_flag("--retries", "retries", Attr(options, "retries"))
    parser.add_flag("--offset", "offset", Attr(options, "offset"), type=int16)
    parser.add_flag("--limit", "limit", Attr(options, "limit"), type=uint32)
    parser.add_flag("--ratio", "ratio", Attr(options, "ratio"))
    parser.add_flag("--name", "name", Attr(options, "name"))
    parser.add_flag("--mode", "mode", Attr(options, "mode"))
    parser.add_flag("--when", "when", Attr(options, "when"))
    parser.add_flag("--tag", "tags", options.tags)
    parser.add_flag("--size", "sizes", options.sizes, type=list[int])
    return parser


def serialize(options: Options) -> list[str]:
    args = [
        f"--verbose={str(options.verbose).lower()}",
        f"--retries={options.retries}",
        f"--offset={options.offset}",
        f"--limit={options.limit}",
        f"--ratio={options.ratio!r}",
        f"--name={options.name}",
        f"--mode={options.mode.name}",
        f"--when={options.when.isoformat()}",
    ]
    args.extend(f"--tag={tag}" for tag in options.tags)
    args.extend(f"--size={size}" for size in options.sizes)
    return args


def test_reparse_reproduces_values():
    first = Options()
    parser = build_parser(first)
    rest = parser.parse(
        [
            "--verbose",
            "--retries",
            "3",
            "--offset=-12",
            "--limit",
            "4000000000",
            "--ratio",
            "0.25",
            "--name=a=b c",
            "--mode",
            "fast",
            "--when",
            "2025-06-01T12:30:00",
            "--tag",
            "x",
            "y",
            "--size=5",
            "positional",
        ]
    )
    assert rest == ["positional"]

    second = Options()
    assert build_parser(second).parse(serialize(first)) == []
    assert second == first


def test_reparse_of_defaults_is_identity():
    options = Options()
    build_parser(options).parse(serialize(Options()))
    assert options == Options()
