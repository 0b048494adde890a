from io import StringIO

from rich.console import Console

from cozy.parser import FlagParser, Ref
from cozy.parser.usage import format_usage


def build_parser(program=None):
    parser = FlagParser(program=program)
    parser.add_flag("-v", "verbose output", Ref(False))
    parser.add_flag("--tags", "tags to apply,\nmay be repeated", [])
    return parser


def test_usage_aligns_names_and_help():
    assert build_parser("prog").usage() == (
        "Usage of prog:\n"
        "        -v  verbose output\n"
        "    --tags  tags to apply,\n"
        "            may be repeated\n"
    )


def test_usage_without_program():
    assert build_parser().usage().splitlines()[0] == "Usage:"


def test_usage_without_flags():
    assert FlagParser(program="prog").usage() == "Usage of prog:\n"
    assert format_usage([]) == "Usage:\n"


def test_usage_follows_registration_order():
    parser = FlagParser(program="prog")
    parser.add_flag("--zeta", "last letter", Ref(""))
    parser.add_flag("-a", "first letter", Ref(False))
    lines = parser.usage().splitlines()
    assert lines[1].strip().startswith("--zeta")
    assert lines[2].strip().startswith("-a")


def test_usage_uses_program_from_argv():
    parser = build_parser()
    parser.parse_argv(["/usr/local/bin/tool", "-v"])
    assert parser.usage().splitlines()[0] == "Usage of tool:"


def test_render_usage_prints_plain_text():
    parser = build_parser("prog")
    parser.add_flag("--style", "[bold]not markup[/bold]", Ref(""))
    output = StringIO()
    parser.render_usage(Console(file=output, width=120, color_system=None))
    assert output.getvalue() == parser.usage()
    assert "[bold]not markup[/bold]" in output.getvalue()
