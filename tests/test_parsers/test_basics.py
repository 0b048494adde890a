from types import SimpleNamespace

import pytest

from cozy.exceptions import InvalidValueError, MissingValueError, UnknownFlagError
from cozy.parser import Attr, FlagParser, Item, Ref


def build_parser():
    options = SimpleNamespace(count=0, name="", verbose=False, ratio=1.0)
    parser = FlagParser()
    parser.add_flag("--count", "number of items", Attr(options, "count"))
    parser.add_flag("-n", "name to use", Attr(options, "name"))
    parser.add_flag("--verbose", "verbose output", Attr(options, "verbose"))
    parser.add_flag("--ratio", "ratio", Attr(options, "ratio"))
    return parser, options


def test_str():
    parser = FlagParser(program="prog")
    assert str(parser) == "FlagParser(program='prog', flags=0)"
    parser.add_flag("-v", "verbose", Ref(False))
    assert repr(parser) == "FlagParser(program='prog', flags=1)"


@pytest.mark.parametrize(
    "args",
    [[], ["a"], ["a", "b", "c"], ["-", "x", "-"], ["file with spaces", ""]],
)
def test_no_flags_returns_literals_in_order(args):
    parser, _ = build_parser()
    assert parser.parse(args) == args


def test_attached_integer():
    parser, options = build_parser()
    assert parser.parse(["--count=5"]) == []
    assert options.count == 5


def test_attached_integer_with_garbage():
    parser, options = build_parser()
    with pytest.raises(InvalidValueError) as excinfo:
        parser.parse(["--count=5x"])
    assert excinfo.value.token == "5x"
    assert excinfo.value.expected_type == "int"
    assert excinfo.value.flag == "--count"
    assert options.count == 0


def test_separate_value():
    parser, options = build_parser()
    assert parser.parse(["--count", "7", "rest"]) == ["rest"]
    assert options.count == 7


def test_single_value_consumes_dash_literal():
    parser, options = build_parser()
    assert parser.parse(["-n", "-"]) == []
    assert options.name == "-"


def test_missing_value_at_end():
    parser, _ = build_parser()
    with pytest.raises(MissingValueError) as excinfo:
        parser.parse(["--count"])
    assert excinfo.value.flag == "--count"


def test_missing_value_before_next_flag():
    parser, _ = build_parser()
    with pytest.raises(MissingValueError):
        parser.parse(["--count", "--verbose"])


def test_boolean_never_consumes_literal():
    parser, options = build_parser()
    assert parser.parse(["--verbose", "extra"]) == ["extra"]
    assert options.verbose is True


def test_boolean_before_another_flag():
    parser, options = build_parser()
    assert parser.parse(["--verbose", "--count", "2"]) == []
    assert options.verbose is True
    assert options.count == 2


@pytest.mark.parametrize(
    "arg, expected",
    [("--verbose=true", True), ("--verbose=false", False), ("--verbose=", True)],
)
def test_boolean_attached_value(arg, expected):
    parser, options = build_parser()
    options.verbose = not expected
    assert parser.parse([arg]) == []
    assert options.verbose is expected


def test_boolean_attached_invalid():
    parser, _ = build_parser()
    with pytest.raises(InvalidValueError) as excinfo:
        parser.parse(["--verbose=maybe"])
    assert excinfo.value.expected_type == "bool"


def test_unknown_flag():
    parser, _ = build_parser()
    with pytest.raises(UnknownFlagError) as excinfo:
        parser.parse(["a", "--nope"])
    assert excinfo.value.flag == "--nope"


def test_last_value_wins_for_single_flag():
    parser, options = build_parser()
    parser.parse(["--count", "1", "--count=2"])
    assert options.count == 2


def test_first_error_aborts_without_rollback():
    parser, options = build_parser()
    with pytest.raises(InvalidValueError):
        parser.parse(["--count", "3", "--ratio", "fast", "--nope"])
    assert options.count == 3


def test_negative_value_needs_attached_form():
    parser, options = build_parser()
    parser.parse(["--count=-4"])
    assert options.count == -4
    with pytest.raises(MissingValueError):
        parser.parse(["--count", "-4"])


def test_mapping_destination():
    settings = {"level": 1}
    parser = FlagParser()
    parser.add_flag("--level", "level", Item(settings, "level"))
    parser.parse(["--level", "3"])
    assert settings == {"level": 3}


def test_parse_argv_records_program():
    parser, options = build_parser()
    assert parser.parse_argv(["/usr/bin/prog", "--count", "1", "x"]) == ["x"]
    assert parser.program == "prog"
    assert options.count == 1


def test_parse_argv_requires_program():
    parser, _ = build_parser()
    with pytest.raises(ValueError):
        parser.parse_argv([])


def test_parse_accepts_tuple_and_keeps_input():
    parser, _ = build_parser()
    args = ("--verbose", "x")
    assert parser.parse(args) == ["x"]
    assert args == ("--verbose", "x")
