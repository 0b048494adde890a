import pytest

from cozy.exceptions import MissingValueError
from cozy.parser import FlagParser, Ref


def test_terminator_keeps_dash_arguments_literal():
    verbose = Ref(False)
    parser = FlagParser()
    parser.add_flag("--verbose", "verbose", verbose)
    assert parser.parse(["--", "--not-a-flag", "x"]) == ["--not-a-flag", "x"]
    assert parser.parse(["--verbose", "--", "--verbose"]) == ["--verbose"]
    assert verbose.value is True


def test_second_terminator_is_literal():
    parser = FlagParser()
    assert parser.parse(["a", "--", "--", "b"]) == ["a", "--", "b"]


def test_terminator_closes_open_single_flag():
    name = Ref("")
    parser = FlagParser()
    parser.add_flag("--name", "name", name)
    with pytest.raises(MissingValueError) as excinfo:
        parser.parse(["--name", "--", "-x", "y"])
    assert excinfo.value.flag == "--name"
    assert name.value == ""


def test_terminator_closes_open_multi_flag():
    tags = []
    parser = FlagParser()
    parser.add_flag("--tag", "tags", tags)
    assert parser.parse(["--tag", "a", "--", "pos"]) == ["pos"]
    assert tags == ["a"]


def test_terminator_closes_open_boolean_flag():
    verbose = Ref(False)
    parser = FlagParser()
    parser.add_flag("-v", "verbose", verbose)
    assert parser.parse(["-v", "--", "true"]) == ["true"]
    assert verbose.value is True


def test_terminator_without_flags():
    parser = FlagParser()
    assert parser.parse(["--"]) == []
