import pytest

from argwalk.config import ParserSettings
from argwalk.exceptions import (
    ArgumentParseError,
    MissingArgumentError,
    UnknownOptionError,
)
from argwalk.parser import OptionParser, OptionTable, ParseStatus

QUIET = ParserSettings(print_errors=False)


def build_table():
    table = OptionTable()
    table.add_option("a", "alpha", "set_false", description="Alpha option")
    table.add_option("b", "beta", "set_true", description="Beta option")
    table.add_option("c", "charlie", "store", description="Charlie option")
    return table


def test_posix_bundling():
    """Test the bundling of short options in the POSIX style."""
    argv = ["prog", "-ab"]
    values = OptionParser(build_table(), argv, settings=QUIET).parse_args()
    assert values["alpha"] is False
    assert values["beta"] is True
    assert values["charlie"] is None
    assert argv == ["prog"]


def test_posix_bundling_attached_value():
    """The rest of a cluster after an argument-taking option is its argument."""
    table = OptionTable()
    table.add_option("f", "set-flag", "set_true")
    table.add_option("s", "set-string", "store", arg="ARG")

    argv = ["prog", "-fsHELLO"]
    values = OptionParser(table, argv, settings=QUIET).parse_args()
    assert values["set_flag"] is True
    assert values["set_string"] == "HELLO"
    assert argv == ["prog"]


def test_posix_bundling_last_has_value():
    """Test the bundling of short options with the last option taking the next token."""
    argv = ["prog", "-abc", "value", "file"]
    values = OptionParser(build_table(), argv, settings=QUIET).parse_args()
    assert values["alpha"] is False
    assert values["beta"] is True
    assert values["charlie"] == "value"
    assert argv == ["prog", "file"]


def test_posix_bundling_matches_separate_options():
    bundled = ["prog", "-bacX"]
    separate = ["prog", "-b", "-a", "-cX"]
    split = ["prog", "-b", "-a", "-c", "X"]
    results = [
        OptionParser(build_table(), argv, settings=QUIET).parse_args()
        for argv in (bundled, separate, split)
    ]
    assert results[0] == results[1] == results[2]
    assert bundled == separate == split == ["prog"]


def test_posix_bundling_steps_one_option_at_a_time():
    parser = OptionParser(build_table(), ["prog", "-abcX"], settings=QUIET)
    identities = []
    while result := parser.step():
        assert result.status == ParseStatus.MATCH
        identities.append(result.identity)
    assert identities == ["a", "b", "c"]
    assert parser.finished


def test_posix_bundling_invalid():
    """An unknown character in a cluster is reported with its position."""
    argv = ["prog", "-axb"]
    parser = OptionParser(build_table(), argv, settings=QUIET)

    first = parser.step()
    assert first.status == ParseStatus.MATCH
    second = parser.step()
    assert second.status == ParseStatus.ERROR
    assert isinstance(second.error, UnknownOptionError)
    assert str(second.error) == "unrecognized option '-x' at position 2 in '-axb'"
    third = parser.step()
    assert third.status == ParseStatus.MATCH
    assert parser.values["beta"] is True
    assert parser.step().status == ParseStatus.DONE


def test_posix_bundling_missing_value():
    argv = ["prog", "-bc"]
    parser = OptionParser(build_table(), argv, settings=QUIET)
    with pytest.raises(ArgumentParseError) as excinfo:
        parser.parse_args()
    assert len(excinfo.value.errors) == 1
    assert isinstance(excinfo.value.errors[0], MissingArgumentError)
    assert parser.values["charlie"] is None
    assert parser.values["beta"] is True


def test_missing_argument_leaves_destination_untouched():
    table = OptionTable()
    table.add_option("c", None, "store")
    parser = OptionParser(table, ["prog", "-c"], settings=QUIET)

    result = parser.step()
    assert result.status == ParseStatus.ERROR
    assert isinstance(result.error, MissingArgumentError)
    assert str(result.error) == "option '-c' requires an argument"
    assert parser.values == {"c": None}
    assert parser.step().status == ParseStatus.DONE
