import pytest

from argwalk.config import ParserSettings
from argwalk.exceptions import ArgumentParseError, CapacityError
from argwalk.parser import OptionParser, OptionTable, ParseStatus

QUIET = ParserSettings(print_errors=False)


def parse(table, *args):
    return OptionParser(table, ["prog", *args], settings=QUIET).parse_args()


def test_initial_values():
    table = OptionTable()
    table.add_option("t", "on", "set_true")
    table.add_option("f", "off", "set_false")
    table.add_option("g", "toggle", "toggle")
    table.add_option("i", "inc", "increment")
    table.add_option("d", "dec", "decrement")
    table.add_option("s", "store", "store")
    table.add_option("a", "append", "append")
    table.add_option("x", "call", "call_void", callback=lambda: None)
    assert parse(table) == {
        "on": False,
        "off": True,
        "toggle": False,
        "inc": 0,
        "dec": 0,
        "store": None,
        "append": [],
    }


def test_set_true_and_set_false_share_destination():
    table = OptionTable()
    table.add_option(None, "color", "set_true")
    table.add_option(None, "no-color", "set_false", dest="color")
    assert parse(table, "--color")["color"] is True
    assert parse(table, "--color", "--no-color")["color"] is False
    assert parse(table, "--no-color", "--color")["color"] is True


def test_toggle():
    table = OptionTable()
    table.add_option("t", None, "toggle")
    assert parse(table, "-t")["t"] is True
    assert parse(table, "-tt")["t"] is False
    assert parse(table, "-t", "-t", "-t")["t"] is True


def test_increment_and_decrement():
    table = OptionTable()
    table.add_option("v", "verbose", "increment", dest="verbosity")
    table.add_option("q", "quiet", "decrement", dest="verbosity")
    assert parse(table, "-vvv")["verbosity"] == 3
    assert parse(table, "-vvq")["verbosity"] == 1
    assert parse(table, "--quiet", "-q")["verbosity"] == -2


def test_existing_values_are_kept():
    table = OptionTable()
    table.add_option("v", None, "increment")
    values = {"v": 5}
    OptionParser(table, ["prog", "-v"], settings=QUIET, values=values).parse_args()
    assert values["v"] == 6


def test_store_last_wins():
    table = OptionTable()
    table.add_option("s", None, "store")
    assert parse(table, "-sa", "-sb")["s"] == "b"


def test_store_list_and_length_dest():
    table = OptionTable()
    table.add_option(
        "p", "point", "store", type="int", list_delim=",", length_dest="point_len"
    )
    values = parse(table, "--point=1,2")
    assert values["point"] == [1, 2]
    assert values["point_len"] == 2


def test_append_accumulates():
    table = OptionTable()
    table.add_option("I", "include", "append", dest="includes")
    values = parse(table, "-Ia", "--include", "b", "-I", "c")
    assert values["includes"] == ["a", "b", "c"]


def test_append_lists_with_length_dest():
    table = OptionTable()
    table.add_option(
        "n", "nums", "append", type="int", list_delim=",", length_dest="count"
    )
    values = parse(table, "--nums=1,2", "-n3")
    assert values["nums"] == [1, 2, 3]
    assert values["count"] == 3


def test_append_capacity_is_atomic():
    table = OptionTable()
    table.add_option(
        "t", "tag", "append", list_delim=",", capacity=2, length_dest="tag_count"
    )
    parser = OptionParser(
        table, ["prog", "--tag=a,b", "--tag=c"], settings=QUIET
    )
    assert parser.step().status == ParseStatus.MATCH
    result = parser.step()
    assert result.status == ParseStatus.ERROR
    assert isinstance(result.error, CapacityError)
    assert parser.values["tag"] == ["a", "b"]
    assert parser.values["tag_count"] == 2


def test_append_capacity_rejects_whole_list():
    table = OptionTable()
    table.add_option("t", "tag", "append", list_delim=",", capacity=2)
    parser = OptionParser(table, ["prog", "--tag=a,b,c"], settings=QUIET)
    with pytest.raises(ArgumentParseError):
        parser.parse_args()
    assert parser.values["tag"] == []


def test_failed_conversion_is_atomic():
    table = OptionTable()
    table.add_option(
        "n", "nums", "append", type="int", list_delim=",", length_dest="count"
    )
    parser = OptionParser(table, ["prog", "--nums=1,x,3"], settings=QUIET)
    with pytest.raises(ArgumentParseError):
        parser.parse_args()
    assert parser.values["nums"] == []
    assert parser.values["count"] == 0


def test_typed_store():
    table = OptionTable()
    table.add_option("i", None, "store", type="int")
    table.add_option("u", None, "store", type="uchar")
    table.add_option("d", None, "store", type="double")
    table.add_option("k", None, "store", type="char")
    values = parse(table, "-i-12", "-u255", "-d2.5", "-kz")
    assert values == {"i": -12, "u": 255, "d": 2.5, "k": "z"}
