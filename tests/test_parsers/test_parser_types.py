from argwalk.exceptions import UnknownOptionError
from argwalk.parser import Option, ParseResult, ParseState, ParseStatus


def test_parse_status_values():
    assert ParseStatus.DONE == 0
    assert not ParseStatus.DONE
    assert ParseStatus.SUBCOMMAND == 4


def test_parse_result():
    assert not ParseResult(ParseStatus.DONE)
    assert ParseResult(ParseStatus.ERROR, error=UnknownOptionError("x"))
    assert ParseResult(ParseStatus.STDIO).identity == "-"
    assert ParseResult(ParseStatus.MATCH, option=Option(None, "long")).identity == "long"
    assert ParseResult(ParseStatus.DONE).identity is None


def test_parse_state():
    state = ParseState(index=1)
    assert not state.in_cluster
    assert not state.failed
    state.cluster_offset = 2
    state.errors.append(UnknownOptionError("x"))
    assert state.in_cluster
    assert state.failed
    assert ParseState(index=1).operands == []
