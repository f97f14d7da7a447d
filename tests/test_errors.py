from hypothesis import given, strategies as st

from miniparc.Parsec import ErrorKind, Input, ParsingError, furthest

positions = st.tuples(st.integers(min_value=0, max_value=5), st.integers(min_value=0, max_value=50))


def err(line, col, detail=""):
    return ParsingError(ErrorKind.PATTERN_NOT_FOUND, line, col, detail)


def test_ordering_is_line_then_column():
    assert err(1, 0).is_further_than(err(0, 99))
    assert err(0, 5).is_further_than(err(0, 4))
    assert not err(0, 4).is_further_than(err(0, 5))
    assert not err(2, 3).is_further_than(err(2, 3))


def test_furthest_tie_keeps_first():
    a = err(0, 3, "a")
    b = err(0, 3, "b")
    assert furthest(a, b) is a
    assert furthest(b, a) is b


@given(positions, positions)
def test_furthest_is_the_max_position(p1, p2):
    a = err(*p1, detail="a")
    b = err(*p2, detail="b")
    picked = furthest(a, b)
    assert picked.position == max(p1, p2)
    if p1 >= p2:
        assert picked is a


def test_at_uses_input_position():
    e = ParsingError.at(ErrorKind.EMPTY_INPUT, Input("", 2, 7))
    assert e.position == (2, 7)
    assert e.kind is ErrorKind.EMPTY_INPUT


def test_with_kind_keeps_position():
    e = err(0, 4, "expected 'x'").with_kind(ErrorKind.CUSTOM_MESSAGE, "friendlier")
    assert e == ParsingError(ErrorKind.CUSTOM_MESSAGE, 0, 4, "friendlier")


def test_messages():
    assert err(0, 1, "expected 'x'").message == "pattern not found: expected 'x'"
    assert ParsingError(ErrorKind.MAPPING_FAILED, 0, 1).message == "mapping failed"
    assert ParsingError(ErrorKind.CUSTOM_MESSAGE, 0, 1, "oops").message == "oops"
    assert str(err(0, 1, "x")) == "Parse error at line 0, column 1: pattern not found: x"


def test_empty_custom_message_falls_back_to_kind_text():
    assert ParsingError(ErrorKind.CUSTOM_MESSAGE, 0, 2).message == "error"
    assert str(ParsingError(ErrorKind.CUSTOM_MESSAGE, 0, 2)) == "Parse error at line 0, column 2: error"
