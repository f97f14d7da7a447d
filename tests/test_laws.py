# tests/test_laws.py
from hypothesis import given, strategies as st

from miniparc.Char import quoted_string
from miniparc.Combinators import Repeat, choice
from miniparc.Lisp import expression
from miniparc.Parsec import Input
from miniparc.Prim import match, pure, take_while, take_while0

vals = st.integers() | st.text()


def composed():
    word = take_while0(str.isspace) >> take_while(str.isalpha)
    return choice([Repeat(word).at_most(3), quoted_string().map(lambda s: [s])])


# Invoking a parser value twice on the same input gives the same result
@given(st.text(), st.integers(min_value=0, max_value=5))
def test_referential_transparency(same_result, text, col):
    p = composed()
    inp = Input(text, 0, col)
    same_result(p.parse(inp), p.parse(inp))


@given(st.text(alphabet="() \"abtrue0123456789."))
def test_recursive_grammar_is_repeatable(same_result, text):
    p = expression()
    same_result(p.parse(text), p.parse(text))


# Map identity: p.map(id) === p
@given(st.text())
def test_map_identity(same_result, text):
    p = take_while(str.isalnum)
    same_result(p.map(lambda x: x).parse(text), p.parse(text))


# Map composition: p.map(f).map(g) === p.map(g . f)
@given(st.text())
def test_map_composition(same_result, text):
    p = take_while0(str.isdigit)
    f = len
    g = lambda n: n * 2
    same_result(p.map(f).map(g).parse(text), p.map(lambda x: g(f(x))).parse(text))


# Left identity: pure a >>= f === f a
@given(vals)
def test_bind_left_identity(same_result, v):
    f = lambda x: pure((x, x))
    same_result(pure(v).bind(f).parse("rest"), f(v).parse("rest"))


# pure is the unit of sequencing
@given(st.text())
def test_pure_sequence_identity(same_result, text):
    p = match("a")
    same_result((pure(None) >> p).parse(text), p.parse(text))
    same_result((p << pure(None)).parse(text), p.parse(text))
