import sys

from miniparc.Char import char
from miniparc.Combinators import many
from miniparc.Lisp import Compound, parse_line
from miniparc.Prim import run_parser


def test_repeat_is_stack_safe():
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(1000)
    try:
        n = 5000
        res, err = run_parser(many(char('a')), "a" * n)
    finally:
        sys.setrecursionlimit(limit)
    assert err is None
    assert len(res) == n


def test_nested_expressions():
    depth = 20
    value, diagnostic = parse_line("(f " * depth + ")" * depth)
    assert diagnostic is None
    for _ in range(depth):
        assert isinstance(value, Compound)
        assert value.ident == "f"
        value = value.params[0] if value.params else None
    assert value is None
