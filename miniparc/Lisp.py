"""A toy LISP-like expression grammar built from the combinators.

    expr     := ws (atom | compound)
    compound := ws '(' ws ident expr* ws ')'
    atom     := bool | number | string
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .Parsec import Parsec
from .Prim import match, take_while, take_while0, lazy
from .Char import quoted_string
from .Combinators import many
from .Driver import MainParser, Diagnostic

Value = Union[bool, float, str]


@dataclass
class Atom:
    value: Value


@dataclass
class Compound:
    ident: str
    params: List['Expression'] = field(default_factory=list)


Expression = Union[Atom, Compound]


def _is_blank(c: str) -> bool:
    return c in " \t"

def whitespace() -> Parsec[str]:
    return take_while0(_is_blank, "blanks")

def boolean() -> Parsec[bool]:
    return match("true").map(lambda _: True) | match("false").map(lambda _: False)

def integer() -> Parsec[str]:
    return take_while(str.isdigit, "digits")

def decimal() -> Parsec[str]:
    # "1.5" or "2."
    whole = take_while(str.isdigit, "digits") << match(".")
    frac = take_while0(str.isdigit, "digits")
    return (whole & frac).map(lambda parts: f"{parts[0]}.{parts[1]}")

def number() -> Parsec[float]:
    return (decimal() | integer()).try_map(_to_float, "not a number")

def _to_float(text: str) -> Optional[float]:
    try:
        return float(text)
    except ValueError:
        return None

def atom() -> Parsec[Atom]:
    value = boolean() | number() | quoted_string()
    return value.map(Atom)

def compound() -> Parsec[Compound]:
    ws = whitespace()
    ident = take_while(str.isalpha, "identifier")
    head = (ws >> match("(")) >> (ws >> ident)
    body = many(lazy(expression))
    close = (ws >> match(")")).with_error("expected ')' to close the expression")
    return ((head & body) << close).map(lambda parts: Compound(parts[0], parts[1]))

def expression() -> Parsec[Expression]:
    return whitespace() >> (atom() | compound())


def parse_line(text: str) -> Tuple[Optional[Expression], Optional[Diagnostic]]:
    """Parse one line of input with the expression grammar."""
    return MainParser(text, expression()).parse()
