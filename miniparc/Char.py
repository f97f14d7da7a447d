from typing import Iterable

from .Parsec import Parsec, Input, ParsingError, ErrorKind, Ok, Error, ParseResult
from .Prim import match, satisfy, take_while, take_while0


# Helper function: Parses a single character
def char(c: str) -> Parsec[str]:
    """Parses a single character c and returns it."""
    if len(c) != 1:
        raise ValueError(f"char expects a single character, got {c!r}")
    return match(c)

# Parses a specific string
def string(s: str) -> Parsec[str]:
    """Parses the exact string s and returns it."""
    return match(s)

def one_of(cs: Iterable[str]) -> Parsec[str]:
    """Succeeds if the current character is in cs. Returns the parsed character."""
    allowed = frozenset(cs)
    return satisfy(lambda c: c in allowed, f"one of {''.join(sorted(allowed))!r}")

def none_of(cs: Iterable[str]) -> Parsec[str]:
    """Succeeds if the current character is not in cs. Returns the parsed character."""
    forbidden = frozenset(cs)
    return satisfy(lambda c: c not in forbidden, f"none of {''.join(sorted(forbidden))!r}")

def space() -> Parsec[str]:
    return satisfy(str.isspace, "space")

# Skips zero or more whitespace characters, returning what was skipped
def spaces() -> Parsec[str]:
    return take_while0(str.isspace, "white space")

def letter() -> Parsec[str]:
    return satisfy(str.isalpha, "letter")

def digit() -> Parsec[str]:
    """Parses an ASCII digit and returns it."""
    return satisfy(lambda c: c in "0123456789", "digit")

def alpha_num() -> Parsec[str]:
    return satisfy(str.isalnum, "letter or digit")

def digits() -> Parsec[str]:
    return take_while(lambda c: c in "0123456789", "digits")

def letters() -> Parsec[str]:
    return take_while(str.isalpha, "letters")


QUOTE = '"'
ESCAPE = '\\'

def quoted_string() -> Parsec[str]:
    """Parses a double-quoted string and returns the text between the quotes.

    A backslash escapes the character after it, so ``\\"`` does not close the
    string. Escape pairs are returned verbatim and advance the column by two,
    which keeps the consumed span equal to the source text.
    """
    def parse(inp: Input) -> ParseResult[str]:
        text = inp.source
        if not text.startswith(QUOTE):
            found = repr(text[0]) if text else "end of input"
            return Error(ParsingError.at(ErrorKind.PATTERN_NOT_FOUND, inp, f"expected '\"', found {found}"))

        i = 1
        while i < len(text):
            c = text[i]
            if c == QUOTE:
                return Ok(text[1:i], inp.advance(i + 1))
            i += 2 if c == ESCAPE else 1

        end = inp.advance(len(text))
        return Error(ParsingError.at(ErrorKind.PATTERN_NOT_FOUND, end, "did not find closing quote '\"'"))
    return Parsec(parse, "string literal")
