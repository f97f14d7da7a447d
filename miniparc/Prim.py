from typing import Any, Callable, Optional, Tuple, Union

from .Parsec import Parsec, Parser, Input, ParsingError, ErrorKind, Ok, Error, ParseResult, T


def pure(value: T) -> Parsec[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(inp: Input) -> ParseResult[T]:
        return Ok(value, inp)
    return Parsec(parse, f"pure({value!r})")


def fail(msg: str) -> Parsec[Any]:
    """A parser that always fails with a message."""
    def parse(inp: Input) -> ParseResult[Any]:
        return Error(ParsingError.at(ErrorKind.CUSTOM_MESSAGE, inp, msg))
    return Parsec(parse, "fail")


def lazy(thunk: Callable[[], Parser[T]]) -> Parsec[T]:
    """Build the wrapped parser on first use, for recursive grammars."""
    cache = []

    def parse(inp: Input) -> ParseResult[T]:
        if not cache:
            cache.append(Parsec.lift(thunk()))
        return cache[0].parse_fn(inp)
    return Parsec(parse, "lazy")


def match(pattern: str) -> Parsec[str]:
    """Match an exact string (or single character) at the start of the input."""
    if not pattern:
        raise ValueError("cannot match an empty pattern")

    def parse(inp: Input) -> ParseResult[str]:
        if not inp.source.startswith(pattern):
            found = inp.source[:len(pattern)]
            return Error(ParsingError.at(
                ErrorKind.PATTERN_NOT_FOUND, inp,
                f"expected {pattern!r}, found {found!r}" if found else f"expected {pattern!r}, found end of input"))
        return Ok(pattern, inp.advance(len(pattern)))
    return Parsec(parse, repr(pattern))


def satisfy(pred: Callable[[str], bool], what: str = "character") -> Parsec[str]:
    """Consume one character if `pred` holds for it."""
    def parse(inp: Input) -> ParseResult[str]:
        if not inp.source:
            return Error(ParsingError.at(ErrorKind.PATTERN_NOT_FOUND, inp, f"expected {what}, found end of input"))
        token = inp.source[0]
        if not pred(token):
            return Error(ParsingError.at(ErrorKind.PATTERN_NOT_FOUND, inp, f"expected {what}, found {token!r}"))
        return Ok(token, inp.advance(1))
    return Parsec(parse, what)


def _span(pred: Callable[[str], bool], text: str) -> int:
    n = 0
    for c in text:
        if not pred(c):
            break
        n += 1
    return n


def take_while(pred: Callable[[str], bool], what: str = "characters") -> Parsec[str]:
    """Longest non-empty prefix whose characters all satisfy `pred`."""
    def parse(inp: Input) -> ParseResult[str]:
        n = _span(pred, inp.source)
        if n == 0:
            return Error(ParsingError.at(ErrorKind.PATTERN_NOT_FOUND, inp, f"no {what} matched"))
        return Ok(inp.source[:n], inp.advance(n))
    return Parsec(parse, what)


def take_while0(pred: Callable[[str], bool], what: str = "characters") -> Parsec[str]:
    """Like take_while, but an empty match is a success. Never fails."""
    def parse(inp: Input) -> ParseResult[str]:
        n = _span(pred, inp.source)
        return Ok(inp.source[:n], inp.advance(n))
    return Parsec(parse, f"{what}?")


def any_char() -> Parsec[str]:
    """Parses any character; fails with EMPTY_INPUT when nothing is left."""
    def parse(inp: Input) -> ParseResult[str]:
        if not inp.source:
            return Error(ParsingError.at(ErrorKind.EMPTY_INPUT, inp, "expected any character"))
        return Ok(inp.source[0], inp.advance(1))
    return Parsec(parse, "any character")


def eof() -> Parsec[None]:
    """Succeeds only if no input remains."""
    def parse(inp: Input) -> ParseResult[None]:
        if inp.source:
            return Error(ParsingError.at(
                ErrorKind.PATTERN_NOT_FOUND, inp, f"expected end of input, found {inp.source[:10]!r}"))
        return Ok(None, inp)
    return Parsec(parse, "end of input")


def run_parser(parser: Parser[T], input_str: Union[str, Input]) -> Tuple[Optional[T], Optional[ParsingError]]:
    """Run a parser and return (value, error); exactly one of them is meaningful."""
    res = Parsec.lift(parser).parse(input_str)
    if isinstance(res, Error):
        return None, res.error
    return res.value, None
