import logging
from typing import Any, Callable, List, Optional, TypeVar

from .Parsec import Parsec, Parser, Sequence, Keep, Input, ParsingError, ErrorKind, Ok, Error, ParseResult, T, U
from .Prim import fail, pure

logger = logging.getLogger(__name__)

D = TypeVar('D')


def sequence(first: Parser[T], second: Parser[U], keep: Keep = Keep.BOTH) -> Sequence[T, U]:
    """Runs `first` then `second`; `keep` picks the output."""
    return Parsec.lift(first).and_then(second).combine(keep)


def alternation(first: Parser[T], second: Parser[T]) -> Parsec[T]:
    """Tries `first`, then `second` from the same input.

    When both fail, the error that got further into the input wins,
    and `first` wins a tie.
    """
    return Parsec.lift(first).otherwise(second)


def choice(parsers: List[Parser[T]]) -> Parsec[T]:
    """
    Applies a list of parsers in order until one succeeds.
    Returns the value of the succeeding parser, or fails if none succeed.
    """
    if not parsers:
        return fail("no alternatives")
    result = Parsec.lift(parsers[0])
    for p in parsers[1:]:
        result = result | p
    return result


class Repeat(Parsec[List[T]]):
    """Run the same parser repeatedly.

    By default the parser must run at least once, with no maximum. The loop
    ends at the upper bound or at the first failure of the inner parser; that
    failure is dropped unless fewer than `lower` results were collected.
    """
    def __init__(self, parser: Parser[T], lower: int = 1, upper: Optional[int] = None):
        if lower < 0:
            raise ValueError(f"lower bound must be non-negative, got {lower}")
        if upper is not None and upper < lower:
            raise ValueError(f"upper bound {upper} is below lower bound {lower}")
        self.parser = Parsec.lift(parser)
        self.lower = lower
        self.upper = upper
        super().__init__(self._parse, f"repeat({self.parser.name})")

    def at_least(self, n: int) -> 'Repeat[T]':
        return Repeat(self.parser, n, self.upper)

    def at_most(self, n: int) -> 'Repeat[T]':
        return Repeat(self.parser, self.lower, n)

    def _parse(self, inp: Input) -> ParseResult[List[T]]:
        acc: List[T] = []
        rest = inp
        while self.upper is None or len(acc) < self.upper:
            res = self.parser.parse_fn(rest)
            if isinstance(res, Error):
                break
            acc.append(res.value)
            # A zero-width match would repeat forever without an upper bound,
            # so stop once the lower bound is met
            if self.upper is None and res.rest.col == rest.col and len(acc) >= self.lower:
                rest = res.rest
                break
            rest = res.rest

        if len(acc) < self.lower:
            return Error(ParsingError.at(
                ErrorKind.PATTERN_NOT_FOUND, inp,
                f"expected at least {self.lower} of {self.parser.name or 'parser'}, found {len(acc)}"))
        return Ok(acc, rest)


def repeat(parser: Parser[T], at_least: int = 1, at_most: Optional[int] = None) -> Repeat[T]:
    return Repeat(parser, at_least, at_most)


def many(p: Parser[T]) -> Repeat[T]:
    """Parse zero or more occurrences of `p`."""
    return Repeat(p, 0)


def many1(p: Parser[T]) -> Repeat[T]:
    """Applies parser p one or more times, returning a list of results."""
    return Repeat(p, 1)


def optional(p: Parser[T], default: Optional[D] = None) -> Parsec[Any]:
    """Tries parser p; returns its value, or `default` without consuming input."""
    return Parsec.lift(p) | pure(default)


def between(open: Parser[Any], close: Parser[Any], p: Parser[T]) -> Parsec[T]:
    """
    Parses 'open', then 'p', then 'close', returning the result of 'p'.
    """
    return (Parsec.lift(open) >> p) << close


def sep_by(p: Parser[T], sep: Parser[Any]) -> Parsec[List[T]]:
    """
    Parses zero or more occurrences of p separated by sep, returning a list of p's results.
    """
    item = Parsec.lift(p)
    sep_by1 = (item & many(Parsec.lift(sep) >> item)).map(lambda pair: [pair[0]] + pair[1])
    return sep_by1 | pure([])


def map_output(p: Parser[T], f: Callable[[T], U]) -> Parsec[U]:
    return Parsec.lift(p).map(f)


def try_map(p: Parser[T], f: Callable[[T], Optional[U]], detail: str = "") -> Parsec[U]:
    return Parsec.lift(p).try_map(f, detail)


def with_error(p: Parser[T], message: str) -> Parsec[T]:
    return Parsec.lift(p).with_error(message)


# Debugging parser that logs entry, success and failure of `p`
def trace(label: str, p: Parser[T]) -> Parsec[T]:
    inner = Parsec.lift(p)

    def parse(inp: Input) -> ParseResult[T]:
        logger.debug("%s: trying at column %d on %r", label, inp.col, inp.source[:30])
        res = inner.parse_fn(inp)
        if isinstance(res, Ok):
            logger.debug("%s: matched %d characters -> %r", label, res.rest.col - inp.col, res.value)
        else:
            logger.debug("%s: failed: %s", label, res.error)
        return res
    return Parsec(parse, inner.name)
