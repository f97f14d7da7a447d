from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Generic, Optional, Protocol, Tuple, TypeVar, Union, runtime_checkable

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')
T_co = TypeVar('T_co', covariant=True)


@dataclass(frozen=True)
class Input:
    """Remaining text plus the position it starts at.

    Input is single-line: ``line`` is never incremented, so ``col`` is the
    absolute character offset into the original source.
    """
    source: str
    line: int = 0
    col: int = 0

    def advance(self, count: int) -> 'Input':
        """Drop the first `count` characters and move the column forward."""
        return Input(self.source[count:], self.line, self.col + count)

    @staticmethod
    def coerce(value: Union[str, 'Input']) -> 'Input':
        if isinstance(value, Input):
            return value
        if isinstance(value, str):
            return Input(value)
        raise TypeError(f"cannot parse a value of type {type(value).__name__}")

    def __str__(self) -> str:
        return f"line {self.line}, column {self.col}: {self.source!r}"


class ErrorKind(Enum):
    PATTERN_NOT_FOUND = auto()
    EMPTY_INPUT = auto()
    MAPPING_FAILED = auto()
    CUSTOM_MESSAGE = auto()


_KIND_TEXT = {
    ErrorKind.PATTERN_NOT_FOUND: "pattern not found",
    ErrorKind.EMPTY_INPUT: "unexpected end of input",
    ErrorKind.MAPPING_FAILED: "mapping failed",
    ErrorKind.CUSTOM_MESSAGE: "error",
}


@dataclass(frozen=True)
class ParsingError:
    """A failure kind and the position it happened at."""
    kind: ErrorKind
    line: int
    col: int
    detail: str = ""

    @classmethod
    def at(cls, kind: ErrorKind, inp: Input, detail: str = "") -> 'ParsingError':
        return cls(kind, inp.line, inp.col, detail)

    @property
    def position(self) -> Tuple[int, int]:
        return (self.line, self.col)

    def is_further_than(self, other: 'ParsingError') -> bool:
        """Strict (line, col) comparison; equal positions are not further."""
        return self.position > other.position

    def with_kind(self, kind: ErrorKind, detail: str) -> 'ParsingError':
        return ParsingError(kind, self.line, self.col, detail)

    @property
    def message(self) -> str:
        text = _KIND_TEXT[self.kind]
        if self.kind is ErrorKind.CUSTOM_MESSAGE:
            return self.detail or text
        return f"{text}: {self.detail}" if self.detail else text

    def __str__(self) -> str:
        return f"Parse error at line {self.line}, column {self.col}: {self.message}"


def furthest(first: ParsingError, second: ParsingError) -> ParsingError:
    """Pick the error that progressed further; ties go to `first`."""
    if second.is_further_than(first):
        return second
    return first


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    rest: Input


@dataclass(frozen=True)
class Error:
    error: ParsingError


ParseResult = Union[Ok[T], Error]


@runtime_checkable
class Parser(Protocol[T_co]):
    """Anything with a `parse` method can be combined with anything else."""
    def parse(self, input: Input) -> 'ParseResult[T_co]':
        ...


class Keep(Enum):
    """Which outputs a sequence keeps."""
    FIRST = auto()
    SECOND = auto()
    BOTH = auto()


class Parsec(Generic[T]):
    """A parser value: wraps a parse function and never runs it on construction."""
    def __init__(self, parse_fn: Callable[[Input], ParseResult[T]], name: str = ""):
        self.parse_fn = parse_fn
        self.name = name

    @staticmethod
    def lift(parser: Any) -> 'Parsec[Any]':
        """Wrap any object with a `parse` method so it gains the combinators."""
        if isinstance(parser, Parsec):
            return parser
        if not isinstance(parser, Parser):
            raise TypeError(f"{parser!r} has no parse method")
        return Parsec(parser.parse, getattr(parser, "name", "") or type(parser).__name__)

    def parse(self, input: Union[str, Input]) -> ParseResult[T]:
        return self.parse_fn(Input.coerce(input))

    def __call__(self, input: Union[str, Input]) -> ParseResult[T]:
        return self.parse(input)

    def __repr__(self) -> str:
        return f"<Parsec {self.name}>" if self.name else "<Parsec>"

    # Sequence (&)
    def and_then(self, other: Parser[U]) -> 'Sequence[T, U]':
        return Sequence(self, Parsec.lift(other), Keep.BOTH)

    def __and__(self, other: Parser[U]) -> 'Sequence[T, U]':
        return self.and_then(other)

    # Sequence (*>)
    def __rshift__(self, other: Parser[U]) -> 'Sequence[T, U]':
        return self.and_then(other).keep_second()

    # Sequence (<*)
    def __lshift__(self, other: Parser[U]) -> 'Sequence[T, U]':
        return self.and_then(other).keep_first()

    # Alternative (<|>)
    def otherwise(self, other: Parser[T]) -> 'Parsec[T]':
        second = Parsec.lift(other)

        def parse(inp: Input) -> ParseResult[T]:
            first_res = self.parse_fn(inp)
            if isinstance(first_res, Ok):
                return first_res
            second_res = second.parse_fn(inp)
            if isinstance(second_res, Ok):
                return second_res
            return Error(furthest(first_res.error, second_res.error))
        return Parsec(parse)

    def __or__(self, other: Parser[T]) -> 'Parsec[T]':
        return self.otherwise(other)

    def __ror__(self, other: Parser[T]) -> 'Parsec[T]':
        return Parsec.lift(other).otherwise(self)

    # Monadic bind
    def bind(self, f: Callable[[T], Parser[U]]) -> 'Parsec[U]':
        def parse(inp: Input) -> ParseResult[U]:
            res = self.parse_fn(inp)
            if isinstance(res, Error):
                return res
            return f(res.value).parse(res.rest)
        return Parsec(parse)

    # Functor map
    def map(self, f: Callable[[T], U]) -> 'Parsec[U]':
        def parse(inp: Input) -> ParseResult[U]:
            res = self.parse_fn(inp)
            if isinstance(res, Error):
                return res
            return Ok(f(res.value), res.rest)
        return Parsec(parse, self.name)

    def try_map(self, f: Callable[[T], Optional[U]], detail: str = "") -> 'Parsec[U]':
        """Map the output, failing with MAPPING_FAILED when `f` returns None.

        The error sits after the consumed text: the parse itself worked.
        """
        def parse(inp: Input) -> ParseResult[U]:
            res = self.parse_fn(inp)
            if isinstance(res, Error):
                return res
            mapped = f(res.value)
            if mapped is None:
                text = detail or f"could not map {res.value!r}"
                return Error(ParsingError.at(ErrorKind.MAPPING_FAILED, res.rest, text))
            return Ok(mapped, res.rest)
        return Parsec(parse, self.name)

    # Label, but keeps the position of the original failure
    def with_error(self, message: str) -> 'Parsec[T]':
        def parse(inp: Input) -> ParseResult[T]:
            res = self.parse_fn(inp)
            if isinstance(res, Error):
                return Error(res.error.with_kind(ErrorKind.CUSTOM_MESSAGE, message))
            return res
        return Parsec(parse, self.name)


class Sequence(Parsec[Any], Generic[T, U]):
    """Runs `first` then `second`, keeping the outputs selected by `keep`."""
    def __init__(self, first: Parsec[T], second: Parsec[U], keep: Keep = Keep.BOTH):
        self.first = first
        self.second = second
        self.keep = keep
        super().__init__(self._parse)

    def _parse(self, inp: Input) -> ParseResult[Any]:
        res1 = self.first.parse_fn(inp)
        if isinstance(res1, Error):
            return res1

        res2 = self.second.parse_fn(res1.rest)
        if isinstance(res2, Error):
            return res2

        if self.keep is Keep.FIRST:
            return Ok(res1.value, res2.rest)
        if self.keep is Keep.SECOND:
            return Ok(res2.value, res2.rest)
        return Ok((res1.value, res2.value), res2.rest)

    def combine(self, keep: Keep) -> 'Sequence[T, U]':
        return Sequence(self.first, self.second, keep)

    def keep_first(self) -> 'Sequence[T, U]':
        return self.combine(Keep.FIRST)

    def keep_second(self) -> 'Sequence[T, U]':
        return self.combine(Keep.SECOND)

    def keep_both(self) -> 'Sequence[T, U]':
        return self.combine(Keep.BOTH)
