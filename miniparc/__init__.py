# Core
from .Parsec import Parsec, Parser, Input, ParsingError, ErrorKind, Ok, Error, ParseResult, Keep, Sequence, furthest
from .Prim import run_parser, pure, fail, lazy, match, satisfy, take_while, take_while0, any_char, eof

# Characters
from .Char import (
    char, string, one_of, none_of,
    space, spaces, letter, letters, digit, digits, alpha_num,
    quoted_string
)

# Combinators
from .Combinators import (
    sequence, alternation, choice, Repeat, repeat, many, many1, optional,
    between, sep_by, map_output, try_map, with_error, trace
)

# Driver
from .Driver import MainParser, Diagnostic, RenderOptions
