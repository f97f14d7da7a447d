"""Binding a root parser to a whole source text and reporting failures.

The driver is the only place that sees the complete source, so it is the
only place a failure can be shown in context.
"""

import logging
from dataclasses import dataclass
from typing import Generic, Optional, Tuple

from .Parsec import Parsec, Parser, Input, ParsingError, Error, T

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderOptions:
    """How a Diagnostic is turned into text."""
    label: str = "Parsing Error Here"
    help: Optional[str] = None
    show_kind: bool = True


class Diagnostic(Exception):
    """A parsing failure anchored in the full source text.

    Attributes:
        source: the complete text handed to the driver
        offset: character offset of the failure within `source`
        error: the ParsingError that caused it
    """
    def __init__(self, source: str, error: ParsingError):
        self.source = source
        self.error = error
        self.offset = _offset_of(source, error.line, error.col)
        super().__init__(error.message)

    @property
    def location(self) -> Tuple[int, int]:
        """1-based (line, column) of the failure in `source`."""
        before = self.source[:self.offset]
        line = before.count("\n") + 1
        col = self.offset - (before.rfind("\n") + 1) + 1
        return line, col

    def render(self, options: RenderOptions = RenderOptions()) -> str:
        line_no, col = self.location
        lines = self.source.split("\n")
        text = lines[line_no - 1] if line_no - 1 < len(lines) else ""
        gutter = " " * len(str(line_no))
        # Tabs are kept so the caret lines up with the source line
        pad = "".join(c if c == "\t" else " " for c in text[:col - 1])

        note = options.label
        if options.show_kind and self.error.message:
            note = f"{note}: {self.error.message}"

        out = [
            "error: Error during parsing",
            f"{gutter}--> line {line_no}, column {col}",
            f"{gutter} |",
            f"{line_no} | {text}",
            f"{gutter} | {pad}^ {note}",
        ]
        if options.help:
            out.append(f"{gutter} = help: {options.help}")
        return "\n".join(out)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Diagnostic(offset={self.offset}, error={self.error!r})"


def _offset_of(source: str, line: int, col: int) -> int:
    # Inputs never advance `line`, so `col` is normally the offset already.
    offset = 0
    for _ in range(line):
        nl = source.find("\n", offset)
        if nl < 0:
            break
        offset = nl + 1
    return min(offset + col, len(source))


class MainParser(Generic[T]):
    """The root parser together with the complete source it runs on."""
    def __init__(self, source: str, root: Parser[T]):
        self.source = source
        self.root = Parsec.lift(root)

    def parse(self) -> Tuple[Optional[T], Optional[Diagnostic]]:
        """Parse the whole source.

        Returns (value, None) on success; trailing input is left for the caller
        to judge. Returns (None, diagnostic) on failure.
        """
        res = self.root.parse(Input(self.source))
        if isinstance(res, Error):
            logger.debug("parse failed: %s", res.error)
            return None, Diagnostic(self.source, res.error)
        return res.value, None

    def parse_or_raise(self) -> T:
        value, diagnostic = self.parse()
        if diagnostic is not None:
            raise diagnostic
        return value
