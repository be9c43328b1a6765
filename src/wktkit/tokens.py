"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    TEXT = auto()  # ASCII letter run, upper-cased
    NUMBER = auto()  # numeric literal — value is the parsed float
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    COMMA = auto()  # ,
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token with resolved value and original source text."""

    type: TokenType
    value: str | float
    raw: str
    span: Span

    @property
    def offset(self) -> int:
        return self.span.start.offset


def is_alpha(ch: str) -> bool:
    """Return True if ch is an ASCII letter."""
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_number_start(ch: str) -> bool:
    """Return True if ch can begin a numeric literal."""
    return is_digit(ch) or ch == "." or ch == "-"


def is_whitespace(ch: str) -> bool:
    return ch != "" and ch in " \t\r\n"
