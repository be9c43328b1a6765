"""WKT lexer — converts source text into a lazy token stream."""

from __future__ import annotations

import math
from collections.abc import Iterator

from wktkit.errors import LexError
from wktkit.tokens import (
    Position,
    Span,
    Token,
    TokenType,
    is_alpha,
    is_digit,
    is_number_start,
    is_whitespace,
)

_PUNCTUATION: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    ",": TokenType.COMMA,
}


class Lexer:
    """Tokenize WKT source text one token at a time.

    The lexer never reads past the token it is producing: every scan looks at
    the next character with ``_peek`` and only ``_advance``s over characters
    that belong to the current token.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1

    @property
    def source(self) -> str:
        return self._source

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == TokenType.EOF:
                return

    def next_token(self) -> Token:
        """Return the next token. Repeated calls at end of input keep returning EOF."""
        while is_whitespace(self._peek()):
            self._advance()

        start = self._current_pos()
        ch = self._peek()

        if ch == "":
            return self._make(TokenType.EOF, "", "", start)

        if ch in _PUNCTUATION:
            self._advance()
            return self._make(_PUNCTUATION[ch], ch, ch, start)

        if is_number_start(ch):
            return self._lex_number(start)

        if is_alpha(ch):
            return self._lex_text(start)

        raise self._error(f"unexpected character {ch!r}", start)

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _make(self, tt: TokenType, value: str | float, raw: str, start: Position) -> Token:
        return Token(tt, value, raw, Span(start, self._current_pos()))

    def _error(self, message: str, pos: Position | None = None) -> LexError:
        if pos is None:
            pos = self._current_pos()
        return LexError(message, pos, self._source)

    # ------------------------------------------------------------------
    # Multi-character tokens
    # ------------------------------------------------------------------

    def _lex_number(self, start: Position) -> Token:
        self._advance()  # digit, '.' or leading '-'
        seen_dot = self._source[start.offset] == "."
        seen_exp = False

        while True:
            ch = self._peek()
            if is_digit(ch):
                self._advance()
            elif ch == "." and not seen_dot and not seen_exp:
                seen_dot = True
                self._advance()
            elif ch in ("e", "E") and not seen_exp:
                seen_exp = True
                self._advance()
                if self._peek() in ("+", "-"):
                    self._advance()
            else:
                break

        raw = self._source[start.offset : self._pos]
        try:
            value = float(raw)
        except ValueError:
            raise self._error(f"invalid number literal '{raw}'", start) from None
        if math.isinf(value):
            raise self._error(f"number literal out of range '{raw}'", start)
        return self._make(TokenType.NUMBER, value, raw, start)

    def _lex_text(self, start: Position) -> Token:
        while is_alpha(self._peek()):
            self._advance()
        raw = self._source[start.offset : self._pos]
        return self._make(TokenType.TEXT, raw.upper(), raw, start)


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return the token list."""
    return list(Lexer(source))
