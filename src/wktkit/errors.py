"""Error types with formatted source context."""

from __future__ import annotations

from wktkit.tokens import Position, Span


def _render(message: str, source: str, span: Span, filename: str) -> str:
    """Render a diagnostic with a gutter, the offending line, and a caret underline."""
    lines = source.splitlines(keepends=True)
    line_idx = span.start.line - 1
    col = span.start.column

    if 0 <= line_idx < len(lines):
        source_line = lines[line_idx].rstrip("\n").rstrip("\r")
    else:
        source_line = ""

    # Underline the full span when on one line, otherwise to end of line
    if span.end.line == span.start.line:
        underline_len = max(1, span.end.column - col)
    else:
        underline_len = max(1, len(source_line) - col + 1)

    pad = " " * (col - 1)
    carets = "^" * underline_len

    line_num = str(span.start.line)
    gutter_width = len(line_num) + 1

    blank_gutter = " " * gutter_width + "|"
    line_gutter = f"{line_num:>{gutter_width - 1}} |"

    return (
        f"error: {message}\n"
        f"{' ' * gutter_width}--> {filename}:{span.start.line}:{col}\n"
        f"{blank_gutter}\n"
        f"{line_gutter} {source_line}\n"
        f"{blank_gutter} {pad}{carets}"
    )


class LexError(Exception):
    """Raised when a character cannot begin or extend any token."""

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    @property
    def char(self) -> str:
        """The offending character ("" when the error sits at end of input)."""
        return self.source[self.offset : self.offset + 1]

    @property
    def offset(self) -> int:
        return self.position.offset

    def format(self, filename: str = "input.wkt") -> str:
        return _render(self.message, self.source, Span(self.position, self.position), filename)


class ParseError(Exception):
    """Raised when a well-formed token violates the grammar.

    ``lexeme`` is the raw text of the offending token (empty at end of
    input), ``offset`` its character offset, and ``source`` the full input.
    """

    def __init__(self, message: str, span: Span, source: str, lexeme: str = "") -> None:
        self.message = message
        self.span = span
        self.source = source
        self.lexeme = lexeme
        super().__init__(self.format())

    @property
    def offset(self) -> int:
        return self.span.start.offset

    def format(self, filename: str = "input.wkt") -> str:
        return _render(self.message, self.source, self.span, filename)


class NestingDepthError(ParseError):
    """Raised when geometry collections nest deeper than the parser allows."""

    def __init__(self, limit: int, span: Span, source: str, lexeme: str = "") -> None:
        self.limit = limit
        super().__init__(
            f"geometry nesting exceeds the maximum depth of {limit}", span, source, lexeme
        )


class UnknownGeometryTypeError(Exception):
    """Raised when a type keyword does not name any supported geometry."""

    def __init__(self, keyword: str, span: Span, source: str) -> None:
        self.keyword = keyword
        self.message = f"unknown geometry type '{keyword}'"
        self.span = span
        self.source = source
        super().__init__(self.format())

    @property
    def offset(self) -> int:
        return self.span.start.offset

    def format(self, filename: str = "input.wkt") -> str:
        return _render(self.message, self.source, self.span, filename)
