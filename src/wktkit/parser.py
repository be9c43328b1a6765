"""WKT parser — converts a token stream into geometry values."""

from __future__ import annotations

from wktkit.errors import NestingDepthError, ParseError, UnknownGeometryTypeError
from wktkit.geometry import (
    EMPTY_COORDINATE,
    Coordinate,
    Geometry,
    Layout,
)
from wktkit.lexer import Lexer
from wktkit.registry import BodyKind, lookup_keyword
from wktkit.tokens import Span, Token, TokenType

DEFAULT_MAX_DEPTH = 64

# Each collection level costs three Python frames; larger limits are clamped
# so deep input still fails with NestingDepthError, not RecursionError.
MAX_DEPTH_LIMIT = 200

EMPTY = "EMPTY"


class TokenStream:
    """Pull tokens from a Lexer with a single token of lookahead."""

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._current: Token | None = None

    def peek(self) -> Token:
        if self._current is None:
            self._current = self._lexer.next_token()
        return self._current

    def advance(self) -> Token:
        tok = self.peek()
        if tok.type != TokenType.EOF:
            self._current = None
        return tok

    def at(self, *types: TokenType) -> bool:
        return self.peek().type in types

    def at_keyword(self, keyword: str) -> bool:
        tok = self.peek()
        return tok.type == TokenType.TEXT and tok.value == keyword

    def match(self, tt: TokenType) -> bool:
        """Consume the current token if it has type tt."""
        if self.at(tt):
            self.advance()
            return True
        return False


class Parser:
    """Recursive descent parser for WKT geometries.

    Each geometry reads its own optional dimension tag, so the layout is
    passed down explicitly and collection children may differ from their
    parent.
    """

    def __init__(self, lexer: Lexer, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self._tokens = TokenStream(lexer)
        self._source = lexer.source
        self._max_depth = min(max_depth, MAX_DEPTH_LIMIT)
        self._depth = 0

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def parse(self) -> Geometry:
        """Parse exactly one geometry followed by end of input."""
        geometry = self._parse_geometry()
        self._expect(TokenType.EOF, "end of input")
        return geometry

    def parse_all(self) -> list[Geometry]:
        """Parse geometries written back to back until end of input."""
        geometries: list[Geometry] = []
        while not self._tokens.at(TokenType.EOF):
            geometries.append(self._parse_geometry())
        return geometries

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def _parse_geometry(self) -> Geometry:
        tok = self._tokens.peek()
        if tok.type != TokenType.TEXT:
            raise self._error("expected geometry type")
        self._tokens.advance()

        typedef = lookup_keyword(str(tok.value))
        if typedef is None:
            raise UnknownGeometryTypeError(str(tok.value), tok.span, self._source)

        layout = self._parse_layout()

        match typedef.body:
            case BodyKind.POINT:
                coordinates = self._parse_point_text(layout)
            case BodyKind.LINE:
                coordinates = self._parse_line_string_text(layout)
            case BodyKind.POLYGON:
                coordinates = self._parse_polygon_text(layout)
            case BodyKind.MULTI_POINT:
                coordinates = self._parse_multi_point_text(layout)
            case BodyKind.MULTI_LINE:
                coordinates = self._parse_multi_line_string_text(layout)
            case BodyKind.MULTI_POLYGON:
                coordinates = self._parse_multi_polygon_text(layout)
            case BodyKind.COLLECTION:
                coordinates = self._parse_collection_text(tok)

        return typedef.constructor(coordinates, layout)

    def _parse_layout(self) -> Layout:
        tok = self._tokens.peek()
        if tok.type == TokenType.TEXT:
            layout = Layout.from_tag(str(tok.value))
            if layout is not None:
                self._tokens.advance()
                return layout
        return Layout.XY

    def _match_empty(self) -> bool:
        if self._tokens.at_keyword(EMPTY):
            self._tokens.advance()
            return True
        return False

    # ------------------------------------------------------------------
    # Bodies
    # ------------------------------------------------------------------

    def _parse_point_text(self, layout: Layout) -> Coordinate:
        if self._match_empty():
            return EMPTY_COORDINATE
        self._expect(TokenType.LEFT_PAREN, "'(' or EMPTY")
        coordinate = self._parse_coordinate(layout)
        self._expect(TokenType.RIGHT_PAREN, "')'")
        return coordinate

    def _parse_line_string_text(self, layout: Layout) -> list[Coordinate]:
        if self._match_empty():
            return []
        self._expect(TokenType.LEFT_PAREN, "'(' or EMPTY")
        coordinates = self._parse_coordinate_list(layout)
        self._expect(TokenType.RIGHT_PAREN, "')'")
        return coordinates

    def _parse_polygon_text(self, layout: Layout) -> list[list[Coordinate]]:
        if self._match_empty():
            return []
        self._expect(TokenType.LEFT_PAREN, "'(' or EMPTY")
        rings = self._parse_list(lambda: self._parse_line_string_text(layout))
        self._expect(TokenType.RIGHT_PAREN, "')'")
        return rings

    def _parse_multi_point_text(self, layout: Layout) -> list[Coordinate]:
        if self._match_empty():
            return []
        self._expect(TokenType.LEFT_PAREN, "'(' or EMPTY")
        # Both MULTIPOINT(1 2, 3 4) and MULTIPOINT((1 2), (3 4)) are accepted
        if self._tokens.at(TokenType.LEFT_PAREN) or self._tokens.at_keyword(EMPTY):
            points = self._parse_list(lambda: self._parse_point_text(layout))
        else:
            points = self._parse_coordinate_list(layout)
        self._expect(TokenType.RIGHT_PAREN, "')'")
        return points

    def _parse_multi_line_string_text(self, layout: Layout) -> list[list[Coordinate]]:
        # Same shape as a polygon body: a list of line string bodies
        return self._parse_polygon_text(layout)

    def _parse_multi_polygon_text(self, layout: Layout) -> list[list[list[Coordinate]]]:
        if self._match_empty():
            return []
        self._expect(TokenType.LEFT_PAREN, "'(' or EMPTY")
        polygons = self._parse_list(lambda: self._parse_polygon_text(layout))
        self._expect(TokenType.RIGHT_PAREN, "')'")
        return polygons

    def _parse_collection_text(self, keyword_tok: Token) -> list[Geometry]:
        if self._match_empty():
            return []
        self._expect(TokenType.LEFT_PAREN, "'(' or EMPTY")

        self._depth += 1
        if self._depth > self._max_depth:
            raise NestingDepthError(
                self._max_depth, keyword_tok.span, self._source, keyword_tok.raw
            )
        geometries = self._parse_list(self._parse_geometry)
        self._depth -= 1

        self._expect(TokenType.RIGHT_PAREN, "')'")
        return geometries

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------

    def _parse_coordinate(self, layout: Layout) -> Coordinate:
        values: list[float] = []
        for _ in range(layout.arity):
            tok = self._expect(TokenType.NUMBER, f"number ({layout.value} coordinate)")
            values.append(float(tok.value))
        return tuple(values)

    def _parse_coordinate_list(self, layout: Layout) -> list[Coordinate]:
        return self._parse_list(lambda: self._parse_coordinate(layout))

    def _parse_list(self, parse_item):
        items = [parse_item()]
        while self._tokens.match(TokenType.COMMA):
            items.append(parse_item())
        return items

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _expect(self, tt: TokenType, what: str) -> Token:
        if not self._tokens.at(tt):
            raise self._error(f"expected {what}")
        return self._tokens.advance()

    def _error(self, expected: str, span: Span | None = None) -> ParseError:
        tok = self._tokens.peek()
        if span is None:
            span = tok.span
        found = "end of input" if tok.type == TokenType.EOF else f"'{tok.raw}'"
        return ParseError(f"{expected}, found {found}", span, self._source, tok.raw)


def parse(source: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Geometry:
    """Convenience function: parse a single WKT geometry."""
    return Parser(Lexer(source), max_depth).parse()


def parse_all(source: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> list[Geometry]:
    """Parse a document holding any number of WKT geometries."""
    return Parser(Lexer(source), max_depth).parse_all()
