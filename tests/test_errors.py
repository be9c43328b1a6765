"""Test lexer error messages, positions, and context snippets."""

import pytest

from wktkit.errors import LexError
from wktkit.lexer import tokenize


class TestErrorPositions:
    def test_unexpected_character(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("POINT(1 2);")
        err = exc_info.value
        assert err.char == ";"
        assert err.offset == 10
        assert err.position.line == 1
        assert err.position.column == 11

    def test_error_on_second_line(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("POINT(1 2)\n#")
        err = exc_info.value
        assert err.position.line == 2
        assert err.position.column == 1

    def test_non_ascii_letter_rejected(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("POINTÉ")
        assert exc_info.value.char == "É"

    def test_plus_cannot_start_number(self):
        with pytest.raises(LexError):
            tokenize("+1")

    def test_form_feed_is_not_whitespace(self):
        with pytest.raises(LexError):
            tokenize("POINT\f(1 2)")

    def test_message_names_character(self):
        with pytest.raises(LexError, match="unexpected character '@'"):
            tokenize("@")


class TestErrorFormatting:
    def test_format_contains_line(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("POINT(1 2) ; more")
        formatted = exc_info.value.format()
        assert "POINT(1 2) ; more" in formatted

    def test_format_contains_carets(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("?")
        formatted = exc_info.value.format()
        assert "^" in formatted

    def test_format_contains_error_prefix(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("?")
        assert exc_info.value.format().startswith("error:")

    def test_format_contains_position(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("?")
        assert "1:1" in exc_info.value.format()

    def test_format_with_custom_filename(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("?")
        assert "shapes.wkt" in exc_info.value.format("shapes.wkt")

    def test_multiline_error_position(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("POINT(1 2)\nPOINT(3 4)\n!")
        assert "3:1" in exc_info.value.format()
