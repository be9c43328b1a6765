"""Shared test fixtures and helpers."""

from __future__ import annotations

import math

import pytest

from wktkit.geometry import Geometry
from wktkit.lexer import tokenize
from wktkit.parser import parse
from wktkit.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens = tokenize(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def parse_source():
    """Return a helper that parses source and returns a Geometry."""

    def _parse(source: str) -> Geometry:
        return parse(source)

    return _parse


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str | float]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_nan_coordinate(coordinate: tuple[float, ...], arity: int = 2) -> None:
    """Assert that a coordinate is the all-NaN empty point marker."""
    assert len(coordinate) == arity, f"Expected {arity} ordinates, got {coordinate}"
    assert all(math.isnan(v) for v in coordinate), f"Expected NaNs, got {coordinate}"
