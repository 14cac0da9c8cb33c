"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from scriptlex.lexer import tokenize
from scriptlex.tokens import PositionedToken, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source in lenient mode."""

    def _lex(source: str) -> list[PositionedToken]:
        return tokenize(source)

    return _lex


@pytest.fixture
def lex_strict():
    """Return a helper that tokenizes source in strict mode."""

    def _lex(source: str) -> list[PositionedToken]:
        return tokenize(source, strict=True)

    return _lex


def assert_types(tokens: list[PositionedToken], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[PositionedToken], expected: list[object]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def find_tokens(tokens: list[PositionedToken], tt: TokenType) -> list[PositionedToken]:
    """Return all tokens of the given type."""
    return [t for t in tokens if t.type == tt]
