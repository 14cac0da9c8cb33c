"""Scriptlex: tokenizer for a small shell-like scripting language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scriptlex.tokens import Buffer, PositionedToken

__version__ = "0.1.0"


def tokenize(
    source: str | Buffer, *, strict: bool = False, filename: str = "<input>"
) -> list[PositionedToken]:
    """Tokenize source text into a list of positioned tokens."""
    from scriptlex.lexer import tokenize as _tokenize

    return _tokenize(source, strict=strict, filename=filename)
