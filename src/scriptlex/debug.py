"""Human-readable and JSON token dumps."""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from scriptlex.tokens import Keyword, PositionedToken


def dump_tokens(tokens: list[PositionedToken], *, file: TextIO = sys.stdout) -> None:
    """Print one line per token to *file*: position, type, value and source text."""
    for tok in tokens:
        pos = tok.location
        where = f"{pos.line}:{pos.column}"
        file.write(f"{where:<8} {tok.type.name:<10} {_display_value(tok)}")
        file.write(f"  {tok.text!r}\n")


def dump_tokens_json(tokens: list[PositionedToken], *, file: TextIO = sys.stdout) -> None:
    """Write the token list to *file* as a JSON array."""
    json.dump([token_to_dict(t) for t in tokens], file, indent=2)
    file.write("\n")


def token_to_dict(tok: PositionedToken) -> dict[str, Any]:
    pos = tok.location
    return {
        "type": tok.type.name,
        "value": _json_value(tok),
        "quote": tok.token.quote,
        "start": tok.start,
        "end": tok.end,
        "line": pos.line,
        "column": pos.column,
        "text": tok.text,
    }


def _json_value(tok: PositionedToken) -> str | int:
    value = tok.value
    if isinstance(value, Keyword):
        return value.value
    return value


def _display_value(tok: PositionedToken) -> str:
    value = tok.value
    if isinstance(value, Keyword):
        return value.name
    if isinstance(value, int):
        return str(value)
    return repr(value)
