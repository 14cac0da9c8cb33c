"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from enum import Enum, auto

INT64_MAX = 2**63 - 1


class Keyword(Enum):
    IF = "if"
    FI = "fi"


# Built once at import; lookup is exact, so "IF" stays an identifier.
KEYWORDS: dict[str, Keyword] = {kw.value: kw for kw in Keyword}


class TokenType(Enum):
    KEYWORD = auto()  # reserved word, value is a Keyword
    IDENTIFIER = auto()  # [A-Za-z_][A-Za-z0-9_]*
    INTEGER = auto()  # decimal or 0x hex, value is the parsed int
    STRING = auto()  # raw text including both quotes
    PAREN = auto()  # one of { } ( ) [ ]
    SYMBOL = auto()  # one or two punctuation characters
    NEWLINE = auto()  # value is the line the newline terminates


@dataclass(frozen=True, slots=True)
class Buffer:
    """Source text shared by the scanner and every token it produces."""

    text: str
    filename: str = "<input>"
    _line_starts: list[int] | None = field(default=None, init=False, repr=False, compare=False)

    def __len__(self) -> int:
        return len(self.text)

    def __getitem__(self, key: int | slice) -> str:
        return self.text[key]

    def location(self, offset: int) -> Position:
        """Resolve a 0-based offset into a 1-based line/column position."""
        starts = self.line_starts()
        line = bisect_right(starts, offset)
        return Position(line, offset - starts[line - 1] + 1, offset)

    def line_text(self, line: int) -> str:
        """Return the text of a 1-based line without its terminator."""
        starts = self.line_starts()
        if not 1 <= line <= len(starts):
            return ""
        end = starts[line] - 1 if line < len(starts) else len(self.text)
        return self.text[starts[line - 1] : end].rstrip("\r")

    def line_starts(self) -> list[int]:
        """Offsets where each line begins, computed on first use."""
        if self._line_starts is None:
            starts = [0]
            pos = self.text.find("\n")
            while pos != -1:
                starts.append(pos + 1)
                pos = self.text.find("\n", pos + 1)
            # Frozen dataclass: the cache is filled in place once
            object.__setattr__(self, "_line_starts", starts)
        return self._line_starts


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Token:
    """The token kind and its payload.

    ``quote`` is only set for STRING tokens and records which delimiter
    opened the string.
    """

    type: TokenType
    value: Keyword | str | int
    quote: str | None = None


@dataclass(frozen=True, slots=True)
class PositionedToken:
    """A token plus its half-open ``[start, end)`` span in the shared buffer."""

    start: int
    end: int
    buffer: Buffer
    token: Token

    @property
    def type(self) -> TokenType:
        return self.token.type

    @property
    def value(self) -> Keyword | str | int:
        return self.token.value

    @property
    def text(self) -> str:
        """Exact source text the token was scanned from."""
        return self.buffer[self.start : self.end]

    @property
    def location(self) -> Position:
        return self.buffer.location(self.start)


# Two-character operators; anything else splits into single symbols.
TWO_CHAR_SYMBOLS = frozenset({">>", "<<", "==", "!=", "<=", ">=", "&&", "||", "+=", "-="})

_PARENS = frozenset("{}()[]")
_QUOTES = frozenset("'\"`")


def is_ident_start(ch: str) -> bool:
    """Return True if ch can start an identifier."""
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def is_ident_char(ch: str) -> bool:
    """Return True if ch can continue an identifier."""
    return is_ident_start(ch) or is_digit(ch)


def is_digit(ch: str) -> bool:
    return ch != "" and "0" <= ch <= "9"


def is_hex_digit(ch: str) -> bool:
    """Return True if ch is a hexadecimal digit."""
    return ch != "" and ch in "0123456789abcdefABCDEF"


def is_paren(ch: str) -> bool:
    return ch in _PARENS


def is_quote(ch: str) -> bool:
    return ch in _QUOTES


def is_symbol_char(ch: str) -> bool:
    """Return True if ch is printable ASCII punctuation."""
    return ("!" <= ch <= "/") or (":" <= ch <= "@") or ("[" <= ch <= "`") or ("{" <= ch <= "~")


def is_blank(ch: str) -> bool:
    return ch == " " or ch == "\t"
