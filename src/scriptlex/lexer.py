"""Scriptlex scanner: converts source text into a flat token stream."""

from __future__ import annotations

import logging

from scriptlex.errors import (
    IntegerOverflow,
    MalformedInteger,
    UnrecognizedCharacter,
    UnterminatedString,
)
from scriptlex.tokens import (
    INT64_MAX,
    KEYWORDS,
    TWO_CHAR_SYMBOLS,
    Buffer,
    PositionedToken,
    Token,
    TokenType,
    is_blank,
    is_digit,
    is_hex_digit,
    is_ident_char,
    is_ident_start,
    is_paren,
    is_quote,
    is_symbol_char,
)

logger = logging.getLogger(__name__)


class Cursor:
    """Forward-only read position over a buffer with one character of lookahead."""

    def __init__(self, buffer: Buffer) -> None:
        self._text = buffer.text
        self.index = 0

    def at_end(self) -> bool:
        return self.index >= len(self._text)

    def current(self) -> str:
        """Return the character at the read position, or '' at end of input."""
        if self.index < len(self._text):
            return self._text[self.index]
        return ""

    def peek(self) -> str:
        """Return the character after the current one, or '' at end of input."""
        if self.index + 1 < len(self._text):
            return self._text[self.index + 1]
        return ""

    def advance(self) -> str:
        """Consume the current character and return it."""
        ch = self._text[self.index]
        self.index += 1
        return ch


class Scanner:
    """Single-pass scanner over one buffer.

    In lenient mode (the default) characters no rule accepts are dropped;
    with ``strict=True`` they raise UnrecognizedCharacter instead. Every
    dropped or blank character's index is recorded in ``skipped``.
    """

    def __init__(self, buffer: Buffer, strict: bool = False) -> None:
        self._buffer = buffer
        self._cursor = Cursor(buffer)
        self._strict = strict
        self._line = 1
        self._tokens: list[PositionedToken] = []
        self.skipped: list[int] = []

    def run(self) -> list[PositionedToken]:
        """Scan the whole buffer and return the token list."""
        cur = self._cursor
        while not cur.at_end():
            ch = cur.current()

            if ch == "\n":
                start = cur.index
                cur.advance()
                self._emit(start, TokenType.NEWLINE, self._line)
                self._line += 1
            elif is_ident_start(ch):
                self._scan_identifier()
            elif is_digit(ch):
                self._scan_number()
            elif is_paren(ch):
                start = cur.index
                cur.advance()
                self._emit(start, TokenType.PAREN, ch)
            elif is_quote(ch):
                self._scan_string()
            elif is_symbol_char(ch):
                self._scan_symbol()
            elif is_blank(ch):
                self.skipped.append(cur.index)
                cur.advance()
            else:
                self._drop(ch)

        logger.debug(
            "Tokenized %s: %d tokens, %d characters skipped",
            self._buffer.filename,
            len(self._tokens),
            len(self.skipped),
        )
        return self._tokens

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _emit(
        self, start: int, tt: TokenType, value: object, quote: str | None = None
    ) -> None:
        tok = Token(tt, value, quote)
        self._tokens.append(PositionedToken(start, self._cursor.index, self._buffer, tok))

    def _drop(self, ch: str) -> None:
        index = self._cursor.index
        if self._strict:
            raise UnrecognizedCharacter(index, ch, self._buffer)
        logger.debug("Ignored %r at offset %d", ch, index)
        self.skipped.append(index)
        self._cursor.advance()

    # ------------------------------------------------------------------
    # Identifiers and keywords
    # ------------------------------------------------------------------

    def _scan_identifier(self) -> None:
        cur = self._cursor
        start = cur.index
        cur.advance()
        while is_ident_char(cur.current()):
            cur.advance()
        text = self._buffer[start : cur.index]
        keyword = KEYWORDS.get(text)
        if keyword is not None:
            self._emit(start, TokenType.KEYWORD, keyword)
        else:
            self._emit(start, TokenType.IDENTIFIER, text)

    # ------------------------------------------------------------------
    # Integers
    # ------------------------------------------------------------------

    def _scan_number(self) -> None:
        cur = self._cursor
        start = cur.index

        if cur.peek() == "x":
            cur.advance()
            cur.advance()
            while is_hex_digit(cur.current()):
                cur.advance()
            raw = self._buffer[start : cur.index]
            # Digits follow the leading digit and the 'x'
            digits = raw[2:]
            if not digits:
                raise MalformedInteger(start, raw, self._buffer)
            value = int(digits, 16)
        else:
            cur.advance()
            while is_digit(cur.current()):
                cur.advance()
            raw = self._buffer[start : cur.index]
            # int() refuses very long digit strings, leading zeros included
            digits = raw.lstrip("0")
            if len(digits) > len(str(INT64_MAX)):
                raise IntegerOverflow(start, raw, self._buffer)
            value = int(digits or "0", 10)

        if value > INT64_MAX:
            raise IntegerOverflow(start, raw, self._buffer)
        self._emit(start, TokenType.INTEGER, value)

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def _scan_string(self) -> None:
        """Scan up to and including the matching quote; no escapes."""
        cur = self._cursor
        start = cur.index
        quote = cur.advance()
        while not cur.at_end():
            ch = cur.advance()
            if ch == quote:
                self._emit(start, TokenType.STRING, self._buffer[start : cur.index], quote)
                return
        raise UnterminatedString(start, self._buffer)

    # ------------------------------------------------------------------
    # Symbols and operators
    # ------------------------------------------------------------------

    def _scan_symbol(self) -> None:
        cur = self._cursor
        start = cur.index
        ch = cur.current()
        pair = ch + cur.peek()
        cur.advance()
        if pair in TWO_CHAR_SYMBOLS:
            cur.advance()
            self._emit(start, TokenType.SYMBOL, pair)
        else:
            self._emit(start, TokenType.SYMBOL, ch)


def tokenize(
    source: str | Buffer, *, strict: bool = False, filename: str = "<input>"
) -> list[PositionedToken]:
    """Convenience function: tokenize source text and return token list."""
    buffer = source if isinstance(source, Buffer) else Buffer(source, filename)
    return Scanner(buffer, strict=strict).run()
