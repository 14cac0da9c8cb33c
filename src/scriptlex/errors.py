"""Error types with formatted source context."""

from __future__ import annotations

from scriptlex.tokens import Buffer, Position


class TokenizeError(Exception):
    """Raised on the first tokenize error, with position and source context."""

    def __init__(self, message: str, offset: int, buffer: Buffer, length: int = 1) -> None:
        self.message = message
        self.offset = offset
        self.buffer = buffer
        self.length = length
        self.position: Position = buffer.location(offset)
        super().__init__(self.format())

    def format(self, filename: str | None = None) -> str:
        if filename is None:
            filename = self.buffer.filename
        line = self.position.line
        col = self.position.column
        source_line = self.buffer.line_text(line)

        # Underline the offending text, but stay within the line
        underline_len = max(1, min(self.length, len(source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class UnrecognizedCharacter(TokenizeError):
    """A character no classification rule accepts (strict mode only)."""

    def __init__(self, offset: int, char: str, buffer: Buffer) -> None:
        self.char = char
        super().__init__(f"unrecognized character {char!r}", offset, buffer)


class UnterminatedString(TokenizeError):
    """A quote that never finds its closing delimiter."""

    def __init__(self, offset: int, buffer: Buffer) -> None:
        self.quote = buffer[offset]
        super().__init__(f"unterminated string (expected closing {self.quote})", offset, buffer)


class IntegerOverflow(TokenizeError):
    """An integer literal outside the signed 64-bit range."""

    def __init__(self, offset: int, raw: str, buffer: Buffer) -> None:
        self.raw = raw
        super().__init__(
            f"integer literal {raw} does not fit in 64 bits", offset, buffer, len(raw)
        )


class MalformedInteger(TokenizeError):
    """A hexadecimal prefix with no digits after it."""

    def __init__(self, offset: int, raw: str, buffer: Buffer) -> None:
        self.raw = raw
        super().__init__(
            f"hexadecimal literal {raw!r} has no digits", offset, buffer, len(raw)
        )
