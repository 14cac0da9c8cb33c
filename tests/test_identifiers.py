"""Test identifier scanning and keyword recognition."""

from scriptlex.tokens import KEYWORDS, Keyword, TokenType

from .conftest import assert_types, assert_values


class TestIdentifiers:
    def test_simple(self, lex):
        tokens = lex("hello")
        assert_types(tokens, [TokenType.IDENTIFIER])
        assert tokens[0].value == "hello"

    def test_underscore_start(self, lex):
        tokens = lex("_private")
        assert_values(tokens, ["_private"])

    def test_digits_after_start(self, lex):
        tokens = lex("x1_y2")
        assert_values(tokens, ["x1_y2"])

    def test_mixed_case(self, lex):
        tokens = lex("CamelCase")
        assert_values(tokens, ["CamelCase"])

    def test_stops_at_symbol(self, lex):
        tokens = lex("foo-bar")
        assert_values(tokens, ["foo", "-", "bar"])

    def test_stops_at_dot(self, lex):
        tokens = lex("a.b")
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.SYMBOL, TokenType.IDENTIFIER])

    def test_span(self, lex):
        tokens = lex("  name ")
        assert (tokens[0].start, tokens[0].end) == (2, 6)
        assert tokens[0].text == "name"

    def test_non_ascii_letter_not_identifier(self, lex):
        tokens = lex("café")
        assert_values(tokens, ["caf"])


class TestKeywords:
    def test_if(self, lex):
        tokens = lex("if")
        assert_types(tokens, [TokenType.KEYWORD])
        assert tokens[0].value is Keyword.IF

    def test_fi(self, lex):
        tokens = lex("fi")
        assert tokens[0].value is Keyword.FI

    def test_keyword_text_is_source(self, lex):
        tokens = lex(" fi")
        assert tokens[0].text == "fi"
        assert (tokens[0].start, tokens[0].end) == (1, 3)

    def test_case_sensitive(self, lex):
        tokens = lex("IF If")
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.IDENTIFIER])

    def test_keyword_prefix_is_identifier(self, lex):
        tokens = lex("iffy fin")
        assert_values(tokens, ["iffy", "fin"])

    def test_keyword_table(self):
        assert KEYWORDS == {"if": Keyword.IF, "fi": Keyword.FI}


class TestStatement:
    def test_if_x_equals_one(self, lex):
        tokens = lex("if x == 1")
        assert_types(
            tokens,
            [TokenType.KEYWORD, TokenType.IDENTIFIER, TokenType.SYMBOL, TokenType.INTEGER],
        )
        assert_values(tokens, [Keyword.IF, "x", "==", 1])

    def test_block(self, lex):
        tokens = lex("if [ $a ] {\n  echo\n}\nfi")
        types = [t.type for t in tokens]
        assert types[0] == TokenType.KEYWORD
        assert types[-1] == TokenType.KEYWORD
        assert types.count(TokenType.NEWLINE) == 3
