"""Tests for the hyperc lexer: token kinds, lexemes, modes and positions."""

import pytest

from hyperc import LexerError, LexErrorKind, Token, TokenType, tokenize
from hyperc.lexer import Lexer

T = TokenType


def kinds_and_lexemes(source: str) -> list[tuple[TokenType, str]]:
    return [(t.type, t.lexeme) for t in tokenize(source)]


class TestPunctuation:
    """Single-character and multi-character punctuation."""

    def test_single_character_tokens(self):
        assert kinds_and_lexemes("<>/={}") == [
            (T.LESS_THAN, "<"),
            (T.GREATER_THAN, ">"),
            (T.SLASH, "/"),
            (T.EQUALS, "="),
            (T.OPEN_BRACE, "{"),
            (T.CLOSE_BRACE, "}"),
            (T.EOF, ""),
        ]

    def test_punctuation_has_no_literal(self):
        assert all(t.literal is None for t in tokenize("<>/={}"))

    def test_self_closing_tag(self):
        assert kinds_and_lexemes("<div/>") == [
            (T.LESS_THAN, "<"),
            (T.IDENTIFIER, "div"),
            (T.SLASH, "/"),
            (T.GREATER_THAN, ">"),
            (T.EOF, ""),
        ]

    def test_spread(self):
        assert kinds_and_lexemes("<div {...props}>") == [
            (T.LESS_THAN, "<"),
            (T.IDENTIFIER, "div"),
            (T.WHITESPACE, " "),
            (T.OPEN_BRACE, "{"),
            (T.SPREAD, "..."),
            (T.IDENTIFIER, "props"),
            (T.CLOSE_BRACE, "}"),
            (T.GREATER_THAN, ">"),
            (T.EOF, ""),
        ]

    def test_fewer_than_three_dots_are_single_dots(self):
        assert kinds_and_lexemes("<x ..>") == [
            (T.LESS_THAN, "<"),
            (T.IDENTIFIER, "x"),
            (T.WHITESPACE, " "),
            (T.DOT, "."),
            (T.DOT, "."),
            (T.GREATER_THAN, ">"),
            (T.EOF, ""),
        ]


class TestLiterals:
    """Strings, identifiers and whitespace inside tags."""

    def test_double_quoted_string_attribute(self):
        tokens = tokenize('<div class="container">')
        assert [(t.type, t.lexeme) for t in tokens] == [
            (T.LESS_THAN, "<"),
            (T.IDENTIFIER, "div"),
            (T.WHITESPACE, " "),
            (T.IDENTIFIER, "class"),
            (T.EQUALS, "="),
            (T.STRING, '"container"'),
            (T.GREATER_THAN, ">"),
            (T.EOF, ""),
        ]
        assert tokens[5].literal == "container"

    def test_single_quoted_string(self):
        string = tokenize("<a title='hi there'>")[5]
        assert string.type is T.STRING
        assert string.lexeme == "'hi there'"
        assert string.literal == "hi there"

    def test_other_quote_kind_inside_string(self):
        string = tokenize("<a title=\"it's\">")[5]
        assert string.literal == "it's"

    def test_expression_attribute(self):
        assert kinds_and_lexemes("<div class={myClass}>") == [
            (T.LESS_THAN, "<"),
            (T.IDENTIFIER, "div"),
            (T.WHITESPACE, " "),
            (T.IDENTIFIER, "class"),
            (T.EQUALS, "="),
            (T.OPEN_BRACE, "{"),
            (T.IDENTIFIER, "myClass"),
            (T.CLOSE_BRACE, "}"),
            (T.GREATER_THAN, ">"),
            (T.EOF, ""),
        ]

    def test_identifier_characters(self):
        tokens = tokenize("<my-el_2 data-x_1>")
        assert tokens[1].lexeme == "my-el_2"
        assert tokens[3].lexeme == "data-x_1"

    def test_identifier_may_start_with_underscore(self):
        assert tokenize("<_private>")[1].lexeme == "_private"

    def test_whitespace_run_is_one_token(self):
        tokens = tokenize("<a \t\r\n  b>")
        assert tokens[2].type is T.WHITESPACE
        assert tokens[2].lexeme == " \t\r\n  "
        assert tokens[3].lexeme == "b"


class TestContentMode:
    """Markup text is captured verbatim between tags."""

    def test_greater_than_inside_string_attribute(self):
        assert kinds_and_lexemes('<div data-logic="if(x > 5)">Content</div>') == [
            (T.LESS_THAN, "<"),
            (T.IDENTIFIER, "div"),
            (T.WHITESPACE, " "),
            (T.IDENTIFIER, "data-logic"),
            (T.EQUALS, "="),
            (T.STRING, '"if(x > 5)"'),
            (T.GREATER_THAN, ">"),
            (T.TEXT, "Content"),
            (T.LESS_THAN, "<"),
            (T.SLASH, "/"),
            (T.IDENTIFIER, "div"),
            (T.GREATER_THAN, ">"),
            (T.EOF, ""),
        ]

    def test_greater_than_inside_text(self):
        tokens = tokenize("<div>Is 5 > 3?</div>")
        assert (tokens[3].type, tokens[3].lexeme) == (T.TEXT, "Is 5 > 3?")
        assert tokens[3].literal == "Is 5 > 3?"

    def test_text_keeps_whitespace(self):
        tokens = tokenize("<div> Hello   World </div>")
        assert (tokens[3].type, tokens[3].lexeme) == (T.TEXT, " Hello   World ")

    def test_source_starts_in_content_mode(self):
        assert kinds_and_lexemes('div "hello"') == [
            (T.TEXT, 'div "hello"'),
            (T.EOF, ""),
        ]

    def test_text_stops_at_open_brace(self):
        assert kinds_and_lexemes("Hi {name}") == [
            (T.TEXT, "Hi "),
            (T.OPEN_BRACE, "{"),
            (T.IDENTIFIER, "name"),
            (T.CLOSE_BRACE, "}"),
            (T.EOF, ""),
        ]

    def test_close_brace_keeps_tag_mode(self):
        assert kinds_and_lexemes("{a} b") == [
            (T.OPEN_BRACE, "{"),
            (T.IDENTIFIER, "a"),
            (T.CLOSE_BRACE, "}"),
            (T.WHITESPACE, " "),
            (T.IDENTIFIER, "b"),
            (T.EOF, ""),
        ]

    def test_empty_source(self):
        assert kinds_and_lexemes("") == [(T.EOF, "")]


class TestPositions:
    """Line/column bookkeeping (1-based, at the start of each lexeme)."""

    def test_multiline_positions(self):
        tokens = tokenize("<div>\n  <p>x</p>\n</div>")
        assert [(t.type, t.line, t.col) for t in tokens] == [
            (T.LESS_THAN, 1, 1),
            (T.IDENTIFIER, 1, 2),
            (T.GREATER_THAN, 1, 5),
            (T.TEXT, 1, 6),
            (T.LESS_THAN, 2, 3),
            (T.IDENTIFIER, 2, 4),
            (T.GREATER_THAN, 2, 5),
            (T.TEXT, 2, 6),
            (T.LESS_THAN, 2, 7),
            (T.SLASH, 2, 8),
            (T.IDENTIFIER, 2, 9),
            (T.GREATER_THAN, 2, 10),
            (T.TEXT, 2, 11),
            (T.LESS_THAN, 3, 1),
            (T.SLASH, 3, 2),
            (T.IDENTIFIER, 3, 3),
            (T.GREATER_THAN, 3, 6),
            (T.EOF, 3, 7),
        ]

    def test_token_after_whitespace_newline(self):
        tokens = tokenize('<a\n  b="1">')
        assert (tokens[2].type, tokens[2].line, tokens[2].col) == (T.WHITESPACE, 1, 3)
        assert (tokens[3].lexeme, tokens[3].line, tokens[3].col) == ("b", 2, 3)

    def test_eof_just_past_last_character(self):
        eof = tokenize("hello")[-1]
        assert (eof.type, eof.line, eof.col) == (T.EOF, 1, 6)

    def test_eof_of_empty_source(self):
        eof = tokenize("")[-1]
        assert (eof.line, eof.col) == (1, 1)

    def test_exactly_one_eof(self):
        tokens = tokenize("<p>a</p><br/>")
        assert [t.type for t in tokens].count(T.EOF) == 1
        assert tokens[-1].type is T.EOF


class TestLexerErrors:
    """Lexer failures carry kind, position and offending character."""

    def test_unexpected_character(self):
        with pytest.raises(LexerError) as exc_info:
            tokenize("<div @click>")
        error = exc_info.value
        assert error.kind is LexErrorKind.UNEXPECTED_CHARACTER
        assert (error.line, error.col, error.char) == (1, 6, "@")
        assert "Unexpected character '@'" in str(error)

    def test_unexpected_character_on_later_line(self):
        with pytest.raises(LexerError) as exc_info:
            tokenize("<div\n  #x>")
        assert (exc_info.value.line, exc_info.value.col) == (2, 3)

    def test_unterminated_string(self):
        with pytest.raises(LexerError) as exc_info:
            tokenize('<a href="x')
        error = exc_info.value
        assert error.kind is LexErrorKind.UNTERMINATED_STRING
        assert error.char == "EOF"
        assert (error.line, error.col) == (1, 11)

    def test_text_after_expression_is_lexed_as_tag(self):
        with pytest.raises(LexerError) as exc_info:
            tokenize("<p>{name}!</p>")
        assert exc_info.value.char == "!"


class TestLexerObject:
    """The Lexer class and Token records."""

    def test_lexer_class_matches_function(self):
        source = '<p id="a">b</p>'
        assert Lexer(source).tokenize() == tokenize(source)

    def test_tokens_are_immutable(self):
        token = tokenize("<p>")[0]
        with pytest.raises(AttributeError):
            token.lexeme = "x"

    def test_token_repr(self):
        assert repr(Token(T.LESS_THAN, "<", None, 1, 1)) == "Token(LessThan, '<', 1:1)"
