import pytest

from quill.errors import LexError, ParseError
from quill.lexer import (
    extract_blanks1, extract_digits, extract_ident, extract_whitespace,
    extract_whitespace1, extract_trivia, tag
)


class TestDigits:
    def test_one_digit(self):
        assert extract_digits("1+2") == ("+2", "1")

    def test_many_digits(self):
        assert extract_digits("10-20") == ("-20", "10")

    def test_whole_input(self):
        assert extract_digits("100") == ("", "100")

    def test_no_digits(self):
        with pytest.raises(LexError, match="expected digits"):
            extract_digits("abcd")

    def test_empty_input(self):
        with pytest.raises(LexError):
            extract_digits("")


class TestWhitespace:
    def test_spaces(self):
        assert extract_whitespace("    1") == ("1", "    ")

    def test_newlines_and_tabs(self):
        assert extract_whitespace("\n\t x") == ("x", "\n\t ")

    def test_empty_match(self):
        assert extract_whitespace("abc") == ("abc", "")

    def test_whitespace1_requires_one(self):
        with pytest.raises(LexError, match="expected whitespace"):
            extract_whitespace1("blah")

    def test_blanks_stop_at_newline(self):
        assert extract_blanks1(" \t\n2") == ("\n2", " \t")

    def test_blanks_reject_newline(self):
        with pytest.raises(LexError, match="expected a space"):
            extract_blanks1("\n2")

    def test_trivia_skips_comments(self):
        assert extract_trivia("  // note\n\n// more\n  x") == ("x", "  // note\n\n// more\n  ")

    def test_trivia_comment_at_end(self):
        assert extract_trivia("// last") == ("", "// last")

    def test_trivia_keeps_division(self):
        assert extract_trivia(" / 2") == ("/ 2", " ")


class TestIdent:
    def test_alphabetic(self):
        assert extract_ident("abcdEFG stop") == (" stop", "abcdEFG")

    def test_alphanumeric_and_underscore(self):
        assert extract_ident("foo_bar1()") == ("()", "foo_bar1")

    def test_cannot_start_with_digit(self):
        with pytest.raises(LexError, match="expected identifier"):
            extract_ident("123abc")

    def test_cannot_start_with_underscore(self):
        with pytest.raises(LexError):
            extract_ident("_a")


class TestTag:
    def test_match(self):
        assert tag("let", "let a") == " a"

    def test_mismatch(self):
        with pytest.raises(LexError, match="expected '=>'"):
            tag("=>", "= >")

    def test_lex_errors_are_parse_errors(self):
        with pytest.raises(ParseError):
            tag("fn", "")
