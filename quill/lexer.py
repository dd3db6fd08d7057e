from __future__ import annotations

from typing import Callable, Tuple

from .errors import LexError


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_letter(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_ident_char(c: str) -> bool:
    return c.isascii() and (c.isalnum() or c == "_")


def _is_blank(c: str) -> bool:
    return c in (" ", "\t")


def take_while(accept: Callable[[str], bool], s: str) -> Tuple[str, str]:
    end = 0
    while end < len(s) and accept(s[end]):
        end += 1
    return s[end:], s[:end]


def take_while1(accept: Callable[[str], bool], s: str, error_msg: str) -> Tuple[str, str]:
    rest, taken = take_while(accept, s)
    if not taken:
        raise LexError(error_msg)
    return rest, taken


def extract_digits(s: str) -> Tuple[str, str]:
    return take_while1(_is_digit, s, "expected digits")


def extract_whitespace(s: str) -> Tuple[str, str]:
    return take_while(str.isspace, s)


def extract_whitespace1(s: str) -> Tuple[str, str]:
    return take_while1(str.isspace, s, "expected whitespace")


def extract_blanks1(s: str) -> Tuple[str, str]:
    # Never crosses a newline
    return take_while1(_is_blank, s, "expected a space")


def extract_trivia(s: str) -> Tuple[str, str]:
    """Skips whitespace and ``//`` comments running to end of line."""
    rest, _ = extract_whitespace(s)
    while rest.startswith("//"):
        newline = rest.find("\n")
        rest = "" if newline == -1 else rest[newline:]
        rest, _ = extract_whitespace(rest)
    return rest, s[:len(s) - len(rest)]


def extract_ident(s: str) -> Tuple[str, str]:
    if not s or not _is_letter(s[0]):
        raise LexError("expected identifier")
    return take_while(_is_ident_char, s)


def tag(literal: str, s: str) -> str:
    if s.startswith(literal):
        return s[len(literal):]
    raise LexError(f"expected '{literal}'")
