from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class QuillError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ParseError(QuillError):
    """Raised when no grammar rule accepts the input.

    Rules raise it with only a message; ``Parser`` re-raises it with the
    filename and the line/column where the failing statement starts.
    """
    filename: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        where = f"line {self.line}, column {self.column}"
        if self.filename:
            where = f"{self.filename}, {where}"
        return f"{self.message} (at {where})"


class LexError(ParseError):
    """Raised when a scanner primitive finds no match at the start of the input."""


class EvalError(QuillError):
    """Raised when the interpreter encounters an invalid state."""
