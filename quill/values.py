"""Runtime values produced by the interpreter.

Quill has a single numeric kind, a signed 32-bit integer, plus the unit value
returned by declarations and empty blocks. Arithmetic helpers here mirror
two's-complement 32-bit semantics but report overflow as an error instead of
wrapping.
"""
from __future__ import annotations

from abc import ABC
from dataclasses import dataclass

from .errors import EvalError

I32_MIN = -(2 ** 31)
I32_MAX = 2 ** 31 - 1


class Val(ABC):
    """Base class for all runtime values."""


@dataclass(frozen=True)
class Number(Val):
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Unit(Val):

    def __str__(self) -> str:
        return "()"


def _checked(result: int, verb: str) -> Number:
    if not I32_MIN <= result <= I32_MAX:
        raise EvalError(f"attempt to {verb} with overflow")
    return Number(result)


def add(lhs: int, rhs: int) -> Number:
    return _checked(lhs + rhs, "add")


def sub(lhs: int, rhs: int) -> Number:
    return _checked(lhs - rhs, "subtract")


def mul(lhs: int, rhs: int) -> Number:
    return _checked(lhs * rhs, "multiply")


def div(lhs: int, rhs: int) -> Number:
    """Integer division truncating toward zero, as in C."""
    if rhs == 0:
        raise EvalError("attempt to divide by zero")
    quotient = abs(lhs) // abs(rhs)
    if (lhs < 0) != (rhs < 0):
        quotient = -quotient
    return _checked(quotient, "divide")
