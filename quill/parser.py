"""Parse rules for Quill.

A parse rule is any callable that takes the remaining input and returns
``(remainder, node)``, raising ``ParseError`` when it does not match. Rules
compose by plain function calls; ``first_of`` tries an ordered list of
alternatives and keeps the first success.

Grammar::

    stmt          := binding_def | func_def | expr
    binding_def   := "let" ws1 ident ws "=" ws expr
    func_def      := "fn" ws1 ident ws (ident ws)* "=>" ws stmt
    expr          := operation | non_operation
    operation     := non_operation ws op ws non_operation
    non_operation := number | func_call | binding_usage | block
    func_call     := ident (blanks1 argument)+
    argument      := number | binding_usage | block
    block         := "{" trivia (stmt trivia)* "}"

``trivia`` is whitespace plus ``//`` comments running to end of line.

An expression holds at most one flat binary operation, so ``1+2+3`` parses
as ``1+2`` and leaves ``+3`` unconsumed.

Call arguments are deliberately narrower than full expressions: only a
number, a name or a block, each on the same line as the callee. ``f 1+2``
therefore parses as ``(f 1) + 2``, and an argument that is itself a call or
an operation has to be wrapped in a block: ``add {double 2} {1 + 2}``.
"""
from __future__ import annotations

from typing import Callable, List, Sequence, Tuple, TypeVar

from . import values
from .ast import (
    Program, Stmt, Expr, BindingDef, FuncDef, ExprStmt, Number, Op, Operation,
    BindingUsage, Block, FuncCall
)
from .errors import ParseError
from .lexer import (
    extract_blanks1, extract_digits, extract_ident, extract_whitespace,
    extract_whitespace1, extract_trivia, tag
)

T = TypeVar("T")
Rule = Callable[[str], Tuple[str, T]]


def first_of(s: str, rules: Sequence[Rule]) -> Tuple[str, T]:
    """Returns the result of the first rule that accepts ``s``.

    When every rule fails, only the last rule's error is raised; earlier
    failures are discarded.
    """
    error = ParseError("no rule to try")
    for rule in rules:
        try:
            return rule(s)
        except ParseError as exc:
            error = exc
    raise error


def many(rule: Rule, s: str) -> Tuple[str, List[T]]:
    """Applies ``rule`` until it fails. Zero matches is a success."""
    items: List[T] = []
    while True:
        try:
            s, item = rule(s)
        except ParseError:
            return s, items
        items.append(item)


# --- expressions ---

def parse_number(s: str) -> Tuple[str, Number]:
    s, digits = extract_digits(s)
    # Length check first: int() refuses very long digit strings
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(values.I32_MAX)) or int(significant) > values.I32_MAX:
        raise ParseError("number too large to fit in target type")
    return s, Number(int(significant))


def _op_rule(op: Op) -> Rule:
    return lambda s: (tag(op.value, s), op)


def parse_op(s: str) -> Tuple[str, Op]:
    return first_of(s, [_op_rule(op) for op in Op])


def parse_binding_usage(s: str) -> Tuple[str, BindingUsage]:
    s, name = extract_ident(s)
    return s, BindingUsage(name)


def parse_block(s: str) -> Tuple[str, Block]:
    s = tag("{", s)
    s, _ = extract_trivia(s)

    stmts: List[Stmt] = []
    while s and not s.startswith("}"):
        s, stmt = parse_stmt(s)
        stmts.append(stmt)
        s, _ = extract_trivia(s)

    s = tag("}", s)
    return s, Block(stmts)


def _parse_argument(s: str) -> Tuple[str, Expr]:
    s, _ = extract_blanks1(s)
    return first_of(s, [parse_number, parse_binding_usage, parse_block])


def parse_func_call(s: str) -> Tuple[str, FuncCall]:
    s, callee = extract_ident(s)
    s, first = _parse_argument(s)
    s, rest = many(_parse_argument, s)
    return s, FuncCall(callee, [first, *rest])


def parse_non_operation(s: str) -> Tuple[str, Expr]:
    return first_of(s, [parse_number, parse_func_call, parse_binding_usage, parse_block])


def parse_operation(s: str) -> Tuple[str, Operation]:
    s, lhs = parse_non_operation(s)
    s, _ = extract_whitespace(s)

    s, op = parse_op(s)
    s, _ = extract_whitespace(s)

    s, rhs = parse_non_operation(s)
    return s, Operation(lhs, rhs, op)


def parse_expr(s: str) -> Tuple[str, Expr]:
    return first_of(s, [parse_operation, parse_non_operation])


# --- statements ---

def parse_binding_def(s: str) -> Tuple[str, BindingDef]:
    s = tag("let", s)
    s, _ = extract_whitespace1(s)

    s, name = extract_ident(s)
    s, _ = extract_whitespace(s)

    s = tag("=", s)
    s, _ = extract_whitespace(s)

    s, value = parse_expr(s)
    return s, BindingDef(name, value)


def _parse_param(s: str) -> Tuple[str, str]:
    s, param = extract_ident(s)
    s, _ = extract_whitespace(s)
    return s, param


def parse_func_def(s: str) -> Tuple[str, FuncDef]:
    s = tag("fn", s)
    s, _ = extract_whitespace1(s)

    s, name = extract_ident(s)
    s, _ = extract_whitespace(s)

    s, params = many(_parse_param, s)

    s = tag("=>", s)
    s, _ = extract_whitespace(s)

    s, body = parse_stmt(s)
    return s, FuncDef(name, params, body)


def parse_expr_stmt(s: str) -> Tuple[str, ExprStmt]:
    s, expr = parse_expr(s)
    return s, ExprStmt(expr)


def parse_stmt(s: str) -> Tuple[str, Stmt]:
    return first_of(s, [parse_binding_def, parse_func_def, parse_expr_stmt])


def parse(source: str) -> Stmt:
    """Parses exactly one statement, allowing surrounding whitespace."""
    s, _ = extract_whitespace(source)
    s, stmt = parse_stmt(s)
    s, _ = extract_whitespace(s)
    if s:
        raise ParseError("input was not consumed fully by parser")
    return stmt


class Parser:
    """Parses a whole program: whitespace-separated statements and ``//`` comments."""

    def __init__(self, source: str, filename: str = "<input>") -> None:
        self.source = source
        self.filename = filename

    def parse(self) -> Program:
        statements: List[Stmt] = []
        s, _ = extract_trivia(self.source)
        while s:
            try:
                s, stmt = parse_stmt(s)
            except ParseError as exc:
                line, column = self._position(s)
                raise ParseError(exc.message, self.filename, line, column) from exc
            statements.append(stmt)
            s, _ = extract_trivia(s)
        return Program(statements)

    # --- helpers ---

    def _position(self, rest: str) -> Tuple[int, int]:
        consumed = self.source[:len(self.source) - len(rest)]
        line = consumed.count("\n") + 1
        column = len(consumed) - (consumed.rfind("\n") + 1) + 1
        return line, column
