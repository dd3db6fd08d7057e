from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import List


class Stmt(ABC):
    """Base class for all statements."""


class Expr(ABC):
    """Base class for all expressions."""


class Op(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


@dataclass
class Program:
    statements: List[Stmt]


@dataclass
class BindingDef(Stmt):
    name: str
    value: Expr
    type_tag: str = "BindingDef"


@dataclass
class FuncDef(Stmt):
    name: str
    params: List[str]
    body: Stmt
    type_tag: str = "FuncDef"


@dataclass
class ExprStmt(Stmt):
    expr: Expr
    type_tag: str = "ExprStmt"


@dataclass
class Number(Expr):
    value: int
    type_tag: str = "Number"


@dataclass
class Operation(Expr):
    lhs: Expr
    rhs: Expr
    op: Op
    type_tag: str = "Operation"


@dataclass
class BindingUsage(Expr):
    name: str
    type_tag: str = "BindingUsage"


@dataclass
class Block(Expr):
    stmts: List[Stmt]
    type_tag: str = "Block"


@dataclass
class FuncCall(Expr):
    callee: str
    params: List[Expr]
    type_tag: str = "FuncCall"
