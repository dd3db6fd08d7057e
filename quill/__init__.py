from .ast import (
    Program, Stmt, Expr, BindingDef, FuncDef, ExprStmt, Number, Op, Operation,
    BindingUsage, Block, FuncCall
)
from .errors import QuillError, ParseError, LexError, EvalError
from .interpreter import Environment, Func, Interpreter, evaluate
from .parser import Parser, parse, parse_expr, parse_stmt
from .printer import to_source
from .values import Val, Unit

__all__ = [
    "Program", "Stmt", "Expr", "BindingDef", "FuncDef", "ExprStmt",
    "Number", "Op", "Operation", "BindingUsage", "Block", "FuncCall",
    "QuillError", "ParseError", "LexError", "EvalError",
    "Environment", "Func", "Interpreter", "evaluate",
    "Parser", "parse", "parse_expr", "parse_stmt",
    "to_source", "Val", "Unit",
]
