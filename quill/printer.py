"""Renders an AST back into Quill source.

Any tree produced by the parser prints to text that parses back into an
equal tree.
"""
from __future__ import annotations

from typing import Union

from .ast import Program, Stmt, Expr

INDENT = "    "

Node = Union[Program, Stmt, Expr]


def to_source(node: Node) -> str:
    if isinstance(node, Program):
        return "\n".join(to_source(stmt) for stmt in node.statements)

    if node.type_tag == "BindingDef":
        return f"let {node.name} = {to_source(node.value)}"
    elif node.type_tag == "FuncDef":
        head = " ".join(["fn", node.name, *node.params])
        return f"{head} => {to_source(node.body)}"
    elif node.type_tag == "ExprStmt":
        return to_source(node.expr)
    elif node.type_tag == "Number":
        return str(node.value)
    elif node.type_tag == "Operation":
        return f"{to_source(node.lhs)} {node.op.value} {to_source(node.rhs)}"
    elif node.type_tag == "BindingUsage":
        return node.name
    elif node.type_tag == "Block":
        return _block_source(node)
    elif node.type_tag == "FuncCall":
        args = " ".join(_argument_source(param) for param in node.params)
        return f"{node.callee} {args}"
    raise ValueError(f"cannot print node of type {node.type_tag}")


def _argument_source(expr: Expr) -> str:
    # Only numbers, names and blocks stand alone as arguments
    if expr.type_tag in ("Number", "BindingUsage", "Block"):
        return to_source(expr)
    return "{ " + to_source(expr) + " }"


def _block_source(block) -> str:
    if not block.stmts:
        return "{}"
    lines = []
    for stmt in block.stmts:
        lines.extend(INDENT + line for line in to_source(stmt).split("\n"))
    return "{\n" + "\n".join(lines) + "\n}"
