from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from . import values
from .ast import Stmt, Expr, Op, BindingUsage, Block, FuncCall, Operation
from .errors import EvalError
from .parser import Parser, parse
from .values import Val


@dataclass
class Func:
    params: List[str]
    body: Stmt
    env: Environment  # where the function was defined


class Environment:
    def __init__(self, enclosing: Optional[Environment] = None) -> None:
        self.bindings: Dict[str, Val] = {}
        self.funcs: Dict[str, Func] = {}
        self.enclosing = enclosing

    def create_child(self) -> Environment:
        return Environment(self)

    def store_binding(self, name: str, val: Val) -> None:
        self.bindings[name] = val

    def store_func(self, name: str, params: List[str], body: Stmt) -> None:
        self.funcs[name] = Func(params, body, self)

    def get_binding(self, name: str) -> Val:
        env: Optional[Environment] = self
        while env is not None:
            if name in env.bindings:
                return env.bindings[name]
            env = env.enclosing
        raise EvalError(f"binding with name '{name}' not found")

    def get_func(self, name: str) -> Func:
        env: Optional[Environment] = self
        while env is not None:
            if name in env.funcs:
                return env.funcs[name]
            env = env.enclosing
        raise EvalError(f"function with name '{name}' not found")


class Interpreter:
    ARITHMETIC = {
        Op.ADD: values.add,
        Op.SUB: values.sub,
        Op.MUL: values.mul,
        Op.DIV: values.div,
    }

    def __init__(self, env: Optional[Environment] = None) -> None:
        self.globals = env if env is not None else Environment()

    def interpret(self, stmts: List[Stmt]) -> List[Val]:
        return [self.execute(stmt, self.globals) for stmt in stmts]

    def run(self, source: str, filename: str = "<input>") -> List[Val]:
        """Parses ``source`` as a program and runs it in the global environment."""
        return self.interpret(Parser(source, filename).parse().statements)

    def execute(self, stmt: Stmt, env: Environment) -> Val:
        if stmt.type_tag == "BindingDef":
            value = self.evaluate(stmt.value, env)
            env.store_binding(stmt.name, value)
            return values.Unit()
        elif stmt.type_tag == "FuncDef":
            env.store_func(stmt.name, stmt.params, stmt.body)
            return values.Unit()
        elif stmt.type_tag == "ExprStmt":
            return self.evaluate(stmt.expr, env)
        raise EvalError(f"unexpected statement type {stmt.type_tag}")

    def evaluate(self, expr: Expr, env: Environment) -> Val:
        if expr.type_tag == "Number":
            return values.Number(expr.value)
        elif expr.type_tag == "Operation":
            return self._evaluate_operation(expr, env)
        elif expr.type_tag == "BindingUsage":
            return self._evaluate_binding_usage(expr, env)
        elif expr.type_tag == "Block":
            return self._evaluate_block(expr, env)
        elif expr.type_tag == "FuncCall":
            return self._evaluate_func_call(expr, env)
        raise EvalError(f"unexpected expression type {expr.type_tag}")

    def _evaluate_operation(self, expr: Operation, env: Environment) -> Val:
        lhs = self.evaluate(expr.lhs, env)
        rhs = self.evaluate(expr.rhs, env)

        if not (isinstance(lhs, values.Number) and isinstance(rhs, values.Number)):
            raise EvalError(
                "cannot evaluate operation whose left-hand side and right-hand side are not both numbers"
            )

        return self.ARITHMETIC[expr.op](lhs.value, rhs.value)

    def _evaluate_binding_usage(self, expr: BindingUsage, env: Environment) -> Val:
        try:
            return env.get_binding(expr.name)
        except EvalError as lookup_error:
            # A bare name may also call a function that takes no parameters
            try:
                func = env.get_func(expr.name)
            except EvalError:
                raise lookup_error from None
            if func.params:
                raise lookup_error from None
            return self._evaluate_func_call(FuncCall(expr.name, []), env)

    def _evaluate_block(self, expr: Block, env: Environment) -> Val:
        child_env = env.create_child()
        result: Val = values.Unit()
        for stmt in expr.stmts:
            result = self.execute(stmt, child_env)
        return result

    def _evaluate_func_call(self, expr: FuncCall, env: Environment) -> Val:
        func = env.get_func(expr.callee)

        if len(expr.params) != len(func.params):
            raise EvalError(
                f"expected {len(func.params)} arguments, got {len(expr.params)}"
            )

        # Arguments are evaluated where the call is written...
        args = [self.evaluate(param, env) for param in expr.params]

        # ...and bound next to where the function was defined
        local_env = func.env.create_child()
        for name, arg in zip(func.params, args):
            local_env.store_binding(name, arg)

        return self.execute(func.body, local_env)


def evaluate(source: str, env: Optional[Environment] = None) -> Val:
    """Parses one statement from ``source`` and runs it.

    Uses a fresh global environment unless ``env`` is given, so callers such
    as a REPL can keep state between calls.
    """
    interpreter = Interpreter(env)
    return interpreter.execute(parse(source), interpreter.globals)
