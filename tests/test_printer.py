import pytest

from quill.ast import BindingDef, ExprStmt, Number, Op, Operation, Block, FuncCall
from quill.parser import Parser, parse
from quill.printer import to_source


class TestToSource:
    def test_operation(self):
        assert to_source(Operation(Number(1), Number(2), Op.SUB)) == "1 - 2"

    def test_empty_block(self):
        assert to_source(Block([])) == "{}"

    def test_block(self):
        block = Block([BindingDef("a", Number(1)), ExprStmt(Number(2))])
        assert to_source(block) == "{\n    let a = 1\n    2\n}"

    def test_call_argument_is_wrapped(self):
        call = FuncCall("f", [FuncCall("g", [Number(1)])])
        assert to_source(call) == "f { g 1 }"


class TestRoundTrip:
    @pytest.mark.parametrize("source", [
        "42",
        "1+2",
        "let answer = 6 * 7",
        "fn add x y => x + y",
        "fn one => 1",
        "fn wrap => fn inner => 1",
        "add 1 {double 2}",
        "add 1 2 / 3",
        "{ let a = 10 let b = { a } b - a }",
        "{}",
        "let f = {\n  fn g x => x\n  g 3\n}",
    ])
    def test_statement(self, source):
        stmt = parse(source)
        assert parse(to_source(stmt)) == stmt

    def test_program(self):
        program = Parser("let a = 1\nfn inc x => x + 1\ninc { inc a }").parse()
        assert Parser(to_source(program)).parse() == program
