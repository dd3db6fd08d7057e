"""Interactive mode for the Quill interpreter. Uses cmd as backend."""
from __future__ import annotations

import cmd
import sys
from typing import Optional

from colorama import Fore, Style

from .errors import EvalError, QuillError
from .interpreter import Interpreter
from .values import Unit


def format_error(exc: QuillError) -> str:
    return f"{Fore.RED}{Style.BRIGHT}{type(exc).__name__}:{Style.RESET_ALL} {exc}"


class Shell(cmd.Cmd):
    """Quill interpreter shell. One environment lives for the whole session."""
    intro = "Quill interpreter\nType 'exit' or press Ctrl-D to leave."
    prompt = "> "

    def __init__(self, interpreter: Optional[Interpreter] = None, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter if interpreter is not None else Interpreter()

    def default(self, line: str) -> None:
        """Runs arbitrary Quill source."""
        try:
            results = self.interpreter.run(line)
        except QuillError as exc:
            sys.stderr.write(format_error(exc) + "\n")
            return
        except RecursionError:
            sys.stderr.write("maximum recursion depth exceeded\n")
            return

        for value in results:
            if not isinstance(value, Unit):
                self.stdout.write(f"{value}\n")

    def emptyline(self) -> bool:
        """Do not repeat previous command on empty line."""
        return False

    def do_help(self, arg: str) -> bool:
        """Lists commands, unless the session defines its own 'help'."""
        if self._is_defined("help"):
            self.default(f"help {arg}".rstrip())
        else:
            super().do_help(arg)
        return False

    def do_EOF(self, arg: str) -> bool:
        """Exits interpreter."""
        self.stdout.write("\n")
        return True

    def do_exit(self, arg: str) -> bool:
        """Exits interpreter, unless the session defines its own 'exit'."""
        if self._is_defined("exit"):
            self.default(f"exit {arg}".rstrip())
            return False
        return True

    def _is_defined(self, name: str) -> bool:
        for lookup in (self.interpreter.globals.get_binding, self.interpreter.globals.get_func):
            try:
                lookup(name)
            except EvalError:
                continue
            return True
        return False
