from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import colorama

from .errors import ParseError, QuillError
from .interpreter import Interpreter
from .shell import Shell, format_error
from .values import Unit

USAGE = "Usage: quill [script.qu ...] or quill --file <script.qu>\n"


def run_source(source: str, filename: str = "<input>") -> None:
    interpreter = Interpreter()
    for value in interpreter.run(source, filename):
        if not isinstance(value, Unit):
            print(value)


def run_file(path: Path) -> None:
    source = path.read_text(encoding="utf-8")
    run_source(source, str(path))


def main(argv: List[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    colorama.init(autoreset=True)

    if not argv:
        Shell().cmdloop()
        return 0

    if argv[0] in ("-h", "--help"):
        sys.stdout.write(USAGE)
        return 0

    # Handle --file option
    if argv[0] == "--file":
        if len(argv) != 2:
            sys.stderr.write("Usage: quill --file <script.qu>\n")
            return 64
        paths = [Path(argv[1])]
    else:
        paths = [Path(arg) for arg in argv]

    for path in paths:
        try:
            run_file(path)
        except (OSError, UnicodeDecodeError) as exc:
            sys.stderr.write(f"Error: cannot read file: {exc}\n")
            return 66
        except ParseError as exc:
            # Already carries the filename and position
            sys.stderr.write(format_error(exc) + "\n")
            return 65
        except QuillError as exc:
            sys.stderr.write(f"{path}: {format_error(exc)}\n")
            return 65
        except RecursionError:
            sys.stderr.write(f"{path}: maximum recursion depth exceeded\n")
            return 70

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
