"""Command line entry point: simulate, compile or record test files."""

from __future__ import annotations

import sys
from pathlib import Path

from phronima.compiler import CompileError, compile_file, compile_program
from phronima.lang import PhronimaSyntaxError, load_program
from phronima.simulator import simulate_program

COMPILED_OUTPUT = "compiled_code.txt"
_USAGE_MODE = "Must state whether to compile 'com' or simulate 'sim' the program"
_USAGE_ARGS = "Must provide 2 arguments\n['sim', 'com'] and 'filepath'"


def read_program(filepath):
    """Read, parse and link a source file."""
    return load_program(str(filepath), Path(filepath).read_text())


def write_program(filepath, code: str) -> None:
    """Write compiled code to a file."""
    Path(filepath).write_text(code)


def record_for_test(directory="./tests/") -> list[Path]:
    """Compile every .phron file in `directory` to a .bf file beside it."""
    written = []
    for path in sorted(Path(directory).iterdir()):
        if path.suffix != ".phron":
            continue
        print(path)
        target = path.with_suffix(".bf")
        write_program(target, compile_file(path))
        print(target)
        written.append(target)
    return written


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    mode = args[0] if args else None

    if mode in ("sim", "com"):
        if len(args) < 2:
            return _fail(_USAGE_ARGS)
        try:
            program = read_program(args[1])
        except (OSError, UnicodeDecodeError, PhronimaSyntaxError) as err:
            return _fail(f"Application error: {err}")
        if mode == "sim":
            try:
                simulate_program(program, sys.stdout)
            except (IndexError, ValueError) as err:
                return _fail(f"Application error: {err}")
            return 0
        try:
            code = compile_program(program)
        except CompileError as err:
            return _fail(f"Application error: {err}")
        write_program(COMPILED_OUTPUT, code)
        return 0

    if mode == "rec":
        print("Creating compilation test validation files...\n")
        record_for_test("./tests/")
        print("\ncomplete.")
        return 0

    return _fail(_USAGE_MODE)


if __name__ == "__main__":
    raise SystemExit(main())