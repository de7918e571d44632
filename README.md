# phronima

Phronima is a tiny stack-based language. Programs are whitespace-separated
words that work on a stack of bytes and a 256-byte memory. A program can be
run directly by the simulator, or compiled to Brainfuck.

## Installation

```
pip install .
```

## Command line

Run a program in the simulator; its output goes to standard output:

```
phronima sim program.phron
```

Compile a program to Brainfuck. The output is written to
`compiled_code.txt` in the current directory:

```
phronima com program.phron
```

Compile every `.phron` file in `./tests/` to a `.bf` file beside it, for use
as reference output:

```
phronima rec
```

Errors (a missing file, a word that cannot be parsed, a construct the
compiler does not support, a stack underflow in the simulator) are printed
to standard error as `Application error: ...` and the command exits with
status 1.

## The language

Words are separated by whitespace. A word beginning with `//` starts a
comment that runs to the end of the line.

| Word     | Effect                                                        |
|----------|---------------------------------------------------------------|
| `0`–`255`| push the byte                                                 |
| `pop`    | discard the top of the stack                                  |
| `+` `-` `*` | arithmetic on the top two bytes, wrapping at 256          |
| `<` `>` `=` | compare the top two bytes, push 1 or 0                   |
| `swap`   | exchange the top two bytes                                    |
| `dup`    | duplicate the top byte                                        |
| `chout`  | pop and print as a character                                  |
| `numout` | pop and print as a number                                     |
| `write`  | pop a value and an address, store the value in memory         |
| `read`   | pop an address, push the value stored there                   |
| `mem`    | push 0, the start of memory                                   |
| `if` … `else` … `end` | run the block when the top of the stack is non-zero; the condition stays on the stack |
| `while` … `end` | repeat while the top of the stack is non-zero; the condition stays on the stack |

Example, printing `A`:

```
65 chout
```

The compiler does not support `numout`, `else`, `<`, `>` or `=`; the
simulator supports every word.

## Library use

```python
import sys
from phronima.lang import load_program
from phronima.simulator import simulate_program
from phronima.compiler import compile_source

program = load_program("example.phron", "72 105 swap chout chout")
stack = simulate_program(program, sys.stdout)   # prints "Hi"

print(compile_source("example.phron", "1 2 +"))
```

The modules:

- `phronima.lang` — `tokenize_line`, `tokenize_source`, `parse_tokens`,
  `link_blocks` and `load_program`, which together turn source text into a
  list of `Instruction` values (each an `Op` with an optional `byte` or jump
  `target`). `Stack` is the fixed-size byte stack used by both back ends.
- `phronima.simulator` — `simulate_program(program, out=None)` runs a
  program, writing to `out` (standard output by default), and returns the
  final `Stack`.
- `phronima.compiler` — `compile_program`, `compile_source` and
  `compile_file` return Brainfuck code as a string.
- `phronima.cli` — `main`, `read_program`, `write_program` and
  `record_for_test(directory)`.

Syntax errors and unbalanced blocks raise `phronima.lang.PhronimaSyntaxError`.
Unsupported constructs and stack errors in the compiler raise
`phronima.compiler.CompileError`. In the simulator, popping an empty stack
raises `IndexError`.

## What it does not do

The package produces Brainfuck code but does not run it; use any Brainfuck
interpreter for that. The language has no word for reading input.