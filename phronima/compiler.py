"""Compiles linked Phronima programs to brainfuck code."""

from __future__ import annotations

from pathlib import Path

from phronima.lang import Instruction, Op, Stack, load_program

MEMORY_SIZE = 256

_UNSUPPORTED = {
    Op.NUMOUT: "numout",
    Op.ELSE: "else",
    Op.LESS_THAN: "<",
    Op.GREATER_THAN: ">",
    Op.EQUALS: "=",
}


class CompileError(Exception):
    """Raised when a program cannot be compiled."""


def _compile_write(stack: Stack, memory: bytearray) -> str:
    byte = stack.pop()
    addr = stack.pop()
    # The generated code still has the address and byte on its stack.
    distance = 255 + stack.top + 2 - addr
    left, right = "<" * distance, ">" * distance
    memory[addr] = byte
    return f"{left}[-]{right}[-{left}+{right}]<[-]<"


def _compile_read(stack: Stack, memory: bytearray) -> str:
    addr = stack.pop()
    stack.push(memory[addr])
    distance = 255 + stack.top - addr
    to_base = 255 + stack.top
    return "".join(
        (
            "[-]<>",
            "<" * distance,
            "[-",
            ">" * distance,
            "+",
            "<" * to_base,
            "+",
            ">" * addr,
            "]",
            "<" * addr,
            "[-",
            ">" * addr,
            "+",
            "<" * addr,
            "]",
            ">" * to_base,
        )
    )


def _compile_end(instruction: Instruction, program: list[Instruction]) -> str:
    target = instruction.target
    if target is None:
        raise CompileError("'end' is not linked to a block")
    if target == len(program):
        return "]"
    if target > len(program):
        raise CompileError(f"'end' jumps past the program to {target}")
    if program[target].op is Op.WHILE:
        return "]"
    # Leave the if block on a zero cell so it never runs twice.
    return ">]<"


def _compile_instruction(
    instruction: Instruction,
    program: list[Instruction],
    stack: Stack,
    memory: bytearray,
) -> str:
    op = instruction.op
    if op in _UNSUPPORTED:
        raise CompileError(f"'{_UNSUPPORTED[op]}' cannot be compiled yet")
    match op:
        case Op.PUSH:
            stack.push(instruction.byte)
            return ">" + "+" * instruction.byte
        case Op.POP:
            stack.pop()
            return "[-]<"
        case Op.PLUS:
            a = stack.pop()
            b = stack.pop()
            stack.push((a + b) & 0xFF)
            return "[<+>-]<"
        case Op.MINUS:
            b = stack.pop()
            a = stack.pop()
            stack.push((a - b) & 0xFF)
            return "[-<->]<"
        case Op.MULT:
            b = stack.pop()
            a = stack.pop()
            stack.push((a * b) & 0xFF)
            return "<[->>+<<]>[->[->+<<<+>>]>[-<+>]<<]>[-]<<"
        case Op.CHAROUT:
            stack.pop()
            return ".[-]<"
        case Op.WRITE:
            return _compile_write(stack, memory)
        case Op.READ:
            return _compile_read(stack, memory)
        case Op.MEM:
            stack.push(0)
            return ">"
        case Op.IF | Op.WHILE:
            return "["
        case Op.END:
            return _compile_end(instruction, program)
        case Op.SWAP:
            a = stack.pop()
            b = stack.pop()
            stack.push(a)
            stack.push(b)
            return "<[->>+<<]>[-<+>]>[-<+>]<"
        case Op.DUP:
            a = stack.pop()
            stack.push(a)
            stack.push(a)
            return "[->+>+<<]>>[-<<+>>]<"
    raise CompileError(f"unknown operation {op}")


def compile_program(program) -> str:
    """Compile a linked program to brainfuck code."""
    program = list(program)
    stack = Stack()
    memory = bytearray(MEMORY_SIZE)
    parts = [">" * 255]
    try:
        for instruction in program:
            parts.append(_compile_instruction(instruction, program, stack, memory))
    except IndexError as exc:
        raise CompileError(f"stack error while compiling: {exc}") from exc
    return "".join(parts)


def compile_source(filepath: str, source: str) -> str:
    """Compile source text; `filepath` is used in error messages."""
    return compile_program(load_program(filepath, source))


def compile_file(filepath) -> str:
    """Read and compile a source file."""
    path = Path(filepath)
    return compile_source(str(filepath), path.read_text())