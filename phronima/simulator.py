"""Runs linked Phronima programs directly."""

from __future__ import annotations

import sys

from phronima.lang import Instruction, Op, Stack

MEMORY_SIZE = 256

_BINARY = {
    Op.MINUS: lambda a, b: (a - b) & 0xFF,
    Op.MULT: lambda a, b: (a * b) & 0xFF,
    Op.LESS_THAN: lambda a, b: int(a < b),
    Op.GREATER_THAN: lambda a, b: int(a > b),
    Op.EQUALS: lambda a, b: int(a == b),
}


def _target(instruction: Instruction) -> int:
    if instruction.target is None:
        raise ValueError(f"{instruction.op.name.lower()} is not linked to a block")
    return instruction.target


def _peek(stack: Stack) -> int:
    value = stack.pop()
    stack.push(value)
    return value


def simulate_program(program, out=None) -> Stack:
    """Run a linked program, writing its output to `out` (stdout by default).

    Returns the stack as the program left it.
    """
    out = sys.stdout if out is None else out
    program = list(program)
    stack = Stack()
    memory = bytearray(MEMORY_SIZE)
    i = 0
    while i < len(program):
        instruction = program[i]
        op = instruction.op
        if op in _BINARY:
            b = stack.pop()
            a = stack.pop()
            stack.push(_BINARY[op](a, b))
            i += 1
            continue
        match op:
            case Op.PUSH:
                stack.push(instruction.byte)
            case Op.POP:
                stack.pop()
            case Op.PLUS:
                a = stack.pop()
                b = stack.pop()
                stack.push((a + b) & 0xFF)
            case Op.CHAROUT:
                out.write(chr(stack.pop()))
            case Op.NUMOUT:
                out.write(str(stack.pop()))
            case Op.WRITE:
                byte = stack.pop()
                addr = stack.pop()
                memory[addr] = byte
            case Op.READ:
                stack.push(memory[stack.pop()])
            case Op.MEM:
                stack.push(0)
            case Op.IF | Op.WHILE:
                if _peek(stack) == 0:
                    i = _target(instruction)
                    continue
            case Op.END | Op.ELSE:
                i = _target(instruction)
                continue
            case Op.SWAP:
                a = stack.pop()
                b = stack.pop()
                stack.push(a)
                stack.push(b)
            case Op.DUP:
                a = _peek(stack)
                stack.push(a)
        i += 1
    return stack