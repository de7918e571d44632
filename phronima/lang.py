"""Tokenizer, parser and block linker for the Phronima stack language."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from enum import Enum, auto

STACK_SIZE = 30000 - 256

_WORD = re.compile(r"\S+")
_NUMBER = re.compile(r"\+?[0-9]+")


class Op(Enum):
    """The operations a program is built from."""

    PUSH = auto()
    POP = auto()
    PLUS = auto()
    MINUS = auto()
    MULT = auto()
    NUMOUT = auto()
    CHAROUT = auto()
    WRITE = auto()
    READ = auto()
    MEM = auto()
    IF = auto()
    END = auto()
    ELSE = auto()
    WHILE = auto()
    LESS_THAN = auto()
    GREATER_THAN = auto()
    EQUALS = auto()
    SWAP = auto()
    DUP = auto()


_KEYWORDS = {
    "pop": Op.POP,
    "+": Op.PLUS,
    "-": Op.MINUS,
    "*": Op.MULT,
    "chout": Op.CHAROUT,
    "numout": Op.NUMOUT,
    "write": Op.WRITE,
    "read": Op.READ,
    "mem": Op.MEM,
    "if": Op.IF,
    "end": Op.END,
    "else": Op.ELSE,
    "while": Op.WHILE,
    "<": Op.LESS_THAN,
    ">": Op.GREATER_THAN,
    "=": Op.EQUALS,
    "swap": Op.SWAP,
    "dup": Op.DUP,
}


@dataclass(frozen=True)
class Instruction:
    """One operation; `byte` is set for pushes, `target` for linked blocks."""

    op: Op
    byte: int | None = None
    target: int | None = None


@dataclass(frozen=True)
class Token:
    """A word of source text with its position (1-based row and column)."""

    filepath: str
    row: int
    col: int
    value: str


class PhronimaSyntaxError(Exception):
    """Raised when source text cannot be turned into a program."""

    def __init__(self, message: str, token: Token | None = None) -> None:
        super().__init__(message)
        self.token = token


@dataclass
class Stack:
    """Fixed-size byte stack; slot 0 is never used, `top` is the last slot filled."""

    data: bytearray = field(default_factory=lambda: bytearray(STACK_SIZE))
    top: int = 0

    def push(self, byte: int) -> None:
        if not 0 <= byte <= 255:
            raise ValueError(f"not a byte: {byte}")
        if self.top + 1 >= len(self.data):
            raise IndexError("stack overflow")
        self.top += 1
        self.data[self.top] = byte

    def pop(self) -> int:
        if self.top == 0:
            raise IndexError("stack underflow")
        byte = self.data[self.top]
        self.top -= 1
        return byte


def tokenize_line(filepath: str, line_number: int, source: str) -> list[Token]:
    """Split one line into tokens, stopping at a word that starts with '//'."""
    tokens = []
    for match in _WORD.finditer(source):
        word = match.group()
        if word.startswith("//"):
            break
        tokens.append(Token(filepath, line_number, match.start() + 1, word))
    return tokens


def tokenize_source(filepath: str, source: str) -> list[Token]:
    """Tokenize every line of a source text."""
    return [
        token
        for row, line in enumerate(source.split("\n"), start=1)
        for token in tokenize_line(filepath, row, line)
    ]


def _parse_token(token: Token) -> Instruction:
    value = token.value
    if _NUMBER.fullmatch(value) and int(value) <= 255:
        return Instruction(Op.PUSH, byte=int(value))
    op = _KEYWORDS.get(value)
    if op is None:
        raise PhronimaSyntaxError(
            f"{token.filepath}:{token.row}:{token.col} could not parse token: '{value}'",
            token,
        )
    return Instruction(op)


def parse_tokens(tokens) -> list[Instruction]:
    """Turn tokens into unlinked instructions."""
    return [_parse_token(token) for token in tokens]


def link_blocks(program) -> list[Instruction]:
    """Return a copy of the program with jump targets filled in for blocks."""
    linked = list(program)
    open_blocks: list[tuple[int, Op]] = []

    def innermost(word: str) -> tuple[int, Op]:
        if not open_blocks:
            raise PhronimaSyntaxError(f"'{word}' without an open block")
        return open_blocks[-1]

    for i, instruction in enumerate(linked):
        if instruction.op in (Op.IF, Op.WHILE):
            open_blocks.append((i, instruction.op))
        elif instruction.op is Op.ELSE:
            index, kind = innermost("else")
            if kind is Op.IF:
                linked[index] = replace(linked[index], target=i + 1)
                open_blocks.append((i, Op.ELSE))
        elif instruction.op is Op.END:
            index, kind = innermost("end")
            if kind is Op.IF:
                linked[index] = replace(linked[index], target=i)
                linked[i] = replace(instruction, target=i + 1)
                open_blocks.pop()
            elif kind is Op.ELSE:
                linked[index] = replace(linked[index], target=i)
                linked[i] = replace(instruction, target=i + 1)
                open_blocks.pop()
                open_blocks.pop()
            else:
                linked[index] = replace(linked[index], target=i + 1)
                linked[i] = replace(instruction, target=index)
                open_blocks.pop()
    return linked


def load_program(filepath: str, source: str) -> list[Instruction]:
    """Tokenize, parse and link a source text."""
    return link_blocks(parse_tokens(tokenize_source(filepath, source)))