"""Interpreter for the eight-command Brainfuck language."""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from pathlib import Path
from typing import BinaryIO, TextIO

TAPE_SIZE = 30_000


class Op(Enum):
    """A single Brainfuck command, keyed by its character."""

    INC_POINTER = ">"
    DEC_POINTER = "<"
    INC_DATA = "+"
    DEC_DATA = "-"
    OUT_DATA = "."
    INP_DATA = ","
    COND_JUMP_FORWARD = "["
    COND_JUMP_BACKWARD = "]"


class BracketError(ValueError):
    """Raised when the jump commands of a program do not pair up."""


_OPS = {op.value: op for op in Op}


def tokenize(code: str) -> list[Op]:
    """Turn source text into commands, ignoring every other character."""
    return [_OPS[char] for char in code if char in _OPS]


def match_jumps(operations: list[Op]) -> dict[int, int]:
    """Map the index of every bracket to the index of its partner."""
    pending: list[int] = []
    pairs: dict[int, int] = {}
    for index, op in enumerate(operations):
        if op is Op.COND_JUMP_FORWARD:
            pending.append(index)
        elif op is Op.COND_JUMP_BACKWARD:
            if not pending:
                raise BracketError(
                    f"Unexpected conditional backward jump at position {index}, "
                    "does not match any '['"
                )
            start = pending.pop()
            pairs[start] = index
            pairs[index] = start
    if pending:
        raise BracketError(
            f"Unmatched conditional forward jump at positions {pending}, "
            "expecting a closing ']' for each of them"
        )
    return pairs


def _read_byte(stream: BinaryIO) -> int:
    chunk = stream.read(1)
    if len(chunk) != 1:
        raise EOFError("An error occurred while reading byte!")
    return chunk[0]


def execute(code: str, stdin: BinaryIO | None = None, stdout: TextIO | None = None) -> None:
    """Run a program, reading bytes from ``stdin`` and writing characters to ``stdout``."""
    operations = tokenize(code)
    jumps = match_jumps(operations)
    source = sys.stdin.buffer if stdin is None else stdin
    sink = sys.stdout if stdout is None else stdout

    data = bytearray(TAPE_SIZE)
    pointer = 0
    index = 0
    while index < len(operations):
        match operations[index]:
            case Op.INC_POINTER:
                pointer += 1
            case Op.DEC_POINTER:
                if pointer == 0:
                    raise IndexError("data pointer moved below zero")
                pointer -= 1
            case Op.INC_DATA:
                data[pointer] = (data[pointer] + 1) % 256
            case Op.DEC_DATA:
                data[pointer] = (data[pointer] - 1) % 256
            case Op.OUT_DATA:
                sink.write(chr(data[pointer]))
            case Op.INP_DATA:
                data[pointer] = _read_byte(source)
            case Op.COND_JUMP_FORWARD:
                if data[pointer] == 0:
                    index = jumps[index]
            case Op.COND_JUMP_BACKWARD:
                if data[pointer] != 0:
                    index = jumps[index]
        index += 1


def main(argv: list[str] | None = None) -> int:
    """Run the program stored in the file named on the command line."""
    parser = argparse.ArgumentParser(prog="brainfuck", description="Run a Brainfuck program.")
    parser.add_argument("path", help="file holding the program")
    args = parser.parse_args(argv)
    execute(Path(args.path).read_text(encoding="utf-8"))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())