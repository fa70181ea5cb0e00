"""Instruction set of the 12-bit machine: mnemonics, opcodes and operand rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class OperandKind(IntEnum):
    """Addressing method of an operand, valued by its 3-bit encoding."""

    IMMEDIATE = 1
    DIRECT = 3
    REGISTER = 5


@dataclass(frozen=True)
class Instruction:
    """One machine instruction.

    ``group`` is 1 for two-operand instructions, 2 for one-operand
    instructions and 3 for instructions without operands.
    """

    name: str
    opcode: int
    group: int
    source_operands: frozenset[OperandKind]
    destination_operands: frozenset[OperandKind]


_ALL = frozenset(OperandKind)
_WRITABLE = frozenset({OperandKind.DIRECT, OperandKind.REGISTER})
_NONE: frozenset[OperandKind] = frozenset()

INSTRUCTIONS: tuple[Instruction, ...] = (
    Instruction("mov", 0, 1, _ALL, _WRITABLE),
    Instruction("cmp", 1, 1, _ALL, _ALL),
    Instruction("add", 2, 1, _ALL, _WRITABLE),
    Instruction("sub", 3, 1, _ALL, _WRITABLE),
    Instruction("not", 4, 2, _NONE, _WRITABLE),
    Instruction("clr", 5, 2, _NONE, _WRITABLE),
    Instruction("lea", 6, 1, frozenset({OperandKind.DIRECT}), _WRITABLE),
    Instruction("inc", 7, 2, _NONE, _WRITABLE),
    Instruction("dec", 8, 2, _NONE, _WRITABLE),
    Instruction("jmp", 9, 2, _NONE, _WRITABLE),
    Instruction("bne", 10, 2, _NONE, _WRITABLE),
    Instruction("red", 11, 2, _NONE, _WRITABLE),
    Instruction("prn", 12, 2, _NONE, _ALL),
    Instruction("jsr", 13, 2, _NONE, _WRITABLE),
    Instruction("rts", 14, 3, _NONE, _NONE),
    Instruction("stop", 15, 3, _NONE, _NONE),
)

_BY_NAME = {instruction.name: instruction for instruction in INSTRUCTIONS}

DIRECTIVE_WORDS = frozenset({"data", "string", "extern", "entry"})


def lookup_instruction(name: str) -> Instruction | None:
    """Return the instruction called ``name``, or None if there is none."""
    return _BY_NAME.get(name)


def is_reserved_word(word: str) -> bool:
    """Tell whether ``word`` is a mnemonic or a directive name."""
    return word in _BY_NAME or word in DIRECTIVE_WORDS