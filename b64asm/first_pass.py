"""First pass: build the symbol table and encode data and instruction heads."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .checks import (
    Diagnostic,
    check_data,
    check_instruction,
    check_string,
    check_symbol,
)
from .encoding import WORD_BITS, to_binary
from .isa import OperandKind, lookup_instruction
from .symbols import SymbolKind, SymbolTable
from .text import is_blank, is_number_start, next_word

INITIAL_IC = 100
_ZERO_WORD = "0" * WORD_BITS


@dataclass
class FirstPassResult:
    """What the first pass learns about a program.

    ``instructions`` holds the first word of every instruction that compiled,
    ``data`` every data word, both as 12-character binary strings. ``ic`` and
    ``dc`` are the counters after the last line.
    """

    symbols: SymbolTable = field(default_factory=SymbolTable)
    instructions: list[str] = field(default_factory=list)
    data: list[str] = field(default_factory=list)
    errors: list[Diagnostic] = field(default_factory=list)
    ic: int = INITIAL_IC
    dc: int = 0

    @property
    def ok(self) -> bool:
        """True when no error was found."""
        return not self.errors


def _operand_kind(word: str) -> OperandKind:
    if word[:1] == "@":
        return OperandKind.REGISTER
    if is_number_start(word[:1]):
        return OperandKind.IMMEDIATE
    return OperandKind.DIRECT


def _compile_instruction(
    result: FirstPassResult, line: str, index: int, mnemonic: str, line_number: int
) -> int:
    """Encode the first word of an instruction; return how many words it takes."""
    problems = check_instruction(line, index, mnemonic, line_number)
    if problems:
        result.errors.extend(problems)
        return 0

    instruction = lookup_instruction(mnemonic)
    assert instruction is not None
    opcode = to_binary(instruction.opcode, 4)

    if instruction.group == 3:
        result.instructions.append("000" + opcode + "00000")
        return 1

    first_word, index = next_word(line, index)
    destination = _operand_kind(first_word)
    second_word, index = next_word(line, index)

    if second_word:
        source = destination
        destination = _operand_kind(second_word)
        result.instructions.append(
            to_binary(source, 3) + opcode + to_binary(destination, 3) + "00"
        )
        if source is OperandKind.REGISTER and destination is OperandKind.REGISTER:
            return 2
        return 3

    result.instructions.append("000" + opcode + to_binary(destination, 3) + "00")
    return 2


def _compile_numbers(
    result: FirstPassResult, line: str, index: int, line_number: int
) -> int:
    """Encode the numbers of a ``.data`` directive; return how many were added."""
    problems = check_data(line, index, line_number)
    if problems:
        result.errors.extend(problems)
        return 0

    values: list[int] = []
    end = len(line)
    separators = " \t,"
    while index < end and line[index] != "\n":
        while index < end and line[index] in separators:
            index += 1
        if index >= end or line[index] == "\n":
            break
        start = index
        sign = 1
        if line[index] == "-":
            sign = -1
            index += 1
        elif line[index] == "+":
            index += 1
        number = 0
        while index < end and "0" <= line[index] <= "9":
            number = number * 10 + ord(line[index]) - ord("0")
            index += 1
        if index == start or (index < end and line[index] not in separators + "\n"):
            result.errors.append(Diagnostic(line_number, "invalid number in .data."))
            return 0
        values.append(sign * number)

    result.data.extend(to_binary(value, WORD_BITS) for value in values)
    return len(values)


def _compile_string(
    result: FirstPassResult, line: str, index: int, line_number: int
) -> int:
    """Encode the characters of a ``.string`` directive and its terminator."""
    end = len(line)
    while index < end and line[index] in " \t":
        index += 1

    problems = check_string(line, index, line_number)
    if problems:
        result.errors.extend(problems)
        return 0

    start = index + 1
    closing = line.find('"', start)
    text = line[start:closing]
    result.data.extend(to_binary(ord(char), WORD_BITS) for char in text)
    result.data.append(_ZERO_WORD)
    return len(text) + 1


def _read_line(result: FirstPassResult, line: str, line_number: int) -> None:
    if is_blank(line) or line.startswith(";"):
        return

    word, index = next_word(line, 0)
    label: str | None = None
    if word.endswith(":"):
        label = word[:-1]
        problems = check_symbol(label, line_number, result.symbols)
        if problems:
            result.errors.extend(problems)
            return
    else:
        index = 0

    word, index = next_word(line, index)

    if word in (".data", ".string"):
        if label is not None:
            result.symbols.add(label, result.dc, SymbolKind.DATA)
        if word == ".data":
            result.dc += _compile_numbers(result, line, index, line_number)
        else:
            result.dc += _compile_string(result, line, index, line_number)
    elif word == ".extern":
        name, _ = next_word(line, index)
        result.symbols.add(name, 0, SymbolKind.EXTERNAL)
    elif word == ".entry":
        return
    else:
        if label is not None:
            result.symbols.add(label, result.ic, SymbolKind.INSTRUCTION)
        result.ic += _compile_instruction(result, line, index, word, line_number)


def first_pass(lines: Iterable[str]) -> FirstPassResult:
    """Run the first pass over the lines of an expanded source.

    Errors are collected in the result. When there are none, data symbols
    are moved past the code by adding the final instruction counter.
    """
    result = FirstPassResult()
    for line_number, line in enumerate(lines, start=1):
        _read_line(result, line, line_number)

    if result.errors:
        return result

    for symbol in result.symbols:
        if symbol.kind is SymbolKind.DATA:
            symbol.value += result.ic
    return result