"""Diagnostics for symbols, instructions and data directives."""

from __future__ import annotations

from dataclasses import dataclass

from .isa import OperandKind, lookup_instruction, is_reserved_word
from .symbols import SymbolTable
from .text import is_letter, is_number_start, next_word

MAX_SYMBOL_LENGTH = 31

_REGISTER_ERROR = "Operand that is not a legal register cannot begin with @."
_INCOMPATIBLE = "the operand is incompatible with the instruction type"


@dataclass(frozen=True)
class Diagnostic:
    """An error found on one source line."""

    line: int
    message: str


def check_symbol(name: str, line_number: int, symbols: SymbolTable) -> list[Diagnostic]:
    """Check a label being declared; return every problem found."""
    found: list[Diagnostic] = []
    if not is_letter(name[:1]):
        found.append(Diagnostic(line_number, f"The symbol {name} does not start with a letter."))
    if len(name) > MAX_SYMBOL_LENGTH:
        found.append(
            Diagnostic(
                line_number,
                f"The symbol {name} is longer then the maximum size of {MAX_SYMBOL_LENGTH}.",
            )
        )
    if is_reserved_word(name):
        found.append(
            Diagnostic(
                line_number,
                f"The word {name} is an assembly key word and can not be used as a symbol. ",
            )
        )
    if name in symbols:
        found.append(Diagnostic(line_number, f"The symbol {name} is already defined."))
    return found


def _classify(word: str, line_number: int, found: list[Diagnostic]) -> OperandKind | None:
    """Return the addressing kind of ``word``; None if absent or a bad register."""
    if not word:
        return None
    if word[0] == "@":
        register = word[2:3]
        if register and "0" <= register <= "7":
            return OperandKind.REGISTER
        found.append(Diagnostic(line_number, _REGISTER_ERROR))
        return None
    if is_number_start(word[0]):
        return OperandKind.IMMEDIATE
    return OperandKind.DIRECT


def check_instruction(line: str, index: int, mnemonic: str, line_number: int) -> list[Diagnostic]:
    """Check an instruction and its operands, read from ``line`` at ``index``."""
    found: list[Diagnostic] = []
    instruction = lookup_instruction(mnemonic)
    if instruction is None:
        return [Diagnostic(line_number, f"the instruction {mnemonic} does not exist.")]

    first_word, index = next_word(line, index)
    if first_word and not (
        is_letter(first_word[0]) or first_word[0] == "@" or is_number_start(first_word[0])
    ):
        found.append(Diagnostic(line_number, "Illegal operand."))
    first = _classify(first_word, line_number, found)

    second_word, index = next_word(line, index)
    second = _classify(second_word, line_number, found)

    if instruction.group == 3 and (first is not None or second is not None):
        found.append(Diagnostic(line_number, "too many operands."))

    if instruction.group == 2:
        if first is None:
            found.append(Diagnostic(line_number, "missing operands."))
        elif second is not None:
            found.append(Diagnostic(line_number, "too many operands."))

    if first is not None and second is None:
        if first not in instruction.destination_operands:
            found.append(Diagnostic(line_number, _INCOMPATIBLE))

    if first is not None and second is not None:
        if first not in instruction.source_operands:
            found.append(Diagnostic(line_number, _INCOMPATIBLE))
        if second not in instruction.destination_operands:
            found.append(Diagnostic(line_number, _INCOMPATIBLE))

    return found


def check_operands_defined(
    line: str, index: int, line_number: int, symbols: SymbolTable
) -> list[Diagnostic]:
    """Report every symbolic operand of an instruction that is not declared."""
    found: list[Diagnostic] = []
    for _ in range(2):
        word, index = next_word(line, index)
        if word and word[0] != "@" and not is_number_start(word[0]) and word not in symbols:
            found.append(Diagnostic(line_number, f"The symbol {word} is not defined."))
    return found


def check_data(line: str, index: int, line_number: int) -> list[Diagnostic]:
    """Check the operand list of a ``.data`` directive."""
    rest = line[index:].lstrip(" \t")
    if rest.startswith(","):
        return [Diagnostic(line_number, "there are too many commas.")]
    return []


def check_string(line: str, index: int, line_number: int) -> list[Diagnostic]:
    """Check that the operand of a ``.string`` directive is quoted."""
    found: list[Diagnostic] = []
    end = len(line)
    while index < end and line[index] in " \t,":
        index += 1
    if index < end and line[index] == '"':
        index += 1
    else:
        found.append(Diagnostic(line_number, 'the string is missing " at the start'))
    closing = line.find('"', index)
    if closing == -1:
        found.append(Diagnostic(line_number, 'the string is missing " at the end'))
    return found