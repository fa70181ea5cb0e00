"""Second pass: resolve operands and produce the encoded object words."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .checks import Diagnostic, check_operands_defined
from .encoding import binary_to_base64, to_binary
from .first_pass import INITIAL_IC, FirstPassResult
from .isa import OperandKind, lookup_instruction
from .symbols import Symbol, SymbolKind, SymbolTable
from .text import is_blank, is_number_start, next_word, parse_unsigned


@dataclass
class SecondPassResult:
    """Encoded program produced by the second pass.

    ``code`` holds the base64 words of the instructions, ``data`` those of
    the data image. ``externals`` lists every use of an external symbol as
    ``(name, address)``.
    """

    code: list[str] = field(default_factory=list)
    data: list[str] = field(default_factory=list)
    externals: list[tuple[str, int]] = field(default_factory=list)
    errors: list[Diagnostic] = field(default_factory=list)
    ic: int = INITIAL_IC

    @property
    def ok(self) -> bool:
        """True when no error was found."""
        return not self.errors

    @property
    def object_words(self) -> list[str]:
        """Code words followed by data words."""
        return self.code + self.data


def _operand_kind(word: str) -> OperandKind:
    if word[:1] == "@":
        return OperandKind.REGISTER
    if is_number_start(word[:1]):
        return OperandKind.IMMEDIATE
    return OperandKind.DIRECT


def _register(word: str) -> int:
    digit = word[2:3]
    return ord(digit) - ord("0") if digit else 0


def _immediate(word: str, line: str, index: int) -> int:
    """Value of an immediate operand; ``index`` is just past the word."""
    if word.startswith("-"):
        return -parse_unsigned(word[1:])
    if line[index : index + 1] == "+":
        return parse_unsigned(word[1:])
    return parse_unsigned(word)


def _emit(result: SecondPassResult, bits: str) -> None:
    result.code.append(binary_to_base64(bits))


def _direct_word(result: SecondPassResult, symbol: Symbol, address: int) -> str:
    bits = to_binary(symbol.value, 10)
    if symbol.kind is SymbolKind.EXTERNAL:
        result.externals.append((symbol.name, address))
        return bits + "01"
    return bits + "10"


def _register_pair(source: int, destination: int) -> str:
    return to_binary(source, 5) + to_binary(destination, 5) + "00"


def _compile_instruction(
    result: SecondPassResult,
    symbols: SymbolTable,
    line: str,
    index: int,
    mnemonic: str,
    head: str,
    line_number: int,
) -> int:
    """Write the words of one instruction; return how many were written."""
    problems = check_operands_defined(line, index, line_number, symbols)
    if problems:
        result.errors.extend(problems)
        return 0

    instruction = lookup_instruction(mnemonic)
    if instruction is None:
        return 0

    _emit(result, head)
    if instruction.group == 3:
        return 1

    first_word, index = next_word(line, index)
    first_kind = _operand_kind(first_word)
    first_register = 0
    if first_kind is OperandKind.REGISTER:
        first_register = _register(first_word)
    elif first_kind is OperandKind.IMMEDIATE:
        _emit(result, to_binary(_immediate(first_word, line, index), 10) + "00")
    else:
        symbol = symbols.get(first_word)
        assert symbol is not None
        _emit(result, _direct_word(result, symbol, result.ic + 1))

    second_word, index = next_word(line, index)
    if not second_word:
        if first_kind is OperandKind.REGISTER:
            _emit(result, _register_pair(0, first_register))
        return 2

    second_kind = _operand_kind(second_word)
    if second_kind is OperandKind.REGISTER:
        second_register = _register(second_word)
        if first_kind is OperandKind.REGISTER:
            _emit(result, _register_pair(first_register, second_register))
            return 2
        _emit(result, _register_pair(0, second_register))
        return 3

    if first_kind is OperandKind.REGISTER:
        _emit(result, to_binary(first_register, 5) + "0000000")

    if second_kind is OperandKind.IMMEDIATE:
        _emit(result, to_binary(_immediate(second_word, line, index), 10) + "00")
    else:
        symbol = symbols.get(second_word)
        assert symbol is not None
        _emit(result, _direct_word(result, symbol, result.ic + 2))
    return 3


def _read_line(
    result: SecondPassResult,
    symbols: SymbolTable,
    heads: Iterator[str],
    line: str,
    line_number: int,
) -> None:
    if is_blank(line) or line.startswith(";"):
        return

    word, index = next_word(line, 0)
    if word.endswith(":"):
        word, index = next_word(line, index)

    if word in (".data", ".string", ".extern"):
        return
    if word == ".entry":
        name, _ = next_word(line, index)
        symbol = symbols.get(name)
        if symbol is None:
            result.errors.append(Diagnostic(line_number, f"The symbol {name} is not defined."))
        else:
            symbol.kind = SymbolKind.ENTRY
        return

    head = next(heads, None)
    if head is None:
        return
    result.ic += _compile_instruction(result, symbols, line, index, word, head, line_number)


def second_pass(lines: Iterable[str], first: FirstPassResult) -> SecondPassResult:
    """Run the second pass over the same lines the first pass read.

    Symbols named by ``.entry`` are marked as entries in ``first.symbols``.
    Only errors found here are collected in the result.
    """
    result = SecondPassResult()
    heads = iter(first.instructions)
    for line_number, line in enumerate(lines, start=1):
        _read_line(result, first.symbols, heads, line, line_number)
    result.data = [binary_to_base64(bits) for bits in first.data]
    return result