"""Symbol table built while assembling."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class SymbolKind(Enum):
    """What a symbol labels."""

    DATA = "d"
    INSTRUCTION = "i"
    EXTERNAL = "n"
    ENTRY = "y"


@dataclass
class Symbol:
    """A named address."""

    name: str
    value: int
    kind: SymbolKind


class SymbolTable:
    """Symbols in the order they were declared.

    A name may be declared more than once; lookups see the first one.
    """

    def __init__(self) -> None:
        self._symbols: list[Symbol] = []
        self._first: dict[str, Symbol] = {}

    def add(self, name: str, value: int, kind: SymbolKind) -> Symbol:
        """Append a symbol and return it."""
        symbol = Symbol(name, value, kind)
        self._symbols.append(symbol)
        self._first.setdefault(name, symbol)
        return symbol

    def get(self, name: str) -> Symbol | None:
        """Return the first symbol called ``name``, or None."""
        return self._first.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._first

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def entries(self) -> list[Symbol]:
        """Return the symbols marked as entries, in declaration order."""
        return [symbol for symbol in self._symbols if symbol.kind is SymbolKind.ENTRY]