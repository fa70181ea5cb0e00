import pytest

from b64asm.symbols import Symbol, SymbolKind, SymbolTable


@pytest.fixture
def table():
    symbols = SymbolTable()
    symbols.add("MAIN", 100, SymbolKind.INSTRUCTION)
    symbols.add("STR", 0, SymbolKind.DATA)
    symbols.add("W", 0, SymbolKind.EXTERNAL)
    return symbols


@pytest.mark.parametrize(
    "code, kind",
    [
        ("d", SymbolKind.DATA),
        ("i", SymbolKind.INSTRUCTION),
        ("n", SymbolKind.EXTERNAL),
        ("y", SymbolKind.ENTRY),
    ],
)
def test_kind_codes(code, kind):
    symbols = SymbolTable()
    symbols.add("A", 0, SymbolKind(code))
    assert symbols.get("A").kind is kind
    assert symbols.get("A").kind.value == code


def test_add_returns_symbol(table):
    symbol = table.add("LOOP", 104, SymbolKind.INSTRUCTION)
    assert symbol == Symbol("LOOP", 104, SymbolKind.INSTRUCTION)
    assert table.get("LOOP") is symbol


def test_get_and_contains(table):
    assert table.get("STR") == Symbol("STR", 0, SymbolKind.DATA)
    assert "W" in table
    assert "X" not in table
    assert table.get("X") is None


def test_len_and_order(table):
    assert len(table) == 3
    assert [symbol.name for symbol in table] == ["MAIN", "STR", "W"]


def test_empty_table():
    symbols = SymbolTable()
    assert len(symbols) == 0
    assert list(symbols) == []
    assert symbols.entries() == []
    assert "A" not in symbols


def test_duplicates_are_kept_and_first_wins(table):
    table.add("W", 0, SymbolKind.EXTERNAL)
    table.add("MAIN", 200, SymbolKind.DATA)
    assert len(table) == 5
    assert table.get("MAIN").value == 100
    assert table.get("MAIN").kind is SymbolKind.INSTRUCTION


def test_entries_follow_kind_changes(table):
    assert table.entries() == []
    table.get("MAIN").kind = SymbolKind.ENTRY
    table.get("STR").kind = SymbolKind.ENTRY
    assert [symbol.name for symbol in table.entries()] == ["MAIN", "STR"]


def test_values_can_be_relocated(table):
    for symbol in table:
        if symbol.kind is SymbolKind.DATA:
            symbol.value += 107
    assert table.get("STR").value == 107
    assert table.get("MAIN").value == 100


def test_lookup_is_case_sensitive(table):
    assert "main" not in table
    assert table.get("Main") is None