import pytest

from b64asm.isa import (
    INSTRUCTIONS,
    Instruction,
    OperandKind,
    is_reserved_word,
    lookup_instruction,
)

MNEMONICS = [
    "mov", "cmp", "add", "sub", "not", "clr", "lea", "inc",
    "dec", "jmp", "bne", "red", "prn", "jsr", "rts", "stop",
]

SINGLE_OPERAND = ["not", "clr", "inc", "dec", "jmp", "bne", "red", "prn", "jsr"]


def test_opcodes_follow_table_order():
    assert [lookup_instruction(name).opcode for name in MNEMONICS] == list(range(16))


@pytest.mark.parametrize("name", MNEMONICS)
def test_lookup_returns_matching_name(name):
    assert lookup_instruction(name).name == name


@pytest.mark.parametrize("instruction", INSTRUCTIONS, ids=lambda i: i.name)
def test_lookup_finds_every_instruction(instruction):
    assert lookup_instruction(instruction.name) is instruction


def test_lookup_known_opcodes():
    assert lookup_instruction("mov").opcode == 0
    assert lookup_instruction("stop").opcode == 15


@pytest.mark.parametrize("name", ["MOV", "move", "", ".data", "mcro"])
def test_lookup_unknown_returns_none(name):
    assert lookup_instruction(name) is None


@pytest.mark.parametrize("name", ["rts", "stop"])
def test_operandless_instructions(name):
    instruction = lookup_instruction(name)
    assert instruction.group == 3
    assert not instruction.source_operands
    assert not instruction.destination_operands


@pytest.mark.parametrize("name", SINGLE_OPERAND)
def test_single_operand_instructions_have_no_source(name):
    instruction = lookup_instruction(name)
    assert instruction.group == 2
    assert not instruction.source_operands
    assert instruction.destination_operands


def test_lea_source_must_be_direct():
    assert lookup_instruction("lea").source_operands == frozenset({OperandKind.DIRECT})


def test_immediate_destination_only_for_cmp_and_prn():
    allowed = {
        name
        for name in MNEMONICS
        if OperandKind.IMMEDIATE in lookup_instruction(name).destination_operands
    }
    assert allowed == {"cmp", "prn"}


def test_instruction_is_immutable():
    instruction = lookup_instruction("mov")
    with pytest.raises(AttributeError):
        instruction.opcode = 3
    assert lookup_instruction("mov").opcode == 0


def test_instruction_equality_by_value():
    mov = lookup_instruction("mov")
    copy = Instruction(
        mov.name, mov.opcode, mov.group, mov.source_operands, mov.destination_operands
    )
    assert copy == mov


@pytest.mark.parametrize(
    "word",
    MNEMONICS + ["data", "string", "extern", "entry"],
)
def test_reserved_words(word):
    assert is_reserved_word(word) is True


@pytest.mark.parametrize("word", [".data", ".entry", "LOOP", "mcro", "endmcro", "Mov"])
def test_unreserved_words(word):
    assert is_reserved_word(word) is False