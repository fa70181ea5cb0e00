import pytest

from b64asm.assembler import assemble, assemble_file
from b64asm.checks import Diagnostic

PROGRAM = """MAIN: lea STR, @r2
.extern X
      jmp X
      stop
STR: .string "ab"
.entry MAIN
.entry STR
"""


def test_successful_program():
    output = assemble(PROGRAM.splitlines(keepends=True))
    assert output.ok
    names = [name for name, _ in output.entries]
    assert names == ["MAIN", "STR"]
    code_words = len(output.object_words) - 3
    assert dict(output.entries)["STR"] == 100 + code_words
    assert dict(output.entries)["MAIN"] == 100
    assert [name for name, _ in output.externals] == ["X"]


def test_errors_from_both_passes_in_order():
    output = assemble(["foo\n", ".entry NOPE\n"])
    assert output.errors == [
        Diagnostic(1, "the instruction foo does not exist."),
        Diagnostic(2, "The symbol NOPE is not defined."),
    ]
    assert output.object_words == []
    assert output.entries == []


def test_errors_leave_no_output_words():
    output = assemble(["jmp NOWHERE\n", "stop\n"])
    assert not output.ok
    assert output.object_words == []
    assert output.externals == []


def test_assemble_file_writes_all_files(tmp_path):
    base = tmp_path / "prog"
    (tmp_path / "prog.am").write_text(PROGRAM)
    output = assemble_file(base)
    assert (tmp_path / "prog.ob").read_text().split() == output.object_words
    ext_lines = (tmp_path / "prog.ext").read_text().splitlines()
    assert ext_lines == [f"{name} {address}" for name, address in output.externals]
    ent_lines = (tmp_path / "prog.ent").read_text().splitlines()
    assert ent_lines[0] == "MAIN 100"
    assert len(ent_lines) == 2


def test_assemble_file_skips_optional_files(tmp_path):
    (tmp_path / "plain.am").write_text("stop\n")
    output = assemble_file(tmp_path / "plain")
    assert output.ok
    assert (tmp_path / "plain.ob").read_text().splitlines() == output.object_words
    assert not (tmp_path / "plain.ext").exists()
    assert not (tmp_path / "plain.ent").exists()


def test_assemble_file_writes_nothing_on_error(tmp_path):
    (tmp_path / "bad.am").write_text("foo\n")
    output = assemble_file(tmp_path / "bad")
    assert not output.ok
    assert not (tmp_path / "bad.ob").exists()


def test_assemble_file_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        assemble_file(tmp_path / "absent")