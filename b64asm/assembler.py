"""Run both passes over an expanded source and write the output files."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .checks import Diagnostic
from .first_pass import first_pass
from .second_pass import second_pass


@dataclass
class AssemblyOutput:
    """Everything assembling one program yields.

    On errors only ``errors`` is filled.
    """

    object_words: list[str] = field(default_factory=list)
    externals: list[tuple[str, int]] = field(default_factory=list)
    entries: list[tuple[str, int]] = field(default_factory=list)
    errors: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when no error was found."""
        return not self.errors


def assemble(lines: Iterable[str]) -> AssemblyOutput:
    """Assemble the lines of an expanded source."""
    source = list(lines)
    first = first_pass(source)
    second = second_pass(source, first)
    errors = first.errors + second.errors
    if errors:
        return AssemblyOutput(errors=errors)
    return AssemblyOutput(
        object_words=second.object_words,
        externals=second.externals,
        entries=[(symbol.name, symbol.value) for symbol in first.symbols.entries()],
    )


def _write_pairs(path: Path, pairs: list[tuple[str, int]]) -> None:
    with path.open("w", encoding="utf-8") as handle:
        handle.writelines(f"{name} {address}\n" for name, address in pairs)


def assemble_file(base_name: str | Path) -> AssemblyOutput:
    """Assemble ``<base_name>.am`` and write the output files beside it.

    ``.ob`` is always written on success; ``.ext`` and ``.ent`` only when
    there are external uses or entries. Nothing is written on errors.
    """
    with Path(f"{base_name}.am").open(encoding="utf-8") as handle:
        output = assemble(handle.readlines())
    if not output.ok:
        return output

    with Path(f"{base_name}.ob").open("w", encoding="utf-8") as handle:
        handle.writelines(f"{word}\n" for word in output.object_words)
    if output.externals:
        _write_pairs(Path(f"{base_name}.ext"), output.externals)
    if output.entries:
        _write_pairs(Path(f"{base_name}.ent"), output.entries)
    return output