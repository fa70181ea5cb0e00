"""Macro expansion of ``.as`` sources into ``.am`` files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .text import next_word


def expand_macros(lines: Iterable[str]) -> list[str]:
    """Expand ``mcro``/``endmcro`` definitions and their uses.

    A line whose first word names a macro is replaced by the macro's body.
    Definition lines are dropped. A name defined twice keeps its first body,
    with the second body appended to it.
    """
    macros: dict[str, list[str]] = {}
    current: list[str] | None = None
    output: list[str] = []

    for line in lines:
        word, index = next_word(line, 0)
        if word in macros:
            output.extend(macros[word])
        elif word == "endmcro":
            current = None
        elif current is not None:
            current.append(line)
        elif word == "mcro":
            name, _ = next_word(line, index)
            current = macros.setdefault(name, [])
        else:
            output.append(line)
    return output


def preassemble(base_name: str | Path) -> Path:
    """Expand ``<base_name>.as`` into ``<base_name>.am`` and return its path.

    Raises FileNotFoundError if the source file does not exist.
    """
    source = Path(f"{base_name}.as")
    target = Path(f"{base_name}.am")
    try:
        with source.open(encoding="utf-8") as handle:
            lines = handle.readlines()
    except FileNotFoundError as error:
        raise FileNotFoundError(f"The file {source} does not exist") from error
    with target.open("w", encoding="utf-8") as handle:
        handle.writelines(expand_macros(lines))
    return target