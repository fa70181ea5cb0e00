"""Command line entry: expand macros and assemble each named program."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .assembler import assemble_file
from .preassembler import preassemble


def main(argv: Sequence[str] | None = None) -> int:
    """Assemble every base name given; always returns 0."""
    names = sys.argv[1:] if argv is None else list(argv)
    for name in names:
        try:
            preassemble(name)
        except FileNotFoundError:
            print(f"Error: The file {name}.as does not exist")
            continue

        output = assemble_file(name)
        if output.ok:
            print(f"\nThe file {name} compiled successfully!")
        else:
            print(f"\nCompilation errors in the file {name}:\n")
            for error in output.errors:
                print(f"Error in line {error.line}: {error.message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())