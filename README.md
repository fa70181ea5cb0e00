# b64asm

A two-pass assembler for a small 12-bit machine. A source file first goes
through a macro pre-assembler. It is then assembled into machine words,
and each word is written in base64 as two characters.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
b64asm prog1 prog2
```

Each argument is a base name with no extension. For each name the command:

1. reads `NAME.as`, expands its `mcro` / `endmcro` blocks and writes
   `NAME.am`;
2. assembles `NAME.am` in two passes;
3. on success, writes
   - `NAME.ob`: the instruction words and then the data words, one base64
     pair per line;
   - `NAME.ext`: one line for each use of an external symbol, with the name
     and the address where it is used. This file is written only when such
     uses exist;
   - `NAME.ent`: one line for each symbol declared with `.entry`, with the
     name and its address. This file is written only when there are
     entries.

   It then prints `The file NAME compiled successfully!`.

If `NAME.as` does not exist, the command prints
`Error: The file NAME.as does not exist` and goes on to the next name.

If the source has errors, the command lists them as
`Error in line N: message`. In that case `NAME.am` is still written, but
`.ob`, `.ext` and `.ent` are not. The command always exits with status 0.

## Source language

```
; comment
MAIN:   mov @r3, LENGTH
        lea STR, @r6
        prn -5
        jmp END
STR:    .string "abcd"
LENGTH: .data 6, -9, 15
        .extern W
        .entry MAIN
END:    stop
```

- A line that starts with `;` is a comment. Blank lines are ignored.
- A label ends with `:`. It must start with a letter, be at most 31
  characters long, not be a mnemonic or a directive name, and be declared
  only once.
- An operand is one of:
  - an immediate number, such as `5`, `-3` or `+7`;
  - a symbol;
  - a register written `@r0` to `@r7`. Only the third character, the digit,
    is checked.
- Operands are separated by spaces, tabs or commas.
- Directives are `.data`, `.string`, `.extern` and `.entry`.
- Instructions are `mov cmp add sub not clr lea inc dec jmp bne red prn jsr rts stop`.
  Each instruction takes the number of operands and the addressing kinds
  given in `b64asm.isa.INSTRUCTIONS`.
- Macros are defined with `mcro NAME` … `endmcro`. A line whose first word
  is the name of a macro is replaced by the body of that macro.

Instructions are placed from address 100. Data follows the code, so the
address of a data symbol is its offset plus the final instruction counter.

## Library use

```python
from b64asm.preassembler import expand_macros
from b64asm.assembler import assemble

with open("prog.as") as source:
    lines = expand_macros(source)

output = assemble(lines)
if output.ok:
    print(output.object_words)   # base64 words: code first, then data
    print(output.externals)      # [(name, address), ...]
    print(output.entries)        # [(name, address), ...]
else:
    for error in output.errors:
        print(error.line, error.message)
```

The other entry points are:

- `b64asm.preassembler.preassemble(base_name)`: expands `base_name.as`
  into `base_name.am` and returns the path it wrote. It raises
  `FileNotFoundError` if the source file does not exist.
- `b64asm.assembler.assemble_file(base_name)`: assembles `base_name.am` and
  writes the output files next to it, in the same way as the command.
- `b64asm.first_pass.first_pass(lines)` and
  `b64asm.second_pass.second_pass(lines, first)`: run the two passes
  separately.
- `b64asm.encoding`: `to_binary`, `bits_to_int` and `binary_to_base64`, the
  helpers that encode words.

## What it does not do

The package only produces the object, entry and external files. It has no
linker, no loader and no simulator for the machine, so nothing it builds
can be run from here.