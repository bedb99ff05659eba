# bfasm

`bfasm` compiles Brainfuck programs to x86-64 Linux assembly in Intel syntax.
It can then assemble and link that assembly into a standalone executable using
the system `as` and `ld` tools.

## Installation

```
pip install .
```

To produce executables, you need the GNU binutils `as` and `ld` on your `PATH`.
With `-S` you only get assembly, so neither tool is needed.

## Command line

```
bf [flags] filename
```

| Flag          | Meaning                                                              |
|---------------|----------------------------------------------------------------------|
| `-o <file>`   | Name of the output file (default `a.out`).                           |
| `-S`          | Compile only. Writes `<file>.s` to the current directory.            |
| `-a <number>` | Tape size in cells (default 30000).                                  |
| `-c <number>` | Cell size in bytes (default 1). See the limitations below.           |
| `-n <number>` | Starting index on the tape (default 0).                              |
| `-O`          | Accepted, but it has no effect.                                      |
| `--help`      | Print the help message.                                              |

Numeric values must be non-negative integers. If a flag is unknown, a value is
missing, or a number is invalid, the command prints an error and exits with
status 1. It does the same if the input file cannot be read. Without `-S`, the
executable is written to the current directory under the `-o` name, and the
intermediate `.s` and `.o` files are kept in a temporary directory that is
removed afterwards.

Examples:

```
bf -o hello hello.bf      # build the executable ./hello
bf -S -o hello hello.bf   # write ./hello.s only
```

Any character other than the eight Brainfuck commands `> < + - . , [ ]` is
treated as a comment.

## Library use

You can also call the compiler stages from Python:

```python
from bfasm.lexer import tokenize
from bfasm.parser import parse
from bfasm.tokens import Metadata
from bfasm.codegen import generate_assembly

tokens = tokenize("++++++++[>++++++++<-]>+.")
program = parse(tokens, Metadata(output_file="letter"))
print(generate_assembly(program))
```

- `bfasm.tokens` defines:
  - `Token`, the lexical tokens;
  - `OpType`, the program operations, including `UNDEF` for an empty program;
  - `Metadata`, which holds the tape size, cell size, starting offset and file names;
  - `Program`, which holds the metadata and a list of operations.
- `bfasm.lexer` provides `token_for`, `tokenize` and `tokenize_stream`, which turn source text into `Token` values.
- `bfasm.parser` provides `op_for` and `parse`, which build a `Program`. `parse` keeps a copy of the metadata.
- `bfasm.codegen` provides `Codegen` (with `generate` and `write`) and `generate_assembly`, which produce the assembly text. A `]` without a matching `[` raises `ValueError`.
- `bfasm.cli` provides `parse_args` (which returns `Options` or raises `UsageError`), `build`, `help_text` and `main`, which together make up the `bf` command.

## Limitations

- There is no optimization pass. `-O` is parsed and then ignored.
- The cell size only scales the number of bytes reserved for the tape. The
  generated instructions always read, write and modify single bytes, and the
  value given with `-c` is not checked.
- A `[` without a matching `]` is not reported by the compiler. The generated
  assembly then refers to a label that does not exist, and `as` fails.
- Programs are only compiled. There is no interpreter, and only x86-64 Linux
  is targeted.