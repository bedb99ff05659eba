"""Command-line front end: compile a source file to assembly or an executable."""

from __future__ import annotations

import os
import re
import subprocess
import sys
import tempfile
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .codegen import Codegen
from .lexer import tokenize
from .parser import parse
from .tokens import Metadata, Program

_USAGE = "Usage: [flags] <filename>.bf"

_HELP = """\
Usage: bf [flags] filename
flags:
    -o <file>              Name output file the name specified in <file>.
    -S                     Only perform compilation. Generates assembly file.
    -a <number>            Set array size of program. Default array size is 30000
    -c <number>            Specify cell size of an array entry by number of bytes. \
Number used must be valid. A list of valid numbers is given below.
                           Valid options: {1, 2, 4, 8}
    -n <number>            Set initial starting index of the array.
    -O                     Enable optimizations
    --help                 Print help message"""

_NUMBER = re.compile(r"\s*([+-]?\d+)")


class UsageError(Exception):
    """Raised when the command line cannot be understood."""


@dataclass
class Options:
    """Parsed command-line options."""

    metadata: Metadata = field(default_factory=Metadata)
    compile_only: bool = False
    optimize: bool = False
    show_help: bool = False


def help_text() -> str:
    """Return the help message."""
    return _HELP


def _to_int(text: str) -> int:
    match = _NUMBER.match(text)
    if match is None:
        raise UsageError(f"Error: Invalid number '{text}'.")
    value = int(match.group(1))
    if value < 0:
        raise UsageError(f"Error: Number must not be negative: '{text}'.")
    return value


def parse_args(argv: Sequence[str]) -> Options:
    """Parse command-line arguments (without the program name)."""
    args = list(argv)
    if not args:
        raise UsageError(_USAGE)

    settings: dict[str, object] = {}
    options = Options()
    unknown = False
    remaining = iter(args)

    def value_of(flag: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise UsageError(f"Error: Flag {flag} needs a value.") from None

    for arg in remaining:
        if not arg.startswith("-"):
            settings["input_file"] = arg
        elif arg == "-o":
            settings["output_file"] = value_of(arg)
        elif arg == "-S":
            options.compile_only = True
        elif arg == "-a":
            settings["array_size"] = _to_int(value_of(arg))
        elif arg == "-c":
            settings["cell_size"] = _to_int(value_of(arg))
        elif arg == "-O":
            options.optimize = True
        elif arg == "--help":
            options.show_help = True
        elif arg == "-n":
            settings["starting_offset"] = _to_int(value_of(arg))
        else:
            unknown = True

    if unknown:
        raise UsageError("Error: Unrecognized flag.")
    options.metadata = Metadata(**settings)
    return options


def build(program: Program, options: Options, workdir: str | os.PathLike[str]) -> Path:
    """Produce the assembly file or the linked executable in ``workdir``.

    Returns the path of what was produced. Failures of the assembler or
    linker raise ``subprocess.CalledProcessError``.
    """
    target_dir = Path(workdir)
    output = program.metadata.output_file
    codegen = Codegen(program)

    if options.compile_only:
        return codegen.write(target_dir / f"{Path(output).name}.s")

    with tempfile.TemporaryDirectory() as tmp:
        base = Path(tmp) / Path(output).name
        asm_path = codegen.write(base.with_name(base.name + ".s"))
        obj_path = base.with_name(base.name + ".o")
        executable = target_dir / output
        subprocess.run(["as", "-o", str(obj_path), str(asm_path)], check=True)
        subprocess.run(["ld", "-o", str(executable), str(obj_path)], check=True)
    return executable


def main(argv: Sequence[str] | None = None) -> int:
    """Run the compiler and return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
    except UsageError as exc:
        print(exc)
        return 1

    if options.show_help:
        print(help_text())
        return 0

    md = options.metadata
    try:
        with open(md.input_file, encoding="latin-1") as source:
            text = source.read()
    except OSError:
        print("Error: Could not find input file.")
        return 1

    program = parse(tokenize(text), md)
    try:
        build(program, options, Path.cwd())
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    except subprocess.CalledProcessError as exc:
        print(f"Error: {exc.cmd[0]} failed with status {exc.returncode}.")
        return 1
    except OSError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())