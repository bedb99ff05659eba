"""Generate x86-64 Linux assembly (Intel syntax) from a program."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from .tokens import OpType, Program

_SIMPLE = {
    OpType.RIGHT: "\tinc rbx\n",
    OpType.LEFT: "\tdec rbx\n",
    OpType.INC: "\tinc BYTE PTR[tape + rbx]\n",
    OpType.DEC: "\tdec BYTE PTR[tape + rbx]\n",
    OpType.OUT: (
        "\tmov rax, 1\n"
        "\tmov rdi, 1\n"
        "\tlea rsi, BYTE PTR[tape + rbx]\n"
        "\tmov rdx, 1\n"
        "\tsyscall\n"
    ),
    OpType.IN: (
        "\tmov rax, 0\n"
        "\tmov rdi, 0\n"
        "\tlea rsi, BYTE PTR[tape + rbx]\n"
        "\tmov rdx, 1\n"
        "\tsyscall\n"
    ),
    OpType.UNDEF: "",
}

_EPILOGUE = "\tmov rax, 60\n\tmov rdi, 0\n\tsyscall\n"


class Codegen:
    """Assembly generator for one program."""

    def __init__(self, program: Program) -> None:
        self.program = program

    def _prologue(self) -> str:
        md = self.program.metadata
        return (
            ".intel_syntax noprefix\n\n"
            ".section .bss\n"
            "tape:\n"
            f"\t.space {md.array_size * md.cell_size}\n\n"
            ".section .text\n"
            ".global _start\n"
            "_start:\n"
            f"\tmov rbx, {md.starting_offset}\n\n"
            "main:\n"
        )

    def _body(self) -> Iterator[str]:
        open_labels: list[int] = []
        next_label = 0
        for op in self.program.ops:
            if op is OpType.PAST:
                yield (
                    "\tcmp BYTE PTR[tape + rbx], 0\n"
                    f"\tjz e{next_label}\n"
                    f"\nl{next_label}:\n"
                )
                open_labels.append(next_label)
                next_label += 1
            elif op is OpType.BACK:
                if not open_labels:
                    raise ValueError("']' without matching '['")
                label = open_labels.pop()
                yield (
                    "\tcmp BYTE PTR[tape + rbx], 0\n"
                    f"\tjnz l{label}\n"
                    f"\ne{label}:\n"
                )
            else:
                yield _SIMPLE[op]

    def generate(self) -> str:
        """Return the complete assembly text."""
        return self._prologue() + "".join(self._body()) + _EPILOGUE

    def write(self, path: str | os.PathLike[str]) -> Path:
        """Write the assembly to ``path`` and return the path."""
        target = Path(path)
        target.write_text(self.generate())
        return target


def generate_assembly(program: Program) -> str:
    """Return the assembly text for ``program``."""
    return Codegen(program).generate()