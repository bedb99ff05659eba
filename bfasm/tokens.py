"""Tokens, operations and program metadata shared by the compiler stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

DEFAULT_ARRAY_SIZE = 30000
DEFAULT_CELL_SIZE = 1
DEFAULT_OFFSET = 0
DEFAULT_OUTFILENAME = "a.out"


class Token(Enum):
    """Lexical tokens of the source language."""

    MOVE_RIGHT = ">"
    MOVE_LEFT = "<"
    INCREMENT = "+"
    DECREMENT = "-"
    OUTPUT = "."
    INPUT = ","
    JUMP_PAST = "["
    JUMP_BACK = "]"
    COMMENT_CHAR = ""


class OpType(IntEnum):
    """Operations of the program tree."""

    RIGHT = 0
    LEFT = 1
    INC = 2
    DEC = 3
    OUT = 4
    IN = 5
    PAST = 6
    BACK = 7
    UNDEF = 8


@dataclass
class Metadata:
    """Settings that shape the generated program."""

    array_size: int = DEFAULT_ARRAY_SIZE
    cell_size: int = DEFAULT_CELL_SIZE
    starting_offset: int = DEFAULT_OFFSET
    arch: int = 0
    output_file: str = DEFAULT_OUTFILENAME
    input_file: str = ""


@dataclass
class Program:
    """A parsed program: its metadata and its operations in order."""

    metadata: Metadata = field(default_factory=Metadata)
    ops: list[OpType] = field(default_factory=list)