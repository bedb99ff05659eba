"""Brainfuck compiler: lexer, parser, x86-64 assembly generator and the bf command."""

__version__ = "0.1.0"

__all__ = ["__version__"]