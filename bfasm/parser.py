"""Build a program from a list of tokens."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from .tokens import Metadata, OpType, Program, Token

_OPS = {
    Token.MOVE_RIGHT: OpType.RIGHT,
    Token.MOVE_LEFT: OpType.LEFT,
    Token.INCREMENT: OpType.INC,
    Token.DECREMENT: OpType.DEC,
    Token.OUTPUT: OpType.OUT,
    Token.INPUT: OpType.IN,
    Token.JUMP_PAST: OpType.PAST,
    Token.JUMP_BACK: OpType.BACK,
}


def op_for(token: Token) -> OpType:
    """Return the operation for a token; comment tokens have none."""
    try:
        return _OPS[token]
    except KeyError:
        raise ValueError(f"token {token!r} has no operation") from None


def parse(tokens: Iterable[Token], metadata: Metadata) -> Program:
    """Return a program holding a copy of ``metadata`` and the tokens' operations.

    An empty token stream yields a single undefined operation.
    """
    ops = [op_for(tok) for tok in tokens] or [OpType.UNDEF]
    return Program(metadata=replace(metadata), ops=ops)