"""Turn source text into a list of tokens."""

from __future__ import annotations

from typing import TextIO

from .tokens import Token

_TOKENS = {t.value: t for t in Token if t is not Token.COMMENT_CHAR}


def token_for(char: str) -> Token:
    """Return the token for a single character; anything unknown is a comment."""
    return _TOKENS.get(char, Token.COMMENT_CHAR)


def tokenize(text: str) -> list[Token]:
    """Return the tokens of ``text``, dropping comment characters."""
    return [tok for tok in map(token_for, text) if tok is not Token.COMMENT_CHAR]


def tokenize_stream(stream: TextIO) -> list[Token]:
    """Read a text stream to its end and tokenize it."""
    return tokenize(stream.read())