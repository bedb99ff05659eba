import pytest

from bfasm.parser import op_for, parse
from bfasm.tokens import Metadata, OpType, Token


def test_all_valid_tokens():
    md = Metadata(array_size=30000, cell_size=1, starting_offset=0, output_file="program")
    tokens = [
        Token.JUMP_PAST,
        Token.INPUT,
        Token.INCREMENT,
        Token.DECREMENT,
        Token.MOVE_LEFT,
        Token.MOVE_RIGHT,
        Token.OUTPUT,
        Token.JUMP_BACK,
    ]
    program = parse(tokens, md)
    assert program.metadata.array_size == 30000
    assert program.metadata.cell_size == 1
    assert program.metadata.starting_offset == 0
    assert program.ops == [
        OpType.PAST,
        OpType.IN,
        OpType.INC,
        OpType.DEC,
        OpType.LEFT,
        OpType.RIGHT,
        OpType.OUT,
        OpType.BACK,
    ]
    assert len(program.ops) == 8


def test_empty_file():
    md = Metadata(array_size=15000, cell_size=2, starting_offset=3, output_file="asdf")
    program = parse([], md)
    assert program.metadata.array_size == 15000
    assert program.metadata.cell_size == 2
    assert program.metadata.starting_offset == 3
    assert program.metadata.output_file == "asdf"
    assert program.ops == [OpType.UNDEF]


def test_metadata_is_copied():
    md = Metadata(output_file="first")
    program = parse([Token.INCREMENT], md)
    md.output_file = "second"
    assert program.metadata.output_file == "first"


def test_comment_token_has_no_operation():
    with pytest.raises(ValueError):
        op_for(Token.COMMENT_CHAR)
    with pytest.raises(ValueError):
        parse([Token.INCREMENT, Token.COMMENT_CHAR], Metadata())


def test_op_for_maps_jumps():
    assert op_for(Token.JUMP_PAST) is OpType.PAST
    assert op_for(Token.JUMP_BACK) is OpType.BACK