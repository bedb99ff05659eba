from bfasm.lexer import tokenize
from bfasm.parser import parse
from bfasm.tokens import Metadata, OpType, Program, Token


def test_metadata_defaults():
    md = Metadata()
    assert md.array_size == 30000
    assert md.cell_size == 1
    assert md.starting_offset == 0
    assert md.output_file == "a.out"
    assert md.input_file == ""


def test_op_type_numbering():
    program = parse(tokenize("><+-.,[]"), Metadata())
    assert [int(op) for op in program.ops] == list(range(8))
    assert program.ops[0] is OpType.RIGHT
    assert program.ops[-1] is OpType.BACK
    assert OpType.UNDEF == 8


def test_token_values_are_source_characters():
    chars = "".join(t.value for t in Token if t is not Token.COMMENT_CHAR)
    assert sorted(chars) == sorted("><+-.,[]")
    assert Token("[") is Token.JUMP_PAST


def test_program_defaults_are_independent():
    a = Program()
    b = Program()
    a.ops.append(OpType.INC)
    a.metadata.array_size = 10
    assert b.ops == []
    assert b.metadata.array_size == Metadata().array_size