from __future__ import annotations

import pytest

from wsdecode.decoder import decode, decode_tokens
from wsdecode.encoder import encode_label, encode_number, encode_program, to_source
from wsdecode.instructions import (
    ArithInstruction,
    ArithOp,
    FlowInstruction,
    FlowOp,
    HeapInstruction,
    HeapOp,
    IOInstruction,
    IOOp,
    StackInstruction,
    StackOp,
)
from wsdecode.tokens import Token

S, T, L = Token.BLANK, Token.TAB, Token.TERMINATOR


def test_encode_number_is_minimal_big_endian() -> None:
    assert encode_number(0) == [S, L]
    assert encode_number(6) == [S, T, T, S, L]
    assert encode_number(-1) == [T, T, L]


def test_encode_label_rejects_terminator() -> None:
    with pytest.raises(ValueError):
        encode_label((S, L, T))


def test_program_survives_encode_and_decode() -> None:
    program = [
        FlowInstruction(FlowOp.MARK, (S, T, S)),
        FlowInstruction(FlowOp.MARK, (S, T)),
        StackInstruction(StackOp.PUSH, 72),
        StackInstruction(StackOp.PUSH, -1025),
        StackInstruction(StackOp.DUPLICATE_NTH, 2),
        StackInstruction(StackOp.DISCARD_TOP_N, 0),
        StackInstruction(StackOp.DUPLICATE),
        StackInstruction(StackOp.SWAP),
        StackInstruction(StackOp.DISCARD),
        ArithInstruction(ArithOp.ADD),
        ArithInstruction(ArithOp.SUBTRACT),
        ArithInstruction(ArithOp.MULTIPLY),
        ArithInstruction(ArithOp.DIVIDE),
        ArithInstruction(ArithOp.MODULO),
        HeapInstruction(HeapOp.STORE_AT),
        HeapInstruction(HeapOp.STORE_AT_STACK),
        IOInstruction(IOOp.PRINT_CHAR),
        IOInstruction(IOOp.PRINT_NUM),
        IOInstruction(IOOp.READ_CHAR),
        IOInstruction(IOOp.READ_NUM),
        FlowInstruction(FlowOp.CALL, ()),
        FlowInstruction(FlowOp.JUMP, (T, T)),
        FlowInstruction(FlowOp.BRANCH_ZERO, (S,)),
        FlowInstruction(FlowOp.BRANCH_LT, (T, S, T)),
        FlowInstruction(FlowOp.RETURN),
        FlowInstruction(FlowOp.EXIT),
    ]
    tokens = encode_program(program)
    assert decode_tokens(tokens) == program
    assert decode(to_source(tokens)) == program


def test_large_numbers_do_not_overflow() -> None:
    program = [StackInstruction(StackOp.PUSH, 2**80 + 3)]
    assert decode_tokens(encode_program(program)) == program
