from __future__ import annotations

from collections.abc import Iterable

from wsdecode.instructions import (
    ArithInstruction,
    ArithOp,
    FlowInstruction,
    FlowOp,
    HeapInstruction,
    HeapOp,
    Instruction,
    IOInstruction,
    IOOp,
    StackInstruction,
    StackOp,
)
from wsdecode.tokens import Label, Token

S, T, L = Token.BLANK, Token.TAB, Token.TERMINATOR

_STACK_PREFIX: dict[StackOp, tuple[Token, ...]] = {
    StackOp.PUSH: (S, S),
    StackOp.DUPLICATE_NTH: (S, T, S),
    StackOp.DISCARD_TOP_N: (S, T, L),
    StackOp.DUPLICATE: (S, L, S),
    StackOp.SWAP: (S, L, T),
    StackOp.DISCARD: (S, L, L),
}

_ARITH_PREFIX: dict[ArithOp, tuple[Token, ...]] = {
    ArithOp.ADD: (T, S, S, S),
    ArithOp.SUBTRACT: (T, S, S, T),
    ArithOp.MULTIPLY: (T, S, S, L),
    ArithOp.DIVIDE: (T, S, T, S),
    ArithOp.MODULO: (T, S, T, T),
}

_HEAP_PREFIX: dict[HeapOp, tuple[Token, ...]] = {
    HeapOp.STORE_AT: (T, T, S),
    HeapOp.STORE_AT_STACK: (T, T, T),
}

_IO_PREFIX: dict[IOOp, tuple[Token, ...]] = {
    IOOp.PRINT_CHAR: (T, L, S, S),
    IOOp.PRINT_NUM: (T, L, S, T),
    IOOp.READ_CHAR: (T, L, T, S),
    IOOp.READ_NUM: (T, L, T, T),
}

_FLOW_PREFIX: dict[FlowOp, tuple[Token, ...]] = {
    FlowOp.MARK: (L, S, S),
    FlowOp.CALL: (L, S, T),
    FlowOp.JUMP: (L, S, L),
    FlowOp.BRANCH_ZERO: (L, T, S),
    FlowOp.BRANCH_LT: (L, T, T),
    FlowOp.RETURN: (L, T, L),
    FlowOp.EXIT: (L, L, L),
}


def encode_number(value: int) -> list[Token]:
    out = [T if value < 0 else S]
    magnitude = abs(value)
    if magnitude:
        out.extend(T if bit == "1" else S for bit in format(magnitude, "b"))
    out.append(L)
    return out


def encode_label(label: Label) -> list[Token]:
    if L in label:
        raise ValueError("label may only contain BLANK and TAB tokens")
    return [*label, L]


def encode_instruction(instr: Instruction) -> list[Token]:
    if isinstance(instr, StackInstruction):
        out = list(_STACK_PREFIX[instr.op])
        if instr.number is not None:
            out.extend(encode_number(instr.number))
        return out
    if isinstance(instr, ArithInstruction):
        return list(_ARITH_PREFIX[instr.op])
    if isinstance(instr, HeapInstruction):
        return list(_HEAP_PREFIX[instr.op])
    if isinstance(instr, IOInstruction):
        return list(_IO_PREFIX[instr.op])
    if isinstance(instr, FlowInstruction):
        out = list(_FLOW_PREFIX[instr.op])
        if instr.label is not None:
            out.extend(encode_label(instr.label))
        return out
    raise TypeError(f"unknown instruction: {type(instr).__name__}")


def encode_program(instructions: Iterable[Instruction]) -> list[Token]:
    out: list[Token] = []
    for instr in instructions:
        out.extend(encode_instruction(instr))
    return out


def to_source(tokens: Iterable[Token]) -> str:
    return "".join(t.value for t in tokens)
