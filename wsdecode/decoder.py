from __future__ import annotations

from collections.abc import Iterable

from wsdecode.errors import EndOfInput, MalformedInstruction, MalformedOperand
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
from wsdecode.tokens import Label, Token, tokenize


class TokenStream:
    """Forward-only cursor over a filtered token sequence.

    The cursor never moves backward; every read consumes at least one
    position. A stream is owned by a single decoding pass.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = tuple(tokens)
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    @property
    def at_end(self) -> bool:
        return self._index >= len(self._tokens)

    def next_token(self) -> Token:
        if self.at_end:
            raise EndOfInput("unexpected end of input", index=self._index)
        tok = self._tokens[self._index]
        self._index += 1
        return tok

    def read_until_terminator(self) -> list[Token]:
        """Collect tokens up to the next TERMINATOR and step past it.

        A run that reaches the end of input without a TERMINATOR is accepted:
        the whole remainder is returned and the cursor is left one past the
        end, as though the missing terminator had been consumed.
        """
        start = end = self._index
        while end < len(self._tokens) and self._tokens[end] is not Token.TERMINATOR:
            end += 1
        self._index = end + 1
        return list(self._tokens[start:end])


def read_number(stream: TokenStream) -> int:
    sign_at = stream.index
    sign_tok = stream.next_token()
    if sign_tok is Token.BLANK:
        sign = 1
    elif sign_tok is Token.TAB:
        sign = -1
    else:
        raise MalformedOperand("number is missing its sign", index=sign_at)

    magnitude = 0
    for digit in stream.read_until_terminator():
        magnitude = magnitude * 2 + (1 if digit is Token.TAB else 0)
    return sign * magnitude


def read_label(stream: TokenStream) -> Label:
    return tuple(stream.read_until_terminator())


def _invalid(family: str, stream: TokenStream) -> MalformedInstruction:
    return MalformedInstruction(f"invalid {family} instruction", index=stream.index - 1)


def decode_stack(stream: TokenStream) -> StackInstruction:
    tok = stream.next_token()
    if tok is Token.BLANK:
        return StackInstruction(StackOp.PUSH, read_number(stream))
    if tok is Token.TAB:
        tok = stream.next_token()
        if tok is Token.BLANK:
            return StackInstruction(StackOp.DUPLICATE_NTH, read_number(stream))
        if tok is Token.TERMINATOR:
            return StackInstruction(StackOp.DISCARD_TOP_N, read_number(stream))
        raise _invalid("stack", stream)
    tok = stream.next_token()
    if tok is Token.BLANK:
        return StackInstruction(StackOp.DUPLICATE)
    if tok is Token.TERMINATOR:
        return StackInstruction(StackOp.DISCARD)
    return StackInstruction(StackOp.SWAP)


_ARITH = {
    (Token.BLANK, Token.BLANK): ArithOp.ADD,
    (Token.BLANK, Token.TAB): ArithOp.SUBTRACT,
    (Token.BLANK, Token.TERMINATOR): ArithOp.MULTIPLY,
    (Token.TAB, Token.BLANK): ArithOp.DIVIDE,
    (Token.TAB, Token.TAB): ArithOp.MODULO,
}

_IO = {
    (Token.BLANK, Token.BLANK): IOOp.PRINT_CHAR,
    (Token.BLANK, Token.TAB): IOOp.PRINT_NUM,
    (Token.TAB, Token.BLANK): IOOp.READ_CHAR,
    (Token.TAB, Token.TAB): IOOp.READ_NUM,
}


def decode_arith(stream: TokenStream) -> ArithInstruction:
    first = stream.next_token()
    if first is Token.TERMINATOR:
        raise _invalid("arithmetic", stream)
    op = _ARITH.get((first, stream.next_token()))
    if op is None:
        raise _invalid("arithmetic", stream)
    return ArithInstruction(op)


def decode_heap(stream: TokenStream) -> HeapInstruction:
    tok = stream.next_token()
    if tok is Token.BLANK:
        return HeapInstruction(HeapOp.STORE_AT)
    if tok is Token.TAB:
        return HeapInstruction(HeapOp.STORE_AT_STACK)
    raise _invalid("heap", stream)


def decode_io(stream: TokenStream) -> IOInstruction:
    first = stream.next_token()
    if first is Token.TERMINATOR:
        raise _invalid("io", stream)
    op = _IO.get((first, stream.next_token()))
    if op is None:
        raise _invalid("io", stream)
    return IOInstruction(op)


def decode_flow(stream: TokenStream) -> FlowInstruction:
    tok = stream.next_token()
    if tok is Token.BLANK:
        tok = stream.next_token()
        if tok is Token.BLANK:
            return FlowInstruction(FlowOp.MARK, read_label(stream))
        if tok is Token.TAB:
            return FlowInstruction(FlowOp.CALL, read_label(stream))
        return FlowInstruction(FlowOp.JUMP, read_label(stream))
    if tok is Token.TAB:
        tok = stream.next_token()
        if tok is Token.BLANK:
            return FlowInstruction(FlowOp.BRANCH_ZERO, read_label(stream))
        if tok is Token.TAB:
            return FlowInstruction(FlowOp.BRANCH_LT, read_label(stream))
        return FlowInstruction(FlowOp.RETURN)
    if stream.next_token() is Token.TERMINATOR:
        return FlowInstruction(FlowOp.EXIT)
    raise _invalid("flow", stream)


def decode_instruction(stream: TokenStream) -> Instruction:
    """Decode one instruction starting at the cursor.

    Raises :class:`EndOfInput` if the stream is already exhausted; callers that
    treat that as a clean end of program must check ``stream.at_end`` first.
    """
    tok = stream.next_token()
    if tok is Token.BLANK:
        return decode_stack(stream)
    if tok is Token.TERMINATOR:
        return decode_flow(stream)
    tok = stream.next_token()
    if tok is Token.BLANK:
        return decode_arith(stream)
    if tok is Token.TAB:
        return decode_heap(stream)
    return decode_io(stream)


def decode_tokens(tokens: Iterable[Token]) -> list[Instruction]:
    stream = TokenStream(tokens)
    instructions: list[Instruction] = []
    # Running out between instructions ends the program; a missing Exit is fine.
    while not stream.at_end:
        instructions.append(decode_instruction(stream))
    return instructions


def decode(src: str) -> list[Instruction]:
    return decode_tokens(tokenize(src))
