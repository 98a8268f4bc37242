from __future__ import annotations


class DecodeError(Exception):
    kind = "decode_error"

    def __init__(self, message: str, *, index: int | None = None) -> None:
        self.index = index
        self.detail = str(message)
        prefix = ""
        if index is not None:
            prefix = f"token {index}: "
        super().__init__(prefix + self.detail)


class EndOfInput(DecodeError):
    kind = "end_of_input"


class MalformedInstruction(DecodeError):
    kind = "malformed_instruction"


class MalformedOperand(DecodeError):
    kind = "malformed_operand"
