from __future__ import annotations

import pytest

from wsdecode import DecodeError, EndOfInput, MalformedInstruction, MalformedOperand, decode_source


def test_error_message_carries_token_index() -> None:
    with pytest.raises(MalformedInstruction) as exc:
        decode_source(src=" \t\t")
    assert exc.value.index == 2
    assert str(exc.value).startswith("token 2: ")
    assert exc.value.detail == "invalid stack instruction"


def test_error_kinds_share_a_base() -> None:
    for cls in (EndOfInput, MalformedInstruction, MalformedOperand):
        assert issubclass(cls, DecodeError)
    assert {EndOfInput.kind, MalformedInstruction.kind, MalformedOperand.kind} == {
        "end_of_input",
        "malformed_instruction",
        "malformed_operand",
    }


def test_error_without_index() -> None:
    err = DecodeError("boom")
    assert err.index is None
    assert str(err) == "boom"


def test_missing_sign_is_malformed_operand() -> None:
    with pytest.raises(MalformedOperand, match="token 2: number is missing its sign"):
        decode_source(src="  \n")
