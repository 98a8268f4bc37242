from __future__ import annotations

from wsdecode.api import decode_source, format_source, report_source
from wsdecode.errors import DecodeError, EndOfInput, MalformedInstruction, MalformedOperand

__all__ = [
    "DecodeError",
    "EndOfInput",
    "MalformedInstruction",
    "MalformedOperand",
    "decode_source",
    "format_source",
    "report_source",
]
