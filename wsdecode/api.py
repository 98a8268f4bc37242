from __future__ import annotations

from wsdecode.config import DecoderSettings
from wsdecode.decoder import decode_tokens
from wsdecode.instructions import Instruction, format_instruction
from wsdecode.schemas import DecodeReport, build_report
from wsdecode.tokens import tokenize


def decode_source(*, src: str) -> list[Instruction]:
    return decode_tokens(tokenize(src))


def format_source(*, src: str, settings: DecoderSettings | None = None) -> list[str]:
    settings = settings or DecoderSettings()
    return [
        format_instruction(instr, blank=settings.label_blank, tab=settings.label_tab)
        for instr in decode_source(src=src)
    ]


def report_source(
    *, src: str, source: str | None = None, settings: DecoderSettings | None = None
) -> DecodeReport:
    settings = settings or DecoderSettings()
    tokens = tokenize(src)
    return build_report(
        decode_tokens(tokens),
        token_count=len(tokens),
        source=source,
        blank=settings.label_blank,
        tab=settings.label_tab,
    )
