from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field, model_validator

from wsdecode.errors import DecodeError
from wsdecode.instructions import (
    Family,
    FlowInstruction,
    Instruction,
    StackInstruction,
    format_instruction,
    format_label,
)


class InstructionRecord(BaseModel):
    position: int = Field(ge=0)
    family: Family
    op: str
    number: int | None = None
    label: str | None = None
    text: str

    @model_validator(mode="after")
    def _single_operand(self) -> "InstructionRecord":
        if self.number is not None and self.label is not None:
            raise ValueError("an instruction carries at most one operand")
        return self


class DecodeReport(BaseModel):
    source: str | None = None
    token_count: int = Field(ge=0)
    instruction_count: int = Field(ge=0)
    instructions: list[InstructionRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def _count_matches(self) -> "DecodeReport":
        if self.instruction_count != len(self.instructions):
            raise ValueError("instruction_count does not match instructions")
        return self


class DecodeFailure(BaseModel):
    source: str | None = None
    kind: str
    message: str
    index: int | None = Field(default=None, ge=0)


def instruction_record(
    instr: Instruction, *, position: int, blank: str = ".", tab: str = "-"
) -> InstructionRecord:
    number = instr.number if isinstance(instr, StackInstruction) else None
    label = None
    if isinstance(instr, FlowInstruction) and instr.label is not None:
        label = format_label(instr.label, blank=blank, tab=tab)
    return InstructionRecord(
        position=position,
        family=instr.family,
        op=instr.op.value,
        number=number,
        label=label,
        text=format_instruction(instr, blank=blank, tab=tab),
    )


def build_report(
    instructions: Sequence[Instruction],
    *,
    token_count: int,
    source: str | None = None,
    blank: str = ".",
    tab: str = "-",
) -> DecodeReport:
    records = [
        instruction_record(instr, position=i, blank=blank, tab=tab)
        for i, instr in enumerate(instructions)
    ]
    return DecodeReport(
        source=source,
        token_count=token_count,
        instruction_count=len(records),
        instructions=records,
    )


def failure_from_error(err: DecodeError, *, source: str | None = None) -> DecodeFailure:
    return DecodeFailure(source=source, kind=err.kind, message=err.detail, index=err.index)
