from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from wsdecode.tokens import Label, Token


class Family(str, Enum):
    STACK = "Stack"
    ARITH = "Arith"
    HEAP = "Heap"
    IO = "IO"
    FLOW = "Flow"


class StackOp(str, Enum):
    PUSH = "Push"
    DUPLICATE_NTH = "DuplicateNth"
    DISCARD_TOP_N = "DiscardTopN"
    DUPLICATE = "Duplicate"
    DISCARD = "Discard"
    SWAP = "Swap"


class ArithOp(str, Enum):
    ADD = "Add"
    SUBTRACT = "Subtract"
    MULTIPLY = "Multiply"
    DIVIDE = "Divide"
    MODULO = "Modulo"


class HeapOp(str, Enum):
    STORE_AT = "StoreAt"
    STORE_AT_STACK = "StoreAtStack"


class IOOp(str, Enum):
    PRINT_CHAR = "PrintChar"
    PRINT_NUM = "PrintNum"
    READ_CHAR = "ReadChar"
    READ_NUM = "ReadNum"


class FlowOp(str, Enum):
    MARK = "Mark"
    CALL = "Call"
    JUMP = "Jump"
    BRANCH_ZERO = "BranchZero"
    BRANCH_LT = "BranchLt"
    RETURN = "Return"
    EXIT = "Exit"


NUMERIC_STACK_OPS = frozenset({StackOp.PUSH, StackOp.DUPLICATE_NTH, StackOp.DISCARD_TOP_N})
LABELLED_FLOW_OPS = frozenset(
    {FlowOp.MARK, FlowOp.CALL, FlowOp.JUMP, FlowOp.BRANCH_ZERO, FlowOp.BRANCH_LT}
)


class Instruction:
    family: ClassVar[Family]
    op: Enum


@dataclass(frozen=True, slots=True)
class StackInstruction(Instruction):
    family: ClassVar[Family] = Family.STACK

    op: StackOp
    number: int | None = None

    def __post_init__(self) -> None:
        takes_number = self.op in NUMERIC_STACK_OPS
        if takes_number and self.number is None:
            raise ValueError(f"{self.op.value} requires a number operand")
        if not takes_number and self.number is not None:
            raise ValueError(f"{self.op.value} takes no operand")


@dataclass(frozen=True, slots=True)
class ArithInstruction(Instruction):
    family: ClassVar[Family] = Family.ARITH

    op: ArithOp


@dataclass(frozen=True, slots=True)
class HeapInstruction(Instruction):
    family: ClassVar[Family] = Family.HEAP

    op: HeapOp


@dataclass(frozen=True, slots=True)
class IOInstruction(Instruction):
    family: ClassVar[Family] = Family.IO

    op: IOOp


@dataclass(frozen=True, slots=True)
class FlowInstruction(Instruction):
    family: ClassVar[Family] = Family.FLOW

    op: FlowOp
    label: Label | None = None

    def __post_init__(self) -> None:
        takes_label = self.op in LABELLED_FLOW_OPS
        if takes_label and self.label is None:
            raise ValueError(f"{self.op.value} requires a label operand")
        if not takes_label and self.label is not None:
            raise ValueError(f"{self.op.value} takes no operand")
        if self.label is not None and Token.TERMINATOR in self.label:
            raise ValueError("label may only contain BLANK and TAB tokens")


def format_label(label: Label, *, blank: str = ".", tab: str = "-") -> str:
    parts: list[str] = []
    for t in label:
        if t is Token.BLANK:
            parts.append(blank)
        elif t is Token.TAB:
            parts.append(tab)
        else:
            raise ValueError("TERMINATOR cannot appear inside a label")
    return "".join(parts)


def operand_text(instr: Instruction, *, blank: str = ".", tab: str = "-") -> str | None:
    if isinstance(instr, StackInstruction) and instr.number is not None:
        return str(instr.number)
    if isinstance(instr, FlowInstruction) and instr.label is not None:
        return format_label(instr.label, blank=blank, tab=tab)
    return None


def format_instruction(instr: Instruction, *, blank: str = ".", tab: str = "-") -> str:
    """Render one instruction as ``<Family>: <Operation>(<operand>)``.

    Operations without an operand are rendered without parentheses, e.g.
    ``Flow: Exit``.
    """
    operand = operand_text(instr, blank=blank, tab=tab)
    head = f"{instr.family.value}: {instr.op.value}"
    if operand is None:
        return head
    return f"{head}({operand})"
