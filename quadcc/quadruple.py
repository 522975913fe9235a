"""Quadruple intermediate representation."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Iterator, Optional

MAX_QUADS = 1000


class OpType(enum.IntEnum):
    """Quadruple operations."""

    ADD = 0
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()
    MOD = enum.auto()
    EXP = enum.auto()
    ASSIGN = enum.auto()
    GOTO = enum.auto()
    IFGOTO = enum.auto()
    IFFALSE = enum.auto()
    LABEL = enum.auto()
    CALL = enum.auto()
    PARAM = enum.auto()
    RETURN = enum.auto()
    LT = enum.auto()
    GT = enum.auto()
    LTE = enum.auto()
    GTE = enum.auto()
    EQ = enum.auto()
    NEQ = enum.auto()
    AND = enum.auto()
    OR = enum.auto()
    NOT = enum.auto()
    UMINUS = enum.auto()
    INC = enum.auto()
    DEC = enum.auto()
    ITOF = enum.auto()
    FTOI = enum.auto()
    CTOI = enum.auto()
    ITOB = enum.auto()


_SYMBOLS = {
    OpType.ADD: "+",
    OpType.SUB: "-",
    OpType.MUL: "*",
    OpType.DIV: "/",
    OpType.MOD: "%",
    OpType.EXP: "^",
    OpType.ASSIGN: "=",
    OpType.GOTO: "GOTO",
    OpType.IFGOTO: "IF_GOTO",
    OpType.IFFALSE: "IF_FALSE",
    OpType.LABEL: "LABEL",
    OpType.CALL: "CALL",
    OpType.PARAM: "PARAM",
    OpType.RETURN: "RETURN",
    OpType.LT: "<",
    OpType.GT: ">",
    OpType.LTE: "<=",
    OpType.GTE: ">=",
    OpType.EQ: "==",
    OpType.NEQ: "!=",
    OpType.AND: "AND",
    OpType.OR: "OR",
    OpType.NOT: "NOT",
    OpType.UMINUS: "UMINUS",
    OpType.INC: "++",
    OpType.DEC: "--",
    OpType.ITOF: "INT_TO_FLOAT",
    OpType.FTOI: "FLOAT_TO_INT",
    OpType.CTOI: "CHAR_TO_INT",
    OpType.ITOB: "INT_TO_BOOL",
}

_HEADER = "\n=== Generated Quadruples ===\n"


def op_symbol(op) -> str:
    """Return the printable symbol of an operation."""
    try:
        return _SYMBOLS[OpType(op)]
    except ValueError:
        return "UNKNOWN_OP"


class QuadrupleOverflowError(Exception):
    """Raised when a quadruple list is full."""


@dataclass(frozen=True)
class Quadruple:
    """One instruction: operation, two arguments and a result."""

    op: OpType
    arg1: Optional[str] = None
    arg2: Optional[str] = None
    result: Optional[str] = None

    def __str__(self) -> str:
        fields = (self.arg1, self.arg2, self.result)
        rendered = ", ".join("_" if field is None else field for field in fields)
        return f"({op_symbol(self.op)}, {rendered})"


class QuadrupleList:
    """Ordered, bounded list of quadruples with temp and label generators."""

    def __init__(self, limit: int = MAX_QUADS) -> None:
        self.limit = limit
        self._quads: list[Quadruple] = []
        self._next_temp = 1
        self._next_label = 1

    def add(
        self,
        op: OpType,
        arg1: Optional[str] = None,
        arg2: Optional[str] = None,
        result: Optional[str] = None,
    ) -> Quadruple:
        if len(self._quads) >= self.limit:
            raise QuadrupleOverflowError("Too many quadruples!")
        quad = Quadruple(OpType(op), arg1, arg2, result)
        self._quads.append(quad)
        return quad

    def new_temp(self) -> str:
        name = f"t{self._next_temp}"
        self._next_temp += 1
        return name

    def new_label(self) -> str:
        name = f"L{self._next_label}"
        self._next_label += 1
        return name

    def _lines(self) -> Iterator[str]:
        yield _HEADER
        for index, quad in enumerate(self._quads):
            yield f"[{index}] {quad}\n"

    def format(self) -> str:
        return "".join(self._lines())

    def print(self) -> None:
        """Write the listing to standard output."""
        out = sys.stdout
        for line in self._lines():
            out.write(line)
        out.flush()

    def clear(self) -> None:
        """Drop all quadruples; temp and label numbering continues."""
        self._quads.clear()

    def __len__(self) -> int:
        return len(self._quads)

    def __iter__(self) -> Iterator[Quadruple]:
        return iter(self._quads)

    def __getitem__(self, index):
        return self._quads[index]