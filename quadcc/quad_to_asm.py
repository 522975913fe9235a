"""Translation of quadruples into pseudo-assembly."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from quadcc.quadruple import OpType, Quadruple

_BINARY = {
    OpType.ADD: "ADD",
    OpType.SUB: "SUB",
    OpType.MUL: "MUL",
    OpType.DIV: "DIV",
    OpType.MOD: "MOD",
    OpType.EXP: "EXP",
    OpType.EQ: "EQ",
    OpType.NEQ: "NEQ",
    OpType.LT: "LT",
    OpType.GT: "GT",
    OpType.LTE: "LTE",
    OpType.GTE: "GTE",
    OpType.AND: "AND",
    OpType.OR: "OR",
}

_UNARY = {
    OpType.ASSIGN: "MOV",
    OpType.NOT: "NOT",
    OpType.UMINUS: "NEG",
    OpType.ITOF: "ITOF",
    OpType.FTOI: "FTOI",
    OpType.CTOI: "CTOI",
    OpType.ITOB: "ITOB",
}

_EMPTY = ";\n"


def _clean(value: Optional[str]) -> str:
    return value if value and value != "_" else ""


def _valid(value: Optional[str]) -> bool:
    return bool(value) and value != "_"


def quadruples_to_assembly(quads: Iterable[Quadruple]) -> str:
    """Return the assembly text for a sequence of quadruples."""
    out: list[str] = []
    last_jump = ""

    for quad in quads:
        op = quad.op
        a1, a2, res = quad.arg1, quad.arg2, quad.result

        if op in _BINARY:
            out.append(f"{_BINARY[op]} {_clean(res)}, {_clean(a1)}, {_clean(a2)}\n")
        elif op in _UNARY:
            out.append(f"{_UNARY[op]} {_clean(res)}, {_clean(a1)}\n")
        elif op is OpType.INC:
            out.append(f"INC {_clean(res)}\n")
        elif op is OpType.DEC:
            out.append(f"DEC {_clean(res)}\n")
        elif op is OpType.LABEL:
            out.append(f"\n{res}:\n" if _valid(res) else _EMPTY)
        elif op is OpType.GOTO:
            if _valid(res):
                jump = f"JMP {res}"
                # A jump identical to the previous one emitted is dropped.
                if jump != last_jump:
                    out.append(f"{jump}\n")
                    last_jump = jump
            else:
                out.append(_EMPTY)
        elif op is OpType.IFGOTO:
            out.append(f"JNZ {_clean(a1)}, {res}\n" if _valid(res) else _EMPTY)
        elif op is OpType.IFFALSE:
            out.append(f"JZ {_clean(a1)}, {res}\n" if _valid(res) else _EMPTY)
        elif op is OpType.CALL:
            out.append(f"CALL {_clean(a1)}\n")
            if _valid(res):
                out.append(f"MOV {res}, EAX\n")
        elif op is OpType.RETURN:
            if _valid(a1):
                out.append(f"MOV EAX, {a1}\n")
            out.append("RET\n")
        elif op is OpType.PARAM:
            out.append(f"PUSH {a1}\n" if _valid(a1) else _EMPTY)
        else:
            out.append(_EMPTY)

    return "".join(out)


def write_assembly(quads: Iterable[Quadruple], filename) -> None:
    """Write the assembly for quads to filename."""
    Path(filename).write_text(quadruples_to_assembly(quads), encoding="utf-8")