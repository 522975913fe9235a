import pytest

from quadcc.quad_to_asm import quadruples_to_assembly, write_assembly
from quadcc.quadruple import OpType, Quadruple, QuadrupleList


def asm(*quads):
    return quadruples_to_assembly(list(quads))


def test_assign():
    assert asm(Quadruple(OpType.ASSIGN, "5", None, "x")) == "MOV x, 5\n"


@pytest.mark.parametrize(
    "op, mnemonic",
    [
        (OpType.ADD, "ADD"),
        (OpType.MOD, "MOD"),
        (OpType.LTE, "LTE"),
        (OpType.OR, "OR"),
    ],
)
def test_binary_ops(op, mnemonic):
    text = asm(Quadruple(op, "a", "b", "t1"))
    assert text == f"{mnemonic} t1, a, b\n"


def test_uminus_is_neg():
    assert asm(Quadruple(OpType.UMINUS, "a", None, "t2")).startswith("NEG t2, a")


def test_underscore_args_are_blank():
    text = asm(Quadruple(OpType.ADD, "_", None, "t1"))
    assert text == "ADD t1, , \n"


def test_label_and_invalid_label():
    assert asm(Quadruple(OpType.LABEL, result="L1")) == "\nL1:\n"
    assert asm(Quadruple(OpType.LABEL, result="_")) == ";\n"


def test_repeated_jump_suppressed():
    text = asm(
        Quadruple(OpType.GOTO, result="L1"),
        Quadruple(OpType.LABEL, result="L2"),
        Quadruple(OpType.GOTO, result="L1"),
    )
    assert text.count("JMP L1") == 1


def test_different_jumps_kept():
    text = asm(Quadruple(OpType.GOTO, result="L1"), Quadruple(OpType.GOTO, result="L2"))
    assert text.splitlines() == ["JMP L1", "JMP L2"]


def test_conditional_jumps():
    assert asm(Quadruple(OpType.IFFALSE, "t1", None, "L3")) == "JZ t1, L3\n"
    assert asm(Quadruple(OpType.IFGOTO, "t1", None, "L3")).startswith("JNZ t1,")
    assert asm(Quadruple(OpType.IFGOTO, "t1", None, None)) == ";\n"


def test_call_with_and_without_result():
    assert asm(Quadruple(OpType.CALL, "f")).splitlines() == ["CALL f"]
    lines = asm(Quadruple(OpType.CALL, "f", None, "t4")).splitlines()
    assert lines[0] == "CALL f"
    assert lines[1] == "MOV t4, EAX"


def test_return_and_param():
    assert asm(Quadruple(OpType.RETURN)) == "RET\n"
    assert asm(Quadruple(OpType.RETURN, "x")).splitlines() == ["MOV EAX, x", "RET"]
    assert asm(Quadruple(OpType.PARAM, "x")) == "PUSH x\n"
    assert asm(Quadruple(OpType.PARAM)) == ";\n"


def test_inc_dec():
    text = asm(Quadruple(OpType.INC, result="i"), Quadruple(OpType.DEC, result="i"))
    assert text.splitlines() == ["INC i", "DEC i"]


def test_one_line_per_simple_quad():
    quads = QuadrupleList()
    for op in (OpType.ITOF, OpType.FTOI, OpType.CTOI, OpType.ITOB, OpType.NOT):
        quads.add(op, "a", None, quads.new_temp())
    assert len(quadruples_to_assembly(quads).splitlines()) == len(quads)


def test_write_assembly(tmp_path):
    quads = [Quadruple(OpType.ASSIGN, "1", None, "x"), Quadruple(OpType.RETURN, "x")]
    target = tmp_path / "out.asm"
    write_assembly(quads, target)
    assert target.read_text(encoding="utf-8") == quadruples_to_assembly(quads)


def test_write_assembly_bad_path(tmp_path):
    with pytest.raises(OSError):
        write_assembly([], tmp_path / "missing" / "out.asm")