import pytest

from quadcc.parameter import (
    Parameter,
    compare_parameters,
    format_parameters,
    parameter_list_to_string,
    print_parameters,
)


def test_parameter_str():
    assert str(Parameter("x", "int")) == "int x"


def test_missing_name_rejected():
    with pytest.raises(ValueError):
        Parameter(None, "int")


def test_missing_type_rejected():
    with pytest.raises(ValueError):
        Parameter("x", None)


def test_list_to_string_empty():
    assert parameter_list_to_string([]) == "N/A"
    assert parameter_list_to_string(None) == "N/A"


def test_list_to_string_joins():
    params = [Parameter("a", "int"), Parameter("b", "float")]
    assert parameter_list_to_string(params) == "int a, float b"


def test_format_parameters_lines():
    params = [Parameter("a", "int"), Parameter("b", "char")]
    lines = format_parameters(params).splitlines()
    assert len(lines) == 2
    assert lines[0] == "Param: Name = a, Type = int"
    assert all(line.startswith("Param: Name = ") for line in lines)


def test_print_parameters(capsys):
    params = [Parameter("a", "int")]
    print_parameters(params)
    assert capsys.readouterr().out == format_parameters(params)


def test_compare_same_types_different_names():
    declared = [Parameter("a", "int"), Parameter("b", "float")]
    passed = [Parameter("x", "int"), Parameter("y", "float")]
    assert compare_parameters(declared, passed)


def test_compare_type_mismatch():
    declared = [Parameter("a", "int")]
    passed = [Parameter("a", "float")]
    assert not compare_parameters(declared, passed)


def test_compare_length_mismatch():
    declared = [Parameter("a", "int"), Parameter("b", "int")]
    passed = [Parameter("a", "int")]
    assert not compare_parameters(declared, passed)
    assert not compare_parameters(passed, declared)


def test_compare_both_empty():
    assert compare_parameters([], [])