import pytest

from mpsconv.grammar import LineKind, Line, classify, data_pairs


@pytest.mark.parametrize("line, kind", [
    ("", LineKind.EMPTY),
    ("   \t  \n", LineKind.EMPTY),
    ("* a comment", LineKind.COMMENT),
    ("ROWS", LineKind.ROWS),
    ("  rows  \n", LineKind.ROWS),
    ("COLUMNS", LineKind.COLUMNS),
    ("Columns", LineKind.COLUMNS),
    ("RHS", LineKind.RHS),
    ("rhs", LineKind.RHS),
    ("ENDATA", LineKind.ENDATA),
    ("EnDaTa", LineKind.ENDATA),
    ("ROWS COLUMNS", LineKind.UNKNOWN),
    ("BOUNDS", LineKind.UNKNOWN),
    ("RANGES", LineKind.UNKNOWN),
    (" UP BND X1 4", LineKind.UNKNOWN),
    ("NAME", LineKind.UNKNOWN),
])
def test_kind(line, kind):
    assert classify(line).kind == kind


def test_name_row():
    assert classify("NAME TEST") == Line(LineKind.NAME, ("TEST", None))
    assert classify("name  TEST  (MAX) \n") == Line(LineKind.NAME, ("TEST", "MAX"))
    assert classify("NAME TEST (min)") == Line(LineKind.NAME, ("TEST", "MIN"))
    assert classify("NAME TEST MAX").kind == LineKind.UNKNOWN


def test_objective_row():
    assert classify(" N COST") == Line(LineKind.OBJECTIVE, ("COST",))
    assert classify(" n  obj.1 ") == Line(LineKind.OBJECTIVE, ("obj.1",))


def test_relation_row():
    assert classify(" L LIM1") == Line(LineKind.RELATION, ("L", "LIM1"))
    assert classify(" e MYEQN") == Line(LineKind.RELATION, ("E", "MYEQN"))
    assert classify(" G LIM2") == Line(LineKind.RELATION, ("G", "LIM2"))
    assert classify(" X LIM2").kind == LineKind.UNKNOWN
    assert classify(" L").kind == LineKind.UNKNOWN
    assert classify(" L A B").kind == LineKind.UNKNOWN


def test_data_row():
    assert classify(" X1 COST 1.0") == Line(LineKind.DATA, ("X1", "COST", 1.0))
    assert classify("    X1   COST  1.0   LIM1  2.0  ") == Line(LineKind.DATA, ("X1", "COST", 1.0, "LIM1", 2.0))


@pytest.mark.parametrize("number, value", [
    ("1", 1.0),
    ("-1", -1.0),
    ("+2.5", 2.5),
    ("3.", 3.0),
    (".5", 0.5),
    ("-.25", -0.25),
    ("1e3", 1000.0),
    ("2.5E-2", 0.025),
])
def test_numbers(number, value):
    assert classify(f" X1 COST {number}").tokens == ("X1", "COST", value)


@pytest.mark.parametrize("line", [
    " X1 COST abc",
    " X1 COST 1..0",
    " X1 COST 1.0 LIM1",
    " X1 COST 1.0 LIM1 2.0 LIM2 3.0",
    " X1 COST",
    " X1 COST 1,0",
])
def test_malformed_data_row(line):
    assert classify(line).kind == LineKind.UNKNOWN


def test_data_pairs():
    assert data_pairs(("X1", "COST", 1.0)) == (("COST", 1.0),)
    assert data_pairs(("X1", "COST", 1.0, "LIM1", 2.0)) == (("COST", 1.0), ("LIM1", 2.0))
