import pytest

from mpsconv.tools.mps import read_mps
from mpsconv.tools.ortools import to_pywraplp, supported


@pytest.mark.requires_dependency("ortools")
def test_to_pywraplp(testprob):
    solver = to_pywraplp(read_mps(testprob))
    assert solver.NumVariables() == 3
    assert solver.NumConstraints() == 3
    assert [v.name() for v in solver.variables()] == ["XONE", "YTWO", "ZTHREE"]

    lim1, lim2, myeqn = solver.constraints()
    assert lim1.Ub() == 5 and lim1.Lb() == -solver.infinity()
    assert lim2.Lb() == 10 and lim2.Ub() == solver.infinity()
    assert myeqn.Lb() == myeqn.Ub() == 7

    objective = solver.Objective()
    assert objective.minimization()
    assert [objective.GetCoefficient(v) for v in solver.variables()] == [1, 4, 9]


@pytest.mark.requires_dependency("ortools")
def test_to_pywraplp_maximize(testprob):
    solver = to_pywraplp(read_mps(testprob.replace("TESTPROB", "TESTPROB (MAX)")))
    assert solver.Objective().maximization()


def test_supported():
    assert isinstance(supported(), bool)
