"""
Hand a converted problem over to an OR-Tools linear solver.

Only builds the solver model, solving it is left to the caller:

.. code-block:: python

    from mpsconv.tools import read_mps
    from mpsconv.tools.ortools import to_pywraplp

    solver = to_pywraplp(read_mps("afiro.mps"))
    status = solver.Solve()

Every variable is continuous and non-negative, MPS files without BOUNDS section
describe exactly that.
"""
from __future__ import annotations

from ..constraint import Relation
from ..exceptions import NotSupportedError
from ..problem import Problem


def supported() -> bool:
    # try to import the package
    try:
        import ortools
        return True
    except ImportError:
        return False


def to_pywraplp(problem: Problem, solver_id: str = "GLOP"):
    """
    Builds an OR-Tools `pywraplp.Solver` holding the problem.

    Arguments:
        problem (Problem): The converted problem.
        solver_id (str): The OR-Tools backend to create, default GLOP.

    Returns:
        pywraplp.Solver: The solver with variables, constraints and objective, not yet solved.
    """
    if not supported():
        raise NotSupportedError("Install the python 'ortools' package to use the OR-Tools export")

    from ortools.linear_solver import pywraplp

    solver = pywraplp.Solver.CreateSolver(solver_id)
    if solver is None:
        raise NotSupportedError(f"OR-Tools backend {solver_id} is not available")

    infinity = solver.infinity()
    x = [solver.NumVar(0.0, infinity, name) for name in problem.variable_names]

    for i, (relation, row_name) in enumerate(zip(problem.relations, problem.constraint_names)):
        rhs = float(problem.b[i])
        if relation == Relation.LESS_EQUAL:
            row = solver.Constraint(-infinity, rhs, row_name)
        elif relation == Relation.GREATER_EQUAL:
            row = solver.Constraint(rhs, infinity, row_name)
        elif relation == Relation.EQUAL:
            row = solver.Constraint(rhs, rhs, row_name)
        else:
            raise ValueError(f"Invalid relation: {relation} for constraint: {row_name}")
        for j in problem.A[i].nonzero()[0]:
            row.SetCoefficient(x[j], float(problem.A[i, j]))

    objective = solver.Objective()
    for j in problem.C.nonzero()[0]:
        objective.SetCoefficient(x[j], float(problem.C[j]))
    if problem.minimize:
        objective.SetMinimization()
    else:
        objective.SetMaximization()

    return solver
