"""
Sparse to dense assembly of a parsed MPS file.

The parser keeps the coefficients in name-keyed dictionaries. Once the whole file is
read, :func:`assemble` lays them out in dense numpy arrays, using the order in which
variables and constraints first appeared as their indices.
"""
from __future__ import annotations

from typing import Mapping, Optional, Sequence

import numpy as np

from .constraint import Constraint
from .problem import Problem, Sense


def assemble(name: str, sense: Sense, objective_name: Optional[str], objective: Mapping[str, float],
             constraints: Mapping[str, Constraint], constraint_order: Sequence[str],
             variables: Mapping[str, int], variable_order: Sequence[str],
             dtype=np.float64) -> Problem:
    """
    Builds the dense problem from the symbol tables of the parser.

    Arguments:
        name (str): Problem name.
        sense (Sense): Direction of optimisation.
        objective_name (str): Name of the objective row (None if there was none).
        objective (dict): Variable name -> objective coefficient.
        constraints (dict): Constraint name -> Constraint.
        constraint_order (list[str]): Constraint names in order of first appearance.
        variables (dict): Variable name -> index.
        variable_order (list[str]): Variable names in order of first appearance.
        dtype: numpy dtype of `A`, `b` and `C`.

    Returns:
        Problem: The assembled problem.
    """
    m, n = len(constraint_order), len(variable_order)

    A = np.zeros((m, n), dtype=dtype)
    b = np.zeros(m, dtype=dtype)
    C = np.zeros(n, dtype=dtype)
    relations = [None] * m

    for i, constraint_name in enumerate(constraint_order):
        constraint = constraints[constraint_name]
        assert constraint.id == i, f"Constraint {constraint_name} has id {constraint.id}, expected {i}"
        relations[i] = constraint.relation
        b[i] = constraint.rhs
        for j, variable_name in enumerate(variable_order):
            A[i, j] = constraint.coefficient(variable_name)

    for j, variable_name in enumerate(variable_order):
        assert variables[variable_name] == j, f"Variable {variable_name} has index {variables[variable_name]}, expected {j}"
        C[j] = objective.get(variable_name, 0.0)

    return Problem(name=name, sense=sense, objective_name=objective_name,
                   A=A, b=b, relations=tuple(relations), C=C,
                   constraint_names=tuple(constraint_order), variable_names=tuple(variable_order))
