"""
The assembled linear program.

A :class:`Problem` is the result of a successful conversion, it holds the dense
arrays of the LP:

.. math::

    \\text{min or max} \\; C^T x \\quad \\text{s.t.} \\quad A_i x \\; (\\le, =, \\ge) \\; b_i

All arrays are read-only numpy arrays.

===============
List of classes
===============

.. autosummary::
    :nosignatures:

    Sense
    Problem
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

import numpy as np

from .constraint import Relation


class Sense(Enum):
    MINIMIZE = -1
    MAXIMIZE = 1

    @classmethod
    def from_annotation(cls, annotation: Optional[str]) -> Sense:
        """
        Gets the sense from the optional (MAX)/(MIN) annotation of the NAME line.
        No annotation means minimisation.
        """
        if annotation is not None and annotation.upper() == "MAX":
            return cls.MAXIMIZE
        return cls.MINIMIZE

    def __str__(self) -> str:
        return "max" if self is Sense.MAXIMIZE else "min"


def _readonly(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


class Problem:
    """
    Dense form of a linear program.

    Attributes:
        name (str): problem name from the NAME line
        sense (Sense): direction of optimisation
        objective_name (str): name of the objective row
        A (np.ndarray): m x n constraint matrix
        b (np.ndarray): right hand sides, length m
        relations (tuple[Relation]): relation of each constraint, length m
        C (np.ndarray): objective coefficients, length n
        constraint_names (tuple[str]): constraint names, in id order
        variable_names (tuple[str]): variable names, in index order
    """

    def __init__(self, name: str, sense: Sense, objective_name: Optional[str],
                 A: np.ndarray, b: np.ndarray, relations: Tuple[Relation, ...], C: np.ndarray,
                 constraint_names: Tuple[str, ...], variable_names: Tuple[str, ...]):
        m, n = len(constraint_names), len(variable_names)
        if A.shape != (m, n) or b.shape != (m,) or C.shape != (n,) or len(relations) != m:
            raise ValueError(f"Inconsistent dimensions: A{A.shape}, b{b.shape}, C{C.shape}, "
                             f"{len(relations)} relations for {m} constraints and {n} variables")
        self.name = name
        self.sense = sense
        self.objective_name = objective_name
        self.A = _readonly(A)
        self.b = _readonly(b)
        self.C = _readonly(C)
        self.relations = tuple(relations)
        self.constraint_names = tuple(constraint_names)
        self.variable_names = tuple(variable_names)

    @property
    def m(self) -> int:
        """Number of constraints."""
        return len(self.constraint_names)

    @property
    def n(self) -> int:
        """Number of variables."""
        return len(self.variable_names)

    @property
    def eqin(self) -> np.ndarray:
        """Relations as integers: -1 for <=, 0 for ==, 1 for >=."""
        return _readonly(np.array([r.sign for r in self.relations], dtype=np.int8))

    @property
    def minimize(self) -> bool:
        return self.sense is Sense.MINIMIZE

    def summary(self) -> str:
        return "\n".join([
            f"Problem Type: {self.sense}",
            f"Objective Function Name: {self.objective_name}",
            f"Number of Constraints: {self.m}",
            f"Number of Variables: {self.n}",
        ])

    def __repr__(self) -> str:
        return f"Problem(name={self.name!r}, sense={self.sense.name}, m={self.m}, n={self.n})"
