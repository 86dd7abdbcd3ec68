"""
Symbol tables filled while parsing an MPS file.

Variables and constraints get their index the moment they are first seen, so the
layout of the dense arrays follows the order of the file and not the iteration order
of any dictionary.
"""
from __future__ import annotations

from typing import Dict, List, Optional

import numpy as np

from .assembler import assemble
from .constraint import Constraint, Relation
from .problem import Problem, Sense


class SymbolTable:

    def __init__(self):
        self.variables: Dict[str, int] = dict()            # variable name -> index
        self.variable_order: List[str] = []
        self.constraints: Dict[str, Constraint] = dict()   # constraint name -> Constraint
        self.constraint_order: List[str] = []
        self.objective_name: Optional[str] = None
        self.objective: Dict[str, float] = dict()          # variable name -> objective coefficient

    def add_variable(self, name: str) -> int:
        """
        Index of a variable, registering it with the next free index if it is new.

        Arguments:
            name (str): The name of the variable.
        """
        if name not in self.variables:
            self.variables[name] = len(self.variable_order)
            self.variable_order.append(name)
        return self.variables[name]

    def add_constraint(self, name: str, relation: Relation) -> Constraint:
        """
        Declares a new constraint with the next free id.

        Arguments:
            name (str): The name of the constraint.
            relation (Relation): Its relation.
        """
        if name in self.constraints:
            raise ValueError(f"Constraint {name} is already declared")
        constraint = Constraint(len(self.constraint_order), relation)
        self.constraints[name] = constraint
        self.constraint_order.append(name)
        return constraint

    def set_objective_name(self, name: str):
        if self.objective_name is not None:
            raise ValueError(f"Objective is already declared as {self.objective_name}")
        self.objective_name = name

    def set_objective_coefficient(self, variable_name: str, value: float):
        self.objective[variable_name] = float(value)

    def is_objective(self, name: str) -> bool:
        return self.objective_name is not None and name == self.objective_name

    def has_constraint(self, name: str) -> bool:
        return name in self.constraints

    def is_row(self, name: str) -> bool:
        """Whether `name` is already declared in the ROWS section, objective included."""
        return self.is_objective(name) or self.has_constraint(name)

    def constraint(self, name: str) -> Constraint:
        return self.constraints[name]

    def assemble(self, name: str, sense: Sense, dtype=np.float64) -> Problem:
        return assemble(name, sense, self.objective_name, self.objective,
                        self.constraints, self.constraint_order,
                        self.variables, self.variable_order, dtype=dtype)
