"""
Constraint rows of a linear program.

A constraint is declared in the ROWS section of an MPS file with a relation letter
and a name, gets its coefficients from the COLUMNS section and its right hand side
from the RHS section.

===============
List of classes
===============

.. autosummary::
    :nosignatures:

    Relation
    Constraint
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Relation(Enum):
    LESS_EQUAL = "L"      # <=
    EQUAL = "E"           # ==
    GREATER_EQUAL = "G"   # >=

    @classmethod
    def from_letter(cls, letter: str) -> Relation:
        """
        Gets the relation from an MPS row type letter (case-insensitive).

        Arguments:
            letter (str): One of "L", "E" or "G".

        Returns:
            Relation: The relation.
        """
        letter = letter.upper()
        if letter == "L":
            return cls.LESS_EQUAL
        elif letter == "E":
            return cls.EQUAL
        elif letter == "G":
            return cls.GREATER_EQUAL
        else:
            raise ValueError(f"Invalid relation type: {letter}")

    @property
    def sign(self) -> int:
        """-1 for <=, 0 for ==, 1 for >="""
        return _SIGNS[self]

    def __str__(self) -> str:
        return _SYMBOLS[self]


_SIGNS = {Relation.LESS_EQUAL: -1, Relation.EQUAL: 0, Relation.GREATER_EQUAL: 1}
_SYMBOLS = {Relation.LESS_EQUAL: "<=", Relation.EQUAL: "==", Relation.GREATER_EQUAL: ">="}


class Constraint:
    """
    A single constraint row: its id, relation, right hand side and the
    coefficients of the variables that appear in it.

    Coefficients are stored sparsely, a variable that was never given a coefficient
    has coefficient 0.
    """

    def __init__(self, id: int, relation: Relation, rhs: float = 0.0):
        self._id = id
        self._relation = relation
        self._rhs = float(rhs)
        self._coefficients = dict()

    @property
    def id(self) -> int:
        return self._id

    @property
    def relation(self) -> Relation:
        return self._relation

    @property
    def rhs(self) -> float:
        return self._rhs

    @property
    def coefficients(self) -> Mapping[str, float]:
        """Read-only view on the variable name -> coefficient mapping."""
        return MappingProxyType(self._coefficients)

    def coefficient(self, variable_name: str) -> float:
        """
        Coefficient of a variable in this constraint, 0 if it was never set.

        Arguments:
            variable_name (str): The name of the variable.
        """
        return self._coefficients.get(variable_name, 0.0)

    def add_coefficient(self, variable_name: str, value: float):
        """
        Sets the coefficient of a variable, overwriting any earlier value.

        Arguments:
            variable_name (str): The name of the variable.
            value (float): The coefficient.
        """
        self._coefficients[variable_name] = float(value)

    def set_rhs(self, value: float):
        self._rhs = float(value)

    def __repr__(self) -> str:
        return f"Constraint(id={self._id}, relation={self._relation.name}, rhs={self._rhs}, coefficients={self._coefficients})"
