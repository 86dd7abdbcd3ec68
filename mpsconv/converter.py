#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## converter.py
##
"""
Converter from free-format MPS to the dense arrays of a linear program.

The converter is a finite state machine that walks the sections of an MPS file in
their fixed order::

    START -> READ_NAME -> READ_ROWS -> READ_COLS -> READ_RHS -> READ_END

Any line that does not fit the current state sends it to the absorbing ``INVALID``
state and parsing stops at that line. All allowed moves are listed in
:data:`TRANSITIONS`, a mapping of ``(state, kind of line)`` to the next state and
the action that updates the symbol tables.

.. code-block:: python

    from mpsconv import Converter

    with open("afiro.mps") as f:
        problem = Converter(f).parse()
    print(problem.A.shape)

===============
List of classes
===============

.. autosummary::
    :nosignatures:

    State
    Converter
"""
from __future__ import annotations

import lzma
import logging
from enum import Enum
from typing import Callable, Dict, Iterable, Optional, Tuple

import numpy as np

from .constraint import Relation
from .exceptions import (MPSSyntaxError, DuplicateObjectiveError, DuplicateRowError, DuplicateRHSError,
                         UnknownReferenceError, UnexpectedEndOfInputError, MPSReadError)
from .grammar import LineKind, classify, data_pairs
from .problem import Problem, Sense
from .symbols import SymbolTable

logger = logging.getLogger(__name__)


class State(Enum):
    START = "start"
    READ_NAME = "read_name"
    READ_ROWS = "read_rows"
    READ_COLS = "read_cols"
    READ_RHS = "read_rhs"
    READ_END = "read_end"
    INVALID = "invalid"


# -------------------------------- Actions ------------------------------- #
# Each action gets the converter and the tokens of the classified line. It raises
# an MPSSyntaxError when the line is well-formed but not acceptable.

def _read_name(conv: Converter, tokens: Tuple):
    name, annotation = tokens
    conv._name = name
    conv._sense = Sense.from_annotation(annotation)

def _read_objective(conv: Converter, tokens: Tuple):
    name, = tokens
    if conv._tables.objective_name is not None:
        raise conv._reject(DuplicateObjectiveError,
                           reason=f"objective already declared as '{conv._tables.objective_name}'")
    if conv._tables.has_constraint(name):
        raise conv._reject(DuplicateRowError, reason=f"row '{name}' already declared")
    conv._tables.set_objective_name(name)

def _read_relation(conv: Converter, tokens: Tuple):
    letter, name = tokens
    if conv._tables.is_row(name):
        raise conv._reject(DuplicateRowError, reason=f"row '{name}' already declared")
    conv._tables.add_constraint(name, Relation.from_letter(letter))

def _read_column(conv: Converter, tokens: Tuple):
    variable_name = tokens[0]
    pairs = data_pairs(tokens)
    for row_name, _ in pairs:
        if not conv._tables.is_row(row_name):
            raise conv._reject(UnknownReferenceError, reference=row_name)

    conv._tables.add_variable(variable_name)
    for row_name, value in pairs:
        if conv._tables.is_objective(row_name):
            conv._tables.set_objective_coefficient(variable_name, value)
        else:
            conv._tables.constraint(row_name).add_coefficient(variable_name, value)

def _read_rhs(conv: Converter, tokens: Tuple):
    # the leading token names the rhs vector, only one vector is supported
    pairs = data_pairs(tokens)
    for row_name, _ in pairs:
        if not conv._tables.has_constraint(row_name):
            raise conv._reject(UnknownReferenceError, reference=row_name)

    for row_name, value in pairs:
        if row_name in conv._rhs_assigned:
            if conv.duplicate_rhs == "error":
                raise conv._reject(DuplicateRHSError, reason=f"right hand side of '{row_name}' already set")
            logger.warning(f"Line {conv.line_number}: right hand side of '{row_name}' is set again, "
                           f"overwriting {conv._tables.constraint(row_name).rhs} with {value}")
        conv._tables.constraint(row_name).set_rhs(value)
        conv._rhs_assigned.add(row_name)


Action = Optional[Callable[["Converter", Tuple], None]]

TRANSITIONS: Dict[Tuple[State, LineKind], Tuple[State, Action]] = {
    (State.START, LineKind.NAME): (State.READ_NAME, _read_name),
    (State.READ_NAME, LineKind.ROWS): (State.READ_ROWS, None),
    (State.READ_ROWS, LineKind.RELATION): (State.READ_ROWS, _read_relation),
    (State.READ_ROWS, LineKind.OBJECTIVE): (State.READ_ROWS, _read_objective),
    (State.READ_ROWS, LineKind.COLUMNS): (State.READ_COLS, None),
    (State.READ_COLS, LineKind.DATA): (State.READ_COLS, _read_column),
    (State.READ_COLS, LineKind.RHS): (State.READ_RHS, None),
    (State.READ_RHS, LineKind.DATA): (State.READ_RHS, _read_rhs),
    (State.READ_RHS, LineKind.ENDATA): (State.READ_END, None),
}

# lines that never cause a transition
_SKIPPED = frozenset({LineKind.EMPTY, LineKind.COMMENT})


def transition(state: State, kind: LineKind) -> State:
    """
    Next state for a line of the given kind, without running its action.

    Lines that are skipped keep the state, every pair that is not in
    :data:`TRANSITIONS` leads to ``INVALID``.
    """
    if state is State.INVALID:
        return State.INVALID
    if kind in _SKIPPED:
        return state
    next_state, _ = TRANSITIONS.get((state, kind), (State.INVALID, None))
    return next_state


class Converter:
    """
    Parses a free-format MPS stream and assembles the dense linear program.

    All result accessors return None until :meth:`parse` completed successfully.
    The stream stays owned by the caller, use :func:`mpsconv.tools.mps.read_mps`
    to have a file opened and closed for you.
    """

    DUPLICATE_RHS_MODES = ("overwrite", "error")

    def __init__(self, stream: Iterable[str], duplicate_rhs: str = "overwrite", dtype=np.float64):
        """
        Initializes the converter.

        Arguments:
            stream (Iterable[str]): A readable text stream (or any iterable of lines).
            duplicate_rhs (str): What to do when the RHS section sets the same right hand
                                 side twice: "overwrite" (last value wins, logs a warning)
                                 or "error" (parsing fails at that line).
            dtype: numpy floating point dtype of the assembled arrays. Default is float64.
        """
        if duplicate_rhs not in self.DUPLICATE_RHS_MODES:
            raise ValueError(f"Invalid duplicate_rhs mode: {duplicate_rhs}, expected one of {self.DUPLICATE_RHS_MODES}")
        if not np.issubdtype(np.dtype(dtype), np.floating):
            # integer arrays would truncate fractional coefficients
            raise ValueError(f"Invalid dtype: {dtype}, expected a floating point type")
        self.duplicate_rhs = duplicate_rhs
        self.dtype = dtype

        self._stream = stream
        self._tables = SymbolTable()
        self._rhs_assigned = set()
        self._name = None
        self._sense = Sense.MINIMIZE

        self.state = State.START
        self.line_number = 0
        self.error: Optional[Exception] = None
        self._line = None
        self._problem: Optional[Problem] = None

    def _reject(self, cls=MPSSyntaxError, **kwargs) -> MPSSyntaxError:
        """Builds the error for the line currently being processed."""
        return cls(self.line_number, self._line, state=self.state, **kwargs)

    def feed(self, line: str) -> State:
        """
        Processes a single line and returns the new state.

        Once the converter is ``INVALID`` further lines are ignored.

        Arguments:
            line (str): The next line of the input, with or without newline.
        """
        if self.state is State.INVALID:
            return self.state

        self.line_number += 1
        self._line = line.rstrip("\r\n")
        parsed = classify(self._line)
        if parsed.kind in _SKIPPED:
            return self.state

        next_state, action = TRANSITIONS.get((self.state, parsed.kind), (State.INVALID, None))
        if next_state is State.INVALID:
            if self.state is State.READ_END:
                reason = "no lines allowed after ENDATA"
            else:
                reason = f"unexpected {parsed.kind.value} line in state {self.state.name}"
            return self._fail(self._reject(reason=reason))

        if action is not None:
            try:
                action(self, parsed.tokens)
            except MPSSyntaxError as e:
                return self._fail(e)

        if next_state is not self.state:
            logger.debug(f"Line {self.line_number}: {self.state.name} -> {next_state.name}")
        self.state = next_state
        return self.state

    def _fail(self, error: MPSSyntaxError) -> State:
        logger.debug(f"Parsing failed: {error}")
        self.error = error
        self.state = State.INVALID
        return self.state

    def parse(self) -> Problem:
        """
        Reads the whole stream and assembles the problem.

        Calling it again returns the same problem (or raises the same error).

        Returns:
            Problem: the assembled linear program

        Raises:
            MPSSyntaxError: a line is not valid where it appears, or the input ends early
            MPSReadError: the stream could not be read or decoded
        """
        if self._problem is not None:
            return self._problem
        if self.error is not None:
            raise self.error

        try:
            for line in self._stream:
                if self.feed(line) is State.INVALID:
                    break
        except (OSError, EOFError, lzma.LZMAError, UnicodeDecodeError) as e:
            self.error = MPSReadError(f"Could not read MPS input after line {self.line_number}: {e}")
            raise self.error from e

        if self.state is State.INVALID:
            raise self.error
        if self.state is not State.READ_END:
            self.error = UnexpectedEndOfInputError(self.line_number, None, state=self.state,
                                                   reason=f"unexpected end of input in state {self.state.name}, missing ENDATA")
            raise self.error

        self._problem = self._tables.assemble(self._name, self._sense, dtype=self.dtype)
        logger.info(f"Converted problem {self._name}: {self._problem.m} constraints, {self._problem.n} variables")
        return self._problem

    # --------------------------------- Results --------------------------------- #

    @property
    def converted(self) -> bool:
        return self._problem is not None

    def _result(self, attribute: str):
        if self._problem is None:
            return None
        return getattr(self._problem, attribute)

    @property
    def problem(self) -> Optional[Problem]:
        return self._problem

    @property
    def A(self) -> Optional[np.ndarray]:
        return self._result("A")

    @property
    def b(self) -> Optional[np.ndarray]:
        return self._result("b")

    @property
    def C(self) -> Optional[np.ndarray]:
        return self._result("C")

    @property
    def relations(self):
        return self._result("relations")

    @property
    def eqin(self) -> Optional[np.ndarray]:
        return self._result("eqin")

    @property
    def sense(self) -> Optional[Sense]:
        return self._result("sense")

    @property
    def name(self) -> Optional[str]:
        return self._result("name")

    @property
    def objective_name(self) -> Optional[str]:
        return self._result("objective_name")

    @property
    def m(self) -> Optional[int]:
        return self._result("m")

    @property
    def n(self) -> Optional[int]:
        return self._result("n")

    @property
    def constraint_names(self):
        return self._result("constraint_names")

    @property
    def variable_names(self):
        return self._result("variable_names")
