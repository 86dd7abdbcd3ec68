#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## grammar.py
##
"""
Line grammars of free-format MPS.

Every line of an MPS file is classified on its own, without looking at the section
it appears in. Whether a line of a given kind is allowed at that point is decided by
the state machine in :mod:`mpsconv.converter`.

Keywords are case-insensitive, names are runs of non-whitespace characters and
numbers are (optionally signed) decimals with an optional exponent.

=================
List of functions
=================

.. autosummary::
    :nosignatures:

    classify
"""
from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple, Tuple


class LineKind(Enum):
    EMPTY = "empty"
    COMMENT = "comment"
    NAME = "name"
    ROWS = "rows"
    COLUMNS = "columns"
    RHS = "rhs"
    ENDATA = "endata"
    OBJECTIVE = "objective"   # N <name>
    RELATION = "relation"     # L|E|G <name>
    DATA = "data"             # <key> <name> <number> [<name> <number>]
    UNKNOWN = "unknown"


class Line(NamedTuple):
    kind: LineKind
    tokens: Tuple = ()


# Regular expressions
NUMBER = r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?'
EMPTY_RE = re.compile(r'^\s*$')
COMMENT_RE = re.compile(r'^\*')
NAME_RE = re.compile(r'^\s*NAME\s+(\S+)(?:\s+\((MAX|MIN)\))?\s*$', re.IGNORECASE)
HEADER_RE = re.compile(r'^\s*(ROWS|COLUMNS|RHS|ENDATA)\s*$', re.IGNORECASE)
OBJECTIVE_RE = re.compile(r'^\s*N\s+(\S+)\s*$', re.IGNORECASE)
RELATION_RE = re.compile(r'^\s*([LEG])\s+(\S+)\s*$', re.IGNORECASE)
DATA_RE = re.compile(rf'^\s*(\S+)\s+(\S+)\s+({NUMBER})(?:\s+(\S+)\s+({NUMBER}))?\s*$')

_HEADERS = {
    "ROWS": LineKind.ROWS,
    "COLUMNS": LineKind.COLUMNS,
    "RHS": LineKind.RHS,
    "ENDATA": LineKind.ENDATA,
}


def classify(line: str) -> Line:
    """
    Classify a single line of an MPS file and extract its tokens.

    Tokens per kind:
        - NAME: (problem name, "MAX" | "MIN" | None)
        - ROWS, COLUMNS, RHS, ENDATA, EMPTY, COMMENT, UNKNOWN: ()
        - OBJECTIVE: (row name,)
        - RELATION: (upper-cased relation letter, row name)
        - DATA: (key, name, value) or (key, name, value, name, value), values as floats

    Arguments:
        line (str): A line of text, with or without trailing newline.

    Returns:
        Line: The kind of line and its tokens.

    Example:
        >>> classify(" X1 COST 1.0 LIM1 2.0")
        Line(kind=<LineKind.DATA: 'data'>, tokens=('X1', 'COST', 1.0, 'LIM1', 2.0))
    """
    if EMPTY_RE.match(line):
        return Line(LineKind.EMPTY)
    if COMMENT_RE.match(line):
        return Line(LineKind.COMMENT)

    match = HEADER_RE.match(line)
    if match:
        return Line(_HEADERS[match.group(1).upper()])

    match = NAME_RE.match(line)
    if match:
        name, annotation = match.groups()
        return Line(LineKind.NAME, (name, annotation.upper() if annotation else None))

    match = OBJECTIVE_RE.match(line)
    if match:
        return Line(LineKind.OBJECTIVE, (match.group(1),))

    match = RELATION_RE.match(line)
    if match:
        return Line(LineKind.RELATION, (match.group(1).upper(), match.group(2)))

    match = DATA_RE.match(line)
    if match:
        key, name, value, name2, value2 = match.groups()
        if name2 is None:
            return Line(LineKind.DATA, (key, name, float(value)))
        return Line(LineKind.DATA, (key, name, float(value), name2, float(value2)))

    return Line(LineKind.UNKNOWN)


def data_pairs(tokens: Tuple) -> Tuple[Tuple[str, float], ...]:
    """The (name, value) pairs following the leading key of a DATA line."""
    return tuple(zip(tokens[1::2], tokens[2::2]))
