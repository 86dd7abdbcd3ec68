"""
Reading and writing free-format MPS files.


=================
List of functions
=================

.. autosummary::
    :nosignatures:

    read_mps
    write_mps
"""
from __future__ import annotations

import os
import lzma
import math
from io import StringIO
from contextlib import ExitStack
from typing import List, Optional, Tuple, Union

from ..converter import Converter
from ..exceptions import MPSReadError
from ..problem import Problem, Sense


MPS_SUFFIXES = (".mps", ".xz")

_std_open = open
def read_mps(mps: Union[str, os.PathLike], open=open, **kwargs) -> Problem:
    """
    Parser for free-format MPS. Reads in an instance and returns its dense problem.

    Arguments:
        mps (str or os.PathLike):
            - A file path to an MPS file (optionally LZMA-compressed with `.xz`)
            - OR a string containing the MPS content directly
        open: (callable):
            If mps is the path to a file, a callable to "open" that file (default=python standard library's 'open').
            For `.xz` files it is called as `open(path, "rb")` and the bytes it returns are decompressed.
        kwargs:
            Passed on to :class:`~mpsconv.converter.Converter` (`duplicate_rhs`, `dtype`).

    Returns:
        Problem: The converted problem.

    Raises:
        MPSReadError: the file does not exist, could not be opened, or could not be read or decompressed.
            A single line string ending in `.mps` or `.xz` is taken as a file path, never as MPS content.
        MPSSyntaxError: the content is not valid free-format MPS.

    Example:
        >>> problem = read_mps('''
        ... NAME TEST
        ... ROWS
        ...  N COST
        ...  L LIM1
        ... COLUMNS
        ...  X1 COST 1.0 LIM1 2.0
        ... RHS
        ...  RHS LIM1 10.0
        ... ENDATA
        ... ''')
        >>> problem.A
        array([[2.]])
    """

    # If mps is a path to a file -> open file
    if isinstance(mps, (str, os.PathLike)) and os.path.exists(mps):
        if open is None:
            open = _std_open
        with ExitStack() as stack:
            try:
                if str(mps).endswith(".xz"):
                    # the compressed bytes come from the given open, lzma does not close them
                    raw = stack.enter_context(open(mps, "rb"))
                    f = stack.enter_context(lzma.open(raw, "rt"))
                else:
                    f = stack.enter_context(open(mps))
            except OSError as e:
                raise MPSReadError(f"File {mps} could not be opened: {e}") from e
            return Converter(f, **kwargs).parse()
    # A path that does not exist, rather than MPS content
    elif isinstance(mps, os.PathLike) or (isinstance(mps, str) and "\n" not in mps and mps.lower().endswith(MPS_SUFFIXES)):
        raise MPSReadError(f"File {mps} does not exist")
    # If mps is a string containing a model -> create a memory-mapped file
    else:
        with StringIO(mps) as f:
            return Converter(f, **kwargs).parse()


def _check_name(name: str) -> str:
    if not name or any(c.isspace() for c in name):
        raise ValueError(f"Name {name!r} can not be written to free-format MPS")
    return name

def _format_number(value) -> str:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Value {value} can not be written to MPS")
    return repr(value)

def _format_pairs(key: str, entries: List[Tuple[str, float]]) -> List[str]:
    """Lines of `key name value [name value]`, two entries per line."""
    lines = []
    for i in range(0, len(entries), 2):
        fields = [key]
        for name, value in entries[i:i+2]:
            fields += [name, _format_number(value)]
        lines.append("    " + " ".join(fields))
    return lines


def write_mps(problem: Problem, file_path: Optional[str] = None) -> str:
    """
    Writes a problem to a free-format MPS string / file.

    Zero coefficients and zero right hand sides are left out. A variable without any
    non-zero coefficient is written with an explicit 0 so it keeps its index.

    Arguments:
        problem (Problem): The problem to write.
        file_path (Optional[str]): Optional path to the MPS file to write.

    Returns:
        str: The MPS string.
    """
    objective_name = problem.objective_name
    if problem.n > 0 and objective_name is None and problem.m == 0:
        raise ValueError("A problem with variables but without rows can not be written to MPS")

    name_line = f"NAME {_check_name(problem.name or 'PROBLEM')}"
    if problem.sense is Sense.MAXIMIZE:
        name_line += " (MAX)"
    mps_string = [name_line, "ROWS"]

    # Rows
    if objective_name is not None:
        mps_string.append(f" N {_check_name(objective_name)}")
    for relation, row_name in zip(problem.relations, problem.constraint_names):
        mps_string.append(f" {relation.value} {_check_name(row_name)}")

    # Columns
    mps_string.append("COLUMNS")
    for j, column_name in enumerate(problem.variable_names):
        entries = []
        if objective_name is not None and problem.C[j] != 0:
            entries.append((objective_name, problem.C[j]))
        entries += [(problem.constraint_names[i], problem.A[i, j]) for i in range(problem.m) if problem.A[i, j] != 0]
        if not entries:
            row_name = objective_name if objective_name is not None else problem.constraint_names[0]
            entries.append((row_name, 0.0))
        mps_string += _format_pairs(_check_name(column_name), entries)

    # RHS
    mps_string.append("RHS")
    entries = [(row_name, problem.b[i]) for i, row_name in enumerate(problem.constraint_names) if problem.b[i] != 0]
    mps_string += _format_pairs("RHS", entries)

    mps_string.append("ENDATA")
    mps_string = "\n".join(mps_string) + "\n"

    if file_path is not None:
        with open(file_path, "w") as f:
            f.write(mps_string)

    return mps_string
