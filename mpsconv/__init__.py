"""
    mpsconv converts linear programs in free-format MPS into the dense arrays used by LP solvers.

    The package consists of 4 parts:
    - `converter`: the state machine that reads an MPS file section by section
    - `constraint` and `symbols`: the rows and names collected while reading
    - `assembler` and `problem`: the dense arrays (A, b, relations, C) of the converted problem
    - `tools`: reading/writing MPS files and handing problems over to OR-Tools
"""

__version__ = "0.3.0"


from .constraint import Relation, Constraint
from .converter import Converter, State
from .problem import Problem, Sense
from .exceptions import MPSException, MPSSyntaxError, MPSReadError
from .tools.mps import read_mps, write_mps
