"""
Command-line interface for mpsconv.

Converts a free-format MPS file and reports what was found in it.

Usage:
    mpsconv [-v] [--strict-rhs] [--log-level LEVEL] FILE

Exit codes:
    0   conversion successful
    1   file missing, unreadable, or not an .mps file
    2   wrong usage
    3   the file is not valid free-format MPS
"""

import os
import sys
import time
import logging
import argparse

import numpy as np

from mpsconv import __version__
from mpsconv.exceptions import MPSReadError, MPSSyntaxError
from mpsconv.tools.mps import read_mps

EXIT_OK = 0
EXIT_FILE_ERROR = 1
EXIT_USAGE = 2
EXIT_PARSE_ERROR = 3

MPS_EXTENSIONS = (".mps", ".mps.xz")


def check_file(file_name):
    """Returns an error message if the file can not be converted, None otherwise."""
    if not file_name.lower().endswith(MPS_EXTENSIONS):
        return f"Not an .mps file: {file_name}"
    if not os.path.isfile(file_name):
        return f"File: {file_name} does not exist!"
    if not os.access(file_name, os.R_OK):
        return f"File: {file_name} is not read enabled!"
    return None


def print_problem(problem, verbose=False, out=None):
    print("-" * 40, file=out)
    print(problem.summary(), file=out)
    if verbose:
        # may be huge for real benchmarks, hence only on request
        with np.printoptions(threshold=sys.maxsize, linewidth=200):
            print("Objective Function coefficients:", file=out)
            print(problem.C, file=out)
            print("Array of constraint coefficients:", file=out)
            print(problem.A, file=out)
            print("Eqin vector:", file=out)
            print(problem.eqin, file=out)
            print("Vector of constraint RHSs:", file=out)
            print(problem.b, file=out)
        print("Constraint names:", file=out)
        print(list(problem.constraint_names), file=out)
        print("Variable names:", file=out)
        print(list(problem.variable_names), file=out)
    print("-" * 40, file=out)


def command_convert(args):
    error = check_file(args.file)
    if error is not None:
        print(error, file=sys.stderr)
        return EXIT_FILE_ERROR

    start = time.perf_counter()
    try:
        problem = read_mps(args.file, duplicate_rhs="error" if args.strict_rhs else "overwrite")
    except MPSReadError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except MPSSyntaxError as e:
        print("An error occured while parsing the input file!!!", file=sys.stderr)
        print(f"Line Number: {e.line_number}", file=sys.stderr)
        if e.line is not None:
            print("There's something wrong with this line:", file=sys.stderr)
            print(f'"{e.line}"', file=sys.stderr)
        print(e.reason, file=sys.stderr)
        return EXIT_PARSE_ERROR
    elapsed = time.perf_counter() - start

    print("Conversion successful!")
    print(f"Elapsed time: {elapsed * 1000:.0f} ms.")
    print_problem(problem, verbose=args.verbose)
    return EXIT_OK


def main(argv=None):
    parser = argparse.ArgumentParser(prog="mpsconv", description="Convert a free-format MPS file into dense LP arrays")
    parser.add_argument("file", help="Path to an .mps file (or .mps.xz)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Also print the arrays and the row/column names")
    parser.add_argument("--strict-rhs", action="store_true", help="Fail when the RHS section sets the same row twice")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default: WARNING)")
    parser.add_argument("--version", action="version", version=f"mpsconv {__version__}")

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits with 2 on usage errors, 0 for --help/--version
        return e.code

    logging.basicConfig(level=getattr(logging, args.log_level), format='%(levelname)s: %(message)s')
    return command_convert(args)


if __name__ == "__main__":
    sys.exit(main())
