"""
CNF file handling utilities.

This module provides functions for loading, parsing and writing CNF
formulas in DIMACS format. A DIMACS file looks like::

    c a comment
    p cnf 3 2
    1 -3 0
    2 3 -1 0
    %
    0

Everything after a line starting with ``%`` is ignored; some benchmark
suites append such a trailer.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from typing import TextIO

from simplesat.utils.exceptions import DimacsFormatError

# Set up logging
logger = logging.getLogger(__name__)

# p cnf <number of vars> <number of clauses>
PROBLEM_LINE = re.compile(r"^p\s+cnf\s+(?P<vars>\d+)\s+(?P<clauses>\d+)\s*$")


@dataclass
class CNFFormula:
    num_variables: int = 0
    num_clauses: int = 0  # as declared on the problem line; advisory only
    clauses: list = field(default_factory=list)  # list of list[int] (signed literals)
    comments: list = field(default_factory=list)


def load_cnf_file(file_path: str) -> CNFFormula:
    """
    Load a CNF formula from a DIMACS file.

    Args:
        file_path: Path to the CNF file in DIMACS format

    Returns:
        Parsed CNFFormula

    Raises:
        FileNotFoundError: If the file doesn't exist
        DimacsFormatError: If the file format is invalid
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"CNF file not found: {file_path}")

    with open(file_path) as f:
        formula = parse_dimacs(f)

    logger.debug(
        f"Loaded {file_path}: {formula.num_variables} variables, "
        f"{len(formula.clauses)} clauses"
    )
    return formula


def parse_dimacs(source: str | TextIO) -> CNFFormula:
    """
    Parse CNF formula from DIMACS format.

    Args:
        source: DIMACS content as a string or file-like object

    Returns:
        Parsed CNFFormula

    Raises:
        DimacsFormatError: If the problem line is malformed or repeated, or a
            clause line holds something other than integers
    """
    # Convert string to lines if needed
    if isinstance(source, str):
        lines = source.splitlines()
    else:
        lines = source

    formula = CNFFormula()
    found_problem_line = False
    current_clause = []

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()

        # Skip empty lines
        if not line:
            continue

        # Handle comments
        if line.startswith("c"):
            formula.comments.append(line[1:].strip())
            continue

        # Trailer after the clauses
        if line.startswith("%"):
            break

        # Handle problem line
        if line.startswith("p"):
            if found_problem_line:
                raise DimacsFormatError(
                    "Multiple problem lines in CNF input", line=line, line_number=line_number
                )

            match = PROBLEM_LINE.match(line)
            if match is None:
                raise DimacsFormatError(
                    f"Invalid DIMACS problem description line: '{line}'",
                    line=line,
                    line_number=line_number,
                )

            formula.num_variables = int(match.group("vars"))
            formula.num_clauses = int(match.group("clauses"))
            found_problem_line = True
            continue

        # Handle clause data; every 0 closes the current clause
        for token in line.split():
            try:
                value = int(token)
            except ValueError:
                raise DimacsFormatError(
                    f"Invalid literal '{token}'", line=line, line_number=line_number
                ) from None

            if value == 0:
                formula.clauses.append(current_clause)
                current_clause = []
            else:
                current_clause.append(value)

    # Add the last clause if it was not terminated
    if current_clause:
        logger.warning(
            f"Input ends inside a clause; keeping {current_clause} as the last clause"
        )
        formula.clauses.append(current_clause)

    if found_problem_line and len(formula.clauses) != formula.num_clauses:
        logger.warning(
            f"Problem line declares {formula.num_clauses} clauses, "
            f"but found {len(formula.clauses)}"
        )

    return formula


def formula_to_dimacs(
    formula: list[list[int]],
    num_variables: int | None = None,
    comments: list[str] | None = None,
) -> str:
    """
    Convert a formula to DIMACS format.

    Args:
        formula: List of clauses (each clause is a list of literals)
        num_variables: Number of variables (computed if not provided)
        comments: List of comment lines to include

    Returns:
        DIMACS format string representation
    """
    if comments is None:
        comments = []

    # Calculate the number of variables if not provided
    if num_variables is None:
        num_variables = max((abs(lit) for clause in formula for lit in clause), default=0)

    lines = [f"c {comment}" for comment in comments]
    lines.append(f"p cnf {num_variables} {len(formula)}")
    for clause in formula:
        lines.append(" ".join([*map(str, clause), "0"]))

    return "\n".join(lines) + "\n"


def save_cnf_file(
    file_path: str,
    formula: list[list[int]],
    num_variables: int | None = None,
    comments: list[str] | None = None,
) -> None:
    """
    Save a CNF formula to a DIMACS file.

    Args:
        file_path: Path to save the CNF file
        formula: List of clauses (each clause is a list of literals)
        num_variables: Number of variables (computed if not provided)
        comments: List of comment lines to include
    """
    dimacs_str = formula_to_dimacs(formula, num_variables, comments)

    with open(file_path, "w") as f:
        f.write(dimacs_str)
