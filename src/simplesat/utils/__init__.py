"""
Utilities for the simplesat package.
"""

from simplesat.utils import cnf, exceptions, logging_utils
from simplesat.utils.cnf import (
    CNFFormula,
    formula_to_dimacs,
    load_cnf_file,
    parse_dimacs,
    save_cnf_file,
)

__all__ = [
    "CNFFormula",
    "load_cnf_file",
    "save_cnf_file",
    "parse_dimacs",
    "formula_to_dimacs",
    "cnf",
    "exceptions",
    "logging_utils",
]
