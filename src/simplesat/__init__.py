"""
simplesat: a textbook DPLL SAT solver.
"""

from simplesat import solvers, utils
from simplesat.solvers import SolverResult, SolverStatus, solve

__version__ = "0.1.0"

__all__ = ["SolverResult", "SolverStatus", "solve", "solvers", "utils"]
