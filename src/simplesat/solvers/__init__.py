"""
SAT solver package with unified interface.
"""

from .api import solve
from .assignment import (
    AssignedValue,
    Assignment,
    is_clause_satisfied,
    is_formula_satisfied,
    literal_value,
)
from .base import SolverBase, SolverResult, SolverStatus
from .config import SolverConfig, get_config, load_config
from .dpll_solver import DPLLSolver
from .heuristics import select_branch_variable
from .iterative_dpll_solver import IterativeDPLLSolver
from .propagation import propagate
from .registry import SolverRegistry, register_solver

__all__ = [
    "AssignedValue",
    "Assignment",
    "DPLLSolver",
    "IterativeDPLLSolver",
    "SolverBase",
    "SolverConfig",
    "SolverRegistry",
    "SolverResult",
    "SolverStatus",
    "get_config",
    "is_clause_satisfied",
    "is_formula_satisfied",
    "literal_value",
    "load_config",
    "propagate",
    "register_solver",
    "select_branch_variable",
    "solve",
]
