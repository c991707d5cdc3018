"""
DPLL solver implementation using the unified solver interface.

The search is the textbook recursive statement of the
Davis-Putnam-Logemann-Loveland procedure: propagate, check, branch on one
variable trying True before False, backtrack. Each branch works on its own
copy of the assignment.

Recursion depth grows with the number of variables, so very large
instances can exceed the interpreter's recursion limit; the resulting
RecursionError is not caught. ``IterativeDPLLSolver`` runs the same search
on an explicit stack.
"""

import logging
import time
from collections.abc import Sequence
from typing import Any

from simplesat.utils.exceptions import (
    ConfigurationError,
    InconsistentAssignmentError,
    InvalidClauseError,
)
from .assignment import (
    AssignedValue,
    Assignment,
    Clause,
    count_satisfied_clauses,
    is_clause_satisfied,
    is_formula_satisfied,
)
from .base import SolverBase, SolverResult, SolverStatus
from .config import get_config
from .heuristics import get_heuristic
from .propagation import propagate
from .registry import register_solver

# Set up logging
logger = logging.getLogger(__name__)

BRANCH_ORDER = (AssignedValue.TRUE, AssignedValue.FALSE)


@register_solver("dpll")
class DPLLSolver(SolverBase):
    """
    Recursive DPLL with unit propagation, pure-literal elimination and a
    most-frequent-variable branching heuristic.
    """

    def __init__(self, num_vars: int = 0, **kwargs):
        """
        Initialize the DPLL solver.

        Args:
            num_vars: Number of variables in the problem
            **kwargs: Overrides for ``heuristic``, ``pure_literal_elimination``
                and ``verify_model``
        """
        if num_vars < 0:
            raise ValueError(f"num_vars must be non-negative, got {num_vars}")

        # Get default config
        config = get_config()

        self.num_vars = num_vars
        self.heuristic = config.get("solver.heuristic", "most_frequent")
        self.pure_literal_elimination = config.get("solver.pure_literal_elimination", True)
        self.verify_model = config.get("solver.verify_model", True)

        self.clauses: list[list[int]] = []
        self.model: list[bool] | None = None
        self.stats: dict[str, Any] = {}

        self.configure(kwargs)
        self._reset_statistics()

    def _reset_statistics(self) -> None:
        self.stats = {
            "solver_name": self.solver_name,
            "decisions": 0,
            "conflicts": 0,
            "max_depth": 0,
            "propagation_rounds": 0,
            "unit_propagations": 0,
            "pure_literals": 0,
            "runtime": 0.0,
            "total_clauses": len(self.clauses),
        }

    def add_clause(self, clause: list[int]) -> None:
        """
        Add a single clause to the solver.

        Raises:
            InvalidClauseError: If a literal is 0 or its variable exceeds num_vars
        """
        clause = list(clause)
        for literal in clause:
            if literal == 0 or abs(literal) > self.num_vars:
                raise InvalidClauseError(
                    f"Literal {literal} out of range 1..{self.num_vars}", clause=clause
                )
        self.clauses.append(clause)
        self.stats["total_clauses"] = len(self.clauses)

    def add_clauses(self, clauses: Sequence[Clause]) -> None:
        for clause in clauses:
            self.add_clause(clause)

    def solve(self) -> SolverResult:
        """
        Decide satisfiability of the clauses added so far.

        Returns:
            SolverResult with status SATISFIABLE and a total model, or status
            UNSATISFIABLE and no model
        """
        self._reset_statistics()
        self._select = get_heuristic(self.heuristic)
        start_time = time.time()

        solution = self._search(Assignment(self.num_vars))

        runtime = time.time() - start_time
        self.stats["runtime"] = runtime

        if solution is None:
            self.model = None
            logger.info(
                f"UNSAT after {self.stats['decisions']} decisions, "
                f"{self.stats['conflicts']} conflicts ({runtime:.4f}s)"
            )
            return SolverResult(
                status=SolverStatus.UNSATISFIABLE,
                runtime=runtime,
                total_clauses=len(self.clauses),
                statistics=dict(self.stats),
            )

        self.model = solution.to_model()
        if self.verify_model:
            self._check_model(self.model)

        logger.info(
            f"SAT after {self.stats['decisions']} decisions, "
            f"{self.stats['conflicts']} conflicts ({runtime:.4f}s)"
        )
        return SolverResult(
            status=SolverStatus.SATISFIABLE,
            model=self.model,
            runtime=runtime,
            satisfied_clauses=count_satisfied_clauses(
                self.clauses, Assignment.from_model(self.model)
            ),
            total_clauses=len(self.clauses),
            statistics=dict(self.stats),
        )

    def _search(self, assignment: Assignment) -> Assignment | None:
        return self._dpll(assignment, depth=0)

    def _propagate(self, assignment: Assignment) -> bool:
        """Run propagation; count and log a conflict if one is found."""
        if propagate(
            self.clauses,
            assignment,
            pure_literals=self.pure_literal_elimination,
            stats=self.stats,
        ):
            return True
        self.stats["conflicts"] += 1
        return False

    def _dpll(self, assignment: Assignment, depth: int) -> Assignment | None:
        """
        Search for a satisfying extension of ``assignment``.

        Args:
            assignment: Partial assignment owned by this call
            depth: Number of decisions above this call

        Returns:
            A (possibly partial) assignment satisfying every clause, or None
        """
        self.stats["max_depth"] = max(self.stats["max_depth"], depth)

        if not self._propagate(assignment):
            return None

        if is_formula_satisfied(self.clauses, assignment):
            return assignment

        variable = self._select(self.clauses, assignment)
        if variable is None:
            # Everything is assigned yet some clause is unsatisfied
            return None

        self.stats["decisions"] += 1
        for value in BRANCH_ORDER:
            logger.debug(f"Decide x{variable} = {value.name} at depth {depth}")
            child = assignment.clone()
            child.assign(variable, value)

            solution = self._dpll(child, depth + 1)
            if solution is not None:
                return solution

        return None

    def _check_model(self, model: list[bool]) -> None:
        """
        Raises:
            InconsistentAssignmentError: If the model leaves a clause unsatisfied
        """
        total = Assignment.from_model(model)
        for clause in self.clauses:
            if not is_clause_satisfied(clause, total):
                raise InconsistentAssignmentError(clause=clause)

    def get_model(self) -> list[bool] | None:
        return self.model

    def get_statistics(self) -> dict[str, Any]:
        return self.stats

    def configure(self, config: dict[str, Any]) -> None:
        """
        Configure the solver with the given parameters.

        Args:
            config: Dictionary with any of ``heuristic``,
                ``pure_literal_elimination`` and ``verify_model``

        Raises:
            ConfigurationError: For an unknown parameter or heuristic name
        """
        for key, value in config.items():
            if key not in ("heuristic", "pure_literal_elimination", "verify_model"):
                raise ConfigurationError(f"Unknown configuration parameter: {key}", key=key)
            if key == "heuristic":
                get_heuristic(value)
            setattr(self, key, value)
            logger.debug(f"Set {key}={value} for {self.solver_name} solver")
