"""
Base interface for all SAT solvers in the package.
Defines the solver interface that every solver implementation follows and
the result object it returns.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any


class SolverStatus(Enum):
    """Enum representing the status of a solver run."""

    UNKNOWN = "unknown"
    SATISFIABLE = "satisfiable"
    UNSATISFIABLE = "unsatisfiable"


class SolverResult:
    """
    Result object returned by all solvers.

    A satisfiable result carries a total ``model``: a list of
    ``num_vars + 1`` booleans with index 0 unused. An unsatisfiable result
    has ``model`` set to None, so "proven unsatisfiable" can never be
    confused with "the model happens to be all False".
    """

    def __init__(
        self,
        status: SolverStatus = SolverStatus.UNKNOWN,
        model: list[bool] | None = None,
        runtime: float = 0.0,
        satisfied_clauses: int = 0,
        total_clauses: int = 0,
        statistics: dict[str, Any] | None = None,
    ):
        self.status = status
        self.model = model
        self.runtime = runtime
        self.satisfied_clauses = satisfied_clauses
        self.total_clauses = total_clauses
        self.statistics = statistics or {}

    @property
    def is_sat(self) -> bool:
        """Returns True if the problem is satisfiable."""
        return self.status == SolverStatus.SATISFIABLE

    @property
    def is_unsat(self) -> bool:
        """Returns True if the problem is unsatisfiable."""
        return self.status == SolverStatus.UNSATISFIABLE

    @property
    def num_vars(self) -> int | None:
        return None if self.model is None else len(self.model) - 1

    @property
    def literals(self) -> list[int] | None:
        """
        The model as DIMACS-style signed literals, e.g. ``[1, -2, 3]``.

        Returns:
            List of literals, or None for an unsatisfiable result
        """
        if self.model is None:
            return None
        return [var if value else -var for var, value in enumerate(self.model) if var]

    def __str__(self) -> str:
        """String representation of the result."""
        status_str = str(self.status.value).upper()
        if self.status == SolverStatus.SATISFIABLE:
            return f"SAT Result: {status_str} ({self.satisfied_clauses}/{self.total_clauses} clauses, {self.runtime:.4f}s)"
        elif self.status == SolverStatus.UNSATISFIABLE:
            return f"SAT Result: {status_str} (proved in {self.runtime:.4f}s)"
        else:
            return "SAT Result: UNKNOWN"


class SolverBase(ABC):
    """
    Abstract base class for SAT solver implementations.
    All solver implementations must inherit from this class.
    """

    @abstractmethod
    def add_clause(self, clause: list[int]) -> None:
        """
        Add a single clause to the solver.

        Args:
            clause: A list of integers representing literals in the clause.
                   Positive integers represent positive literals, negative integers
                   represent negative literals.
        """

    @abstractmethod
    def add_clauses(self, clauses: list[list[int]]) -> None:
        """
        Add multiple clauses to the solver.

        Args:
            clauses: A list of clauses, where each clause is a list of integers.
        """

    @abstractmethod
    def solve(self) -> SolverResult:
        """
        Decide satisfiability of the clauses added so far.

        Returns:
            SolverResult containing the status and, if satisfiable, the model
        """

    @abstractmethod
    def get_model(self) -> list[bool] | None:
        """
        Get the satisfying model found by the last ``solve`` call.

        Returns:
            List of ``num_vars + 1`` booleans, or None if the problem is
            unsatisfiable or has not been solved yet
        """

    @abstractmethod
    def get_statistics(self) -> dict[str, Any]:
        """
        Get solver statistics.

        Returns:
            Dictionary of statistics
        """

    @abstractmethod
    def configure(self, config: dict[str, Any]) -> None:
        """
        Configure the solver with the given parameters.

        Args:
            config: Dictionary of configuration parameters
        """
