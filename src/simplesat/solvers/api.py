"""
One-call entry point: build a solver, feed it the clauses, solve.
"""

from collections.abc import Sequence

from .assignment import Clause
from .base import SolverResult
from .config import get_config
from .registry import SolverRegistry


def solve(
    variable_count: int,
    clauses: Sequence[Clause],
    solver: str | None = None,
    **options,
) -> SolverResult:
    """
    Decide satisfiability of a CNF formula.

    Args:
        variable_count: Number of variables; literals range over
            ``±1..±variable_count``
        clauses: Sequence of clauses, each a sequence of nonzero literals
        solver: Registered solver name; defaults to ``solver.name`` from the
            configuration
        **options: Solver options (``heuristic``, ``pure_literal_elimination``,
            ``verify_model``)

    Returns:
        SolverResult. ``result.is_sat`` with ``result.model`` a list of
        ``variable_count + 1`` booleans (index 0 unused, unconstrained
        variables False), or ``result.is_unsat`` with ``result.model`` None.

    Raises:
        InvalidClauseError: If a literal is 0 or out of range
        ValueError: If the solver name is not registered
    """
    name = solver or get_config().get("solver.name", "dpll")
    instance = SolverRegistry.create(name, num_vars=variable_count, **options)
    instance.add_clauses(clauses)
    return instance.solve()
