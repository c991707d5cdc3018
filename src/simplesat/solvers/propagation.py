"""
Unit propagation and pure-literal elimination.

``propagate`` repeatedly applies both deductions to a partial assignment
until a full round makes no change, or stops at the first conflicting
clause.
"""

import logging
from collections.abc import Sequence
from typing import Any

from .assignment import AssignedValue, Assignment, Clause, is_clause_satisfied

# Set up logging
logger = logging.getLogger(__name__)

POSITIVE = 1
NEGATIVE = 2


def _unit_pass(clauses: Sequence[Clause], assignment: Assignment) -> tuple[bool, int]:
    """
    Run one unit-propagation pass over the clauses in input order.

    Args:
        clauses: Formula clauses
        assignment: Partial assignment, updated in place

    Returns:
        Tuple of (no_conflict, number_of_forced_assignments)
    """
    values = assignment.values
    forced = 0

    for clause in clauses:
        if is_clause_satisfied(clause, assignment):
            continue

        # Distinct unassigned literals, at most two are needed
        unassigned = []
        for literal in clause:
            if values[abs(literal)] == AssignedValue.UNASSIGNED and literal not in unassigned:
                unassigned.append(literal)
                if len(unassigned) == 2:
                    break

        if not unassigned:
            logger.debug(f"Conflict on clause {list(clause)}")
            return False, forced

        if len(unassigned) == 1:
            assignment.satisfy(unassigned[0])
            forced += 1

    return True, forced


def _pure_literal_pass(clauses: Sequence[Clause], assignment: Assignment) -> int:
    """
    Assign every unassigned variable that occurs with a single polarity in
    the not-yet-satisfied clauses.

    Returns:
        Number of variables assigned
    """
    values = assignment.values
    polarity: dict[int, int] = {}

    for clause in clauses:
        if is_clause_satisfied(clause, assignment):
            continue
        for literal in clause:
            variable = abs(literal)
            if values[variable] == AssignedValue.UNASSIGNED:
                polarity[variable] = polarity.get(variable, 0) | (
                    POSITIVE if literal > 0 else NEGATIVE
                )

    assigned = 0
    for variable in sorted(polarity):
        if polarity[variable] == POSITIVE:
            assignment.assign(variable, AssignedValue.TRUE)
            assigned += 1
        elif polarity[variable] == NEGATIVE:
            assignment.assign(variable, AssignedValue.FALSE)
            assigned += 1

    return assigned


def propagate(
    clauses: Sequence[Clause],
    assignment: Assignment,
    pure_literals: bool = True,
    stats: dict[str, Any] | None = None,
) -> bool:
    """
    Deduce every assignment forced by the current partial assignment.

    Each round first performs unit propagation (a clause with exactly one
    unassigned literal forces that literal true) and then pure-literal
    elimination. Rounds repeat until one makes no change.

    Args:
        clauses: Formula clauses
        assignment: Partial assignment, updated in place
        pure_literals: Whether to run pure-literal elimination
        stats: Optional statistics dictionary; the counters
            ``propagation_rounds``, ``unit_propagations`` and ``pure_literals``
            are incremented when present

    Returns:
        False if a clause became conflicting, True otherwise
    """
    while True:
        if stats is not None:
            stats["propagation_rounds"] = stats.get("propagation_rounds", 0) + 1

        ok, forced = _unit_pass(clauses, assignment)
        if stats is not None:
            stats["unit_propagations"] = stats.get("unit_propagations", 0) + forced
        if not ok:
            return False

        pure = _pure_literal_pass(clauses, assignment) if pure_literals else 0
        if stats is not None:
            stats["pure_literals"] = stats.get("pure_literals", 0) + pure

        if not forced and not pure:
            return True
