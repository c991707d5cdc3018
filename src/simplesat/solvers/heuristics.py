"""
Branching heuristics: choose the next unassigned variable to decide on.

Both heuristics are deterministic; ties are broken by the lowest variable
index so that solver output is reproducible across runs.
"""

from collections.abc import Callable, Sequence

import numpy as np

from simplesat.utils.exceptions import ConfigurationError
from .assignment import AssignedValue, Assignment, Clause, unsatisfied_clauses

BranchHeuristic = Callable[[Sequence[Clause], Assignment], int | None]


def occurrence_counts(clauses: Sequence[Clause], assignment: Assignment) -> np.ndarray:
    """
    Count, for every unassigned variable, the not-yet-satisfied clauses it
    occurs in (either polarity, once per clause).

    Args:
        clauses: Formula clauses
        assignment: Current partial assignment

    Returns:
        Integer array of length ``num_vars + 1``; entries of assigned
        variables and index 0 are zero
    """
    values = assignment.values
    counts = np.zeros(len(values), dtype=np.int64)

    for clause in unsatisfied_clauses(clauses, assignment):
        variables = {abs(literal) for literal in clause}
        for variable in variables:
            if values[variable] == AssignedValue.UNASSIGNED:
                counts[variable] += 1

    return counts


def most_frequent_variable(clauses: Sequence[Clause], assignment: Assignment) -> int | None:
    """
    Pick the unassigned variable appearing in the most unsatisfied clauses.

    Returns:
        Variable index, or None if every variable is assigned
    """
    unassigned = assignment.values[1:] == AssignedValue.UNASSIGNED
    if not unassigned.any():
        return None

    counts = occurrence_counts(clauses, assignment)[1:]
    # Assigned variables must never win, even when every count is zero
    scores = np.where(unassigned, counts, -1)
    return int(np.argmax(scores)) + 1


def first_unassigned_variable(clauses: Sequence[Clause], assignment: Assignment) -> int | None:
    """
    Pick the lowest-indexed unassigned variable of any unsatisfied clause,
    or the lowest-indexed unassigned variable if none occurs in one.
    """
    values = assignment.values
    candidates = [
        abs(literal)
        for clause in unsatisfied_clauses(clauses, assignment)
        for literal in clause
        if values[abs(literal)] == AssignedValue.UNASSIGNED
    ]
    if candidates:
        return min(candidates)
    return next(assignment.unassigned_variables(), None)


HEURISTICS: dict[str, BranchHeuristic] = {
    "most_frequent": most_frequent_variable,
    "ordered": first_unassigned_variable,
}


def get_heuristic(name: str) -> BranchHeuristic:
    """
    Look up a branching heuristic by name.

    Raises:
        ConfigurationError: If no heuristic has that name
    """
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown branching heuristic '{name}', expected one of {sorted(HEURISTICS)}",
            key="solver.heuristic",
        ) from None


select_branch_variable = most_frequent_variable
