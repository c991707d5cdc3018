"""
Assignment representation and satisfaction predicates.

Variables are the integers ``1..num_vars``; index 0 is reserved so the
underlying array is addressed directly by variable index. A literal is a
nonzero signed integer whose absolute value is the variable and whose sign
is the polarity. Clauses are plain sequences of literals.
"""

from collections.abc import Iterable, Iterator, Sequence
from enum import IntEnum

import numpy as np

Clause = Sequence[int]
Formula = Sequence[Clause]


class AssignedValue(IntEnum):
    """Value of a variable (or literal) under a partial assignment."""

    UNASSIGNED = 0
    TRUE = 1
    FALSE = -1


class Assignment:
    """
    A partial assignment of ``num_vars`` boolean variables.

    Values are held in a numpy ``int8`` array of length ``num_vars + 1``
    using the ``AssignedValue`` codes. Every assignment made through
    ``assign`` or ``satisfy`` is pushed onto a trail, so that a caller can
    take a ``mark()`` and later ``undo()`` back to it.
    """

    def __init__(self, num_vars: int = 0, values: np.ndarray | None = None):
        """
        Create an assignment.

        Args:
            num_vars: Number of variables; ignored when ``values`` is given
            values: Optional array of ``AssignedValue`` codes (index 0 unused)
        """
        if values is None:
            if num_vars < 0:
                raise ValueError(f"num_vars must be non-negative, got {num_vars}")
            values = np.zeros(num_vars + 1, dtype=np.int8)
        self.values = values
        self.trail: list[int] = []

    @classmethod
    def from_model(cls, model: Sequence[bool]) -> "Assignment":
        """
        Build a total assignment from a boolean model (index 0 ignored).

        Args:
            model: Sequence of ``num_vars + 1`` booleans

        Returns:
            Assignment with every variable assigned
        """
        values = np.where(np.asarray(model, dtype=bool), 1, -1).astype(np.int8)
        if len(values):
            values[0] = AssignedValue.UNASSIGNED
        else:
            values = np.zeros(1, dtype=np.int8)
        return cls(values=values)

    @property
    def num_vars(self) -> int:
        return len(self.values) - 1

    def __getitem__(self, variable: int) -> AssignedValue:
        return AssignedValue(int(self.values[variable]))

    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        literals = [
            var if value > 0 else -var
            for var, value in enumerate(self.values.tolist())
            if var and value
        ]
        return f"Assignment(num_vars={self.num_vars}, literals={literals})"

    def is_assigned(self, variable: int) -> bool:
        return self.values[variable] != AssignedValue.UNASSIGNED

    def assign(self, variable: int, value: AssignedValue) -> None:
        """Set ``variable`` to ``value`` and record it on the trail."""
        self.values[variable] = value
        self.trail.append(variable)

    def satisfy(self, literal: int) -> None:
        """Assign the literal's variable so that the literal becomes true."""
        self.assign(abs(literal), AssignedValue.TRUE if literal > 0 else AssignedValue.FALSE)

    def mark(self) -> int:
        return len(self.trail)

    def undo(self, mark: int) -> None:
        """
        Roll back every assignment recorded after ``mark``.

        Args:
            mark: A value previously returned by ``mark()``
        """
        while len(self.trail) > mark:
            self.values[self.trail.pop()] = AssignedValue.UNASSIGNED

    def clone(self) -> "Assignment":
        """
        Copy the values into an independent assignment.

        The copy starts with an empty trail, so ``undo`` on it can only roll
        back assignments made after the clone.
        """
        return Assignment(values=self.values.copy())

    def unassigned_variables(self) -> Iterator[int]:
        """Yield unassigned variables in ascending index order."""
        for variable in np.flatnonzero(self.values[1:] == AssignedValue.UNASSIGNED):
            yield int(variable) + 1

    def to_model(self) -> list[bool]:
        """
        Convert to a total model.

        Returns:
            List of ``num_vars + 1`` booleans; index 0 and every unassigned
            variable are reported as False
        """
        return (self.values == AssignedValue.TRUE).tolist()


def literal_value(literal: int, assignment: Assignment) -> AssignedValue:
    """
    Evaluate a literal under a partial assignment.

    Args:
        literal: Nonzero signed literal
        assignment: Current assignment

    Returns:
        UNASSIGNED if the variable is unassigned, otherwise TRUE or FALSE
    """
    value = int(assignment.values[abs(literal)])
    if value == AssignedValue.UNASSIGNED:
        return AssignedValue.UNASSIGNED
    return AssignedValue.TRUE if (value > 0) == (literal > 0) else AssignedValue.FALSE


def is_clause_satisfied(clause: Clause, assignment: Assignment) -> bool:
    """True iff at least one literal of the clause is true."""
    values = assignment.values
    for literal in clause:
        value = values[abs(literal)]
        if value > 0 if literal > 0 else value < 0:
            return True
    return False


def is_formula_satisfied(clauses: Iterable[Clause], assignment: Assignment) -> bool:
    """True iff every clause is satisfied; vacuously true for no clauses."""
    return all(is_clause_satisfied(clause, assignment) for clause in clauses)


def count_satisfied_clauses(clauses: Iterable[Clause], assignment: Assignment) -> int:
    return sum(1 for clause in clauses if is_clause_satisfied(clause, assignment))


def unsatisfied_clauses(clauses: Iterable[Clause], assignment: Assignment) -> Iterator[Clause]:
    """Yield the clauses that are not yet satisfied, in input order."""
    for clause in clauses:
        if not is_clause_satisfied(clause, assignment):
            yield clause
