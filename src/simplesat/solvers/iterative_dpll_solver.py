"""
DPLL on an explicit decision stack.

Runs the same search as ``DPLLSolver`` (same propagation, same heuristic,
True tried before False) and therefore returns the same models, but keeps
pending decisions in a list instead of on the interpreter call stack. A
single assignment is shared by every branch; a failed branch is rolled back
through the assignment's trail instead of discarding a copy.
"""

import logging

from .assignment import AssignedValue, Assignment, is_formula_satisfied
from .dpll_solver import DPLLSolver
from .registry import register_solver

# Set up logging
logger = logging.getLogger(__name__)


class _Decision:
    """A pending branch: the variable, the value being tried and the trail
    length before the decision was made."""

    __slots__ = ("variable", "value", "mark")

    def __init__(self, variable: int, value: AssignedValue, mark: int):
        self.variable = variable
        self.value = value
        self.mark = mark


@register_solver("dpll_iterative")
class IterativeDPLLSolver(DPLLSolver):
    """
    Non-recursive DPLL whose depth is bounded only by available memory.
    """

    def _search(self, assignment: Assignment) -> Assignment | None:
        stack: list[_Decision] = []

        while True:
            self.stats["max_depth"] = max(self.stats["max_depth"], len(stack))

            if self._propagate(assignment):
                if is_formula_satisfied(self.clauses, assignment):
                    return assignment

                variable = self._select(self.clauses, assignment)
                if variable is not None:
                    self.stats["decisions"] += 1
                    logger.debug(f"Decide x{variable} = TRUE at depth {len(stack)}")
                    stack.append(_Decision(variable, AssignedValue.TRUE, assignment.mark()))
                    assignment.assign(variable, AssignedValue.TRUE)
                    continue

            # Backtrack to the most recent decision whose False branch is untried
            while stack and stack[-1].value == AssignedValue.FALSE:
                stack.pop()
            if not stack:
                return None

            decision = stack[-1]
            assignment.undo(decision.mark)
            decision.value = AssignedValue.FALSE
            logger.debug(
                f"Decide x{decision.variable} = FALSE at depth {len(stack) - 1}"
            )
            assignment.assign(decision.variable, AssignedValue.FALSE)
