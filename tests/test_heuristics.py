"""
Unit tests for the branching heuristics.
"""

import os
import sys
import unittest

# Add src/ to the path so we can import the package without installing it
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from simplesat.solvers.assignment import AssignedValue, Assignment
from simplesat.solvers.heuristics import (
    HEURISTICS,
    first_unassigned_variable,
    get_heuristic,
    most_frequent_variable,
    occurrence_counts,
    select_branch_variable,
)
from simplesat.utils.exceptions import ConfigurationError


class TestMostFrequentVariable(unittest.TestCase):
    """Test cases for the default most-frequent heuristic."""

    def test_is_default(self):
        self.assertIs(select_branch_variable, most_frequent_variable)

    def test_picks_variable_in_most_clauses(self):
        clauses = [[1, 2], [2, 3], [-2, -3]]
        self.assertEqual(most_frequent_variable(clauses, Assignment(3)), 2)

    def test_ties_go_to_lowest_index(self):
        clauses = [[3, 4], [1, 2]]
        self.assertEqual(most_frequent_variable(clauses, Assignment(4)), 1)

    def test_counts_clauses_not_occurrences(self):
        # x3 occurs three times but in one clause only
        clauses = [[3, 3, -3, 2], [1, 2], [1, -2]]
        counts = occurrence_counts(clauses, Assignment(3))
        self.assertEqual(counts.tolist(), [0, 2, 3, 1])
        self.assertEqual(most_frequent_variable(clauses, Assignment(3)), 2)

    def test_ignores_satisfied_clauses_and_assigned_variables(self):
        assignment = Assignment(3)
        assignment.assign(2, AssignedValue.TRUE)
        clauses = [[1, 2], [2, 3], [-2, 3]]
        counts = occurrence_counts(clauses, assignment)
        self.assertEqual(counts.tolist(), [0, 0, 0, 1])
        self.assertEqual(most_frequent_variable(clauses, assignment), 3)

    def test_never_picks_assigned_variable(self):
        assignment = Assignment(3)
        assignment.assign(1, AssignedValue.FALSE)
        self.assertEqual(most_frequent_variable([], assignment), 2)

    def test_nothing_left_to_pick(self):
        assignment = Assignment(2)
        assignment.assign(1, AssignedValue.TRUE)
        assignment.assign(2, AssignedValue.TRUE)
        self.assertIsNone(most_frequent_variable([[1, 2]], assignment))
        self.assertIsNone(most_frequent_variable([], Assignment(0)))

    def test_returns_plain_int(self):
        variable = most_frequent_variable([[1, 2]], Assignment(2))
        self.assertIs(type(variable), int)


class TestOrderedHeuristic(unittest.TestCase):
    """Test cases for the ordered heuristic."""

    def test_lowest_variable_of_unsatisfied_clauses(self):
        self.assertEqual(first_unassigned_variable([[3, 4], [-5, 2]], Assignment(5)), 2)

    def test_falls_back_to_any_unassigned_variable(self):
        assignment = Assignment(3)
        assignment.assign(1, AssignedValue.TRUE)
        self.assertEqual(first_unassigned_variable([[1]], assignment), 2)

    def test_nothing_left_to_pick(self):
        self.assertIsNone(first_unassigned_variable([], Assignment(0)))


class TestHeuristicLookup(unittest.TestCase):
    def test_known_names(self):
        self.assertEqual(set(HEURISTICS), {"most_frequent", "ordered"})
        self.assertIs(get_heuristic("ordered"), first_unassigned_variable)

    def test_unknown_name(self):
        with self.assertRaises(ConfigurationError) as ctx:
            get_heuristic("vsids")
        self.assertEqual(ctx.exception.key, "solver.heuristic")


if __name__ == "__main__":
    unittest.main()
