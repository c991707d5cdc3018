"""
Unit tests for DIMACS CNF parsing and writing.
"""

import io
import os
import shutil
import sys
import tempfile
import unittest

# Add src/ to the path so we can import the package without installing it
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from simplesat.utils.cnf import (
    CNFFormula,
    formula_to_dimacs,
    load_cnf_file,
    parse_dimacs,
    save_cnf_file,
)
from simplesat.utils.exceptions import DimacsFormatError

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")


class TestParseDimacs(unittest.TestCase):
    """Test cases for parse_dimacs."""

    def test_basic_formula(self):
        formula = parse_dimacs("c example\np cnf 3 2\n1 -3 0\n2 3 -1 0\n")
        self.assertIsInstance(formula, CNFFormula)
        self.assertEqual(formula.num_variables, 3)
        self.assertEqual(formula.num_clauses, 2)
        self.assertEqual(formula.clauses, [[1, -3], [2, 3, -1]])
        self.assertEqual(formula.comments, ["example"])

    def test_file_object(self):
        formula = parse_dimacs(io.StringIO("p cnf 2 1\n1 2 0\n"))
        self.assertEqual(formula.clauses, [[1, 2]])

    def test_clause_spanning_lines(self):
        formula = parse_dimacs("p cnf 3 1\n1 2\n-3 0\n")
        self.assertEqual(formula.clauses, [[1, 2, -3]])

    def test_several_clauses_on_one_line(self):
        formula = parse_dimacs("p cnf 3 3\n1 0 -2 3 0 2 0\n")
        self.assertEqual(formula.clauses, [[1], [-2, 3], [2]])

    def test_lone_zero_is_empty_clause(self):
        formula = parse_dimacs("p cnf 2 2\n1 2 0\n0\n")
        self.assertEqual(formula.clauses, [[1, 2], []])

    def test_unterminated_last_clause_is_kept_with_warning(self):
        with self.assertLogs("simplesat.utils.cnf", level="WARNING") as logs:
            formula = parse_dimacs("p cnf 2 2\n1 0\n-1 2")
        self.assertEqual(formula.clauses, [[1], [-1, 2]])
        self.assertEqual(len(logs.output), 1)
        self.assertIn("ends inside a clause", logs.output[0])

    def test_blank_lines_and_whitespace(self):
        formula = parse_dimacs("\n  c indented comment\n\np  cnf  2   1 \n\t1   -2 0\n\n")
        self.assertEqual(formula.num_variables, 2)
        self.assertEqual(formula.clauses, [[1, -2]])
        self.assertEqual(formula.comments, ["indented comment"])

    def test_percent_trailer_ends_input(self):
        formula = parse_dimacs("p cnf 2 1\n1 2 0\n%\n0\n")
        self.assertEqual(formula.clauses, [[1, 2]])

    def test_missing_problem_line(self):
        formula = parse_dimacs("1 2 0\n")
        self.assertEqual(formula.num_variables, 0)
        self.assertEqual(formula.clauses, [[1, 2]])

    def test_empty_input(self):
        formula = parse_dimacs("")
        self.assertEqual(formula.num_variables, 0)
        self.assertEqual(formula.clauses, [])

    def test_malformed_problem_line(self):
        for line in ("p cnf 3", "p dnf 3 2", "p cnf three 2", "p cnf 3 2 1", "p cnf -3 2"):
            with self.subTest(line=line):
                with self.assertRaises(DimacsFormatError) as ctx:
                    parse_dimacs(f"c header\n{line}\n1 0\n")
                self.assertEqual(ctx.exception.line_number, 2)
                self.assertEqual(ctx.exception.line, line)
                self.assertIn("problem description line", str(ctx.exception))

    def test_repeated_problem_line(self):
        with self.assertRaises(DimacsFormatError):
            parse_dimacs("p cnf 1 1\np cnf 1 1\n1 0\n")

    def test_non_integer_literal(self):
        with self.assertRaises(DimacsFormatError) as ctx:
            parse_dimacs("p cnf 2 1\n1 x2 0\n")
        self.assertIn("'x2'", str(ctx.exception))
        self.assertIn("(line 2)", str(ctx.exception))

    def test_format_error_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_dimacs("p cnf\n")

    def test_clause_count_mismatch_only_warns(self):
        with self.assertLogs("simplesat.utils.cnf", level="WARNING") as logs:
            formula = parse_dimacs("p cnf 2 3\n1 2 0\n")
        self.assertEqual(formula.clauses, [[1, 2]])
        self.assertIn("declares 3 clauses", logs.output[0])

    def test_literals_beyond_declared_count_are_kept(self):
        # Range checking belongs to the solver
        formula = parse_dimacs("p cnf 1 1\n1 5 0\n")
        self.assertEqual(formula.clauses, [[1, 5]])


class TestCNFFiles(unittest.TestCase):
    """Test cases for loading and saving DIMACS files."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_load_fixture(self):
        formula = load_cnf_file(os.path.join(DATA_DIR, "small_sat.cnf"))
        self.assertEqual(formula.num_variables, 5)
        self.assertEqual(len(formula.clauses), 10)
        self.assertEqual(formula.clauses[0], [1, -2, 3])
        self.assertEqual(formula.clauses[-1], [-5, 1, 4])

    def test_load_bad_fixture(self):
        with self.assertRaises(DimacsFormatError):
            load_cnf_file(os.path.join(DATA_DIR, "bad_problem_line.cnf"))

    def test_load_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_cnf_file(os.path.join(self.temp_dir, "missing.cnf"))

    def test_formula_to_dimacs(self):
        text = formula_to_dimacs([[1, -2], [3]], comments=["generated"])
        self.assertEqual(text, "c generated\np cnf 3 2\n1 -2 0\n3 0\n")

    def test_formula_to_dimacs_explicit_variable_count(self):
        self.assertEqual(formula_to_dimacs([], num_variables=4), "p cnf 4 0\n")

    def test_save_and_load(self):
        path = os.path.join(self.temp_dir, "out.cnf")
        save_cnf_file(path, [[1, 2], [-1], []], num_variables=2, comments=["saved"])
        formula = load_cnf_file(path)
        self.assertEqual(formula.num_variables, 2)
        self.assertEqual(formula.num_clauses, 3)
        self.assertEqual(formula.clauses, [[1, 2], [-1], []])
        self.assertEqual(formula.comments, ["saved"])


if __name__ == "__main__":
    unittest.main()
