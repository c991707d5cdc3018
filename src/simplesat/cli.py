#!/usr/bin/env python
"""
Command-line interface: solve one DIMACS CNF file.

Exit status: 0 satisfiable (or usage shown), 1 unsatisfiable, 2 input file
not found, 3 malformed input, 4 configuration error.
"""
import argparse
import logging
import os
import sys

from simplesat.solvers import SolverRegistry, get_config, load_config, solve
from simplesat.solvers.heuristics import HEURISTICS
from simplesat.utils.cnf import load_cnf_file
from simplesat.utils.exceptions import (
    ConfigurationError,
    DimacsFormatError,
    InvalidClauseError,
)
from simplesat.utils.logging_utils import StructuredLogger, configure_logging

logger = logging.getLogger(__name__)

USAGE = "Usage: simplesat <input.cnf>"

EXIT_USAGE = 0
EXIT_SAT = 0
EXIT_UNSAT = 1
EXIT_FILE_NOT_FOUND = 2
EXIT_FORMAT_ERROR = 3
EXIT_CONFIG_ERROR = 4


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="simplesat",
        description="Decide satisfiability of a DIMACS CNF formula with DPLL",
    )

    # Exactly one input is expected; the count is checked by main()
    parser.add_argument("inputs", nargs="*", help="Path to a DIMACS .cnf file")

    parser.add_argument(
        "--solver",
        default=None,
        help="Registered solver to use (default: solver.name from the configuration)",
    )

    parser.add_argument(
        "--heuristic",
        default=None,
        help=f"Branching heuristic, one of: {', '.join(sorted(HEURISTICS))}",
    )

    parser.add_argument(
        "--no-pure-literals",
        action="store_true",
        help="Disable pure-literal elimination",
    )

    parser.add_argument("--config", default=None, help="YAML or JSON configuration file")

    parser.add_argument(
        "--stats-dir",
        default=None,
        help="Directory to write structured per-run statistics to",
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)


def _apply_overrides(args) -> None:
    """Fold command-line flags into the global configuration."""
    config = get_config()
    if args.solver is not None:
        config.set("solver.name", args.solver)
    if args.heuristic is not None:
        config.set("solver.heuristic", args.heuristic)
    if args.no_pure_literals:
        config.set("solver.pure_literal_elimination", False)
    if args.stats_dir is not None:
        config.set("output.stats_dir", args.stats_dir)

    solver_name = config.get("solver.name")
    if solver_name not in SolverRegistry.list_solvers():
        raise ConfigurationError(
            f"Unknown solver '{solver_name}', available: {', '.join(SolverRegistry.list_solvers())}",
            key="solver.name",
        )
    if config.get("solver.heuristic") not in HEURISTICS:
        raise ConfigurationError(
            f"Unknown branching heuristic '{config.get('solver.heuristic')}'",
            key="solver.heuristic",
        )


def print_result(result) -> None:
    if result.is_sat:
        print("SAT")
        for index in range(1, len(result.model)):
            print(f"x{index} = {result.model[index]}")
    else:
        print("UNSAT")


def run(cnf_path: str) -> int:
    """
    Load, solve and report one instance using the global configuration.

    Returns:
        Exit status
    """
    config = get_config()

    try:
        formula = load_cnf_file(cnf_path)
    except DimacsFormatError as e:
        print(f"Invalid input file {cnf_path}: {e}", file=sys.stderr)
        return EXIT_FORMAT_ERROR

    stats_dir = config.get("output.stats_dir")
    if not stats_dir:
        return _solve_and_report(cnf_path, formula)

    with StructuredLogger(
        output_dir=stats_dir,
        experiment_name=os.path.splitext(os.path.basename(cnf_path))[0],
        format_type=config.get("output.stats_format", "json"),
    ) as stats_logger:
        return _solve_and_report(cnf_path, formula, stats_logger)


def _solve_and_report(cnf_path: str, formula, stats_logger=None) -> int:
    try:
        result = solve(formula.num_variables, formula.clauses)
    except InvalidClauseError as e:
        if stats_logger:
            stats_logger.log_exception(cnf_path, e)
        print(f"Invalid input file {cnf_path}: {e}", file=sys.stderr)
        return EXIT_FORMAT_ERROR
    except Exception as e:
        if stats_logger:
            stats_logger.log_exception(cnf_path, e)
        raise

    logger.info(str(result))
    if stats_logger:
        stats_logger.log_solve_result(cnf_path, result)

    print_result(result)
    return EXIT_SAT if result.is_sat else EXIT_UNSAT


def main(argv=None) -> int:
    """Entry point of the ``simplesat`` console script."""
    args = parse_args(argv)

    if len(args.inputs) != 1:
        print(USAGE)
        return EXIT_USAGE

    cnf_path = args.inputs[0]
    if not os.path.isfile(cnf_path):
        print(f"File not found: {cnf_path}")
        return EXIT_FILE_NOT_FOUND

    try:
        config = load_config(args.config)
        _apply_overrides(args)
        configure_logging(
            level=logging.DEBUG if args.verbose else config.get("logging.level", "WARNING"),
            log_file=config.get("logging.file"),
            fmt=config.get("logging.format"),
        )
    except (ConfigurationError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    return run(cnf_path)


if __name__ == "__main__":
    sys.exit(main())
