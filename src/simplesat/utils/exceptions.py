"""
Custom exception classes for SAT solving operations.

These exceptions cover the failure modes that are reported to the caller:
malformed DIMACS input, clauses that reference variables outside the
declared range, models that fail verification and bad configuration.
Conflicts found during search are not exceptions; they drive backtracking.
"""


class SATBaseException(Exception):
    """Base exception class for all simplesat related exceptions."""

    def __init__(self, message: str = None):
        self.message = message
        super().__init__(message)


class DimacsFormatError(SATBaseException, ValueError):
    """
    Raised when a DIMACS CNF description cannot be parsed.

    Attributes:
        line: The offending input line, if known
        line_number: 1-based line number of the offending line, if known
    """

    def __init__(self, message="Invalid DIMACS input", line=None, line_number=None):
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)


class InvalidClauseError(SATBaseException):
    """
    Raised when a clause holds a literal that is zero or references a
    variable outside ``1..num_vars``.
    """

    def __init__(self, message="Invalid clause detected", clause=None):
        self.clause = clause
        if clause is not None:
            message = f"{message}: {clause}"
        super().__init__(message)


class InconsistentAssignmentError(SATBaseException):
    """
    Raised when an assignment reported as a solution does not satisfy
    the formula it was produced for.
    """

    def __init__(self, message="Inconsistent variable assignment detected", clause=None):
        self.clause = clause
        if clause is not None:
            message = f"{message}: clause {clause} is not satisfied"
        super().__init__(message)


class ConfigurationError(SATBaseException):
    """
    Raised when there's a problem with solver configuration.
    """

    def __init__(self, message="Invalid solver configuration", key=None):
        self.key = key
        if key is not None:
            message = f"{message} ({key})"
        super().__init__(message)
