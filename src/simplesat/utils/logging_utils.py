"""
Logging utilities for simplesat.

This module configures Python's logging for the package and provides a
StructuredLogger that records solver runs as JSON Lines or CSV, plus a
NumpyJSONEncoder for serializing numpy scalars and arrays found in solver
statistics.
"""

import csv
import json
import logging
import os
import time
from datetime import datetime
from typing import Any

import numpy as np

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class NumpyJSONEncoder(json.JSONEncoder):
    """JSON encoder that can handle NumPy arrays and scalars."""

    def default(self, obj):
        """Convert numpy objects to standard Python types."""
        if isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.bool_):
            return bool(obj)
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        return super().default(obj)


def configure_logging(
    level: int | str = logging.WARNING,
    log_file: str | None = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Configure the ``simplesat`` package logger.

    Existing handlers are replaced, so calling this twice does not
    duplicate output.

    Args:
        level: Logging level (name or number) for console and file output
        log_file: Optional path of a log file
        fmt: Format string for both handlers

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level}")

    logger = logging.getLogger("simplesat")
    logger.setLevel(level)

    # Remove any existing handlers
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(fmt)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


class StructuredLogger:
    """
    A logger for structured solver records.

    Every event type gets its own file in ``output_dir``, named
    ``<experiment_name>_<event_type>.jsonl`` (or ``.csv``).
    """

    FORMAT_JSON = "json"
    FORMAT_CSV = "csv"

    def __init__(self, output_dir: str, experiment_name: str, format_type: str = "json"):
        """
        Initialize the structured logger.

        Args:
            output_dir: Directory to save log files in
            experiment_name: Name of the run (used in filenames)
            format_type: Format to save logs in ("json" or "csv")
        """
        if format_type not in (self.FORMAT_JSON, self.FORMAT_CSV):
            raise ValueError(f"Unsupported structured log format: {format_type}")

        self.output_dir = output_dir
        self.experiment_name = experiment_name
        self.format_type = format_type

        # Ensure the output directory exists
        os.makedirs(output_dir, exist_ok=True)

        self.files = {}
        self.write_counts = {}
        self.start_time = datetime.now().isoformat()

    def _get_file(self, event_type: str) -> tuple:
        """
        Get the file handle for a given event type.

        Returns:
            Tuple of (file_handle, is_new)
        """
        if event_type not in self.files:
            ext = ".jsonl" if self.format_type == self.FORMAT_JSON else ".csv"
            filepath = os.path.join(self.output_dir, f"{self.experiment_name}_{event_type}{ext}")

            file = open(
                filepath,
                "w",
                newline="" if self.format_type == self.FORMAT_CSV else None,
            )
            self.files[event_type] = file
            self.write_counts[event_type] = 0
            return file, True

        return self.files[event_type], False

    def _write_event(self, event_type: str, data: dict[str, Any]):
        file, is_new = self._get_file(event_type)

        if self.format_type == self.FORMAT_JSON:
            file.write(json.dumps(data, cls=NumpyJSONEncoder) + "\n")
        else:
            writer = csv.DictWriter(file, fieldnames=list(data.keys()))
            if is_new:
                writer.writeheader()
            writer.writerow(data)
        file.flush()

        self.write_counts[event_type] += 1

    def log_solve_result(self, instance: str, result, statistics: dict | None = None):
        """
        Log the outcome of one solver run.

        Args:
            instance: Name or path of the solved instance
            result: SolverResult returned by the solver
            statistics: Solver statistics; defaults to ``result.statistics``
        """
        stats = statistics if statistics is not None else result.statistics
        data = {
            "instance": instance,
            "status": result.status.value,
            "runtime": result.runtime,
            "satisfied_clauses": result.satisfied_clauses,
            "total_clauses": result.total_clauses,
            "timestamp": time.time(),
        }
        if self.format_type == self.FORMAT_JSON:
            data["statistics"] = stats
        else:
            # Flatten for CSV columns
            data.update({f"stat_{key}": value for key, value in stats.items()})
        self._write_event("solve", data)

    def log_exception(self, instance: str, exception: BaseException):
        """
        Log a failed run.

        Args:
            instance: Name or path of the instance being solved
            exception: The exception that aborted the run
        """
        data = {
            "instance": instance,
            "exception_type": type(exception).__name__,
            "exception_message": str(exception),
            "timestamp": time.time(),
        }
        self._write_event("exception", data)

    def close(self):
        """Close all open file handles."""
        for file in self.files.values():
            file.close()
        self.files = {}

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
