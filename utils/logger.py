# utils/logger.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Logging utility for truth table generation with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for truth table generation."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class TruthTableLogger:
    """Centralized logger for truth table generation with structured output."""

    def __init__(self, name: str = "veritas", level: LogLevel = LogLevel.INFO):
        """Initialize the truth table logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(TruthTableFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for truth table events
    def table_start(self, formula_label: str, variables):
        """Log truth table header."""
        self.debug(f"=== Truth table for \"{formula_label}\" ===")
        self.debug(f"Variables ({len(variables)}): {', '.join(variables) or '-'}")

    def truth_table_row(self, line: str):
        """Log one rendered truth table row."""
        self.info(line)

    def failed_implication(self, line: str):
        """Log a failed implication diagnostic."""
        self.info(line)

    def row_error(self, line: str):
        """Log a row that could not be evaluated."""
        self.warning(line)

    def table_summary(self, rows: int, true_rows: int, false_rows: int, classification: str):
        """Log truth table summary."""
        self.info(f"\nRows: {rows}  true: {true_rows}  false: {false_rows}")
        self.info(f">>> {classification.upper()} <<<")


class TruthTableFormatter(logging.Formatter):
    """Custom formatter for truth table logging with clean output."""

    def format(self, record):
        # For INFO level, show message only (clean output)
        if record.levelno == logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[TruthTableLogger] = None


def get_logger(name: str = "veritas") -> TruthTableLogger:
    """Get or create the global truth table logger instance.

    Args:
        name: Logger name (default: "veritas")

    Returns:
        TruthTableLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TruthTableLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(debug: bool = False):
    """Configure logging based on command line flags.

    Truth table rows are INFO records, so the default level keeps them visible.

    Args:
        debug: Enable debug output
    """
    set_log_level(LogLevel.DEBUG if debug else LogLevel.INFO)
