# tests/conftest.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Veritas test suite.

The configuration handles:
- Python path setup for module imports
- Common formula fixtures
- A line collector standing in for the logger as the report sink
"""

import logging
import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from utils.logger import LogLevel, TruthTableFormatter, get_logger  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify the project packages are importable before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import core
        import logic
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def implication_formula():
    """Provide the canonical implication formula."""
    return "p => q"


@pytest.fixture
def nested_formula():
    """Provide a formula with a repeated variable."""
    return "p AND (p OR k)"


@pytest.fixture
def lines():
    """Collect report lines emitted by a truth table.

    Returns:
        List that the table appends every output line to
    """
    return []


class _ListHandler(logging.Handler):
    """Logging handler keeping formatted records in memory."""

    def __init__(self):
        super().__init__(logging.DEBUG)
        self.setFormatter(TruthTableFormatter())
        self.messages = []

    def emit(self, record):
        self.messages.append(self.format(record))


@pytest.fixture
def captured_log():
    """Capture everything written through the project logger.

    The project logger writes to the stdout stream it saw when it was first
    created, so output is collected with an extra handler instead of capsys.

    Yields:
        List of formatted log lines, in emission order
    """
    logger = get_logger()
    handler = _ListHandler()
    logger.logger.addHandler(handler)
    previous_level = logger.logger.level
    logger.set_level(LogLevel.INFO)
    try:
        yield handler.messages
    finally:
        logger.logger.removeHandler(handler)
        logger.logger.setLevel(previous_level)
