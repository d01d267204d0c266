# core/__init__.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Core module public API for truth table generation

"""Truth table generation for propositional expression trees.

The core enumerates every assignment of a formula's free variables, evaluates
the formula for each one and reports the resulting rows in a fixed, binary
counting order.

Primary Components:
    Assignment: Immutable, ordered variable assignment for one row
    TruthTable: Enumeration driver producing and reporting the rows
    TruthTableRow: One evaluated assignment with its diagnostics
    TruthTableSummary: Row counts and tautology/contradiction classification
    ErrorPolicy: Abort the run or skip rows that fail to evaluate

Example:
    >>> from core import TruthTable
    >>> from logic import implies, symbol
    >>> table = TruthTable(implies(symbol("p"), symbol("q"), name="p => q"))
    >>> [row.result for row in table.run()]
    [True, True, False, True]
"""

from .assignment import Assignment
from .truth_table import (
    ErrorPolicy,
    TruthTable,
    TruthTableRow,
    TruthTableSummary,
    format_row,
    truth_table,
)

__all__ = [
    "Assignment",
    "ErrorPolicy",
    "TruthTable",
    "TruthTableRow",
    "TruthTableSummary",
    "format_row",
    "truth_table",
]

__version__ = "1.0.0"
