# logic/__init__.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Expression tree model and evaluation semantics

"""Propositional expression trees and their evaluation.

This package provides:
  • OperatorKind: node kinds with their required arity
  • Node: immutable expression tree node, plus helper constructors
  • Evaluator / evaluate: truth value of a tree under one assignment
  • FailedImplication: diagnostic emitted when an implication fails
  • EvaluationError and its subclasses for malformed trees or assignments

Example:
    >>> from logic import evaluate, implies, symbol
    >>> evaluate(implies(symbol("p"), symbol("q")), {"p": True, "q": False})
    False
"""

from .operators import OperatorKind
from .node import (
    Node,
    format_bool,
    free_variables,
    build,
    symbol,
    true,
    false,
    not_,
    implies,
    and_,
    or_,
    nor,
    nand,
    xor,
)
from .evaluator import Evaluator, FailedImplication, evaluate
from .exceptions import (
    EvaluationError,
    UnboundSymbolError,
    ArityError,
    UnsupportedOperatorError,
)

__all__ = [
    "OperatorKind",
    "Node",
    "format_bool",
    "free_variables",
    "build",
    "symbol",
    "true",
    "false",
    "not_",
    "implies",
    "and_",
    "or_",
    "nor",
    "nand",
    "xor",
    "Evaluator",
    "FailedImplication",
    "evaluate",
    "EvaluationError",
    "UnboundSymbolError",
    "ArityError",
    "UnsupportedOperatorError",
]
