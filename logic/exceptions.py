# logic/exceptions.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Exceptions raised while evaluating expression trees

"""Evaluation errors for propositional expression trees.

All of these describe structural problems in the tree or in the assignment
it is evaluated against. They are discovered only when a node is evaluated,
since nodes are not validated on construction.
"""


class EvaluationError(RuntimeError):
    """Base class for failures that abort an evaluation pass."""

    pass


class UnboundSymbolError(EvaluationError):
    """A symbol node names a variable missing from the assignment."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Symbol {name!r} cannot be found in the assignment")


class ArityError(EvaluationError):
    """A node has a child count that does not match its operator kind."""

    def __init__(self, kind, expected: int, actual: int):
        self.kind = kind
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{kind} expects {expected} operand(s) but has {actual}"
        )


class UnsupportedOperatorError(EvaluationError):
    """A node kind has no evaluation rule."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Operator {kind!r} is not supported by evaluation")
