# logic/operators.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Operator kinds of propositional expression trees

from enum import Enum


class OperatorKind(Enum):
    """Kinds of nodes that may appear in a propositional expression tree.

    Each member carries the number of children a node of that kind must have
    and the connective used when the node is rendered as text.
    """

    SYMBOL = (0, None)
    TRUE = (0, "TRUE")
    FALSE = (0, "FALSE")
    NOT = (1, "~")
    IMPLICATION = (2, "=>")
    AND = (2, "AND")
    OR = (2, "OR")
    NOR = (2, "NOR")
    NAND = (2, "NAND")
    XOR = (2, "XOR")

    def __init__(self, arity: int, connective):
        self.arity = arity
        self.connective = connective

    def __str__(self) -> str:
        return self.name

    @property
    def is_constant(self) -> bool:
        return self in (OperatorKind.TRUE, OperatorKind.FALSE)

    @property
    def is_binary(self) -> bool:
        return self.arity == 2
