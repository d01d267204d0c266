# logic/evaluator.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Recursive evaluation of propositional expression trees

"""Evaluation of propositional expression trees against an assignment.

The evaluator walks a tree recursively and computes its truth value for one
assignment of its free variables. Arity and variable binding are checked as
each node is reached; any violation raises an `EvaluationError` and aborts the
pass without a partial result.

Implication is the one connective with a reporting side effect: whenever its
antecedent holds and its consequent does not, a `FailedImplication` record is
handed to the evaluator's listener before the node yields false. Both operands
are evaluated exactly once and the cached values serve the verdict and the
report alike.

NOR, NAND and XOR follow their standard two-valued truth tables.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, Tuple

from .exceptions import ArityError, UnboundSymbolError, UnsupportedOperatorError
from .node import Node, format_bool
from .operators import OperatorKind
from utils.logger import get_logger


@dataclass(frozen=True, slots=True)
class FailedImplication:
    """Report of an implication whose antecedent held but consequent did not.

    Attributes:
        antecedent: Label of the left operand
        antecedent_value: Value the left operand evaluated to
        consequent: Label of the right operand
        consequent_value: Value the right operand evaluated to
    """

    antecedent: str
    antecedent_value: bool
    consequent: str
    consequent_value: bool

    def __str__(self) -> str:
        return (
            f'Failed implication "{self.antecedent}({format_bool(self.antecedent_value)})'
            f' => {self.consequent}({format_bool(self.consequent_value)})"'
        )


ImplicationListener = Callable[[FailedImplication], None]


class Evaluator:
    """Computes the truth value of expression trees.

    Attributes:
        on_failed_implication: Optional callable receiving every
            `FailedImplication` produced while evaluating
    """

    def __init__(self, on_failed_implication: Optional[ImplicationListener] = None):
        self.on_failed_implication = on_failed_implication
        self._rules = {
            OperatorKind.SYMBOL: self._eval_symbol,
            OperatorKind.TRUE: self._eval_constant,
            OperatorKind.FALSE: self._eval_constant,
            OperatorKind.NOT: self._eval_not,
            OperatorKind.IMPLICATION: self._eval_implication,
            OperatorKind.AND: self._eval_and,
            OperatorKind.OR: self._eval_or,
            OperatorKind.NOR: self._eval_nor,
            OperatorKind.NAND: self._eval_nand,
            OperatorKind.XOR: self._eval_xor,
        }

    def evaluate(self, node: Node, context: Mapping[str, bool]) -> bool:
        """Evaluate a tree under one variable assignment.

        Args:
            node: Root of the (sub)tree to evaluate
            context: Truth value of every variable reachable from ``node``

        Returns:
            Truth value of the tree

        Raises:
            UnboundSymbolError: A symbol is missing from ``context``
            ArityError: A node has the wrong number of children
            UnsupportedOperatorError: A node kind has no evaluation rule
        """
        try:
            rule = self._rules.get(node.kind)
        except TypeError:
            rule = None
        if rule is None:
            raise UnsupportedOperatorError(node.kind)
        return rule(node, context)

    def _operands(self, node: Node, expected: int) -> Tuple[Node, ...]:
        if len(node.children) != expected:
            raise ArityError(node.kind, expected, len(node.children))
        return node.children

    def _binary(self, node: Node, context: Mapping[str, bool]) -> Tuple[bool, bool]:
        left, right = self._operands(node, 2)
        return self.evaluate(left, context), self.evaluate(right, context)

    def _eval_symbol(self, node: Node, context: Mapping[str, bool]) -> bool:
        self._operands(node, 0)
        try:
            return bool(context[node.name])
        except KeyError:
            raise UnboundSymbolError(node.name) from None

    def _eval_constant(self, node: Node, context: Mapping[str, bool]) -> bool:
        self._operands(node, 0)
        return node.kind is OperatorKind.TRUE

    def _eval_not(self, node: Node, context: Mapping[str, bool]) -> bool:
        (operand,) = self._operands(node, 1)
        return not self.evaluate(operand, context)

    def _eval_implication(self, node: Node, context: Mapping[str, bool]) -> bool:
        antecedent, consequent = self._operands(node, 2)
        p = self.evaluate(antecedent, context)
        q = self.evaluate(consequent, context)

        if p and not q:
            failure = FailedImplication(antecedent.label, p, consequent.label, q)
            get_logger().debug(f"Implication failed: {failure}")
            if self.on_failed_implication is not None:
                self.on_failed_implication(failure)
            return False

        return True

    def _eval_and(self, node: Node, context: Mapping[str, bool]) -> bool:
        left, right = self._binary(node, context)
        return left and right

    def _eval_or(self, node: Node, context: Mapping[str, bool]) -> bool:
        left, right = self._binary(node, context)
        return left or right

    def _eval_nor(self, node: Node, context: Mapping[str, bool]) -> bool:
        left, right = self._binary(node, context)
        return not (left or right)

    def _eval_nand(self, node: Node, context: Mapping[str, bool]) -> bool:
        left, right = self._binary(node, context)
        return not (left and right)

    def _eval_xor(self, node: Node, context: Mapping[str, bool]) -> bool:
        left, right = self._binary(node, context)
        return left != right


def evaluate(
    node: Node,
    context: Mapping[str, bool],
    diagnostics: Optional[List[FailedImplication]] = None,
) -> bool:
    """Evaluate a tree under one assignment.

    Convenience wrapper around `Evaluator`. Failed implications are appended
    to ``diagnostics`` when a list is given and dropped otherwise.

    Args:
        node: Root of the tree
        context: Variable assignment
        diagnostics: Optional list collecting `FailedImplication` records

    Returns:
        Truth value of the tree
    """
    listener = diagnostics.append if diagnostics is not None else None
    return Evaluator(listener).evaluate(node, context)
