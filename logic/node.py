# logic/node.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Expression tree nodes for propositional formulas

"""Expression tree nodes for propositional formulas.

A formula is a tree of `Node` values. Every node has an operator kind, an
optional display name and an ordered tuple of children. Symbol nodes use the
name as the variable identifier; any other node may carry a name that is used
as its label in reports (typically the source text of the whole formula).

Nodes are immutable and hashable. Their child count is not validated on
construction: a malformed tree can be built and is rejected by the evaluator
the first time the offending node is evaluated.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .operators import OperatorKind


def format_bool(value: bool) -> str:
    """Render a boolean in its literal form (``true``/``false``)."""
    return "true" if value else "false"


@dataclass(frozen=True, slots=True)
class Node:
    """One node of a propositional expression tree.

    Attributes:
        kind: Operator kind of this node
        name: Variable identifier for symbols, optional label otherwise
        children: Ordered operands of this node
    """

    kind: OperatorKind
    name: Optional[str] = None
    children: Tuple[Node, ...] = ()

    def __post_init__(self):
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def arity(self) -> int:
        """Number of children actually attached to this node."""
        return len(self.children)

    @property
    def label(self) -> str:
        """Display label: the node's name if it has one, its rendering otherwise."""
        if self.name:
            return self.name
        return str(self)

    def __str__(self) -> str:
        """Render the subtree in the formula syntax accepted by the parser.

        Returns:
            Fully parenthesized text for binary operators, prefix ``~`` for
            negation, the identifier for symbols and TRUE/FALSE for constants
        """
        kind = self.kind
        if kind is OperatorKind.SYMBOL:
            return self.name if self.name is not None else "?"
        if not isinstance(kind, OperatorKind):
            return f"{kind}({', '.join(str(c) for c in self.children)})"
        if kind.is_constant and not self.children:
            return kind.connective
        if kind is OperatorKind.NOT and len(self.children) == 1:
            return f"~{self.children[0]}"
        if kind.is_binary and len(self.children) == 2:
            left, right = self.children
            return f"({left} {kind.connective} {right})"
        # malformed node, render it in call form
        return f"{kind}({', '.join(str(c) for c in self.children)})"


def symbol(name: str) -> Node:
    """Create a variable reference."""
    return Node(OperatorKind.SYMBOL, name)


def true(name: Optional[str] = None) -> Node:
    return Node(OperatorKind.TRUE, name)


def false(name: Optional[str] = None) -> Node:
    return Node(OperatorKind.FALSE, name)


def not_(operand: Node, name: Optional[str] = None) -> Node:
    return Node(OperatorKind.NOT, name, (operand,))


def implies(antecedent: Node, consequent: Node, name: Optional[str] = None) -> Node:
    return Node(OperatorKind.IMPLICATION, name, (antecedent, consequent))


def and_(left: Node, right: Node, name: Optional[str] = None) -> Node:
    return Node(OperatorKind.AND, name, (left, right))


def or_(left: Node, right: Node, name: Optional[str] = None) -> Node:
    return Node(OperatorKind.OR, name, (left, right))


def nor(left: Node, right: Node, name: Optional[str] = None) -> Node:
    return Node(OperatorKind.NOR, name, (left, right))


def nand(left: Node, right: Node, name: Optional[str] = None) -> Node:
    return Node(OperatorKind.NAND, name, (left, right))


def xor(left: Node, right: Node, name: Optional[str] = None) -> Node:
    return Node(OperatorKind.XOR, name, (left, right))


def free_variables(root: Node) -> List[str]:
    """Collect the distinct symbol names of a tree.

    Names are listed in order of first appearance in a left-to-right
    pre-order traversal, which makes the order stable for a given tree.

    Args:
        root: Root of the expression tree

    Returns:
        Ordered list of distinct variable names
    """
    seen = set()
    ordered: List[str] = []
    stack: List[Node] = [root]

    while stack:
        node = stack.pop()
        if node.kind is OperatorKind.SYMBOL and node.name is not None:
            if node.name not in seen:
                seen.add(node.name)
                ordered.append(node.name)
        stack.extend(reversed(node.children))

    return ordered


def build(kind: OperatorKind, children: Iterable[Node] = (), name: Optional[str] = None) -> Node:
    """Create a node of any kind without checking its arity."""
    return Node(kind, name, tuple(children))
