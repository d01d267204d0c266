# parser/__init__.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Formula parsing components

"""Textual propositional formulas to expression trees.

The parser accepts formulas such as ``p => q``, ``~(p AND q)``,
``p NAND q`` or ``p AND (p OR k) OR s`` and returns the corresponding
`logic.node.Node` tree, ready for evaluation and truth table generation.

Core Functions:
    parse: Converts a formula string into an expression tree
    variables_of: Parses a formula and lists its free variables

Example:
    >>> from parser import parse
    >>> tree = parse("p => q")
    >>> tree.label
    'p => q'
"""

import dataclasses

from logic.node import free_variables
from logic.operators import OperatorKind
from .exceptions import ParseError
from .grammar import _FormulaParser
from utils.logger import get_logger


def parse(source: str):
    """Parse a formula string into an expression tree.

    Uses a fresh parser instance for each invocation. The root of the returned
    tree is named after the stripped source text so that reports quote the
    formula the way it was written; symbol roots keep their identifier.

    Args:
        source: Formula text

    Returns:
        Root node of the parsed formula

    Raises:
        ParseError: Formula is empty, malformed or uses unknown characters
    """
    logger = get_logger()
    parser = _FormulaParser()

    try:
        root = parser.parse(source)
    except ParseError:
        raise
    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc

    if root.kind is not OperatorKind.SYMBOL:
        root = dataclasses.replace(root, name=source.strip())
    return root


def variables_of(source: str):
    """Parse a formula and return its variables in first-appearance order."""
    return free_variables(parse(source))


__all__ = ["parse", "variables_of", "ParseError"]
