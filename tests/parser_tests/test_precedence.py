# tests/parser_tests/test_precedence.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Test suite for formula parser operator precedence and associativity

"""Test suite for operator precedence and associativity.

Operator precedence (highest to lowest):
1. () - parentheses for grouping
2. ~ - negation (right-associative)
3. AND, NAND (left-associative)
4. XOR (left-associative)
5. OR, NOR (left-associative)
6. => - implication (right-associative)
"""

import pytest
from parser import parse
from logic import symbol, not_, implies, and_, or_, nor, nand, xor
from utils.logger import get_logger

a, b, c, d = (symbol(n) for n in "abcd")


class TestFormulaPrecedence:
    """Test cases for operator precedence and associativity."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    PRECEDENCE_TEST_CASES = [
        # AND binds tighter than OR
        ("a | b & c", or_(a, and_(b, c))),
        ("a & b | c", or_(and_(a, b), c)),
        ("a AND (a OR b) OR c", or_(and_(a, or_(a, b)), c)),
        # NOT binds tightest
        ("~a & b", and_(not_(a), b)),
        ("~a => b", implies(not_(a), b)),
        ("~~a", not_(not_(a))),
        ("NOT a OR b", or_(not_(a), b)),
        # Implication binds loosest
        ("a & b => c", implies(and_(a, b), c)),
        ("a => b | c", implies(a, or_(b, c))),
        ("a | b => c & d", implies(or_(a, b), and_(c, d))),
        # XOR sits between AND and OR
        ("a XOR b & c", xor(a, and_(b, c))),
        ("a | b XOR c", or_(a, xor(b, c))),
        # NAND and NOR share their level with AND and OR
        ("a NAND b | c", or_(nand(a, b), c)),
        ("a NOR b & c", nor(a, and_(b, c))),
        ("a & b NAND c", nand(and_(a, b), c)),
        # Parentheses override precedence
        ("a & (b | c)", and_(a, or_(b, c))),
        ("(a => b) => c", implies(implies(a, b), c)),
        ("~(a | b) & c", and_(not_(or_(a, b)), c)),
    ]

    @pytest.mark.parametrize("formula, expected", PRECEDENCE_TEST_CASES)
    def test_precedence(self, formula, expected):
        """Test that operators group according to their precedence."""
        tree = parse(formula)
        self.logger.debug(f"{formula!r} parsed as {tree}")

        assert str(tree) == str(expected)
        assert tree.children == expected.children

    ASSOCIATIVITY_TEST_CASES = [
        ("a & b & c", and_(and_(a, b), c)),
        ("a | b | c", or_(or_(a, b), c)),
        ("a XOR b XOR c", xor(xor(a, b), c)),
        ("a NOR b NOR c", nor(nor(a, b), c)),
        ("a => b => c", implies(a, implies(b, c))),
        ("a => b => c => d", implies(a, implies(b, implies(c, d)))),
    ]

    @pytest.mark.parametrize("formula, expected", ASSOCIATIVITY_TEST_CASES)
    def test_associativity(self, formula, expected):
        """Test grouping of chained operators of the same level."""
        assert parse(formula).children == expected.children
