# parser/grammar.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implemented with the SLY parser generator.

The parser builds expression trees (`logic.node.Node`) from the token stream
produced by `FormulaLexer`.

Operator Precedence (lowest to highest):
- IMPLIES ('=>'): right-associative
- OR, NOR: left-associative
- XOR: left-associative
- AND, NAND: left-associative
- NOT ('~'): right-associative prefix
"""

from sly import Parser
from logic.node import Node, symbol, true, false, not_, implies, and_, or_, nor, nand, xor
from .lexer import FormulaLexer
from .exceptions import ParseError
from utils.logger import get_logger


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    Attributes:
        tokens: Token types from FormulaLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = FormulaLexer.tokens

    precedence = (
        ("right", "IMPLIES"),
        ("left", "OR", "NOR"),
        ("left", "XOR"),
        ("left", "AND", "NAND"),
        ("right", "NOT"),
    )

    @_("expr")
    def start(self, p) -> Node:
        return p.expr

    @_("expr IMPLIES expr")
    def expr(self, p) -> Node:
        return implies(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Node:
        return or_(p.expr0, p.expr1)

    @_("expr NOR expr")
    def expr(self, p) -> Node:
        return nor(p.expr0, p.expr1)

    @_("expr XOR expr")
    def expr(self, p) -> Node:
        return xor(p.expr0, p.expr1)

    @_("expr AND expr")
    def expr(self, p) -> Node:
        return and_(p.expr0, p.expr1)

    @_("expr NAND expr")
    def expr(self, p) -> Node:
        return nand(p.expr0, p.expr1)

    @_("NOT expr")
    def expr(self, p) -> Node:
        return not_(p.expr)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Node:
        return p.expr

    @_("literal")
    def expr(self, p) -> Node:
        return p.literal

    @_("ID")
    def literal(self, p) -> Node:
        return symbol(p.ID)

    @_("TRUE")
    def literal(self, p) -> Node:
        return true()

    @_("FALSE")
    def literal(self, p) -> Node:
        return false()

    @_("BIT")
    def literal(self, p) -> Node:
        if p.BIT == "1":
            return true()
        if p.BIT == "0":
            return false()
        raise ParseError(f"Numeric constant must be 0 or 1, got '{p.BIT}'")

    def parse(self, text: str) -> Node:
        """Parse formula text into an expression tree.

        Args:
            text: Formula string to parse

        Returns:
            Root node of the parsed formula

        Raises:
            ParseError: If the formula is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        try:
            ast_result = super().parse(FormulaLexer().tokenize(text))

            if ast_result is None and text.strip() == "":
                raise ParseError("Input formula is empty.")

            if ast_result is None:
                raise ParseError("Failed to parse formula (syntax error).")

            logger.debug(f"Successfully parsed formula into {ast_result.kind} node")
            return ast_result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for errors at end of input

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at line {token.lineno}, position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of formula"

        raise ParseError(error_msg)
