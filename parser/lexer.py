# parser/lexer.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Lexical analyzer for propositional formulas using SLY

"""Lexical analyzer for propositional formula strings.

Breaks formula text into tokens for the parser. Every connective has a
symbolic and a keyword spelling; keywords are uppercase and case-sensitive.

Supported Tokens:
- Implication: =>, IMPL
- Conjunction: ^, &, AND
- Disjunction: |, v, OR
- Negation: ~, !, NOT
- Other connectives: NOR, NAND, XOR
- Constants: TRUE, true, 1, FALSE, false, 0
- Identifiers: propositional variables (``v`` is reserved)
- Parentheses; whitespace is ignored
"""

from sly import Lexer
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formulas.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ID: Identifier pattern with keyword mapping
    """

    tokens = {
        "ID",
        "BIT",
        "TRUE",
        "FALSE",
        "IMPLIES",
        "NOT",
        "AND",
        "OR",
        "NOR",
        "NAND",
        "XOR",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    # Operator and punctuation tokens
    IMPLIES = r"=>"
    NOT = r"~|!"
    AND = r"\^|&"
    OR = r"\|"
    LPAREN = r"\("
    RPAREN = r"\)"

    # Numeric constants; only 0 and 1 are accepted by the grammar
    BIT = r"[0-9]+"

    ID = r"[a-zA-Z_][a-zA-Z0-9_]*"

    # Keyword mapping: reassign token types for reserved words
    ID["IMPL"] = "IMPLIES"
    ID["AND"] = "AND"
    ID["OR"] = "OR"
    ID["v"] = "OR"
    ID["NOT"] = "NOT"
    ID["NOR"] = "NOR"
    ID["NAND"] = "NAND"
    ID["XOR"] = "XOR"
    ID["TRUE"] = "TRUE"
    ID["true"] = "TRUE"
    ID["FALSE"] = "FALSE"
    ID["false"] = "FALSE"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        illegal_char = t.value[0]
        error_pos = self.index

        get_logger().debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
