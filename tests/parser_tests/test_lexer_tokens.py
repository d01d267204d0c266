# tests/parser_tests/test_lexer_tokens.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Test suite for formula lexer tokenization and error handling

"""Test suite for formula lexer functionality.

Verifies tokenization of both the symbolic and the keyword spelling of every
connective and the handling of illegal characters.
"""

import pytest
from parser.lexer import FormulaLexer
from utils.logger import get_logger


class TestFormulaLexer:
    """Test cases for formula lexer tokenization and error handling."""

    def setup_method(self):
        """Initialize lexer for each test method."""
        self.lexer = FormulaLexer()
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        self.logger.debug(f"Tokenizing: '{text}'")
        return [token.type for token in self.lexer.tokenize(text)]

    VALID_TOKENIZATION_CASES = [
        # Identifiers and constants
        ("p", ["ID"]),
        ("a_valid_identifier", ["ID"]),
        ("p1", ["ID"]),
        ("TRUE", ["TRUE"]),
        ("true", ["TRUE"]),
        ("1", ["BIT"]),
        ("FALSE", ["FALSE"]),
        ("false", ["FALSE"]),
        ("0", ["BIT"]),
        # Case sensitivity of keywords
        ("True", ["ID"]),
        ("and", ["ID"]),
        ("Nand", ["ID"]),
        # Keyword-identifier boundary cases
        ("ANDp", ["ID"]),
        ("vote", ["ID"]),
        ("IMPLY", ["ID"]),
        # Symbolic connectives
        ("p => q", ["ID", "IMPLIES", "ID"]),
        ("p v q", ["ID", "OR", "ID"]),
        ("p | q", ["ID", "OR", "ID"]),
        ("p ^ q", ["ID", "AND", "ID"]),
        ("p & q", ["ID", "AND", "ID"]),
        ("~p", ["NOT", "ID"]),
        ("!p", ["NOT", "ID"]),
        # Keyword connectives
        ("p IMPL q", ["ID", "IMPLIES", "ID"]),
        ("q AND p", ["ID", "AND", "ID"]),
        ("p OR q", ["ID", "OR", "ID"]),
        ("NOT p", ["NOT", "ID"]),
        ("p NOR q", ["ID", "NOR", "ID"]),
        ("p NAND q", ["ID", "NAND", "ID"]),
        ("p XOR q", ["ID", "XOR", "ID"]),
        # Whitespace and grouping
        (" \t ~ \n (p) ", ["NOT", "LPAREN", "ID", "RPAREN"]),
        (
            "(p => q) v k",
            ["LPAREN", "ID", "IMPLIES", "ID", "RPAREN", "OR", "ID"],
        ),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        """Test lexer correctly tokenizes valid formula syntax."""
        actual_types = self._tokenize_to_types(input_text)

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Actual: {actual_types}"
        )

    def test_token_values_preserved(self):
        """Identifiers and numeric constants keep their source text."""
        values = [token.value for token in self.lexer.tokenize("p1 XOR 0")]
        assert values == ["p1", "XOR", "0"]

    INVALID_CHARACTER_CASES = [
        ("p == q", "="),
        ("p # q", "#"),
        ("p; q", ";"),
        ("p @ q", "@"),
        ("p = > q", "="),
        ("p -> q", "-"),
    ]

    @pytest.mark.parametrize("input_text, illegal_char", INVALID_CHARACTER_CASES)
    def test_illegal_characters(self, input_text, illegal_char):
        """Test lexer rejects characters outside the formula alphabet."""
        with pytest.raises(ValueError) as exc_info:
            self._tokenize_to_types(input_text)

        assert f"Illegal character '{illegal_char}'" in str(exc_info.value)
