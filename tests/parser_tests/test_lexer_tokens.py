# tests/parser_tests/test_lexer_tokens.py
# This file is part of Aletheia - A Propositional Tautology Checker
#
# Test suite for the propositional lexer tokenization and error handling

"""Test suite for propositional lexer functionality.

This module tests the lexical analysis phase of formula parsing, verifying
that every connective spelling maps to its token type, that the spelling is
preserved as the token value, and that illegal characters are rejected.
"""

import pytest
from parser.ast_nodes import CONTRADICTION_NAME
from parser.lexer import PropositionalLexer
from utils.logger import get_logger


class TestPropositionalLexer:
    """Test cases for lexer tokenization and error handling."""

    def setup_method(self):
        """Initialize lexer for each test method."""
        self.lexer = PropositionalLexer()
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        """Extract token types from input text.

        Args:
            text: Input string to tokenize

        Returns:
            List of token type strings
        """
        self.logger.debug(f"Tokenizing: '{text}'")
        token_types = [token.type for token in self.lexer.tokenize(text)]
        self.logger.debug(f"Token types: {token_types}")
        return token_types

    VALID_TOKENIZATION_CASES = [
        # Propositions and the contradiction
        ("P", ["ID"]),
        ("ready", ["ID"]),
        ("X", ["FALSUM"]),
        ("⊥", ["FALSUM"]),
        ("XY", ["ID"]),
        ("x", ["ID"]),
        ("AX", ["ID"]),
        # Every connective spelling
        ("/\\", ["AND"]),
        ("∧", ["AND"]),
        ("&", ["AND"]),
        ("\\/", ["OR"]),
        ("∨", ["OR"]),
        ("||", ["OR"]),
        ("->", ["ARROW"]),
        ("→", ["ARROW"]),
        ("~", ["NOT"]),
        ("¬", ["NOT"]),
        ("!", ["NOT"]),
        ("()", ["LPAREN", "RPAREN"]),
        # Complete formulas
        ("P/\\(~Q)", ["ID", "AND", "LPAREN", "NOT", "ID", "RPAREN"]),
        ("P->P", ["ID", "ARROW", "ID"]),
        ("¬X∨P", ["NOT", "FALSUM", "OR", "ID"]),
        ("A\\/B||C", ["ID", "OR", "ID", "OR", "ID"]),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        """Test lexer correctly tokenizes valid formula syntax.

        Args:
            input_text: Whitespace-free formula fragment
            expected_types: Expected sequence of token types
        """
        actual_types = self._tokenize_to_types(input_text)

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Actual: {actual_types}"
        )

    def test_spelling_is_kept_as_token_value(self):
        """Test that the connective spelling survives as the token value."""
        values = [token.value for token in self.lexer.tokenize("A&B∧C/\\D")]

        assert values == ["A", "&", "B", "∧", "C", "/\\", "D"]

    def test_reserved_name_matches_ast_constant(self):
        """Test that the lexer reserves the same name the AST model reserves."""
        tokens = list(self.lexer.tokenize(CONTRADICTION_NAME))

        assert len(tokens) == 1
        assert tokens[0].type == "FALSUM"

    def test_token_positions(self):
        """Test that token indices point into the input string."""
        tokens = list(self.lexer.tokenize("P->Q"))

        assert [token.index for token in tokens] == [0, 1, 3]

    INVALID_CHARACTER_CASES = [
        ("P1", "Digits are not part of proposition names"),
        ("P_Q", "Underscore is not part of proposition names"),
        ("P|Q", "Single bar is not a disjunction"),
        ("P-Q", "Dash without arrow head"),
        ("P Q", "Whitespace must be stripped before tokenizing"),
        ("P;Q", "Illegal separator"),
        ("é", "Non-ASCII letter"),
    ]

    @pytest.mark.parametrize("invalid_input, description", INVALID_CHARACTER_CASES)
    def test_illegal_characters(self, invalid_input, description):
        """Test lexer raises ValueError for illegal characters.

        Args:
            invalid_input: String containing an illegal character
            description: Description of the error case
        """
        with pytest.raises(ValueError) as exc_info:
            list(self.lexer.tokenize(invalid_input))

        assert "Illegal character" in str(exc_info.value), description
