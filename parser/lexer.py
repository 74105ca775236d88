# parser/lexer.py
# This file is part of Aletheia - A Propositional Tautology Checker
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module breaks a whitespace-free formula string into tokens for the
grammar engine. Every connective has several accepted spellings; they all map
to the same token type and the spelling is kept as the token value so the
grammar can require one spelling per chain.

Supported Tokens:
- AND: /\\, ∧, &
- OR: \\/, ∨, ||
- ARROW: ->, →
- NOT: ~, ¬, !
- LPAREN, RPAREN: ( and )
- FALSUM: ⊥ and the reserved identifier X
- ID: runs of ASCII letters
"""

from sly import Lexer
from utils.logger import get_logger


class PropositionalLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Whitespace is not ignored here: callers strip it before tokenizing, so a
    blank character is reported as an illegal character.

    Attributes:
        tokens: Set of valid token types
        ID: Identifier pattern with the contradiction name remapped
    """

    tokens = {
        "ID",
        "FALSUM",
        "AND",
        "OR",
        "ARROW",
        "NOT",
        "LPAREN",
        "RPAREN",
    }

    # Connectives, each alternative is one accepted spelling
    AND = r"/\\|∧|&"
    OR = r"\\/|∨|\|\|"
    ARROW = r"->|→"
    NOT = r"~|¬|!"
    LPAREN = r"\("
    RPAREN = r"\)"
    FALSUM = r"⊥"

    ID = r"[a-zA-Z]+"
    # Same literal as ast_nodes.CONTRADICTION_NAME
    ID["X"] = "FALSUM"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
