# parser/__init__.py
# This file is part of Aletheia - A Propositional Tautology Checker
#
# Formula parsing components for propositional logic expressions

"""Propositional formula parsing.

This package turns formula text into an abstract syntax tree. Parsing is a
whole-term operation: after removing all whitespace the entire input must be
one formula, otherwise nothing is returned.

Core Functions:
    parse: Converts formula strings into Abstract Syntax Trees, raising on failure
    parse_whole_term: Same conversion, returning None on failure

Supported Logic:
    - Propositions made of ASCII letters
    - The contradiction, written X or ⊥
    - Negation (~, ¬, !)
    - Conjunction (/\\, ∧, &) and disjunction (\\/, ∨, ||), n-ary
    - Implication (->, →), non-associative

Grammar Features:
    - Ordered choice, no operator precedence
    - One connective spelling per conjunction or disjunction chain
    - Parenthetical grouping to combine different connectives

Example:
    >>> from parser import parse
    >>> str(parse("P/\\\\(~Q)"))
    '(P ∧ ¬Q)'
"""

from typing import Optional

from .ast_nodes import Expr
from .exceptions import ParseError
from .grammar import _PropositionalParser
from utils.logger import get_logger


def parse(source: str) -> Expr:
    """Parse a formula string into its Abstract Syntax Tree.

    Uses a fresh parser instance for each invocation so that no state is
    shared between calls.

    Args:
        source: Formula text, whitespace anywhere is ignored

    Returns:
        Root AST node representing the parsed formula

    Raises:
        ParseError: The text is not exactly one well-formed formula

    Example:
        >>> parse("P->P")
        Implies(antecedent=Proposition(name='P'), consequent=Proposition(name='P'))
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = _PropositionalParser()

    try:
        result = parser.parse(source)
    except ParseError as exc:
        logger.parse_failed(source, str(exc))
        raise

    logger.formula_parsed(source, str(result))
    return result


def parse_whole_term(source: str) -> Optional[Expr]:
    """Parse a formula string, returning None instead of raising.

    Args:
        source: Formula text, whitespace anywhere is ignored

    Returns:
        Root AST node, or None when the text is not a single formula
    """
    try:
        return parse(source)
    except ParseError:
        return None


__all__ = ["parse", "parse_whole_term", "ParseError"]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing components"
