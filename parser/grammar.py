# parser/grammar.py
# This file is part of Aletheia - A Propositional Tautology Checker
#
# Ordered-choice grammar and parser for propositional formulas

"""Propositional grammar implemented as ordered-choice recursive descent.

The parser consumes the token stream produced by ``PropositionalLexer`` and
builds AST nodes. Alternatives are tried in a fixed order and the first one
that matches wins (PEG semantics), so there is no operator precedence:
mixing connectives on one level requires parentheses.

Grammar:
    term        := conjunction | disjunction | implication | factor
    conjunction := factor (AND factor)+      one AND spelling per chain
    disjunction := factor (OR factor)+       one OR spelling per chain
    implication := factor ARROW factor
    factor      := ID | FALSUM | '(' term ')' | NOT factor

Every production is a pure function from a token position to either
``(node, next_position)`` or ``None``.
"""

from typing import Callable, Dict, List, Optional, Tuple

from sly.lex import Token

from .lexer import PropositionalLexer
from .ast_nodes import Expr, Proposition, Contradiction, Not, And, Or, Implies
from .exceptions import ParseError
from utils.logger import get_logger

Match = Optional[Tuple[Expr, int]]


class _PropositionalParser:
    """Recursive-descent parser for whole propositional terms.

    A parser instance holds the token list of a single ``parse`` call and a
    cache of ``factor`` results keyed by position. Create a new instance per
    formula.
    """

    def __init__(self):
        self._tokens: List[Token] = []
        self._factor_memo: Dict[int, Match] = {}

    def parse(self, text: str) -> Expr:
        """Parse formula text into an AST.

        All whitespace is removed before tokenizing. The whole remaining input
        must form exactly one term.

        Args:
            text: Formula string to parse

        Returns:
            Root AST node representing the parsed formula

        Raises:
            ParseError: If the formula is empty, contains illegal characters,
                or is not a single well-formed term
        """
        logger = get_logger()
        normalized = "".join(text.split())
        logger.debug(f"Parsing normalized formula: {normalized}")

        if not normalized:
            raise ParseError("Input formula is empty.")

        try:
            self._tokens = list(PropositionalLexer().tokenize(normalized))
        except ValueError as e:
            raise ParseError(f"Parse failed: {e}") from e
        self._factor_memo = {}

        try:
            match = self._term(0)
        except RecursionError as e:
            raise ParseError("Formula is nested too deeply to parse.") from e

        if match is None:
            raise ParseError("Failed to parse formula (syntax error).")

        node, position = match
        if position < len(self._tokens):
            token = self._tokens[position]
            raise ParseError(
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )

        logger.debug(f"Successfully parsed formula into {type(node).__name__}")
        return node

    # Token helpers
    def _peek(self, position: int) -> Optional[Token]:
        if position < len(self._tokens):
            return self._tokens[position]
        return None

    def _expect(self, position: int, token_type: str) -> Optional[Token]:
        token = self._peek(position)
        if token is not None and token.type == token_type:
            return token
        return None

    # Productions
    def _term(self, position: int) -> Match:
        """Try conjunction, disjunction, implication, then a bare factor."""
        alternatives: Tuple[Callable[[int], Match], ...] = (
            self._conjunction,
            self._disjunction,
            self._implication,
            self._factor,
        )
        for alternative in alternatives:
            match = alternative(position)
            if match is not None:
                return match
        return None

    def _conjunction(self, position: int) -> Match:
        chain = self._chain(position, "AND")
        if chain is None:
            return None
        children, position = chain
        return And(tuple(children)), position

    def _disjunction(self, position: int) -> Match:
        chain = self._chain(position, "OR")
        if chain is None:
            return None
        children, position = chain
        return Or(tuple(children)), position

    def _chain(
        self, position: int, separator: str
    ) -> Optional[Tuple[List[Expr], int]]:
        """Match ``factor (separator factor)+`` with a single separator spelling.

        The first separator fixes the spelling. The chain stops before a
        separator with a different spelling, or one not followed by a factor,
        leaving it unconsumed.
        """
        first = self._factor(position)
        if first is None:
            return None
        node, position = first

        opening = self._expect(position, separator)
        if opening is None:
            return None
        spelling = opening.value

        children = [node]
        while True:
            token = self._expect(position, separator)
            if token is None or token.value != spelling:
                break
            operand = self._factor(position + 1)
            if operand is None:
                break
            node, position = operand
            children.append(node)

        if len(children) < 2:
            return None
        return children, position

    def _implication(self, position: int) -> Match:
        left = self._factor(position)
        if left is None:
            return None
        antecedent, position = left

        if self._expect(position, "ARROW") is None:
            return None

        right = self._factor(position + 1)
        if right is None:
            return None
        consequent, position = right
        return Implies(antecedent, consequent), position

    def _factor(self, position: int) -> Match:
        """Match a proposition, contradiction, parenthesized term or negation."""
        if position not in self._factor_memo:
            self._factor_memo[position] = self._match_factor(position)
        return self._factor_memo[position]

    def _match_factor(self, position: int) -> Match:
        token = self._peek(position)
        if token is None:
            return None

        if token.type == "ID":
            return Proposition(token.value), position + 1

        if token.type == "FALSUM":
            return Contradiction(), position + 1

        if token.type == "LPAREN":
            inner = self._term(position + 1)
            if inner is None:
                return None
            node, position = inner
            if self._expect(position, "RPAREN") is None:
                return None
            return node, position + 1

        if token.type == "NOT":
            operand = self._factor(position + 1)
            if operand is None:
                return None
            node, position = operand
            return Not(node), position

        return None
