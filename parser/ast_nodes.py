# parser/ast_nodes.py
# This file is part of Aletheia - A Propositional Tautology Checker
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional-logic formulas. Every node knows how to
render itself in canonical notation, evaluate itself under an assignment of
truth values, and report the propositions it mentions.

Node Types:
    Proposition: Named atomic proposition
    Contradiction: The constant false
    Not, And, Or, Implies: Standard Boolean connectives

And and Or are n-ary: a chain such as ``a & b & c`` is one node with three
children rather than a nested pair.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, List, Mapping, Tuple

from .exceptions import NodeInvariantError, UnboundPropositionError

CONTRADICTION_NAME = "X"  #: Reserved identifier that denotes the contradiction.
CONTRADICTION_GLYPH = "⊥"  #: Alternative input spelling of the contradiction.


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Concrete node types implement ``evaluate``, ``variables`` and ``__str__``.
    The formula-level helper ``get_all_propositions`` is derived from
    ``variables`` and shared by every node.
    """

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        """Compute the truth value of this formula.

        Args:
            assignment: Truth value for every proposition in the formula

        Returns:
            Truth value of the formula under the assignment

        Raises:
            UnboundPropositionError: A proposition is missing from the assignment
        """
        raise NotImplementedError

    def variables(self) -> FrozenSet[str]:
        """Return the set of proposition names appearing in this subtree."""
        raise NotImplementedError

    def get_all_propositions(self) -> List[str]:
        """Return the distinct proposition names in lexicographic order.

        This ordering is the canonical bit order used when enumerating
        assignments during tautology checking.

        Returns:
            Sorted list of proposition names without duplicates
        """
        return sorted(self.variables())

    def __str__(self) -> str:
        """Return the canonical printable form of the formula.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Proposition(Expr):
    """Atomic proposition identified by its name.

    Attributes:
        name: Identifier of the proposition, never the reserved contradiction name
    """

    name: str

    def __post_init__(self):
        if self.name == CONTRADICTION_NAME:
            raise NodeInvariantError(
                f"'{CONTRADICTION_NAME}' is reserved for the contradiction "
                f"and cannot name a proposition"
            )

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        try:
            return assignment[self.name]
        except KeyError:
            raise UnboundPropositionError(self.name) from None

    def variables(self) -> FrozenSet[str]:
        return frozenset((self.name,))

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Contradiction(Expr):
    """The constant false, distinct from every named proposition."""

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return False

    def variables(self) -> FrozenSet[str]:
        return frozenset()

    def __str__(self) -> str:
        return CONTRADICTION_NAME


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation operator.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return not self.operand.evaluate(assignment)

    def variables(self) -> FrozenSet[str]:
        return self.operand.variables()

    def __str__(self) -> str:
        return f"¬{self.operand}"


def _join(children: Tuple[Expr, ...], connective: str) -> str:
    """Render an n-ary connective, bare when there is a single child."""
    rendered = f" {connective} ".join(str(child) for child in children)
    if len(children) == 1:
        return rendered
    return f"({rendered})"


def _union(children: Tuple[Expr, ...]) -> FrozenSet[str]:
    return frozenset().union(*(child.variables() for child in children))


@dataclass(frozen=True, slots=True)
class And(Expr):
    """N-ary logical conjunction.

    True when every child is true. Evaluation stops at the first false child.

    Attributes:
        children: Conjuncts in source order, at least one
    """

    children: Tuple[Expr, ...]

    def __post_init__(self):
        if not self.children:
            raise NodeInvariantError("A conjunction needs at least one child")

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return all(child.evaluate(assignment) for child in self.children)

    def variables(self) -> FrozenSet[str]:
        return _union(self.children)

    def __str__(self) -> str:
        return _join(self.children, "∧")


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """N-ary logical disjunction.

    True when at least one child is true. Evaluation stops at the first true
    child.

    Attributes:
        children: Disjuncts in source order, at least one
    """

    children: Tuple[Expr, ...]

    def __post_init__(self):
        if not self.children:
            raise NodeInvariantError("A disjunction needs at least one child")

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return any(child.evaluate(assignment) for child in self.children)

    def variables(self) -> FrozenSet[str]:
        return _union(self.children)

    def __str__(self) -> str:
        return _join(self.children, "∨")


@dataclass(frozen=True, slots=True)
class Implies(Expr):
    """Material implication.

    Attributes:
        antecedent: Left-hand side of the arrow
        consequent: Right-hand side of the arrow
    """

    antecedent: Expr
    consequent: Expr

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return not self.antecedent.evaluate(assignment) or self.consequent.evaluate(
            assignment
        )

    def variables(self) -> FrozenSet[str]:
        return self.antecedent.variables() | self.consequent.variables()

    def __str__(self) -> str:
        return f"({self.antecedent} → {self.consequent})"
