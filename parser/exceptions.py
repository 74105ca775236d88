# parser/exceptions.py
# This file is part of Aletheia - A Propositional Tautology Checker
#
# Custom exceptions for formula parsing and evaluation

"""Domain-specific exceptions for propositional formula processing.

Only ``ParseError`` describes bad user input. The other two exceptions signal
a broken calling contract inside the program and are never translated into a
syntax error.
"""


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Indicates that the input does not form exactly one formula of the
    grammar once whitespace is removed. No partial tree is ever attached.
    """

    pass


class UnboundPropositionError(KeyError):
    """Raised when a formula is evaluated under an assignment missing one of its propositions."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Proposition '{self.name}' is not bound in the assignment"


class NodeInvariantError(AssertionError):
    """Raised when an AST node is constructed in violation of its invariants.

    For example a ``Proposition`` named after the reserved contradiction
    symbol, or a conjunction without children.
    """

    pass
