# logic/verdict.py
# This file is part of Aletheia - A Propositional Tautology Checker
#
# Verdict enumeration for tautology checking results

from enum import Enum, auto


class Verdict(Enum):
    """Three-valued result of a tautology check.

    The third value exists because exhaustive checking is refused above a
    fixed number of propositions. A refused check must be reported as such,
    never folded into TRUE or FALSE.

    Values:
        TRUE: The formula holds under every assignment
        FALSE: At least one assignment falsifies the formula
        UNKNOWN: The check was refused because there are too many propositions
    """

    TRUE = auto()
    FALSE = auto()
    UNKNOWN = auto()

    def __str__(self) -> str:
        """Generate string representation of the verdict.

        Returns:
            Human-readable verdict name (TRUE, FALSE, or UNKNOWN)
        """
        return self.name

    def is_conclusive(self) -> bool:
        """Determine if this verdict is a definitive answer.

        Returns:
            True if verdict is TRUE or FALSE, False if the check was refused
        """
        return self in (Verdict.TRUE, Verdict.FALSE)
