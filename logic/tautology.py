# logic/tautology.py
# This file is part of Aletheia - A Propositional Tautology Checker
#
# Exhaustive truth-table tautology checking

"""Truth-table enumeration over the propositions of a formula.

Assignments are enumerated by counting: for index ``i`` the proposition at
position ``c`` of the sorted proposition list is bound to bit ``c`` of ``i``.
The first assignment therefore makes everything false and the last makes
everything true.
"""

from typing import Dict, Iterator, Sequence

from parser.ast_nodes import Expr
from utils.logger import get_logger
from .verdict import Verdict

MAX_PROPOSITIONS = 15  #: Largest proposition count that is checked exhaustively (2**15 rows).


def iter_assignments(propositions: Sequence[str]) -> Iterator[Dict[str, bool]]:
    """Yield every assignment of the given propositions in counting order.

    Args:
        propositions: Proposition names, normally from ``get_all_propositions``

    Yields:
        A fresh dict mapping each name to its truth value
    """
    for index in range(1 << len(propositions)):
        yield {
            name: bool((index >> bit) & 1) for bit, name in enumerate(propositions)
        }


def is_tautology(formula: Expr, propositions: Sequence[str]) -> Verdict:
    """Decide whether a formula is true under every assignment.

    Args:
        formula: Root of the formula to check
        propositions: Sorted proposition list covering every proposition of
            the formula, as returned by ``formula.get_all_propositions()``

    Returns:
        Verdict.UNKNOWN without evaluating anything when there are more than
        MAX_PROPOSITIONS propositions, Verdict.FALSE at the first falsifying
        assignment, otherwise Verdict.TRUE
    """
    logger = get_logger()

    if len(propositions) > MAX_PROPOSITIONS:
        logger.tautology_refused(len(propositions), MAX_PROPOSITIONS)
        return Verdict.UNKNOWN

    logger.debug(
        f"Checking {formula} over {1 << len(propositions)} assignments"
    )

    for assignment in iter_assignments(propositions):
        if not formula.evaluate(assignment):
            logger.counterexample_found(assignment)
            return Verdict.FALSE

    logger.debug(f"{formula} is a tautology")
    return Verdict.TRUE
