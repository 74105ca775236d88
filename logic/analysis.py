# logic/analysis.py
# This file is part of Aletheia - A Propositional Tautology Checker
#
# One-line formula analysis producing the report shown by the checker shell

"""Analysis of a single formula line.

``analyze`` is the one operation the command-line shell needs: parse the
line and gather the canonical rendering, the proposition list and the
tautology verdict into a ``FormulaReport``. The report also knows how to
render each field, including the placeholders used for invalid input.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from parser import parse_whole_term
from parser.ast_nodes import Expr
from utils.logger import get_logger
from .tautology import is_tautology
from .verdict import Verdict

PLACEHOLDER = "---"

_VERDICT_TEXT = {
    Verdict.TRUE: "YES",
    Verdict.FALSE: "NO",
    Verdict.UNKNOWN: "Too many propositions",
}


@dataclass(frozen=True)
class FormulaReport:
    """Outcome of analyzing one line of input.

    Attributes:
        source: The line as given by the caller
        formula: Parsed formula, None when the syntax is invalid
        propositions: Sorted distinct proposition names, empty when invalid
        verdict: Tautology verdict, None when the syntax is invalid
    """

    source: str
    formula: Optional[Expr]
    propositions: Tuple[str, ...] = ()
    verdict: Optional[Verdict] = None

    @property
    def is_valid(self) -> bool:
        return self.formula is not None

    @property
    def syntax_text(self) -> str:
        return "OK" if self.is_valid else "INVALID"

    @property
    def formatted_text(self) -> str:
        return str(self.formula) if self.is_valid else PLACEHOLDER

    @property
    def propositions_text(self) -> str:
        if not self.propositions:
            return PLACEHOLDER
        return ", ".join(self.propositions)

    @property
    def tautology_text(self) -> str:
        if self.verdict is None:
            return PLACEHOLDER
        return _VERDICT_TEXT[self.verdict]

    def lines(self) -> List[str]:
        """Return the four labelled report lines."""
        return [
            f"Syntax       : {self.syntax_text}",
            f"Formatted    : {self.formatted_text}",
            f"Propositions : {self.propositions_text}",
            f"Tautology    : {self.tautology_text}",
        ]


def analyze(line: str) -> FormulaReport:
    """Parse a line and collect everything the checker reports about it.

    Args:
        line: Formula text, possibly containing whitespace

    Returns:
        FormulaReport for the line; invalid syntax yields a report whose
        formula and verdict are None
    """
    logger = get_logger()

    formula = parse_whole_term(line)
    if formula is None:
        return FormulaReport(source=line, formula=None)

    propositions = formula.get_all_propositions()
    verdict = is_tautology(formula, propositions)
    logger.debug(f"Verdict for {formula}: {verdict}")

    return FormulaReport(
        source=line,
        formula=formula,
        propositions=tuple(propositions),
        verdict=verdict,
    )
