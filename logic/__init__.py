# logic/__init__.py

"""Formula analysis interface.

This package provides:
  • Verdict: tri-state outcome (TRUE, FALSE, UNKNOWN)
  • is_tautology: exhaustive truth-table check with a proposition cap
  • iter_assignments: the enumeration order used by the check
  • analyze / FormulaReport: one-line analysis used by the checker shell
"""

from .analysis import FormulaReport, analyze
from .tautology import MAX_PROPOSITIONS, is_tautology, iter_assignments
from .verdict import Verdict

__all__ = [
    "FormulaReport",
    "MAX_PROPOSITIONS",
    "Verdict",
    "analyze",
    "is_tautology",
    "iter_assignments",
]
