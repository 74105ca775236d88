# tests/conftest.py
# This file is part of Aletheia - A Propositional Tautology Checker
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Aletheia tests.

This module makes the project packages importable from the test suites and
provides formulas shared across parser, logic and integration tests.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Import the project packages and create the shared logger.

    A broken package fails the session here instead of being skipped.
    """
    import logic
    import parser
    from utils.logger import get_logger

    # Bind the shared logger to the session stdout, not a per-test capture
    get_logger()

    yield


@pytest.fixture
def sixteen_propositions():
    """Provide sixteen distinct proposition names, one past the checking cap.

    Returns:
        List[str]: Names 'a' through 'p'
    """
    return [chr(ord("a") + offset) for offset in range(16)]


@pytest.fixture
def tautologies():
    """Provide formulas that hold under every assignment.

    Returns:
        List[str]: Tautological formulas in mixed notation
    """
    return [
        "P->P",
        "P || ~P",
        "~X",
        "(P & Q) -> P",
        "((P -> Q) -> P) -> P",
        "((P→Q)∧(Q→R))→(P→R)",
        "(~(P /\\ Q)) -> (~P \\/ ~Q)",
    ]


@pytest.fixture
def non_tautologies():
    """Provide formulas falsified by at least one assignment.

    Returns:
        List[str]: Satisfiable but not valid formulas, and contradictions
    """
    return [
        "P",
        "X",
        "⊥",
        "P /\\ (~Q)",
        "P -> Q",
        "P & ~P",
        "(P || Q) -> P",
    ]
