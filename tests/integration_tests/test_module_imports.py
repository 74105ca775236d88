# tests/integration_tests/test_module_imports.py
# This file is part of Aletheia - A Propositional Tautology Checker
#
# Contract test that every project module imports cleanly

"""Every project module must import without error.

An import failure is reported as a failing test, never as a skip.
"""

import importlib

import pytest

MODULES = [
    "parser",
    "parser.ast_nodes",
    "parser.exceptions",
    "parser.lexer",
    "parser.grammar",
    "logic",
    "logic.analysis",
    "logic.tautology",
    "logic.verdict",
    "utils",
    "utils.logger",
    "run_checker",
]


@pytest.mark.parametrize("module_name", MODULES)
def test_module_imports(module_name):
    """Test that a project module can be imported.

    Args:
        module_name: Dotted module path
    """
    module = importlib.import_module(module_name)

    assert module.__name__ == module_name
