#!/usr/bin/env python3
# run_checker.py
# This file is part of Aletheia - A Propositional Tautology Checker
#
# Command-line interface for formula analysis with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import Iterable, List, Optional

from logic import FormulaReport, analyze
from utils.logger import configure_logging, get_logger

PROMPT = ">> "


def read_formula_file(filepath: Path) -> List[str]:
    """Read formulas from a file, one per line.

    Blank lines and lines starting with '#' are skipped.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula strings in file order

    Raises:
        FileNotFoundError: If the formula file doesn't exist
        ValueError: If the file cannot be read or holds no formulas
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Error reading formula file: {e}")

    formulas = [
        line for line in lines if line.strip() and not line.lstrip().startswith("#")
    ]
    if not formulas:
        raise ValueError("Formula file is empty")

    return formulas


def print_report(report: FormulaReport) -> None:
    """Print the four-line report for one formula."""
    for line in report.lines():
        print(line)

    if report.verdict is not None and not report.verdict.is_conclusive():
        get_logger().warning(
            f"⚠️  {len(report.propositions)} propositions, tautology check skipped"
        )


def check_formulas(formulas: Iterable[str]) -> int:
    """Analyze and print every formula.

    Args:
        formulas: Formula lines to analyze

    Returns:
        Number of formulas with invalid syntax
    """
    invalid = 0
    for index, formula in enumerate(formulas):
        if index:
            print()
        report = analyze(formula)
        print_report(report)
        if not report.is_valid:
            invalid += 1
    return invalid


def interactive_session() -> None:
    """Read formulas from standard input until end of input or interrupt."""
    while True:
        try:
            line = input(PROMPT)
        except KeyboardInterrupt:
            print("CTRL-C")
            break
        except EOFError:
            print("CTRL-D")
            break

        print_report(analyze(line))


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Aletheia propositional formula and tautology checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_checker.py "P -> P"
  python run_checker.py "P /\\ (~Q)" "(P || Q) -> P"
  python run_checker.py -f formulas.txt --debug
  python run_checker.py                 (interactive session)

Connectives:
  not: ~ ¬ !    and: /\\ ∧ &    or: \\/ ∨ ||    implies: -> →
  contradiction: X or ⊥
        """,
    )

    parser.add_argument("formulas", nargs="*", help="Formulas to analyze")

    parser.add_argument(
        "-f", "--file", type=Path, help="Path to a file with one formula per line"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the checker.

    Args:
        argv: Command line arguments, defaults to sys.argv[1:]

    Returns:
        Exit code (0 if every formula is valid, 1 if any is invalid,
        3 for formula file errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    formulas = list(args.formulas)
    if args.file is not None:
        try:
            formulas.extend(read_formula_file(args.file))
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Formula file error: {e}")
            return 3
        logger.info(f"📋 Loaded formulas from {args.file}")

    if not formulas:
        interactive_session()
        return 0

    invalid = check_formulas(formulas)
    if invalid:
        logger.info(f"❌ {invalid} of {len(formulas)} formulas have invalid syntax")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
