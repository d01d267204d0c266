#!/usr/bin/env python3
# run_truth_table.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Command-line interface for truth table generation

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from core.truth_table import ErrorPolicy, TruthTable
from logic.exceptions import EvaluationError
from parser import parse
from parser.exceptions import ParseError
from utils.logger import configure_logging, get_logger


class VariableOrderError(ValueError):
    """The --variables option is malformed."""

    pass


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula text with surrounding whitespace removed

    Raises:
        FileNotFoundError: If the formula file doesn't exist
        ValueError: If the formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    if not content:
        raise ValueError("Formula file is empty")

    return content


def parse_variable_order(option: Optional[str]) -> Optional[List[str]]:
    """Resolve the ``--variables`` option into an explicit variable order.

    Names the formula uses but the list omits are not rejected here: they
    surface as unbound symbols when the table is evaluated, which aborts the
    run or, with ``--skip-errors``, marks every affected row as an error.

    Args:
        option: Comma separated variable names, or None to discover them

    Returns:
        Explicit variable order, or None when the order should be discovered

    Raises:
        VariableOrderError: If the list is empty or repeats a name
    """
    if option is None:
        return None

    names = [name.strip() for name in option.split(",") if name.strip()]
    if not names:
        raise VariableOrderError("--variables lists no names")
    if len(set(names)) != len(names):
        raise VariableOrderError(f"Variable listed more than once: {option}")

    return names


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Veritas propositional truth table generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_truth_table.py "p => q"
  python run_truth_table.py "p AND (p OR k)" --variables p,k
  python run_truth_table.py -f formula.txt --summary
  python run_truth_table.py "~(p v q)" --debug

Formula syntax:
  =>, IMPL      implication (right associative, lowest precedence)
  |, v, OR      disjunction         NOR    negated disjunction
  XOR           exclusive or
  &, ^, AND     conjunction         NAND   negated conjunction
  ~, !, NOT     negation
  TRUE, 1 / FALSE, 0 constants
        """,
    )

    parser.add_argument("formula", nargs="?", help="Formula to tabulate")

    parser.add_argument(
        "-f", "--formula-file", type=Path, help="Read the formula from a file"
    )

    parser.add_argument(
        "--variables",
        help="Comma separated variable order (first name is the lowest bit); "
        "names left out are unbound when evaluating",
    )

    parser.add_argument(
        "--skip-errors",
        action="store_true",
        help="Report rows that fail to evaluate (e.g. a variable left out of "
        "--variables) and continue with the next row",
    )

    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print row counts and classify the formula after the table",
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug output")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the truth table generator.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if (args.formula is None) == (args.formula_file is None):
        parser.error("give either a formula or --formula-file")

    configure_logging(debug=args.debug)
    logger = get_logger()

    try:
        source = args.formula
        if args.formula_file is not None:
            source = read_formula_file(args.formula_file)

        root = parse(source)
        variables = parse_variable_order(args.variables)

        policy = ErrorPolicy.SKIP if args.skip_errors else ErrorPolicy.ABORT
        table = TruthTable(root, variables, error_policy=policy)
        rows = table.run()

        if args.summary:
            summary = table.summary(rows)
            logger.table_summary(
                summary.rows, summary.true_rows, summary.false_rows, summary.classification
            )

        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except VariableOrderError as e:
        logger.error(f"Invalid --variables: {e}")
        return 6

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return 3

    except EvaluationError as e:
        logger.error(f"Evaluation error: {e}")
        return 4

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 5

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
