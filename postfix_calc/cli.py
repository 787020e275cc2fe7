# cli.py

"""
Command-line entry point.

One expression per invocation: taken from the arguments, or read as one line
from standard input. Prints the postfix notation and the result. Any error is
reported on stderr and the exit status is 1.
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .calculator import calculate, read_expression, render
from .config import configure_logging, load_settings
from .errors import CalculatorError
from .repl import REPL

logger = logging.getLogger(__name__)

BANNER = (
    "--- Infix Expression Evaluator (Stack-based) ---\n"
    "Supports +, -, *, /, ^, parentheses, and floating-point numbers.\n"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="postfix-calc",
        description="Convert an infix expression to postfix notation and evaluate it.",
    )
    parser.add_argument(
        "expression",
        nargs="*",
        help="Infix expression; read from standard input when omitted.",
    )
    parser.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Start an interactive session instead of evaluating a single expression.",
    )
    parser.add_argument(
        "--precision",
        type=int,
        help="Decimal places in the printed result (default: 4).",
    )
    parser.add_argument(
        "--stack-capacity",
        type=int,
        help="Capacity of the operator and value stacks (default: 100).",
    )
    parser.add_argument(
        "--max-input-length",
        type=int,
        help="Maximum input length, line terminator included (default: 256).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject symbols other than + - * / ^ and parentheses.",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        help="Path to a .env file with POSTFIX_CALC_* settings.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (default: WARNING).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.interactive and args.expression:
        parser.error("an EXPRESSION cannot be combined with --interactive")

    try:
        settings = load_settings(
            env_file=args.env_file,
            precision=args.precision,
            stack_capacity=args.stack_capacity,
            max_input_length=args.max_input_length,
            strict_tokens=args.strict,
            log_level=args.log_level,
        )
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    if args.interactive:
        REPL(settings).repl_loop()
        return 0

    try:
        if args.expression:
            expression = " ".join(args.expression)
        else:
            print(BANNER)
            expression = read_expression(max_input_length=settings.max_input_length)
        evaluation = calculate(expression, settings)
    except CalculatorError as e:
        logger.debug("Evaluation failed: %r", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render(evaluation))
    return 0


if __name__ == '__main__':
    sys.exit(main())
