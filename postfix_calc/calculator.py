# calculator.py

"""
Conversion-then-evaluation pipeline used by the CLI, the REPL and the API.

Each call builds its own stacks, so one Evaluation never depends on another.
"""

import logging
import math
from typing import Callable, Optional

from pydantic import BaseModel

from .config import Settings
from .converter import infix_to_postfix
from .errors import InputReadFailureError, InputTooLongError
from .evaluator import evaluate_postfix

logger = logging.getLogger(__name__)

INPUT_PROMPT = "Enter INFIX expression: "


class Evaluation(BaseModel):
    """Result of evaluating one infix expression."""
    expression: str
    postfix: str
    result: float
    precision: int = 4

    @property
    def formatted(self) -> str:
        return format_result(self.result, self.precision)


def format_result(value: float, precision: int = 4) -> str:
    """Format a result with a fixed number of decimal places; nan and inf as text."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.{precision}f}"


def check_input_length(line: str, max_input_length: int) -> str:
    """
    Return the line without its terminator, or raise InputTooLongError.

    The limit counts the line terminator, so at most max_input_length - 1
    characters of expression are accepted.
    """
    text = line.rstrip("\r\n")
    if len(text) + 1 > max_input_length:
        raise InputTooLongError(
            f"Input too long: {len(text)} characters, limit is {max_input_length - 1}"
        )
    return text


def read_expression(
    read_line: Callable[[str], str] = input,
    prompt: str = INPUT_PROMPT,
    max_input_length: int = 256,
) -> str:
    """
    Read one expression line.

    Raises:
        InputReadFailureError: end of input or an I/O error.
        InputTooLongError: the line exceeds max_input_length.
    """
    try:
        line = read_line(prompt)
    except EOFError:
        raise InputReadFailureError("Error reading input: end of input")
    except OSError as e:
        raise InputReadFailureError(f"Error reading input: {e}")
    return check_input_length(line, max_input_length)


def calculate(expression: str, settings: Optional[Settings] = None) -> Evaluation:
    """Convert an infix expression to postfix and evaluate it on fresh stacks."""
    settings = settings or Settings()
    text = check_input_length(expression, settings.max_input_length)
    postfix = infix_to_postfix(text, capacity=settings.stack_capacity, strict=settings.strict_tokens)
    result = evaluate_postfix(postfix, capacity=settings.stack_capacity)
    logger.info("Evaluated %r -> %r = %r", text, postfix, result)
    return Evaluation(expression=text, postfix=postfix, result=result, precision=settings.precision)


def render(evaluation: Evaluation) -> str:
    """The two output lines for an evaluation."""
    return (
        f"--> Postfix Notation: {evaluation.postfix}\n"
        f"--> Evaluation Result: {evaluation.formatted}"
    )
