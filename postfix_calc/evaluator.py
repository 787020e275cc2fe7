# evaluator.py

"""Postfix evaluation with a value stack owned by each call."""

import logging
import re
from typing import List, Sequence, Union

from .errors import MalformedPostfixError, MissingOperandError, StackUnderflowError
from .operators import apply_operator
from .stack import DEFAULT_CAPACITY, BoundedStack

logger = logging.getLogger(__name__)

_DIGITS = '0123456789'

# ASCII decimal literal, optional sign and exponent
_NUMBER_RE = re.compile(r'-?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][-+]?[0-9]+)?')


def split_postfix(postfix: Union[str, Sequence[str]]) -> List[str]:
    """Return the tokens of postfix text or a token sequence, empty fragments dropped."""
    if isinstance(postfix, str):
        return postfix.split()
    return [token for token in postfix if token and not token.isspace()]


def is_number_token(token: str) -> bool:
    """True for a token that starts with a digit, or with '-' or '.' followed by a digit."""
    if not token:
        return False
    if token[0] in _DIGITS:
        return True
    return token[0] in '-.' and len(token) > 1 and token[1] in _DIGITS


def _parse_number(token: str) -> float:
    if not _NUMBER_RE.fullmatch(token):
        raise MalformedPostfixError(f"Invalid numeric literal: {token!r}")
    return float(token)


def evaluate_postfix(postfix: Union[str, Sequence[str]], capacity: int = DEFAULT_CAPACITY) -> float:
    """
    Evaluate a postfix expression and return its value.

    `postfix` is either space-delimited text or a sequence of tokens; it is not
    modified. For an operator the first value popped is the right operand and
    the second is the left one.

    Raises:
        DivisionByZeroError: a '/' with a zero right operand.
        MissingOperandError: an operator with fewer than two values to pop.
        MalformedPostfixError: a malformed number, or more or fewer than one
            value left at the end.
        StackOverflowError: more pending values than capacity.
        InvalidTokenError: an operator outside + - * / ^.
    """
    tokens = split_postfix(postfix)
    values: BoundedStack[float] = BoundedStack(capacity, name="value stack")

    for token in tokens:
        if is_number_token(token):
            values.push(_parse_number(token))
            continue
        op = token[0]
        try:
            right = values.pop()
            left = values.pop()
        except StackUnderflowError:
            raise MissingOperandError(f"Not enough operands for operator {op!r}")
        values.push(apply_operator(op, left, right))

    if len(values) != 1:
        raise MalformedPostfixError(
            f"Invalid postfix expression: {len(values)} values left on the stack, expected 1"
        )
    result = values.pop()
    logger.debug("Evaluated postfix %r to %r", tokens, result)
    return result
