# operators.py

"""Precedence table and arithmetic shared by conversion and evaluation."""

import math
from typing import Callable, Dict

from .errors import DivisionByZeroError, InvalidTokenError

# Higher number = binds tighter. Anything not listed (parentheses, unknown
# symbols) has precedence 0 and acts as a barrier.
PRECEDENCE: Dict[str, int] = {
    '^': 3,
    '*': 2,
    '/': 2,
    '+': 1,
    '-': 1,
}

OPERATORS = frozenset(PRECEDENCE)


def precedence(op: str) -> int:
    """Return the precedence of an operator character, 0 if it has none."""
    return PRECEDENCE.get(op, 0)


def _divide(left: float, right: float) -> float:
    if right == 0.0:
        raise DivisionByZeroError("Division by zero")
    return left / right


def _power(base: float, exponent: float) -> float:
    """Real power with C pow() domain rules: NaN, inf and -inf instead of exceptions."""
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0.0:
            # zero to a negative power is a pole, signed for odd integer powers
            if exponent.is_integer() and exponent % 2 == 1:
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan
    except OverflowError:
        if base < 0 and exponent.is_integer() and exponent % 2 == 1:
            return -math.inf
        return math.inf


_APPLY: Dict[str, Callable[[float, float], float]] = {
    '+': lambda left, right: left + right,
    '-': lambda left, right: left - right,
    '*': lambda left, right: left * right,
    '/': _divide,
    '^': _power,
}


def apply_operator(op: str, left: float, right: float) -> float:
    """
    Apply a binary operator as `left op right`.

    Raises DivisionByZeroError for '/' by zero and InvalidTokenError for an
    operator outside + - * / ^.
    """
    try:
        func = _APPLY[op]
    except KeyError:
        raise InvalidTokenError(f"Unknown binary operator: {op!r}")
    return func(float(left), float(right))
