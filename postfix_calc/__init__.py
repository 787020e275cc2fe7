"""Infix expression evaluator: shunting-yard conversion and postfix evaluation."""

from .calculator import Evaluation, calculate, format_result
from .config import Settings, load_settings
from .converter import Token, TokenType, infix_to_postfix, to_postfix, tokenize
from .errors import (
    CalculatorError,
    ConversionError,
    DivisionByZeroError,
    EvaluationError,
    InputError,
    InputReadFailureError,
    InputTooLongError,
    InvalidTokenError,
    MalformedPostfixError,
    MismatchedParenthesisError,
    MissingOperandError,
    StackError,
    StackOverflowError,
    StackUnderflowError,
    UnclosedParenthesisError,
)
from .evaluator import evaluate_postfix

__version__ = "1.0.0"
