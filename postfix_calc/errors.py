# errors.py

"""Exception hierarchy for the calculator.

Every failure is fatal to the expression being processed. The library raises
these; only the entry points decide whether to exit, retry, or prompt again.
"""

from typing import Optional


class CalculatorError(Exception):
    """Base class for calculator errors."""

    def __init__(self, message: str, pos: Optional[int] = None):
        self.message = message
        self.pos = pos
        if pos is not None:
            message = f"{message} at position {pos}"
        super().__init__(message)


# ---------------------------
# Conversion
# ---------------------------

class ConversionError(CalculatorError):
    """Raised when infix text cannot be converted to postfix."""
    pass

class MismatchedParenthesisError(ConversionError):
    """Raised for a ')' with no matching '('."""
    pass

class UnclosedParenthesisError(ConversionError):
    """Raised for a '(' that is never closed."""
    pass


# ---------------------------
# Stacks
# ---------------------------

class StackError(CalculatorError):
    """Raised when a bounded stack is misused."""
    pass

class StackOverflowError(StackError):
    """Raised when a push would exceed the stack capacity."""
    pass

class StackUnderflowError(StackError):
    """Raised when popping or peeking an empty stack."""
    pass


# ---------------------------
# Evaluation
# ---------------------------

class EvaluationError(CalculatorError):
    """Raised when a postfix sequence cannot be evaluated."""
    pass

class DivisionByZeroError(EvaluationError):
    """Raised when the right operand of '/' is zero."""
    pass

class MalformedPostfixError(EvaluationError):
    """Raised when a postfix sequence leaves the value stack in a bad state."""
    pass

class MissingOperandError(MalformedPostfixError, StackUnderflowError):
    """Raised when an operator finds fewer than two values on the stack."""
    pass


# ---------------------------
# Input
# ---------------------------

class InputError(CalculatorError):
    """Raised when an expression cannot be read."""
    pass

class InputTooLongError(InputError):
    """Raised when an input line exceeds the configured maximum length."""
    pass

class InputReadFailureError(InputError):
    """Raised when no input line could be read."""
    pass


class InvalidTokenError(CalculatorError):
    """Raised for a symbol that is not a number, parenthesis or known operator."""
    pass
