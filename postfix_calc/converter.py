# converter.py

"""
Infix to postfix conversion (shunting-yard).

The scanner splits infix text into number, operator and parenthesis tokens.
The converter then walks those tokens with an operator stack of its own and
emits postfix tokens in output order. Equal precedence always pops the stack,
so every operator, '^' included, groups left to right.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List

from .errors import InvalidTokenError, MismatchedParenthesisError, UnclosedParenthesisError
from .operators import OPERATORS, precedence
from .stack import DEFAULT_CAPACITY, BoundedStack

logger = logging.getLogger(__name__)

_NUMBER_CHARS = frozenset('0123456789.')


# ---------------------------
# Tokens
# ---------------------------

class TokenType:
    """Enumeration of token types."""
    NUMBER = 'NUMBER'
    OPERATOR = 'OPERATOR'
    LPAREN = 'LPAREN'
    RPAREN = 'RPAREN'


@dataclass(frozen=True)
class Token:
    """A scanned token. Numbers keep their source text; it is parsed at evaluation."""
    type: str
    value: str
    pos: int

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value!r}, pos={self.pos})"


def tokenize(infix: str, strict: bool = False) -> Iterator[Token]:
    """
    Yield the tokens of an infix expression.

    A number is the longest run of digits and decimal points, so "1.2.3" is a
    single token. Whitespace is skipped. Any other character is an operator
    token; with strict=True a character outside + - * / ^ raises
    InvalidTokenError instead.
    """
    i = 0
    length = len(infix)
    while i < length:
        ch = infix[i]
        if ch.isspace():
            i += 1
            continue
        if ch in _NUMBER_CHARS:
            start = i
            while i < length and infix[i] in _NUMBER_CHARS:
                i += 1
            yield Token(TokenType.NUMBER, infix[start:i], start)
            continue
        if ch == '(':
            yield Token(TokenType.LPAREN, ch, i)
        elif ch == ')':
            yield Token(TokenType.RPAREN, ch, i)
        else:
            if strict and ch not in OPERATORS:
                raise InvalidTokenError(f"Unexpected character {ch!r}", i)
            yield Token(TokenType.OPERATOR, ch, i)
        i += 1


# ---------------------------
# Shunting-yard
# ---------------------------

def to_postfix(infix: str, capacity: int = DEFAULT_CAPACITY, strict: bool = False) -> List[str]:
    """
    Convert infix text to a list of postfix tokens.

    Raises:
        MismatchedParenthesisError: a ')' without a matching '('.
        UnclosedParenthesisError: a '(' left open at the end of input.
        StackOverflowError: operators or parentheses nest deeper than capacity.
        InvalidTokenError: an unknown symbol, in strict mode only.
    """
    output: List[str] = []
    op_stack: BoundedStack[Token] = BoundedStack(capacity, name="operator stack")

    for token in tokenize(infix, strict=strict):
        if token.type == TokenType.NUMBER:
            output.append(token.value)
        elif token.type == TokenType.LPAREN:
            op_stack.push(token)
        elif token.type == TokenType.RPAREN:
            while not op_stack.is_empty() and op_stack.peek().type != TokenType.LPAREN:
                output.append(op_stack.pop().value)
            if op_stack.is_empty():
                raise MismatchedParenthesisError("Mismatched parenthesis", token.pos)
            op_stack.pop()
        else:
            while (not op_stack.is_empty()
                   and op_stack.peek().type != TokenType.LPAREN
                   and precedence(op_stack.peek().value) >= precedence(token.value)):
                output.append(op_stack.pop().value)
            op_stack.push(token)

    while not op_stack.is_empty():
        top = op_stack.pop()
        if top.type == TokenType.LPAREN:
            raise UnclosedParenthesisError("Unclosed parenthesis", top.pos)
        output.append(top.value)

    logger.debug("Converted %r to postfix %r", infix, output)
    return output


def infix_to_postfix(infix: str, capacity: int = DEFAULT_CAPACITY, strict: bool = False) -> str:
    """Convert infix text to postfix text, tokens separated by single spaces."""
    return ' '.join(to_postfix(infix, capacity=capacity, strict=strict))
