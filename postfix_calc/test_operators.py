# test_operators.py

import math

import pytest

from postfix_calc.errors import DivisionByZeroError, InvalidTokenError
from postfix_calc.operators import OPERATORS, apply_operator, precedence


@pytest.mark.parametrize("op,expected", [
    ('^', 3),
    ('*', 2),
    ('/', 2),
    ('+', 1),
    ('-', 1),
    ('(', 0),
    (')', 0),
    ('$', 0),
])
def test_precedence_table(op, expected):
    assert precedence(op) == expected


def test_operator_set():
    assert OPERATORS == {'+', '-', '*', '/', '^'}


@pytest.mark.parametrize("op,left,right,expected", [
    ('+', 3, 4, 7.0),
    ('-', 10, 4, 6.0),
    ('*', 2.5, 4, 10.0),
    ('/', 7, 2, 3.5),
    ('^', 2, 10, 1024.0),
    ('^', 9, 0.5, 3.0),
])
def test_apply_operator(op, left, right, expected):
    assert math.isclose(apply_operator(op, left, right), expected)


def test_apply_operator_returns_float():
    assert isinstance(apply_operator('+', 1, 2), float)


def test_division_by_zero_raises():
    with pytest.raises(DivisionByZeroError) as e:
        apply_operator('/', 5, 0)
    assert "Division by zero" in str(e.value)


def test_unknown_operator_raises():
    with pytest.raises(InvalidTokenError) as e:
        apply_operator('%', 5, 2)
    assert "Unknown binary operator" in str(e.value)


def test_power_domain_rules():
    assert math.isnan(apply_operator('^', -8, 0.5))
    assert apply_operator('^', 0, -1) == math.inf
    assert apply_operator('^', 10, 400) == math.inf
    assert apply_operator('^', -10, 401) == -math.inf
    assert apply_operator('^', -10, 400) == math.inf
    assert apply_operator('^', -2, 3) == -8.0


def test_power_of_signed_zero_to_negative_odd_integer():
    assert apply_operator('^', -0.0, -1) == -math.inf
    assert apply_operator('^', -0.0, -3) == -math.inf
    assert apply_operator('^', -0.0, -2) == math.inf
    assert apply_operator('^', 0.0, -1) == math.inf
