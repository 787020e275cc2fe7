# test_calculator.py

import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from postfix_calc.calculator import (
    INPUT_PROMPT,
    Evaluation,
    calculate,
    check_input_length,
    format_result,
    read_expression,
    render,
)
from postfix_calc.config import Settings
from postfix_calc.errors import (
    DivisionByZeroError,
    InputReadFailureError,
    InputTooLongError,
    InvalidTokenError,
    MismatchedParenthesisError,
    UnclosedParenthesisError,
)

# ---------------------------
# Pipeline Tests
# ---------------------------

@pytest.mark.parametrize("infix,postfix,formatted", [
    ("3 + 4 * 2", "3 4 2 * +", "11.0000"),
    ("(3 + 4) * 2", "3 4 + 2 *", "14.0000"),
    ("2 ^ 3", "2 3 ^", "8.0000"),
    ("3.5 + 1.5", "3.5 1.5 +", "5.0000"),
    ("1 / 3", "1 3 /", "0.3333"),
    ("100 - 99.5", "100 99.5 -", "0.5000"),
])
def test_calculate(infix, postfix, formatted):
    evaluation = calculate(infix)
    assert evaluation.expression == infix
    assert evaluation.postfix == postfix
    assert evaluation.formatted == formatted


def test_calculate_strips_line_terminator():
    evaluation = calculate("1 + 2\n")
    assert evaluation.expression == "1 + 2"
    assert evaluation.result == 3.0


def test_calculate_respects_precision():
    assert calculate("1 / 3", Settings(precision=2)).formatted == "0.33"
    assert calculate("2 ^ 3", Settings(precision=0)).formatted == "8"


def test_calculate_division_by_zero():
    with pytest.raises(DivisionByZeroError):
        calculate("5 / 0")


def test_calculate_unbalanced_parentheses():
    with pytest.raises(UnclosedParenthesisError):
        calculate("(1 + 2")
    with pytest.raises(MismatchedParenthesisError):
        calculate("1 + 2)")


def test_unknown_symbol_fails_in_both_modes():
    with pytest.raises(InvalidTokenError) as lenient:
        calculate("1 $ 2")
    assert "Unknown binary operator" in str(lenient.value)
    with pytest.raises(InvalidTokenError) as strict:
        calculate("1 $ 2", Settings(strict_tokens=True))
    assert "Unexpected character" in str(strict.value)


def test_input_length_limit_counts_terminator():
    longest = "1" * 255
    assert calculate(longest).result == float(longest)
    with pytest.raises(InputTooLongError):
        calculate("1" * 256)
    with pytest.raises(InputTooLongError):
        calculate("1 + 2", Settings(max_input_length=5))


def test_check_input_length():
    assert check_input_length("1 + 2\r\n", 10) == "1 + 2"
    with pytest.raises(InputTooLongError) as e:
        check_input_length("123456", 6)
    assert "limit is 5" in str(e.value)


def test_independent_concurrent_calculations():
    expressions = ["(%d + 1) * 2" % i for i in range(200)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda e: calculate(e).result, expressions))
    assert results == [(i + 1) * 2.0 for i in range(200)]

# ---------------------------
# Input Tests
# ---------------------------

def test_read_expression_uses_prompt():
    prompts = []

    def reader(prompt):
        prompts.append(prompt)
        return "2 * 3"

    assert read_expression(reader) == "2 * 3"
    assert prompts == [INPUT_PROMPT]


def test_read_expression_end_of_input():
    def reader(prompt):
        raise EOFError

    with pytest.raises(InputReadFailureError) as e:
        read_expression(reader)
    assert "Error reading input" in str(e.value)


def test_read_expression_io_error():
    def reader(prompt):
        raise OSError("device not ready")

    with pytest.raises(InputReadFailureError) as e:
        read_expression(reader)
    assert "device not ready" in str(e.value)


def test_read_expression_too_long():
    with pytest.raises(InputTooLongError):
        read_expression(lambda prompt: "9" * 300)

# ---------------------------
# Output Tests
# ---------------------------

def test_format_result():
    assert format_result(11.0) == "11.0000"
    assert format_result(-2.5, 1) == "-2.5"
    assert format_result(math.nan) == "nan"
    assert format_result(math.inf) == "inf"
    assert format_result(-math.inf) == "-inf"


def test_render():
    evaluation = Evaluation(expression="3 + 4 * 2", postfix="3 4 2 * +", result=11.0)
    assert render(evaluation) == (
        "--> Postfix Notation: 3 4 2 * +\n"
        "--> Evaluation Result: 11.0000"
    )
