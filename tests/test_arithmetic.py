import pytest

from oralmath.arithmetic import ExpressionError, calculate_answer


def test_worked_example_addition():
    assert calculate_answer("50+40") == 90


def test_division_truncates():
    assert calculate_answer("7/2") == 3


def test_multiplication():
    assert calculate_answer("12*3") == 36


def test_addition_is_commutative():
    assert calculate_answer("17+25") == calculate_answer("25+17")


def test_subtraction_may_go_negative():
    assert calculate_answer("3-10") < 0


def test_non_digits_after_operator_are_ignored():
    assert calculate_answer("5+x3") == calculate_answer("5+3")


def test_missing_second_operand_counts_as_zero():
    assert calculate_answer("5+") == calculate_answer("5+0")


def test_missing_first_operand_counts_as_zero():
    assert calculate_answer("*9") == calculate_answer("0*9")


def test_division_by_zero():
    with pytest.raises(ExpressionError):
        calculate_answer("8/0")


def test_no_operator():
    with pytest.raises(ExpressionError):
        calculate_answer("123")


def test_empty_expression():
    with pytest.raises(ExpressionError):
        calculate_answer("")


@pytest.mark.parametrize("text", ["5%3", "5^3", "5 + 3"])
def test_unknown_operator(text):
    with pytest.raises(ExpressionError):
        calculate_answer(text)