"""Evaluation of simple two-operand arithmetic exercises such as ``50+40``."""

from __future__ import annotations

import operator
from typing import Callable

_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}

_DIGITS = "0123456789"


class ExpressionError(ValueError):
    """Raised when an exercise cannot be evaluated."""


def _to_number(digits: str) -> int:
    return int(digits) if digits else 0


def calculate_answer(content: str) -> int:
    """Return the answer to an exercise of the form ``<digits><op><digits>``.

    The first operand is the run of leading digits and the operator is the
    first character after it. Every digit after the operator contributes to
    the second operand; other characters there are ignored. Division
    truncates toward zero.
    """
    rest = content.lstrip(_DIGITS)
    first = content[: len(content) - len(rest)]
    if not rest:
        raise ExpressionError("无效的操作符!")
    op, tail = rest[0], rest[1:]
    left = _to_number(first)
    right = _to_number("".join(ch for ch in tail if ch in _DIGITS))

    if op == "/":
        if right == 0:
            raise ExpressionError("除数不能为零!")
        return left // right
    try:
        return _OPERATORS[op](left, right)
    except KeyError:
        raise ExpressionError("无效的操作符!") from None