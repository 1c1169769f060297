"""Evaluate integer postfix (reverse Polish) expressions."""

from __future__ import annotations

import operator
import sys
from typing import Callable

_DIGITS = "0123456789"


class PostfixError(ValueError):
    """The postfix expression cannot be evaluated."""


def _divide(left: int, right: int) -> int:
    if right == 0:
        raise PostfixError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def evaluate(expression: str) -> int:
    """Evaluate a postfix expression of non-negative integers and + - * /.

    Runs of digits form numbers; any other character ends a number.
    Division truncates toward zero.
    """
    stack: list[int] = []
    number: int | None = None
    for char in expression:
        if char in _DIGITS:
            number = (number or 0) * 10 + int(char)
            continue
        if number is not None:
            stack.append(number)
            number = None
        if char in _OPERATORS:
            if len(stack) < 2:
                raise PostfixError(f"not enough operands for {char!r}")
            right = stack.pop()
            left = stack.pop()
            stack.append(_OPERATORS[char](left, right))
    if number is not None:
        stack.append(number)
    if len(stack) != 1:
        raise PostfixError("wrong expression")
    return stack[0]


def main(argv: list[str] | None = None) -> int:
    """Evaluate a postfix expression given on the command line or read from stdin."""
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        expression = " ".join(argv)
    else:
        try:
            expression = input("Enter your postfix expression:")
        except EOFError:
            expression = ""
    try:
        result = evaluate(expression)
    except PostfixError:
        print("you have entered a wrong expression")
        return 1
    print(f"Output:{result}")
    return 0