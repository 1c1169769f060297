"""Check that the brackets in an expression are balanced."""

from __future__ import annotations

import sys

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())


class BalanceError(ValueError):
    """The brackets of an expression do not balance."""


class ExtraClosingError(BalanceError):
    """A closing bracket appeared with no opening bracket left to match."""

    def __init__(self, closing: str, position: int) -> None:
        super().__init__("Right parentheses are more than left parentheses")
        self.closing = closing
        self.position = position


class MismatchError(BalanceError):
    """A closing bracket does not match the most recent opening bracket."""

    def __init__(self, opening: str, closing: str, position: int) -> None:
        super().__init__(f"Mismatched parentheses are : {opening} and {closing}")
        self.opening = opening
        self.closing = closing
        self.position = position


class UnclosedError(BalanceError):
    """Opening brackets remain unclosed at the end of the expression."""

    def __init__(self, unclosed: str) -> None:
        super().__init__("Left parentheses more than right parentheses")
        self.unclosed = unclosed


def check(expression: str) -> None:
    """Raise a BalanceError subclass if the brackets in expression do not balance."""
    stack: list[str] = []
    for position, char in enumerate(expression):
        if char in _OPENING:
            stack.append(char)
        elif char in _PAIRS:
            if not stack:
                raise ExtraClosingError(char, position)
            opening = stack.pop()
            if _PAIRS[char] != opening:
                raise MismatchError(opening, char, position)
    if stack:
        raise UnclosedError("".join(stack))


def is_balanced(expression: str) -> bool:
    """Return True if every bracket in expression is properly matched."""
    try:
        check(expression)
    except BalanceError:
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    """Check an expression given on the command line or read from stdin."""
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        expression = " ".join(argv)
    else:
        try:
            expression = input("Enter an algebraic expression : ")
        except EOFError:
            expression = ""
    try:
        check(expression)
    except BalanceError as error:
        print(error)
        print("Invalid expression")
    else:
        print("Balanced Parentheses")
        print("Valid expression")
    return 0