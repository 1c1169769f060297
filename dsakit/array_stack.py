"""A stack with a fixed capacity."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from typing import Any

MAX_CAPACITY = 100

_MENU = "\n".join(
    (
        "\n\t STACK OPERATIONS USING ARRAY",
        "\t--------------------------------",
        "\t 1.PUSH\n\t 2.POP\n\t 3.DISPLAY\n\t 4.EXIT",
    )
)


class StackOverflowError(Exception):
    """Pushed onto a full stack."""


class StackUnderflowError(IndexError):
    """Popped or peeked on an empty stack."""


class BoundedStack:
    """A last-in first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if not 0 <= capacity <= MAX_CAPACITY:
            raise ValueError(f"capacity must be between 0 and {MAX_CAPACITY}")
        self.capacity = capacity
        self._items: list[Any] = []

    def _require_items(self) -> None:
        if not self._items:
            raise StackUnderflowError("Stack is under flow")

    def push(self, value: Any) -> None:
        """Put value on top of the stack."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("STACK is over flow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        self._require_items()
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        self._require_items()
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)


def _read_int(prompt: str) -> int | None:
    """Ask once for an integer; return None when the reply is not one."""
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _ask_int(prompt: str) -> int:
    """Ask for an integer until one is given."""
    value = _read_int(prompt)
    while value is None:
        value = _read_int(prompt)
    return value


def _display(stack: BoundedStack) -> None:
    if len(stack):
        print("\n The elements in STACK ")
        print("\n".join(str(value) for value in stack))
        print(" Press Next Choice")
    else:
        print("\n The STACK is empty")


def main(argv: list[str] | None = None) -> int:
    """Run an interactive menu over a bounded stack."""
    parser = argparse.ArgumentParser(description="Stack operations using an array.")
    parser.add_argument("capacity", nargs="?", type=int, help="size of the stack")
    args = parser.parse_args(argv)
    try:
        capacity = args.capacity
        while capacity is None or not 0 <= capacity <= MAX_CAPACITY:
            capacity = _read_int(f"\n Enter the size of STACK[MAX={MAX_CAPACITY}]:")
        stack = BoundedStack(capacity)
        print(_MENU)
        while True:
            choice = _read_int("\n Enter the Choice:")
            if choice == 1:
                if len(stack) >= stack.capacity:
                    print("\n\tSTACK is over flow")
                else:
                    stack.push(_ask_int(" Enter a value to be pushed:"))
            elif choice == 2:
                try:
                    print(f"\n\t The popped elements is {stack.pop()}")
                except StackUnderflowError as error:
                    print(f"\n\t {error}")
            elif choice == 3:
                _display(stack)
            elif choice == 4:
                print("\n\t EXIT POINT ")
                return 0
            else:
                print("\n\t Please Enter a Valid Choice(1/2/3/4)")
    except EOFError:
        return 0