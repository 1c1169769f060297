"""A stack built from linked nodes."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

from dsakit.array_stack import _ask_int, _read_int

_MENU = "\n".join(
    f" {number} - {label}"
    for number, label in enumerate(
        ("Push", "Pop", "Top", "Empty", "Exit", "Display", "Stack Count", "Destroy stack"),
        start=1,
    )
)


class EmptyStackError(IndexError):
    """The stack has no elements."""


@dataclass
class _Node:
    value: Any
    below: Optional["_Node"]


class LinkedStack:
    """A last-in first-out stack of linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._count = 0

    def push(self, value: Any) -> None:
        """Put value on top of the stack."""
        self._top = _Node(value, self._top)
        self._count += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise EmptyStackError("Trying to pop from empty stack")
        value = self._top.value
        self._top = self._top.below
        self._count -= 1
        return value

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise EmptyStackError("No elements in stack")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def clear(self) -> None:
        """Remove every element."""
        self._top = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below


def main(argv: list[str] | None = None) -> int:
    """Run an interactive menu over a linked stack."""
    argparse.ArgumentParser(description="Stack operations using linked nodes.").parse_args(argv)
    print("\n" + _MENU)
    stack = LinkedStack()
    try:
        while True:
            choice = _read_int("\n Enter choice : ")
            if choice == 1:
                stack.push(_ask_int("Enter data : "))
            elif choice == 2:
                try:
                    print(f"\n Popped value : {stack.pop()}")
                except EmptyStackError as error:
                    print(f"\n Error : {error}")
            elif choice == 3:
                try:
                    print(f"\n Top element : {stack.top()}")
                except EmptyStackError as error:
                    print(error)
            elif choice == 4:
                if stack.is_empty():
                    print("\n Stack is empty")
                else:
                    print(f"\n Stack is not empty with {len(stack)} elements")
            elif choice == 5:
                return 0
            elif choice == 6:
                if stack.is_empty():
                    print("Stack is empty")
                else:
                    print(" ".join(str(value) for value in stack))
            elif choice == 7:
                print(f"\n No. of elements in stack : {len(stack)}")
            elif choice == 8:
                stack.clear()
                print("\n All stack elements destroyed")
            else:
                print(" Wrong choice, Please enter correct choice  ")
    except EOFError:
        return 0