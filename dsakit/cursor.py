"""A cursor that walks back and forth over a singly linked list."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional


class CursorBoundaryError(IndexError):
    """The cursor cannot move past an end of the list."""


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class ListCursor:
    """A position within a non-empty singly linked list.

    Moving back walks again from the first node to find the predecessor.
    """

    def __init__(self, values: Iterable[Any]) -> None:
        head: _Node | None = None
        tail: _Node | None = None
        for value in values:
            node = _Node(value)
            if tail is None:
                head = node
            else:
                tail.next = node
            tail = node
        if head is None:
            raise ValueError("a cursor needs at least one value")
        self._head = head
        self._current = head

    def value(self) -> Any:
        """Return the value under the cursor."""
        return self._current.value

    def move_forward(self) -> Any:
        """Move to the next node and return its value."""
        if self._current.next is None:
            raise CursorBoundaryError(
                f"Pointer at last node {self._current.value}. Cannot move ahead."
            )
        self._current = self._current.next
        return self._current.value

    def move_back(self) -> Any:
        """Move to the previous node and return its value."""
        if self._current is self._head:
            raise CursorBoundaryError(
                f"Pointer at first node {self._current.value}. Cannot move behind."
            )
        node = self._head
        while node.next is not self._current:
            assert node.next is not None
            node = node.next
        self._current = node
        return node.value


def _read_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            continue


def _read_values() -> list[int]:
    values: list[int] = []
    while True:
        values.append(_read_int("Enter number: "))
        if _read_int("Do you wish to continue [1/0]: ") == 0:
            print()
            return values


def main(argv: list[str] | None = None) -> int:
    """Build a list from arguments or prompts and move a cursor over it."""
    parser = argparse.ArgumentParser(description="Move a cursor over a linked list.")
    parser.add_argument("numbers", nargs="*", type=int)
    args = parser.parse_args(argv)
    try:
        values = args.numbers
        if not values:
            print("Enter data into the list")
            values = _read_values()
        print("Displaying list:")
        print("\t".join(str(value) for value in values))
        cursor = ListCursor(values)
        print(f"\nPointer at {cursor.value()}")
        while True:
            choice = _read_int(
                "Select option:\n1. Move front\n2. Move back\n3. Exit\nYour choice: "
            )
            try:
                if choice == 1:
                    print(f"\nPointer at {cursor.move_forward()}")
                elif choice == 2:
                    print(f"\nPointer at {cursor.move_back()}")
                elif choice == 3:
                    return 0
                else:
                    print("\nInvalid choice entered. Try again")
            except CursorBoundaryError as error:
                print(f"\n{error}")
    except EOFError:
        return 0