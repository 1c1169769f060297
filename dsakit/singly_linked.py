"""A singly linked list addressed by 1-based positions."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from dsakit.array_stack import _ask_int, _read_int

_MENU = "\n".join(
    (
        "\n\n------ Singly Linked List -------\n",
        "1. Insert a node at beginning",
        "2. Insert a node at end",
        "3. Insert a node at given position",
        "\n4. Delete a node from beginning",
        "5. Delete a node from end",
        "6. Delete a node from given position",
        "\n7. Print list from beginning",
        "8. Print list from end",
        "9. Search a node data",
        "10. Update a node data",
        "11. Exit",
        "\n------------------------------",
    )
)

_DATA_PROMPT = "\n\nEnter Data: "
_POSITION_PROMPT = "\nEnter Position: "


class EmptyListError(IndexError):
    """The list has no nodes."""


class InvalidPositionError(IndexError):
    """A position lies outside the list."""


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class SinglyLinkedList:
    """A chain of nodes, each pointing to the next one."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        tail: _Node | None = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _node_at(self, position: int) -> _Node:
        """Return the node at a 1-based position already known to be valid."""
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def _check_position(self, position: int, action: str) -> None:
        if not 1 <= position <= self._size:
            raise InvalidPositionError(f"Invalid position to {action} a node")

    def insert_at_beginning(self, data: Any) -> None:
        """Put data in a new first node."""
        self._head = _Node(data, self._head)
        self._size += 1

    def insert_at_end(self, data: Any) -> None:
        """Put data in a new last node."""
        node = _Node(data)
        if self._head is None:
            self._head = node
        else:
            self._node_at(self._size).next = node
        self._size += 1

    def insert_at_position(self, data: Any, position: int) -> None:
        """Insert data so that it occupies the 1-based position.

        An empty list accepts only position 1; otherwise the position must
        name an existing node, which then moves one place back.
        """
        if self._head is None:
            if position != 1:
                raise InvalidPositionError("Invalid position to insert a node")
        else:
            self._check_position(position, "insert")
        if position == 1:
            self.insert_at_beginning(data)
            return
        previous = self._node_at(position - 1)
        previous.next = _Node(data, previous.next)
        self._size += 1

    def delete_at_beginning(self) -> Any:
        """Remove the first node and return its data."""
        if self._head is None:
            raise EmptyListError("List is Empty!")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def delete_at_end(self) -> Any:
        """Remove the last node and return its data."""
        if self._head is None:
            raise EmptyListError("List is Empty!")
        return self.delete_at_position(self._size)

    def delete_at_position(self, position: int) -> Any:
        """Remove the node at the 1-based position and return its data."""
        self._check_position(position, "delete")
        if position == 1:
            return self.delete_at_beginning()
        previous = self._node_at(position - 1)
        node = previous.next
        assert node is not None
        previous.next = node.next
        self._size -= 1
        return node.data

    def search(self, data: Any) -> int | None:
        """Return the 1-based position of the first node holding data, or None."""
        return next(
            (position for position, value in enumerate(self, start=1) if value == data),
            None,
        )

    def update(self, data: Any, position: int) -> None:
        """Replace the data of the node at the 1-based position."""
        self._check_position(position, "update")
        self._node_at(position).data = data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        return reversed(list(self))


def _inserted(data: Any) -> str:
    return f"\n* Node with data {data} was Inserted"


def _deleted(data: Any) -> str:
    return f"\n* Node with data {data} was Deleted"


def _run_choice(items: SinglyLinkedList, choice: int | None) -> bool:
    """Carry out one menu choice; return False when the program should stop."""
    if choice == 1:
        data = _ask_int(_DATA_PROMPT)
        items.insert_at_beginning(data)
        print(_inserted(data))
    elif choice == 2:
        data = _ask_int(_DATA_PROMPT)
        items.insert_at_end(data)
        print(_inserted(data))
    elif choice == 3:
        data = _ask_int(_DATA_PROMPT)
        items.insert_at_position(data, _ask_int(_POSITION_PROMPT))
        print(_inserted(data))
    elif choice == 4:
        print(_deleted(items.delete_at_beginning()))
    elif choice == 5:
        print(_deleted(items.delete_at_end()))
    elif choice == 6:
        print(_deleted(items.delete_at_position(_ask_int(_POSITION_PROMPT))))
    elif choice == 7:
        if not len(items):
            raise EmptyListError("List is Empty!")
        print("  ".join(str(value) for value in items))
    elif choice == 8:
        print("  ".join(str(value) for value in reversed(items)))
    elif choice == 9:
        data = _ask_int(_DATA_PROMPT)
        position = items.search(data)
        if position is None:
            print(f"\nNode with data {data} was not found!")
        else:
            print(f"\nFound data at {position} position")
    elif choice == 10:
        data = _ask_int(_DATA_PROMPT)
        items.update(data, _ask_int(_POSITION_PROMPT))
        print(f"\nUpdated node data is {data}")
    elif choice == 11:
        print("\nProgram was terminated\n")
        return False
    else:
        print("\n\tInvalid Choice")
    return True


def main(argv: list[str] | None = None) -> int:
    """Run an interactive menu over a singly linked list."""
    argparse.ArgumentParser(description="Singly linked list operations.").parse_args(argv)
    items = SinglyLinkedList()
    try:
        while True:
            print(_MENU)
            choice = _read_int("\nEnter your choice: ")
            print("\n------------------------------")
            try:
                if not _run_choice(items, choice):
                    return 0
            except (EmptyListError, InvalidPositionError) as error:
                print(f"\n{error}")
            print("\n...............................")
            reply = input("\nDo you want to continue? (Y/N) : ").strip()
            if reply[:1] not in ("Y", "y"):
                return 0
    except EOFError:
        return 0