"""A doubly linked list addressed by 1-based positions."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


class EmptyListError(IndexError):
    """The list has no nodes."""


class InvalidPositionError(IndexError):
    """A position lies outside the list."""


@dataclass(eq=False)
class _Node:
    data: Any
    prev: Optional["_Node"] = field(default=None, repr=False)
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """A chain of nodes, each linked to both its neighbours."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _node_at(self, position: int) -> _Node:
        """Return the node at a 1-based position already known to be valid."""
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.data

    def insert_at_beginning(self, data: Any) -> None:
        """Put data in a new first node."""
        node = _Node(data, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_at_end(self, data: Any) -> None:
        """Put data in a new last node."""
        node = _Node(data, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at_position(self, data: Any, position: int) -> None:
        """Insert data so that it occupies the 1-based position.

        An empty list accepts only position 1; otherwise the position must
        name an existing node, which then moves one place back.
        """
        if self._head is None:
            valid = position == 1
        else:
            valid = 1 <= position <= self._size
        if not valid:
            raise InvalidPositionError("Invalid position!")
        if position == 1:
            self.insert_at_beginning(data)
            return
        following = self._node_at(position)
        previous = following.prev
        assert previous is not None
        node = _Node(data, previous, following)
        previous.next = node
        following.prev = node
        self._size += 1

    def delete_from_beginning(self) -> Any:
        """Remove the first node and return its data."""
        if self._head is None:
            raise EmptyListError("List is Empty!")
        return self._unlink(self._head)

    def delete_from_end(self) -> Any:
        """Remove the last node and return its data."""
        if self._tail is None:
            raise EmptyListError("List is Empty!")
        return self._unlink(self._tail)

    def delete_from_position(self, position: int) -> Any:
        """Remove the node at the 1-based position and return its data."""
        if self._head is None:
            raise EmptyListError("List is Empty!")
        if not 1 <= position <= self._size:
            raise InvalidPositionError("Invalid position!")
        return self._unlink(self._node_at(position))

    def search(self, data: Any) -> int | None:
        """Return the 1-based position of the first node holding data, or None."""
        for position, value in enumerate(self, start=1):
            if value == data:
                return position
        return None

    def update(self, data: Any, position: int) -> None:
        """Replace the data of the node at the 1-based position."""
        if self._head is None:
            raise EmptyListError("List is Empty!")
        if not 1 <= position <= self._size:
            raise InvalidPositionError("Invalid position!")
        self._node_at(position).data = data

    def sort(self) -> None:
        """Sort the data in ascending order by insertion sort over the links."""
        if self._head is None:
            raise EmptyListError("List is Empty!")
        current = self._head
        while current is not None:
            key = current.data
            slot = current
            while slot.prev is not None and slot.prev.data > key:
                slot.data = slot.prev.data
                slot = slot.prev
            slot.data = key
            current = current.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev


_MENU = "\n".join(
    [
        "\n\n------ Doubly Linked List -------\n",
        "1. Insert a node at the beginning",
        "2. Insert a node at the end",
        "3. Insert a node at the given position",
        "\n4. Delete a node from the beginning",
        "5. Delete a node from the end",
        "6. Delete a node from the given position",
        "\n7. Print list from the beginning",
        "8. Print list from the end",
        "9. Search a node data",
        "10. Update a node data",
        "11. Sort the list",
        "12. Exit",
        "\n------------------------------",
    ]
)


def _read_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            continue


def _run_choice(items: DoublyLinkedList, choice: int | None) -> bool:
    """Carry out one menu choice; return False when the program should stop."""
    if choice == 1:
        data = _read_int("\n\nEnter Data: ")
        items.insert_at_beginning(data)
        print(f"\n* Node with data {data} was inserted ")
    elif choice == 2:
        data = _read_int("\n\nEnter Data: ")
        items.insert_at_end(data)
        print(f"\n* Node with data {data} was inserted ")
    elif choice == 3:
        data = _read_int("\n\nEnter Data: ")
        position = _read_int("\nEnter Position: ")
        items.insert_at_position(data, position)
        print(f"\n* Node with data {data} was inserted ")
    elif choice == 4:
        print(f"\n* Node with data {items.delete_from_beginning()} was deleted ")
    elif choice == 5:
        print(f"\n* Node with data {items.delete_from_end()} was deleted ")
    elif choice == 6:
        position = _read_int("\nEnter Position: ")
        print(f"\n* Node with data {items.delete_from_position(position)} was deleted ")
    elif choice == 7:
        print("".join(f"{value}  " for value in items) + "NULL")
    elif choice == 8:
        print("".join(f"{value}  " for value in reversed(items)) + "NULL")
    elif choice == 9:
        data = _read_int("\n\nEnter Data: ")
        position = items.search(data)
        if position is None:
            print(f"\nNode with data {data} was not found")
        else:
            print(f"\nNode found at {position} position")
    elif choice == 10:
        data = _read_int("\n\nEnter Data: ")
        position = _read_int("\nEnter Position: ")
        items.update(data, position)
        print(f"\nNode Number {position} was Updated!")
    elif choice == 11:
        items.sort()
        print("\nList was sorted!")
    elif choice == 12:
        print("\nProgram was terminated\n")
        return False
    else:
        print("\n\tInvalid Choice")
    return True


def main(argv: list[str] | None = None) -> int:
    """Run an interactive menu over a doubly linked list."""
    argparse.ArgumentParser(description="Doubly linked list operations.").parse_args(argv)
    items = DoublyLinkedList()
    try:
        while True:
            print(_MENU)
            try:
                choice: int | None = int(input("\nEnter your choice: ").strip())
            except ValueError:
                choice = None
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