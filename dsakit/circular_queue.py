"""A fixed-capacity circular queue."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from typing import Any

from dsakit.array_stack import _ask_int, _read_int

DEFAULT_CAPACITY = 6

_MENU = "\n".join(
    (
        "\n Press 1: Insert an element",
        "Press 2: Delete an element",
        "Press 3: Display the element",
    )
)


class QueueOverflowError(Exception):
    """Enqueued onto a full queue."""


class QueueUnderflowError(IndexError):
    """Dequeued from an empty queue."""


class CircularQueue:
    """A first-in first-out queue stored in a ring of fixed size."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def enqueue(self, value: Any) -> None:
        """Add value at the rear of the queue."""
        if self.is_full():
            raise QueueOverflowError("Queue is overflow")
        self._slots[(self._front + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if self.is_empty():
            raise QueueUnderflowError("Queue is underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._size -= 1
        self._front = 0 if self._size == 0 else (self._front + 1) % self.capacity
        return value

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % self.capacity]


def main(argv: list[str] | None = None) -> int:
    """Run an interactive menu over a circular queue; 0 or 4 and above quit."""
    parser = argparse.ArgumentParser(description="Circular queue operations.")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    args = parser.parse_args(argv)
    queue = CircularQueue(args.capacity)
    choice: int | None = 1
    try:
        while choice is not None and 0 < choice < 4:
            print(_MENU)
            choice = _read_int("Enter your choice")
            if choice == 1:
                try:
                    queue.enqueue(_ask_int("Enter the element which is to be inserted"))
                except QueueOverflowError as error:
                    print(f"{error}..")
            elif choice == 2:
                try:
                    print(f"\nThe dequeued element is {queue.dequeue()}")
                except QueueUnderflowError as error:
                    print(f"\n{error}..")
            elif choice == 3:
                if queue.is_empty():
                    print("\n Queue is empty..")
                else:
                    items = "".join(f"{value}," for value in queue)
                    print(f"\nElements in a Queue are :{items}")
    except EOFError:
        pass
    return 0