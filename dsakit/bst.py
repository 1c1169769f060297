"""An unbalanced binary search tree of comparable values."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    data: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """Values greater than a node go right; the rest, duplicates included, go left."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, data: Any) -> None:
        """Add data as a new leaf."""
        node = _Node(data)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        parent = self._root
        while True:
            if data > parent.data:
                if parent.right is None:
                    parent.right = node
                    return
                parent = parent.right
            else:
                if parent.left is None:
                    parent.left = node
                    return
                parent = parent.left

    def delete(self, key: Any) -> bool:
        """Remove one node holding key; return whether one was found."""
        parent: _Node | None = None
        node = self._root
        while node is not None and node.data != key:
            parent = node
            node = node.left if key < node.data else node.right
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.data = successor.data
            parent, node = successor_parent, successor
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1
        return True

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key == node.data:
                return True
            node = node.right if key > node.data else node.left
        return False

    def smallest(self) -> Any:
        """Return the smallest value, or None if the tree is empty."""
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.data

    def largest(self) -> Any:
        """Return the largest value, or None if the tree is empty."""
        node = self._root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.data

    def inorder(self) -> list[Any]:
        """Return the values in left, node, right order."""
        return list(self)

    def preorder(self) -> list[Any]:
        """Return the values in node, left, right order."""
        result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> list[Any]:
        """Return the values in left, right, node order."""
        result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values in ascending (inorder) order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right


_MENU = "\n".join(
    [
        "\n\n------- Binary Search Tree ------\n",
        "1. Insert",
        "2. Delete",
        "3. Search",
        "4. Get Larger Node Data",
        "5. Get smaller Node data",
        "\n-- Traversals --",
        "\n6. Inorder ",
        "7. Post Order ",
        "8. Pre Order ",
        "9. Exit",
    ]
)


def _read_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            continue


def _run_choice(tree: BinarySearchTree, choice: int | None) -> None:
    if choice == 1:
        data = _read_int("\nEnter Data: ")
        tree.insert(data)
        print(f"\n* node having data {data} was inserted")
    elif choice == 2:
        tree.delete(_read_int("\nEnter Data: "))
    elif choice == 3:
        if _read_int("\nEnter Data: ") in tree:
            print("\nData was found!")
        else:
            print("\nData was not found!")
    elif choice == 4:
        if len(tree):
            print(f"\nLargest Data: {tree.largest()}")
    elif choice == 5:
        if len(tree):
            print(f"\nSmallest Data: {tree.smallest()}")
    elif choice == 6:
        print("".join(f"{value} " for value in tree.inorder()))
    elif choice == 7:
        print("".join(f"{value} " for value in tree.postorder()))
    elif choice == 8:
        print("".join(f"{value} " for value in tree.preorder()))
    elif choice == 9:
        print("\n\nProgram was terminated")
    else:
        print("\n\tInvalid Choice")


def main(argv: list[str] | None = None) -> int:
    """Run an interactive menu over a binary search tree."""
    argparse.ArgumentParser(description="Binary search tree operations.").parse_args(argv)
    tree = BinarySearchTree()
    try:
        while True:
            print(_MENU)
            try:
                choice: int | None = int(input("\nEnter Your Choice: ").strip())
            except ValueError:
                choice = None
            print()
            _run_choice(tree, choice)
            reply = input("\n__________\nDo you want to continue? ").strip()
            if reply[:1] not in ("Y", "y"):
                return 0
    except EOFError:
        return 0