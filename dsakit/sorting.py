"""In-place heap sort and quick sort."""

from __future__ import annotations

import argparse
from typing import Any, MutableSequence

_DEMO = [12, 11, 13, 5, 6, 7]


def heapify(items: MutableSequence[Any], size: int, index: int) -> None:
    """Sift items[index] down so the subtree rooted there is a max-heap.

    Only the first ``size`` items take part.
    """
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def build_max_heap(items: MutableSequence[Any]) -> None:
    """Rearrange items in place into a max-heap."""
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        heapify(items, size, index)


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort items in place in ascending order using a max-heap."""
    build_max_heap(items)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort items in place in ascending order, partitioning on the first item."""
    pending = [(0, len(items) - 1)]
    while pending:
        first, last = pending.pop()
        if first >= last:
            continue
        pivot = items[first]
        i, j = first, last
        while i < j:
            while items[i] <= pivot and i < last:
                i += 1
            while items[j] > pivot:
                j -= 1
            if i < j:
                items[i], items[j] = items[j], items[i]
        items[first], items[j] = items[j], items[first]
        pending.append((first, j - 1))
        pending.append((j + 1, last))


def _format(items: MutableSequence[Any]) -> str:
    return " ".join(str(item) for item in items)


def main(argv: list[str] | None = None) -> int:
    """Sort the given integers (or a demo array) with both algorithms."""
    parser = argparse.ArgumentParser(description="Heap sort and quick sort.")
    parser.add_argument("numbers", nargs="*", type=int)
    args = parser.parse_args(argv)
    original = args.numbers or list(_DEMO)

    print("Original array:")
    print(_format(original))

    heap_items = list(original)
    build_max_heap(heap_items)
    print("Heapified array (Max-Heap):")
    print(_format(heap_items))
    heap_sort(heap_items)
    print("Sorted array:")
    print(_format(heap_items))

    quick_items = list(original)
    quick_sort(quick_items)
    print(f"The Sorted Order is: {_format(quick_items)}")
    return 0