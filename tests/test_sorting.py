import random

import pytest

from dsakit.sorting import build_max_heap, heap_sort, heapify, main, quick_sort

_FIXED = [
    [],
    [1],
    [2, 1],
    [12, 11, 13, 5, 6, 7],
    [3, 3, 3, 1, 1, 2],
    [-5, 0, 5, -10, 10],
    list(range(20)),
    list(range(20, 0, -1)),
]

_GENERATOR = random.Random(1234)
ALL_CASES = _FIXED + [
    [_GENERATOR.randint(-50, 50) for _ in range(_GENERATOR.randint(0, 40))]
    for _ in range(25)
]


def _is_max_heap(items, size):
    return all(items[(child - 1) // 2] >= items[child] for child in range(1, size))


@pytest.mark.parametrize("sort", [heap_sort, quick_sort])
@pytest.mark.parametrize("items", ALL_CASES)
def test_sort_matches_sorted(sort, items):
    data = list(items)
    sort(data)
    assert data == sorted(items)


@pytest.mark.parametrize("items", ALL_CASES)
def test_build_max_heap_invariant(items):
    data = list(items)
    build_max_heap(data)
    assert _is_max_heap(data, len(data))
    assert sorted(data) == sorted(items)
    if data:
        assert data[0] == max(items)


def test_heapify_sifts_root_down():
    data = [1, 9, 8, 7, 6, 5, 4]
    heapify(data, len(data), 0)
    assert _is_max_heap(data, len(data))
    assert sorted(data) == [1, 4, 5, 6, 7, 8, 9]


def test_heapify_respects_size():
    data = [1, 2, 3, 100]
    heapify(data, 3, 0)
    assert data[3] == 100
    assert _is_max_heap(data, 3)


@pytest.mark.parametrize(
    "argv, expected",
    [
        (
            [],
            [
                "Original array:\n12 11 13 5 6 7",
                "Sorted array:\n5 6 7 11 12 13",
                "The Sorted Order is: 5 6 7 11 12 13",
            ],
        ),
        (
            ["3", "-1", "2"],
            ["Sorted array:\n-1 2 3", "The Sorted Order is: -1 2 3"],
        ),
    ],
)
def test_main(capsys, argv, expected):
    assert main(argv) == 0
    out = capsys.readouterr().out
    for fragment in expected:
        assert fragment in out