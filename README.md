# dsakit

A small collection of classic data structures and algorithms. Each one can
be used as a library, and each has a command-line front end.

## What is inside

| Module                  | Provides                                                       |
|-------------------------|----------------------------------------------------------------|
| `dsakit.balanced`       | `check`, `is_balanced` and the `BalanceError` family           |
| `dsakit.postfix`        | `evaluate` for integer postfix expressions, `PostfixError`     |
| `dsakit.array_stack`    | `BoundedStack` with a fixed capacity (0 to 100)                |
| `dsakit.linked_stack`   | `LinkedStack`, an unbounded stack of linked nodes              |
| `dsakit.circular_queue` | `CircularQueue`, a fixed-size ring queue (default capacity 6)  |
| `dsakit.sorting`        | `heapify`, `build_max_heap`, `heap_sort`, `quick_sort`         |
| `dsakit.singly_linked`  | `SinglyLinkedList` with 1-based positional operations          |
| `dsakit.cursor`         | `ListCursor`, a cursor that steps back and forth over a list   |
| `dsakit.doubly_linked`  | `DoublyLinkedList` with 1-based positions and insertion sort   |
| `dsakit.bst`            | `BinarySearchTree` with the three depth-first traversals       |

## Installing

```
pip install .
```

There are no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from dsakit.balanced import is_balanced
from dsakit.postfix import evaluate
from dsakit.linked_stack import LinkedStack
from dsakit.sorting import heap_sort
from dsakit.bst import BinarySearchTree

is_balanced("{a + [b * (c - d)]}")   # True
is_balanced("(a + b]")               # False

evaluate("2 3 + 4 *")                # 20 (division truncates toward zero)

stack = LinkedStack()
stack.push(1)
stack.push(2)
stack.pop()                          # 2

numbers = [12, 11, 13, 5, 6, 7]
heap_sort(numbers)                   # sorts in place: [5, 6, 7, 11, 12, 13]

tree = BinarySearchTree([50, 30, 70, 20, 40])
40 in tree                           # True
tree.inorder()                       # [20, 30, 40, 50, 70]
tree.delete(30)                      # True; False when the key is absent
```

Some details worth knowing:

- Iterating a `BoundedStack` or `LinkedStack` goes from top to bottom;
  iterating a `CircularQueue` goes from front to rear.
- `SinglyLinkedList` and `DoublyLinkedList` use 1-based positions.
  `insert_at_position` on an empty list accepts only position 1; otherwise
  the position must name an existing node, which moves one place back.
  `search` returns the position of the first match, or `None`. Both lists
  support `reversed()`. The singly linked list names its removals
  `delete_at_*`; the doubly linked list names them `delete_from_*` and
  adds `sort`.
- `BinarySearchTree` sends values greater than a node to the right and all
  others, duplicates included, to the left. `smallest` and `largest`
  return `None` on an empty tree; iterating the tree yields values in
  ascending order.
- `ListCursor` needs at least one value; moving past either end raises
  `CursorBoundaryError`.

## Errors

Errors are reported with exceptions:

- `check` raises `ExtraClosingError`, `MismatchError` or `UnclosedError`,
  all subclasses of `BalanceError` (itself a `ValueError`).
- `evaluate` raises `PostfixError` for too few operands, leftover values or
  division by zero.
- `BoundedStack` raises `StackOverflowError` and `StackUnderflowError`;
  `LinkedStack` raises `EmptyStackError`.
- `CircularQueue` raises `QueueOverflowError` and `QueueUnderflowError`.
- The linked lists raise `EmptyListError` or `InvalidPositionError`.

## Commands

```
dsakit-balanced [EXPRESSION ...]   # check brackets; reads a line if no arguments
dsakit-postfix [EXPRESSION ...]    # evaluate; reads a line if no arguments, exits 1 on error
dsakit-stack [CAPACITY]            # bounded stack menu; asks for the size if not given
dsakit-linked-stack                # linked stack menu
dsakit-queue [--capacity N]        # circular queue menu; 0 or a choice above 3 quits
dsakit-sort [NUMBER ...]           # heap sort and quick sort of the numbers, or a demo array
dsakit-sll                         # singly linked list menu
dsakit-cursor [NUMBER ...]         # build a list (or enter it), then move a cursor over it
dsakit-dll                         # doubly linked list menu
dsakit-bst                         # binary search tree menu
```

The menu programs read their choices from standard input and stop at end
of input.

## What it does not do

The structures live only in memory: nothing is saved between runs of the
menu programs, and there is no way to load or store a structure from a
file.