import io

import pytest

from dsakit.circular_queue import (
    CircularQueue,
    QueueOverflowError,
    QueueUnderflowError,
    main,
)


def test_fifo_order():
    queue = CircularQueue(4)
    values = [5, 6, 7]
    for value in values:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()


def test_default_capacity_holds_six():
    queue = CircularQueue()
    for value in range(6):
        queue.enqueue(value)
    assert queue.is_full()
    with pytest.raises(QueueOverflowError):
        queue.enqueue(6)
    assert list(queue) == list(range(6))


def test_wraparound():
    queue = CircularQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    queue.enqueue(4)
    assert list(queue) == [2, 3, 4]
    assert len(queue) == 3
    assert queue.is_full()


def test_refill_after_emptying():
    queue = CircularQueue(2)
    queue.enqueue("a")
    queue.dequeue()
    queue.enqueue("b")
    queue.enqueue("c")
    assert list(queue) == ["b", "c"]


def test_underflow():
    queue = CircularQueue(2)
    with pytest.raises(QueueUnderflowError):
        queue.dequeue()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        CircularQueue(0)


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n10\n1\n20\n3\n2\n4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Elements in a Queue are :10,20," in out
    assert "The dequeued element is 10" in out