import io

import pytest

from dsakit.linked_stack import EmptyStackError, LinkedStack, main


def test_push_pop_order():
    stack = LinkedStack()
    values = [3, 1, 4, 1, 5]
    for value in values:
        stack.push(value)
    assert [stack.pop() for _ in values] == list(reversed(values))
    assert stack.is_empty()


def test_iteration_and_length():
    stack = LinkedStack()
    values = ["a", "b", "c"]
    for value in values:
        stack.push(value)
    assert list(stack) == list(reversed(values))
    assert len(stack) == len(values)


def test_top_does_not_remove():
    stack = LinkedStack()
    stack.push(9)
    assert stack.top() == 9
    assert len(stack) == 1
    assert not stack.is_empty()


def test_empty_errors():
    stack = LinkedStack()
    with pytest.raises(EmptyStackError):
        stack.pop()
    with pytest.raises(EmptyStackError):
        stack.top()


def test_clear_resets():
    stack = LinkedStack()
    for value in range(4):
        stack.push(value)
    stack.clear()
    assert len(stack) == 0
    assert list(stack) == []
    stack.push(7)
    assert list(stack) == [7]


def test_main_session(monkeypatch, capsys):
    script = "1\n10\n1\n20\n3\n7\n6\n2\n4\n8\n4\n2\n5\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Top element : 20" in out
    assert "No. of elements in stack : 2" in out
    assert "20 10" in out
    assert "Popped value : 20" in out
    assert "Stack is not empty with 1 elements" in out
    assert "All stack elements destroyed" in out
    assert "Trying to pop from empty stack" in out