import pytest

from dsakit.singly_linked import (
    EmptyListError,
    InvalidPositionError,
    SinglyLinkedList,
    main,
)


@pytest.mark.parametrize("values", [[4, 5, 6], []])
def test_init_keeps_order(values):
    items = SinglyLinkedList(values)
    assert list(items) == values
    assert len(items) == len(values)


def test_insert_at_beginning_and_end():
    items = SinglyLinkedList()
    items.insert_at_end(2)
    items.insert_at_beginning(1)
    items.insert_at_end(3)
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


@pytest.mark.parametrize("position", [2, 0])
def test_insert_into_empty_list_rejects_other_positions(position):
    items = SinglyLinkedList()
    with pytest.raises(InvalidPositionError):
        items.insert_at_position(7, position)
    assert list(items) == []


def test_insert_into_empty_list_at_first_position():
    items = SinglyLinkedList()
    items.insert_at_position(7, 1)
    assert list(items) == [7]


@pytest.mark.parametrize(
    "position, expected",
    [(1, [9, 1, 2, 3]), (2, [1, 9, 2, 3]), (3, [1, 2, 9, 3])],
)
def test_insert_at_position_moves_existing_node_back(position, expected):
    items = SinglyLinkedList([1, 2, 3])
    items.insert_at_position(9, position)
    assert list(items) == expected
    assert len(items) == 4


def test_insert_at_position_past_end_is_invalid():
    items = SinglyLinkedList([1, 2, 3])
    with pytest.raises(InvalidPositionError):
        items.insert_at_position(9, 4)
    assert list(items) == [1, 2, 3]


def test_delete_at_beginning_and_end():
    items = SinglyLinkedList([1, 2, 3])
    assert items.delete_at_beginning() == 1
    assert items.delete_at_end() == 3
    assert list(items) == [2]
    assert items.delete_at_end() == 2
    assert len(items) == 0


@pytest.mark.parametrize("operation", ["delete_at_beginning", "delete_at_end"])
def test_delete_from_empty_list_raises(operation):
    with pytest.raises(EmptyListError):
        getattr(SinglyLinkedList(), operation)()


def test_delete_at_position():
    items = SinglyLinkedList([1, 2, 3, 4])
    assert [items.delete_at_position(p) for p in (3, 1)] == [3, 1]
    assert list(items) == [2, 4]
    assert items.delete_at_position(2) == 4
    assert list(items) == [2]


@pytest.mark.parametrize("values, position", [([1, 2, 3], 0), ([1, 2, 3], -1), ([1, 2, 3], 4), ([], 1)])
def test_delete_at_invalid_position(values, position):
    items = SinglyLinkedList(values)
    with pytest.raises(InvalidPositionError):
        items.delete_at_position(position)
    assert list(items) == values


@pytest.mark.parametrize("data, expected", [(5, 1), (6, 2), (42, None)])
def test_search_returns_first_position(data, expected):
    assert SinglyLinkedList([5, 6, 5]).search(data) == expected


def test_update():
    items = SinglyLinkedList([1, 2, 3])
    items.update(20, 2)
    assert list(items) == [1, 20, 3]


@pytest.mark.parametrize("position", [4, 0])
def test_update_invalid_position(position):
    items = SinglyLinkedList([1, 2, 3])
    with pytest.raises(InvalidPositionError):
        items.update(0, position)
    assert list(items) == [1, 2, 3]


def test_reversed():
    assert list(reversed(SinglyLinkedList([1, 2, 3]))) == [3, 2, 1]


@pytest.mark.parametrize(
    "replies, expected",
    [
        (
            ["2", "5", "y", "2", "7", "y", "7", "y", "8", "n"],
            ["* Node with data 5 was Inserted", "5  7", "7  5"],
        ),
        (["4", "y", "11"], ["List is Empty!", "Program was terminated"]),
    ],
)
def test_main(monkeypatch, capsys, replies, expected):
    answers = iter(replies)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0
    out = capsys.readouterr().out
    for fragment in expected:
        assert fragment in out