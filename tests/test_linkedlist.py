import pytest

from solong.linkedlist import LinkedList, Node


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert items.last() is None
    assert list(items) == []


def test_push_back_keeps_order():
    items = LinkedList()
    items.push_back("a")
    items.push_back("b")
    items.push_back("c")
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3


def test_push_front_prepends():
    items = LinkedList(["b"])
    node = items.push_front("a")
    assert items.head is node
    assert list(items) == ["a", "b"]


def test_last_returns_final_node():
    items = LinkedList([1, 2, 3])
    tail = items.last()
    assert isinstance(tail, Node)
    assert tail.content == 3
    assert tail.next is None


def test_push_back_node_becomes_last():
    items = LinkedList([1])
    node = items.push_back(2)
    assert items.last() is node


def test_clear_calls_delete_for_each_content():
    items = LinkedList(["x", "y"])
    deleted = []
    items.clear(deleted.append)
    assert deleted == ["x", "y"]
    assert len(items) == 0
    assert items.head is None


def test_clear_without_delete_empties():
    items = LinkedList([1, 2])
    items.clear()
    assert list(items) == []


def test_for_each_visits_in_order():
    items = LinkedList([1, 2, 3])
    seen = []
    items.for_each(seen.append)
    assert seen == [1, 2, 3]


def test_map_returns_new_list_and_keeps_original():
    items = LinkedList(["a", "b"])
    mapped = items.map(str.upper)
    assert list(mapped) == ["A", "B"]
    assert list(items) == ["a", "b"]
    assert mapped is not items


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str.upper)) == 0


def test_map_failure_deletes_produced_contents():
    items = LinkedList([1, 2, 0, 4])
    deleted = []

    def invert(value):
        return 10 // value

    with pytest.raises(ZeroDivisionError):
        items.map(invert, deleted.append)
    assert deleted == [10, 5]
    assert list(items) == [1, 2, 0, 4]