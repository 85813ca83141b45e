import pytest

from fractol.ft.lists import LinkedList, Node


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


def test_constructor_from_iterable():
    assert list(LinkedList(range(4))) == [0, 1, 2, 3]


def test_empty_list_size_and_last():
    items = LinkedList()
    assert len(items) == 0
    assert items.last() is None
    assert not items


def test_last_returns_tail_node():
    items = LinkedList([1, 2, 3])
    tail = items.last()
    assert isinstance(tail, Node)
    assert tail.content == 3
    assert tail.next is None


def test_remove_first_calls_delete_and_returns_content():
    deleted = []
    items = LinkedList(["x", "y"])
    assert items.remove_first(deleted.append) == "x"
    assert deleted == ["x"]
    assert list(items) == ["y"]


def test_remove_first_on_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().remove_first()


def test_clear_deletes_in_order_and_empties():
    deleted = []
    items = LinkedList([1, 2, 3])
    items.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert items.head is None
    assert len(items) == 0


def test_clear_without_deleter_empties():
    items = LinkedList([1, 2])
    items.clear()
    assert list(items) == []


def test_for_each_visits_every_content():
    seen = []
    items = LinkedList([4, 5, 6])
    items.for_each(seen.append)
    assert seen == [4, 5, 6]


def test_for_each_with_none_leaves_list_untouched():
    items = LinkedList([1])
    items.for_each(None)
    assert list(items) == [1]


def test_map_builds_new_list():
    items = LinkedList([1, 2, 3])
    doubled = items.map(lambda x: x * 2)
    assert list(doubled) == [2, 4, 6]
    assert list(items) == [1, 2, 3]
    assert doubled.head is not items.head


def test_map_failure_deletes_produced_contents():
    deleted = []

    def func(x):
        if x == 3:
            raise RuntimeError("boom")
        return x * 10

    items = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        items.map(func, deleted.append)
    assert deleted == [10, 20]
    assert list(items) == [1, 2, 3, 4]