import pytest

from solong.linked import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_push_front_reverses_order():
    lst = LinkedList()
    for item in ("a", "b", "c"):
        lst.push_front(item)
    assert list(lst) == ["c", "b", "a"]
    assert lst.head.content == "c"


def test_push_back_keeps_order():
    lst = LinkedList()
    for item in (1, 2, 3):
        lst.push_back(item)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_returns_node_in_list():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert isinstance(node, Node) and node.content == 2
    assert lst.last() is node


def test_constructor_from_iterable():
    items = ["x", "y", "z"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_last_returns_final_node():
    lst = LinkedList([5, 6, 7])
    tail = lst.last()
    assert tail.content == 7
    assert tail.next is None


def test_clear_calls_delete_in_order_and_empties():
    seen = []
    lst = LinkedList([1, 2, 3])
    lst.clear(seen.append)
    assert seen == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_still_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_front_to_back():
    seen = []
    LinkedList(["p", "q"]).for_each(seen.append)
    assert seen == ["p", "q"]


def test_map_builds_new_list_and_leaves_original():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped is not original


def test_map_of_empty_list_is_empty():
    assert list(LinkedList().map(str)) == []


def test_map_failure_deletes_produced_items_and_raises():
    deleted = []

    def func(x):
        if x == 3:
            raise RuntimeError("boom")
        return x + 100

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [101, 102]