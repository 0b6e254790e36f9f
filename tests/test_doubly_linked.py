import pytest

from algolab.doubly_linked import DoublyLinkedList


@pytest.fixture
def demo_list():
    items = DoublyLinkedList()
    for value in (5, 7, 34, 1):
        items.insert(value)
    return items


def test_demo_description(demo_list):
    assert demo_list.description() == "5, 7, 34, 1, "


def test_demo_contains_and_remove(demo_list):
    assert 5 in demo_list
    demo_list.remove(1)
    assert demo_list.description() == "5, 7, 34, "


def test_reversed_matches_forward():
    data = [2, 7, 1, 8, 2, 8]
    items = DoublyLinkedList(data)
    assert list(items) == data
    assert list(reversed(items)) == data[::-1]


@pytest.mark.parametrize("target", [5, 7, 34, 1])
def test_links_stay_consistent_after_remove(demo_list, target):
    demo_list.remove(target)
    forward = list(demo_list)
    assert target not in forward
    assert list(reversed(demo_list)) == forward[::-1]
    assert len(forward) == 3


def test_head_is_preferred_over_tail():
    items = DoublyLinkedList([3, 1, 3])
    items.remove(3)
    assert list(items) == [1, 3]
    assert list(reversed(items)) == [3, 1]


def test_tail_is_preferred_over_middle():
    items = DoublyLinkedList([1, 2, 3, 2])
    items.remove(2)
    assert list(items) == [1, 2, 3]


def test_remove_only_node_then_insert():
    items = DoublyLinkedList([4])
    items.remove(4)
    assert list(items) == []
    assert list(reversed(items)) == []
    items.insert(6)
    assert list(reversed(items)) == [6]


def test_remove_missing_is_noop(demo_list):
    before = list(demo_list)
    demo_list.remove(99)
    assert list(demo_list) == before


def test_remove_on_empty_is_noop():
    items = DoublyLinkedList()
    items.remove(1)
    assert items.description() == ""


def test_clear(demo_list):
    demo_list.clear()
    assert list(demo_list) == []
    assert 7 not in demo_list
    demo_list.insert(2)
    assert list(reversed(demo_list)) == [2]