from hypothesis import given
from hypothesis import strategies as st

from sortbench.linkedlist import LinkedList, ListNode


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert items.head is None
    assert items.tail is None
    assert items.format() == ""


def test_insert_appends_in_order():
    items = LinkedList()
    for value in (1, 2, 3):
        items.insert(value)
    assert list(items) == [1, 2, 3]
    assert len(items) == 3
    assert items.tail.data == 3


def test_insert_head_prepends():
    items = LinkedList([2, 3])
    items.insert_head(1)
    assert list(items) == [1, 2, 3]
    assert items.head.data == 1


def test_insert_head_on_empty_sets_tail():
    items = LinkedList()
    node = items.insert_head(7)
    assert items.tail is node
    items.insert_tail(8)
    assert list(items) == [7, 8]


def test_insert_after_middle_node():
    items = LinkedList()
    first = items.insert(1)
    items.insert(3)
    items.insert_after(first, 2)
    assert list(items) == [1, 2, 3]
    assert items.tail.data == 3


def test_insert_after_tail_updates_tail():
    items = LinkedList([1, 2])
    new_node = items.insert_after(items.tail, 3)
    assert items.tail is new_node
    assert isinstance(new_node, ListNode) and new_node.next is None
    assert list(items) == [1, 2, 3]


def test_format_wraps_each_value():
    assert LinkedList([1, 2, 3]).format() == "(1) (2) (3)"


@given(st.lists(st.integers()))
def test_constructor_round_trip(values):
    items = LinkedList(values)
    assert list(items) == values
    assert len(items) == len(values)


@given(st.lists(st.integers(), max_size=30))
def test_insert_head_reverses(values):
    items = LinkedList()
    for value in values:
        items.insert_head(value)
    assert list(items) == values[::-1]