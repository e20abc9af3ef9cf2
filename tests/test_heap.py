import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortbench.heap import build_heap, format_heap, heapify, print_heap


def _is_max_heap(values, size):
    return all(
        values[child] <= values[(child - 1) // 2] for child in range(1, size)
    )


@given(st.lists(st.integers(-1000, 1000), max_size=60))
def test_build_heap_gives_heap_property(values):
    data = list(values)
    build_heap(data)
    assert _is_max_heap(data, len(data))
    assert sorted(data) == sorted(values)


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=40))
def test_build_heap_root_is_maximum(values):
    data = list(values)
    build_heap(data)
    assert data[0] == max(values)


def test_build_heap_prefix_leaves_tail_untouched():
    data = [1, 2, 3, 4, 9, 8, 7]
    build_heap(data, 4)
    assert data[4:] == [9, 8, 7]
    assert _is_max_heap(data, 4)
    assert data[0] == 4


def test_heapify_restores_root():
    data = [0, 9, 8, 7, 6, 5, 4]
    heapify(data, 0)
    assert _is_max_heap(data, len(data))
    assert data[0] == 9


def test_heapify_on_valid_heap_is_no_op():
    data = [9, 7, 8, 1, 2, 3]
    heapify(data, 0)
    assert data == [9, 7, 8, 1, 2, 3]


def test_heapify_rejects_oversized_heap():
    with pytest.raises(ValueError):
        heapify([1, 2, 3], 0, 4)


def test_format_heap_joins_with_spaces():
    assert format_heap([50, 32, 28]) == "50 32 28"
    assert format_heap([]) == ""


def test_print_heap_writes_line():
    buffer = io.StringIO()
    print_heap([3, 1, 2], buffer)
    assert buffer.getvalue() == "3 1 2\n"