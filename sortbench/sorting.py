"""In-place sorting algorithms over lists of integers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from enum import Enum
from itertools import chain

from sortbench.heap import build_heap


class Algorithm(Enum):
    """Available algorithms, keyed by their menu character."""

    BUBBLE = "1"
    QUICK = "2"
    MERGE = "3"
    INSERTION = "4"
    BUCKET = "5"
    HEAP = "6"

    @property
    def label(self) -> str:
        return self.name.lower()


class Order(Enum):
    """Sort direction, keyed by its menu character."""

    ASCENDING = "1"
    DESCENDING = "2"


class UnknownAlgorithmError(ValueError):
    """Raised when no algorithm matches the requested option."""

    def __init__(self, option: object) -> None:
        super().__init__(f"undefined sorting option: {option}")
        self.option = option


def _swap(numbers: MutableSequence[int], i: int, j: int) -> None:
    numbers[i], numbers[j] = numbers[j], numbers[i]


def _finish(numbers: MutableSequence[int], order: Order) -> None:
    if order is Order.DESCENDING:
        numbers.reverse()


def bubble_sort(numbers: MutableSequence[int], order: Order = Order.ASCENDING) -> None:
    """Exchange sort, O(n^2), in place."""
    order = Order(order)
    for i in range(len(numbers)):
        for j in range(i):
            if numbers[i] < numbers[j]:
                _swap(numbers, i, j)
    _finish(numbers, order)


def partition(numbers: MutableSequence[int], low: int, high: int) -> int:
    """Lomuto partition of ``numbers[low:high + 1]`` around its last element.

    Returns the final index of the pivot.
    """
    pivot = numbers[high]
    boundary = low
    for j in range(low, high):
        if numbers[j] <= pivot:
            _swap(numbers, boundary, j)
            boundary += 1
    _swap(numbers, boundary, high)
    return boundary


def quick_sort(numbers: MutableSequence[int], order: Order = Order.ASCENDING) -> None:
    """Quicksort with the right-most element as pivot, in place."""
    order = Order(order)
    pending = [(0, len(numbers) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = partition(numbers, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    _finish(numbers, order)


def merge_sorted(numbers: MutableSequence[int], left: int, mid: int, right: int) -> None:
    """Merge the sorted runs ``numbers[left:mid + 1]`` and ``numbers[mid + 1:right + 1]``."""
    first = list(numbers[left : mid + 1])
    second = list(numbers[mid + 1 : right + 1])
    merged: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    numbers[left : right + 1] = merged


def _merge_sort_range(numbers: MutableSequence[int], left: int, right: int) -> None:
    if left < right:
        mid = left + ((right - left) >> 1)
        _merge_sort_range(numbers, left, mid)
        _merge_sort_range(numbers, mid + 1, right)
        merge_sorted(numbers, left, mid, right)


def merge_sort(numbers: MutableSequence[int], order: Order = Order.ASCENDING) -> None:
    """Top-down merge sort, in place."""
    order = Order(order)
    _merge_sort_range(numbers, 0, len(numbers) - 1)
    _finish(numbers, order)


def insertion_sort(numbers: MutableSequence[int], order: Order = Order.ASCENDING) -> None:
    """Insertion sort by adjacent swaps, in place."""
    order = Order(order)
    for i in range(1, len(numbers)):
        j = i
        while j > 0 and numbers[j - 1] > numbers[j]:
            _swap(numbers, j - 1, j)
            j -= 1
    _finish(numbers, order)


def bucket_sort(
    numbers: MutableSequence[int],
    bucket_count: int = 10,
    bucket_capacity: int = 10,
    order: Order = Order.ASCENDING,
) -> None:
    """Distribute values into buckets by ``value / bucket_count`` and merge-sort each.

    Each bucket holds at most ``bucket_capacity`` values; a value whose
    bucket index falls outside ``0..bucket_count - 1`` or a full bucket
    raises :class:`ValueError`.
    """
    order = Order(order)
    if bucket_count <= 0:
        raise ValueError("bucket_count must be positive")
    if bucket_capacity < 0:
        raise ValueError("bucket_capacity must not be negative")
    buckets: list[list[int]] = [[] for _ in range(bucket_count)]
    for value in numbers:
        quotient = abs(value) // bucket_count
        index = quotient if value >= 0 else -quotient
        if not 0 <= index < bucket_count:
            raise ValueError(f"value {value} does not fit in {bucket_count} buckets")
        bucket = buckets[index]
        if len(bucket) >= bucket_capacity:
            raise ValueError(f"bucket {index} is full ({bucket_capacity} values)")
        bucket.append(value)
    for bucket in buckets:
        merge_sort(bucket)
    numbers[:] = list(chain.from_iterable(buckets))
    _finish(numbers, order)


def heap_sort(numbers: MutableSequence[int], order: Order = Order.ASCENDING) -> None:
    """Heap sort that rebuilds the heap over the shrinking unsorted prefix."""
    order = Order(order)
    for end in range(len(numbers), 0, -1):
        build_heap(numbers, end)
        _swap(numbers, 0, end - 1)
    _finish(numbers, order)


_SORTERS: dict[Algorithm, Callable[[MutableSequence[int], Order], None]] = {
    Algorithm.BUBBLE: bubble_sort,
    Algorithm.QUICK: quick_sort,
    Algorithm.MERGE: merge_sort,
    Algorithm.INSERTION: insertion_sort,
    Algorithm.BUCKET: lambda numbers, order: bucket_sort(numbers, 10, 10, order),
    Algorithm.HEAP: heap_sort,
}


def sort(
    numbers: MutableSequence[int],
    algorithm: Algorithm | str = Algorithm.QUICK,
    order: Order | str = Order.ASCENDING,
) -> None:
    """Sort ``numbers`` in place with the chosen algorithm and order."""
    try:
        chosen = Algorithm(algorithm)
    except ValueError:
        raise UnknownAlgorithmError(algorithm) from None
    _SORTERS[chosen](numbers, Order(order))