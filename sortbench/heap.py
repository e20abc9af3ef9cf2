"""Binary max-heap helpers that work in place on mutable sequences."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import TextIO


def _checked_size(numbers: Sequence[int], size: int | None) -> int:
    if size is None:
        return len(numbers)
    if not 0 <= size <= len(numbers):
        raise ValueError(f"heap size {size} outside 0..{len(numbers)}")
    return size


def heapify(numbers: MutableSequence[int], index: int = 0, size: int | None = None) -> None:
    """Sift ``numbers[index]`` down so its subtree is a max-heap.

    Only the first ``size`` elements (all of them by default) take part.
    """
    size = _checked_size(numbers, size)
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and numbers[left] > numbers[largest]:
            largest = left
        if right < size and numbers[right] > numbers[largest]:
            largest = right
        if largest == index:
            return
        numbers[index], numbers[largest] = numbers[largest], numbers[index]
        index = largest


def build_heap(numbers: MutableSequence[int], size: int | None = None) -> None:
    """Rearrange the first ``size`` elements into a max-heap."""
    size = _checked_size(numbers, size)
    for index in reversed(range(size // 2)):
        heapify(numbers, index, size)


def format_heap(numbers: Sequence[int]) -> str:
    """Return the elements in storage order, separated by spaces."""
    return " ".join(str(value) for value in numbers)


def print_heap(numbers: Sequence[int], file: TextIO | None = None) -> None:
    """Write the elements in storage order on one line."""
    print(format_heap(numbers), file=file)