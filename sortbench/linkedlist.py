"""A singly linked list with a sentinel head and a tail reference."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """One node of a :class:`LinkedList`."""

    data: Any
    next: ListNode | None = None


class LinkedList:
    """Singly linked list supporting insertion at the head, tail or after a node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._sentinel = ListNode(None)
        self._tail: ListNode | None = None
        self._length = 0
        for item in items:
            self.insert(item)

    @property
    def head(self) -> ListNode | None:
        """The first node, or ``None`` when the list is empty."""
        return self._sentinel.next

    @property
    def tail(self) -> ListNode | None:
        """The last node, or ``None`` when the list is empty."""
        return self._tail

    def insert_after(self, node: ListNode | None, data: Any) -> ListNode:
        """Insert ``data`` after ``node`` (or at the front when ``node`` is None)."""
        anchor = self._sentinel if node is None else node
        new_node = ListNode(data, anchor.next)
        anchor.next = new_node
        if new_node.next is None:
            self._tail = new_node
        self._length += 1
        return new_node

    def insert_head(self, data: Any) -> ListNode:
        """Insert ``data`` as the first element."""
        return self.insert_after(None, data)

    def insert_tail(self, data: Any) -> ListNode:
        """Insert ``data`` as the last element."""
        return self.insert_after(self._tail, data)

    def insert(self, data: Any) -> ListNode:
        """Append ``data`` to the end of the list."""
        return self.insert_tail(data)

    def __iter__(self) -> Iterator[Any]:
        node = self._sentinel.next
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._length

    def format(self) -> str:
        """Render the elements as ``(a) (b) (c)``."""
        return " ".join(f"({data})" for data in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"