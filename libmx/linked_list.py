"""A singly linked list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = ["LinkedList", "Node"]


@dataclass
class Node:
    """One cell of a linked list."""

    data: Any
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """A singly linked list of arbitrary items."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, data: Any) -> None:
        """Insert ``data`` at the start of the list."""
        self.head = Node(data, self.head)

    def push_back(self, data: Any) -> None:
        """Append ``data`` at the end of the list."""
        node = Node(data)
        if self.head is None:
            self.head = node
            return
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node

    def pop_front(self) -> Any:
        """Remove the first item and return it; an empty list gives None."""
        if self.head is None:
            return None
        node = self.head
        self.head = node.next
        return node.data

    def pop_back(self) -> Any:
        """Remove the last item and return it; an empty list gives None."""
        if self.head is None:
            return None
        if self.head.next is None:
            data = self.head.data
            self.head = None
            return data
        before_last = self.head
        while before_last.next.next is not None:
            before_last = before_last.next
        data = before_last.next.data
        before_last.next = None
        return data

    def sort(self, cmp: Callable[[Any, Any], bool]) -> LinkedList:
        """Bubble-sort the items, swapping neighbours where ``cmp(a, b)`` is true."""
        for _ in range(len(self) - 1):
            for node in self._nodes():
                if node.next is not None and cmp(node.data, node.next.data):
                    node.data, node.next.data = node.next.data, node.data
        return self