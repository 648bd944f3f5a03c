"""A singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    data: Any
    next: Optional[_Node] = None


class LinkedList:
    """A singly linked list with insertion at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"