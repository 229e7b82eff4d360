"""A queue on a doubly linked list: push to the front, pop from the back."""

from __future__ import annotations

from collections.abc import Iterator


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: int) -> None:
        self.value = value
        self.prev: _Node | None = None
        self.next: _Node | None = None


class LinkedQueue:
    """Doubly linked queue with operations at both ends."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def is_empty(self) -> bool:
        return self._size == 0

    def push(self, value: int) -> None:
        """Add *value* at the front."""
        node = _Node(value)
        if self._head is None:
            self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
        self._head = node
        self._size += 1

    def add_to_end(self, value: int) -> None:
        """Add *value* at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop(self) -> int:
        """Remove and return the value at the back; IndexError when empty."""
        if self._tail is None:
            raise IndexError("pop from an empty queue")
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        node.prev = None
        self._size -= 1
        return node.value

    def remove_from_front(self) -> int:
        """Remove and return the value at the front; IndexError when empty."""
        if self._head is None:
            raise IndexError("remove from an empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        node.next = None
        self._size -= 1
        return node.value