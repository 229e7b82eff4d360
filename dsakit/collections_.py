"""Generic containers: a singly linked list, an index-checked list and a stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "next")

    def __init__(self, data: T) -> None:
        self.data = data
        self.next: _Node[T] | None = None


class LinkedList(Generic[T]):
    """Singly linked list that appends at the tail."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        for value in values:
            self.push(value)

    def push(self, value: T) -> None:
        """Append *value* at the end."""
        node = _Node(value)
        if self._head is None:
            self._head = node
            return
        current = self._head
        while current.next is not None:
            current = current.next
        current.next = node

    def delete(self, value: T) -> None:
        """Remove the first node equal to *value*.

        Does nothing on an empty list; raises ValueError if a non-empty list lacks it.
        """
        if self._head is None:
            return
        if self._head.data == value:
            self._head = self._head.next
            return
        previous = self._head
        while previous.next is not None:
            if previous.next.data == value:
                previous.next = previous.next.next
                return
            previous = previous.next
        raise ValueError(f"Not found: {value!r}")

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)


class IndexedList(Generic[T]):
    """List that rejects negative and out-of-range indices."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._data: list[T] = list(values)

    def _check(self, index: int) -> None:
        if index > len(self._data) - 1:
            raise IndexError("input index out of range")
        if index < 0:
            raise IndexError(f"invalid index: {index}")

    def insert(self, value: T) -> None:
        """Append *value*."""
        self._data.append(value)

    def get(self, index: int) -> T:
        """Return the item at *index*."""
        self._check(index)
        return self._data[index]

    def remove(self, index: int) -> T:
        """Remove and return the item at *index*."""
        self._check(index)
        return self._data.pop(index)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"IndexedList({self._data!r})"


class Stack(Generic[T]):
    """Last-in, first-out stack."""

    def __init__(self) -> None:
        self._data: list[Any] = []

    def push(self, value: T) -> None:
        self._data.append(value)

    def pop(self) -> T:
        """Remove and return the top item; IndexError when empty."""
        if not self._data:
            raise IndexError("pop from an empty stack")
        return self._data.pop()

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)