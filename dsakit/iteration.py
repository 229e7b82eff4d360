"""An iterable collection with an explicit iterator object."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Student:
    """A student's name, age and grade."""

    name: str
    age: int
    grade: str

    def __str__(self) -> str:
        return f"Name: {self.name} Age: {self.age} Grade:{self.grade}"


class CollectionIterator:
    """Walks a fixed sequence of items once."""

    def __init__(self, items: Any) -> None:
        self._items = tuple(items)
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._items)

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        item = self._items[self._index]
        self._index += 1
        return item

    def __iter__(self) -> CollectionIterator:
        return self


class Collection:
    """A growable collection of arbitrary items."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def append(self, *args: Any) -> None:
        """Add every argument, in order."""
        self._items.extend(args)

    def create_iterator(self) -> CollectionIterator:
        """Iterator over the items present now."""
        return CollectionIterator(self._items)

    def __iter__(self) -> CollectionIterator:
        return self.create_iterator()