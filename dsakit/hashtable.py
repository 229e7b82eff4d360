"""A fixed-size hash table with separate chaining, keyed on the first character of a key."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Student:
    """A student record stored in the hash table demonstrations."""

    age: int
    id: str
    name: str
    address: str

    def __str__(self) -> str:
        return (
            f"Student{{ Id: {self.id}, Name: {self.name}, "
            f"Age: {self.age}, Address: {self.address} }}"
        )


class HashTable:
    """Hash table of *size* buckets; each bucket is a chain with the newest entry first."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        self.size = size
        self._buckets: list[list[tuple[Hashable, Any]]] = [[] for _ in range(size)]

    def _index(self, key: Hashable) -> int:
        text = str(key)
        if not text:
            raise ValueError("cannot hash a key whose text form is empty")
        return text.encode()[0] % self.size

    def _bucket(self, key: Hashable) -> list[tuple[Hashable, Any]]:
        return self._buckets[self._index(key)]

    def insert(self, key: Hashable, value: Any) -> None:
        """Store *value* under *key*; raise KeyError if the key is already present."""
        bucket = self._bucket(key)
        if any(existing == key for existing, _ in bucket):
            raise KeyError(f"Insert Key: {key} already exists")
        bucket.insert(0, (key, value))

    def retrieve(self, key: Hashable) -> Any:
        """Return the value stored under *key*; raise KeyError if absent."""
        for existing, value in self._bucket(key):
            if existing == key:
                return value
        raise KeyError(key)

    def delete(self, key: Hashable) -> bool:
        """Remove *key*, returning whether it was present."""
        bucket = self._bucket(key)
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                del bucket[position]
                return True
        return False

    def __contains__(self, key: Hashable) -> bool:
        return any(existing == key for existing, _ in self._bucket(key))

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[Hashable]:
        for bucket in self._buckets:
            for key, _ in bucket:
                yield key