"""A string-keyed hash map of ten chained buckets."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

SIZE = 10


def generate_hash(key: str) -> int:
    """Sum of the key's code points modulo its length."""
    if not key:
        raise ValueError("cannot hash an empty key")
    return sum(ord(char) for char in key) % len(key)


class StringHashMap:
    """Hash map with string keys; each bucket keeps its newest entry first."""

    def __init__(self) -> None:
        self._buckets: list[list[tuple[str, Any]]] = [[] for _ in range(SIZE)]

    def _bucket(self, key: str) -> list[tuple[str, Any]]:
        index = generate_hash(key)
        if index >= SIZE:
            raise ValueError(f"key {key!r} hashes to {index}, outside the {SIZE} buckets")
        return self._buckets[index]

    def insert(self, key: str, value: Any) -> None:
        """Store *value* under *key*; KeyError if the key already exists."""
        bucket = self._bucket(key)
        if any(existing == key for existing, _ in bucket):
            raise KeyError(f"Insert Key: {key} already exists")
        bucket.insert(0, (key, value))

    def delete(self, key: str) -> None:
        """Remove *key*; KeyError if it does not exist."""
        bucket = self._bucket(key)
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                del bucket[position]
                return
        raise KeyError(f"Delete Key: {key} does not exists")

    def search(self, key: str) -> bool:
        """Return whether *key* is stored."""
        return any(existing == key for existing, _ in self._bucket(key))

    __contains__ = search

    def __getitem__(self, key: str) -> Any:
        for existing, value in self._bucket(key):
            if existing == key:
                return value
        raise KeyError(key)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[str]:
        for bucket in self._buckets:
            for key, _ in bucket:
                yield key