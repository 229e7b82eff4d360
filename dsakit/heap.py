"""A fixed-capacity max heap with heap sort."""

from __future__ import annotations


class HeapFullError(Exception):
    """Raised when inserting into a heap at capacity."""


class MaxHeap:
    """Max heap of integers holding at most *capacity* values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> list[int]:
        """Current stored values, in array order."""
        return list(self._items)

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def insert(self, value: int) -> None:
        """Append a value; call build_heap to restore the heap order."""
        if self.is_full():
            raise HeapFullError(f"heap is full (capacity {self.capacity})")
        self._items.append(value)

    def _sift_down(self, index: int, size: int) -> None:
        items = self._items
        while True:
            left = 2 * index + 1
            right = left + 1
            largest = index
            if left < size and items[left] > items[largest]:
                largest = left
            if right < size and items[right] > items[largest]:
                largest = right
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest

    def build_heap(self) -> None:
        """Rearrange the stored values into max-heap order."""
        size = len(self._items)
        for index in range((size - 1) // 2, -1, -1):
            self._sift_down(index, size)

    def heap_sort(self) -> list[int]:
        """Return the values in ascending order, leaving the heap empty."""
        self.build_heap()
        items = self._items
        for end in range(len(items) - 1, 0, -1):
            items[0], items[end] = items[end], items[0]
            self._sift_down(0, end)
        result = list(items)
        items.clear()
        return result