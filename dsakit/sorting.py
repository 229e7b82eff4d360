"""Merge, quick and radix sort, plus a random array generator."""

from __future__ import annotations

import random
import threading
from collections.abc import Iterable

_MAX_THREAD_DEPTH = 4


def _merge(items: list[int], start: int, mid: int, end: int) -> None:
    """Merge the sorted runs items[start:mid+1] and items[mid+1:end+1] in place."""
    if items[mid] <= items[mid + 1]:
        return
    left = items[start : mid + 1]
    right = items[mid + 1 : end + 1]
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    items[start : end + 1] = merged


def _merge_sort(items: list[int], start: int, end: int) -> None:
    if end <= start:
        return
    mid = (start + end) // 2
    _merge_sort(items, start, mid)
    _merge_sort(items, mid + 1, end)
    _merge(items, start, mid, end)


def merge_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of *items* using top-down merge sort."""
    result = list(items)
    _merge_sort(result, 0, len(result) - 1)
    return result


def _merge_sort_concurrent(items: list[int], left: int, right: int, depth: int) -> None:
    if right <= left:
        return
    if depth <= 0:
        _merge_sort(items, left, right)
        return
    mid = (left + right) // 2
    helper = threading.Thread(
        target=_merge_sort_concurrent, args=(items, left, mid, depth - 1)
    )
    helper.start()
    _merge_sort_concurrent(items, mid + 1, right, depth - 1)
    helper.join()
    _merge(items, left, mid, right)


def merge_sort_concurrent(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of *items*, sorting the halves in separate threads."""
    result = list(items)
    _merge_sort_concurrent(result, 0, len(result) - 1, _MAX_THREAD_DEPTH)
    return result


def _partition(items: list[int], start: int, end: int) -> int:
    pivot = items[end]
    boundary = start - 1
    for j in range(start, end):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[end] = items[boundary + 1]
    items[boundary + 1] = pivot
    return boundary + 1


def _quick_sort(items: list[int], start: int, end: int) -> None:
    while start < end:
        pivot = _partition(items, start, end)
        if pivot - start < end - pivot:
            _quick_sort(items, start, pivot - 1)
            start = pivot + 1
        else:
            _quick_sort(items, pivot + 1, end)
            end = pivot - 1


def quick_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of *items* using quicksort with a last-element pivot."""
    result = list(items)
    _quick_sort(result, 0, len(result) - 1)
    return result


def _digit(number: int, position: int, radix: int) -> int:
    return number // 10**position % radix


def radix_sort(items: Iterable[int], width: int = 4, radix: int = 10) -> list[int]:
    """Return a copy of non-negative *items* sorted on their lowest *width* digits."""
    result = list(items)
    if radix < 1:
        raise ValueError(f"radix must be positive, got {radix}")
    if any(number < 0 for number in result):
        raise ValueError("radix sort requires non-negative integers")
    for position in range(width):
        buckets: list[list[int]] = [[] for _ in range(radix)]
        for number in result:
            buckets[_digit(number, position, radix)].append(number)
        result = [number for bucket in buckets for number in bucket]
    return result


def random_array(low: int, high: int, total: int) -> list[int]:
    """Return *total* random integers in the half-open range [low, high)."""
    return [random.randrange(low, high) for _ in range(total)]