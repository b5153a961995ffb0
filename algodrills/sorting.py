"""Bucket sort and heap sort."""

from __future__ import annotations

from collections.abc import Iterable


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in ``[0, 1)`` by spreading them over equal-width buckets."""
    items = list(values)
    n = len(items)
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"value {value!r} is outside [0, 1)")
        buckets[int(n * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def _sift_down(heap: list, size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values: Iterable) -> list:
    """Return the values in ascending order using an in-place max-heap."""
    heap = list(values)
    size = len(heap)
    for root in reversed(range(size // 2)):
        _sift_down(heap, size, root)
    for end in reversed(range(1, size)):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap