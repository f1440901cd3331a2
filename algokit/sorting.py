"""Comparison sorts: merge, quick, insertion and selection sort."""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence


def merge(left: Sequence[Any], right: Sequence[Any]) -> List[Any]:
    """Merge two sorted sequences into one sorted list.

    On equal elements the one from ``right`` is taken first.
    """
    merged: List[Any] = []
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
    return merged


def merge_sort(values: Iterable[Any]) -> List[Any]:
    """Return a new sorted list using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition_sort(items: List[Any], low: int, high: int) -> None:
    while low < high:
        start, end = low, high
        pivot = items[low + (high - low) // 2]
        while start <= end:
            while items[start] < pivot:
                start += 1
            while items[end] > pivot:
                end -= 1
            if start <= end:
                items[start], items[end] = items[end], items[start]
                start += 1
                end -= 1
        # Recurse into the smaller half to bound the stack depth.
        if end - low < high - start:
            _partition_sort(items, low, end)
            low = start
        else:
            _partition_sort(items, start, high)
            high = end


def quick_sort(values: Iterable[Any]) -> List[Any]:
    """Return a new sorted list using quicksort with a middle pivot."""
    items = list(values)
    _partition_sort(items, 0, len(items) - 1)
    return items


def insertion_sort(values: Iterable[Any]) -> List[Any]:
    """Return a new sorted list using insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[Any]) -> List[Any]:
    """Return a new sorted list using selection sort."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items