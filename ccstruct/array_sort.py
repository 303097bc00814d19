"""In-place sorting of an Array using a three-way comparison function."""

from __future__ import annotations

from typing import Any, Callable, List

from ccstruct.array import Array

CompareFn = Callable[[Any, Any], int]


def _require(cmp: CompareFn) -> None:
    if cmp is None:
        raise TypeError("a comparison function is required")


def _partition(array: Array, cmp: CompareFn, start: int, end: int) -> int:
    left, right, pivot = start, end, start
    while left < right:
        while array.compare(cmp, right, pivot) >= 0 and left < right:
            right -= 1
        while array.compare(cmp, left, pivot) <= 0 and left < right:
            left += 1
        array.swap(left, right)
    array.swap(left, pivot)
    return left


def quick_sort(array: Array, cmp: CompareFn) -> None:
    """Quicksort with the first element of each range as pivot."""
    _require(cmp)
    if len(array) < 2:
        return
    pending = [(0, len(array) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        mid = _partition(array, cmp, start, end)
        pending.append((mid + 1, end))
        pending.append((start, mid))


def bubble_sort(array: Array, cmp: CompareFn) -> None:
    """Bubble sort, swapping neighbours whenever ``cmp`` is positive."""
    _require(cmp)
    size = len(array)
    for rounds in range(size - 1):
        for j in range(size - 1 - rounds):
            if array.compare(cmp, j, j + 1) > 0:
                array.swap(j, j + 1)


def _merge(array: Array, cmp: CompareFn, left: int, mid: int, right: int) -> None:
    merged: List[Any] = []
    i, j = left, mid + 1
    while i <= mid and j <= right:
        if array.compare(cmp, i, j) < 0:
            merged.append(array[i])
            i += 1
        else:
            merged.append(array[j])
            j += 1
    merged.extend(array[k] for k in range(i, mid + 1))
    merged.extend(array[k] for k in range(j, right + 1))
    for offset, value in enumerate(merged):
        array[left + offset] = value


def _merge_sort(array: Array, cmp: CompareFn, start: int, end: int) -> None:
    if start == end:
        return
    mid = start + ((end - start) >> 1)
    _merge_sort(array, cmp, start, mid)
    _merge_sort(array, cmp, mid + 1, end)
    _merge(array, cmp, start, mid, end)


def merge_sort(array: Array, cmp: CompareFn) -> None:
    """Top-down merge sort; on ties the element from the right half goes first."""
    _require(cmp)
    if len(array) == 0:
        return
    _merge_sort(array, cmp, 0, len(array) - 1)