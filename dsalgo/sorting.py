"""Comparison sorting algorithms and their building blocks."""

from __future__ import annotations

import random
from itertools import pairwise
from typing import Any, Iterable, List, MutableSequence, Optional, Sequence, Tuple


def bubble_sort(values: Iterable[Any]) -> List[Any]:
    """Return a sorted copy of ``values`` using bubble sort."""
    items = list(values)
    for upper in reversed(range(len(items))):
        for j in range(upper):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[Any]) -> List[Any]:
    """Return a sorted copy of ``values`` using insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            items[j - 1], items[j] = items[j], items[j - 1]
            j -= 1
    return items


def _sift_down(items: MutableSequence[Any], size: int, index: int) -> None:
    """Move ``items[index]`` down until the max-heap property holds below it."""
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def _heapify_in_place(items: MutableSequence[Any]) -> None:
    size = len(items)
    for index in reversed(range(size // 2)):
        _sift_down(items, size, index)


def heapify(values: Iterable[Any]) -> List[Any]:
    """Return the values arranged as an array-backed max heap."""
    items = list(values)
    _heapify_in_place(items)
    return items


def heapsort(values: Iterable[Any]) -> List[Any]:
    """Return a sorted copy of ``values`` using heapsort."""
    items = list(values)
    _heapify_in_place(items)
    for end in reversed(range(1, len(items))):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _merge(left: Sequence[Any], right: Sequence[Any]) -> List[Any]:
    merged: List[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> List[Any]:
    """Return a sorted copy of ``values`` using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _check_bounds(values: Sequence[Any], low: int, high: int) -> None:
    if not 0 <= low <= high < len(values):
        raise IndexError(f"partition bounds [{low}, {high}] invalid for size {len(values)}")


def hoare_partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` in place around ``values[low]``.

    Returns a split index ``s`` with ``low <= s < high`` when the range holds
    more than one item, such that every item in ``values[low:s + 1]`` is no
    greater than every item in ``values[s + 1:high + 1]``.
    """
    _check_bounds(values, low, high)
    pivot = values[low]
    i, j = low - 1, high + 1
    while True:
        i += 1
        while values[i] < pivot:
            i += 1
        j -= 1
        while values[j] > pivot:
            j -= 1
        if i >= j:
            return j
        values[i], values[j] = values[j], values[i]


def lomuto_partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` in place around ``values[high]``.

    Returns the final index of the pivot; items before it are no greater
    than the pivot and items after it are greater.
    """
    _check_bounds(values, low, high)
    pivot = values[high]
    store = low
    for j in range(low, high):
        if values[j] <= pivot:
            values[j], values[store] = values[store], values[j]
            store += 1
    values[high], values[store] = values[store], values[high]
    return store


def _quicksort(items: MutableSequence[Any], low: int, high: int) -> None:
    while low < high:
        split = hoare_partition(items, low, high)
        # Recurse into the smaller side to bound the recursion depth.
        if split - low < high - split:
            _quicksort(items, low, split)
            low = split + 1
        else:
            _quicksort(items, split + 1, high)
            high = split


def quicksort(values: Iterable[Any]) -> List[Any]:
    """Return a sorted copy of ``values`` using quicksort with Hoare partitioning."""
    items = list(values)
    _quicksort(items, 0, len(items) - 1)
    return items


def median_of_three(values: Sequence[Any]) -> Any:
    """Return the median of the first, middle and last items of ``values``."""
    if not values:
        raise ValueError("median_of_three() of an empty sequence")
    first, middle, last = values[0], values[len(values) // 2], values[-1]
    if (first > middle) ^ (first > last):
        return first
    if (middle < first) ^ (middle < last):
        return middle
    return last


def is_sorted(values: Iterable[Any]) -> bool:
    """Return whether ``values`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(values))


def bogosort(values: Iterable[Any], rng: Optional[random.Random] = None) -> Tuple[List[Any], int]:
    """Shuffle until sorted; return the sorted list and the number of checks made."""
    rng = rng if rng is not None else random.Random()
    items = list(values)
    iterations = 0
    while True:
        iterations += 1
        if is_sorted(items):
            return items, iterations
        for i in range(len(items) - 1):
            j = rng.randrange(i, len(items))
            items[i], items[j] = items[j], items[i]