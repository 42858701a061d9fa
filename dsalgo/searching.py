"""Linear and binary search over sequences."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence


def binary_search(values: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of ``target`` in sorted ``values``, or ``None``."""
    low, high = 0, len(values) - 1
    while low <= high:
        middle = (low + high) // 2
        if target > values[middle]:
            low = middle + 1
        elif target < values[middle]:
            high = middle - 1
        else:
            return middle
    return None


def recursive_binary_search(
    values: Sequence[Any], target: Any, low: int = 0, high: Optional[int] = None
) -> Optional[int]:
    """Recursively search ``values[low:high + 1]`` for ``target``.

    ``high`` defaults to the last index. Returns an index or ``None``.
    """
    if high is None:
        high = len(values) - 1
    if low > high:
        return None
    middle = (low + high) // 2
    if target > values[middle]:
        return recursive_binary_search(values, target, middle + 1, high)
    if target < values[middle]:
        return recursive_binary_search(values, target, low, middle - 1)
    return middle


def multi_key_binary_search(values: Sequence[Any], target: Any) -> List[int]:
    """Return every index of ``target`` in sorted ``values``, in ascending order.

    A binary search finds one match; the run of equal neighbours around it
    is then collected in both directions.
    """
    found = binary_search(values, target)
    if found is None:
        return []
    first = last = found
    while first > 0 and values[first - 1] == target:
        first -= 1
    while last + 1 < len(values) and values[last + 1] == target:
        last += 1
    return list(range(first, last + 1))


def linear_search(values: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of the first item equal to ``target``, or ``None``."""
    return next((index for index, value in enumerate(values) if value == target), None)