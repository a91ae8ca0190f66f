"""Comparison and distribution sorts that return a sorted copy of their input."""

from __future__ import annotations

from itertools import accumulate
from typing import Callable, Sequence


def bubble_sort(values: Sequence[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent out-of-order items; stop early once sorted."""
    result = list(values)
    n = len(result)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def _stable_counting_sort(values: list[int], key: Callable[[int], int], size: int) -> list[int]:
    counts = [0] * size
    for value in values:
        counts[key(value)] += 1
    positions = list(accumulate(counts))
    output = [0] * len(values)
    for value in reversed(values):
        slot = key(value)
        positions[slot] -= 1
        output[positions[slot]] = value
    return output


def _require_non_negative(values: list[int]) -> None:
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")


def counting_sort(values: Sequence[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value."""
    result = list(values)
    if not result:
        return result
    _require_non_negative(result)
    return _stable_counting_sort(result, lambda value: value, max(result) + 1)


def dnf_sort(values: Sequence[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s in one pass (Dutch national flag)."""
    result = list(values)
    if any(value not in (0, 1, 2) for value in result):
        raise ValueError("values must be 0, 1 or 2")
    low = mid = 0
    high = len(result) - 1
    while mid <= high:
        if result[mid] == 0:
            result[mid], result[low] = result[low], result[mid]
            low += 1
            mid += 1
        elif result[mid] == 1:
            mid += 1
        else:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
    return result


def insertion_sort(values: Sequence[int]) -> list[int]:
    """Sort by inserting each item into the sorted prefix before it."""
    result = list(values)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and current < result[j]:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def _merge(first: list[int], second: list[int]) -> list[int]:
    merged = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(values: Sequence[int]) -> list[int]:
    """Sort by splitting in halves, sorting each and merging them."""
    result = list(values)
    if len(result) <= 1:
        return result
    mid = (len(result) + 1) // 2
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def radix_sort(values: Sequence[int]) -> list[int]:
    """Sort non-negative integers digit by digit, least significant first."""
    result = list(values)
    if not result:
        return result
    _require_non_negative(result)
    largest = max(result)
    place = 1
    while largest // place > 0:
        result = _stable_counting_sort(result, lambda value: (value // place) % 10, 10)
        place *= 10
    return result


def selection_sort(values: Sequence[int]) -> list[int]:
    """Sort by moving the smallest remaining item to the front each pass."""
    result = list(values)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def wave_sort(values: Sequence[int]) -> list[int]:
    """Rearrange so that every odd position holds a value no greater than its neighbours."""
    result = list(values)
    n = len(result)
    for i in range(1, n, 2):
        if result[i] > result[i - 1]:
            result[i], result[i - 1] = result[i - 1], result[i]
        if i <= n - 2 and result[i] > result[i + 1]:
            result[i], result[i + 1] = result[i + 1], result[i]
    return result


def _partition(items: list[int], start: int, end: int) -> int:
    pivot = items[start]
    index = start + sum(1 for value in items[start + 1 : end + 1] if value <= pivot)
    items[index], items[start] = items[start], items[index]
    i, j = start, end
    while i < index and j > index:
        while items[i] < pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < index and j > index:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return index


def quick_sort(values: Sequence[int]) -> list[int]:
    """Sort by partitioning around the first item and sorting both sides."""
    result = list(values)

    def sort(start: int, end: int) -> None:
        if start >= end:
            return
        pivot = _partition(result, start, end)
        sort(start, pivot - 1)
        sort(pivot + 1, end)

    sort(0, len(result) - 1)
    return result