"""Classic array exercises: inversions, XOR tricks, pair sums and rearrangements."""

from __future__ import annotations

from functools import reduce
from itertools import combinations
from math import comb
from operator import xor
from typing import Optional, Sequence, Tuple


def count_inversions(values: Sequence[int]) -> int:
    """Count pairs (i, j) with i < j and values[i] > values[j] by brute force."""
    return sum(1 for left, right in combinations(values, 2) if left > right)


def find_duplicate(values: Sequence[int]) -> int:
    """Return the repeated value of a sequence holding 1..n-1 once each plus one repeat."""
    return reduce(xor, values, 0) ^ reduce(xor, range(1, len(values)), 0)


def pair_sum_brute(values: Sequence[int], target: int) -> Optional[Tuple[int, int]]:
    """Return the first index pair whose values add up to target, or None."""
    for (i, left), (j, right) in combinations(enumerate(values), 2):
        if left + right == target:
            return i, j
    return None


def pair_sum_two_pointer(values: Sequence[int], target: int) -> Optional[Tuple[int, int]]:
    """Find an index pair summing to target in a sorted sequence, or None."""
    low, high = 0, len(values) - 1
    while low < high:
        total = values[low] + values[high]
        if total == target:
            return low, high
        if total > target:
            high -= 1
        else:
            low += 1
    return None


def pascal_triangle(rows: int) -> list[list[int]]:
    """Return the first ``rows`` rows of Pascal's triangle."""
    if rows < 0:
        raise ValueError("rows must not be negative")
    return [[comb(i, j) for j in range(i + 1)] for i in range(rows)]


def segregate_zeros_ones(values: Sequence[int]) -> list[int]:
    """Return a copy of a 0/1 sequence with all zeros moved before the ones."""
    result = list(values)
    low, high = 0, len(result) - 1
    while low < high:
        if result[low] == 0:
            low += 1
        else:
            result[low], result[high] = result[high], result[low]
            high -= 1
    return result


def swap_alternate(values: Sequence[int]) -> list[int]:
    """Return a copy with each adjacent pair swapped; an odd last item stays put."""
    result = list(values)
    end = len(result) - len(result) % 2
    result[0:end:2], result[1:end:2] = result[1:end:2], result[0:end:2]
    return result


def unique_element(values: Sequence[int]) -> int:
    """Return the single value that appears an odd number of times."""
    return reduce(xor, values, 0)