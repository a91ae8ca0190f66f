"""Arithmetic on numbers stored as chains of decimal digits."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional

from dsakit.linked_list import Node, from_values, to_values


def add_lists(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Add two numbers whose digits are stored most significant first.

    Returns a new chain holding the sum's digits, or None if both are empty.
    The inputs are left unchanged.
    """
    left = to_values(first)
    right = to_values(second)
    for digit in left + right:
        if not isinstance(digit, int) or not 0 <= digit <= 9:
            raise ValueError(f"not a decimal digit: {digit!r}")
    digits = []
    carry = 0
    for a, b in zip_longest(reversed(left), reversed(right), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return from_values(reversed(digits))