"""Recursive and backtracking exercises."""

from __future__ import annotations

from itertools import product
from math import prod
from typing import Iterator, Sequence

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")
_DIGITS = "0123456789"
_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def power(base: int, exponent: int) -> int:
    """Raise base to a non-negative exponent by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if exponent == 0:
        return 1
    half = power(base, exponent // 2)
    if exponent % 2 == 0:
        return half * half
    return base * half * half


def intersection(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the common elements of two sorted sequences, keeping repeats."""
    common = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] == second[j]:
            common.append(first[i])
            i += 1
            j += 1
        elif first[i] > second[j]:
            j += 1
        else:
            i += 1
    return common


def permutations(text: str) -> list[str]:
    """Return every permutation of text in swap-based backtracking order."""
    chars = list(text)
    found: list[str] = []

    def permute(index: int) -> None:
        if index >= len(chars):
            found.append("".join(chars))
            return
        for i in range(index, len(chars)):
            chars[index], chars[i] = chars[i], chars[index]
            permute(index + 1)
            chars[index], chars[i] = chars[i], chars[index]

    permute(0)
    return found


def factorial(n: int) -> int:
    """Return n! for a non-negative n."""
    if n < 0:
        raise ValueError("n must not be negative")
    return prod(range(1, n + 1))


def letter_combinations(digits: str) -> list[str]:
    """Return the letter strings a phone keypad can spell for the digits."""
    if not digits:
        return []
    for digit in digits:
        if digit not in _DIGITS:
            raise ValueError(f"not a keypad digit: {digit!r}")
    groups = [_KEYPAD[int(digit)] for digit in digits]
    return ["".join(letters) for letters in product(*groups)]


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return the power set, excluding each element before including it."""
    items = list(nums)

    def build(index: int, chosen: list[int]) -> Iterator[list[int]]:
        if index >= len(items):
            yield chosen
            return
        yield from build(index + 1, chosen)
        yield from build(index + 1, chosen + [items[index]])

    return list(build(0, []))


def rat_in_maze(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from top-left to bottom-right through cells equal to 1.

    Moves are tried in the order down, left, right, up.
    """
    n = len(maze)
    if n == 0 or any(len(row) != n for row in maze):
        raise ValueError("maze must be a non-empty square grid")
    if maze[0][0] == 0:
        return []
    visited = [[False] * n for _ in range(n)]
    paths: list[str] = []

    def solve(x: int, y: int, path: str) -> None:
        if x == n - 1 and y == n - 1:
            paths.append(path)
            return
        visited[x][y] = True
        for letter, dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < n and 0 <= ny < n and not visited[nx][ny] and maze[nx][ny] == 1:
                solve(nx, ny, path + letter)
        visited[x][y] = False

    solve(0, 0, "")
    return paths


def subsequences(text: str) -> list[str]:
    """Return every non-empty subsequence, excluding each character before including it."""

    def build(index: int, chosen: str) -> Iterator[str]:
        if index >= len(text):
            if chosen:
                yield chosen
            return
        yield from build(index + 1, chosen)
        yield from build(index + 1, chosen + text[index])

    return list(build(0, ""))