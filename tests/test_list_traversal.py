import pytest

from dsakit.linked_list import from_values, to_values
from dsakit.list_traversal import (
    is_palindrome,
    is_palindrome_copy,
    middle,
    middle_by_length,
    remove_sorted_duplicates,
    reverse,
    reverse_in_groups,
    reverse_recursive,
)


def _nodes(head):
    nodes = []
    while head is not None:
        nodes.append(head)
        head = head.next
    return nodes


@pytest.mark.parametrize("func", [reverse, reverse_recursive])
@pytest.mark.parametrize("values", [[], [7], [7, 20], [7, 20, 21], [1, 2, 3, 4, 5, 6]])
def test_reverse_matches_reversed_values(func, values):
    assert to_values(func(from_values(values))) == values[::-1]


@pytest.mark.parametrize("func", [reverse, reverse_recursive])
def test_reverse_twice_restores_order_and_nodes(func):
    head = from_values([3, 1, 4, 1, 5])
    original = _nodes(head)
    back = func(func(head))
    assert back is head
    assert _nodes(back) == original


def test_reverse_empty_is_none():
    assert reverse(None) is None
    assert reverse_recursive(None) is None


def test_reverse_in_groups_source_example():
    head = from_values([5, 4, 3, 7, 9, 2])
    assert to_values(reverse_in_groups(head, 4)) == [7, 3, 4, 5, 9, 2]


def test_reverse_in_groups_pairs():
    assert to_values(reverse_in_groups(from_values([1, 2, 3, 4, 5]), 2)) == [2, 1, 4, 3, 5]


def test_reverse_in_groups_k_one_keeps_order():
    values = [4, 8, 15, 16]
    assert to_values(reverse_in_groups(from_values(values), 1)) == values


def test_reverse_in_groups_k_equal_length_reverses():
    values = [4, 8, 15, 16]
    assert to_values(reverse_in_groups(from_values(values), 4)) == values[::-1]


def test_reverse_in_groups_k_longer_than_list_keeps_order():
    values = [4, 8, 15]
    assert to_values(reverse_in_groups(from_values(values), 5)) == values


def test_reverse_in_groups_empty():
    assert reverse_in_groups(None, 3) is None


@pytest.mark.parametrize("k", [0, -2])
def test_reverse_in_groups_rejects_non_positive_k(k):
    with pytest.raises(ValueError):
        reverse_in_groups(from_values([1, 2]), k)


def test_middle_by_length_odd_and_even():
    odd = from_values([1, 2, 7, 1, 9])
    assert middle_by_length(odd) is _nodes(odd)[2]
    even = from_values([1, 2, 7, 1])
    assert middle_by_length(even) is _nodes(even)[1]


def test_middle_by_length_small():
    assert middle_by_length(None) is None
    single = from_values([5])
    assert middle_by_length(single) is single


def test_middle_odd_and_even():
    odd = from_values([1, 2, 1, 5, 6])
    assert middle(odd) is _nodes(odd)[2]
    even = from_values([1, 2, 1, 5])
    assert middle(even) is _nodes(even)[2]


def test_middle_small():
    assert middle(None) is None
    single = from_values([5])
    assert middle(single) is single
    pair = from_values([5, 6])
    assert middle(pair) is pair.next


@pytest.mark.parametrize("func", [is_palindrome, is_palindrome_copy])
@pytest.mark.parametrize(
    "values, expected",
    [
        ([], True),
        ([1], True),
        ([1, 2, 1], True),
        ([1, 2, 2, 1], True),
        ([1, 2, 1, 4], False),
        ([1, 2], False),
        ([3, 1, 2, 1, 4], False),
    ],
)
def test_palindrome(func, values, expected):
    assert func(from_values(values)) is expected


@pytest.mark.parametrize("values", [[1, 2, 3, 2, 1], [1, 2, 1, 4], [9, 8, 8, 7]])
def test_is_palindrome_leaves_list_intact(values):
    head = from_values(values)
    original = _nodes(head)
    is_palindrome(head)
    assert _nodes(head) == original
    assert to_values(head) == values


@pytest.mark.parametrize(
    "values",
    [[1, 2, 2, 3], [1, 1, 1], [1, 2, 3], [0, 0, 4, 4, 4, 8]],
)
def test_remove_sorted_duplicates(values):
    head = from_values(values)
    result = remove_sorted_duplicates(head)
    assert result is head
    assert to_values(result) == sorted(set(values))


def test_remove_sorted_duplicates_empty():
    assert remove_sorted_duplicates(None) is None