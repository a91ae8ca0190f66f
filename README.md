# dsakit

A small collection of classic data-structure and algorithm exercises in plain Python.
The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `count_inversions`, `find_duplicate`, `pair_sum_brute`, `pair_sum_two_pointer`, `pascal_triangle`, `segregate_zeros_ones`, `swap_alternate`, `unique_element` |
| `dsakit.number_system` | `add_without_plus`, `add_binary`, `binary_to_decimal`, `decimal_to_binary`, `hex_to_decimal`, `count_set_bits`, `octal_to_decimal` |
| `dsakit.recursion` | `power`, `intersection`, `permutations`, `factorial`, `letter_combinations`, `subsets`, `rat_in_maze`, `subsequences` |
| `dsakit.stack` | `BoundedStack`, `StackOverflowError`, `StackUnderflowError` |
| `dsakit.sorting` | `bubble_sort`, `counting_sort`, `dnf_sort`, `insertion_sort`, `merge_sort`, `radix_sort`, `selection_sort`, `wave_sort`, `quick_sort` |
| `dsakit.linked_list` | `Node`, `from_values`, `to_values`, `SinglyLinkedList`, `DoublyLinkedList`, `CircularLinkedList` |
| `dsakit.list_cycles` | `is_circular`, `is_circular_floyd`, `detect_loop_hashing`, `detect_loop_floyd`, `loop_start`, `remove_loop` |
| `dsakit.list_clone` | `RandomNode`, `copy_list_with_map`, `copy_list_interleaved` |
| `dsakit.list_traversal` | `reverse`, `reverse_recursive`, `reverse_in_groups`, `middle_by_length`, `middle`, `is_palindrome_copy`, `is_palindrome` , `remove_sorted_duplicates` |
| `dsakit.list_sorting` | `merge_sort_list`, `merge_sorted_in_place`, `merge_sorted_copy`, `sort_012_counting`, `sort_012_relink` |
| `dsakit.list_arithmetic` | `add_lists` |

## Examples

```python
from dsakit.arrays import count_inversions, pascal_triangle
from dsakit.number_system import add_binary
from dsakit.recursion import letter_combinations
from dsakit.sorting import radix_sort

count_inversions([3, 5, 6, 9, 1, 2, 7, 8])   # 10
pascal_triangle(4)                           # [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1]]
add_binary("1101", "1011")                   # "11000"
letter_combinations("89")                    # ["tw", "tx", "ty", "tz", "uw", ...]
radix_sort([101, 306, 807, 708, 67])         # [67, 101, 306, 708, 807]
```

The functions in `dsakit.sorting` and the rearranging functions in `dsakit.arrays`
return a new list and leave their input alone.

## Linked lists

The linked-list helpers operate on chains of `Node` objects. Use `from_values` to build a
chain from an iterable and `to_values` to read one back into a list (`to_values` raises
`ValueError` if the chain loops):

```python
from dsakit.linked_list import from_values, to_values
from dsakit.list_traversal import reverse_in_groups

head = from_values([5, 4, 3, 7, 9, 2])
to_values(reverse_in_groups(head, 4))        # [7, 3, 4, 5, 9, 2]
```

Most chain functions, such as `reverse`, `reverse_in_groups`, `merge_sort_list`,
`merge_sorted_in_place`, `sort_012_relink` and `remove_loop`, relink the nodes they are
given and return the new head. `is_palindrome` reverses half the chain while comparing and
restores it before returning. `merge_sorted_copy` and `add_lists` build new chains and
leave their inputs unchanged.

`SinglyLinkedList` and `DoublyLinkedList` use 1-based positions for `insert_at` and
`delete_at` and raise `IndexError` for positions out of range. `CircularLinkedList`
inserts after the first node holding a given value and raises `ValueError` when the value
is missing.

## Stack

`BoundedStack` is a stack with a fixed capacity. Pushing onto a full stack raises
`StackOverflowError`; popping or peeking an empty one raises `StackUnderflowError`:

```python
from dsakit.stack import BoundedStack

stack = BoundedStack(5)
stack.push(9)
stack.push(8)
stack.peek()                                 # 8
```

## What it does not do

dsakit is a library only: it has no command-line tool and nothing prints results. Each
function returns its answer for the caller to use.