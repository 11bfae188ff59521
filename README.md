# arraydrills

Compact implementations of classic array, string and grid problems, grouped
by theme. The package uses only the standard library.

## Installation

```
pip install arraydrills
```

To run the test suite:

```
pip install "arraydrills[test]"
pytest
```

## Modules

- `arraydrills.lookup`: `two_sum`, `longest_consecutive`, `single_number`,
  `majority_element`, `missing_number`, `find_duplicate`
- `arraydrills.sequences`: `max_profit`, `running_sum`,
  `is_sorted_and_rotated`, `max_consecutive_ones`, `max_subarray`,
  `subarray_sum`
- `arraydrills.rearrange`: `shuffle`, `rotate`, `rearrange_by_sign`,
  `remove_duplicates`, `move_zeroes`, `sort_colors`
- `arraydrills.permutations`: `prev_perm_one_swap`, `next_permutation`
- `arraydrills.text`: `most_words_found`, `is_anagram`,
  `find_the_difference`, `fizz_buzz`
- `arraydrills.grid`: `maximum_wealth`, `flip_and_invert_image`

## Examples

```python
from arraydrills.lookup import two_sum, longest_consecutive
from arraydrills.sequences import max_subarray
from arraydrills.text import fizz_buzz

two_sum([2, 7, 11, 15], 9)                     # [0, 1]
longest_consecutive([100, 4, 200, 1, 3, 2])    # 4
max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # 6
fizz_buzz(5)                                   # ['1', '2', 'Fizz', '4', 'Buzz']
```

### In-place routines

`rotate`, `remove_duplicates`, `move_zeroes`, `sort_colors` and
`next_permutation` change the list they are given.

```python
from arraydrills.rearrange import move_zeroes, remove_duplicates
from arraydrills.permutations import next_permutation

nums = [0, 1, 0, 3, 12]
move_zeroes(nums)
nums                                           # [1, 3, 12, 0, 0]

nums = [1, 1, 2]
remove_duplicates(nums)                        # 2; nums[:2] == [1, 2]

nums = [3, 2, 1]
next_permutation(nums)                         # False; nums == [1, 2, 3]
```

`next_permutation` returns `True` when it moved to a later permutation and
`False` when the list was already the last one and has been reset to
ascending order.

### Errors

Where an input cannot give a meaningful answer, a `ValueError` is raised:

- `is_sorted_and_rotated` and `max_subarray` on an empty list;
- `shuffle` when the list holds fewer than `2 * n` values;
- `rearrange_by_sign` when the non-negative and negative values cannot fill
  alternate slots exactly;
- `find_the_difference` when `t` is not exactly one character longer than `s`.

## Scope

This is a library only: it has no command-line interface, and it reads and
writes no files.