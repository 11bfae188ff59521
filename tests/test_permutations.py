from collections import Counter
from itertools import permutations

from hypothesis import given
from hypothesis import strategies as st

from arraydrills.permutations import next_permutation, prev_perm_one_swap

small_ints = st.integers(min_value=0, max_value=9)


def test_prev_perm_worked_examples():
    assert prev_perm_one_swap([3, 2, 1]) == [3, 1, 2]
    assert prev_perm_one_swap([1, 9, 4, 6, 7]) == [1, 7, 4, 6, 9]


@given(st.lists(small_ints, max_size=10))
def test_prev_perm_ascending_is_unchanged(values):
    ordered = sorted(values)
    assert prev_perm_one_swap(ordered) == ordered


@given(st.lists(small_ints, max_size=10))
def test_prev_perm_is_one_swap_smaller(values):
    original = list(values)
    result = prev_perm_one_swap(values)
    assert values == original
    assert Counter(result) == Counter(values)
    assert result <= values
    differing = [a != b for a, b in zip(result, values)]
    assert sum(differing) in (0, 2)
    if values != sorted(values):
        assert result < values


@given(st.lists(st.integers(min_value=0, max_value=20), unique=True, max_size=5))
def test_next_permutation_walks_all_orderings(values):
    start = sorted(values)
    expected = [list(p) for p in permutations(start)]
    nums = list(start)
    seen = [list(nums)]
    while next_permutation(nums):
        seen.append(list(nums))
    assert seen == expected
    assert nums == start


@given(st.lists(small_ints, max_size=8))
def test_next_permutation_increases_or_wraps(values):
    nums = list(values)
    advanced = next_permutation(nums)
    assert Counter(nums) == Counter(values)
    if advanced:
        assert nums > values
    else:
        assert nums == sorted(values)
        assert values == sorted(values, reverse=True)