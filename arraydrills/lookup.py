"""Searches over integer lists: pairs, runs, unique and missing values."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import xor


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices ``[i, j]`` with ``nums[i] + nums[j] == target``, or ``[]``.

    ``i`` is the first index that has a partner; the partner is the last
    index holding the complementary value.
    """
    last_index = {value: index for index, value in enumerate(nums)}
    for index, value in enumerate(nums):
        partner = last_index.get(target - value)
        if partner is not None and partner != index:
            return [index, partner]
    return []


def longest_consecutive(nums: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers among ``nums``."""
    values = set(nums)
    best = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start
        while end + 1 in values:
            end += 1
        best = max(best, end - start + 1)
    return best


def single_number(nums: Sequence[int]) -> int:
    """The value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def majority_element(nums: Sequence[int]) -> int:
    """The majority candidate found by the Boyer-Moore voting scheme."""
    count = 0
    candidate = 0
    for value in nums:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate


def missing_number(nums: Sequence[int]) -> int:
    """Smallest value in ``0..len(nums)`` absent from ``nums``, or -1."""
    present = set(nums)
    return next((value for value in range(len(nums) + 1) if value not in present), -1)


def find_duplicate(nums: Sequence[int]) -> int:
    """The first value seen a second time while scanning, or 0 if none repeats."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return value
        seen.add(value)
    return 0