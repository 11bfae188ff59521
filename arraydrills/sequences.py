"""Scans over integer sequences: profits, prefix sums, runs and subarrays."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate


def max_profit(prices: Sequence[int]) -> int:
    """Best gain from one buy followed by one later sell; 0 if none is positive."""
    best = 0
    lowest: int | None = None
    for price in prices:
        if lowest is not None:
            best = max(best, price - lowest)
        lowest = price if lowest is None else min(lowest, price)
    return best


def running_sum(nums: Sequence[int]) -> list[int]:
    """Prefix sums of ``nums``."""
    return list(accumulate(nums))


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Whether ``nums`` is a non-decreasing list rotated by some amount."""
    if not nums:
        raise ValueError("nums must not be empty")
    descents = sum(1 for prev, cur in zip(nums, nums[1:]) if cur < prev)
    if nums[0] < nums[-1]:
        descents += 1
    return descents < 2


def max_consecutive_ones(nums: Sequence[int]) -> int:
    """Length of the longest run of 1s."""
    best = run = 0
    for value in nums:
        run = run + 1 if value == 1 else 0
        best = max(best, run)
    return best


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    best: int | None = None
    running = 0
    for value in nums:
        running += value
        best = running if best is None else max(best, running)
        running = max(running, 0)
    return best


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays whose sum equals ``k``."""
    prefix_counts = Counter({0: 1})
    total = 0
    matches = 0
    for value in nums:
        total += value
        matches += prefix_counts[total - k]
        prefix_counts[total] += 1
    return matches