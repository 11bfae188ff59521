"""Reorderings of integer lists; functions that return ``None`` work in place."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain, groupby


def shuffle(nums: Sequence[int], n: int) -> list[int]:
    """Interleave ``nums[:n]`` with ``nums[n:2n]``."""
    if len(nums) < 2 * n:
        raise ValueError("nums must hold at least 2 * n values")
    return list(chain.from_iterable(zip(nums[:n], nums[n : 2 * n])))


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places, in place."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = nums[len(nums) - k :] + nums[: len(nums) - k]


def rearrange_by_sign(nums: Sequence[int]) -> list[int]:
    """Alternate non-negative and negative values, starting non-negative.

    The relative order within each sign is kept.  The list must hold
    exactly as many values of each sign as there are slots for it.
    """
    non_negative = [value for value in nums if value >= 0]
    negative = [value for value in nums if value < 0]
    if len(non_negative) != (len(nums) + 1) // 2 or len(negative) != len(nums) // 2:
        raise ValueError("values of each sign must fill alternate slots exactly")
    result = [0] * len(nums)
    result[0::2] = non_negative
    result[1::2] = negative
    return result


def remove_duplicates(nums: list[int]) -> int:
    """Compact adjacent repeats to the front of ``nums``; return the kept count."""
    kept = [value for value, _ in groupby(nums)]
    nums[: len(kept)] = kept
    return len(kept)


def move_zeroes(nums: list[int]) -> None:
    """Move zeros to the end in place, keeping other values in order."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def sort_colors(nums: list[int]) -> None:
    """Sort ``nums`` ascending in place (stable)."""
    nums.sort()