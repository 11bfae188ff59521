"""Lexicographic permutation steps."""

from __future__ import annotations

from collections.abc import Sequence


def prev_perm_one_swap(arr: Sequence[int]) -> list[int]:
    """Largest permutation smaller than ``arr`` reachable by one swap.

    Returns a copy of ``arr`` unchanged when no such permutation exists.
    """
    result = list(arr)
    pivot = next(
        (i for i in range(len(result) - 2, -1, -1) if result[i] > result[i + 1]),
        None,
    )
    if pivot is None:
        return result
    for j in range(len(result) - 1, pivot, -1):
        if result[j] < result[pivot] and result[j] != result[j - 1]:
            result[pivot], result[j] = result[j], result[pivot]
            break
    return result


def next_permutation(nums: list[int]) -> bool:
    """Advance ``nums`` in place to its next lexicographic permutation.

    When ``nums`` is already the last permutation it is reset to the first
    (ascending order) and ``False`` is returned; otherwise ``True``.
    """
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]),
        None,
    )
    if pivot is None:
        nums.reverse()
        return False
    successor = next(j for j in range(len(nums) - 1, pivot, -1) if nums[j] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1 :] = nums[pivot + 1 :][::-1]
    return True