"""Operations on lists of integer rows."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def maximum_wealth(accounts: Iterable[Sequence[int]]) -> int:
    """Largest row sum, never below 0."""
    return max(0, max((sum(row) for row in accounts), default=0))


def flip_and_invert_image(image: Iterable[Sequence[int]]) -> list[list[int]]:
    """Mirror each row of a binary image and invert every pixel."""
    return [[pixel ^ 1 for pixel in reversed(row)] for row in image]