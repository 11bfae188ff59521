"""Small string tasks: word counts, anagrams, an added letter, FizzBuzz."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def most_words_found(sentences: Iterable[str]) -> int:
    """Most space-separated words in any one sentence; 0 for no sentences."""
    return max((sentence.count(" ") + 1 for sentence in sentences), default=0)


def is_anagram(s: str, t: str) -> bool:
    """Whether ``t`` is a rearrangement of the letters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def find_the_difference(s: str, t: str) -> str:
    """The letter added to ``s`` to make the shuffled string ``t``."""
    if len(t) != len(s) + 1:
        raise ValueError("t must be exactly one character longer than s")
    return min(Counter(t) - Counter(s))


def fizz_buzz(n: int) -> list[str]:
    """FizzBuzz strings for 1 through ``n``."""
    words = []
    for number in range(1, n + 1):
        if number % 15 == 0:
            words.append("FizzBuzz")
        elif number % 3 == 0:
            words.append("Fizz")
        elif number % 5 == 0:
            words.append("Buzz")
        else:
            words.append(str(number))
    return words