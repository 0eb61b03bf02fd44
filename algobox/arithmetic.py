"""Number-theoretic and bit-manipulation routines."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import combinations
from math import isqrt
from operator import or_

_SQUARES = [i * i for i in range(1, 101)]


def num_squares(n: int) -> int:
    """Least number of perfect squares (of 1..100) that sum to ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    best = [0] * (n + 1)
    for rem in range(1, n + 1):
        best[rem] = 1 + min(best[rem - sq] for sq in _SQUARES if sq <= rem)
    return best[n]


def judge_square_sum(c: int) -> bool:
    """Whether ``c`` is a sum of two squares of non-negative integers."""
    if c < 0:
        return False
    for a in range(isqrt(c) + 1):
        rest = c - a * a
        if isqrt(rest) ** 2 == rest:
            return True
    return False


def maximum_swap(num: int) -> int:
    """Largest number reachable by swapping at most one pair of digits."""
    digits = str(num)
    best = digits
    for i, j in combinations(range(len(digits)), 2):
        chars = list(digits)
        chars[i], chars[j] = chars[j], chars[i]
        best = max(best, "".join(chars))
    return int(best)


def count_max_or_subsets(nums: Sequence[int]) -> int:
    """Count the subsets (the empty one included) whose OR equals the maximum OR."""
    counts = Counter(
        reduce(or_, subset, 0)
        for size in range(len(nums) + 1)
        for subset in combinations(nums, size)
    )
    return counts[max(counts)]


def min_bit_flips(start: int, goal: int) -> int:
    """Number of bit flips needed to turn ``start`` into ``goal``."""
    if start < 0 or goal < 0:
        raise ValueError("values must be non-negative")
    return bin(start ^ goal).count("1")


def largest_combination(candidates: Iterable[int]) -> int:
    """Size of the largest group whose bitwise AND is non-zero."""
    values = list(candidates)
    return max(
        (sum(1 for num in values if num >> bit & 1) for bit in range(32)),
        default=0,
    )


def max_count(banned: Iterable[int], n: int, max_sum: int) -> int:
    """Most integers in 1..n, none banned, whose sum stays within ``max_sum``."""
    blocked = set(banned)
    chosen = 0
    for value in range(1, n + 1):
        if value > max_sum:
            break
        if value not in blocked:
            max_sum -= value
            chosen += 1
    return chosen


def pass_the_pillow(n: int, time: int) -> int:
    """Who holds the pillow after ``time`` seconds passing back and forth along ``n`` people."""
    if n < 2:
        raise ValueError("at least two people are needed")
    step = time % (2 * (n - 1))
    return 1 + step if step < n else 2 * n - 1 - step