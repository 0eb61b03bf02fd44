"""Algorithms built on sorting, binary search and dynamic programming."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise
from math import isqrt

_DISTANCE_LIMIT = 10**9


def _primes_below(limit: int) -> list[int]:
    flags = bytearray([1]) * limit
    flags[:2] = b"\x00\x00"
    for i in range(2, isqrt(limit - 1) + 1):
        if flags[i]:
            flags[i * i::i] = bytes(len(range(i * i, limit, i)))
    return [number for number, flag in enumerate(flags) if flag]


_PRIMES = _primes_below(1100)


def max_profit_assignment(
    difficulty: Sequence[int], profit: Sequence[int], worker: Iterable[int]
) -> int:
    """Total profit when every worker takes the best job within their ability."""
    jobs = sorted(zip(difficulty, profit))
    levels = [level for level, _ in jobs]
    best = list(accumulate((gain for _, gain in jobs), max, initial=0))
    return sum(best[bisect_right(levels, ability)] for ability in worker)


def max_sum_after_partitioning(arr: Sequence[int], k: int) -> int:
    """Largest sum after splitting into parts of length at most ``k`` and
    replacing every value by the maximum of its part."""
    n = len(arr)
    width = max(k, 1)
    best = [0] * (n + 1)
    for start in reversed(range(n)):
        peak = arr[start]
        result = 0
        for end in range(start, min(n, start + width)):
            peak = max(peak, arr[end])
            result = max(result, peak * (end - start + 1) + best[end + 1])
        best[start] = result
    return best[0]


def max_distance(position: Iterable[int], m: int) -> int:
    """Largest minimum gap achievable when placing ``m`` balls at the positions."""
    spots = sorted(position)
    if not spots:
        raise ValueError("at least one position is needed")

    def fits(gap: int) -> bool:
        placed, last = 1, spots[0]
        for spot in spots[1:]:
            if placed == m:
                break
            if spot - last >= gap:
                placed += 1
                last = spot
        return placed == m

    low, high, best = 0, _DISTANCE_LIMIT, 0
    while low <= high:
        mid = (low + high) // 2
        if fits(mid):
            best, low = mid, mid + 1
        else:
            high = mid - 1
    return best


def _lis_lengths(values: Iterable[int]) -> list[int]:
    tails: list[int] = []
    lengths: list[int] = []
    for value in values:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
        lengths.append(pos + 1)
    return lengths


def minimum_mountain_removals(nums: Sequence[int]) -> int:
    """Fewest removals that leave a strictly rising then strictly falling sequence."""
    rising = _lis_lengths(nums)
    falling = _lis_lengths(reversed(nums))[::-1]
    peaks = [up + down - 1 for up, down in zip(rising, falling) if up > 1 and down > 1]
    if not peaks:
        raise ValueError("no mountain can be formed")
    return len(nums) - max(peaks)


def minimum_size(nums: Sequence[int], max_operations: int) -> int:
    """Smallest largest-bag size reachable with at most ``max_operations`` splits."""
    if max_operations < 0:
        raise ValueError("max_operations must be non-negative")

    def splits(size: int) -> int:
        return sum((balls - 1) // size for balls in nums)

    low, high = 1, max(nums, default=1)
    while low < high:
        mid = (low + high) // 2
        if splits(mid) <= max_operations:
            high = mid
        else:
            low = mid + 1
    return low


def minimized_maximum(n: int, quantities: Sequence[int]) -> int:
    """Smallest per-store maximum when distributing the product types to ``n`` stores."""
    if len(quantities) > n:
        raise ValueError("more product types than stores")

    def stores(cap: int) -> int:
        return sum(-(-quantity // cap) for quantity in quantities)

    low, high = 1, max(quantities, default=1)
    while low < high:
        mid = (low + high) // 2
        if stores(mid) <= n:
            high = mid
        else:
            low = mid + 1
    return low


def most_beautiful_items(
    items: Iterable[Sequence[int]], queries: Iterable[int]
) -> list[int]:
    """For each price query, the highest beauty among items costing no more (0 if none)."""
    ordered = sorted((price, beauty) for price, beauty in items)
    prices = [price for price, _ in ordered]
    best = list(accumulate((beauty for _, beauty in ordered), max, initial=0))
    return [best[bisect_right(prices, query)] for query in queries]


def prime_sub_operation(nums: Iterable[int]) -> bool:
    """Whether subtracting at most one prime smaller than each value can make
    the sequence strictly increasing."""
    previous = 0
    reduced: list[int] = []
    for value in nums:
        index = bisect_left(_PRIMES, value - previous)
        if index:
            value -= _PRIMES[index - 1]
        reduced.append(value)
        previous = value
    return all(a < b for a, b in pairwise(reduced))