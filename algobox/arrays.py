"""Algorithms over one-dimensional integer sequences."""

from __future__ import annotations

import heapq
from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import accumulate, groupby, pairwise
from math import isqrt
from operator import xor


def trap(height: Iterable[int]) -> int:
    """Units of rain water trapped between the bars of an elevation map."""
    heights = list(height)
    left = list(accumulate(heights, max))
    right = list(accumulate(reversed(heights), max))[::-1]
    return sum(max(0, min(lo, hi) - h) for lo, hi, h in zip(left, right, heights))


def intersect(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Multiset intersection of the two sequences, in ascending order."""
    return sorted((Counter(nums1) & Counter(nums2)).elements())


def max_chunks_to_sorted(arr: Iterable[int]) -> int:
    """Most chunks a permutation of 0..n-1 splits into so that sorting each
    chunk sorts the whole."""
    return sum(
        1
        for index, total in enumerate(accumulate(arr))
        if total == index * (index + 1) // 2
    )


def subarrays_div_by_k(nums: Iterable[int], k: int) -> int:
    """Number of non-empty subarrays whose sum is divisible by ``k``."""
    if k == 0:
        raise ValueError("k must be non-zero")
    seen: Counter[int] = Counter({0: 1})
    remainder = 0
    count = 0
    for value in nums:
        remainder = (remainder + value) % k
        count += seen[remainder]
        seen[remainder] += 1
    return count


def max_satisfied(
    customers: Sequence[int], grumpy: Sequence[int], minutes: int
) -> int:
    """Most satisfied customers when the owner keeps calm for ``minutes`` in a row."""
    if not 0 <= minutes <= len(customers):
        raise ValueError("minutes must lie between 0 and the number of minutes")
    base = sum(c for c, g in zip(customers, grumpy) if g != 1)
    lost = [c if g == 1 else 0 for c, g in zip(customers, grumpy)]
    window = sum(lost[:minutes])
    best = window
    for incoming, outgoing in zip(lost[minutes:], lost):
        window += incoming - outgoing
        best = max(best, window)
    return base + best


def number_of_subarrays(nums: Iterable[int], k: int) -> int:
    """Number of subarrays holding exactly ``k`` odd numbers."""
    seen: Counter[int] = Counter({0: 1})
    odd = 0
    count = 0
    for value in nums:
        odd += value % 2
        count += seen[odd - k]
        seen[odd] += 1
    return count


def check_if_exist(arr: Iterable[int]) -> bool:
    """Whether one element is double another element at a different position."""
    counts = Counter(arr)
    return any(counts[2 * value] > (value == 0) for value in counts)


def min_difference(nums: Iterable[int]) -> int:
    """Smallest max-minus-min after changing at most three values."""
    ordered = sorted(nums)
    if len(ordered) <= 4:
        return 0
    return min(high - low for low, high in zip(ordered[:4], ordered[-4:]))


def find_length_of_shortest_subarray(arr: Sequence[int]) -> int:
    """Length of the shortest subarray whose removal leaves ``arr`` non-decreasing."""
    n = len(arr)
    right = n - 1
    while right > 0 and arr[right] >= arr[right - 1]:
        right -= 1
    best = right
    left = 0
    while left < right and (left == 0 or arr[left - 1] <= arr[left]):
        while right < n and arr[left] > arr[right]:
            right += 1
        best = min(best, right - left - 1)
        left += 1
    return max(best, 0)


def decrypt(code: Sequence[int], k: int) -> list[int]:
    """Replace each value of the circular code by the sum of the next ``k``
    values (or the previous ``-k`` values when ``k`` is negative)."""
    n = len(code)
    if k == 0:
        return [0] * n
    offsets = range(1, k + 1) if k > 0 else range(k, 0)
    return [sum(code[(i + offset) % n] for offset in offsets) for i in range(n)]


def get_maximum_xor(nums: Sequence[int], maximum_bit: int) -> list[int]:
    """For each prefix, longest first, the value below 2**maximum_bit that
    maximises its XOR."""
    mask = (1 << maximum_bit) - 1
    total = reduce(xor, nums, 0)
    answer = []
    for value in reversed(nums):
        answer.append(total ^ mask)
        total ^= value
    return answer


def time_required_to_buy(tickets: Sequence[int], k: int) -> int:
    """Seconds until person ``k`` in the ticket queue has bought all tickets."""
    if not 0 <= k < len(tickets):
        raise IndexError("k is outside the queue")
    wanted = tickets[k]
    return sum(
        min(count, wanted - (position > k)) for position, count in enumerate(tickets)
    )


def longest_subarray(nums: Sequence[int]) -> int:
    """Length of the longest run of the maximum value (the subarray with the
    largest bitwise AND)."""
    if not nums:
        raise ValueError("nums must not be empty")
    peak = max(nums)
    return max(len(list(run)) for value, run in groupby(nums) if value == peak)


def maximum_subarray_sum(nums: Sequence[int], k: int) -> int:
    """Largest sum of a length-``k`` window with all values distinct, or 0."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must lie between 1 and the length of nums")
    window = Counter(nums[:k])
    total = sum(nums[:k])
    best = total if len(window) == k else 0
    for outgoing, incoming in zip(nums, nums[k:]):
        total += incoming - outgoing
        window[incoming] += 1
        window[outgoing] -= 1
        if not window[outgoing]:
            del window[outgoing]
        if len(window) == k:
            best = max(best, total)
    return best


def pick_gifts(gifts: Iterable[int], k: int) -> int:
    """Gifts left after ``k`` times reducing the richest pile to its integer square root."""
    heap = [-gift for gift in gifts]
    heapq.heapify(heap)
    for _ in range(k):
        if not heap:
            raise ValueError("there are no piles to take from")
        heapq.heapreplace(heap, -isqrt(-heap[0]))
    return -sum(heap)


def count_fair_pairs(nums: Iterable[int], lower: int, upper: int) -> int:
    """Number of index pairs i < j with ``lower <= nums[i] + nums[j] <= upper``."""
    if lower > upper:
        raise ValueError("lower must not exceed upper")
    ordered = sorted(nums)
    return sum(
        bisect_right(ordered, upper - value, lo=i + 1)
        - bisect_left(ordered, lower - value, lo=i + 1)
        for i, value in enumerate(ordered)
    )


def find_score(nums: Sequence[int]) -> int:
    """Score from repeatedly taking the smallest unmarked value and marking it
    and its neighbours."""
    marked: set[int] = set()
    score = 0
    for value, index in sorted((value, index) for index, value in enumerate(nums)):
        if index in marked:
            continue
        score += value
        marked.update((index - 1, index + 1))
    return score


def continuous_subarrays(nums: Sequence[int]) -> int:
    """Number of subarrays whose values differ pairwise by at most two."""
    window: Counter[int] = Counter()
    left = 0
    count = 0
    for right, value in enumerate(nums):
        window[value] += 1
        while max(window) - min(window) > 2:
            outgoing = nums[left]
            window[outgoing] -= 1
            if not window[outgoing]:
                del window[outgoing]
            left += 1
        count += right - left + 1
    return count


def maximum_beauty(nums: Iterable[int], k: int) -> int:
    """Longest run of equal values reachable by moving each value by at most ``k``."""
    ordered = sorted(nums)
    return max(
        (bisect_right(ordered, low + 2 * k) - i for i, low in enumerate(ordered)),
        default=0,
    )


def _popcount(value: int) -> int:
    return bin(value).count("1")


def can_sort_array(nums: Iterable[int]) -> bool:
    """Whether swapping adjacent values with the same number of set bits can sort ``nums``."""
    previous_max = None
    for _, run in groupby(nums, key=_popcount):
        values = list(run)
        if previous_max is not None and min(values) < previous_max:
            return False
        previous_max = max(values)
    return True


def _prefixes(values: Iterable[int]) -> set[str]:
    return {
        text[:end]
        for text in map(str, values)
        for end in range(1, len(text) + 1)
    }


def longest_common_prefix(arr1: Iterable[int], arr2: Iterable[int]) -> int:
    """Length of the longest decimal prefix shared by a value of each sequence."""
    return max(map(len, _prefixes(arr1) & _prefixes(arr2)), default=0)


def is_array_special(
    nums: Sequence[int], queries: Iterable[Sequence[int]]
) -> list[bool]:
    """For each inclusive range, whether every adjacent pair in it has different parity."""
    breaks = [
        index
        for index, (a, b) in enumerate(pairwise(nums), start=1)
        if a % 2 == b % 2
    ]
    answer = []
    for start, end in queries:
        position = bisect_left(breaks, start + 1)
        answer.append(position == len(breaks) or breaks[position] > end)
    return answer


def results_array(nums: Sequence[int], k: int) -> list[int]:
    """Power of each length-``k`` window: its maximum when it rises by one at
    every step, otherwise -1."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must lie between 1 and the length of nums")
    answer = []
    for start in range(len(nums) - k + 1):
        window = nums[start:start + k]
        rising = all(b == a + 1 for a, b in pairwise(window))
        answer.append(max(window) if rising else -1)
    return answer


def get_final_state(nums: Sequence[int], k: int, multiplier: int) -> list[int]:
    """Values after ``k`` times multiplying the first smallest value by ``multiplier``."""
    heap = [(value, index) for index, value in enumerate(nums)]
    heapq.heapify(heap)
    for _ in range(k):
        if not heap:
            raise ValueError("nums must not be empty")
        value, index = heap[0]
        heapq.heapreplace(heap, (value * multiplier, index))
    result = [0] * len(heap)
    for value, index in heap:
        result[index] = value
    return result