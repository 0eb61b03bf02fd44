"""String-processing algorithms."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import groupby

_VOWEL_BITS = {vowel: 1 << bit for bit, vowel in enumerate("aeiou")}


def remove_k_digits(num: str, k: int) -> str:
    """Smallest number left after deleting ``k`` digits from ``num``."""
    if k < 0 or k > len(num):
        raise ValueError("k must be between 0 and the number of digits")
    stack: list[str] = []
    for digit in num:
        while k and stack and stack[-1] > digit:
            stack.pop()
            k -= 1
        stack.append(digit)
    if k:
        del stack[-k:]
    return "".join(stack).lstrip("0") or "0"


def rotate_string(s: str, goal: str) -> bool:
    """Whether some rotation of ``s`` equals ``goal``."""
    return len(s) == len(goal) and goal in s + s


def find_the_longest_substring(s: str) -> int:
    """Length of the longest substring holding each vowel an even number of times."""
    first_seen = {0: -1}
    mask = 0
    best = 0
    for index, char in enumerate(s):
        mask ^= _VOWEL_BITS.get(char, 0)
        if mask in first_seen:
            best = max(best, index - first_seen[mask])
        else:
            first_seen[mask] = index
    return best


def make_good(s: str) -> str:
    """Repeatedly drop adjacent pairs that are the same letter in opposite case."""
    stack: list[str] = []
    for char in s:
        if stack and abs(ord(char) - ord(stack[-1])) == 32:
            stack.pop()
        else:
            stack.append(char)
    return "".join(stack)


def max_depth(s: str) -> int:
    """Deepest nesting of parentheses in ``s``."""
    depth = best = 0
    for char in s:
        if char == "(":
            depth += 1
        elif char == ")":
            if not depth:
                raise ValueError("unbalanced closing parenthesis")
            depth -= 1
        best = max(best, depth)
    return best


def make_fancy_string(s: str) -> str:
    """Drop characters so that no three consecutive characters are equal."""
    return "".join(char * min(2, len(list(run))) for char, run in groupby(s))


def repeat_limited_string(s: str, repeat_limit: int) -> str:
    """Lexicographically largest string from the characters of ``s`` with no
    character repeated more than ``repeat_limit`` times in a row."""
    if repeat_limit < 1:
        raise ValueError("repeat_limit must be positive")
    pending = sorted(Counter(s).items(), reverse=True)
    pieces: list[str] = []
    while pending:
        char, count = pending[0]
        take = min(count, repeat_limit)
        pieces.append(char * take)
        if take == count:
            pending.pop(0)
            continue
        pending[0] = (char, count - take)
        if len(pending) == 1:
            break
        separator, separator_count = pending[1]
        pieces.append(separator)
        if separator_count == 1:
            pending.pop(1)
        else:
            pending[1] = (separator, separator_count - 1)
    return "".join(pieces)


def take_characters(s: str, k: int) -> int:
    """Fewest characters taken from the two ends of ``s`` to get at least ``k``
    of each of 'a', 'b' and 'c', or -1 if that is impossible."""
    if set(s) - set("abc"):
        raise ValueError("s may only hold the characters 'a', 'b' and 'c'")
    totals = Counter(s)
    if any(totals[char] < k for char in "abc"):
        return -1
    window: Counter[str] = Counter()
    left = 0
    longest = 0
    for right, char in enumerate(s):
        window[char] += 1
        while totals[char] - window[char] < k:
            window[s[left]] -= 1
            left += 1
        longest = max(longest, right - left + 1)
    return len(s) - longest


def min_extra_char(s: str, dictionary: Iterable[str]) -> int:
    """Fewest characters of ``s`` left over after splitting it into dictionary words."""
    words = set(dictionary)
    n = len(s)
    best = [0] * (n + 1)
    for start in reversed(range(n)):
        best[start] = min(
            [1 + best[start + 1]]
            + [best[end] for end in range(start + 1, n + 1) if s[start:end] in words]
        )
    return best[0]


def minimum_steps(s: str) -> int:
    """Adjacent swaps needed to move every '1' to the right of every '0'."""
    ones = steps = 0
    for char in s:
        if char == "1":
            ones += 1
        else:
            steps += ones
    return steps


def compressed_string(word: str) -> str:
    """Run-length encode ``word`` as count-then-character, runs capped at nine."""
    parts: list[str] = []
    for char, run in groupby(word):
        full, rest = divmod(len(list(run)), 9)
        parts.append(f"9{char}" * full)
        if rest:
            parts.append(f"{rest}{char}")
    return "".join(parts)