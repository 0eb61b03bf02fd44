"""Singly linked list node type and list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node; iterating yields the values from here on."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return list(head) if head is not None else []


def _spiral_cells(m: int, n: int) -> Iterator[tuple[int, int]]:
    top, bottom, left, right = 0, m - 1, 0, n - 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            yield top, col
        top += 1
        for row in range(top, bottom + 1):
            yield row, right
        right -= 1
        if top <= bottom:
            for col in range(right, left - 1, -1):
                yield bottom, col
            bottom -= 1
        if left <= right:
            for row in range(bottom, top - 1, -1):
                yield row, left
            left += 1


def spiral_matrix(m: int, n: int, head: Optional[ListNode]) -> list[list[int]]:
    """Lay the list values clockwise into an ``m`` x ``n`` grid, filling the rest with -1."""
    grid = [[-1] * n for _ in range(m)]
    cells = _spiral_cells(m, n)
    for value in to_values(head):
        cell = next(cells, None)
        if cell is None:
            raise ValueError("list has more values than the matrix has cells")
        row, col = cell
        grid[row][col] = value
    return grid


def modified_list(nums: Iterable[int], head: Optional[ListNode]) -> Optional[ListNode]:
    """Return a new list without the nodes whose value appears in ``nums``."""
    excluded = set(nums)
    return from_values(v for v in to_values(head) if v not in excluded)