"""Binary tree node type and a collection of tree algorithms."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

_MISSING = object()


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order list where ``None`` marks a missing child."""
    items = list(values)
    if not items or items[0] is None:
        return None
    root = TreeNode(items[0])
    queue = deque([root])
    rest = iter(items[1:])
    while queue:
        node = queue.popleft()
        value = next(rest, _MISSING)
        if value is _MISSING:
            break
        if value is not None:
            node.left = TreeNode(value)
            queue.append(node.left)
        value = next(rest, _MISSING)
        if value is _MISSING:
            break
        if value is not None:
            node.right = TreeNode(value)
            queue.append(node.right)
    return root


def to_level_order(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Serialise a tree into the level-order form accepted by :func:`build_tree`."""
    result: list[Optional[int]] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


def sum_numbers(root: Optional[TreeNode]) -> int:
    """Sum the numbers spelled by the digits on every root-to-leaf path."""
    total = 0
    stack = [(root, 0)] if root else []
    while stack:
        node, prefix = stack.pop()
        number = prefix * 10 + node.val
        if node.left is None and node.right is None:
            total += number
            continue
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, number))
    return total


def _postorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack = [(root, False)] if root else []
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node.val
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return node values in post-order (left, right, node)."""
    return list(_postorder(root))


def sum_of_left_leaves(root: Optional[TreeNode]) -> int:
    """Sum the values of leaves that are the left child of their parent."""
    total = 0
    stack = [(root, False)] if root else []
    while stack:
        node, is_left = stack.pop()
        if node.left is None and node.right is None:
            if is_left:
                total += node.val
            continue
        if node.left is not None:
            stack.append((node.left, True))
        if node.right is not None:
            stack.append((node.right, False))
    return total


def add_one_row(root: Optional[TreeNode], val: int, depth: int) -> Optional[TreeNode]:
    """Insert a row of nodes with value ``val`` at ``depth`` (root is depth 1)."""
    if depth < 1:
        raise ValueError("depth must be at least 1")
    if depth == 1:
        return TreeNode(val, left=root)
    level = [root] if root is not None else []
    for _ in range(depth - 2):
        level = [child for node in level for child in (node.left, node.right) if child]
    for node in level:
        node.left = TreeNode(val, left=node.left)
        node.right = TreeNode(val, right=node.right)
    return root


def smallest_from_leaf(root: Optional[TreeNode]) -> str:
    """Return the lexicographically smallest leaf-to-root string (0 -> 'a')."""

    def leaf_strings() -> Iterator[str]:
        stack = [(root, "")] if root else []
        while stack:
            node, suffix = stack.pop()
            text = chr(ord("a") + node.val) + suffix
            if node.left is None and node.right is None:
                yield text
                continue
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, text))

    return min(leaf_strings(), default="")


def bst_to_gst(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Replace each BST value with the sum of all values greater or equal to it."""
    running = 0
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.right
        node = stack.pop()
        running += node.val
        node.val = running
        node = node.left
    return root


def is_even_odd_tree(root: Optional[TreeNode]) -> bool:
    """Check the even-odd rule: even levels hold strictly increasing odd values,
    odd levels hold strictly decreasing even values."""
    level = [root] if root is not None else []
    depth = 0
    while level:
        values = [node.val for node in level]
        if depth % 2 == 0:
            parity_ok = all(v % 2 == 1 for v in values)
            order_ok = all(a < b for a, b in zip(values, values[1:]))
        else:
            parity_ok = all(v % 2 == 0 for v in values)
            order_ok = all(a > b for a, b in zip(values, values[1:]))
        if not (parity_ok and order_ok):
            return False
        level = [child for node in level for child in (node.left, node.right) if child]
        depth += 1
    return True