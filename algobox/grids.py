"""Algorithms over two-dimensional grids and matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

Grid = Sequence[Sequence[int]]
CharGrid = Sequence[Sequence[str]]

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dr, dc in _STEPS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _cells(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for row in range(rows):
        for col in range(cols):
            yield row, col


def exist(board: CharGrid, word: str) -> bool:
    """Whether ``word`` can be traced through orthogonally adjacent cells,
    using each cell at most once."""
    rows = len(board)
    cols = len(board[0]) if rows else 0
    used: set[tuple[int, int]] = set()

    def trace(row: int, col: int, index: int) -> bool:
        if index == len(word):
            return True
        if (row, col) in used or board[row][col] != word[index]:
            return False
        if index + 1 == len(word):
            return True
        used.add((row, col))
        found = any(
            trace(r, c, index + 1) for r, c in _neighbours(row, col, rows, cols)
        )
        used.discard((row, col))
        return found

    return any(trace(row, col, 0) for row, col in _cells(rows, cols))


def _largest_in_histogram(heights: Sequence[int]) -> int:
    best = 0
    stack: list[int] = []
    for index, height in enumerate([*heights, 0]):
        while stack and heights[stack[-1]] >= height:
            top = heights[stack.pop()]
            left = stack[-1] + 1 if stack else 0
            best = max(best, top * (index - left))
        if index < len(heights):
            stack.append(index)
    return best


def maximal_rectangle(matrix: CharGrid) -> int:
    """Area of the largest rectangle holding only ``'1'`` cells."""
    cols = len(matrix[0]) if matrix else 0
    heights = [0] * cols
    best = 0
    for row in matrix:
        heights = [h + 1 if cell == "1" else 0 for h, cell in zip(heights, row)]
        best = max(best, _largest_in_histogram(heights))
    return best


def num_islands(grid: CharGrid) -> int:
    """Count the 4-connected groups of ``'1'`` cells."""
    rows = len(grid)
    seen: set[tuple[int, int]] = set()
    islands = 0
    for start in ((r, c) for r in range(rows) for c in range(len(grid[r]))):
        if start in seen or grid[start[0]][start[1]] != "1":
            continue
        islands += 1
        seen.add(start)
        queue = deque([start])
        while queue:
            row, col = queue.popleft()
            for dr, dc in _STEPS:
                r, c = row + dr, col + dc
                if (
                    0 <= r < rows
                    and 0 <= c < len(grid[r])
                    and (r, c) not in seen
                    and grid[r][c] == "1"
                ):
                    seen.add((r, c))
                    queue.append((r, c))
    return islands


def longest_increasing_path(matrix: Grid) -> int:
    """Length of the longest strictly increasing path through adjacent cells."""
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    best: dict[tuple[int, int], int] = {}
    order = sorted(_cells(rows, cols), key=lambda cell: matrix[cell[0]][cell[1]], reverse=True)
    for row, col in order:
        value = matrix[row][col]
        best[row, col] = 1 + max(
            (
                best[r, c]
                for r, c in _neighbours(row, col, rows, cols)
                if matrix[r][c] > value
            ),
            default=0,
        )
    return max(best.values(), default=0)


def island_perimeter(grid: Grid) -> int:
    """Perimeter of the land cells (non-zero) in ``grid``."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    return sum(
        4 - sum(1 for r, c in _neighbours(row, col, rows, cols) if grid[r][c])
        for row, col in _cells(rows, cols)
        if grid[row][col]
    )


def count_squares(grid: Grid) -> int:
    """Number of square submatrices made entirely of ones."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    below = [0] * (cols + 1)
    total = 0
    for row in reversed(range(rows)):
        current = [0] * (cols + 1)
        for col in reversed(range(cols)):
            if grid[row][col]:
                current[col] = 1 + min(current[col + 1], below[col], below[col + 1])
                total += current[col]
        below = current
    return total


def max_matrix_sum(matrix: Grid) -> int:
    """Largest sum reachable by repeatedly negating pairs of adjacent cells."""
    values = [value for row in matrix for value in row]
    total = sum(abs(v) for v in values)
    negatives = sum(1 for v in values if v < 0)
    if negatives % 2:
        total -= 2 * min(abs(v) for v in values)
    return total


def find_farmland(land: Grid) -> list[list[int]]:
    """Corners ``[r1, c1, r2, c2]`` of each rectangular farmland group, in scan order."""
    rows = len(land)
    cols = len(land[0]) if rows else 0
    seen: set[tuple[int, int]] = set()
    groups: list[list[int]] = []
    for start in _cells(rows, cols):
        if start in seen or land[start[0]][start[1]] != 1:
            continue
        seen.add(start)
        queue = deque([start])
        bottom, right = start
        while queue:
            row, col = queue.popleft()
            for r, c in _neighbours(row, col, rows, cols):
                if land[r][c] == 1 and (r, c) not in seen:
                    seen.add((r, c))
                    queue.append((r, c))
                    bottom, right = max(bottom, r), max(right, c)
        groups.append([start[0], start[1], bottom, right])
    return groups


def construct_2d_array(original: Sequence[int], m: int, n: int) -> list[list[int]]:
    """Reshape ``original`` into ``m`` rows of ``n``; empty if the sizes disagree."""
    if m * n != len(original) or not original:
        return []
    return [list(original[row * n:(row + 1) * n]) for row in range(m)]