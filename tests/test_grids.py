import copy

import pytest

from algobox.grids import (
    construct_2d_array,
    count_squares,
    exist,
    find_farmland,
    island_perimeter,
    longest_increasing_path,
    max_matrix_sum,
    maximal_rectangle,
    num_islands,
)

BOARD = [
    ["A", "B", "C", "E"],
    ["S", "F", "C", "S"],
    ["A", "D", "E", "E"],
]


@pytest.mark.parametrize("word", ["ABCCED", "SEE", "ASADFB"])
def test_exist_finds_traced_words_and_their_reverse(word):
    assert exist(BOARD, word)
    assert exist(BOARD, word[::-1])


def test_exist_rejects_reused_cell():
    assert not exist(BOARD, "ABCB")
    assert not exist([["a"]], "aa")


def test_exist_rejects_missing_letter():
    assert not exist(BOARD, "XYZ")


def test_exist_leaves_board_untouched():
    board = copy.deepcopy(BOARD)
    exist(board, "ABCCED")
    assert board == BOARD


def test_exist_reverse_symmetry():
    for word in ["ABF", "CCE", "SFDA", "EES", "ABCE"]:
        assert exist(BOARD, word) == exist(BOARD, word[::-1])


def test_maximal_rectangle_worked_example():
    matrix = [
        ["1", "0", "1", "0", "0"],
        ["1", "0", "1", "1", "1"],
        ["1", "1", "1", "1", "1"],
        ["1", "0", "0", "1", "0"],
    ]
    assert maximal_rectangle(matrix) == 6


@pytest.mark.parametrize("rows,cols", [(1, 1), (2, 3), (4, 5)])
def test_maximal_rectangle_full_and_empty(rows, cols):
    assert maximal_rectangle([["1"] * cols for _ in range(rows)]) == rows * cols
    assert maximal_rectangle([["0"] * cols for _ in range(rows)]) == 0


def test_maximal_rectangle_transpose_invariant():
    matrix = [
        ["1", "1", "0", "1"],
        ["1", "1", "1", "1"],
        ["0", "1", "1", "1"],
    ]
    transposed = [list(col) for col in zip(*matrix)]
    assert maximal_rectangle(matrix) == maximal_rectangle(transposed)


def test_num_islands_checkerboard_counts_each_one():
    grid = [["1" if (r + c) % 2 == 0 else "0" for c in range(5)] for r in range(4)]
    ones = sum(row.count("1") for row in grid)
    assert num_islands(grid) == ones


def test_num_islands_single_block_and_no_land():
    assert num_islands([["1"] * 3 for _ in range(3)]) == 1
    assert num_islands([["0"] * 3 for _ in range(3)]) == 0


def test_num_islands_does_not_mutate():
    grid = [["1", "1", "0"], ["0", "0", "1"]]
    before = copy.deepcopy(grid)
    num_islands(grid)
    assert grid == before


def test_longest_increasing_path_worked_example():
    assert longest_increasing_path([[9, 9, 4], [6, 6, 8], [2, 1, 1]]) == 4


def test_longest_increasing_path_strict_row():
    row = list(range(1, 8))
    assert longest_increasing_path([row]) == len(row)


def test_longest_increasing_path_constant_matrix():
    assert longest_increasing_path([[5, 5], [5, 5]]) == 1


def test_longest_increasing_path_negation_invariant():
    matrix = [[3, 4, 5], [3, 2, 6], [2, 2, 1]]
    negated = [[-v for v in row] for row in matrix]
    assert longest_increasing_path(matrix) == longest_increasing_path(negated)


def test_island_perimeter_single_cell():
    assert island_perimeter([[0, 0], [0, 1]]) == 4


@pytest.mark.parametrize("rows,cols", [(1, 4), (3, 3), (2, 5)])
def test_island_perimeter_full_rectangle(rows, cols):
    assert island_perimeter([[1] * cols for _ in range(rows)]) == 2 * (rows + cols)


def test_island_perimeter_empty_water():
    assert island_perimeter([[0, 0, 0]]) == 0


def test_count_squares_worked_example():
    assert count_squares([[0, 1, 1, 1], [1, 1, 1, 1], [0, 1, 1, 1]]) == 15


@pytest.mark.parametrize("size", [1, 2, 4])
def test_count_squares_full_square(size):
    grid = [[1] * size for _ in range(size)]
    assert count_squares(grid) == sum(k * k for k in range(1, size + 1))


def test_count_squares_isolated_ones_counts_ones():
    grid = [[1, 0, 1], [0, 1, 0]]
    assert count_squares(grid) == sum(map(sum, grid))


def test_max_matrix_sum_nonnegative_is_plain_sum():
    matrix = [[1, 2], [3, 4]]
    assert max_matrix_sum(matrix) == sum(map(sum, matrix))


def test_max_matrix_sum_even_negatives_is_abs_sum():
    matrix = [[-1, 2], [3, -4]]
    assert max_matrix_sum(matrix) == sum(abs(v) for row in matrix for v in row)


def test_max_matrix_sum_odd_negatives_loses_smallest_twice():
    matrix = [[-1, 2], [3, 4]]
    abs_sum = sum(abs(v) for row in matrix for v in row)
    assert max_matrix_sum(matrix) == abs_sum - 2 * 1


def test_find_farmland_worked_example():
    assert find_farmland([[1, 0, 0], [0, 1, 1], [0, 1, 1]]) == [[0, 0, 0, 0], [1, 1, 2, 2]]


def test_find_farmland_rectangles_cover_all_land():
    land = [
        [1, 1, 0, 0, 1],
        [1, 1, 0, 0, 1],
        [0, 0, 0, 0, 0],
        [1, 0, 1, 1, 1],
    ]
    covered = set()
    for r1, c1, r2, c2 in find_farmland(land):
        for r in range(r1, r2 + 1):
            for c in range(c1, c2 + 1):
                assert land[r][c] == 1
                covered.add((r, c))
    land_cells = {(r, c) for r, row in enumerate(land) for c, v in enumerate(row) if v}
    assert covered == land_cells


def test_find_farmland_no_land():
    assert find_farmland([[0, 0], [0, 0]]) == []


@pytest.mark.parametrize("m,n", [(1, 6), (2, 3), (3, 2), (6, 1)])
def test_construct_2d_array_round_trip(m, n):
    original = list(range(10, 16))
    grid = construct_2d_array(original, m, n)
    assert len(grid) == m
    assert all(len(row) == n for row in grid)
    assert [v for row in grid for v in row] == original


def test_construct_2d_array_size_mismatch():
    assert construct_2d_array([1, 2, 3], 2, 2) == []