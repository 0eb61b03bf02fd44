import pytest

from algobox.search import (
    max_distance,
    max_profit_assignment,
    max_sum_after_partitioning,
    minimized_maximum,
    minimum_mountain_removals,
    minimum_size,
    most_beautiful_items,
    prime_sub_operation,
)


def test_max_profit_assignment_example():
    assert max_profit_assignment([2, 4, 6, 8, 10], [10, 20, 30, 40, 50], [4, 5, 6, 7]) == 100


def test_max_profit_assignment_nobody_qualifies():
    assert max_profit_assignment([85, 47, 57], [24, 66, 99], [40, 25, 25]) == 0


def test_max_profit_assignment_single_job():
    workers = [5, 9, 100]
    assert max_profit_assignment([5], [7], workers) == 7 * len(workers)


def test_max_profit_assignment_monotone_in_ability():
    difficulty, profit = [3, 1, 8, 5], [4, 9, 2, 6]
    earnings = [max_profit_assignment(difficulty, profit, [a]) for a in range(10)]
    assert earnings == sorted(earnings)


def test_max_sum_after_partitioning_example():
    assert max_sum_after_partitioning([1, 15, 7, 9, 2, 5, 10], 3) == 84


def test_max_sum_after_partitioning_single_parts():
    arr = [4, 1, 7, 3]
    assert max_sum_after_partitioning(arr, 1) == sum(arr)


def test_max_sum_after_partitioning_one_part():
    arr = [4, 1, 7, 3]
    assert max_sum_after_partitioning(arr, len(arr)) == max(arr) * len(arr)


def test_max_distance_example():
    assert max_distance([1, 2, 3, 4, 7], 3) == 3


def test_max_distance_two_balls():
    positions = [5, 4, 3, 2, 1, 1000000000]
    assert max_distance(positions, 2) == max(positions) - min(positions)


def test_max_distance_empty():
    with pytest.raises(ValueError):
        max_distance([], 2)


def test_minimum_mountain_removals_already_mountain():
    assert minimum_mountain_removals([1, 2, 3, 2, 1]) == minimum_mountain_removals([1, 3, 1])


def test_minimum_mountain_removals_extra_element():
    base = [1, 2, 3, 2, 1]
    assert minimum_mountain_removals([9, *base]) == len([9])


def test_minimum_mountain_removals_impossible():
    with pytest.raises(ValueError):
        minimum_mountain_removals([1, 2, 3])


def _splits(nums, size):
    return sum((n - 1) // size for n in nums)


@pytest.mark.parametrize("nums,ops", [([9], 2), ([2, 4, 8, 2], 4), ([7, 17], 2), ([1], 0)])
def test_minimum_size_is_tight(nums, ops):
    size = minimum_size(nums, ops)
    assert _splits(nums, size) <= ops
    assert size == 1 or _splits(nums, size - 1) > ops


def test_minimum_size_without_operations():
    nums = [3, 11, 6]
    assert minimum_size(nums, 0) == max(nums)


def test_minimum_size_negative_operations():
    with pytest.raises(ValueError):
        minimum_size([3], -1)


def _stores(quantities, cap):
    return sum(-(-q // cap) for q in quantities)


@pytest.mark.parametrize("n,quantities", [(6, [11, 6]), (7, [15, 10, 10]), (1, [100000])])
def test_minimized_maximum_is_tight(n, quantities):
    cap = minimized_maximum(n, quantities)
    assert _stores(quantities, cap) <= n
    assert cap == 1 or _stores(quantities, cap - 1) > n


def test_minimized_maximum_one_store_each():
    quantities = [4, 9, 2]
    assert minimized_maximum(len(quantities), quantities) == max(quantities)


def test_minimized_maximum_too_few_stores():
    with pytest.raises(ValueError):
        minimized_maximum(1, [1, 1])


def test_most_beautiful_items_bounds():
    items = [[1, 2], [3, 2], [2, 4], [5, 6], [3, 5]]
    result = most_beautiful_items(items, [0, 1, 2, 3, 4, 5, 6, 1000])
    assert result[0] == 0
    assert result[1] == 2
    assert result[-1] == max(beauty for _, beauty in items)
    assert result == sorted(result)


def test_most_beautiful_items_same_price():
    assert most_beautiful_items([[1, 2], [1, 3], [1, 4]], [1]) == [4]


@pytest.mark.parametrize(
    "nums,expected",
    [([4, 9, 6, 10], True), ([6, 8, 11, 12], True), ([5, 8, 3], False), ([1, 2, 3], True)],
)
def test_prime_sub_operation(nums, expected):
    assert prime_sub_operation(nums) is expected


def test_prime_sub_operation_does_not_mutate():
    nums = [4, 9, 6, 10]
    prime_sub_operation(nums)
    assert nums == [4, 9, 6, 10]