from collections import Counter

import pytest

from algokit.arrays import (
    apply_operations,
    check_sorted_rotated,
    count_days,
    divide_array,
    is_array_special,
    is_zero_array,
    len_longest_fib_subseq,
    lexicographically_smallest_array,
    longest_monotonic_subarray,
    longest_nice_subarray,
    max_absolute_sum,
    max_ascending_sum,
    maximum_sum,
    maximum_triplet_value,
    merge_arrays,
    min_flip_operations,
    min_operations_threshold,
    minimum_index,
    most_points,
    number_of_alternating_groups,
    pivot_array,
    put_marbles,
    query_results,
)


def test_max_absolute_sum_all_positive_is_total():
    nums = [3, 1, 4, 1, 5]
    assert max_absolute_sum(nums) == sum(nums)


def test_max_absolute_sum_symmetric_under_negation():
    nums = [2, -5, 1, -4, 3, -2, 2]
    assert max_absolute_sum(nums) == max_absolute_sum([-x for x in nums])


def test_max_absolute_sum_empty():
    assert max_absolute_sum([]) == 0


@pytest.mark.parametrize("shift", range(5))
def test_check_sorted_rotated_accepts_rotations(shift):
    base = [1, 2, 3, 4, 5]
    assert check_sorted_rotated(base[shift:] + base[:shift]) is True


def test_check_sorted_rotated_rejects():
    assert check_sorted_rotated([2, 1, 3, 4]) is False


def test_check_sorted_rotated_empty_raises():
    with pytest.raises(ValueError):
        check_sorted_rotated([])


def test_max_ascending_sum_increasing_and_decreasing():
    assert max_ascending_sum([1, 2, 5, 9]) == sum([1, 2, 5, 9])
    assert max_ascending_sum([9, 5, 2, 1]) == 9


def test_pivot_array_example():
    assert pivot_array([9, 12, 5, 10, 14, 3, 10], 10) == [9, 5, 3, 10, 10, 12, 14]


def test_pivot_array_is_ordered_permutation():
    nums = [4, -1, 7, 4, 0, 9, 4, 2]
    result = pivot_array(nums, 4)
    assert sorted(result) == sorted(nums)
    ranks = [(v > 4) - (v < 4) for v in result]
    assert ranks == sorted(ranks)


def test_divide_array():
    assert divide_array([3, 2, 3, 2, 2, 2]) is True
    assert divide_array([1, 2, 3, 4]) is False


def test_maximum_sum_example():
    assert maximum_sum([18, 43, 36, 13, 7]) == 54


def test_maximum_sum_without_pair():
    assert maximum_sum([10, 12, 19, 14]) == -1


def test_maximum_sum_negative_raises():
    with pytest.raises(ValueError):
        maximum_sum([-5, 5])


def test_longest_nice_subarray_disjoint_bits():
    nums = [1, 2, 4, 8, 16]
    assert longest_nice_subarray(nums) == len(nums)


def test_longest_nice_subarray_all_equal():
    assert longest_nice_subarray([6, 6, 6, 6]) == 1


def test_apply_operations_example():
    assert apply_operations([1, 2, 2, 1, 1, 0]) == [1, 4, 2, 0, 0, 0]


def test_apply_operations_preserves_sum_and_length():
    nums = [2, 2, 2, 0, 3, 3, 1]
    result = apply_operations(nums)
    assert len(result) == len(nums)
    assert sum(result) == sum(nums)
    zeros_start = len([v for v in result if v != 0])
    assert all(v == 0 for v in result[zeros_start:])


def test_minimum_index_example():
    assert minimum_index([1, 2, 2, 2]) == 2


def test_minimum_index_without_dominant():
    assert minimum_index([1, 2, 3]) == -1


def test_minimum_index_result_splits_validly():
    nums = [2, 1, 3, 1, 1, 1, 7, 1, 2, 1]
    index = minimum_index(nums)
    left, right = Counter(nums[: index + 1]), Counter(nums[index + 1 :])
    assert left[1] * 2 > index + 1
    assert right[1] * 2 > len(nums) - index - 1


def test_maximum_triplet_value_increasing_is_zero():
    assert maximum_triplet_value([1, 2, 3, 4]) == 0


def test_maximum_triplet_value_short_raises():
    with pytest.raises(ValueError):
        maximum_triplet_value([1])


def test_lexicographically_smallest_array_large_limit_sorts():
    nums = [5, 1, 9, 3, 7]
    assert lexicographically_smallest_array(nums, 100) == sorted(nums)


def test_lexicographically_smallest_array_zero_limit_keeps():
    nums = [5, 1, 9, 3, 7]
    assert lexicographically_smallest_array(nums, 0) == nums


def test_lexicographically_smallest_array_is_permutation():
    nums = [1, 60, 34, 84, 62, 56, 39, 76, 49, 38]
    result = lexicographically_smallest_array(nums, 4)
    assert sorted(result) == sorted(nums)
    assert result <= nums


def test_min_operations_threshold_already_met():
    assert min_operations_threshold([5, 6, 7], 5) == 0


def test_min_operations_threshold_impossible_raises():
    with pytest.raises(ValueError):
        min_operations_threshold([1], 10)


def test_longest_monotonic_subarray():
    assert longest_monotonic_subarray([1, 2, 3, 4]) == 4
    assert longest_monotonic_subarray([3, 3, 3]) == 1


def test_longest_monotonic_subarray_empty_raises():
    with pytest.raises(ValueError):
        longest_monotonic_subarray([])


def test_is_array_special():
    assert is_array_special([2, 1, 4]) is True
    assert is_array_special([4, 3, 1, 6]) is False


def test_query_results_distinct_colors():
    queries = [[i, i + 10] for i in range(5)]
    assert query_results(5, queries) == list(range(1, 6))


def test_query_results_repaint_same_ball():
    queries = [[0, 1], [0, 2], [0, 3]]
    assert query_results(1, queries) == [1, 1, 1]


def test_count_days_disjoint_meetings():
    meetings = [[5, 7], [1, 3], [9, 10]]
    covered = sum(end - start + 1 for start, end in meetings)
    assert count_days(20, meetings) == 20 - covered


def test_count_days_duplicate_meeting_counts_once():
    assert count_days(10, [[2, 4], [2, 4]]) == count_days(10, [[2, 4]])


def test_min_flip_operations():
    assert min_flip_operations([1, 1, 1]) == 0
    assert min_flip_operations([0, 1, 1, 1, 0, 0]) == 3
    assert min_flip_operations([0, 1, 1, 1]) == -1


def test_min_flip_operations_short_raises():
    with pytest.raises(ValueError):
        min_flip_operations([0])


def test_alternating_groups_fully_alternating():
    colors = [0, 1, 0, 1, 0, 1]
    assert number_of_alternating_groups(colors, 3) == len(colors)


def test_alternating_groups_constant():
    assert number_of_alternating_groups([1, 1, 1, 1], 3) == 0


def test_is_zero_array():
    assert is_zero_array([1, 1, 1], [[0, 2]]) is True
    assert is_zero_array([1, 2, 1], [[0, 2]]) is False


def test_len_longest_fib_subseq():
    assert len_longest_fib_subseq([1, 2, 3, 4, 5, 6, 7, 8]) == 5
    fibs = [1, 2, 3, 5, 8, 13, 21]
    assert len_longest_fib_subseq(fibs) == len(fibs)
    assert len_longest_fib_subseq([1, 10, 100]) == 0


def test_merge_arrays_sums_and_sorts():
    assert merge_arrays([[4, 5], [1, 2]], [[1, 3], [2, 6]]) == [[1, 5], [2, 6], [4, 5]]


def test_most_points_example():
    assert most_points([[3, 2], [4, 3], [4, 4], [2, 5]]) == 5


def test_most_points_without_cooldown_is_sum():
    questions = [[3, 0], [7, 0], [2, 0]]
    assert most_points(questions) == sum(p for p, _ in questions)


def test_put_marbles_example():
    assert put_marbles([1, 3, 5, 1], 2) == 4


def test_put_marbles_trivial_splits():
    assert put_marbles([1, 3, 5], 3) == 0
    assert put_marbles([1, 3, 5], 1) == 0


def test_put_marbles_too_many_bags_raises():
    with pytest.raises(ValueError):
        put_marbles([1, 2], 3)