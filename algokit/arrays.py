"""Array algorithms: scans, sliding windows, heaps and prefix differences."""

from __future__ import annotations

import heapq
import math
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, chain


def max_absolute_sum(nums: Sequence[int]) -> int:
    """Return the largest absolute sum of any (possibly empty) subarray."""
    prefixes = list(accumulate(nums, initial=0))
    return max(prefixes) - min(prefixes)


def check_sorted_rotated(nums: Sequence[int]) -> bool:
    """Return whether ``nums`` is a non-decreasing sequence rotated by some amount."""
    if not nums:
        raise ValueError("nums must not be empty")
    following = chain(nums[1:], nums[:1])
    drops = sum(1 for a, b in zip(nums, following) if a > b)
    return drops <= 1


def max_ascending_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of a strictly increasing run of neighbours."""
    if not nums:
        raise ValueError("nums must not be empty")
    current = best = nums[0]
    for previous, value in zip(nums, nums[1:]):
        current = current + value if previous < value else value
        best = max(best, current)
    return best


def pivot_array(nums: Sequence[int], pivot: int) -> list[int]:
    """Return ``nums`` with values below, equal to and above ``pivot`` in that order,
    each group keeping its original order."""
    less = [value for value in nums if value < pivot]
    equal = [value for value in nums if value == pivot]
    greater = [value for value in nums if value > pivot]
    return less + equal + greater


def divide_array(nums: Sequence[int]) -> bool:
    """Return whether ``nums`` splits into pairs of equal values."""
    return all(count % 2 == 0 for count in Counter(nums).values())


def _digit_sum(value: int) -> int:
    return sum(int(digit) for digit in str(value))


def maximum_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of two elements with equal digit sums, or -1."""
    if any(value < 0 for value in nums):
        raise ValueError("nums must not hold negative values")
    groups: dict[int, list[int]] = {}
    for value in nums:
        groups.setdefault(_digit_sum(value), []).append(value)
    best = -1
    for members in groups.values():
        if len(members) >= 2:
            best = max(best, sum(heapq.nlargest(2, members)))
    return best


def longest_nice_subarray(nums: Sequence[int]) -> int:
    """Return the longest subarray whose elements pairwise share no set bit."""
    used = 0
    left = 0
    best = 0
    for right, value in enumerate(nums):
        while used & value:
            used ^= nums[left]
            left += 1
        used |= value
        best = max(best, right - left + 1)
    return best


def apply_operations(nums: Sequence[int]) -> list[int]:
    """Double each element equal to its right neighbour (zeroing the neighbour),
    left to right, then move all zeros to the end."""
    values = list(nums)
    for i in range(len(values) - 1):
        if values[i] == values[i + 1]:
            values[i] *= 2
            values[i + 1] = 0
    nonzero = [value for value in values if value != 0]
    return nonzero + [0] * (len(values) - len(nonzero))


def minimum_index(nums: Sequence[int]) -> int:
    """Return the first split index where both sides share the same dominant element,
    or -1 if there is none."""
    if not nums:
        return -1
    dominant, total = Counter(nums).most_common(1)[0]
    n = len(nums)
    seen = 0
    for index, value in enumerate(nums):
        if value == dominant:
            seen += 1
        if seen * 2 > index + 1 and (total - seen) * 2 > n - index - 1:
            return index
    return -1


def maximum_triplet_value(nums: Sequence[int]) -> int:
    """Return the largest ``(nums[i] - nums[j]) * nums[k]`` over i < j < k, or 0."""
    if len(nums) < 2:
        raise ValueError("nums must hold at least two values")
    best = 0
    max_diff = nums[0] - nums[1]
    max_val = max(nums[0], nums[1])
    for value in nums[2:]:
        best = max(best, max_diff * value)
        max_diff = max(max_diff, max_val - value)
        max_val = max(max_val, value)
    return best


def lexicographically_smallest_array(nums: Sequence[int], limit: int) -> list[int]:
    """Return the smallest array reachable by swapping elements differing by at most ``limit``."""
    result = list(nums)
    order = sorted(range(len(nums)), key=nums.__getitem__)
    group: list[int] = []

    def flush() -> None:
        for position, index in zip(sorted(group), group):
            result[position] = nums[index]
        group.clear()

    for index in order:
        if group and nums[index] - nums[group[-1]] > limit:
            flush()
        group.append(index)
    flush()
    return result


def min_operations_threshold(nums: Sequence[int], k: int) -> int:
    """Count merges ``min * 2 + max`` of the two smallest values until all reach ``k``."""
    heap = list(nums)
    heapq.heapify(heap)
    operations = 0
    while heap and heap[0] < k:
        if len(heap) < 2:
            raise ValueError("values cannot all reach k")
        smaller = heapq.heappop(heap)
        larger = heapq.heappop(heap)
        heapq.heappush(heap, smaller * 2 + larger)
        operations += 1
    return operations


def _longest_run(nums: Sequence[int], ascending: bool) -> int:
    best = current = 1
    for a, b in zip(nums, nums[1:]):
        if (a < b) if ascending else (a > b):
            current += 1
            best = max(best, current)
        else:
            current = 1
    return best


def longest_monotonic_subarray(nums: Sequence[int]) -> int:
    """Return the longest strictly increasing or strictly decreasing run."""
    if not nums:
        raise ValueError("nums must not be empty")
    return max(_longest_run(nums, True), _longest_run(nums, False))


def is_array_special(nums: Sequence[int]) -> bool:
    """Return whether every pair of neighbours differs in parity."""
    return all(a % 2 != b % 2 for a, b in zip(nums, nums[1:]))


def query_results(limit: int, queries: Sequence[Sequence[int]]) -> list[int]:
    """After each ``[ball, color]`` painting, report how many distinct colours are in use."""
    ball_color: dict[int, int] = {}
    color_count: Counter[int] = Counter()
    answers = []
    for ball, color in queries:
        previous = ball_color.get(ball)
        if previous is not None:
            color_count[previous] -= 1
            if color_count[previous] == 0:
                del color_count[previous]
        ball_color[ball] = color
        color_count[color] += 1
        answers.append(len(color_count))
    return answers


def count_days(days: int, meetings: Iterable[Sequence[int]]) -> int:
    """Count the days in ``1..days`` not covered by any ``[start, end]`` meeting."""
    free = days
    covered_until = -math.inf
    for start, end in sorted(meetings, key=lambda meeting: meeting[0]):
        if covered_until >= end:
            continue
        if covered_until >= start:
            free -= end - covered_until
        else:
            free -= end - start + 1
        covered_until = end
    return free


def min_flip_operations(nums: Sequence[int]) -> int:
    """Count flips of three consecutive bits turning every bit to 1, or -1 if impossible."""
    if len(nums) < 2:
        raise ValueError("nums must hold at least two values")
    bits = list(nums)
    operations = 0
    for i in range(len(bits) - 2):
        if bits[i] == 0:
            for j in range(i, i + 3):
                bits[j] ^= 1
            operations += 1
    if bits[-1] == 0 or bits[-2] == 0:
        return -1
    return operations


def number_of_alternating_groups(colors: Sequence[int], k: int) -> int:
    """Count the circular windows of ``k`` tiles whose colours alternate."""
    run = 0
    previous: int | None = None
    groups = 0
    for color in chain(colors, colors[: k - 1]):
        if color != previous:
            run = min(run + 1, k)
            if run == k:
                groups += 1
        else:
            run = 1
        previous = color
    return groups


def is_zero_array(nums: Sequence[int], queries: Sequence[Sequence[int]]) -> bool:
    """Return whether decrementing each ``[l, r]`` range once can bring ``nums`` to zero."""
    delta = [0] * (len(nums) + 1)
    for start, end in queries:
        delta[start] += 1
        delta[end + 1] -= 1
    return all(total >= need for total, need in zip(accumulate(delta), nums))


def len_longest_fib_subseq(arr: Sequence[int]) -> int:
    """Return the longest Fibonacci-like subsequence length (at least 3), or 0."""
    present = set(arr)
    best = 0
    for i, first in enumerate(arr):
        for second in arr[i + 1 :]:
            x, y, length = first, second, 2
            while x + y in present:
                x, y = y, x + y
                length += 1
            if length >= 3:
                best = max(best, length)
    return best


def merge_arrays(
    nums1: Iterable[Sequence[int]], nums2: Iterable[Sequence[int]]
) -> list[list[int]]:
    """Merge ``[id, value]`` lists, summing values per id, sorted by id."""
    totals: Counter[int] = Counter()
    for key, value in chain(nums1, nums2):
        totals[key] += value
    return [[key, totals[key]] for key in sorted(totals)]


def most_points(questions: Sequence[Sequence[int]]) -> int:
    """Return the most points from ``[points, brainpower]`` questions, where solving
    one skips the next ``brainpower`` questions."""
    n = len(questions)
    best = [0] * (n + 1)
    for index in range(n - 1, -1, -1):
        points, brainpower = questions[index]
        following = index + brainpower + 1
        take = points + (best[following] if following <= n else 0)
        best[index] = max(take, best[index + 1])
    return best[0]


def put_marbles(weights: Sequence[int], k: int) -> int:
    """Return the difference between the largest and smallest total scores when
    splitting ``weights`` into ``k`` contiguous bags."""
    if not 1 <= k <= len(weights):
        raise ValueError("k must be between 1 and the number of weights")
    if k == len(weights):
        return 0
    pair_sums = sorted(a + b for a, b in zip(weights, weights[1:]))
    cuts = k - 1
    if cuts == 0:
        return 0
    return sum(pair_sums[-cuts:]) - sum(pair_sums[:cuts])