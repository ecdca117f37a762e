"""Binary searches over sorted values and answer spaces."""

from __future__ import annotations

import bisect
import math
from collections.abc import Sequence
from itertools import accumulate, islice


def maximum_count(nums: Sequence[int]) -> int:
    """Return the larger of the positive and negative counts in sorted ``nums``."""
    positives = len(nums) - bisect.bisect_right(nums, 0)
    negatives = bisect.bisect_left(nums, 0)
    return max(positives, negatives)


def _can_rob(nums: Sequence[int], k: int, capability: int) -> bool:
    robbed = 0
    skip = False
    for value in nums:
        if skip:
            skip = False
            continue
        if value <= capability:
            robbed += 1
            skip = True
            if robbed >= k:
                return True
    return False


def min_capability(nums: Sequence[int], k: int) -> int:
    """Return the smallest maximum value over ``k`` pairwise non-adjacent picks."""
    if k < 1:
        raise ValueError("k must be at least 1")
    candidates = sorted(set(nums))
    if not candidates or not _can_rob(nums, k, candidates[-1]):
        raise ValueError("cannot pick k non-adjacent elements")
    low, high = 0, len(candidates) - 1
    while low < high:
        mid = (low + high) // 2
        if _can_rob(nums, k, candidates[mid]):
            high = mid
        else:
            low = mid + 1
    return candidates[low]


def _repairs_in(ranks: Sequence[int], minutes: int) -> int:
    return sum(math.isqrt(minutes // rank) for rank in ranks)


def repair_cars(ranks: Sequence[int], cars: int) -> int:
    """Return the least time for mechanics of the given ranks to repair ``cars`` cars.

    A mechanic of rank r repairs n cars in r * n * n minutes.
    """
    if cars <= 0:
        return 0
    if not ranks:
        raise ValueError("ranks must not be empty")
    low, high = 0, min(ranks) * cars * cars
    while low < high:
        mid = (low + high) // 2
        if _repairs_in(ranks, mid) >= cars:
            high = mid
        else:
            low = mid + 1
    return low


def _clears(nums: Sequence[int], queries: Sequence[Sequence[int]], count: int) -> bool:
    delta = [0] * (len(nums) + 1)
    for start, end, value in islice(queries, count):
        delta[start] += value
        delta[end + 1] -= value
    return all(total >= need for total, need in zip(accumulate(delta), nums))


def min_zero_array(nums: Sequence[int], queries: Sequence[Sequence[int]]) -> int:
    """Return the fewest leading queries ``[l, r, val]`` that can bring ``nums`` to zero,
    or -1 if all of them are not enough."""
    if not _clears(nums, queries, len(queries)):
        return -1
    low, high = 0, len(queries)
    while low < high:
        mid = (low + high) // 2
        if _clears(nums, queries, mid):
            high = mid
        else:
            low = mid + 1
    return low